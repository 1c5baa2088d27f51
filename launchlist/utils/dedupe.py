"""Order-preserving deduplication of launch lists."""

from operator import attrgetter
from typing import Callable, Hashable, Iterable, List, TypeVar

T = TypeVar("T")

by_name = attrgetter("name")


def dedupe(items: Iterable[T], key: Callable[[T], Hashable] = by_name) -> List[T]:
    """Keep the first item seen for each key, in original order.

    Launches are keyed by mission name, so distinct launches sharing a
    name collapse into the earliest one.
    """
    seen = set()
    unique: List[T] = []
    for item in items:
        k = key(item)
        if k not in seen:
            seen.add(k)
            unique.append(item)
    return unique
