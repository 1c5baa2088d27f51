"""Shared state for the launch list."""

import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Set, Tuple

from launchlist.core.models import Launch

logger = logging.getLogger("LaunchList.ListState")


@dataclass(frozen=True)
class ListSnapshot:
    """Immutable view of the list handed to listeners."""

    items: Tuple[Launch, ...]
    loading: bool
    has_more: bool
    query: str
    expanded: FrozenSet[int]
    page: int

    def can_load_more(self) -> bool:
        return self.has_more and not self.loading

    def is_expanded(self, date_unix: int) -> bool:
        return date_unix in self.expanded


class LaunchListState:
    """Mutable state shared by the pagination and search managers.

    All mutation happens on one event loop. ``generation`` changes every
    time the list is reset or a search starts; a fetch that finishes
    under an older generation must not touch the state.
    """

    def __init__(self):
        self.page = 1
        self.has_more = True
        self.loading = False
        self.query = ""
        self.items: Tuple[Launch, ...] = ()
        self.expanded: Set[int] = set()
        self.generation = 0
        self._listeners: List[Callable[[ListSnapshot], None]] = []

    def can_load_more(self) -> bool:
        return self.has_more and not self.loading

    def begin_generation(self) -> int:
        self.generation += 1
        return self.generation

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def toggle_expanded(self, date_unix: int) -> None:
        if date_unix in self.expanded:
            self.expanded.discard(date_unix)
        else:
            self.expanded.add(date_unix)
        self.notify()

    def add_listener(self, listener: Callable[[ListSnapshot], None]) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[ListSnapshot], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def snapshot(self) -> ListSnapshot:
        return ListSnapshot(
            items=self.items,
            loading=self.loading,
            has_more=self.has_more,
            query=self.query,
            expanded=frozenset(self.expanded),
            page=self.page,
        )

    def notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
