"""Protocol definitions for dependency injection."""

from typing import Any, Callable, List, Protocol

from .models import Launch


class LaunchSourcePort(Protocol):
    async def fetch_page(self, offset: int, limit: int) -> List[Launch]: ...

    async def fetch_all(self, limit: int) -> List[Launch]: ...

    async def aclose(self) -> None: ...


class ObservationPort(Protocol):
    def disconnect(self) -> None: ...


# observe(anchor, on_intersection) -> observation
ObserveFn = Callable[[Any, Callable[[bool], None]], ObservationPort]
