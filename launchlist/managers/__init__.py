"""Manager classes for list state."""

from .list_controller import ListController
from .list_state import LaunchListState, ListSnapshot
from .pagination_manager import PaginationManager
from .search_manager import SearchManager
from .viewport_sentinel import ViewportSentinel

__all__ = [
    "LaunchListState",
    "ListController",
    "ListSnapshot",
    "PaginationManager",
    "SearchManager",
    "ViewportSentinel",
]
