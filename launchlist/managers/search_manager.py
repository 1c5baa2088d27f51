"""Search manager - Replaces the paginated list with name matches."""

import logging
from typing import List

from launchlist.core.errors import LaunchSourceError
from launchlist.core.models import Launch
from launchlist.core.protocols import LaunchSourcePort
from launchlist.managers.list_state import LaunchListState
from launchlist.managers.pagination_manager import PaginationManager
from launchlist.utils.dedupe import dedupe

logger = logging.getLogger("LaunchList.SearchManager")


def filter_by_name(launches: List[Launch], query: str) -> List[Launch]:
    needle = query.lower()
    return [launch for launch in launches if needle in launch.name.lower()]


class SearchManager:
    """Manages search state and operations.

    A non-empty query fetches one bulk snapshot of the collection and
    filters it locally; search results are never paginated. An empty
    query hands the list back to the pagination manager.

    Args:
        state: Shared list state
        source: Remote launch collection
        pagination: Pagination manager restored when the query is cleared
        search_limit: Size of the bulk snapshot searched
    """

    def __init__(
        self,
        state: LaunchListState,
        source: LaunchSourcePort,
        pagination: PaginationManager,
        search_limit: int = 1000,
    ):
        self.state = state
        self.source = source
        self.pagination = pagination
        self.search_limit = search_limit

    @property
    def query(self) -> str:
        return self.state.query

    def is_active(self) -> bool:
        return bool(self.state.query)

    async def run_search(self, query: str) -> bool:
        """Run a search, or restore browsing when ``query`` is empty.

        Returns:
            bool: True if the list was replaced
        """
        query = query.strip()
        state = self.state
        state.query = query

        if not query:
            logger.info("Search cleared, restoring paginated list")
            self.pagination.reset()
            return await self.pagination.load_next_page()

        generation = state.begin_generation()
        state.loading = True
        state.notify()

        logger.info(f"Searching for: '{query}'")

        replaced = False
        try:
            launches = await self.source.fetch_all(limit=self.search_limit)
            if state.is_current(generation):
                matches = dedupe(filter_by_name(launches, query))
                logger.info(f"Search results: {len(matches)} launches for '{query}'")
                state.items = tuple(matches)
                state.has_more = False
                state.expanded.clear()
                replaced = True
            else:
                logger.debug(f"Dropping stale search results for '{query}'")
        except LaunchSourceError as e:
            if state.is_current(generation):
                logger.error(f"Search error: {e}")
            else:
                logger.debug(f"Ignoring stale search failure for '{query}': {e}")
        finally:
            if state.is_current(generation):
                state.loading = False
                state.notify()

        return replaced
