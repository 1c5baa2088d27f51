"""Pagination state management for infinite scroll."""

import logging

from launchlist.core.errors import LaunchSourceError
from launchlist.core.protocols import LaunchSourcePort
from launchlist.managers.list_state import LaunchListState
from launchlist.utils.dedupe import dedupe

logger = logging.getLogger("LaunchList.PaginationManager")


class PaginationManager:
    """Loads fixed-size pages of launches into the shared list state.

    Args:
        state: Shared list state
        source: Remote launch collection
        page_size: Number of launches requested per page
    """

    def __init__(
        self,
        state: LaunchListState,
        source: LaunchSourcePort,
        page_size: int = 10,
    ):
        self.state = state
        self.source = source
        self.page_size = page_size

    @property
    def page(self) -> int:
        return self.state.page

    def offset_for(self, page: int) -> int:
        return (page - 1) * self.page_size

    def can_load_more(self) -> bool:
        return self.state.can_load_more()

    def reset(self) -> None:
        """Go back to the first page.

        Starts a new generation, so a fetch still in flight is ignored
        when it returns. The caller loads the first page afterwards.
        """
        state = self.state
        state.begin_generation()
        state.page = 1
        state.has_more = True
        state.loading = False

    async def load_next_page(self) -> bool:
        """Load the page at the current cursor.

        Returns:
            bool: True if a non-empty page was merged into the list
        """
        return await self._load_page(self.state.page)

    async def advance(self) -> bool:
        """Load the page after the current cursor.

        The cursor only moves once that page has been merged, so a failed
        or empty fetch leaves it where it was.

        Returns:
            bool: True if a non-empty page was merged into the list
        """
        return await self._load_page(self.state.page + 1)

    async def _load_page(self, page: int) -> bool:
        state = self.state
        if not state.can_load_more():
            logger.debug(
                f"Skipping page {page} (has_more={state.has_more}, loading={state.loading})"
            )
            return False

        generation = state.generation
        state.loading = True
        state.notify()

        offset = self.offset_for(page)
        logger.info(f"Loading launches page {page} (offset={offset}, limit={self.page_size})")

        merged = False
        try:
            launches = await self.source.fetch_page(offset=offset, limit=self.page_size)
            if state.is_current(generation):
                merged = self._merge(page, launches)
            else:
                logger.debug(f"Dropping stale response for page {page}")
        except LaunchSourceError as e:
            if state.is_current(generation):
                logger.error(f"Error fetching launches page {page}: {e}")
            else:
                logger.debug(f"Ignoring stale failure for page {page}: {e}")
        finally:
            if state.is_current(generation):
                state.loading = False
                state.notify()

        return merged

    def _merge(self, page: int, launches) -> bool:
        state = self.state
        if not launches:
            logger.info(f"No launches at page {page}, end of list reached")
            state.has_more = False
            return False

        unique = tuple(dedupe(launches))
        if page == 1:
            state.items = unique
        else:
            # Only deduplicated within the page; names repeated across pages are kept
            state.items = state.items + unique
        state.page = page
        logger.debug(f"Merged {len(unique)} launches, {len(state.items)} in list")
        return True
