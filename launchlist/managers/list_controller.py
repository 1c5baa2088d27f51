"""Runs the launch list managers on a background event loop."""

import asyncio
import concurrent.futures
import logging
import threading
from typing import Callable, Coroutine, Optional

from launchlist.core.protocols import LaunchSourcePort
from launchlist.managers.list_state import LaunchListState, ListSnapshot
from launchlist.managers.pagination_manager import PaginationManager
from launchlist.managers.search_manager import SearchManager

logger = logging.getLogger("LaunchList.ListController")


class ListController:
    """Owns the list state and the loop every state change runs on.

    UI code calls ``load_more``, ``search`` and ``toggle_expanded`` from
    its own thread; the work is handed to the loop thread. ``on_change``
    is called on the loop thread with a snapshot after each change.
    """

    def __init__(
        self,
        source: LaunchSourcePort,
        page_size: int = 10,
        search_limit: int = 1000,
        on_change: Optional[Callable[[ListSnapshot], None]] = None,
    ):
        self.source = source
        self.state = LaunchListState()
        self.pagination = PaginationManager(self.state, source, page_size=page_size)
        self.search_manager = SearchManager(
            self.state, source, self.pagination, search_limit=search_limit
        )
        if on_change is not None:
            self.state.add_listener(on_change)

        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._loop is not None and self._loop.is_running()

    def start(self) -> concurrent.futures.Future:
        """Start the loop thread and load the first page."""
        if self._loop is not None:
            raise RuntimeError("ListController already started")

        loop = asyncio.new_event_loop()
        ready = threading.Event()

        def run_loop():
            asyncio.set_event_loop(loop)
            loop.call_soon(ready.set)
            try:
                loop.run_forever()
            finally:
                loop.close()

        self._loop = loop
        self._thread = threading.Thread(target=run_loop, name="launchlist-loop", daemon=True)
        self._thread.start()
        ready.wait()

        logger.info("Loading first page of launches...")
        return self._submit(self.pagination.load_next_page())

    def stop(self, timeout: float = 5.0) -> None:
        if self._loop is None:
            return
        loop = self._loop
        try:
            self._submit(self._shutdown(timeout)).result(timeout=timeout * 2)
        except Exception as e:
            logger.warning(f"Error shutting down launch list: {e}")
        loop.call_soon_threadsafe(loop.stop)
        if self._thread is not None:
            self._thread.join(timeout=timeout)
        self._loop = None
        self._thread = None

    async def _shutdown(self, timeout: float) -> None:
        # Cancel in-flight fetches before the loop stops
        current = asyncio.current_task()
        pending = [task for task in asyncio.all_tasks() if task is not current]
        for task in pending:
            task.cancel()
        if pending:
            _, still_pending = await asyncio.wait(pending, timeout=timeout)
            for task in still_pending:
                logger.debug(f"Task did not cancel before shutdown: {task!r}")

        try:
            await self.source.aclose()
        except Exception as e:
            logger.warning(f"Error closing launch source: {e}")

    def load_more(self) -> concurrent.futures.Future:
        return self._submit(self.pagination.advance())

    def search(self, query: str) -> concurrent.futures.Future:
        return self._submit(self.search_manager.run_search(query))

    def toggle_expanded(self, date_unix: int) -> None:
        self._require_loop().call_soon_threadsafe(self.state.toggle_expanded, date_unix)

    def _submit(self, coro: Coroutine) -> concurrent.futures.Future:
        try:
            loop = self._require_loop()
        except RuntimeError:
            coro.close()
            raise
        future = asyncio.run_coroutine_threadsafe(coro, loop)
        future.add_done_callback(_log_failure)
        return future

    def _require_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            raise RuntimeError("ListController is not running")
        return self._loop


def _log_failure(future: concurrent.futures.Future) -> None:
    # UI callers drop the futures they get back
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.error(f"Launch list operation failed: {exc!r}")
