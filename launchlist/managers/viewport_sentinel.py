"""Triggers loading more launches when the last row becomes visible."""

import logging
from typing import Any, Callable, Optional

from launchlist.core.protocols import ObservationPort, ObserveFn

logger = logging.getLogger("LaunchList.ViewportSentinel")


class ViewportSentinel:
    """Watches the last rendered row and asks for the next page.

    Holds at most one observation. ``get_state`` returns an object with
    ``loading`` and ``can_load_more()``, either the live list state or
    the latest snapshot seen by the UI.

    Args:
        get_state: Returns the current list state
        on_advance: Called when the next page should be loaded
        observe: Starts observing an anchor, returns a disconnectable handle
    """

    def __init__(
        self,
        get_state: Callable[[], Any],
        on_advance: Callable[[], None],
        observe: ObserveFn,
    ):
        self.get_state = get_state
        self.on_advance = on_advance
        self._observe = observe
        self._observation: Optional[ObservationPort] = None
        self._anchor: Any = None

    @property
    def anchor(self) -> Any:
        return self._anchor

    def is_attached(self) -> bool:
        return self._observation is not None

    def attach(self, anchor: Any) -> bool:
        """Observe ``anchor``, releasing any previous observation first.

        Not armed while a fetch is in flight.

        Returns:
            bool: True if an observation was started
        """
        if self.get_state().loading:
            return False

        self.detach()
        if anchor is None:
            return False

        self._observation = self._observe(anchor, self._on_intersection)
        self._anchor = anchor
        return True

    def detach(self) -> None:
        if self._observation is not None:
            self._observation.disconnect()
        self._observation = None
        self._anchor = None

    def on_render(self, last_anchor: Any) -> None:
        """Re-arm after a render if the last row changed."""
        if last_anchor is None:
            self.detach()
            return
        if last_anchor is self._anchor and self.is_attached():
            return
        self.attach(last_anchor)

    def _on_intersection(self, is_intersecting: bool) -> None:
        if not is_intersecting:
            return
        if not self.get_state().can_load_more():
            return
        logger.info("Last launch is visible, loading more...")
        self.on_advance()
