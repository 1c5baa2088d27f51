"""Visibility observation of a row inside a Gtk.ScrolledWindow."""

import logging
from typing import Callable, List, Optional

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import GLib, Gtk

logger = logging.getLogger("LaunchList.ScrolledWindowObserver")


def is_within_viewport(top: float, height: float, viewport_height: float) -> bool:
    """True if the span ``[top, top + height)`` overlaps ``[0, viewport_height)``."""
    return top < viewport_height and top + height > 0


class RowObservation:
    """Reports visibility changes of one anchor widget.

    The callback runs once with the initial visibility, then again each
    time visibility flips while the view scrolls or resizes.
    """

    def __init__(
        self,
        scrolled: Gtk.ScrolledWindow,
        anchor: Gtk.Widget,
        on_intersection: Callable[[bool], None],
    ):
        self.scrolled = scrolled
        self.anchor = anchor
        self.on_intersection = on_intersection
        self._visible: Optional[bool] = None
        self._adjustment = scrolled.get_vadjustment()
        self._handler_ids: List[int] = [
            self._adjustment.connect("value-changed", self._on_adjustment_changed),
            self._adjustment.connect("changed", self._on_adjustment_changed),
        ]
        # Allocation is not ready until the next main loop iteration
        self._idle_id: Optional[int] = GLib.idle_add(self._initial_check)

    def disconnect(self) -> None:
        for handler_id in self._handler_ids:
            self._adjustment.disconnect(handler_id)
        self._handler_ids = []
        if self._idle_id is not None:
            GLib.source_remove(self._idle_id)
            self._idle_id = None

    def _initial_check(self) -> bool:
        self._idle_id = None
        self._check()
        return False

    def _on_adjustment_changed(self, adjustment) -> None:
        self._check()

    def _check(self) -> None:
        visible = self._is_anchor_visible()
        if visible == self._visible:
            return
        self._visible = visible
        self.on_intersection(visible)

    def _is_anchor_visible(self) -> bool:
        if not self.anchor.get_mapped():
            return False
        ok, bounds = self.anchor.compute_bounds(self.scrolled)
        if not ok:
            return False
        return is_within_viewport(
            bounds.get_y(), bounds.get_height(), self.scrolled.get_height()
        )


class ScrolledWindowObserver:
    def __init__(self, scrolled: Gtk.ScrolledWindow):
        self.scrolled = scrolled

    def observe(
        self, anchor: Gtk.Widget, on_intersection: Callable[[bool], None]
    ) -> RowObservation:
        return RowObservation(self.scrolled, anchor, on_intersection)
