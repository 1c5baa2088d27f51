"""Launch search entry with debouncing."""

from typing import Callable, Optional

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import GLib, Gtk


class SearchBar:
    """Debounced mission name search.

    Each non-empty search fetches a whole snapshot of the collection, so
    queries are normalized and a query equal to the last one sent is not
    sent again. Enter always searches, which also retries a failed one.
    Clearing the entry restores browsing at once.
    """

    def __init__(
        self,
        on_search: Callable[[str], None],
        placeholder: str = "Search launches...",
        debounce_ms: int = 300,
    ):
        self.on_search = on_search
        self.placeholder = placeholder
        self.debounce_ms = debounce_ms
        self.pending_timer: Optional[int] = None
        self.last_query: str = ""
        self.search_entry: Optional[Gtk.SearchEntry] = None

    def build(self) -> Gtk.Widget:
        box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)
        box.set_margin_start(8)
        box.set_margin_end(8)
        box.set_margin_top(8)
        box.set_margin_bottom(4)

        entry = Gtk.SearchEntry()
        entry.set_hexpand(True)
        entry.set_placeholder_text(self.placeholder)
        entry.add_css_class("search-box")
        entry.connect("search-changed", self._on_changed)
        entry.connect("activate", self._on_activate)
        entry.connect("stop-search", self._on_stop)
        box.append(entry)

        self.search_entry = entry
        return box

    def clear(self) -> None:
        """Empty the entry; the change handler restores browsing."""
        if self.search_entry is not None:
            self.search_entry.set_text("")

    def _on_changed(self, entry: Gtk.SearchEntry) -> None:
        self._cancel_pending()
        query = entry.get_text().strip()

        if not query:
            self._send(query)
        elif query != self.last_query:
            self.pending_timer = GLib.timeout_add(
                self.debounce_ms, self._on_timeout, query
            )

    def _on_activate(self, entry: Gtk.SearchEntry) -> None:
        self._cancel_pending()
        self._send(entry.get_text().strip(), force=True)

    def _on_stop(self, entry: Gtk.SearchEntry) -> None:
        self.clear()

    def _on_timeout(self, query: str) -> bool:
        self.pending_timer = None
        self._send(query)
        return False

    def _send(self, query: str, force: bool = False) -> None:
        if query == self.last_query and not force:
            return
        self.last_query = query
        self.on_search(query)

    def _cancel_pending(self) -> None:
        if self.pending_timer:
            GLib.source_remove(self.pending_timer)
            self.pending_timer = None
