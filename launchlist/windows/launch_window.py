"""Main window: search bar, launch list, loading and end-of-list states."""

import logging
from typing import List, Optional, Tuple

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, GLib, Gtk

from launchlist.components.search_bar import SearchBar
from launchlist.core.di_container import AppContainer
from launchlist.core.models import Launch
from launchlist.infrastructure.scrolled_window_observer import ScrolledWindowObserver
from launchlist.managers import ListSnapshot, ViewportSentinel
from launchlist.rows import LaunchItemRow

logger = logging.getLogger("LaunchList.LaunchWindow")

END_OF_LIST_TEXT = "End of list."


class LaunchWindow(Adw.ApplicationWindow):
    def __init__(self, app, container: AppContainer):
        super().__init__(application=app)
        self.container = container
        settings = container.settings

        self.set_title("SpaceX Launches")
        self.set_default_size(
            settings.window.default_width, settings.window.default_height
        )

        self._snapshot = ListSnapshot(
            items=(),
            loading=False,
            has_more=True,
            query="",
            expanded=frozenset(),
            page=1,
        )
        self._rows: List[LaunchItemRow] = []
        self._rendered_items: Tuple[Launch, ...] = ()
        self._rendered_query = ""

        self.controller = container.create_list_controller(
            on_change=self._on_state_changed
        )

        self._build_ui(settings.display.debounce_ms)

        self.sentinel = ViewportSentinel(
            get_state=lambda: self._snapshot,
            on_advance=self.controller.load_more,
            observe=ScrolledWindowObserver(self.scrolled).observe,
        )

        self.connect("close-request", self._on_close_request)

    def _build_ui(self, debounce_ms: int) -> None:
        content = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)
        content.append(Adw.HeaderBar())

        title = Gtk.Label(label="SpaceX Launches")
        title.add_css_class("title-1")
        title.set_margin_top(8)
        content.append(title)

        self.search_bar = SearchBar(
            on_search=self.controller.search, debounce_ms=debounce_ms
        )
        content.append(self.search_bar.build())

        self.listbox = Gtk.ListBox()
        self.listbox.set_selection_mode(Gtk.SelectionMode.NONE)
        self.listbox.add_css_class("launch-list")

        self.scrolled = Gtk.ScrolledWindow()
        self.scrolled.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        self.scrolled.set_vexpand(True)
        self.scrolled.set_child(self.listbox)
        content.append(self.scrolled)

        self.spinner = Gtk.Spinner()
        self.spinner.set_margin_top(8)
        self.spinner.set_margin_bottom(8)
        self.spinner.set_visible(False)
        content.append(self.spinner)

        self.end_label = Gtk.Label(label=END_OF_LIST_TEXT)
        self.end_label.add_css_class("loading")
        self.end_label.add_css_class("dim-label")
        self.end_label.set_margin_bottom(8)
        self.end_label.set_visible(False)
        content.append(self.end_label)

        self.set_content(content)

    def start(self) -> None:
        self.controller.start()

    def _on_state_changed(self, snapshot: ListSnapshot) -> None:
        # Called on the controller's loop thread
        GLib.idle_add(self._render, snapshot)

    def _render(self, snapshot: ListSnapshot) -> bool:
        self._snapshot = snapshot
        self._sync_rows(snapshot)

        self.spinner.set_visible(snapshot.loading)
        self.spinner.set_spinning(snapshot.loading)
        self.end_label.set_visible(not snapshot.has_more and not snapshot.loading)

        self.sentinel.on_render(self._rows[-1] if self._rows else None)
        return False

    def _sync_rows(self, snapshot: ListSnapshot) -> None:
        items = snapshot.items
        rendered = self._rendered_items

        if items is rendered and snapshot.query == self._rendered_query:
            pass
        elif (
            snapshot.query == self._rendered_query
            and len(items) >= len(rendered)
            and items[: len(rendered)] == rendered
        ):
            for launch in items[len(rendered):]:
                self._append_row(launch, snapshot)
        else:
            self._clear_rows()
            for launch in items:
                self._append_row(launch, snapshot)
            self._jump_to_top()

        self._rendered_items = items
        self._rendered_query = snapshot.query

        for row in self._rows:
            expanded = snapshot.is_expanded(row.launch.date_unix)
            if row.expanded != expanded:
                row.set_expanded(expanded)

    def _append_row(self, launch: Launch, snapshot: ListSnapshot) -> None:
        row = LaunchItemRow(
            launch,
            on_toggle=self.controller.toggle_expanded,
            expanded=snapshot.is_expanded(launch.date_unix),
            search_query=snapshot.query,
        )
        self.listbox.append(row)
        self._rows.append(row)

    def _clear_rows(self) -> None:
        self.sentinel.detach()
        while True:
            row = self.listbox.get_row_at_index(0)
            if row is None:
                break
            self.listbox.remove(row)
        self._rows = []

    def _jump_to_top(self) -> None:
        self.scrolled.get_vadjustment().set_value(0)

    def _on_close_request(self, window) -> bool:
        logger.info("Closing launch window")
        self.sentinel.detach()
        self.controller.stop()
        return False

    @property
    def last_row(self) -> Optional[LaunchItemRow]:
        return self._rows[-1] if self._rows else None
