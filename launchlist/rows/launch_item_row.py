"""LaunchItemRow - One launch in the list with a View/Hide toggle."""

import logging
from typing import Callable

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from launchlist.components.items import ItemDetails, ItemHeader
from launchlist.core.models import Launch

logger = logging.getLogger("LaunchList.UI")


class LaunchItemRow(Gtk.ListBoxRow):
    """Row displaying a launch summary, with details shown on demand."""

    def __init__(
        self,
        launch: Launch,
        on_toggle: Callable[[int], None],
        expanded: bool = False,
        search_query: str = "",
    ):
        super().__init__()
        self.launch = launch
        self.on_toggle = on_toggle
        self.expanded = False
        self._details_built = False

        self.set_activatable(False)
        self.add_css_class("launch-item")

        main_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=6)
        main_box.set_margin_start(12)
        main_box.set_margin_end(12)
        main_box.set_margin_top(8)
        main_box.set_margin_bottom(8)

        main_box.append(ItemHeader(launch, search_query=search_query).build())

        self.revealer = Gtk.Revealer()
        self.revealer.set_transition_type(Gtk.RevealerTransitionType.SLIDE_DOWN)
        main_box.append(self.revealer)

        self.toggle_button = Gtk.Button(label="View")
        self.toggle_button.set_halign(Gtk.Align.START)
        self.toggle_button.add_css_class("view-button")
        self.toggle_button.add_css_class("view-button--primary")
        self.toggle_button.connect("clicked", self._on_toggle_clicked)
        main_box.append(self.toggle_button)

        self.set_child(main_box)
        self.set_expanded(expanded)

    def set_expanded(self, expanded: bool) -> None:
        if expanded and not self._details_built:
            # Details are built on first expansion only
            self.revealer.set_child(ItemDetails(self.launch).build())
            self._details_built = True
        self.expanded = expanded
        self.revealer.set_reveal_child(expanded)
        self.toggle_button.set_label("Hide" if expanded else "View")

    def _on_toggle_clicked(self, button: Gtk.Button) -> None:
        logger.debug(f"Toggling details for {self.launch.name} ({self.launch.date_unix})")
        self.on_toggle(self.launch.date_unix)
