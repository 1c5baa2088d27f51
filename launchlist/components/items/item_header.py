"""Launch header component with mission name and status tag."""

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk, Pango

from launchlist.core.models import Launch
from launchlist.utils.formatting import launch_status
from launchlist.utils.highlighting import highlight_text


class ItemHeader:
    def __init__(self, launch: Launch, search_query: str = ""):
        self.launch = launch
        self.search_query = search_query
        self.name_label = None
        self.status_label = None

    @property
    def status(self) -> str:
        return launch_status(self.launch)

    def build(self) -> Gtk.Widget:
        header_box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)
        header_box.add_css_class("launch-header")

        self.name_label = Gtk.Label()
        self.name_label.set_markup(highlight_text(self.launch.name, self.search_query))
        self.name_label.set_halign(Gtk.Align.START)
        self.name_label.set_hexpand(True)
        self.name_label.set_ellipsize(Pango.EllipsizeMode.END)
        self.name_label.add_css_class("mission-name")
        header_box.append(self.name_label)

        status = self.status
        self.status_label = Gtk.Label(label=status)
        self.status_label.add_css_class("status-tag")
        self.status_label.add_css_class(status.lower())
        self.status_label.set_valign(Gtk.Align.CENTER)
        header_box.append(self.status_label)

        return header_box
