"""Expanded launch details: age, links, patch and description."""

from datetime import datetime, timezone
from typing import Callable, Optional

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from launchlist.core.models import Launch
from launchlist.utils.formatting import format_relative_age

NO_IMAGE_TEXT = "No image yet."
NO_DETAILS_TEXT = "No details yet."


class ItemDetails:
    def __init__(
        self,
        launch: Launch,
        now: Optional[Callable[[], datetime]] = None,
    ):
        self.launch = launch
        self.now = now or (lambda: datetime.now(timezone.utc))

    @property
    def age_text(self) -> str:
        return format_relative_age(self.now(), self.launch.date_utc)

    @property
    def details_text(self) -> str:
        return self.launch.details or NO_DETAILS_TEXT

    def build(self) -> Gtk.Widget:
        details_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=6)
        details_box.add_css_class("launch-details")

        details_box.append(self._build_meta())
        details_box.append(self._build_info())

        return details_box

    def _build_meta(self) -> Gtk.Widget:
        meta_box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=4)
        meta_box.add_css_class("launch-meta")

        age_label = Gtk.Label(label=self.age_text)
        age_label.add_css_class("dim-label")
        age_label.add_css_class("caption")
        meta_box.append(age_label)

        links = self.launch.links
        if links.article:
            meta_box.append(self._link_button(links.article, "article"))
        if links.video:
            meta_box.append(self._link_button(links.video, "video"))

        return meta_box

    def _build_info(self) -> Gtk.Widget:
        info_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=4)
        info_box.add_css_class("launch-info")

        if self.launch.links.patch:
            info_box.append(self._link_button(self.launch.links.patch, "mission patch"))
        else:
            info_box.append(Gtk.Label(label=NO_IMAGE_TEXT, halign=Gtk.Align.START))

        details_label = Gtk.Label(label=self.details_text)
        details_label.set_wrap(True)
        details_label.set_xalign(0)
        info_box.append(details_label)

        return info_box

    def _link_button(self, uri: str, label: str) -> Gtk.Widget:
        button = Gtk.LinkButton.new_with_label(uri, f"| {label}")
        button.add_css_class("flat")
        button.add_css_class("video-link")
        return button
