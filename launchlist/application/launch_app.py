"""Main LaunchList application."""

import logging
import sys
from typing import Optional

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, Gio

from launchlist.application.css_loader import CssLoader
from launchlist.core.di_container import AppContainer

logger = logging.getLogger("LaunchList.UI")


class LaunchApp(Adw.Application):
    """Main application"""

    def __init__(self, container: Optional[AppContainer] = None):
        super().__init__(
            application_id="org.launchlist.LaunchBrowser",
            flags=Gio.ApplicationFlags.DEFAULT_FLAGS,
        )
        self.container = container or AppContainer.create()
        self.main_window = None

    def do_startup(self):
        Adw.Application.do_startup(self)

        css_path = self.container.paths.css_path
        if CssLoader().load(str(css_path)):
            logger.info(f"Loaded custom CSS from {css_path}")
        else:
            logger.warning(f"Could not load custom CSS from {css_path}")

    def do_activate(self):
        if self.main_window is None:
            from launchlist.windows.launch_window import LaunchWindow

            self.main_window = LaunchWindow(self, self.container)
            self.main_window.start()
        self.main_window.present()


def main():
    """Entry point"""
    logger.info("LaunchList UI starting...")

    app = LaunchApp()
    try:
        return app.run(sys.argv)
    except KeyboardInterrupt:
        logger.info("Shutting down UI...")
        sys.exit(0)
