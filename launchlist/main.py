#!/usr/bin/env python3
"""
LaunchList UI - GTK4 browser for SpaceX launches
Minimal entry point - classes are in separate modules.
"""

import logging
import signal
import sys

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("LaunchList.UI")


def main():
    """Entry point"""
    from launchlist.application.launch_app import main as app_main

    def signal_handler(sig, frame):
        logger.info("Shutting down UI...")
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)

    return app_main()


if __name__ == "__main__":
    main()
