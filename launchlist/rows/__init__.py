"""List rows."""

from .launch_item_row import LaunchItemRow

__all__ = ["LaunchItemRow"]
