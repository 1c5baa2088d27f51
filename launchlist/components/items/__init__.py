"""Launch row components."""

from .item_details import ItemDetails
from .item_header import ItemHeader

__all__ = ["ItemHeader", "ItemDetails"]
