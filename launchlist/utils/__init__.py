"""Utility functions."""

from .dedupe import dedupe
from .formatting import format_relative_age, launch_status, relative_age

__all__ = [
    "dedupe",
    "format_relative_age",
    "launch_status",
    "relative_age",
]
