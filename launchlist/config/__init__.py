"""Configuration management."""

from .paths import AppPaths
from .settings import AppSettings, DisplaySettings, SourceSettings, WindowSettings

__all__ = [
    "AppSettings",
    "DisplaySettings",
    "SourceSettings",
    "WindowSettings",
    "AppPaths",
]
