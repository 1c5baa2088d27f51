"""Application settings configuration."""

from dataclasses import dataclass
from typing import Optional

import yaml


@dataclass(frozen=True)
class SourceSettings:
    base_url: str = "https://api.spacexdata.com/v3"
    request_timeout: float = 30.0


@dataclass(frozen=True)
class DisplaySettings:
    page_size: int = 10
    search_limit: int = 1000
    debounce_ms: int = 300


@dataclass(frozen=True)
class WindowSettings:
    default_width: int = 480
    default_height: int = 800


@dataclass(frozen=True)
class AppSettings:
    source: SourceSettings
    display: DisplaySettings
    window: WindowSettings

    @classmethod
    def default(cls) -> "AppSettings":
        return cls(
            source=SourceSettings(),
            display=DisplaySettings(),
            window=WindowSettings(),
        )

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppSettings":
        if path is None:
            path = "settings.yml"

        config = cls._load_yaml(path)
        return cls(
            source=SourceSettings(
                base_url=config.get("base_url", SourceSettings.base_url),
                request_timeout=float(
                    config.get("request_timeout", SourceSettings.request_timeout)
                ),
            ),
            display=DisplaySettings(
                page_size=int(config.get("page_size", DisplaySettings.page_size)),
                search_limit=int(
                    config.get("search_limit", DisplaySettings.search_limit)
                ),
                debounce_ms=int(config.get("debounce_ms", DisplaySettings.debounce_ms)),
            ),
            window=WindowSettings(
                default_width=int(
                    config.get("default_width", WindowSettings.default_width)
                ),
                default_height=int(
                    config.get("default_height", WindowSettings.default_height)
                ),
            ),
        )

    @staticmethod
    def _load_yaml(path: str) -> dict:
        try:
            with open(path, "r") as f:
                config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            return {}
        except yaml.YAMLError:
            return {}
        return config if isinstance(config, dict) else {}
