"""Launch record models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from .errors import LaunchSourceError


@dataclass(frozen=True)
class LaunchLinks:
    article: Optional[str] = None
    video: Optional[str] = None
    patch: Optional[str] = None


@dataclass(frozen=True)
class Launch:
    """A single launch as shown in the list.

    ``name`` is the deduplication key; ``date_unix`` identifies the row
    for expansion state.
    """

    name: str
    date_utc: datetime
    date_unix: int
    is_upcoming: bool
    was_successful: Optional[bool] = None
    details: Optional[str] = None
    links: LaunchLinks = field(default_factory=LaunchLinks)

    @classmethod
    def from_api(cls, data: dict) -> "Launch":
        """Build a Launch from one item of the ``/launches`` response."""
        if not isinstance(data, dict):
            raise LaunchSourceError(f"Launch entry is not an object: {data!r}")
        try:
            name = data["mission_name"]
            date_utc = _parse_utc(data["launch_date_utc"])
            date_unix = int(data["launch_date_unix"])
            is_upcoming = bool(data["upcoming"])
        except (KeyError, TypeError, ValueError) as e:
            raise LaunchSourceError(f"Malformed launch entry: {e}") from e

        if not isinstance(name, str):
            raise LaunchSourceError(f"Malformed launch entry: mission_name={name!r}")

        links = data.get("links") or {}
        if not isinstance(links, dict):
            raise LaunchSourceError(f"Malformed launch entry: links={links!r}")

        return cls(
            name=name,
            date_utc=date_utc,
            date_unix=date_unix,
            is_upcoming=is_upcoming,
            was_successful=data.get("launch_success"),
            details=data.get("details"),
            links=LaunchLinks(
                article=links.get("article_link"),
                video=links.get("video_link"),
                patch=links.get("mission_patch"),
            ),
        )


def _parse_utc(value: str) -> datetime:
    if not isinstance(value, str):
        raise TypeError(f"launch_date_utc must be a string, got {value!r}")
    # fromisoformat() only accepts a trailing "Z" from Python 3.11 on
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
