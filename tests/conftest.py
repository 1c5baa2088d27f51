"""Pytest configuration and shared fixtures."""

import asyncio
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional

import pytest

from launchlist.core.errors import LaunchSourceError
from launchlist.core.models import Launch, LaunchLinks

BASE_DATE = datetime(2020, 1, 1, tzinfo=timezone.utc)


def make_launch(name: str, index: int = 0, **overrides) -> Launch:
    date_utc = overrides.pop("date_utc", BASE_DATE + timedelta(days=index))
    fields = dict(
        name=name,
        date_utc=date_utc,
        date_unix=int(date_utc.timestamp()),
        is_upcoming=False,
        was_successful=True,
        details=None,
        links=LaunchLinks(),
    )
    fields.update(overrides)
    return Launch(**fields)


def make_launches(count: int, prefix: str = "Mission", start: int = 0) -> List[Launch]:
    return [make_launch(f"{prefix} {i}", index=i) for i in range(start, start + count)]


class FakeLaunchSource:
    """In-memory launch collection.

    ``page_gate`` / ``all_gate`` hold the matching fetch until the event
    is set; ``fail`` makes every fetch raise LaunchSourceError.
    """

    def __init__(self, launches: Optional[List[Launch]] = None):
        self.launches = list(launches or [])
        self.calls = []
        self.fail = False
        self.page_gate: Optional[asyncio.Event] = None
        self.all_gate: Optional[asyncio.Event] = None
        self.closed = False

    async def fetch_page(self, offset: int, limit: int) -> List[Launch]:
        self.calls.append(("page", offset, limit))
        if self.page_gate is not None:
            await self.page_gate.wait()
        if self.fail:
            raise LaunchSourceError("connection refused")
        return list(self.launches[offset:offset + limit])

    async def fetch_all(self, limit: int) -> List[Launch]:
        self.calls.append(("all", limit))
        if self.all_gate is not None:
            await self.all_gate.wait()
        if self.fail:
            raise LaunchSourceError("connection refused")
        return list(self.launches[:limit])

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def launch_factory():
    return make_launch


@pytest.fixture
def launches_factory():
    return make_launches


@pytest.fixture
def source_factory():
    return FakeLaunchSource


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def gtk():
    """Gtk module, skipping the test when GTK or a display is unavailable."""
    pytest.importorskip("gi")
    import gi

    try:
        gi.require_version("Gtk", "4.0")
        gi.require_version("Adw", "1")
    except ValueError:
        pytest.skip("GTK 4 / libadwaita not installed")
    Gtk = pytest.importorskip("gi.repository.Gtk")
    from gi.repository import Gdk

    if Gdk.Display.get_default() is None:
        pytest.skip("No display available")
    return Gtk
