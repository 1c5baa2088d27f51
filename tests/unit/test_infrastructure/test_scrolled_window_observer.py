"""Tests for ScrolledWindowObserver."""

import pytest


@pytest.fixture(autouse=True)
def _require_gtk():
    pytest.importorskip("gi.repository.Gtk")


def test_within_viewport_fully_visible():
    from launchlist.infrastructure.scrolled_window_observer import is_within_viewport

    assert is_within_viewport(top=100, height=50, viewport_height=600) is True


def test_within_viewport_partially_visible():
    from launchlist.infrastructure.scrolled_window_observer import is_within_viewport

    assert is_within_viewport(top=580, height=50, viewport_height=600) is True
    assert is_within_viewport(top=-40, height=50, viewport_height=600) is True


def test_within_viewport_below():
    from launchlist.infrastructure.scrolled_window_observer import is_within_viewport

    assert is_within_viewport(top=600, height=50, viewport_height=600) is False
    assert is_within_viewport(top=900, height=50, viewport_height=600) is False


def test_within_viewport_above():
    from launchlist.infrastructure.scrolled_window_observer import is_within_viewport

    assert is_within_viewport(top=-50, height=50, viewport_height=600) is False


def test_observation_disconnect(gtk):
    from launchlist.infrastructure.scrolled_window_observer import ScrolledWindowObserver

    scrolled = gtk.ScrolledWindow()
    listbox = gtk.ListBox()
    row = gtk.ListBoxRow()
    listbox.append(row)
    scrolled.set_child(listbox)

    observation = ScrolledWindowObserver(scrolled).observe(row, lambda visible: None)
    observation.disconnect()
    observation.disconnect()

    assert observation._handler_ids == []
    assert observation._idle_id is None


def test_observation_reports_changes_only(gtk):
    from launchlist.infrastructure.scrolled_window_observer import RowObservation

    scrolled = gtk.ScrolledWindow()
    row = gtk.ListBoxRow()
    seen = []
    observation = RowObservation(scrolled, row, seen.append)
    observation.disconnect()

    # Unmapped rows are never visible
    observation._check()
    observation._check()

    assert seen == [False]
