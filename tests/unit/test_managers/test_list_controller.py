"""Tests for ListController."""

import asyncio
import logging
import threading

import pytest

from launchlist.managers.list_controller import ListController

TIMEOUT = 5


@pytest.fixture
def controller(source_factory, launches_factory):
    controller = ListController(
        source_factory(launches_factory(25)), page_size=10, search_limit=1000
    )
    yield controller
    controller.stop()


def test_controller_not_running_before_start(controller):
    assert controller.is_running is False

    with pytest.raises(RuntimeError):
        controller.load_more()


def test_start_loads_first_page(controller):
    assert controller.start().result(timeout=TIMEOUT) is True

    assert controller.is_running is True
    assert len(controller.state.items) == 10


def test_start_twice_raises(controller):
    controller.start().result(timeout=TIMEOUT)

    with pytest.raises(RuntimeError):
        controller.start()


def test_load_more_and_search(controller):
    controller.start().result(timeout=TIMEOUT)

    assert controller.load_more().result(timeout=TIMEOUT) is True
    assert len(controller.state.items) == 20

    assert controller.search("mission 2").result(timeout=TIMEOUT) is True
    names = [launch.name for launch in controller.state.items]
    assert names == ["Mission 2"] + [f"Mission {i}" for i in range(20, 25)]
    assert controller.state.has_more is False


def test_on_change_runs_on_loop_thread(source_factory, launches_factory):
    threads = []
    snapshots = []

    def on_change(snapshot):
        threads.append(threading.current_thread().name)
        snapshots.append(snapshot)

    controller = ListController(
        source_factory(launches_factory(5)), page_size=10, on_change=on_change
    )
    try:
        controller.start().result(timeout=TIMEOUT)
    finally:
        controller.stop()

    assert set(threads) == {"launchlist-loop"}
    assert snapshots[-1].loading is False
    assert len(snapshots[-1].items) == 5


def test_toggle_expanded(controller):
    controller.start().result(timeout=TIMEOUT)
    launch = controller.state.items[0]
    done = threading.Event()
    controller.state.add_listener(lambda snapshot: done.set())

    controller.toggle_expanded(launch.date_unix)

    assert done.wait(TIMEOUT)
    assert controller.state.expanded == {launch.date_unix}


def test_stop_closes_source(source_factory, launches_factory):
    source = source_factory(launches_factory(5))
    controller = ListController(source, page_size=10)
    controller.start().result(timeout=TIMEOUT)

    controller.stop()

    assert source.closed is True
    assert controller.is_running is False


def test_stop_without_start_is_noop(source_factory):
    controller = ListController(source_factory(), page_size=10)

    controller.stop()

    assert controller.is_running is False


class BrokenSource:
    async def fetch_page(self, offset, limit):
        raise RuntimeError("unexpected payload")

    async def fetch_all(self, limit):
        raise RuntimeError("unexpected payload")

    async def aclose(self):
        pass


class HangingSource:
    def __init__(self):
        self.closed = False

    async def fetch_page(self, offset, limit):
        await asyncio.sleep(3600)
        return []

    async def fetch_all(self, limit):
        await asyncio.sleep(3600)
        return []

    async def aclose(self):
        self.closed = True


def test_unexpected_failure_is_logged(caplog):
    controller = ListController(BrokenSource(), page_size=10)

    with caplog.at_level(logging.ERROR, logger="LaunchList.ListController"):
        future = controller.start()
        with pytest.raises(RuntimeError):
            future.result(timeout=TIMEOUT)
        # Joins the loop thread, so the failure callback has run
        controller.stop()

    assert any(
        "unexpected payload" in record.getMessage()
        for record in caplog.records
        if record.levelno == logging.ERROR
    )


def test_stop_cancels_pending_fetch(caplog):
    source = HangingSource()
    controller = ListController(source, page_size=10)
    future = controller.start()

    with caplog.at_level(logging.ERROR, logger="LaunchList.ListController"):
        controller.stop()

    assert future.cancelled()
    assert source.closed is True
    assert controller.is_running is False
    assert not any(record.levelno >= logging.ERROR for record in caplog.records)
