"""Tests for LaunchListState."""


def test_list_state_initial_state():
    from launchlist.managers.list_state import LaunchListState

    state = LaunchListState()

    assert state.page == 1
    assert state.has_more is True
    assert state.loading is False
    assert state.query == ""
    assert state.items == ()
    assert state.expanded == set()


def test_list_state_can_load_more():
    from launchlist.managers.list_state import LaunchListState

    state = LaunchListState()
    assert state.can_load_more() is True

    state.loading = True
    assert state.can_load_more() is False

    state.loading = False
    state.has_more = False
    assert state.can_load_more() is False


def test_list_state_generation():
    from launchlist.managers.list_state import LaunchListState

    state = LaunchListState()
    first = state.generation

    second = state.begin_generation()

    assert second == first + 1
    assert state.is_current(second) is True
    assert state.is_current(first) is False


def test_list_state_toggle_expanded_notifies():
    from launchlist.managers.list_state import LaunchListState

    state = LaunchListState()
    snapshots = []
    state.add_listener(snapshots.append)

    state.toggle_expanded(1143239400)
    state.toggle_expanded(1349656500)
    state.toggle_expanded(1143239400)

    assert state.expanded == {1349656500}
    assert len(snapshots) == 3
    assert snapshots[0].is_expanded(1143239400) is True
    assert snapshots[-1].is_expanded(1143239400) is False


def test_list_state_snapshot_is_detached(launch_factory):
    from launchlist.managers.list_state import LaunchListState

    state = LaunchListState()
    state.items = (launch_factory("CRS-1"),)
    state.expanded.add(1)

    snapshot = state.snapshot()
    state.expanded.add(2)
    state.items = ()

    assert snapshot.expanded == frozenset({1})
    assert len(snapshot.items) == 1
    assert snapshot.can_load_more() is True


def test_list_state_remove_listener():
    from launchlist.managers.list_state import LaunchListState

    state = LaunchListState()
    snapshots = []
    state.add_listener(snapshots.append)
    state.remove_listener(snapshots.append)

    state.notify()

    assert snapshots == []
