from datetime import datetime, timezone

from alarm_relay.services import ConnectionState


def test_register_assigns_unique_ids_and_counts(registry, make_transport):
    first = registry.register(make_transport())
    second = registry.register(make_transport())

    assert first != second
    assert registry.count() == 2
    assert len(registry) == 2


def test_new_connection_has_tracking_off(registry, make_transport):
    connection_id = registry.register(make_transport())

    view = registry.get(connection_id)
    assert view.location_enabled is False
    assert view.lat is None and view.lng is None
    assert view.last_update is None


def test_register_regenerates_colliding_id(registry, make_transport, monkeypatch):
    ids = iter(["dup", "dup", "fresh"])
    monkeypatch.setattr(registry, "_new_id", lambda: next(ids))

    assert registry.register(make_transport()) == "dup"
    assert registry.register(make_transport()) == "fresh"
    assert registry.count() == 2


def test_unregister_is_idempotent(registry, make_transport):
    connection_id = registry.register(make_transport())
    other_id = registry.register(make_transport())

    registry.unregister(connection_id)
    registry.unregister(connection_id)
    registry.unregister("never-registered")

    assert registry.count() == 1
    assert registry.get(other_id) is not None


def test_update_location_sets_coordinates_and_enables_tracking(registry, make_transport):
    connection_id = registry.register(make_transport())
    before = datetime.now(timezone.utc)

    assert registry.update_location(connection_id, 52.23, 21.01) is True

    [view] = registry.snapshot()
    assert view.id == connection_id
    assert (view.lat, view.lng) == (52.23, 21.01)
    assert view.location_enabled is True
    assert view.last_update >= before


def test_update_location_replaces_previous_position(registry, make_transport):
    connection_id = registry.register(make_transport())
    registry.update_location(connection_id, 1.0, 2.0)
    registry.update_location(connection_id, 3.0, 4.0)

    view = registry.get(connection_id)
    assert (view.lat, view.lng) == (3.0, 4.0)


def test_update_location_after_unregister_is_dropped(registry, make_transport):
    connection_id = registry.register(make_transport())
    registry.unregister(connection_id)

    assert registry.update_location(connection_id, 1.0, 2.0) is False
    assert registry.count() == 0
    assert registry.snapshot() == []


def test_update_location_for_unknown_id_leaves_others_untouched(registry, make_transport):
    connection_id = registry.register(make_transport())
    registry.update_location(connection_id, 10.0, 20.0)
    before = registry.get(connection_id)

    registry.update_location("ghost", 1.0, 2.0)

    assert registry.count() == 1
    assert registry.get(connection_id) == before


def test_disable_all_tracking_clears_every_entry(registry, make_transport):
    tracked = registry.register(make_transport())
    untracked = registry.register(make_transport())
    registry.update_location(tracked, 52.23, 21.01)

    registry.disable_all_tracking()

    for connection_id in (tracked, untracked):
        view = registry.get(connection_id)
        assert view.location_enabled is False
        assert view.lat is None and view.lng is None
        assert view.last_update is None
    assert registry.count() == 2


def test_snapshot_views_are_detached_from_registry(registry, make_transport):
    connection_id = registry.register(make_transport())
    registry.update_location(connection_id, 1.0, 2.0)
    [view] = registry.snapshot()

    registry.disable_all_tracking()

    assert view.lat == 1.0
    assert view.location_enabled is True


def test_snapshot_serializes_with_wire_names(registry, make_transport):
    connection_id = registry.register(make_transport())
    registry.update_location(connection_id, 52.23, 21.01)

    [view] = registry.snapshot()
    dumped = view.model_dump(by_alias=True)

    assert set(dumped) == {"id", "lat", "lng", "lastUpdate", "locationEnabled"}


def test_open_transports_only_returns_open_connections(registry, make_transport):
    open_transport = make_transport()
    closing_transport = make_transport(state=ConnectionState.CLOSING)
    registry.register(open_transport)
    registry.register(closing_transport)
    registry.register(make_transport(state=ConnectionState.CONNECTING))

    assert registry.open_transports() == [open_transport]

    closing_transport.ready_state = ConnectionState.OPEN
    assert len(registry.open_transports()) == 2
