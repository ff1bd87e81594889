"""Tests for the per-user websocket registry."""

from __future__ import annotations

import pytest

from app.infrastructure.notifications import CLOSE_REPLACED, ConnectionRegistry, is_writable

pytestmark = pytest.mark.anyio


async def test_register_and_lookup(connection_factory) -> None:
    registry = ConnectionRegistry()
    connection = connection_factory()

    await registry.register(7, connection)

    assert registry.lookup(7) is connection
    assert registry.lookup(8) is None
    assert len(registry) == 1
    assert 7 in registry


async def test_second_connection_replaces_and_closes_first(connection_factory) -> None:
    registry = ConnectionRegistry()
    first = connection_factory()
    second = connection_factory()

    await registry.register(7, first)
    await registry.register(7, second)

    assert first.close_code == CLOSE_REPLACED
    assert second.close_code is None
    assert registry.lookup(7) is second
    assert len(registry) == 1


async def test_registering_same_connection_twice_does_not_close_it(connection_factory) -> None:
    registry = ConnectionRegistry()
    connection = connection_factory()

    await registry.register(7, connection)
    await registry.register(7, connection)

    assert connection.close_code is None
    assert registry.lookup(7) is connection


async def test_stale_unregister_keeps_newer_connection(connection_factory) -> None:
    registry = ConnectionRegistry()
    first = connection_factory()
    second = connection_factory()
    await registry.register(7, first)
    await registry.register(7, second)

    registry.unregister(7, first)

    assert registry.lookup(7) is second


async def test_unregister_removes_without_closing(connection_factory) -> None:
    registry = ConnectionRegistry()
    connection = connection_factory()
    await registry.register(7, connection)

    registry.unregister(7)
    registry.unregister(7)

    assert registry.lookup(7) is None
    assert connection.close_code is None


async def test_items_is_a_snapshot_and_clear_empties(connection_factory) -> None:
    registry = ConnectionRegistry()
    await registry.register(1, connection_factory())
    await registry.register(2, connection_factory())

    snapshot = registry.items()
    registry.clear()

    assert [user_id for user_id, _ in snapshot] == [1, 2]
    assert len(registry) == 0
    assert registry.user_ids() == []


def test_is_writable_tracks_both_sides(connection_factory) -> None:
    connection = connection_factory()
    assert is_writable(connection)

    connection.drop()

    assert not is_writable(connection)


async def test_failed_close_of_replaced_connection_keeps_the_new_one(connection_factory) -> None:
    registry = ConnectionRegistry()
    half_dead = connection_factory(fail_on_close=True)
    fresh = connection_factory()

    await registry.register(7, half_dead)
    await registry.register(7, fresh)

    assert registry.lookup(7) is fresh
    assert fresh.close_code is None
