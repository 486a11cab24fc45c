"""Unit tests for the SSEManager and its store relay."""

import asyncio
import json
import logging

import pytest

from inventory.application.services import SSEManager
from inventory.domain.entities import UserRecord
from inventory.infrastructure.memory import InMemoryRecordStore


def _parse(message: str) -> tuple[str, dict]:
    event_line, data_line = message.strip().split("\n")
    return event_line.removeprefix("event: "), json.loads(data_line.removeprefix("data: "))


async def _next(stream):
    return await stream.__anext__()


@pytest.mark.asyncio
async def test_publish_reaches_subscriber():
    manager = SSEManager()
    stream = manager.subscribe()
    pending = asyncio.create_task(_next(stream))
    await asyncio.sleep(0)
    assert manager.client_count == 1

    manager.publish("users.changed", {"kind": "added"})

    event, data = _parse(await asyncio.wait_for(pending, 1))
    assert event == "users.changed"
    assert data == {"kind": "added"}
    await stream.aclose()


@pytest.mark.asyncio
async def test_store_changes_are_relayed():
    manager = SSEManager()
    store = InMemoryRecordStore(UserRecord, name="users")
    store.subscribe(manager.relay("users"))

    stream = manager.subscribe()
    pending = asyncio.create_task(_next(stream))
    await asyncio.sleep(0)

    user_id = store.add(username="alice", pincode="1234")

    event, data = _parse(await asyncio.wait_for(pending, 1))
    assert event == "users.changed"
    assert data == {"kind": "added", "record_ids": [user_id], "count": 1, "version": 1}
    await stream.aclose()


@pytest.mark.asyncio
async def test_store_changes_from_worker_threads_are_relayed():
    loop = asyncio.get_running_loop()
    loop.set_debug(True)
    try:
        manager = SSEManager()
        store = InMemoryRecordStore(UserRecord, name="users")
        store.subscribe(manager.relay("users"))

        stream = manager.subscribe()
        pending = asyncio.create_task(_next(stream))
        await asyncio.sleep(0)

        user_id = await asyncio.to_thread(store.add, username="alice", pincode="1234")

        event, data = _parse(await asyncio.wait_for(pending, 1))
        assert event == "users.changed"
        assert data["record_ids"] == [user_id]
        await stream.aclose()
    finally:
        loop.set_debug(False)


def test_relay_without_clients_is_a_no_op(caplog):
    manager = SSEManager()
    store = InMemoryRecordStore(UserRecord, name="users")
    store.subscribe(manager.relay("users"))

    store.add(username="alice", pincode="1234")

    assert manager.client_count == 0
    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]


@pytest.mark.asyncio
async def test_slow_client_is_disconnected():
    manager = SSEManager(max_queue_size=2)
    stream = manager.subscribe()
    pending = asyncio.create_task(_next(stream))
    await asyncio.sleep(0)

    for i in range(4):
        manager.publish("tick", {"i": i})

    assert manager.client_count == 0
    await asyncio.wait_for(pending, 1)
    await stream.aclose()


@pytest.mark.asyncio
async def test_shutdown_ends_streams():
    manager = SSEManager()
    stream = manager.subscribe()
    pending = asyncio.create_task(_next(stream))
    await asyncio.sleep(0)

    await manager.shutdown()

    with pytest.raises(StopAsyncIteration):
        await asyncio.wait_for(pending, 1)
    assert manager.client_count == 0
