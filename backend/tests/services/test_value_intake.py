"""Value Intake Service: validation gate, detached side effects, fast acknowledgement.

Invariants:
    - Accepted index -> placeholder in cache, "insert" publish, one store row
    - Rejected index -> no cache entry, no publish, no row
    - submit() returns before any side effect completes
    - Each side effect fails alone; a failed persist still returns the index
"""

import asyncio
import logging

import pytest

from values_service.core.domain_types import PLACEHOLDER
from values_service.core.errors import (
    CacheError, DatabaseError, IndexTooHighError, InvalidIndexError,
)
from values_service.services.detached_tasks import DetachedTaskSet
from values_service.services.value_intake import ValueIntakeService


@pytest.fixture
def service(store, cache, channel):
    return ValueIntakeService(store, cache, channel)


async def test_accepted_index_reaches_all_three_services(
    service, store, cache, channel,
):
    assert service.submit("5") == 5
    await service.drain()

    assert store.rows == [{"number": 5}]
    assert cache.values == {"5": PLACEHOLDER}
    assert channel.published == [("insert", "5")]


@pytest.mark.parametrize("index", [0, 17, 40])
async def test_read_paths_reflect_submission(service, index):
    service.submit(index)
    await service.drain()

    assert {"number": index} in await service.all_values()
    assert (await service.current_values())[str(index)] == PLACEHOLDER


@pytest.mark.parametrize("index", [41, "99"])
async def test_rejected_index_has_no_side_effects(
    service, store, cache, channel, index,
):
    with pytest.raises(IndexTooHighError):
        service.submit(index)
    await service.drain()

    assert store.rows == []
    assert cache.values == {}
    assert channel.published == []
    assert len(service.tasks) == 0


async def test_non_integer_index_rejected(service, store):
    with pytest.raises(InvalidIndexError):
        service.submit("five")
    assert store.rows == []


async def test_submit_returns_before_side_effects_complete(
    service, store, cache, channel,
):
    gate = asyncio.Event()
    store.gate = cache.gate = channel.gate = gate

    service.submit(3)

    assert len(service.tasks) == 3
    assert store.rows == [] and cache.values == {} and channel.published == []
    gate.set()
    await service.drain()
    assert store.rows == [{"number": 3}]


async def test_store_failure_is_held_behind_fast_ack(
    service, store, cache, channel, caplog,
):
    """Acknowledged writes may be lost when the store fails after the ack."""
    store.fail = True
    with caplog.at_level(logging.ERROR):
        assert service.submit(8) == 8
        await service.drain()

    assert store.rows == []
    assert cache.values == {"8": PLACEHOLDER}
    assert channel.published == [("insert", "8")]
    assert any("persist failed" in r.getMessage() for r in caplog.records)


async def test_cache_and_channel_failures_do_not_block_persist(
    service, store, cache, channel,
):
    cache.fail = True
    channel.fail = True
    service.submit(2)
    await service.drain()
    assert store.rows == [{"number": 2}]


async def test_duplicate_submissions_append_records(service, store):
    service.submit(4)
    service.submit(4)
    await service.drain()
    assert store.rows == [{"number": 4}, {"number": 4}]


async def test_all_values_propagates_store_error(service, store):
    store.fail = True
    with pytest.raises(DatabaseError):
        await service.all_values()


async def test_current_values_propagates_cache_error(service, cache):
    cache.fail = True
    with pytest.raises(CacheError):
        await service.current_values()


async def test_read_paths_fail_independently(service, store, cache):
    service.submit(6)
    await service.drain()

    cache.fail = True
    assert await service.all_values() == [{"number": 6}]

    cache.fail = False
    store.fail = True
    assert await service.current_values() == {"6": PLACEHOLDER}


async def test_injected_task_set_is_the_one_used(store, cache, channel):
    tasks = DetachedTaskSet()
    service = ValueIntakeService(store, cache, channel, tasks=tasks)
    assert service.tasks is tasks

    service.submit(9)
    assert len(tasks) == 3
    await tasks.drain()
    assert store.rows == [{"number": 9}]
