from __future__ import annotations

import asyncio

import pytest

from tasks_api.core.errors import NotFoundError
from tasks_api.services.task_factory import build_task_draft


def _create(store, **overrides):
    return asyncio.run(store.create(build_task_draft(overrides)))


def test_create_assigns_strictly_increasing_ids(store):
    ids = [_create(store, title=f"Task {i}").id for i in range(5)]

    assert ids == [1, 2, 3, 4, 5]


def test_ids_are_not_reused_after_remove(store):
    first = _create(store)
    asyncio.run(store.remove(first.id))

    second = _create(store)

    assert second.id == first.id + 1


def test_get_returns_created_record(store):
    created = _create(store, title="Task 1", description="Description 1")

    assert asyncio.run(store.get(created.id)) == created


def test_get_missing_raises_not_found(store):
    with pytest.raises(NotFoundError) as excinfo:
        asyncio.run(store.get(999))

    assert excinfo.value.message == "Task not found"


def test_get_all_empty_and_in_insertion_order(store):
    assert asyncio.run(store.get_all()) == []

    a = _create(store, title="a")
    b = _create(store, title="b")

    assert [t.id for t in asyncio.run(store.get_all())] == [a.id, b.id]


def test_returned_records_are_copies(store):
    created = _create(store, title="original")
    created.title = "mutated outside"

    assert asyncio.run(store.get(created.id)).title == "original"


def test_update_merges_and_refreshes_updated_at(store):
    created = _create(store, title="old", description="old desc")

    updated = asyncio.run(
        store.update({"id": created.id, "title": "new", "description": "new desc"})
    )

    assert updated.id == created.id
    assert updated.title == "new"
    assert updated.description == "new desc"
    assert updated.created_at == created.created_at
    assert updated.updated_at >= created.updated_at
    assert asyncio.run(store.get(created.id)) == updated


def test_update_keeps_unsupplied_fields(store):
    created = _create(store, title="old", description="kept")

    updated = asyncio.run(store.update({"id": created.id, "title": "new"}))

    assert updated.description == "kept"


def test_update_cannot_overwrite_created_at(store):
    created = _create(store)
    other = build_task_draft().created_at.replace(year=2000)

    updated = asyncio.run(store.update({"id": created.id, "created_at": other}))

    assert updated.created_at == created.created_at


def test_update_missing_raises_and_leaves_store_untouched(store):
    created = _create(store)

    with pytest.raises(NotFoundError, match="Task not found"):
        asyncio.run(store.update({"id": 999, "title": "t", "description": "d"}))

    assert asyncio.run(store.get_all()) == [created]


def test_remove_returns_snapshot_then_hides_record(store):
    created = _create(store, title="gone")

    removed = asyncio.run(store.remove(created.id))

    assert removed == created
    assert len(store) == 0
    with pytest.raises(NotFoundError):
        asyncio.run(store.get(created.id))
    with pytest.raises(NotFoundError):
        asyncio.run(store.remove(created.id))


def test_concurrent_creates_get_distinct_ids(store):
    async def create_many():
        return await asyncio.gather(*(store.create(build_task_draft()) for _ in range(20)))

    tasks = asyncio.run(create_many())

    assert sorted(t.id for t in tasks) == list(range(1, 21))
