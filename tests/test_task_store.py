"""Tests for the SQL-backed task store."""

import pytest

from gtd.tasks import NotFoundError, TaskPatch, TaskStore, ValidationError


class TestCreate:
    async def test_create_then_list_contains_new_task(self, task_store: TaskStore):
        task = await task_store.create("Buy milk")

        tasks = await task_store.list()
        assert [t.id for t in tasks] == [task.id]
        assert tasks[0].title == "Buy milk"
        assert tasks[0].is_done is False

    async def test_create_assigns_unique_ids_and_utc_timestamp(
        self, task_store: TaskStore
    ):
        first = await task_store.create("one")
        second = await task_store.create("two")

        assert first.id != second.id
        assert first.created_at.tzinfo is not None
        assert first.created_at.utcoffset().total_seconds() == 0

    async def test_create_strips_title(self, task_store: TaskStore):
        task = await task_store.create("  call mom  ")
        assert task.title == "call mom"

    @pytest.mark.parametrize("title", ["", "   ", None, 5])
    async def test_create_rejects_invalid_title(self, task_store: TaskStore, title):
        with pytest.raises(ValidationError):
            await task_store.create(title)

        assert await task_store.list() == []


class TestList:
    async def test_empty_store(self, task_store: TaskStore):
        assert await task_store.list() == []

    async def test_insertion_order(self, task_store: TaskStore):
        for title in ("a", "b", "c"):
            await task_store.create(title)

        assert [t.title for t in await task_store.list()] == ["a", "b", "c"]

    async def test_each_call_is_a_fresh_read(self, task_store: TaskStore):
        snapshot = await task_store.list()
        await task_store.create("later")

        assert snapshot == []
        assert len(await task_store.list()) == 1


class TestUpdate:
    async def test_mark_done_keeps_title(self, task_store: TaskStore):
        task = await task_store.create("Buy milk")

        updated = await task_store.update(task.id, TaskPatch(is_done=True))

        assert updated.is_done is True
        assert updated.title == "Buy milk"
        [listed] = await task_store.list()
        assert listed.is_done is True
        assert listed.title == "Buy milk"

    async def test_rename_keeps_done_flag(self, task_store: TaskStore):
        task = await task_store.create("draft")
        await task_store.update(task.id, TaskPatch(is_done=True))

        updated = await task_store.update(task.id, TaskPatch(title="final"))

        assert updated.title == "final"
        assert updated.is_done is True

    async def test_empty_patch_is_noop(self, task_store: TaskStore):
        task = await task_store.create("same")

        updated = await task_store.update(task.id, TaskPatch())

        assert updated == task

    async def test_id_and_created_at_are_immutable(self, task_store: TaskStore):
        task = await task_store.create("x")

        updated = await task_store.update(task.id, TaskPatch(title="y", is_done=True))

        assert updated.id == task.id
        assert updated.created_at == task.created_at

    async def test_unknown_id(self, task_store: TaskStore):
        with pytest.raises(NotFoundError) as exc_info:
            await task_store.update(999, TaskPatch(is_done=True))
        assert exc_info.value.task_id == 999

    async def test_blank_title_rejected(self, task_store: TaskStore):
        task = await task_store.create("keep me")

        with pytest.raises(ValidationError):
            await task_store.update(task.id, TaskPatch(title="  "))

        assert (await task_store.get(task.id)).title == "keep me"


class TestDelete:
    async def test_delete_returns_row_and_removes_it(self, task_store: TaskStore):
        task = await task_store.create("gone soon")

        deleted = await task_store.delete(task.id)

        assert deleted == task
        assert await task_store.list() == []

    async def test_second_delete_fails(self, task_store: TaskStore):
        task = await task_store.create("once")
        await task_store.delete(task.id)

        with pytest.raises(NotFoundError):
            await task_store.delete(task.id)

    async def test_delete_all_returns_count(self, task_store: TaskStore):
        await task_store.create("a")
        await task_store.create("b")

        assert await task_store.delete_all() == 2
        assert await task_store.list() == []

    async def test_delete_all_on_empty_store(self, task_store: TaskStore):
        assert await task_store.delete_all() == 0
        assert await task_store.delete_all() == 0
        assert await task_store.list() == []


class TestGetAndCount:
    async def test_get(self, task_store: TaskStore):
        task = await task_store.create("find me")
        assert await task_store.get(task.id) == task

    async def test_get_unknown(self, task_store: TaskStore):
        with pytest.raises(NotFoundError):
            await task_store.get(42)

    @pytest.mark.parametrize("task_id", [2**63, -(2**63) - 1])
    async def test_get_out_of_range_id(self, task_store: TaskStore, task_id):
        with pytest.raises(NotFoundError):
            await task_store.get(task_id)

    async def test_count(self, task_store: TaskStore):
        assert await task_store.count() == 0
        await task_store.create("a")
        assert await task_store.count() == 1
