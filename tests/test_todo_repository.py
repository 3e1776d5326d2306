"""Tests for the todo store operations."""

from __future__ import annotations

import pytest

from todoapi.models.domain.todo import to_view
from todoapi.models.entities.todo import Todo


@pytest.mark.asyncio
async def test_insert_assigns_increasing_ids(repository):
    first = await repository.insert("A", False)
    second = await repository.insert("B", True)

    assert first.id == 1
    assert second.id == 2
    assert second.name == "B"
    assert second.is_complete is True


@pytest.mark.asyncio
async def test_find_by_id_missing_returns_none(repository):
    assert await repository.find_by_id(42) is None


@pytest.mark.asyncio
async def test_list_all_in_insertion_order(repository):
    for name in ("one", "two", "three"):
        await repository.insert(name, False)

    assert [todo.name for todo in await repository.list_all()] == ["one", "two", "three"]


@pytest.mark.asyncio
async def test_list_where_complete_is_subset_of_list_all(repository):
    flags = [True, False, True, False, False, True]
    for index, flag in enumerate(flags):
        await repository.insert(f"todo-{index}", flag)

    all_todos = await repository.list_all()
    complete = await repository.list_where_complete()

    assert [todo.id for todo in complete] == [todo.id for todo in all_todos if todo.is_complete]
    assert all(todo.is_complete for todo in complete)


@pytest.mark.asyncio
async def test_update_replaces_name_and_flag_but_keeps_secret(repository, db_session):
    db_session.add(Todo(name="walk dog", is_complete=False, secret="hunter2"))
    db_session.commit()

    assert await repository.update(1, "walk cat", True) is True

    todo = await repository.find_by_id(1)
    assert todo.id == 1
    assert todo.name == "walk cat"
    assert todo.is_complete is True
    assert todo.secret == "hunter2"


@pytest.mark.asyncio
async def test_update_missing_does_not_change_collection(repository):
    await repository.insert("A", False)

    assert await repository.update(99, "B", True) is False

    todos = await repository.list_all()
    assert [(todo.id, todo.name, todo.is_complete) for todo in todos] == [(1, "A", False)]


@pytest.mark.asyncio
async def test_delete_removes_record(repository):
    todo = await repository.insert("A", False)

    assert await repository.delete(todo.id) is True
    assert await repository.find_by_id(todo.id) is None
    assert await repository.delete(todo.id) is False


@pytest.mark.asyncio
async def test_ids_are_not_reused_after_delete(repository):
    await repository.insert("A", False)
    second = await repository.insert("B", False)
    await repository.delete(second.id)

    third = await repository.insert("C", False)

    assert third.id == 3


def test_to_view_drops_secret():
    todo = Todo(id=7, name="pay rent", is_complete=True, secret="account-number")

    view = to_view(todo)

    assert view.model_dump(by_alias=True) == {"id": 7, "name": "pay rent", "isComplete": True}
    assert "secret" not in view.model_dump_json()
