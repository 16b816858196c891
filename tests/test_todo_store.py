# tests/test_todo_store.py

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from todo_repl.todos.models import MAX_TODO_ID, Todo
from todo_repl.todos.store import TodoNotFoundError, TodoStore


def test_create_returns_increasing_unique_ids(store: TodoStore) -> None:
    ids = [store.create(f"item {i}") for i in range(5)]
    assert ids == [0, 1, 2, 3, 4]
    assert store.next_id == 5


def test_ids_are_not_reused_after_delete(store: TodoStore) -> None:
    first = store.create("a")
    store.delete(first)
    second = store.create("b")
    assert second == first + 1
    assert [t.id for t in store.list()] == [second]


def test_custom_start_id() -> None:
    store = TodoStore(next_id=42)
    assert store.create("x") == 42
    assert store.next_id == 43


@pytest.mark.parametrize("next_id", [-1, MAX_TODO_ID + 1])
def test_out_of_range_start_id_rejected(next_id: int) -> None:
    with pytest.raises(ValueError):
        TodoStore(next_id=next_id)


def test_complete_is_idempotent(store: TodoStore) -> None:
    tid = store.create("Buy milk")
    assert store.complete(tid).completed is True
    assert store.complete(tid).completed is True


def test_delete_then_lookup_raises(store: TodoStore) -> None:
    tid = store.create("gone")
    removed = store.delete(tid)
    assert removed == Todo(id=tid, title="gone", completed=False)
    assert len(store) == 0

    with pytest.raises(TodoNotFoundError):
        store.edit(tid, "again")
    with pytest.raises(TodoNotFoundError):
        store.complete(tid)
    with pytest.raises(TodoNotFoundError) as exc:
        store.delete(tid)
    assert exc.value.todo_id == tid


def test_edit_changes_only_title(store: TodoStore) -> None:
    tid = store.create("old")
    store.complete(tid)
    todo = store.edit(tid, "new")
    assert todo == Todo(id=tid, title="new", completed=True)


def test_list_keeps_creation_order_and_counts(store: TodoStore) -> None:
    ids = [store.create(t) for t in ("a", "b", "c", "d")]
    store.delete(ids[1])
    store.complete(ids[3])
    store.edit(ids[0], "A")
    assert [t.id for t in store.list()] == [ids[0], ids[2], ids[3]]
    assert len(store.list()) == 4 - 1


def test_list_is_a_snapshot(store: TodoStore) -> None:
    store.create("a")
    snapshot = store.list()
    store.create("b")
    assert len(snapshot) == 1
    assert isinstance(snapshot, tuple)


def test_complete_on_empty_store_raises(store: TodoStore) -> None:
    with pytest.raises(TodoNotFoundError):
        store.complete(99)


def test_reference_scenario(store: TodoStore) -> None:
    assert store.create("Buy milk") == 0
    assert store.create("Walk dog") == 1
    assert store.complete(0) == Todo(0, "Buy milk", True)
    assert store.delete(1) == Todo(1, "Walk dog", False)
    assert list(store.list()) == [Todo(0, "Buy milk", True)]

    assert store.edit(0, "Buy oat milk") == Todo(0, "Buy oat milk", True)


def test_returned_items_cannot_change_the_store(store: TodoStore) -> None:
    store.create("a")
    store.create("b")
    done = store.complete(0)

    view = store.list()
    with pytest.raises(FrozenInstanceError):
        view[0].completed = False  # type: ignore[misc]
    with pytest.raises(FrozenInstanceError):
        view[1].id = 0  # type: ignore[misc]
    with pytest.raises(FrozenInstanceError):
        done.title = "changed"  # type: ignore[misc]

    assert store.list() == (Todo(0, "a", True), Todo(1, "b", False))


def test_edit_and_complete_keep_position(store: TodoStore) -> None:
    for title in ("a", "b", "c"):
        store.create(title)
    before = store.list()

    store.edit(1, "B")
    store.complete(1)

    assert before[1] == Todo(1, "b", False)
    assert [t.title for t in store.list()] == ["a", "B", "c"]
    assert store.list()[1].completed is True
