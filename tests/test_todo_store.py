from __future__ import annotations

import threading

from app.todo.store import TodoStore


def _store_with(*completed: bool) -> tuple[TodoStore, list[str]]:
    store = TodoStore()
    ids = []
    for i, done in enumerate(completed):
        todo_id = store.add(f"todo-{i}")
        if done:
            store.toggle_one(todo_id)
        ids.append(todo_id)
    return store, ids


def test_add_appends_active_todo_with_new_id() -> None:
    store, ids = _store_with(False, True)

    new_id = store.add("x")

    todos = store.list("all")
    assert [t.id for t in todos] == [*ids, new_id]
    assert new_id not in ids
    assert todos[-1].content == "x"
    assert todos[-1].completed is False


def test_ids_stay_unique_across_add_and_remove() -> None:
    store = TodoStore()
    seen = set()
    for i in range(20):
        todo_id = store.add(str(i))
        assert todo_id not in seen
        seen.add(todo_id)
        if i % 3 == 0:
            assert store.remove(todo_id) is True

    ids = [t.id for t in store.list()]
    assert len(ids) == len(set(ids))


def test_remove_missing_id_leaves_store_untouched() -> None:
    store, _ = _store_with(False, True, False)
    before = [t.model_dump() for t in store.list()]

    assert store.remove("missing") is False

    assert [t.model_dump() for t in store.list()] == before


def test_remove_keeps_order_of_survivors() -> None:
    store, ids = _store_with(False, False, False)

    assert store.remove(ids[1]) is True

    assert [t.id for t in store.list()] == [ids[0], ids[2]]


def test_update_changes_only_content() -> None:
    store, ids = _store_with(True)

    assert store.update(ids[0], "new") is True

    todo = store.list()[0]
    assert (todo.id, todo.content, todo.completed) == (ids[0], "new", True)
    assert store.update("missing", "new") is False


def test_toggle_one_twice_restores_original() -> None:
    store, ids = _store_with(False)

    assert store.toggle_one(ids[0]) is True
    assert store.list()[0].completed is True
    assert store.toggle_one(ids[0]) is True
    assert store.list()[0].completed is False
    assert store.toggle_one("missing") is False


def test_toggle_all_uncompletes_when_everything_is_done() -> None:
    store, _ = _store_with(True, True)

    store.toggle_all()

    assert [t.completed for t in store.list()] == [False, False]


def test_toggle_all_completes_when_anything_is_active() -> None:
    store, _ = _store_with(True, False)

    store.toggle_all()

    assert [t.completed for t in store.list()] == [True, True]


def test_toggle_all_on_empty_store() -> None:
    store = TodoStore()

    store.toggle_all()

    assert store.list() == []


def test_clear_completed_keeps_active_in_order() -> None:
    store, ids = _store_with(False, True, False)

    store.clear_completed()

    assert [t.id for t in store.list()] == [ids[0], ids[2]]


def test_list_filters() -> None:
    store, ids = _store_with(False, True, False, True)

    assert [t.id for t in store.list("active")] == [ids[0], ids[2]]
    assert [t.id for t in store.list("completed")] == [ids[1], ids[3]]
    assert [t.id for t in store.list("all")] == ids
    assert store.list("bogus") == store.list("all")
    assert store.list(None) == store.list("all")


def test_list_returns_copies() -> None:
    store, ids = _store_with(False)

    store.list()[0].completed = True

    assert store.list()[0].completed is False


def test_concurrent_adds_do_not_lose_updates() -> None:
    store = TodoStore()
    n = 50
    results: list[str] = []
    results_lock = threading.Lock()
    barrier = threading.Barrier(n)

    def worker(i: int) -> None:
        barrier.wait()
        todo_id = store.add(f"todo-{i}")
        with results_lock:
            results.append(todo_id)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(set(results)) == n
    assert len(store) == n
    assert {t.id for t in store.list()} == set(results)
