import logging

from todo_state import (
    Store, AddTodo, ToggleTodo, UpdateUser, ClearCompleted, Filter, load_config,
)


def test_store_apply_undo_redo(store):
    store.apply(AddTodo(text="a"))
    store.apply(AddTodo(text="b"))
    store.apply(ToggleTodo(id="t1"))
    store.apply(ClearCompleted())

    assert [t.text for t in store.state.todos] == ["b"]

    store.undo()
    assert [t.text for t in store.state.todos] == ["a", "b"]

    store.redo()
    assert [t.text for t in store.state.todos] == ["b"]


def test_store_boundaries_are_noops(store):
    start = store.state
    assert store.undo() is start
    assert store.redo() is start
    assert not store.can_undo() and not store.can_redo()


def test_store_clear_history(store):
    store.apply(AddTodo(text="a"))
    store.undo()
    store.redo()
    store.clear_history()
    assert store.history.past == [] and store.history.future == []
    assert len(store.state.todos) == 1


def test_store_filtered_todos(store):
    store.apply(AddTodo(text="a"))
    store.apply(AddTodo(text="b"))
    store.apply(ToggleTodo(id="t2"))
    assert [t.text for t in store.filtered_todos()] == ["a", "b"]
    assert [t.text for t in store.filtered_todos("completed")] == ["b"]
    assert [t.text for t in store.filtered_todos(Filter.PENDING)] == ["a"]


def test_store_observers_see_events_before_dispatch(store):
    seen = []
    store.observers.append(lambda cmd: seen.append((cmd.kind, len(store.state.todos))))
    store.apply(AddTodo(text="a"))
    store.apply(UpdateUser(user={"name": "Ann"}))
    assert seen == [("ADD_TODO", 0), ("UPDATE_USER", 1)]


def test_store_from_config(tmp_path, caplog):
    cfg_file = tmp_path / "todo.yaml"
    cfg_file.write_text(
        "user:\n  name: Ann\nfilter: pending\nlogging:\n  prefix: MY_LIST\n",
        encoding="utf-8",
    )
    store = Store.from_config(load_config(cfg_file))
    assert store.state.user.name == "Ann"
    assert store.state.user.preferences == {"theme": "light"}
    assert store.state.filter is Filter.PENDING

    with caplog.at_level(logging.INFO, logger="todo_state.observers"):
        store.apply(AddTodo(text="a"))
    assert "[MY_LIST]" in caplog.text
    assert "ADD_TODO" in caplog.text


def test_store_from_config_leaves_logger_levels_alone(tmp_path):
    cfg_file = tmp_path / "todo.yaml"
    cfg_file.write_text("logging:\n  level: DEBUG\n", encoding="utf-8")
    pkg_logger = logging.getLogger("todo_state")
    before = pkg_logger.level
    Store.from_config(load_config(cfg_file))
    assert pkg_logger.level == before
