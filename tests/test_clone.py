from datetime import datetime, timezone
import threading

import pytest
from todo_state import (
    AppState, History, Todo, UserProfile, Filter,
    clone, apply, UnsupportedValueKind,
)


def _sample_state():
    return AppState(
        todos=[Todo(id="t1", text="buy milk", created_at=datetime(2024, 1, 1, tzinfo=timezone.utc))],
        filter=Filter.PENDING,
        user=UserProfile(name="Ann", preferences={"theme": "dark", "tags": ["a", "b"]}),
        last_updated=datetime(2024, 1, 2, tzinfo=timezone.utc),
    )


def test_clone_state_is_equal_but_independent():
    s = _sample_state()
    c = clone(s)
    assert c == s
    assert c is not s
    assert c.todos is not s.todos
    assert c.todos[0] is not s.todos[0]
    assert c.user is not s.user
    assert c.user.preferences["tags"] is not s.user.preferences["tags"]

    c.todos[0].completed = True
    c.todos.append(Todo(id="t2", text="x"))
    c.user.preferences["tags"].append("c")
    c.user.name = "Bob"

    assert s == _sample_state()


def test_clone_history_copies_every_snapshot():
    s = _sample_state()
    h = History(past=[s], future=[clone(s)])
    c = clone(h)
    assert c == h
    assert c.past[0] is not s
    c.past[0].todos.clear()
    assert len(h.past[0].todos) == 1


def test_clone_plain_containers():
    value = {"a": [1, (2, [3])], "b": {"c": {4, 5}}, "d": frozenset({"x"})}
    c = clone(value)
    assert c == value
    c["a"][1][1].append(9)
    assert value["a"][1][1] == [3]


def test_clone_scalars_returned_as_is():
    stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
    for v in (None, True, 3, 2.5, "s", b"b", stamp, Filter.ALL):
        assert clone(v) is v


@pytest.mark.parametrize("value", [lambda: None, object(), threading.Lock()])
def test_clone_rejects_unsupported_values(value):
    with pytest.raises(UnsupportedValueKind):
        clone(value)


def test_clone_rejects_unsupported_value_nested_in_state():
    s = _sample_state()
    s.user.preferences["callback"] = print
    with pytest.raises(UnsupportedValueKind) as exc:
        clone(s)
    assert "builtin_function_or_method" in str(exc.value)


def test_apply_edits_only_the_draft():
    s = _sample_state()
    out = apply(s, lambda d: d.todos.clear())
    assert out.todos == []
    assert len(s.todos) == 1


def test_apply_propagates_mutation_failure():
    s = _sample_state()

    def boom(d):
        d.todos.clear()
        raise RuntimeError("fail")

    with pytest.raises(RuntimeError):
        apply(s, boom)
    assert s == _sample_state()


def test_clone_todo_copies_non_scalar_text():
    t = Todo(id="a", text=["milk"], created_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
    c = clone(t)
    assert c == t
    c.text.append("eggs")
    assert t.text == ["milk"]


def test_clone_rejects_callable_in_entity_fields():
    with pytest.raises(UnsupportedValueKind):
        clone(Todo(id="a", text=print))
    with pytest.raises(UnsupportedValueKind):
        clone(UserProfile(name=lambda: "Ann"))
    with pytest.raises(UnsupportedValueKind):
        clone(AppState(last_updated=object()))
