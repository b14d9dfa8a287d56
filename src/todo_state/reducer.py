from __future__ import annotations
from dataclasses import fields
from datetime import datetime
from itertools import count
from typing import Any, Callable, Dict, Optional
import time

from .model import AppState, Todo, UserProfile, coerce_filter, utcnow
from .commands import (
    Command, AddTodo, ToggleTodo, DeleteTodo, UpdateTodo,
    SetFilter, UpdateUser, ClearCompleted,
)
from .clone import clone
from .draft import apply

Clock = Callable[[], datetime]
IdFactory = Callable[[], Any]

_USER_FIELDS = frozenset(f.name for f in fields(UserProfile))


def reduce(
    state: AppState,
    cmd: Command,
    *,
    clock: Optional[Clock] = None,
    id_factory: Optional[IdFactory] = None,
) -> AppState:
    """
    Pure state transformer. Never mutates the input state.

    `clock` and `id_factory` are the only outside inputs (timestamps and new
    todo ids); both default to the real ones. Targets that do not exist
    (toggle/update/delete of an unknown id) leave the state as it was,
    `last_updated` included. Unknown commands return `state` itself.
    """
    now = clock or utcnow
    new_id = id_factory or _new_id

    # --- Todos ---
    if isinstance(cmd, AddTodo):
        def add(s: AppState) -> None:
            stamp = now()
            s.todos.append(Todo(id=new_id(), text=clone(cmd.text), completed=False, created_at=stamp))
            s.last_updated = stamp
        return apply(state, add)

    if isinstance(cmd, ToggleTodo):
        def toggle(s: AppState) -> None:
            todo = s.find_todo(cmd.id)
            if todo is None:
                return
            todo.completed = not todo.completed
            s.last_updated = now()
        return apply(state, toggle)

    if isinstance(cmd, DeleteTodo):
        def delete(s: AppState) -> None:
            if s.find_todo(cmd.id) is None:
                return
            s.todos = [t for t in s.todos if t.id != cmd.id]
            s.last_updated = now()
        return apply(state, delete)

    if isinstance(cmd, UpdateTodo):
        def update(s: AppState) -> None:
            todo = s.find_todo(cmd.id)
            if todo is None:
                return
            todo.text = clone(cmd.text)
            s.last_updated = now()
        return apply(state, update)

    if isinstance(cmd, ClearCompleted):
        def clear(s: AppState) -> None:
            s.todos = [t for t in s.todos if not t.completed]
            s.last_updated = now()
        return apply(state, clear)

    # --- View filter (not validated; queries treat unknown values as "all") ---
    if isinstance(cmd, SetFilter):
        def set_filter(s: AppState) -> None:
            s.filter = coerce_filter(cmd.filter)
            s.last_updated = now()
        return apply(state, set_filter)

    # --- User profile: shallow merge ---
    if isinstance(cmd, UpdateUser):
        def merge(s: AppState) -> None:
            for key, value in _user_partial(cmd.user).items():
                if key in _USER_FIELDS:
                    setattr(s.user, key, clone(value))
            s.last_updated = now()
        return apply(state, merge)

    # Unhandled command → no-op, same object back
    return state


# ----- helpers -----

def _user_partial(user: Any) -> Dict[str, Any]:
    # a whole UserProfile counts as a partial that names every field
    if isinstance(user, UserProfile):
        return {name: getattr(user, name) for name in _USER_FIELDS}
    return dict(user or {})


_id_counter = count(1)


def _new_id(prefix: str = "todo") -> str:
    return f"{prefix}-{next(_id_counter)}-{int(time.time()*1000)%1_000_000}"
