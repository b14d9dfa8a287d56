from __future__ import annotations
from typing import Any, List, Optional

from .model import AppState, Filter, Todo


def filtered_todos(state: AppState, filter_override: Optional[Any] = None) -> List[Todo]:
    """
    Todos visible under `filter_override`, or under `state.filter` when none
    is given. Unrecognized filter values show everything. Read-only: the
    returned list is new, its items belong to `state` and must not be edited.
    """
    current = filter_override or state.filter or Filter.ALL
    if current == Filter.COMPLETED:
        return [t for t in state.todos if t.completed]
    if current == Filter.PENDING:
        return [t for t in state.todos if not t.completed]
    return list(state.todos)


def total_count(state: AppState) -> int:
    return len(state.todos)


def completed_count(state: AppState) -> int:
    return sum(1 for t in state.todos if t.completed)


def pending_count(state: AppState) -> int:
    return total_count(state) - completed_count(state)
