"""
Deep, independent copies of state values.

Every kind that may live inside an AppState/History graph has its own copy
rule registered below. Anything without a rule is rejected with
UnsupportedValueKind instead of being passed through, so a snapshot can never
end up sharing a mutable object with the live state.
"""
from __future__ import annotations
from datetime import date, datetime, time, timedelta
from enum import Enum
from functools import singledispatch
from typing import Any

from .errors import UnsupportedValueKind
from .model import AppState, History, Todo, UserProfile


@singledispatch
def clone(value: Any) -> Any:
    raise UnsupportedValueKind(type(value))


# --- immutable scalars: the value is its own copy ---

@clone.register(type(None))
@clone.register(bool)
@clone.register(int)
@clone.register(float)
@clone.register(complex)
@clone.register(str)
@clone.register(bytes)
@clone.register(Enum)
def _clone_scalar(value):
    return value


@clone.register(datetime)
@clone.register(date)
@clone.register(time)
@clone.register(timedelta)
def _clone_temporal(value):
    # date/time objects are immutable; sharing one is copying by value
    return value


# --- containers ---

@clone.register(list)
def _clone_list(value: list) -> list:
    return [clone(item) for item in value]


@clone.register(tuple)
def _clone_tuple(value: tuple) -> tuple:
    return tuple(clone(item) for item in value)


@clone.register(set)
def _clone_set(value: set) -> set:
    return {clone(item) for item in value}


@clone.register(frozenset)
def _clone_frozenset(value: frozenset) -> frozenset:
    return frozenset(clone(item) for item in value)


@clone.register(dict)
def _clone_dict(value: dict) -> dict:
    return {clone(k): clone(v) for k, v in value.items()}


# --- entities ---

@clone.register(Todo)
def _clone_todo(value: Todo) -> Todo:
    return Todo(
        id=clone(value.id),
        text=clone(value.text),
        completed=clone(value.completed),
        created_at=clone(value.created_at),
    )


@clone.register(UserProfile)
def _clone_user(value: UserProfile) -> UserProfile:
    return UserProfile(name=clone(value.name), preferences=clone(value.preferences))


@clone.register(AppState)
def _clone_state(value: AppState) -> AppState:
    return AppState(
        todos=clone(value.todos),
        filter=clone(value.filter),
        user=clone(value.user),
        last_updated=clone(value.last_updated),
    )


@clone.register(History)
def _clone_history(value: History) -> History:
    return History(
        past=clone(value.past),
        future=clone(value.future),
    )
