"""
Undo/redo over (AppState, History) pairs.

Snapshot based: `past` and `future` hold whole states, never events. Each
operation returns a new Transition and leaves its arguments untouched, so
the caller simply replaces the pair it holds:

    state, history = dispatch(state, history, AddTodo(text="buy milk"))
    state, history = undo(state, history)
    state, history = redo(state, history)
"""
from __future__ import annotations
from typing import List, Optional

from .clone import clone
from .commands import Command
from .draft import apply
from .model import AppState, History, Transition
from .reducer import Clock, IdFactory, reduce


def dispatch(
    state: AppState,
    history: History,
    cmd: Command,
    *,
    clock: Optional[Clock] = None,
    id_factory: Optional[IdFactory] = None,
) -> Transition:
    """Record the pre-event state in `past`, drop the redo branch, reduce."""
    def record(h: History) -> None:
        h.past.append(clone(state))
        h.future.clear()

    new_history = apply(history, record)
    new_state = reduce(state, cmd, clock=clock, id_factory=id_factory)
    return Transition(new_state, new_history)


def undo(state: AppState, history: History) -> Transition:
    """Step back one snapshot. Empty `past` is a no-op, not an error."""
    if not history.past:
        return Transition(state, history)
    popped: List[AppState] = []

    def step_back(h: History) -> None:
        popped.append(h.past.pop())
        h.future.insert(0, clone(state))

    new_history = apply(history, step_back)
    return Transition(popped[0], new_history)


def redo(state: AppState, history: History) -> Transition:
    """Step forward one snapshot. Empty `future` is a no-op, not an error."""
    if not history.future:
        return Transition(state, history)
    popped: List[AppState] = []

    def step_forward(h: History) -> None:
        popped.append(h.future.pop(0))
        h.past.append(clone(state))

    new_history = apply(history, step_forward)
    return Transition(popped[0], new_history)


def can_undo(history: History) -> bool:
    return bool(history.past)


def can_redo(history: History) -> bool:
    return bool(history.future)
