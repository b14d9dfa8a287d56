"""
Public API for the todo_state package.

Import from here everywhere else, so you can refactor internals freely:
    from todo_state import (
        AppState, Todo, UserProfile, History, Filter, Transition,
        AddTodo, ToggleTodo, DeleteTodo, UpdateTodo, SetFilter, UpdateUser,
        ClearCompleted, make_event,
        reduce, dispatch, undo, redo, filtered_todos, Store
    )
"""
from .model import AppState, Todo, UserProfile, History, Filter, Transition
from .errors import TodoStateError, UnsupportedValueKind, ConfigError
from .clone import clone
from .draft import apply
from .commands import (
    Command, UnknownEvent, EVENT_TYPES, make_event,
    AddTodo, ToggleTodo, DeleteTodo, UpdateTodo, SetFilter, UpdateUser, ClearCompleted,
    add_todo, toggle_todo, delete_todo, update_todo, set_filter, update_user, clear_completed,
)
from .reducer import reduce
from .history import dispatch, undo, redo, can_undo, can_redo
from .queries import filtered_todos, total_count, completed_count, pending_count
from .config import DEFAULT_CONFIG, load_config, initial_state, initial_history
from .observers import ActionLogger
from .store import Store
from .log import setup_logging

__all__ = [
    # model
    "AppState", "Todo", "UserProfile", "History", "Filter", "Transition",
    # errors
    "TodoStateError", "UnsupportedValueKind", "ConfigError",
    # clone & draft
    "clone", "apply",
    # commands
    "Command", "UnknownEvent", "EVENT_TYPES", "make_event",
    "AddTodo", "ToggleTodo", "DeleteTodo", "UpdateTodo", "SetFilter", "UpdateUser", "ClearCompleted",
    "add_todo", "toggle_todo", "delete_todo", "update_todo", "set_filter", "update_user", "clear_completed",
    # reducer, history, queries
    "reduce", "dispatch", "undo", "redo", "can_undo", "can_redo",
    "filtered_todos", "total_count", "completed_count", "pending_count",
    # config, observers, store
    "DEFAULT_CONFIG", "load_config", "initial_state", "initial_history",
    "ActionLogger", "Store", "setup_logging",
]
