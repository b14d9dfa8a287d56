from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, Mapping, Optional, Union

from .model import Filter, UserProfile


class Command:
    """Marker base class for all events (intents) fed to the reducer."""
    kind: ClassVar[str] = ""

    @property
    def payload(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class AddTodo(Command):
    """Append a new todo. Caller trims and rejects empty text."""
    kind: ClassVar[str] = "ADD_TODO"
    text: str = ""


@dataclass
class ToggleTodo(Command):
    kind: ClassVar[str] = "TOGGLE_TODO"
    id: Any = None


@dataclass
class DeleteTodo(Command):
    kind: ClassVar[str] = "DELETE_TODO"
    id: Any = None


@dataclass
class UpdateTodo(Command):
    kind: ClassVar[str] = "UPDATE_TODO"
    id: Any = None
    text: str = ""


@dataclass
class SetFilter(Command):
    kind: ClassVar[str] = "SET_FILTER"
    filter: Union[Filter, str] = Filter.ALL


@dataclass
class UpdateUser(Command):
    """
    Partial profile as a mapping; top-level keys are merged, `preferences`
    replaced whole. A UserProfile instance replaces every field.
    """
    kind: ClassVar[str] = "UPDATE_USER"
    user: Union[Dict[str, Any], UserProfile] = field(default_factory=dict)


@dataclass
class ClearCompleted(Command):
    kind: ClassVar[str] = "CLEAR_COMPLETED"


@dataclass
class UnknownEvent(Command):
    """Anything make_event() could not map to a known kind. Reduces to a no-op."""
    name: str
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> str:  # type: ignore[override]
        return self.name

    @property
    def payload(self) -> Dict[str, Any]:
        return dict(self.data)


EVENT_TYPES: Dict[str, type] = {
    cls.kind: cls
    for cls in (AddTodo, ToggleTodo, DeleteTodo, UpdateTodo, SetFilter, UpdateUser, ClearCompleted)
}


def make_event(kind: str, payload: Optional[Mapping[str, Any]] = None) -> Command:
    """
    Build the event for a wire kind tag ("ADD_TODO", ...) and its payload.

    No validation: payload keys that the kind does not carry are dropped and
    unknown kinds come back as UnknownEvent rather than an error.
    """
    payload = dict(payload or {})
    cls = EVENT_TYPES.get(kind)
    if cls is None:
        return UnknownEvent(name=kind, data=payload)
    names = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in payload.items() if k in names})


def _creator(kind: str):
    def create(payload: Optional[Mapping[str, Any]] = None) -> Command:
        return make_event(kind, payload)
    create.__name__ = kind.lower()
    create.__doc__ = f"Build a {kind} event from its payload mapping."
    return create


add_todo = _creator(AddTodo.kind)
toggle_todo = _creator(ToggleTodo.kind)
delete_todo = _creator(DeleteTodo.kind)
update_todo = _creator(UpdateTodo.kind)
set_filter = _creator(SetFilter.kind)
update_user = _creator(UpdateUser.kind)
clear_completed = _creator(ClearCompleted.kind)
