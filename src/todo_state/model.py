from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional, Union


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Filter(str, Enum):
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"


@dataclass
class Todo:
    id: str
    text: str
    completed: bool = False
    created_at: datetime = field(default_factory=utcnow)


def _default_preferences() -> Dict[str, Any]:
    return {"theme": "light"}


@dataclass
class UserProfile:
    name: str = "Guest"
    preferences: Dict[str, Any] = field(default_factory=_default_preferences)


@dataclass
class AppState:
    todos: List[Todo] = field(default_factory=list)
    # Filter member, or whatever raw value a SetFilter carried
    filter: Union[Filter, str] = Filter.ALL
    user: UserProfile = field(default_factory=UserProfile)
    last_updated: datetime = field(default_factory=utcnow)

    def find_todo(self, todo_id: Any) -> Optional[Todo]:
        """Lookup by id; O(n) but lists are small."""
        for t in self.todos:
            if t.id == todo_id:
                return t
        return None


@dataclass
class History:
    past: List[AppState] = field(default_factory=list)    # oldest first; last = top
    future: List[AppState] = field(default_factory=list)  # index 0 = next redo


class Transition(NamedTuple):
    state: AppState
    history: History


def coerce_filter(value: Any) -> Any:
    """Filter member for a matching value, the value itself otherwise."""
    try:
        return Filter(value)
    except ValueError:
        return value
