from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging

from .commands import Command
from .config import initial_history, initial_state
from .history import can_redo, can_undo, dispatch, redo, undo
from .model import AppState, History, Todo
from .observers import ActionLogger, Observer
from .queries import filtered_todos
from .reducer import Clock, IdFactory

logger = logging.getLogger(__name__)


@dataclass
class Store:
    """
    Holder for one (state, history) pair, owned by the embedding app.

    Usage:
        store = Store(observers=[ActionLogger()])
        store.apply(AddTodo(text="buy milk"))
        store.undo(); store.redo()

    Every call replaces `state` and `history` with the pair returned by the
    pure history functions; nothing is edited in place. Not thread-safe:
    callers serialize access.
    """
    state: AppState = field(default_factory=initial_state)
    history: History = field(default_factory=initial_history)
    observers: List[Observer] = field(default_factory=list)
    clock: Optional[Clock] = None
    id_factory: Optional[IdFactory] = None

    @classmethod
    def from_config(cls, config: Dict[str, Any], **kwargs: Any) -> "Store":
        """Initial pair from a loaded config; ActionLogger tagged with its prefix."""
        prefix = (config.get("logging") or {}).get("prefix", "TODO_APP")
        observers = kwargs.pop("observers", None)
        if observers is None:
            observers = [ActionLogger(prefix)]
        return cls(
            state=initial_state(config, clock=kwargs.get("clock")),
            observers=observers,
            **kwargs,
        )

    def apply(self, cmd: Command) -> AppState:
        for observe in self.observers:
            observe(cmd)
        self.state, self.history = dispatch(
            self.state, self.history, cmd,
            clock=self.clock, id_factory=self.id_factory,
        )
        return self.state

    def undo(self) -> AppState:
        if not can_undo(self.history):
            logger.debug("undo: nothing to undo")
        self.state, self.history = undo(self.state, self.history)
        return self.state

    def redo(self) -> AppState:
        if not can_redo(self.history):
            logger.debug("redo: nothing to redo")
        self.state, self.history = redo(self.state, self.history)
        return self.state

    def can_undo(self) -> bool:
        return can_undo(self.history)

    def can_redo(self) -> bool:
        return can_redo(self.history)

    def clear_history(self) -> None:
        self.history = initial_history()

    def filtered_todos(self, filter_override: Optional[Any] = None) -> List[Todo]:
        return filtered_todos(self.state, filter_override)
