from __future__ import annotations
from datetime import datetime
from typing import Callable, Optional
import logging

from .commands import Command
from .model import utcnow

Observer = Callable[[Command], None]


class ActionLogger:
    """
    Observer that logs every event a Store is about to dispatch.

        store = Store(observers=[ActionLogger("TODO_APP")])
    """

    def __init__(
        self,
        prefix: str = "TODO_APP",
        logger: Optional[logging.Logger] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.prefix = prefix
        self.logger = logger or logging.getLogger(__name__)
        self.clock = clock

    def __call__(self, cmd: Command) -> None:
        self.logger.info(
            "[%s] %s - Action: kind=%s payload=%r",
            self.prefix, self.clock().isoformat(), cmd.kind, cmd.payload,
        )
