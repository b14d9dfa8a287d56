from __future__ import annotations
from typing import Callable, TypeVar

from .clone import clone

T = TypeVar("T")


def apply(value: T, mutate: Callable[[T], None]) -> T:
    """
    Clone `value`, let `mutate` edit the clone in place, return the clone.

    The only way state gets changed. `value` itself is never touched; if
    `mutate` raises, the half-edited draft is dropped and the error propagates.
    """
    draft = clone(value)
    mutate(draft)
    return draft
