"""Tagged lookup results.

``locate()`` returns ``Ok(action)`` or ``Err(failure)``. Both are frozen
and compare by value, so results can be asserted on directly::

    match locator.locate("player", "update"):
        case Ok(action):
            action.run(state)
        case Err(failure):
            log.warning(failure.message)

Chaining mirrors the usual result helpers::

    locator.locate("player", "update").map(lambda a: a.run(state))
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

from locator.errors import LocateFailure, LookupFailed


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful lookup holding its value."""

    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def map[U](self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def bind[U](self, fn: Callable[[T], "Ok[U] | Err"]) -> "Ok[U] | Err":
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    """A failed lookup holding the miss that caused it."""

    error: LocateFailure

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def map(self, fn: Callable[[Any], Any]) -> "Err":
        return self

    def bind(self, fn: Callable[[Any], Any]) -> "Err":
        return self

    def unwrap(self) -> Any:
        """Raise ``LookupFailed`` carrying the miss."""
        raise LookupFailed(self.error)

    def unwrap_or[D](self, default: D) -> D:
        return default

    @property
    def message(self) -> str:
        return self.error.message
