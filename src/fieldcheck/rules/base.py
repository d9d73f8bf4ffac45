"""
Rule protocol and the tagged error value every rule returns.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

R = TypeVar("R", bound="Rule")


class RuleError(ValueError):
    """ValueError subclass that carries the failure tag and the offending value.

    ``str(error)`` is the tag. Two rule errors are equal when their tags are.
    """

    def __init__(self, message: str, *, value: Any | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RuleError):
            return self.message == other.message
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.message)

    def __repr__(self) -> str:
        return f"RuleError({self.message!r})"


@runtime_checkable
class Rule(Protocol):
    """A reusable validation capability applied to a single value."""

    def validate(self, value: Any) -> RuleError | None:
        """Return None when ``value`` passes, else a tagged ``RuleError``."""
        ...

    def error(self: R, message: str) -> R:
        """Return a copy of the rule that reports ``message`` on failure."""
        ...


__all__ = ["Rule", "RuleError"]
