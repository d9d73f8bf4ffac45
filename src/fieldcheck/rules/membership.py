"""
Membership rule: ``one_of(*values)``.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from fieldcheck.utilities.reflection import indirect, is_empty

from .base import RuleError


def _format_value(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return format_elements(value)
    return str(value)


def format_elements(values: tuple[Any, ...] | list[Any]) -> str:
    """Render values space-separated in brackets: ``[1 2]``, ``[a b]``, ``[]``."""
    return "[" + " ".join(_format_value(value) for value in values) + "]"


@dataclass(frozen=True)
class InRule:
    """Require a present value to equal one of ``elements``."""

    elements: tuple[Any, ...] = ()
    message: str = "in"

    def validate(self, value: Any) -> RuleError | None:
        inner, is_nil = indirect(value)
        if is_nil or is_empty(inner):
            return None
        for element in self.elements:
            # bool and non-bool values never match.
            if isinstance(element, bool) != isinstance(inner, bool):
                continue
            if element == inner:
                return None
        return RuleError(f"{self.message}|{format_elements(self.elements)}", value=value)

    def error(self, message: str) -> InRule:
        return dataclasses.replace(self, message=message)


def one_of(*values: Any) -> InRule:
    """Build a rule that accepts only the given values.

    Values are compared with ``==``; a bool only matches a bool.
    """
    return InRule(elements=tuple(values))


__all__ = ["InRule", "format_elements", "one_of"]
