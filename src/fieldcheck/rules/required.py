"""
Presence rules: ``REQUIRED`` and ``NIL_OR_NOT_EMPTY``.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from fieldcheck.utilities.reflection import indirect, is_empty

from .base import RuleError


@dataclass(frozen=True)
class RequiredRule:
    """Fail on empty values, and on absent ones unless ``skip_nil`` is set."""

    message: str = "required"
    skip_nil: bool = False

    def validate(self, value: Any) -> RuleError | None:
        inner, is_nil = indirect(value)
        if is_nil:
            if self.skip_nil:
                return None
            return RuleError(self.message, value=value)
        if is_empty(inner):
            return RuleError(self.message, value=value)
        return None

    def error(self, message: str) -> RequiredRule:
        return dataclasses.replace(self, message=message)


# Rejects both missing and present-but-empty values.
REQUIRED = RequiredRule("required", skip_nil=False)

# Accepts a missing value but rejects one that is present and empty.
NIL_OR_NOT_EMPTY = RequiredRule("required", skip_nil=True)


__all__ = ["RequiredRule", "REQUIRED", "NIL_OR_NOT_EMPTY"]
