"""
String rules: wrap a ``str -> bool`` predicate with a failure tag.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fieldcheck.errors import FieldcheckError
from fieldcheck.utilities.logging_patterns import get_logger
from fieldcheck.utilities.reflection import indirect

from .base import RuleError

logger = get_logger(__name__, component="rules")

StringPredicate = Callable[[str], bool]


@dataclass(frozen=True)
class StringRule:
    """Apply ``predicate`` to non-empty strings; everything else passes.

    Emptiness is the concern of ``REQUIRED``: absent values and empty
    strings are valid here. Values that are not ``str``, ``bytes`` or
    ``bytearray`` are not applicable and also pass. A predicate that raises
    counts as a failed match, except for ``FieldcheckError``, which propagates.
    """

    predicate: StringPredicate
    message: str

    def validate(self, value: Any) -> RuleError | None:
        inner, is_nil = indirect(value)
        if is_nil:
            return None

        if isinstance(inner, (bytes, bytearray)):
            if not inner:
                return None
            try:
                text = bytes(inner).decode("utf-8")
            except UnicodeDecodeError:
                return RuleError(self.message, value=value)
        elif isinstance(inner, str):
            text = inner
        else:
            return None

        if not text:
            return None

        try:
            matched = self.predicate(text)
        except FieldcheckError:
            raise
        except Exception as exc:
            logger.debug(
                "Predicate for %s raised %s; treating as a failed match",
                self.message,
                type(exc).__name__,
                rule=self.message,
            )
            matched = False

        if matched:
            return None
        return RuleError(self.message, value=value)

    def error(self, message: str) -> StringRule:
        return dataclasses.replace(self, message=message)


def new_string_rule(predicate: StringPredicate, message: str) -> StringRule:
    """Create a rule that validates strings with ``predicate`` and tags failures ``message``."""
    return StringRule(predicate=predicate, message=message)


__all__ = ["StringPredicate", "StringRule", "new_string_rule"]
