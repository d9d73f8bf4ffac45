"""
Validation entry points: apply rules to a value or to the fields of an object.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol, Union, runtime_checkable

from pydantic import BaseModel

from fieldcheck.errors import ConfigurationError, ValidationError, log_error
from fieldcheck.rules.base import Rule, RuleError
from fieldcheck.utilities.logging_patterns import get_logger
from fieldcheck.utilities.reflection import indirect

logger = get_logger(__name__, component="validation")

Error = Union[RuleError, "FieldErrors"]
RuleLike = Union[Rule, Callable[[Any], Union[Error, None]]]
FieldRules = Mapping[str, Union[RuleLike, Sequence[RuleLike]]]

_MISSING = object()


@runtime_checkable
class Validatable(Protocol):
    """A value that knows how to validate itself."""

    def validate(self) -> Error | None: ...


class FieldErrors(dict[str, Error]):
    """Per-field validation errors keyed by field name.

    Values are ``RuleError``s, or nested ``FieldErrors`` for fields that are
    themselves validated field by field.
    """

    def __str__(self) -> str:
        if not self:
            return ""
        parts = []
        for name in sorted(self):
            error = self[name]
            if isinstance(error, FieldErrors):
                parts.append(f"{name}: ({error})")
            else:
                parts.append(f"{name}: {error}")
        return "; ".join(parts) + "."

    def to_dict(self) -> dict[str, Any]:
        """Return the error tags, nesting for nested field errors."""
        return {
            name: error.to_dict() if isinstance(error, FieldErrors) else str(error)
            for name, error in self.items()
        }

    def raise_for_errors(self) -> None:
        """Raise ``ValidationError`` when any field failed."""
        if not self:
            return
        error = ValidationError(f"Validation failed: {self}", errors=self.to_dict())
        log_error(error, level=logging.DEBUG)
        raise error


def _apply(rule: RuleLike, value: Any) -> Error | None:
    if isinstance(rule, Rule):
        return rule.validate(value)
    if callable(rule):
        return rule(value)
    raise ConfigurationError(f"Unsupported rule type: {type(rule)!r}")


def validate(value: Any, *rules: RuleLike) -> Error | None:
    """Validate ``value`` against ``rules`` in order, stopping at the first error.

    Rules may be ``Rule`` objects or plain callables returning an error or
    None. When every rule passes and the value (after unwrapping one ``Ref``)
    is ``Validatable``, its own ``validate()`` result is returned.
    """
    for rule in rules:
        error = _apply(rule, value)
        if error is not None:
            return error

    inner, is_nil = indirect(value)
    if is_nil or isinstance(inner, (Rule, BaseModel, type)):
        return None
    if isinstance(inner, Validatable):
        return inner.validate() or None
    return None


def _read_field(target: Any, name: str) -> Any:
    if isinstance(target, Mapping):
        return target.get(name)
    value = getattr(target, name, _MISSING)
    if value is _MISSING:
        raise ConfigurationError(
            f"Field {name!r} not found on {type(target).__name__}", config_key=name
        )
    return value


def _as_rules(spec: RuleLike | Sequence[RuleLike]) -> tuple[RuleLike, ...]:
    if isinstance(spec, Rule) or callable(spec):
        return (spec,)
    return tuple(spec)


def validate_fields(obj: Any, field_rules: FieldRules) -> FieldErrors:
    """Validate selected fields of a mapping or object.

    ``field_rules`` maps field names to a rule or a sequence of rules. Fields
    are read by key from mappings (missing keys are treated as absent) and
    by attribute otherwise. Each field stops at its first error; the returned
    ``FieldErrors`` is empty when everything passed.
    """
    target, is_nil = indirect(obj)
    if is_nil:
        raise ConfigurationError("validate_fields requires an object or mapping, got None")

    errors = FieldErrors()
    for name, spec in field_rules.items():
        value = _read_field(target, name)
        error = validate(value, *_as_rules(spec))
        if error is not None:
            logger.debug("Field %s failed validation: %s", name, error, field=name)
            errors[name] = error
    return errors


__all__ = [
    "Error",
    "FieldErrors",
    "FieldRules",
    "RuleLike",
    "Validatable",
    "validate",
    "validate_fields",
]
