"""Adapters that run fieldcheck rules inside pydantic field validation."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from pydantic import AfterValidator

from fieldcheck.validation import RuleLike, validate

T = TypeVar("T")


def check(*rules: RuleLike) -> Callable[[T], T]:
    """Return a pydantic-compatible validator function for ``rules``.

    The function returns the value unchanged when every rule passes and
    raises ``ValueError`` carrying the error tag otherwise, which pydantic
    reports as a field error. Usable with ``@field_validator`` bodies or
    ``AfterValidator``.
    """

    def _check(value: T) -> T:
        error = validate(value, *rules)
        if error is None:
            return value
        if isinstance(error, ValueError):
            raise error
        raise ValueError(str(error))

    return _check


def rule_validator(*rules: RuleLike) -> AfterValidator:
    """Wrap ``rules`` as an ``AfterValidator`` for ``Annotated`` field types.

    Example::

        Email = Annotated[str, rule_validator(REQUIRED, EMAIL)]
    """
    return AfterValidator(check(*rules))


__all__ = ["check", "rule_validator"]
