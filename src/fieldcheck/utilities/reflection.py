"""
Runtime value inspection shared by every rule kind.

``Ref`` stands in for an optional, by-reference field: ``Ref(None)`` is an
absent value, ``Ref(x)`` refers to ``x``. Rules unwrap exactly one level of
``Ref`` so that a rule validates ``x`` and ``Ref(x)`` identically.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sized
from dataclasses import dataclass
from numbers import Number
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ref(Generic[T]):
    """Single-level reference to a value; ``Ref(None)`` is a nil reference."""

    value: T | None = None

    @property
    def is_nil(self) -> bool:
        return self.value is None


def indirect(value: Any) -> tuple[Any, bool]:
    """Unwrap one level of ``Ref`` and report whether the result is absent.

    Returns ``(inner, is_nil)``. ``None`` and ``Ref(None)`` are absent.
    """
    if isinstance(value, Ref):
        value = value.value
    return value, value is None


def is_empty(value: Any) -> bool:
    """Return True when ``value`` is the zero value for its type.

    Zero values are: ``None`` and nil references, empty sized containers
    (strings, bytes, sequences, mappings, sets), numbers equal to zero
    (including ``False``) and dataclass instances whose fields are all empty.
    Everything else is non-empty.
    """
    if isinstance(value, Ref):
        return value.is_nil or is_empty(value.value)
    if value is None:
        return True
    if isinstance(value, Number):
        return value == 0
    if isinstance(value, Sized):
        return len(value) == 0
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return all(
            is_empty(getattr(value, field.name)) for field in dataclasses.fields(value)
        )
    return False


__all__ = ["Ref", "indirect", "is_empty"]
