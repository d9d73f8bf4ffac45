"""Integrations with third-party validation frameworks."""

from .pydantic import check, rule_validator

__all__ = ["check", "rule_validator"]
