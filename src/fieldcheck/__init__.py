"""
fieldcheck: composable validation rules and string format predicates.

This module acts as a facade, re-exporting the rule kinds, the validation
entry points and the error hierarchy. Format rules live in
``fieldcheck.formats``.
"""

from .errors import ConfigurationError, FieldcheckError, ValidationError
from .integrations import check, rule_validator
from .rules import (
    NIL_OR_NOT_EMPTY,
    REQUIRED,
    InRule,
    RequiredRule,
    Rule,
    RuleError,
    StringRule,
    new_string_rule,
    one_of,
)
from .utilities import Ref, indirect, is_empty
from .validation import FieldErrors, Validatable, validate, validate_fields

__version__ = "0.1.0"

__all__ = [
    # Rules
    "Rule",
    "RuleError",
    "RequiredRule",
    "REQUIRED",
    "NIL_OR_NOT_EMPTY",
    "InRule",
    "one_of",
    "StringRule",
    "new_string_rule",
    # Value inspection
    "Ref",
    "indirect",
    "is_empty",
    # Validation
    "FieldErrors",
    "Validatable",
    "validate",
    "validate_fields",
    # Pydantic
    "check",
    "rule_validator",
    # Errors
    "FieldcheckError",
    "ConfigurationError",
    "ValidationError",
]
