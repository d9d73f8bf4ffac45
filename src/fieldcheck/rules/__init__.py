"""
Composable validation rules.

Every rule exposes ``validate(value) -> RuleError | None`` and
``error(message)``, which returns a re-tagged copy and leaves the original
untouched.
"""

from .base import Rule, RuleError
from .membership import InRule, format_elements, one_of
from .required import NIL_OR_NOT_EMPTY, REQUIRED, RequiredRule
from .strings import StringPredicate, StringRule, new_string_rule

__all__ = [
    # Protocol and error value
    "Rule",
    "RuleError",
    # Presence
    "RequiredRule",
    "REQUIRED",
    "NIL_OR_NOT_EMPTY",
    # Membership
    "InRule",
    "one_of",
    "format_elements",
    # Strings
    "StringPredicate",
    "StringRule",
    "new_string_rule",
]
