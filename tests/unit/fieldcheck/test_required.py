"""Tests for the presence rules."""

from dataclasses import dataclass

import pytest

from fieldcheck import NIL_OR_NOT_EMPTY, REQUIRED, Ref, RequiredRule, RuleError


@dataclass
class Point:
    x: int = 0
    y: int = 0


class TestRequired:
    @pytest.mark.parametrize(
        "value",
        ["123", Ref("123"), 1, -1, 0.5, True, [0], {"a": 1}, Point(x=1)],
    )
    def test_present_values_pass(self, value):
        assert REQUIRED.validate(value) is None

    @pytest.mark.parametrize(
        "value",
        ["", Ref(""), None, Ref(None), 0, 0.0, False, [], {}, set(), b"", Point(), Ref([])],
    )
    def test_absent_or_empty_values_fail(self, value):
        error = REQUIRED.validate(value)
        assert isinstance(error, RuleError)
        assert str(error) == "required"

    def test_error_carries_value(self):
        error = REQUIRED.validate("")
        assert error is not None
        assert error.value == ""

    def test_error_is_a_value_error(self):
        assert isinstance(REQUIRED.validate(None), ValueError)


class TestNilOrNotEmpty:
    @pytest.mark.parametrize("value", ["123", Ref("123"), None, Ref(None)])
    def test_present_or_absent_values_pass(self, value):
        assert NIL_OR_NOT_EMPTY.validate(value) is None

    @pytest.mark.parametrize("value", ["", Ref(""), 0, []])
    def test_present_but_empty_values_fail(self, value):
        assert str(NIL_OR_NOT_EMPTY.validate(value)) == "required"


class TestCustomMessage:
    def test_error_returns_new_rule(self):
        custom = REQUIRED.error("must be set")

        assert str(custom.validate("")) == "must be set"
        assert str(REQUIRED.validate("")) == "required"
        assert custom is not REQUIRED

    def test_error_keeps_skip_nil(self):
        custom = NIL_OR_NOT_EMPTY.error("must not be blank")

        assert custom.skip_nil is True
        assert custom.validate(None) is None
        assert str(custom.validate("")) == "must not be blank"

    def test_rules_are_immutable(self):
        with pytest.raises(AttributeError):
            REQUIRED.message = "changed"  # type: ignore[misc]

    def test_default_construction(self):
        rule = RequiredRule()
        assert rule.message == "required"
        assert rule.skip_nil is False
