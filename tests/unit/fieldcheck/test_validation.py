"""Tests for validate() and validate_fields()."""

import logging
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from fieldcheck import (
    NIL_OR_NOT_EMPTY,
    REQUIRED,
    ConfigurationError,
    FieldErrors,
    Ref,
    RuleError,
    Validatable,
    ValidationError,
    one_of,
    validate,
    validate_fields,
)
from fieldcheck.formats import EMAIL, PORT


@dataclass
class Customer:
    name: str = ""
    email: str = ""
    tier: str | None = None

    def validate(self):
        return validate_fields(
            self,
            {
                "name": REQUIRED,
                "email": [REQUIRED, EMAIL],
                "tier": one_of("gold", "silver"),
            },
        )


@dataclass
class Order:
    id: str = ""
    customer: Customer | None = None

    def validate(self):
        return validate_fields(self, {"id": REQUIRED, "customer": NIL_OR_NOT_EMPTY})


class Model(BaseModel):
    name: str = ""


class TestValidate:
    def test_all_rules_pass(self):
        assert validate("test@example.com", REQUIRED, EMAIL) is None

    def test_first_failure_wins(self):
        assert str(validate("", REQUIRED, EMAIL)) == "required"
        assert str(validate("nope", REQUIRED, EMAIL)) == "email"

    def test_no_rules(self):
        assert validate("anything") is None

    def test_plain_callable_rule(self):
        def not_admin(value):
            return RuleError("reserved") if value == "admin" else None

        assert str(validate("admin", not_admin)) == "reserved"
        assert validate("guest", not_admin) is None

    def test_unsupported_rule_raises(self):
        with pytest.raises(ConfigurationError):
            validate("x", "not a rule")  # type: ignore[arg-type]

    def test_validatable_value_is_validated(self):
        errors = validate(Customer(name="Ann", email="bad"))
        assert isinstance(errors, FieldErrors)
        assert str(errors["email"]) == "email"

    def test_valid_validatable_returns_none(self):
        assert validate(Customer(name="Ann", email="ann@example.com")) is None

    def test_validatable_behind_reference(self):
        assert isinstance(validate(Ref(Customer())), FieldErrors)
        assert validate(Ref(None)) is None

    def test_rule_failure_skips_self_validation(self):
        assert str(validate(None, REQUIRED)) == "required"

    def test_rules_and_models_are_not_self_validated(self):
        assert validate(REQUIRED) is None
        assert validate(Model()) is None
        assert validate(Customer) is None

    def test_customer_is_validatable(self):
        assert isinstance(Customer(), Validatable)
        assert not isinstance("text", Validatable)


class TestValidateFields:
    def test_collects_errors_per_field(self):
        errors = validate_fields(
            Customer(email="bad", tier="bronze"),
            {"name": REQUIRED, "email": [REQUIRED, EMAIL], "tier": one_of("gold", "silver")},
        )

        assert set(errors) == {"name", "email", "tier"}
        assert str(errors["name"]) == "required"
        assert str(errors["email"]) == "email"
        assert str(errors["tier"]) == "in|[gold silver]"

    def test_empty_result_when_valid(self):
        errors = validate_fields(Customer(name="Ann"), {"name": REQUIRED})
        assert errors == {}
        assert not errors

    def test_mapping_source(self):
        errors = validate_fields({"port": "99999"}, {"port": PORT, "host": REQUIRED})
        assert str(errors["port"]) == "port"
        assert str(errors["host"]) == "required"

    def test_missing_attribute_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            validate_fields(Customer(), {"phone": REQUIRED})
        assert exc_info.value.context["config_key"] == "phone"

    def test_nil_object_raises(self):
        with pytest.raises(ConfigurationError):
            validate_fields(None, {"name": REQUIRED})
        with pytest.raises(ConfigurationError):
            validate_fields(Ref(None), {"name": REQUIRED})

    def test_reference_object(self):
        errors = validate_fields(Ref(Customer()), {"name": REQUIRED})
        assert str(errors["name"]) == "required"

    def test_nested_validatable_field(self):
        errors = Order(id="o-1", customer=Customer(name="Ann", email="bad")).validate()

        assert isinstance(errors["customer"], FieldErrors)
        assert str(errors) == "customer: (email: email.)."

    def test_absent_nested_field_is_skipped(self):
        assert Order(id="o-1").validate() == {}

    def test_failures_are_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="fieldcheck.validation"):
            validate_fields(Customer(), {"name": REQUIRED})

        records = [r for r in caplog.records if r.name == "fieldcheck.validation"]
        assert records[0].field == "name"
        assert records[0].component == "validation"


class TestFieldErrors:
    def test_str_is_sorted(self):
        errors = FieldErrors(b=RuleError("required"), a=RuleError("email"))
        assert str(errors) == "a: email; b: required."

    def test_empty_str(self):
        assert str(FieldErrors()) == ""

    def test_to_dict_nests(self):
        errors = FieldErrors(
            id=RuleError("required"), customer=FieldErrors(email=RuleError("email"))
        )
        assert errors.to_dict() == {"id": "required", "customer": {"email": "email"}}

    def test_raise_for_errors(self):
        errors = FieldErrors(name=RuleError("required"))

        with pytest.raises(ValidationError) as exc_info:
            errors.raise_for_errors()

        assert exc_info.value.errors == {"name": "required"}
        assert exc_info.value.context["error_count"] == 1
        assert "name: required." in str(exc_info.value)

    def test_raise_for_errors_noop_when_empty(self):
        FieldErrors().raise_for_errors()
