"""Tests for the exception hierarchy."""

import logging

from fieldcheck.errors import ConfigurationError, FieldcheckError, ValidationError, log_error


class TestFieldcheckError:
    def test_defaults(self):
        error = FieldcheckError("something broke")

        assert error.message == "something broke"
        assert error.error_code == "FieldcheckError"
        assert error.context == {}
        assert error.recoverable is True

    def test_add_context_chains(self):
        error = FieldcheckError("x").add_context(field="name")
        assert error.context == {"field": "name"}

    def test_to_dict(self):
        data = FieldcheckError("x", error_code="E1", context={"a": 1}).to_dict()

        assert data["error_code"] == "E1"
        assert data["message"] == "x"
        assert data["context"] == {"a": 1}
        assert "timestamp" in data


class TestSubclasses:
    def test_configuration_error(self):
        error = ConfigurationError("bad rule", config_key="email")

        assert isinstance(error, FieldcheckError)
        assert error.error_code == "CONFIG_ERROR"
        assert error.recoverable is False
        assert error.context == {"config_key": "email"}

    def test_validation_error(self):
        error = ValidationError("failed", errors={"name": "required", "age": "in|[1 2]"})

        assert error.error_code == "VALIDATION_ERROR"
        assert error.errors == {"name": "required", "age": "in|[1 2]"}
        assert error.context["error_count"] == 2

    def test_validation_error_without_errors(self):
        error = ValidationError("failed")
        assert error.errors == {}
        assert "error_count" not in error.context


def test_log_error(caplog):
    error = ConfigurationError("bad", config_key="k")

    with caplog.at_level(logging.ERROR, logger="fieldcheck.errors"):
        log_error(error)

    record = caplog.records[-1]
    assert record.getMessage() == "CONFIG_ERROR: bad"
    assert record.error_data["context"] == {"config_key": "k"}
    assert record.component == "errors"
