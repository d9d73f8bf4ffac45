import logging

from fieldcheck import logging as fieldcheck_logging
from fieldcheck.utilities import get_logger


class TestConfigure:
    def test_explicit_level(self, monkeypatch):
        captured = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

        fieldcheck_logging.configure("debug")

        assert captured == {"level": logging.DEBUG, "format": fieldcheck_logging.DEFAULT_FORMAT}

    def test_numeric_level(self, monkeypatch):
        captured = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

        fieldcheck_logging.configure(logging.ERROR)

        assert captured["level"] == logging.ERROR

    def test_level_from_settings(self, monkeypatch):
        captured = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
        monkeypatch.setenv("FIELDCHECK_LOG_LEVEL", "warning")

        fieldcheck_logging.configure()

        assert captured["level"] == logging.WARNING


class TestStructuredLogger:
    def test_component_is_attached(self, caplog):
        logger = get_logger("fieldcheck.test", component="tests")

        with caplog.at_level(logging.WARNING, logger="fieldcheck.test"):
            logger.warning("hello %s", "world", field="name")

        record = caplog.records[-1]
        assert record.getMessage() == "hello world"
        assert record.component == "tests"
        assert record.field == "name"

    def test_standard_kwargs_pass_through(self, caplog):
        logger = get_logger("fieldcheck.test")

        with caplog.at_level(logging.ERROR, logger="fieldcheck.test"):
            try:
                raise RuntimeError("boom")
            except RuntimeError:
                logger.log(logging.ERROR, "failed", exc_info=True)

        record = caplog.records[-1]
        assert record.exc_info is not None
        assert not hasattr(record, "component")
