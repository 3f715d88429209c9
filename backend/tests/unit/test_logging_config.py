"""Unit tests for JSON logging and processing id correlation"""

import json
import logging
import sys

import pytest

from observability.correlation import get_processing_id, set_processing_id
from observability.logging_config import JSONFormatter, ProcessingIDFilter, configure_logging


def _log_record(message="Vendor created", **extra):
    record = logging.LogRecord(
        name="vendors.pipeline",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestProcessingIdCorrelation:

    def test_default_when_unset(self):
        assert get_processing_id() == "no-processing-id"

    def test_filter_stamps_current_processing_id(self):
        set_processing_id("proc-123")
        record = _log_record()

        assert ProcessingIDFilter().filter(record) is True
        assert record.processing_id == "proc-123"

    def test_clearing_restores_default(self):
        set_processing_id("proc-123")
        set_processing_id(None)
        assert get_processing_id() == "no-processing-id"


class TestJSONFormatter:

    def test_formats_core_fields(self):
        record = _log_record(processing_id="proc-9")

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "vendors.pipeline"
        assert data["processing_id"] == "proc-9"
        assert data["message"] == "Vendor created"

    def test_includes_vendor_extras(self):
        record = _log_record(vendor_id="vendor-1", error_kind="VALIDATION")

        data = json.loads(JSONFormatter().format(record))

        assert data["vendor_id"] == "vendor-1"
        assert data["error_kind"] == "VALIDATION"

    def test_includes_exception(self):
        try:
            raise RuntimeError("database went away")
        except RuntimeError:
            record = _log_record(exc_info=sys.exc_info())

        data = json.loads(JSONFormatter().format(record))

        assert data["error"] == "database went away"
        assert "RuntimeError" in data["traceback"]


class TestConfigureLogging:

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_installs_single_stdout_handler(self):
        configure_logging("debug", json_format=True)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_plain_format(self):
        configure_logging("WARNING", json_format=False)

        assert not isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            configure_logging("LOUD")
