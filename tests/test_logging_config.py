"""Tests for structured logging configuration."""

import json
import logging

import pytest

from language_filter.logging_config import (
    FILTER_LOGGER,
    StructuredFormatter,
    configure_logging,
)
from language_filter.service.config import Settings


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    filter_logger = logging.getLogger(FILTER_LOGGER)
    saved = (list(root.handlers), root.level, filter_logger.level)
    yield
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    filter_logger.setLevel(saved[2])


def test_formatter_emits_extra_fields():
    record = logging.LogRecord(
        "language_filter.service.filter", logging.INFO, __file__, 1,
        "Filter initialized", None, None,
    )
    record.matchlist_size = 3
    data = json.loads(StructuredFormatter().format(record))
    assert data["message"] == "Filter initialized"
    assert data["level"] == "INFO"
    assert data["matchlist_size"] == 3


def test_filter_level_overrides_root(restore_logging):
    configure_logging("WARNING", filter_level="DEBUG")
    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("language_filter.engine.overlap").isEnabledFor(logging.DEBUG)
    assert not logging.getLogger("streamlit").isEnabledFor(logging.INFO)


def test_filter_level_inherits_root_by_default(restore_logging):
    configure_logging("WARNING")
    assert logging.getLogger(FILTER_LOGGER).level == logging.NOTSET
    assert not logging.getLogger("language_filter.service.filter").isEnabledFor(logging.INFO)


def test_settings_validate_filter_log_level():
    assert Settings(filter_log_level="debug").filter_log_level == "DEBUG"
    assert Settings().filter_log_level is None
    with pytest.raises(ValueError):
        Settings(filter_log_level="chatty")
