"""Unit tests for core.logging.

Tests cover:
- Test environment suppression
- Interpolation value redaction
- Large value truncation
- Module logger context
"""

import sys
from unittest.mock import patch

import pytest

from core.logging import (
    REDACTED,
    _is_test_environment,
    configure_logging,
    get_module_logger,
    redact_interpolation_values,
    truncate_large_values,
)


@pytest.mark.unit
class TestLoggingConfiguration:
    """Tests for logging configuration."""

    def test_is_test_environment_detects_pytest(self):
        assert _is_test_environment() is True

    def test_is_test_environment_without_pytest(self):
        with patch.dict(sys.modules):
            del sys.modules["pytest"]
            assert _is_test_environment() is False

    def test_configure_logging_returns_logger(self):
        logger = configure_logging(log_level="DEBUG", is_production=False)

        assert hasattr(logger, "info")

    def test_module_logger_binds_component(self):
        logger = get_module_logger()

        context = logger._context  # pylint: disable=protected-access
        assert context["component"] == "test_logging"
        assert context["module_path"].endswith("test_logging")


@pytest.mark.unit
class TestProcessors:
    """Tests for custom structlog processors."""

    def test_redacts_interpolation_values(self):
        event = {
            "event": "translation_not_found",
            "options": {"count": 2, "scope": "a", "default": "d", "email": "a@b.c"},
        }

        result = redact_interpolation_values(None, "warning", event)

        assert result["options"] == {
            "count": 2,
            "scope": "a",
            "default": "d",
            "email": REDACTED,
        }

    def test_events_without_options_are_untouched(self):
        event = {"event": "backend_added", "backend": "memory"}

        assert redact_interpolation_values(None, "info", dict(event)) == event

    def test_truncates_large_values(self):
        processor = truncate_large_values(max_length=10)

        result = processor(None, "info", {"event": "x", "text": "a" * 25})

        assert result["text"] == "a" * 10 + "...[truncated, 25 chars total]"

    def test_short_values_untouched(self):
        processor = truncate_large_values(max_length=10)

        assert processor(None, "info", {"text": "short"}) == {"text": "short"}
