"""
Pytest fixtures for the numeric kernel test suite.

Provides:
- Structured logging configured for the whole session
- Log capture as parsed JSON records
- Common validators and catalogue fixtures
"""

import json
import logging
from io import StringIO

import pytest

from numeric_config import get_field_catalogue
from numeric_kernel.domain.number_validator import NumberValidator
from numeric_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture numeric_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs):
            validate_document(...)
            logs = captured_logs()
            assert any(r["message"] == "document_validation_failed" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("numeric_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture(scope="session")
def default_validator() -> NumberValidator:
    """N(10.8), signed numbers allowed."""
    return NumberValidator(10, 8)


@pytest.fixture(scope="session")
def tax_inventory_catalogue():
    return get_field_catalogue("tax_inventory")
