"""
Shared fixtures for the twotrack test suite.

Provides small switch functions reused across modules and keeps structlog
configuration from leaking between tests.
"""

from __future__ import annotations

import pytest
import structlog

from twotrack import Result, fail, succeed


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Restore structlog's default configuration after every test."""
    yield
    structlog.reset_defaults()


def validate_not_empty(s: str) -> Result[str, str]:
    return succeed(s) if s else fail("empty")


def validate_not_too_long(s: str) -> Result[str, str]:
    return succeed(s) if len(s) < 5 else fail("long")


@pytest.fixture()
def not_empty():
    return validate_not_empty


@pytest.fixture()
def not_too_long():
    return validate_not_too_long
