"""Pytest configuration and fixtures.

Provides the canonical container instances used across the suite, settings
isolation, and logging configuration.
"""

from __future__ import annotations

import logging

from hypothesis import HealthCheck
from hypothesis import settings as hypothesis_settings
import pytest

from statusor import Status, StatusOr
from statusor.config import _AMBIENT

# isolate_settings runs once per test, not once per example.
hypothesis_settings.register_profile(
    "statusor",
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
hypothesis_settings.load_profile("statusor")

# =============================================================================
# Canonical Instances
# =============================================================================


@pytest.fixture
def test_result():
    return StatusOr.from_result("test")


@pytest.fixture
def also_test_result():
    return StatusOr.from_result("test")


@pytest.fixture
def another_result():
    return StatusOr.from_result("another result")


@pytest.fixture
def internal_error():
    return StatusOr.from_status(Status.INTERNAL)


@pytest.fixture
def also_internal_error():
    return StatusOr.from_status(Status.INTERNAL)


@pytest.fixture
def another_error():
    return StatusOr.from_status(Status.CANCELLED)


# =============================================================================
# Settings Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_settings():
    """Run every test with default settings, whatever a previous test leaked."""
    token = _AMBIENT.set(None)
    yield
    _AMBIENT.reset(token)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def statusor_debug_logs(caplog):
    """Capture DEBUG records from the statusor loggers."""
    caplog.set_level(logging.DEBUG, logger="statusor")
    return caplog
