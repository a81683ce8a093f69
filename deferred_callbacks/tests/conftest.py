"""
Global pytest configuration and fixtures.

This file configures pytest behavior for all tests in the project.
"""

import pytest

from deferred_callbacks.config.settings import reset_settings
from deferred_callbacks.core.events.event_registry import EventRegistry


@pytest.fixture(autouse=True)
def isolated_registry_globals(monkeypatch):
    """
    Keep process-wide settings and the error sink from leaking between tests.
    """
    for key in ("LOG_LEVEL", "ERROR_SINK", "LOGGER_NAME"):
        monkeypatch.delenv(f"DEFERRED_CALLBACKS_{key}", raising=False)
    reset_settings()
    EventRegistry.reset_error_sink()
    yield
    reset_settings()
    EventRegistry.reset_error_sink()
