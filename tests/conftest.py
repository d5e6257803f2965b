"""
Stack Lab - Test Configuration
==============================

pytest fixtures shared by all tests.

The global LabConfig is cached after first use, so each test starts from
a clean environment and a fresh configuration.
"""

import pytest

from stacklab.config import set_config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Remove STACKLAB_* variables and reset the cached configuration."""
    for name in ("STACKLAB_CAPACITY", "STACKLAB_MAX_CAPACITY", "STACKLAB_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    set_config(None)
    yield
    set_config(None)
