"""Shared fixtures for CLI integration tests"""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def quiet_logging(tmp_path, monkeypatch):
    """Keep log output out of captured stdout and reset logging afterwards."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MDINDEX_LOG_LEVEL", "error")
    yield
    logging.root.handlers.clear()
    structlog.reset_defaults()
