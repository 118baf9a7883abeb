"""Shared test fixtures and configuration."""

import os
from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Drop LINE_SEARCH_* overrides and any .env file from the working directory."""
    for key in list(os.environ):
        if key.upper().startswith("LINE_SEARCH_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def metrics():
    """Fresh metrics collector so tests do not share counters."""
    from line_search.search.metrics import MetricsCollector

    return MetricsCollector()


@pytest.fixture
def engine(metrics):
    from line_search.config import Settings
    from line_search.search.engine import SearchEngine

    return SearchEngine(Settings(), metrics=metrics)


@pytest.fixture
def restore_root_logger():
    """Put back root handlers and level after a test reconfigures logging."""
    import logging

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
