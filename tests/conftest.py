"""Shared pytest fixtures for the cardmask test suite."""

from __future__ import annotations

import logging
import os

import pytest

from cardmask.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run each test without CARDMASK_* variables or stray .env files."""

    for key in list(os.environ):
        if key.startswith("CARDMASK_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by configure_logging."""

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
