"""Shared pytest fixtures for enumtags tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove ``ENUMTAGS_*`` variables so settings fall back to code defaults."""
    for name in ("ENUMTAGS_VERBOSE", "ENUMTAGS_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def restore_logging() -> Generator[None]:
    """Restore root and ``enumtags`` logger state after a test reconfigures them."""
    root = logging.getLogger()
    root_handlers = root.handlers[:]
    root_level = root.level
    lib = logging.getLogger("enumtags")
    lib_handlers = lib.handlers[:]
    lib_level = lib.level
    lib_propagate = lib.propagate
    yield
    root.handlers = root_handlers
    root.setLevel(root_level)
    lib.handlers = lib_handlers
    lib.setLevel(lib_level)
    lib.propagate = lib_propagate
