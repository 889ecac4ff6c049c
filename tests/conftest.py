"""Pytest fixtures for textsel tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

_TEST_CONFIG_DIR = Path(tempfile.mkdtemp(prefix="textsel-test-config-"))
os.environ.setdefault("TEXTSEL_CONFIG_DIR", str(_TEST_CONFIG_DIR))
os.environ.pop("TEXTSEL_SETTINGS_PATH", None)

from textsel.editing.types import TextBuffer  # noqa: E402
from textsel.mocks import RecordingSelectionApplier  # noqa: E402


@pytest.fixture
def padded_buffer() -> TextBuffer:
    """Buffer with a call padded by two spaces on each side, then another line."""
    return TextBuffer.from_text("  foo(bar)  \nnext")


@pytest.fixture
def applier() -> RecordingSelectionApplier:
    return RecordingSelectionApplier()
