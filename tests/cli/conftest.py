"""Shared fixtures for CLI tests.

Provides fake click install roots with clean, risky, and mixed apps.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.discovery.helpers import (
    EMPTY_PROFILE,
    STRICT_PROFILE,
    UNCONFINED_PROFILE,
    create_basic_manifest,
    create_click_app,
)


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def clean_app_root(tmp_path: Path) -> Path:
    """A click root with one maintained app and an empty profile."""
    create_click_app(
        tmp_path, "com.example.notes",
        manifest=create_basic_manifest("com.example.notes"),
        profile=EMPTY_PROFILE,
        mtime=datetime.now(timezone.utc),
    )
    return tmp_path


@pytest.fixture
def mixed_app_root(tmp_path: Path) -> Path:
    """A click root with one clean, one moderate, and one risky app.

    - notes:   no permissions, strict           -> 100 / low
    - camera:  network + camera + audio, strict -> 45 / high
    - term:    unconfined, no maintainer, stale -> 70 / medium
    """
    now = datetime.now(timezone.utc)
    create_click_app(
        tmp_path, "com.example.notes",
        manifest=create_basic_manifest("com.example.notes"),
        profile=EMPTY_PROFILE,
        mtime=now,
    )
    create_click_app(
        tmp_path, "com.example.camera",
        manifest=create_basic_manifest("com.example.camera"),
        profile=STRICT_PROFILE,
        mtime=now,
    )
    manifest = create_basic_manifest("com.example.term")
    del manifest["maintainer"]
    create_click_app(
        tmp_path, "com.example.term",
        manifest=manifest,
        profile=UNCONFINED_PROFILE,
        mtime=now - timedelta(days=500),
    )
    return tmp_path


@pytest.fixture
def empty_root(tmp_path: Path) -> Path:
    """A click root with no installed apps."""
    return tmp_path
