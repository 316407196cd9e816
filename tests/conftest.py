"""Shared fixtures for parallax tests."""

from datetime import datetime, timezone

import pytest

from parallax.core import Permissions, RawAppFact

REFERENCE_NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """A fixed reference time so staleness never depends on the wall clock."""
    return REFERENCE_NOW


@pytest.fixture
def clean_fact(now: datetime) -> RawAppFact:
    """A maintained, strictly confined app with no permissions."""
    return RawAppFact(
        app_id="com.example.notes",
        display_name="Notes",
        version="1.0.0",
        icon_path="/opt/click.ubuntu.com/com.example.notes/current/notes.svg",
        confinement="strict",
        permissions=Permissions(),
        maintainer_name="Jane",
        last_updated=now,
    )
