"""Fact normalization for update timestamps and maintainer names.

Both normalizers are total: any input, however malformed, maps to a valid
record. Invalid input takes the "absent" branch, which is never penalized
for update freshness and is penalized only as a missing maintainer.

Update Age Model:
    age_months = floor(max(0, now - last_updated) / 30 days)
    is_stale   = age_months >= 12
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from .models import Maintainer, UpdateInfo

MONTH_LENGTH: timedelta = timedelta(days=30)
STALE_AFTER_MONTHS: int = 12


def _as_utc(moment: datetime) -> datetime:
    """Interpret naive datetimes as UTC so they compare with aware ones."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def normalize_update_info(
    last_updated: object,
    now: datetime | None = None,
) -> UpdateInfo:
    """Normalize a raw last-update timestamp.

    Timestamps in the future are treated as "just updated" (age zero) so
    that clock skew never penalizes an app.

    Args:
        last_updated: A ``datetime``, or anything else (treated as absent).
        now: Reference time. Defaults to the current UTC time.

    Returns:
        An ``UpdateInfo``. Absent input yields ``UpdateInfo()`` with
        ``is_stale`` False.
    """
    if not isinstance(last_updated, datetime):
        return UpdateInfo()

    reference = _as_utc(now) if isinstance(now, datetime) else datetime.now(timezone.utc)
    elapsed = max(timedelta(0), reference - _as_utc(last_updated))
    months = elapsed // MONTH_LENGTH

    return UpdateInfo(
        last_updated=last_updated,
        age_months=months,
        is_stale=months >= STALE_AFTER_MONTHS,
    )


def normalize_maintainer(name: object) -> Maintainer:
    """Normalize a raw maintainer name.

    Non-string, empty, and whitespace-only names are absent.

    Args:
        name: The declared maintainer, in any form.

    Returns:
        A ``Maintainer`` with the trimmed name, or ``Maintainer()`` when
        absent.
    """
    if not isinstance(name, str):
        return Maintainer()

    trimmed = name.strip()
    if not trimmed:
        return Maintainer()

    return Maintainer(name=trimmed, present=True)
