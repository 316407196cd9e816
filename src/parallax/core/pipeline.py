"""End-to-end trust pipeline.

Sequences the stages for each raw fact record:

    normalize (update info, maintainer)
        -> derive signals
        -> evaluate score  +  explain signals
        -> AppTrustModel

Normalization always runs before derivation because staleness and
maintainer presence are read from the normalized records. Records are
independent of one another.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path

from .engine import evaluate
from .explanations import explain
from .models import AppTrustModel, Permissions, RawAppFact
from .normalizers import normalize_maintainer, normalize_update_info
from .signals import derive_signals
from .taxonomy import Confinement

logger = logging.getLogger(__name__)

UNKNOWN_APP_NAME: str = "Unknown App"


def _text(value: object) -> str | None:
    """Return ``value`` if it is a non-empty string, else None."""
    if isinstance(value, str) and value:
        return value
    return None


def build_trust_model(
    fact: RawAppFact,
    now: datetime | None = None,
) -> AppTrustModel:
    """Build the trust model for a single application.

    Identity fields fall back to safe defaults: the display name falls back
    to the identifier and then to ``"Unknown App"``; a missing identifier
    or version becomes ``""``; a missing icon stays None.

    Args:
        fact: Raw facts for one app. A plain mapping is also accepted and
            converted with ``RawAppFact.from_mapping``.
        now: Reference time for update freshness. Defaults to the current
            UTC time.

    Returns:
        The assembled ``AppTrustModel``. Never raises for malformed fields.
    """
    if not isinstance(fact, RawAppFact):
        logger.debug("Coercing non-RawAppFact record: %r", type(fact).__name__)
        fact = RawAppFact.from_mapping(fact)

    update_info = normalize_update_info(fact.last_updated, now=now)
    maintainer = normalize_maintainer(fact.maintainer_name)

    signals = derive_signals(fact, update_info, maintainer)
    trust = evaluate(signals)
    explanations = explain(signals)

    app_id = _text(fact.app_id)
    return AppTrustModel(
        app_id=app_id or "",
        display_name=_text(fact.display_name) or app_id or UNKNOWN_APP_NAME,
        version=_text(fact.version) or "",
        icon_path=_text(fact.icon_path),
        confinement=Confinement.parse(fact.confinement),
        permissions=Permissions.from_mapping(fact.permissions),
        update_info=update_info,
        maintainer=maintainer,
        trust=trust,
        explanations=explanations,
        signals=signals,
    )


def build_trust_models(
    facts: Iterable[RawAppFact],
    now: datetime | None = None,
) -> list[AppTrustModel]:
    """Build trust models for a batch of applications.

    All records are evaluated against the same reference time so that a
    batch is internally consistent. Output order matches input order.
    """
    reference = now if now is not None else datetime.now(timezone.utc)
    return [build_trust_model(fact, now=reference) for fact in facts]


def scan_and_evaluate(
    root: Path | str | None = None,
    now: datetime | None = None,
) -> list[AppTrustModel]:
    """Scan installed click applications and build a model for each.

    Args:
        root: Click install root. Defaults to ``/opt/click.ubuntu.com``.
        now: Reference time for update freshness.

    Returns:
        One model per discovered app. Empty when nothing could be scanned.
    """
    from parallax.discovery import ClickAppScanner

    facts = ClickAppScanner().scan_installed_apps(root)
    return build_trust_models(facts, now=now)
