"""Trust score evaluation.

Reduces a set of active signals to an integer score and a risk tier.

Trust Score Model:
    score = clamp(100 + sum(PENALTIES[s] for s in signals), 0, 100)

Each recognized signal contributes its penalty exactly once. There are no
interaction terms, so the result does not depend on iteration order.

Risk Tiers:
    LOW    score >= 80
    MEDIUM 50 <= score < 80
    HIGH   score < 50
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType

from .models import TrustScore
from .taxonomy import RiskLevel, Signal

logger = logging.getLogger(__name__)

BASE_SCORE: int = 100
MIN_SCORE: int = 0
MAX_SCORE: int = 100

LOW_RISK_THRESHOLD: int = 80
MEDIUM_RISK_THRESHOLD: int = 50

# Frozen for v1.
PENALTIES: MappingProxyType[Signal, int] = MappingProxyType({
    Signal.USES_NETWORK: -15,
    Signal.USES_CAMERA: -20,
    Signal.USES_MICROPHONE: -20,
    Signal.USES_LOCATION: -15,
    Signal.USES_STORAGE: -10,
    Signal.STALE_APP: -10,
    Signal.MISSING_MAINTAINER: -5,
    Signal.WEAK_CONFINEMENT: -15,
    Signal.MEDIUM_CONFINEMENT: -5,
})


def penalty_for(signal: object) -> int:
    """Return the penalty for a signal, or 0 if it is not in the table."""
    if not isinstance(signal, Signal):
        return 0
    return PENALTIES.get(signal, 0)


def risk_level_for(score: int) -> RiskLevel:
    """Map an integer score to its risk tier.

    Args:
        score: Trust score, normally in [0, 100].

    Returns:
        ``LOW`` for >= 80, ``MEDIUM`` for >= 50, ``HIGH`` otherwise.
    """
    if score >= LOW_RISK_THRESHOLD:
        return RiskLevel.LOW
    if score >= MEDIUM_RISK_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


def evaluate(signals: Iterable[object]) -> TrustScore:
    """Compute the trust score and risk tier for a set of signals.

    Values that are not members of the penalty table are skipped with a
    warning rather than failing the evaluation. Duplicates in a non-set
    iterable count once.

    Args:
        signals: Active signals for one application.

    Returns:
        A ``TrustScore`` with the clamped score and its tier.
    """
    score = BASE_SCORE
    counted: set[Signal] = set()
    for signal in signals:
        if not isinstance(signal, Signal) or signal not in PENALTIES:
            logger.warning("Ignoring unknown trust signal: %r", signal)
            continue
        if signal not in counted:
            counted.add(signal)
            score += PENALTIES[signal]

    score = max(MIN_SCORE, min(MAX_SCORE, score))
    return TrustScore(score=score, risk_level=risk_level_for(score))
