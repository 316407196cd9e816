"""Trust taxonomy: signals, risk levels, and confinement classes.

Defines the closed vocabularies shared by every stage of the trust pipeline:

- ``Signal``: The nine trust-relevant facts an app can exhibit.
- ``RiskLevel``: The three user-facing risk tiers derived from a score.
- ``Confinement``: Sandbox strength as classified from an AppArmor profile.

The vocabularies are frozen for version 1. Scoring weights and explanation
sentences are keyed by ``Signal`` members (see ``engine`` and
``explanations``), never by free-form strings.
"""

from __future__ import annotations

from enum import Enum


# ---------------------------------------------------------------------------
# Signal: The frozen trust signal taxonomy
# ---------------------------------------------------------------------------


class Signal(Enum):
    """A single trust-relevant fact about an installed application.

    Signals fall into three groups:

    - **Permissions**: ``USES_*`` -- one per declared permission.
    - **Metadata**: ``STALE_APP`` and ``MISSING_MAINTAINER``.
    - **Confinement**: ``WEAK_CONFINEMENT`` and ``MEDIUM_CONFINEMENT``,
      mutually exclusive for any one app.

    No two signals encode the same fact. An app's active signals form a
    set: membership is meaningful, multiplicity is not.
    """

    # Permissions
    USES_NETWORK = "USES_NETWORK"
    USES_CAMERA = "USES_CAMERA"
    USES_MICROPHONE = "USES_MICROPHONE"
    USES_LOCATION = "USES_LOCATION"
    USES_STORAGE = "USES_STORAGE"

    # Metadata
    STALE_APP = "STALE_APP"
    MISSING_MAINTAINER = "MISSING_MAINTAINER"

    # Confinement
    WEAK_CONFINEMENT = "WEAK_CONFINEMENT"
    MEDIUM_CONFINEMENT = "MEDIUM_CONFINEMENT"


PERMISSION_SIGNALS: dict[str, Signal] = {
    "network": Signal.USES_NETWORK,
    "camera": Signal.USES_CAMERA,
    "microphone": Signal.USES_MICROPHONE,
    "location": Signal.USES_LOCATION,
    "storage": Signal.USES_STORAGE,
}


# ---------------------------------------------------------------------------
# RiskLevel: User-facing tiers
# ---------------------------------------------------------------------------


class RiskLevel(Enum):
    """Three-tier risk classification derived purely from a trust score.

    - **LOW**: score >= 80.
    - **MEDIUM**: 50 <= score < 80.
    - **HIGH**: score < 50.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# ---------------------------------------------------------------------------
# Confinement: Sandbox strength
# ---------------------------------------------------------------------------


class Confinement(Enum):
    """Sandbox strength of a click application.

    ``STRICT`` apps use stock policy groups only. ``MEDIUM`` apps rely on
    reserved policy groups or raw capability grants. ``WEAK`` apps run
    unconfined. ``UNKNOWN`` means no readable profile was found.
    """

    STRICT = "strict"
    MEDIUM = "medium"
    WEAK = "weak"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, label: object) -> Confinement:
        """Map a confinement label to a ``Confinement`` member.

        Accepts the canonical labels plus the legacy aliases
        ``unconfined`` (-> WEAK) and ``custom`` (-> MEDIUM). Case and
        surrounding whitespace are ignored. Never raises.

        Args:
            label: Raw label, usually a string produced by the scanner.

        Returns:
            The matching member, or ``UNKNOWN`` for anything unrecognized.
        """
        if isinstance(label, cls):
            return label
        if not isinstance(label, str):
            return cls.UNKNOWN
        key = label.strip().lower()
        key = _CONFINEMENT_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return cls.UNKNOWN


_CONFINEMENT_ALIASES: dict[str, str] = {
    "unconfined": "weak",
    "custom": "medium",
}
