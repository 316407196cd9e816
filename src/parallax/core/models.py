"""Trust data models: raw facts, normalized fields, scores, and app models.

Defines the records that flow through the trust pipeline:

- ``Permissions`` -- Five independent permission flags.
- ``RawAppFact`` -- Per-app facts as produced by the scanner.
- ``UpdateInfo`` -- Normalized last-update timestamp and staleness.
- ``Maintainer`` -- Normalized maintainer name and presence.
- ``TrustScore`` -- Integer score in [0, 100] with its risk tier.
- ``AppTrustModel`` -- The assembled pipeline output for one app.

Every record is frozen: once the pipeline produces a model, nothing mutates it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from parallax.core.taxonomy import Confinement, RiskLevel, Signal


# ---------------------------------------------------------------------------
# Permissions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Permissions:
    """Declared permissions of an application.

    Attributes:
        network: App may open network connections.
        camera: App may access the camera.
        microphone: App may record audio.
        location: App may read the device location.
        storage: App may read or write user storage.
    """

    network: bool = False
    camera: bool = False
    microphone: bool = False
    location: bool = False
    storage: bool = False

    @classmethod
    def from_mapping(cls, data: object) -> Permissions:
        """Build permissions from a mapping, treating anything else as none.

        Missing keys default to False. Only truthy values grant a permission.
        """
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            return cls()
        return cls(
            network=bool(data.get("network")),
            camera=bool(data.get("camera")),
            microphone=bool(data.get("microphone")),
            location=bool(data.get("location")),
            storage=bool(data.get("storage")),
        )

    def as_dict(self) -> dict[str, bool]:
        """Return the five flags as a dictionary in declaration order."""
        return {
            "network": self.network,
            "camera": self.camera,
            "microphone": self.microphone,
            "location": self.location,
            "storage": self.storage,
        }


# ---------------------------------------------------------------------------
# RawAppFact: Scanner output
# ---------------------------------------------------------------------------


def _first_key(data: Mapping[str, Any], *keys: str) -> Any:
    """Return the value of the first key present in ``data``, else None."""
    for key in keys:
        if key in data:
            return data[key]
    return None


@dataclass(frozen=True)
class RawAppFact:
    """Raw facts about one installed application.

    Absent or unreadable values are represented as ``None`` rather than
    raised errors, so the normalizers can process every record uniformly.

    Attributes:
        app_id: Package identifier (e.g., "com.example.app").
        display_name: Human-readable title.
        version: Version string as declared by the package.
        icon_path: Path to the icon file.
        confinement: Confinement label ("strict", "medium", "weak",
            "unknown", or a legacy alias).
        permissions: Declared permission flags.
        maintainer_name: Maintainer as declared, possibly blank or absent.
        last_updated: When the package was last updated.
    """

    app_id: str | None = None
    display_name: str | None = None
    version: str | None = None
    icon_path: str | None = None
    confinement: str = Confinement.UNKNOWN.value
    permissions: Permissions = field(default_factory=Permissions)
    maintainer_name: str | None = None
    last_updated: datetime | None = None

    @classmethod
    def from_mapping(cls, data: object) -> RawAppFact:
        """Build a fact record from a plain mapping.

        Accepts both snake_case and the camelCase keys of exported scanner
        records (``appId``, ``displayName``, ``iconPath``,
        ``maintainerName``, ``lastUpdated``). Values are carried over
        unchecked; the pipeline's normalizers handle malformed ones.
        Non-mapping input yields an empty record.
        """
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            return cls()
        confinement = _first_key(data, "confinement")
        return cls(
            app_id=_first_key(data, "app_id", "appId"),
            display_name=_first_key(data, "display_name", "displayName"),
            version=_first_key(data, "version"),
            icon_path=_first_key(data, "icon_path", "iconPath"),
            confinement=(
                confinement if confinement is not None
                else Confinement.UNKNOWN.value
            ),
            permissions=Permissions.from_mapping(_first_key(data, "permissions")),
            maintainer_name=_first_key(data, "maintainer_name", "maintainerName"),
            last_updated=_first_key(data, "last_updated", "lastUpdated"),
        )


# ---------------------------------------------------------------------------
# Normalized fields
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UpdateInfo:
    """Normalized update freshness.

    Attributes:
        last_updated: The validated timestamp, or None when absent.
        age_months: Whole 30-day months since the update, or None when
            the timestamp is absent. Never negative.
        is_stale: True iff ``age_months`` >= 12. Always False when absent.
    """

    last_updated: datetime | None = None
    age_months: int | None = None
    is_stale: bool = False


@dataclass(frozen=True)
class Maintainer:
    """Normalized maintainer.

    Attributes:
        name: Trimmed maintainer name, or None when absent.
        present: True iff a non-blank name was declared.
    """

    name: str | None = None
    present: bool = False


# ---------------------------------------------------------------------------
# TrustScore
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TrustScore:
    """Computed trust score for one application.

    Attributes:
        score: Integer in [0, 100]. 100 means no trust signal fired.
        risk_level: Tier derived from ``score`` alone.
    """

    score: int
    risk_level: RiskLevel


# ---------------------------------------------------------------------------
# AppTrustModel: Pipeline output
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AppTrustModel:
    """Assembled trust model for one installed application.

    Attributes:
        app_id: Package identifier, "" when unknown.
        display_name: Title, falling back to ``app_id`` then "Unknown App".
        version: Version string, "" when unknown.
        icon_path: Icon path, or None.
        confinement: Classified confinement.
        permissions: Declared permissions (passed through unchanged).
        update_info: Normalized update freshness.
        maintainer: Normalized maintainer.
        trust: Score and risk tier.
        explanations: Sorted, human-readable sentences for ``signals``.
        signals: Active trust signals the score was computed from.
    """

    app_id: str
    display_name: str
    version: str
    icon_path: str | None
    confinement: Confinement
    permissions: Permissions
    update_info: UpdateInfo
    maintainer: Maintainer
    trust: TrustScore
    explanations: tuple[str, ...] = ()
    signals: frozenset[Signal] = frozenset()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation of the model."""
        last_updated = self.update_info.last_updated
        return {
            "app_id": self.app_id,
            "display_name": self.display_name,
            "version": self.version,
            "icon_path": self.icon_path,
            "confinement": self.confinement.value,
            "permissions": self.permissions.as_dict(),
            "update_info": {
                "last_updated": last_updated.isoformat() if last_updated else None,
                "age_months": self.update_info.age_months,
                "is_stale": self.update_info.is_stale,
            },
            "maintainer": {
                "name": self.maintainer.name,
                "present": self.maintainer.present,
            },
            "trust": {
                "score": self.trust.score,
                "risk_level": self.trust.risk_level.value,
            },
            "signals": sorted(s.value for s in self.signals),
            "explanations": list(self.explanations),
        }
