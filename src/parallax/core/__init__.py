"""Trust evaluation core for installed click applications.

This package turns raw per-app facts into a deterministic trust score,
a risk tier, and user-facing explanations.

Submodules:
    taxonomy      -- Signal, RiskLevel, Confinement
    models        -- Permissions, RawAppFact, UpdateInfo, Maintainer,
                     TrustScore, AppTrustModel
    normalizers   -- normalize_update_info, normalize_maintainer
    signals       -- derive_signals
    engine        -- evaluate, risk_level_for, PENALTIES
    explanations  -- explain, EXPLANATIONS
    pipeline      -- build_trust_model, build_trust_models, scan_and_evaluate

All public names are re-exported here so callers can write
``from parallax.core import build_trust_model``.
"""

from parallax.core.taxonomy import Confinement, RiskLevel, Signal
from parallax.core.models import (
    AppTrustModel,
    Maintainer,
    Permissions,
    RawAppFact,
    TrustScore,
    UpdateInfo,
)
from parallax.core.normalizers import normalize_maintainer, normalize_update_info
from parallax.core.signals import derive_signals
from parallax.core.engine import PENALTIES, evaluate, penalty_for, risk_level_for
from parallax.core.explanations import EXPLANATIONS, explain, explanation_for
from parallax.core.pipeline import (
    build_trust_model,
    build_trust_models,
    scan_and_evaluate,
)

__all__ = [
    "AppTrustModel",
    "Confinement",
    "EXPLANATIONS",
    "Maintainer",
    "PENALTIES",
    "Permissions",
    "RawAppFact",
    "RiskLevel",
    "Signal",
    "TrustScore",
    "UpdateInfo",
    "build_trust_model",
    "build_trust_models",
    "derive_signals",
    "evaluate",
    "explain",
    "explanation_for",
    "normalize_maintainer",
    "normalize_update_info",
    "penalty_for",
    "risk_level_for",
    "scan_and_evaluate",
]
