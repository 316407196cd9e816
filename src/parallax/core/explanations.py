"""Human-readable explanations for trust signals."""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from .taxonomy import Signal

# Frozen for v1. Sentences are user-facing; keep them verbatim.
EXPLANATIONS: MappingProxyType[Signal, str] = MappingProxyType({
    Signal.USES_NETWORK: "This app can access the internet.",
    Signal.USES_CAMERA: "This app can access the camera.",
    Signal.USES_MICROPHONE: "This app can access the microphone.",
    Signal.USES_LOCATION: "This app can access your location.",
    Signal.USES_STORAGE: "This app can access local storage.",
    Signal.STALE_APP: "This app hasn't been updated in over a year.",
    Signal.MISSING_MAINTAINER: "This app has no listed maintainer.",
    Signal.WEAK_CONFINEMENT: "This app has fewer system restrictions than most apps.",
    Signal.MEDIUM_CONFINEMENT: "This app has moderate system restrictions.",
})


def explanation_for(signal: object) -> str | None:
    """Return the sentence for a signal, or None if it has none."""
    if not isinstance(signal, Signal):
        return None
    return EXPLANATIONS.get(signal)


def explain(signals: Iterable[object]) -> tuple[str, ...]:
    """Return the sorted explanation sentences for the active signals.

    Unknown values are skipped without error.
    """
    sentences = {explanation_for(signal) for signal in signals}
    sentences.discard(None)
    return tuple(sorted(sentences))
