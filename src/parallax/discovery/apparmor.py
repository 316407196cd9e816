"""Keyword heuristics over AppArmor profiles.

Click packages ship an AppArmor profile (usually a small JSON document
listing ``policy_groups`` and a ``template``). Two heuristics run over the
lowercased profile text:

Confinement Classification:
    1. Mentions policy groups or a template:
         "unconfined" -> WEAK, else "reserved" -> MEDIUM, else STRICT.
    2. Mentions raw "capability" grants -> MEDIUM.
    3. Anything else -> STRICT.
    Empty or missing text -> UNKNOWN. Whitespace-only text is STRICT.

Permission Inference:
    networking                    -> network
    camera                        -> camera
    audio, microphone             -> microphone
    location                      -> location
    content_exchange, @{home}     -> storage

These are coarse substring checks, not a profile parser. A profile with no
red-flag keyword is classified STRICT.
"""

from __future__ import annotations

from parallax.core.models import Permissions
from parallax.core.taxonomy import Confinement

POLICY_KEYWORDS: tuple[str, ...] = ("policy_groups", "template")

PERMISSION_KEYWORDS: dict[str, tuple[str, ...]] = {
    "network": ("networking",),
    "camera": ("camera",),
    "microphone": ("audio", "microphone"),
    "location": ("location",),
    "storage": ("content_exchange", "@{home}"),
}


def _normalize(content: object) -> str:
    """Lowercase profile text, mapping non-strings to ""."""
    if not isinstance(content, str):
        return ""
    return content.lower()


def classify_confinement(content: object) -> Confinement:
    """Classify sandbox strength from AppArmor profile text.

    Args:
        content: Raw profile text. Non-string input counts as unreadable.

    Returns:
        The ``Confinement`` class. ``UNKNOWN`` for empty or unreadable text.
    """
    text = _normalize(content)
    if not text:
        return Confinement.UNKNOWN

    if any(keyword in text for keyword in POLICY_KEYWORDS):
        if "unconfined" in text:
            return Confinement.WEAK
        if "reserved" in text:
            return Confinement.MEDIUM
        return Confinement.STRICT

    if "capability" in text:
        return Confinement.MEDIUM

    return Confinement.STRICT


def infer_permissions(content: object) -> Permissions:
    """Infer declared permissions from AppArmor profile text.

    Args:
        content: Raw profile text. Non-string input grants nothing.

    Returns:
        ``Permissions`` with a flag set for each matched keyword group.
    """
    text = _normalize(content)
    if not text:
        return Permissions()

    return Permissions(**{
        name: any(keyword in text for keyword in keywords)
        for name, keywords in PERMISSION_KEYWORDS.items()
    })
