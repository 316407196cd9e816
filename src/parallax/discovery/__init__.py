"""Discovery of installed click applications.

Provides read-only scanning of the click install root and the keyword
heuristics that turn AppArmor profiles into confinement and permission
facts.

Public API::

    from parallax.discovery import ClickAppScanner

    scanner = ClickAppScanner()
    for fact in scanner.scan_installed_apps():
        print(f"{fact.app_id}: {fact.confinement}")
"""

from __future__ import annotations

from parallax.discovery.apparmor import classify_confinement, infer_permissions
from parallax.discovery.scanner import CLICK_APP_DIR, ClickAppScanner

__all__ = [
    "CLICK_APP_DIR",
    "ClickAppScanner",
    "classify_confinement",
    "infer_permissions",
]
