"""Readers for click package metadata files.

A click application directory (``<root>/<package>/current``) contains:

- ``manifest.json`` -- name, title, version, icon, maintainer, and a
  ``hooks`` object whose entries may point at an AppArmor profile.
- ``*.desktop`` -- freedesktop entry with ``Name=`` and ``Icon=`` keys.
- ``*.apparmor`` -- the AppArmor profile (also reachable via hooks).

``read_manifest`` raises ``ManifestError``; the other helpers never raise
for filesystem problems and return None instead.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from parallax.exceptions import ManifestError

logger = logging.getLogger(__name__)

MANIFEST_FILENAME: str = "manifest.json"
DESKTOP_SUFFIX: str = ".desktop"
APPARMOR_SUFFIX: str = ".apparmor"

_DESKTOP_KEY_RE = re.compile(r"^(?P<key>[A-Za-z0-9-]+)\s*=\s*(?P<value>.*)$")


def read_manifest(app_path: Path) -> dict[str, Any] | None:
    """Load ``manifest.json`` from an app directory.

    Args:
        app_path: The app's ``current`` directory.

    Returns:
        The parsed manifest, or None if the directory has no manifest.

    Raises:
        ManifestError: If the manifest exists but cannot be read, is not
            valid JSON, or is not a JSON object.
    """
    manifest_path = app_path / MANIFEST_FILENAME
    try:
        if not manifest_path.is_file():
            return None
        content = manifest_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Cannot read {manifest_path}: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in {manifest_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(
            f"Manifest {manifest_path} must be a JSON object, "
            f"got {type(data).__name__}"
        )
    return data


def manifest_mtime(app_path: Path) -> float | None:
    """Return the manifest's modification time (epoch seconds), or None."""
    try:
        return (app_path / MANIFEST_FILENAME).stat().st_mtime
    except OSError:
        return None


def find_files(app_path: Path, suffix: str) -> list[Path]:
    """List files in ``app_path`` ending with ``suffix``, sorted by name."""
    try:
        return sorted(
            p for p in app_path.iterdir()
            if p.name.endswith(suffix) and p.is_file()
        )
    except OSError:
        return []


def parse_desktop_entry(content: str) -> dict[str, str]:
    """Parse ``key=value`` lines of a desktop entry.

    Only the first occurrence of each key is kept. Comments, section
    headers, and localized keys (``Name[fr]=``) are ignored.
    """
    entries: dict[str, str] = {}
    for line in content.splitlines():
        match = _DESKTOP_KEY_RE.match(line.strip())
        if match is None:
            continue
        entries.setdefault(match.group("key"), match.group("value").strip())
    return entries


def read_desktop_entry(app_path: Path) -> dict[str, str]:
    """Parse the first ``*.desktop`` file in an app directory.

    Returns:
        The parsed keys, or an empty dict if there is no readable entry.
    """
    for desktop_path in find_files(app_path, DESKTOP_SUFFIX):
        try:
            return parse_desktop_entry(desktop_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError):
            logger.warning("Unreadable desktop file: %s", desktop_path)
            return {}
    return {}


def apparmor_hook_paths(app_path: Path, manifest: dict[str, Any] | None) -> list[Path]:
    """Return profile paths declared by manifest hooks, in hook order."""
    if not manifest:
        return []
    hooks = manifest.get("hooks")
    if not isinstance(hooks, dict):
        return []

    paths: list[Path] = []
    for hook in hooks.values():
        if isinstance(hook, dict) and isinstance(hook.get("apparmor"), str):
            paths.append(app_path / hook["apparmor"])
    return paths


def find_apparmor_profile(
    app_path: Path,
    manifest: dict[str, Any] | None,
) -> Path | None:
    """Locate the AppArmor profile for an app.

    Manifest hooks are preferred; the first hook whose profile exists wins.
    Otherwise the first ``*.apparmor`` file in the directory is used.
    """
    for candidate in apparmor_hook_paths(app_path, manifest):
        try:
            if candidate.is_file():
                return candidate
        except OSError:
            continue

    profiles = find_files(app_path, APPARMOR_SUFFIX)
    return profiles[0] if profiles else None
