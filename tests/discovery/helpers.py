"""Shared test helpers for building fake click install roots.

Each helper creates a minimal but realistic ``<root>/<package>/current``
tree. These are used by the discovery, CLI, and integration tests.
"""

from __future__ import annotations

import json
import os
from datetime import datetime
from pathlib import Path
from typing import Any

STRICT_PROFILE = json.dumps({
    "policy_groups": ["networking", "camera", "audio"],
    "policy_version": 16.04,
})

UNCONFINED_PROFILE = json.dumps({
    "template": "unconfined",
    "policy_groups": [],
    "policy_version": 16.04,
})

RESERVED_PROFILE = json.dumps({
    "policy_groups": ["location", "reserved-group"],
    "policy_version": 16.04,
})

EMPTY_PROFILE = json.dumps({
    "policy_groups": [],
    "policy_version": 16.04,
})


def create_click_app(
    root: Path,
    package: str,
    manifest: dict[str, Any] | str | None = None,
    profile: str | None = None,
    desktop: str | None = None,
    hook_profile: bool = True,
    mtime: datetime | None = None,
) -> Path:
    """Create ``<root>/<package>/current`` with optional metadata files.

    Args:
        root: Fake click install root.
        package: Package directory name.
        manifest: Manifest document, raw manifest text, or None for none.
        profile: AppArmor profile text written to ``app.apparmor``.
        desktop: Desktop entry text written to ``app.desktop``.
        hook_profile: Reference the profile from a manifest hook.
        mtime: Modification time to stamp onto ``manifest.json``.

    Returns:
        Path to the app's ``current`` directory.
    """
    current = root / package / "current"
    current.mkdir(parents=True, exist_ok=True)

    if isinstance(manifest, dict) and profile is not None and hook_profile:
        manifest = {**manifest, "hooks": {"app": {"apparmor": "app.apparmor"}}}

    if manifest is not None:
        manifest_path = current / "manifest.json"
        text = manifest if isinstance(manifest, str) else json.dumps(manifest)
        manifest_path.write_text(text)
        if mtime is not None:
            stamp = mtime.timestamp()
            os.utime(manifest_path, (stamp, stamp))

    if profile is not None:
        (current / "app.apparmor").write_text(profile)

    if desktop is not None:
        (current / "app.desktop").write_text(desktop)

    return current


def create_basic_manifest(name: str, **extra: Any) -> dict[str, Any]:
    """Return a typical manifest for ``name``."""
    manifest: dict[str, Any] = {
        "name": name,
        "title": name.rsplit(".", 1)[-1].capitalize(),
        "version": "1.0.0",
        "maintainer": "Jane Doe <jane@example.com>",
        "icon": "assets/icon.svg",
    }
    manifest.update(extra)
    return manifest
