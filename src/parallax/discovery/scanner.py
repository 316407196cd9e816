"""Read-only scanner for installed Ubuntu Touch click applications.

Enumerates the click install root and builds one ``RawAppFact`` per
application. The scanner never raises to its caller:

- A missing or unreadable root yields an empty list.
- A package directory without a ``current`` entry is skipped.
- A field that cannot be read becomes None (or ``unknown`` confinement /
  no permissions) while the rest of the record is still produced.

Layout::

    /opt/click.ubuntu.com/
        com.example.app/
            current -> 1.2.0/
                manifest.json
                app.desktop
                app.apparmor
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from parallax.core.models import RawAppFact
from parallax.discovery.apparmor import classify_confinement, infer_permissions
from parallax.discovery.manifest import (
    find_apparmor_profile,
    manifest_mtime,
    read_desktop_entry,
    read_manifest,
)
from parallax.exceptions import ManifestError

logger = logging.getLogger(__name__)

CLICK_APP_DIR: Path = Path("/opt/click.ubuntu.com")
CURRENT_LINK: str = "current"


def _string_field(manifest: dict[str, Any] | None, key: str) -> str | None:
    """Return a non-empty string manifest field, else None."""
    if not manifest:
        return None
    value = manifest.get(key)
    if isinstance(value, str) and value:
        return value
    return None


class ClickAppScanner:
    """Discovers installed click apps and reads their raw trust facts.

    Usage::

        scanner = ClickAppScanner()
        for fact in scanner.scan_installed_apps():
            print(fact.app_id, fact.confinement)
    """

    def _get_root(self, root: Path | str | None = None) -> Path:
        """Resolve the click install root to scan."""
        return Path(root) if root is not None else CLICK_APP_DIR

    def scan_installed_apps(self, root: Path | str | None = None) -> list[RawAppFact]:
        """Scan every installed app under the click root.

        Args:
            root: Override the install root (for testing).

        Returns:
            One ``RawAppFact`` per app, in package-name order.
        """
        facts: list[RawAppFact] = []
        for app_path in self.discover_click_apps(self._get_root(root)):
            try:
                facts.append(self.read_app_metadata(app_path))
            except Exception:
                logger.warning("Failed to read app: %s", app_path, exc_info=True)
        return facts

    def discover_click_apps(self, root_dir: Path) -> list[Path]:
        """Find the ``current`` directory of every installed package.

        Hidden entries are skipped, as are packages without ``current``.

        Args:
            root_dir: The click install root.

        Returns:
            Paths to each package's ``current`` directory, sorted.
        """
        try:
            if not root_dir.is_dir():
                logger.warning("Click root not found: %s", root_dir)
                return []
            packages = sorted(root_dir.iterdir())
        except (PermissionError, OSError):
            logger.warning("Cannot enumerate click root: %s", root_dir)
            return []

        app_dirs: list[Path] = []
        for package in packages:
            if package.name.startswith("."):
                continue
            current = package / CURRENT_LINK
            try:
                if current.is_dir():
                    app_dirs.append(current)
            except (PermissionError, OSError):
                continue
        return app_dirs

    def read_app_metadata(self, app_path: Path) -> RawAppFact:
        """Read the raw trust facts for one app directory.

        Args:
            app_path: The app's ``current`` directory.

        Returns:
            A best-effort ``RawAppFact``. Unreadable fields are None.
        """
        manifest = self._load_manifest(app_path)
        desktop = read_desktop_entry(app_path)
        profile = self._read_profile(app_path, manifest)

        return RawAppFact(
            app_id=self._read_app_id(app_path, manifest),
            display_name=_string_field(manifest, "title") or desktop.get("Name") or None,
            version=_string_field(manifest, "version"),
            icon_path=self._read_icon(app_path, manifest, desktop),
            confinement=classify_confinement(profile).value,
            permissions=infer_permissions(profile),
            maintainer_name=_string_field(manifest, "maintainer"),
            last_updated=self._read_last_updated(app_path),
        )

    def _load_manifest(self, app_path: Path) -> dict[str, Any] | None:
        """Load the manifest, logging and degrading to None on failure."""
        try:
            return read_manifest(app_path)
        except ManifestError as exc:
            logger.warning("%s", exc)
            return None

    def _read_app_id(self, app_path: Path, manifest: dict[str, Any] | None) -> str:
        """Manifest name, falling back to the package directory name."""
        return _string_field(manifest, "name") or app_path.parent.name

    def _read_icon(
        self,
        app_path: Path,
        manifest: dict[str, Any] | None,
        desktop: dict[str, str],
    ) -> str | None:
        """Resolve the icon from the manifest, else the desktop entry."""
        icon = _string_field(manifest, "icon") or desktop.get("Icon")
        if not icon:
            return None
        icon_path = Path(icon)
        if not icon_path.is_absolute():
            icon_path = app_path / icon_path
        return str(icon_path)

    def _read_profile(
        self,
        app_path: Path,
        manifest: dict[str, Any] | None,
    ) -> str | None:
        """Return the AppArmor profile text, or None if absent or unreadable."""
        profile_path = find_apparmor_profile(app_path, manifest)
        if profile_path is None:
            return None
        try:
            return profile_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            logger.warning("Unreadable AppArmor profile: %s", profile_path)
            return None

    def _read_last_updated(self, app_path: Path) -> datetime | None:
        """Manifest modification time as an aware UTC datetime."""
        mtime = manifest_mtime(app_path)
        if mtime is None:
            return None
        return datetime.fromtimestamp(mtime, tz=timezone.utc)
