"""Tests for ``parallax scan``.

Verifies:
    - Text output and exit codes for clean, mixed, and empty roots.
    - JSON output contents.
    - Sorting and risk filtering.
    - Root from the PARALLAX_CLICK_ROOT environment variable.
"""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from parallax.cli.main import cli
from tests.discovery.helpers import EMPTY_PROFILE, create_basic_manifest, create_click_app


class TestScanText:

    def test_clean_root_exits_0(self, runner: CliRunner, clean_app_root: Path) -> None:
        result = runner.invoke(cli, ["scan", "--root", str(clean_app_root)])
        assert result.exit_code == 0
        assert "Notes" in result.output
        assert "LOW" in result.output

    def test_mixed_root_shows_all_tiers(self, runner: CliRunner, mixed_app_root: Path) -> None:
        result = runner.invoke(cli, ["scan", "--root", str(mixed_app_root)])
        assert result.exit_code == 0
        for label in ("LOW", "MEDIUM", "HIGH"):
            assert label in result.output
        assert "3" in result.output

    def test_empty_root_exits_2(self, runner: CliRunner, empty_root: Path) -> None:
        result = runner.invoke(cli, ["scan", "--root", str(empty_root)])
        assert result.exit_code == 2
        assert "No installed apps found" in result.output

    def test_missing_root_exits_2(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["scan", "--root", str(tmp_path / "missing")])
        assert result.exit_code == 2

    def test_root_from_environment(self, runner: CliRunner, clean_app_root: Path) -> None:
        result = runner.invoke(
            cli, ["scan", "--format", "json"],
            env={"PARALLAX_CLICK_ROOT": str(clean_app_root)},
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)[0]["app_id"] == "com.example.notes"


class TestScanJson:

    def test_json_fields(self, runner: CliRunner, clean_app_root: Path) -> None:
        result = runner.invoke(
            cli, ["scan", "--root", str(clean_app_root), "--format", "json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data) == 1
        app = data[0]
        assert app["app_id"] == "com.example.notes"
        assert app["display_name"] == "Notes"
        assert app["confinement"] == "strict"
        assert app["trust"] == {"score": 100, "risk_level": "low"}
        assert app["explanations"] == []
        assert app["maintainer"]["present"] is True

    def test_empty_root_json(self, runner: CliRunner, empty_root: Path) -> None:
        result = runner.invoke(
            cli, ["scan", "--root", str(empty_root), "--format", "json"]
        )
        assert result.exit_code == 2
        assert json.loads(result.stdout) == []

    def test_sort_by_score(self, runner: CliRunner, mixed_app_root: Path) -> None:
        result = runner.invoke(
            cli, ["scan", "--root", str(mixed_app_root), "--format", "json"]
        )
        scores = [app["trust"]["score"] for app in json.loads(result.stdout)]
        assert scores == [45, 70, 100]

    def test_sort_by_name(self, runner: CliRunner, mixed_app_root: Path) -> None:
        result = runner.invoke(
            cli,
            ["scan", "--root", str(mixed_app_root), "--format", "json", "--sort", "name"],
        )
        names = [app["display_name"] for app in json.loads(result.stdout)]
        assert names == ["Camera", "Notes", "Term"]

    def test_risk_filter(self, runner: CliRunner, mixed_app_root: Path) -> None:
        result = runner.invoke(
            cli,
            ["scan", "--root", str(mixed_app_root), "--format", "json", "--risk", "medium"],
        )
        data = json.loads(result.stdout)
        assert [app["app_id"] for app in data] == ["com.example.term"]
        assert set(data[0]["signals"]) == {
            "WEAK_CONFINEMENT", "MISSING_MAINTAINER", "STALE_APP",
        }

    def test_invalid_risk_choice(self, runner: CliRunner, mixed_app_root: Path) -> None:
        result = runner.invoke(
            cli, ["scan", "--root", str(mixed_app_root), "--risk", "extreme"]
        )
        assert result.exit_code == 2


class TestScanManifestText:

    def test_bracketed_title_and_maintainer(self, runner: CliRunner, tmp_path: Path) -> None:
        create_click_app(
            tmp_path, "com.example.notes",
            manifest=create_basic_manifest(
                "com.example.notes", title="Notes [/b] Pro", maintainer="Bob [/x]",
            ),
            profile=EMPTY_PROFILE,
        )
        result = runner.invoke(cli, ["scan", "--root", str(tmp_path)])
        assert result.exit_code == 0
        assert "Notes [/b] Pro" in result.output

        result = runner.invoke(
            cli, ["inspect", str(tmp_path / "com.example.notes" / "current")]
        )
        assert result.exit_code == 0
        assert "Bob [/x]" in result.output


class TestScanEntryPoint:

    def test_uses_scan_and_evaluate(
        self, runner: CliRunner, tmp_path: Path, monkeypatch
    ) -> None:
        calls: list[str] = []

        def fake_scan(root):
            calls.append(root)
            return []

        monkeypatch.setattr("parallax.cli.scan_cmd.scan_and_evaluate", fake_scan)
        result = runner.invoke(cli, ["scan", "--root", str(tmp_path), "--format", "json"])
        assert calls == [str(tmp_path)]
        assert result.exit_code == 2
        assert json.loads(result.stdout) == []
