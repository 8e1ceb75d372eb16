"""Tests for ``cbomlens detections`` command."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from cbomlens.cli.main import cli


class TestDetections:

    def test_table_output(self, runner: CliRunner, cbom_file: Path) -> None:
        result = runner.invoke(cli, ["detections", str(cbom_file)])
        assert result.exit_code == 0
        assert "6" in result.output
        assert "detections" in result.output

    def test_json_output(self, runner: CliRunner, cbom_file: Path) -> None:
        result = runner.invoke(cli, ["detections", "--json", str(cbom_file)])
        assert result.exit_code == 0
        assert "AES128-GCM" in result.output
        assert "AES128-GCM@alg-aes" not in result.output
        assert "Vault.java" in result.output

    def test_no_components(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "empty.json"
        path.write_text("{}", encoding="utf-8")
        result = runner.invoke(cli, ["detections", str(path)])
        assert result.exit_code == 0
        assert "No cryptographic assets" in result.output

    def test_unparseable_file(self, runner: CliRunner, broken_file: Path) -> None:
        result = runner.invoke(cli, ["detections", str(broken_file)])
        assert result.exit_code == 2
