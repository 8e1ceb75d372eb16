"""Tests for ``cbomlens quantum`` command."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from cbomlens.cli.main import cli


class TestQuantum:

    def test_table_output(self, runner: CliRunner, cbom_file: Path) -> None:
        result = runner.invoke(cli, ["quantum", str(cbom_file)])
        assert result.exit_code == 0
        assert "Security Vectors" in result.output
        assert "HNDL" in result.output

    def test_json_output_holds_all_vectors(
        self, runner: CliRunner, cbom_file: Path
    ) -> None:
        result = runner.invoke(cli, ["quantum", "--json", str(cbom_file)])
        assert result.exit_code == 0
        for vector_id in ("hndl", "authentication", "kml", "thirdParty", "cryptoAgility"):
            assert f'"{vector_id}"' in result.output
        assert '"governance"' in result.output
        assert '"Reviewed"' in result.output

    def test_defaults_without_block(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "bare.json"
        path.write_text("{}", encoding="utf-8")
        result = runner.invoke(cli, ["quantum", "--json", str(path)])
        assert result.exit_code == 0
        assert '"Not analysed"' in result.output
        assert '"critical"' in result.output
