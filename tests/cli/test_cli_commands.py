"""Tests for CLI commands end to end through the Typer app."""

import json

import pytest

from royaltyscope.config import settings
from royaltyscope.config.settings import PipelineSettings
from royaltyscope.infrastructure.cli.app import app


class TestAppHelp:
    """Test command registration."""

    def test_help_lists_commands(self, runner):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("match", "reconcile", "pipeline", "check-config", "version"):
            assert command in result.stdout

    def test_version(self, runner):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "royaltyscope" in result.stdout


class TestMatchCommand:
    """Test single-song matching."""

    def test_json_output(self, runner, catalog_file):
        result = runner.invoke(
            app,
            [
                "match",
                "Midnight Dreams",
                "Alex Rivera",
                "--catalog",
                str(catalog_file),
                "--iswc",
                "T-123456789-0",
                "--format",
                "json",
            ],
        )

        assert result.exit_code == 0
        matches = json.loads(result.stdout)
        assert matches[0]["work_id"] == "w-1"
        assert matches[0]["match_type"] == "exact"

    def test_table_output(self, runner, catalog_file):
        result = runner.invoke(
            app, ["match", "Midnight Dreams", "Alex Rivera", "-c", str(catalog_file)]
        )

        assert result.exit_code == 0
        assert "w-1" in result.stdout

    def test_no_candidates(self, runner, catalog_file):
        result = runner.invoke(
            app, ["match", "Zzyzx", "Qqq", "-c", str(catalog_file)]
        )

        assert result.exit_code == 0
        assert "No catalog matches" in result.stdout


class TestReconcileCommand:
    """Test statement reconciliation."""

    def test_json_output(self, runner, statement_file, catalog_file):
        result = runner.invoke(
            app,
            ["reconcile", str(statement_file), "-c", str(catalog_file), "-f", "json"],
        )

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["song_count"] == 2
        assert payload["matched_count"] == 1
        assert payload["matches"]["midnight dreams-alex rivera"]["work_id"] == "w-1"
        assert payload["matches"]["zzyzx-qqq"] is None

    def test_bad_record_exits_nonzero(self, runner, tmp_path, catalog_file):
        statement = tmp_path / "bad.json"
        statement.write_text(json.dumps([{"artist": "No Title"}]), encoding="utf-8")

        result = runner.invoke(
            app, ["reconcile", str(statement), "-c", str(catalog_file)]
        )

        assert result.exit_code == 1

    def test_error_written_to_stderr(self, runner, tmp_path, catalog_file):
        """Errors stay out of stdout so JSON output remains parseable."""
        statement = tmp_path / "bad.json"
        statement.write_text(json.dumps([{"artist": "No Title"}]), encoding="utf-8")

        result = runner.invoke(
            app,
            ["reconcile", str(statement), "-c", str(catalog_file), "-f", "json"],
        )

        assert result.exit_code == 1
        assert "Error during reconcile" in result.stderr
        assert "Error" not in result.stdout


class TestPipelineCommand:
    """Test catalog pipeline estimates."""

    def test_json_output(self, runner, songs_file):
        result = runner.invoke(app, ["pipeline", str(songs_file), "--format", "json"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["total"] > 0
        assert payload["scenario"]["base"] == payload["total"]
        assert [song["song_id"] for song in payload["song_results"]] == ["s-1", "s-2"]

    def test_chunked_matches_unchunked(self, runner, songs_file):
        whole = runner.invoke(app, ["pipeline", str(songs_file), "-f", "json"])
        chunked = runner.invoke(
            app, ["pipeline", str(songs_file), "--chunk-size", "1", "-f", "json"]
        )

        assert json.loads(whole.stdout) == json.loads(chunked.stdout)

    def test_table_output(self, runner, songs_file):
        result = runner.invoke(app, ["pipeline", str(songs_file)])

        assert result.exit_code == 0
        assert "Catalog Pipeline" in result.stdout


class TestCheckConfigCommand:
    """Test configuration validation."""

    def test_default_config_is_valid(self, runner):
        result = runner.invoke(app, ["check-config"])

        assert result.exit_code == 0
        assert "valid" in result.stdout

    @pytest.mark.parametrize("bad", [{"platform_fee": 1.5}, {"weight_sync": 0.5}])
    def test_invalid_config_exits_nonzero(self, runner, monkeypatch, bad):
        monkeypatch.setattr(settings, "pipeline", PipelineSettings(**bad))

        result = runner.invoke(app, ["check-config"])

        assert result.exit_code == 1
