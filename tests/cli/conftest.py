"""CLI test fixtures - Typer runner plus on-disk catalog and statement files."""

import json

from loguru import logger
import pytest
from typer.testing import CliRunner


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Skip log file and console sinks so stdout carries only command output."""
    monkeypatch.setattr(
        "royaltyscope.infrastructure.cli.app.setup_loguru_logger",
        lambda verbose=False: logger.remove(),
    )


@pytest.fixture
def runner():
    """CLI test runner."""
    return CliRunner()


def _write_json(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def catalog_file(tmp_path):
    return _write_json(
        tmp_path / "catalog.json",
        [
            {
                "id": "w-1",
                "title": "Midnight Dreams",
                "iswc": "T-123456789-0",
                "akas": ["Midnight Dreamz"],
                "writers": [{"name": "Alex Rivera", "ownership_percentage": 50}],
            },
            {"id": "w-3", "title": "Quiet Harbour"},
        ],
    )


@pytest.fixture
def statement_file(tmp_path):
    return _write_json(
        tmp_path / "statement.json",
        [
            {
                "title": "Midnight Dreams",
                "artist": "Alex Rivera",
                "iswc": "T-123456789-0",
                "gross_amount": 125.5,
            },
            {"title": "Zzyzx", "artist": "Qqq", "gross_amount": 3},
        ],
    )


@pytest.fixture
def songs_file(tmp_path):
    return _write_json(
        tmp_path / "songs.json",
        {
            "records": [
                {
                    "id": "s-1",
                    "title": "Midnight Dreams",
                    "completeness_score": 0.9,
                    "verification_status": "pro_verified",
                    "iswc": "T-123456789-0",
                },
                {"id": "s-2", "title": "Found Footage", "completeness_score": 0.4},
            ]
        },
    )
