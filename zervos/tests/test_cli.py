"""Test the zervos command line."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from zervos.cli import app

runner = CliRunner()


def _db_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"


def test_init_db(tmp_path):
    result = runner.invoke(app, ["init-db", "--database-url", _db_url(tmp_path)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "cli.db").exists()


def test_seed_twice_updates(tmp_path):
    url = _db_url(tmp_path)
    first = runner.invoke(app, ["seed", "--database-url", url])
    assert first.exit_code == 0, first.output
    assert "Seed Summary" in first.output

    second = runner.invoke(app, ["seed", "--database-url", url, "--reset"])
    assert second.exit_code == 0, second.output


def test_sync_file(tmp_path):
    batch = tmp_path / "batch.json"
    batch.write_text(json.dumps({
        "customers": [{"email": "a@b.com", "name": "A"}],
        "appointments": [{"customer_email": "a@b.com", "date": "2025-01-01", "time": "10:00"}],
    }))
    result = runner.invoke(app, ["sync", str(batch), "--database-url", _db_url(tmp_path)])
    assert result.exit_code == 0, result.output
    assert "customers" in result.output
    assert "appointments" in result.output


def test_sync_rejects_non_object(tmp_path):
    batch = tmp_path / "batch.json"
    batch.write_text("[1, 2]")
    result = runner.invoke(app, ["sync", str(batch), "--database-url", _db_url(tmp_path)])
    assert result.exit_code == 1


def test_sync_invalid_organization(tmp_path):
    batch = tmp_path / "batch.json"
    batch.write_text("{}")
    result = runner.invoke(
        app, ["sync", str(batch), "--database-url", _db_url(tmp_path), "--organization-id", "nope"]
    )
    assert result.exit_code == 1


def test_sync_invalid_record_exits_nonzero(tmp_path):
    batch = tmp_path / "batch.json"
    batch.write_text(json.dumps({"customers": [{"email": "a@b.com", "total_bookings": "many"}]}))
    result = runner.invoke(app, ["sync", str(batch), "--database-url", _db_url(tmp_path)])
    assert result.exit_code == 1
    assert "Sync failed" in result.output
