"""
Smoke tests for the sortme CLI.
"""

import json
import logging

import pytest
from typer.testing import CliRunner

from sortme_cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logs(monkeypatch):
    """The CLI reconfigures the root logger; put it back afterwards."""
    monkeypatch.setenv("SORTME_LOG_LEVEL", "WARNING")
    for var in ("SORTME_ALGORITHM", "SORTME_SIZE", "SORTME_SPEED", "SORTME_SEED"):
        monkeypatch.delenv(var, raising=False)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_algorithms_lists_all():
    result = runner.invoke(app, ["algorithms"])
    assert result.exit_code == 0
    for name in ("bubble", "selection", "insertion", "merge", "quick"):
        assert name in result.stdout


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "sortme CLI" in result.stdout


def test_log_show_json():
    result = runner.invoke(app, ["log", "show", "--values", "5,3,1", "--algorithm", "selection", "--json"])
    assert result.exit_code == 0
    out = json.loads(result.stdout)
    assert out["algorithm"] == "selection"
    assert out["values"] == [5, 3, 1]
    assert out["events"][:3] == [
        {"type": "compare", "i": 0, "j": 1},
        {"type": "compare", "i": 0, "j": 2},
        {"type": "swap", "i": 0, "j": 2},
    ]
    assert out["events"][-1] == {"type": "done"}


def test_log_show_table_with_limit():
    result = runner.invoke(app, ["log", "show", "-a", "bubble", "-n", "6", "--seed", "3", "--limit", "2"])
    assert result.exit_code == 0
    assert "more events" in result.stdout


def test_log_show_unknown_algorithm():
    result = runner.invoke(app, ["log", "show", "--values", "2,1", "--algorithm", "bogo", "--json"])
    assert result.exit_code == 2
    assert "error" in json.loads(result.stdout)


def test_export_then_replay(tmp_path):
    path = str(tmp_path / "quick.jsonl")
    result = runner.invoke(app, ["log", "export", "--out", path, "-a", "quick", "-n", "15", "--seed", "11"])
    assert result.exit_code == 0

    result = runner.invoke(app, ["replay", "--log", path, "--json", "--show-values"])
    assert result.exit_code == 0
    out = json.loads(result.stdout)
    assert out["success"] is True
    assert out["sorted"] is True
    assert out["events_replayed"] == out["total_events"]
    assert out["values"] == sorted(out["values"])


def test_replay_until(tmp_path):
    path = str(tmp_path / "bubble.jsonl")
    runner.invoke(app, ["log", "export", "--out", path, "-a", "bubble", "--values", "4,3,2,1"])

    result = runner.invoke(app, ["replay", "--log", path, "--until", "0", "--json"])
    assert result.exit_code == 0
    out = json.loads(result.stdout)
    assert out["events_replayed"] == 1
    assert out["comparisons"] == 1
    assert out["sorted"] is False


def test_replay_missing_file(tmp_path):
    result = runner.invoke(app, ["replay", "--log", str(tmp_path / "missing.jsonl"), "--json"])
    assert result.exit_code == 2
    assert json.loads(result.stdout)["error"] == "Log file not found"


def test_play_steps_manually():
    result = runner.invoke(app, ["play", "-a", "bubble", "--values", "4,3,2,1", "--steps", "1", "--height", "4"])
    assert result.exit_code == 0
    assert "Stepping" in result.stdout
    assert "comparisons 1" in result.stdout


def test_play_steps_stop_at_done():
    result = runner.invoke(app, ["play", "-a", "quick", "--values", "3,1,2", "--steps", "500", "--height", "4"])
    assert result.exit_code == 0
    assert "Done" in result.stdout


def test_replay_malformed_file(tmp_path):
    path = tmp_path / "bad.jsonl"
    path.write_text("[1, 2, 3]\n")
    result = runner.invoke(app, ["replay", "--log", str(path), "--json"])
    assert result.exit_code == 2
    assert "header" in json.loads(result.stdout)["error"]


def test_play_runs_to_done():
    result = runner.invoke(app, ["play", "-a", "quick", "--values", "3,1,2", "--speed", "100", "--height", "4"])
    assert result.exit_code == 0
    assert "Done" in result.stdout
