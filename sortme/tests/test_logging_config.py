"""
Tests for logging configuration.
"""

import json
import logging

import pytest

from sortme.logging_config import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_format_carries_run_id(capsys):
    setup_logging(level="INFO", fmt="json")
    get_logger("sortme.test", run_id="quick-abc123").info("Built log")

    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert record["message"] == "Built log"
    assert record["run_id"] == "quick-abc123"
    assert record["level"] == "INFO"
    assert record["logger"] == "sortme.test"


def test_text_format_defaults_run_id(capsys):
    setup_logging(level="DEBUG", fmt="text")
    logging.getLogger("sortme.plain").debug("hello")

    assert "hello [run_id=N/A]" in capsys.readouterr().err


def test_level_from_env(capsys, monkeypatch):
    monkeypatch.setenv("SORTME_LOG_LEVEL", "ERROR")
    setup_logging(fmt="text")
    logging.getLogger("sortme.quiet").warning("dropped")

    assert logging.getLogger().level == logging.ERROR
    assert "dropped" not in capsys.readouterr().err
