from __future__ import annotations

import json
import logging

import pytest
import structlog

from asyncseq import configure_logging, get_logger


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def test_json_output(restore_logging, capsys):
    configure_logging("DEBUG", json_output=True)

    get_logger("asyncseq.test").info("pipeline.done", rows=3)

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "pipeline.done"
    assert record["rows"] == 3
    assert record["level"] == "info"
    assert record["logger"] == "asyncseq.test"
    assert "timestamp" in record


def test_level_filters_debug(restore_logging, capsys):
    configure_logging("INFO", json_output=True)

    get_logger("asyncseq.test").debug("sequence.resolved", kind="native")

    assert capsys.readouterr().err == ""
