"""Tests for logging configuration (genomorph.logging_config)."""

from __future__ import annotations

import json
import logging
import os
import sys
from unittest.mock import patch

import pytest

from genomorph.interpretation.assembler import interpret_genome
from genomorph.logging_config import (
    JSONFormatter,
    TextFormatter,
    configure_logging,
    get_log_format,
    get_log_level,
    get_logger,
)
from genomorph.model.genome import Genome


def _record(
    level: int = logging.INFO,
    msg: str = "Scored %s",
    args: tuple = ("strength",),
    name: str = "genomorph.engine.scoring",
    exc_info=None,
) -> logging.LogRecord:
    record = logging.LogRecord(
        name=name,
        level=level,
        pathname="/src/genomorph/engine/scoring.py",
        lineno=42,
        msg=msg,
        args=args,
        exc_info=exc_info,
    )
    record.filename = "scoring.py"
    return record


class TestEnvironment:
    """Tests for LOG_LEVEL and LOG_FORMAT parsing."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warn", logging.WARNING),
            ("Error", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
            ("chatty", logging.INFO),
        ],
    )
    def test_log_level(self, value: str, expected: int) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": value}):
            assert get_log_level() == expected

    def test_log_level_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert get_log_level() == logging.INFO

    @pytest.mark.parametrize(
        ("value", "expected"), [("JSON", "json"), ("text", "text"), ("yaml", "text")]
    )
    def test_log_format(self, value: str, expected: str) -> None:
        with patch.dict(os.environ, {"LOG_FORMAT": value}):
            assert get_log_format() == expected


class TestJSONFormatter:
    """Tests for JSON-lines output."""

    def test_core_fields(self) -> None:
        data = json.loads(JSONFormatter().format(_record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "genomorph.engine.scoring"
        assert data["message"] == "Scored strength"
        assert "timestamp" in data
        assert "source" not in data

    @pytest.mark.parametrize("level", [logging.DEBUG, logging.ERROR])
    def test_source_on_debug_and_error(self, level: int) -> None:
        data = json.loads(JSONFormatter().format(_record(level=level)))
        assert data["source"]["line"] == 42

    def test_extra_fields_nested(self) -> None:
        record = _record()
        record.trait = "fire"
        record.final_value = 93
        data = json.loads(JSONFormatter().format(record))
        assert data["extra"] == {"final_value": 93, "trait": "fire"}

    def test_exception_rendered(self) -> None:
        try:
            raise ValueError("invalid symbol 'Q'")
        except ValueError:
            exc_info = sys.exc_info()
        data = json.loads(JSONFormatter().format(_record(level=logging.ERROR, exc_info=exc_info)))
        assert "ValueError: invalid symbol 'Q'" in data["exception"]


class TestTextFormatter:
    """Tests for human-readable output."""

    def test_drops_namespace_prefix(self) -> None:
        output = TextFormatter(use_colors=False).format(_record())
        assert "[engine.scoring] Scored strength" in output
        assert "INFO" in output
        assert "scoring.py:42" not in output

    def test_source_suffix_for_debug(self) -> None:
        output = TextFormatter(use_colors=False).format(_record(level=logging.DEBUG))
        assert output.endswith("(scoring.py:42)")


class TestConfigureLogging:
    """Tests for configure_logging and get_logger."""

    def test_single_handler_on_namespace(self) -> None:
        configure_logging(level=logging.DEBUG, format_type="text")
        configure_logging(level=logging.WARNING, format_type="json")
        logger = logging.getLogger("genomorph")
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.propagate is False

    def test_reads_environment(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "ERROR", "LOG_FORMAT": "text"}):
            configure_logging()
        logger = logging.getLogger("genomorph")
        assert logger.level == logging.ERROR
        assert isinstance(logger.handlers[0].formatter, TextFormatter)

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("scenarios", "genomorph.scenarios"), ("genomorph.cli", "genomorph.cli")],
    )
    def test_get_logger_namespace(self, name: str, expected: str) -> None:
        assert get_logger(name).name == expected

    def test_region_timings_logged_as_json(
        self, uniform_genome: Genome, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(level=logging.DEBUG, format_type="json")
        interpret_genome(uniform_genome, parallel=False)
        lines = [json.loads(line) for line in capsys.readouterr().err.splitlines()]
        timings = [
            line["message"]
            for line in lines
            if line["logger"] == "genomorph.interpretation.assembler"
        ]
        assert [message.split()[1] for message in timings] == [
            "Morphology",
            "Metabolism",
            "Cognition",
            "Power",
        ]
