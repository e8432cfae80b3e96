"""Test structlog configuration."""
import json
import pytest
import structlog
from datetime import date
from humandate.parsing.parser import DateParser
from humandate.utils.logging import get_logger, setup_logging


@pytest.mark.usefixtures("reset_structlog")
class TestSetupLogging:
    def test_json_output(self, capsys):
        setup_logging("INFO")
        get_logger("test").info("hello", answer=42)
        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "hello"
        assert record["answer"] == 42
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filtering(self, capsys):
        setup_logging("WARNING")
        get_logger("test").info("hidden")
        get_logger("test").warning("shown")
        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_parser_logs_unparseable_input(self, capsys):
        setup_logging("DEBUG")
        DateParser("es", today=date(2024, 6, 19)).parse("31/02")
        records = [json.loads(line) for line in capsys.readouterr().out.splitlines() if line]
        failures = [r for r in records if r["event"] == "date_unparseable"]
        assert failures
        assert failures[-1]["grammar"] == "delimited"

    def test_console_renderer(self, capsys):
        setup_logging("INFO", json_output=False)
        get_logger("test").info("plain")
        assert "plain" in capsys.readouterr().out

    def test_contextvars_merged(self, capsys):
        setup_logging("INFO")
        structlog.contextvars.bind_contextvars(request_id="abc")
        try:
            get_logger("test").info("tagged")
        finally:
            structlog.contextvars.clear_contextvars()
        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["request_id"] == "abc"
