"""Shared test fixtures."""
import pytest
import structlog
from datetime import date
from humandate.config import Settings
from humandate.formatting.formatter import DateFormatter
from humandate.parsing.parser import DateParser

# A Wednesday in a leap year
TODAY = date(2024, 6, 19)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def es_parser():
    return DateParser("es", today=TODAY)


@pytest.fixture
def en_parser():
    return DateParser("en", today=TODAY)


@pytest.fixture
def que_parser():
    return DateParser("que", today=TODAY)


@pytest.fixture
def es_formatter():
    return DateFormatter("dd/MM/yyyy", "es", today=TODAY)


@pytest.fixture
def test_settings():
    """Settings with explicit values so the environment cannot leak in."""
    return Settings(
        default_language="es",
        default_pattern="dd/MM/yyyy",
        two_digit_pivot=50,
        relative_window_days=7,
        log_level="DEBUG",
        log_json=True,
    )


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()
