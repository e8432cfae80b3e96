"""Test DateFormatter fixed and human output."""
import pytest
from datetime import date, timedelta
from humandate.errors import InvalidArgumentError, InvalidPatternError, UnsupportedLanguageError
from humandate.formatting.formatter import DateFormatter


class TestFormat:
    def test_default_pattern(self, es_formatter):
        assert es_formatter.format(date(2024, 6, 19)) == "19/06/2024"

    def test_none(self, es_formatter):
        assert es_formatter.format(None) is None
        assert es_formatter.format_human(None) is None

    def test_set_pattern(self, es_formatter):
        es_formatter.set_pattern("yyyy-MM-dd")
        assert es_formatter.pattern == "yyyy-MM-dd"
        assert es_formatter.format(date(2024, 6, 19)) == "2024-06-19"

    def test_invalid_pattern_keeps_previous(self, es_formatter):
        with pytest.raises(InvalidPatternError):
            es_formatter.set_pattern("QQ")
        assert es_formatter.pattern == "dd/MM/yyyy"
        assert es_formatter.format(date(2024, 6, 19)) == "19/06/2024"

    def test_month_names_follow_language(self, es_formatter):
        es_formatter.set_pattern("d MMMM")
        assert es_formatter.format(date(2024, 4, 1)) == "1 abril"
        es_formatter.set_language("en")
        assert es_formatter.format(date(2024, 4, 1)) == "1 April"


class TestFormatHuman:
    @pytest.mark.parametrize("code,expected", [
        ("es", "19 de junio de 2024"),
        ("en", "June 19th, 2024"),
        ("que", "19 Inti raymi killa, 2024"),
    ])
    def test_full_date(self, code, expected):
        formatter = DateFormatter(language=code, today=date(2025, 1, 1))
        assert formatter.format_human(date(2024, 6, 19)) == expected

    def test_english_ordinals(self):
        formatter = DateFormatter(language="en", today=date(2000, 1, 1))
        assert formatter.format_human(date(2015, 5, 4)) == "May 4th, 2015"
        assert formatter.format_human(date(2012, 4, 1)) == "April 1st, 2012"
        assert formatter.format_human(date(2012, 4, 22)) == "April 22nd, 2012"
        assert formatter.format_human(date(2012, 4, 13)) == "April 13th, 2012"

    @pytest.mark.parametrize("code,offset,expected", [
        ("es", 0, "hoy"),
        ("es", 1, "mañana"),
        ("es", -1, "ayer"),
        ("es", 3, "dentro de 3 días"),
        ("es", -3, "hace 3 días"),
        ("en", 0, "today"),
        ("en", 1, "tomorrow"),
        ("en", -1, "yesterday"),
        ("en", 7, "in 7 days"),
        ("en", -7, "7 days ago"),
        ("que", 0, "kunan p'unchay"),
        ("que", 1, "paqarin p'unchay"),
        ("que", -1, "qayna p'unchay"),
        ("que", 2, "kunan +2 p'unchay"),
        ("que", -4, "kunan -4 p'unchay"),
    ])
    def test_relative(self, today, code, offset, expected):
        formatter = DateFormatter(language=code, today=today)
        assert formatter.format_human(today + timedelta(days=offset)) == expected

    def test_outside_window(self, today):
        formatter = DateFormatter(language="en", today=today)
        assert formatter.format_human(date(2024, 6, 27)) == "June 27th, 2024"
        assert formatter.format_human(date(2024, 6, 11)) == "June 11th, 2024"

    def test_zero_window(self, today):
        formatter = DateFormatter(language="en", today=today, relative_window_days=0)
        assert formatter.format_human(today) == "today"
        assert formatter.format_human(date(2024, 6, 20)) == "June 20th, 2024"

    def test_wall_clock_default(self):
        assert DateFormatter(language="en").format_human(date.today()) == "today"


class TestConstruction:
    def test_none_pattern(self):
        with pytest.raises(InvalidArgumentError):
            DateFormatter(None, "es")

    def test_none_language(self):
        with pytest.raises(InvalidArgumentError):
            DateFormatter("dd/MM/yyyy", None)

    def test_unknown_language(self):
        with pytest.raises(UnsupportedLanguageError):
            DateFormatter("dd/MM/yyyy", "xx")

    def test_invalid_pattern(self):
        with pytest.raises(InvalidPatternError):
            DateFormatter("dd/MM/yyyy hh", "es")

    def test_negative_window(self):
        with pytest.raises(ValueError):
            DateFormatter(relative_window_days=-1)

    def test_from_settings(self, test_settings):
        test_settings.default_pattern = "yyyy.MM.dd"
        test_settings.default_language = "en"
        formatter = DateFormatter.from_settings(test_settings)
        assert formatter.pattern == "yyyy.MM.dd"
        assert formatter.language.code == "en"
        assert formatter.config.relative_window_days == 7
