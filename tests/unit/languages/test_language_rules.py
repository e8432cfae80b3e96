"""Test language tables and their lookups."""
import pytest
from pydantic import ValidationError
from humandate.languages.registry import en, es, que
from humandate.languages.tables import LANGUAGE_TABLES, build_language
from humandate.models.language import TimeUnit
from tests.factories import make_language, make_rules


class TestKeywords:
    def test_spanish(self):
        rules = es().rules
        assert rules.is_today("hoy")
        assert rules.is_today("ya")
        assert rules.is_today("Ahora")
        assert rules.is_tomorrow("mañana")
        assert rules.is_tomorrow("manana")
        assert rules.is_tomorrow("MAÑANA")
        assert rules.is_yesterday("ayer")

    def test_english(self):
        rules = en().rules
        assert rules.is_today("now")
        assert rules.is_today("TODAY")
        for token in ("tomorrow", "tmr", "tmw", "tmrw"):
            assert rules.is_tomorrow(token)
        assert rules.is_yesterday("ytd")

    def test_quechua(self):
        rules = que().rules
        assert rules.is_today("kunan")
        assert rules.is_today("ña")
        assert rules.is_today("na")
        assert rules.is_tomorrow("haya")
        assert rules.is_yesterday("jainapunchau")

    def test_keyword_offset(self):
        rules = es().rules
        assert rules.keyword_offset("hoy") == 0
        assert rules.keyword_offset("mañana") == 1
        assert rules.keyword_offset("ayer") == -1
        assert rules.keyword_offset("today") is None

    def test_keyword_is_not_partial(self):
        assert es().rules.is_today("hoy mismo") is False


class TestUnits:
    @pytest.mark.parametrize("lang,suffix,unit", [
        (es, "d", TimeUnit.DAY),
        (es, "s", TimeUnit.WEEK),
        (es, "m", TimeUnit.MONTH),
        (es, "A", TimeUnit.YEAR),
        (en, "w", TimeUnit.WEEK),
        (en, "y", TimeUnit.YEAR),
        (que, "p", TimeUnit.DAY),
        (que, "h", TimeUnit.WEEK),
        (que, "k", TimeUnit.MONTH),
        (que, "w", TimeUnit.YEAR),
    ])
    def test_unit_for(self, lang, suffix, unit):
        assert lang().rules.unit_for(suffix) == unit

    def test_unknown_suffix(self):
        assert es().rules.unit_for("y") is None
        assert en().rules.unit_for("a") is None


class TestMonths:
    def test_month_name(self):
        assert es().rules.month_name(1) == "enero"
        assert en().rules.month_name(6) == "June"
        assert que().rules.month_name(5) == "Aymuray"

    @pytest.mark.parametrize("index", [0, 13, -1])
    def test_month_name_out_of_range(self, index):
        with pytest.raises(IndexError):
            es().rules.month_name(index)

    def test_month_index(self):
        assert es().rules.month_index("Junio") == 6
        assert en().rules.month_index("december") == 12
        assert que().rules.month_index("ayriway") == 4
        assert que().rules.month_index("AYAMARQ'A") == 11
        assert es().rules.month_index("june") is None


class TestValidation:
    def test_builtin_tables_are_valid(self):
        for code, table in LANGUAGE_TABLES.items():
            assert build_language(code, table).code == code

    def test_duplicate_keyword_across_groups(self):
        with pytest.raises(ValidationError, match="ambiguous"):
            make_rules(tomorrow=("hoje",))

    def test_duplicate_keyword_after_normalization(self):
        with pytest.raises(ValidationError, match="ambiguous"):
            make_rules(today=("agora", "AGORA"))

    def test_empty_keyword_group(self):
        with pytest.raises(ValidationError):
            make_rules(yesterday=())

    def test_suffix_must_be_single_letter(self):
        with pytest.raises(ValidationError, match="single letter"):
            make_rules(unit_suffixes={
                "dd": TimeUnit.DAY, "s": TimeUnit.WEEK, "m": TimeUnit.MONTH, "a": TimeUnit.YEAR,
            })

    def test_every_unit_needs_a_suffix(self):
        with pytest.raises(ValidationError, match="year"):
            make_rules(unit_suffixes={"d": TimeUnit.DAY, "s": TimeUnit.WEEK, "m": TimeUnit.MONTH})

    def test_twelve_months_required(self):
        with pytest.raises(ValidationError, match="12 month"):
            make_rules(month_names=("a", "b"))

    def test_digit_separator_rejected(self):
        with pytest.raises(ValidationError, match="separator"):
            make_rules(separators=("1",))

    def test_language_code_normalized(self):
        assert make_language(code=" PT ").code == "pt"

    def test_language_is_frozen(self):
        language = make_language()
        with pytest.raises(ValidationError):
            language.code = "xx"

    def test_unit_suffixes_are_read_only(self):
        rules = es().rules
        with pytest.raises(TypeError):
            rules.unit_suffixes["x"] = TimeUnit.DAY
        assert rules.unit_for("x") is None

    def test_ordinal_suffixes_are_read_only(self):
        with pytest.raises(TypeError):
            en().phrasing.ordinal_suffixes[4] = "xx"
        assert en().phrasing.ordinal(4) == "4th"

    def test_separator_pattern_built_once(self):
        rules = es().rules
        assert rules.separator_pattern is rules.separator_pattern
        assert rules.separator_pattern.split("1.4/12") == ["1", "4", "12"]

    def test_custom_separators_split(self):
        rules = make_rules(separators=(":",))
        assert rules.separator_pattern.split("1:4") == ["1", "4"]


class TestOrdinals:
    @pytest.mark.parametrize("day,expected", [
        (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
        (11, "11th"), (12, "12th"), (13, "13th"),
        (21, "21st"), (22, "22nd"), (23, "23rd"), (31, "31st"),
    ])
    def test_english(self, day, expected):
        assert en().phrasing.ordinal(day) == expected

    def test_spanish_has_no_suffix(self):
        assert es().phrasing.ordinal(1) == "1"
        assert es().phrasing.ordinal(12) == "12"
