#!/usr/bin/env python3
"""Print a table of sample inputs and how they resolve in each language.

Usage: python scripts/showcase.py [CODE ...]
"""
import sys

from dotenv import load_dotenv
load_dotenv()

from humandate.config import Settings
from humandate.formatting.formatter import DateFormatter
from humandate.languages.registry import get_registry
from humandate.parsing.parser import DateParser

NUMERIC_SAMPLES = [
    "02", "2", "0405", "040515", "04052015",
    "1.4.12", "1-4-12", "1·4·12", "1/4/12", "01·04·2012", "1/04/2012",
    "1.4", "01/04", "0", "+2", "-4",
]

OFFSET_SAMPLES = ["+4{day}", "-4{day}", "+2{week}", "-2{week}", "+1{month}", "-1{month}", "+5{year}", "-5{year}"]


def samples_for(language) -> list[str]:
    letters = {}
    for suffix, unit in language.rules.unit_suffixes.items():
        letters.setdefault(unit.value, suffix)
    keywords = [*language.rules.today, *language.rules.tomorrow, *language.rules.yesterday]
    return NUMERIC_SAMPLES + [s.format(**letters) for s in OFFSET_SAMPLES] + keywords


def main(codes: list[str]) -> None:
    settings = Settings()
    registry = get_registry()
    languages = [registry.get(code) for code in codes] if codes else list(registry)

    for language in languages:
        parser = DateParser(language, two_digit_pivot=settings.two_digit_pivot)
        formatter = DateFormatter(settings.default_pattern, language)
        print(f"\n{language.name} ({language.code})")
        print("-" * 50)
        for text in samples_for(language):
            value = parser.parse(text)
            rendered = formatter.format(value) if value else "-"
            print(f"{text:<14} {rendered:<12} {formatter.format_human(value) or ''}")


if __name__ == "__main__":
    main(sys.argv[1:])
