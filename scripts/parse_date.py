#!/usr/bin/env python3
"""Parse one or more human-typed dates from the command line.

Usage: python scripts/parse_date.py [--lang CODE] TEXT [TEXT ...]
"""
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from humandate.config import Settings
from humandate.errors import UnsupportedLanguageError
from humandate.formatting.formatter import DateFormatter
from humandate.parsing.parser import DateParser
from humandate.utils.logging import setup_logging


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings.log_level, json_output=settings.log_json)

    language = settings.default_language
    if len(argv) >= 2 and argv[0] == "--lang":
        language, argv = argv[1], argv[2:]
    if not argv:
        print(__doc__.strip().splitlines()[-1])
        return 2

    try:
        parser = DateParser(language, two_digit_pivot=settings.two_digit_pivot)
    except UnsupportedLanguageError as e:
        print(f"Error: {e}")
        return 2
    formatter = DateFormatter.from_settings(settings).set_language(parser.language)

    width = max(len(text) for text in argv)
    for text in argv:
        result = parser.parse_detailed(text)
        if result is None:
            print(f"{text:<{width}}  ->  (not a date)")
            continue
        print(
            f"{text:<{width}}  ->  {formatter.format(result.value)}"
            f"  [{result.grammar.value}]  {formatter.format_human(result.value)}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
