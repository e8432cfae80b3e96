"""Parse and format routes.

Each request gets its own parser/formatter, so concurrent requests never
share mutable configuration.
"""
from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException, Request
from ...config import Settings
from ...errors import InvalidPatternError, UnsupportedLanguageError
from ...formatting.formatter import DateFormatter
from ...languages.registry import get_registry
from ...parsing.parser import DateParser
from ..schemas import (
    FormatRequest, FormatResponse, LanguageInfo, ParseRequest, ParseResponse,
)

router = APIRouter()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.get("/languages", response_model=list[LanguageInfo])
async def list_languages():
    """Supported languages with their keywords and unit letters."""
    return [
        LanguageInfo(
            code=lang.code,
            name=lang.name,
            today=list(lang.rules.today),
            tomorrow=list(lang.rules.tomorrow),
            yesterday=list(lang.rules.yesterday),
            units={suffix: unit.value for suffix, unit in lang.rules.unit_suffixes.items()},
            months=list(lang.rules.month_names),
        )
        for lang in get_registry()
    ]


@router.post("/parse", response_model=ParseResponse)
async def parse_text(body: ParseRequest, settings: Settings = Depends(get_settings)):
    """Parse free text. Unrecognisable input is not an error: ``date`` is null."""
    try:
        parser = DateParser(
            body.language or settings.default_language,
            today=body.today,
            two_digit_pivot=settings.two_digit_pivot,
        )
    except UnsupportedLanguageError as e:
        raise HTTPException(status_code=404, detail=str(e))

    result = parser.parse_detailed(body.text)
    return ParseResponse(
        input=body.text,
        language=parser.language.code,
        date=result.value if result else None,
        grammar=result.grammar if result else None,
    )


@router.post("/format", response_model=FormatResponse)
async def format_date(body: FormatRequest, settings: Settings = Depends(get_settings)):
    """Render a date with a fixed pattern and as a human phrase."""
    try:
        formatter = DateFormatter(
            body.pattern or settings.default_pattern,
            body.language or settings.default_language,
            today=body.today,
            relative_window_days=settings.relative_window_days,
        )
    except UnsupportedLanguageError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidPatternError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return FormatResponse(
        date=body.date,
        language=formatter.language.code,
        pattern=formatter.pattern,
        text=formatter.format(body.date),
        human=formatter.format_human(body.date),
    )
