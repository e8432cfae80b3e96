"""Request and response bodies for the HTTP API."""
from __future__ import annotations
import datetime as dt
from pydantic import BaseModel
from ..models.result import Grammar


class ParseRequest(BaseModel):
    text: str | None = None
    language: str | None = None
    today: dt.date | None = None


class ParseResponse(BaseModel):
    input: str | None
    language: str
    date: dt.date | None = None
    grammar: Grammar | None = None


class FormatRequest(BaseModel):
    date: dt.date
    language: str | None = None
    pattern: str | None = None
    today: dt.date | None = None


class FormatResponse(BaseModel):
    date: dt.date
    language: str
    pattern: str
    text: str
    human: str


class LanguageInfo(BaseModel):
    code: str
    name: str
    today: list[str]
    tomorrow: list[str]
    yesterday: list[str]
    units: dict[str, str]
    months: list[str]
