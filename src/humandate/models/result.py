"""Parse outcome types."""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel


class Grammar(str, Enum):
    """Input grammars, in the order the parser tries them."""

    KEYWORD = "keyword"
    RELATIVE_OFFSET = "relative_offset"
    BARE_ZERO = "bare_zero"
    DELIMITED = "delimited"
    COMPACT = "compact"


class ParsedDate(BaseModel):
    """A successfully resolved date and the grammar that produced it."""

    value: date
    original_string: str
    grammar: Grammar
