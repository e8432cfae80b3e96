"""Built-in language tables.

Each entry is plain data; ``build_language`` turns it into a frozen
``Language``. Adding a language means adding a table here (or registering a
``Language`` at startup), never subclassing.
"""

from __future__ import annotations

from humandate.models.language import HumanPhrasing, Language, LanguageRules, TimeUnit

LANGUAGE_TABLES: dict[str, dict] = {
    "es": {
        "name": "Español",
        "rules": {
            "today": ("hoy", "ya", "ahora"),
            "tomorrow": ("mañana",),
            "yesterday": ("ayer",),
            "unit_suffixes": {
                "d": TimeUnit.DAY,
                "s": TimeUnit.WEEK,
                "m": TimeUnit.MONTH,
                "a": TimeUnit.YEAR,
            },
            "month_names": (
                "enero", "febrero", "marzo", "abril", "mayo", "junio",
                "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
            ),
        },
        "phrasing": {
            "today": "hoy",
            "tomorrow": "mañana",
            "yesterday": "ayer",
            "days_ahead": "dentro de {n} días",
            "days_ago": "hace {n} días",
            "full_date": "{day} de {month} de {year}",
        },
    },
    "en": {
        "name": "English",
        "rules": {
            "today": ("today", "now"),
            "tomorrow": ("tomorrow", "tmr", "tmw", "tmrw"),
            "yesterday": ("yesterday", "ytd"),
            "unit_suffixes": {
                "d": TimeUnit.DAY,
                "w": TimeUnit.WEEK,
                "m": TimeUnit.MONTH,
                "y": TimeUnit.YEAR,
            },
            "month_names": (
                "January", "February", "March", "April", "May", "June",
                "July", "August", "September", "October", "November", "December",
            ),
        },
        "phrasing": {
            "today": "today",
            "tomorrow": "tomorrow",
            "yesterday": "yesterday",
            "days_ahead": "in {n} days",
            "days_ago": "{n} days ago",
            "full_date": "{month} {ordinal}, {year}",
            "ordinal_suffixes": {1: "st", 2: "nd", 3: "rd"},
            "ordinal_default": "th",
        },
    },
    "que": {
        "name": "Runasimi",
        "rules": {
            "today": ("kunan", "kaypi", "ña"),
            "tomorrow": ("paqarin", "qaya", "haya"),
            "yesterday": ("qayna", "jainapunchau", "qaynunchay"),
            # p'unchay, hunkay, killa, wata
            "unit_suffixes": {
                "p": TimeUnit.DAY,
                "h": TimeUnit.WEEK,
                "k": TimeUnit.MONTH,
                "w": TimeUnit.YEAR,
            },
            "month_names": (
                "Qhulla puquy", "Hatun puquy", "Pawqar waray", "Ayriway",
                "Aymuray", "Inti raymi", "Anta sitwa", "Qhapaq sitwa",
                "Uma raymi", "Kantaray", "Ayamarq'a", "Qhapaq raymi",
            ),
        },
        "phrasing": {
            "today": "kunan p'unchay",
            "tomorrow": "paqarin p'unchay",
            "yesterday": "qayna p'unchay",
            "days_ahead": "kunan +{n} p'unchay",
            "days_ago": "kunan -{n} p'unchay",
            "full_date": "{day} {month} killa, {year}",
        },
    },
}


def build_language(code: str, table: dict) -> Language:
    """Build a ``Language`` from a raw table entry."""
    return Language(
        code=code,
        name=table["name"],
        rules=LanguageRules(**table["rules"]),
        phrasing=HumanPhrasing(**table["phrasing"]),
    )


def build_default_languages() -> list[Language]:
    """Spanish, English and Quechua, in that order."""
    return [build_language(code, table) for code, table in LANGUAGE_TABLES.items()]
