"""Token normalization shared by every language lookup."""

from __future__ import annotations

import unicodedata


def normalize_token(token: str) -> str:
    """Fold case and strip diacritics so that ``"Mañana"`` matches ``"manana"``.

    Decomposes with NFKD and drops combining marks; apostrophes and other
    punctuation are kept as-is.
    """
    decomposed = unicodedata.normalize("NFKD", token.strip().casefold())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))
