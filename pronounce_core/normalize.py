"""Normalization of user-typed words before a dictionary lookup."""
from __future__ import annotations

import unicodedata
from typing import Optional

_SMART_QUOTES = {
    "\u2018": "'",
    "\u2019": "'",
    "\u201a": "'",
    "\u201b": "'",
}

_DASHES = {
    "\u2013": "-",
    "\u2014": "-",
    "\u2015": "-",
    "\u2212": "-",
}

CASES = ("lower", "upper", "keep")


def normalize_query(text: Optional[str], case: str = "lower") -> str:
    """Clean ``text`` into a dictionary key: ``" Don’t "`` -> ``"don't"``.

    ``case`` matches the dictionary flavour: ``cmudict.dict`` is lowercase,
    ``cmudict-0.7b`` is uppercase.  Accents are kept (NFC-composed) since
    labels such as ``CAFÉ`` are indexed verbatim.
    """
    if case not in CASES:
        raise ValueError(f"case must be one of {CASES}, got {case!r}")
    if not text:
        return ""
    fixed = unicodedata.normalize("NFC", text.strip())
    for src, dst in _SMART_QUOTES.items():
        fixed = fixed.replace(src, dst)
    for src, dst in _DASHES.items():
        fixed = fixed.replace(src, dst)
    if case == "lower":
        return fixed.lower()
    if case == "upper":
        return fixed.upper()
    return fixed


__all__ = ["CASES", "normalize_query"]
