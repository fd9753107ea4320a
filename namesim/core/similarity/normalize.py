"""
Name normalization.

Reduces a raw personal name to its canonical form:
1. Strip diacritics and lowercase
2. Fold punctuation into spaces
3. Remove leading honorifics ("Dr", "Mr") and trailing suffixes ("Jr", "PhD")
4. Collapse consecutive single-letter initials ("h e smith" → "he smith")

All functions are pure and have no I/O dependencies.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Optional

HONORIFICS = frozenset({"mr", "mrs", "ms", "miss", "mx", "dr", "prof", "sir", "dame"})
SUFFIXES = frozenset({"jr", "sr", "ii", "iii", "iv", "v", "md", "phd", "esq"})

_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
_PUNCTUATION = re.compile(r"[_.,/\\'’\"-]+")
_WHITESPACE = re.compile(r"\s+")
_SINGLE_LETTER = re.compile(r"[a-z]")


def strip_diacritics(value: str) -> str:
    """
    Remove combining diacritical marks.

    Examples:
        "café" → "cafe"
        "São Paulo" → "Sao Paulo"
    """
    return _COMBINING_MARKS.sub("", unicodedata.normalize("NFKD", value))


def _strip_honorifics(tokens: list[str]) -> list[str]:
    start = 0
    while start < len(tokens) and tokens[start] in HONORIFICS:
        start += 1
    return tokens[start:]


def _strip_suffixes(tokens: list[str]) -> list[str]:
    end = len(tokens)
    while end and tokens[end - 1].rstrip(".") in SUFFIXES:
        end -= 1
    return tokens[:end]


def collapse_initials(tokens: list[str]) -> list[str]:
    """
    Fuse runs of single-letter tokens into one token.

    Examples:
        ["h", "e", "smith"] → ["he", "smith"]
        ["john", "a", "smith"] → ["john", "a", "smith"]
    """
    collapsed: list[str] = []
    buffer = ""
    for token in tokens:
        if _SINGLE_LETTER.fullmatch(token):
            buffer += token
            continue
        if buffer:
            collapsed.append(buffer)
            buffer = ""
        collapsed.append(token)
    if buffer:
        collapsed.append(buffer)
    return collapsed


def sanitize_name(value: Optional[object]) -> str:
    """
    Reduce a raw name to its canonical form.

    Falsy values (``None``, "", 0, False, empty containers) give ""; any
    other non-string value is converted with ``str()``. Suffix matching works
    on whole tokens, so "Ph.D." ends up as "ph d" and is kept.

    Examples:
        "Mr. John A. Smith, Jr." → "john a smith"
        "H E Smith" → "he smith"
        "O'Brien" → "o brien"
        "John Smith, Ph.D." → "john smith ph d"

    Args:
        value: The name to sanitize

    Returns:
        Canonical form (may be empty if only honorifics/suffixes were present)
    """
    if not value:
        return ""

    text = strip_diacritics(str(value)).lower()
    text = _PUNCTUATION.sub(" ", text)
    text = _WHITESPACE.sub(" ", text).strip()

    tokens = [token for token in text.split(" ") if token]
    tokens = _strip_honorifics(tokens)
    tokens = _strip_suffixes(tokens)
    tokens = collapse_initials(tokens)

    return _WHITESPACE.sub(" ", " ".join(tokens)).strip()
