"""
Similarity scoring domain logic.

This module handles:
- Diacritic stripping and name sanitization
- Generic string similarity (edit distance, token overlap, common substring)
- Structural bonus for name shape (surname, first initial)
- Name comparison and threshold-based matching

All scoring functions are pure and safe to call from multiple threads.
"""

from __future__ import annotations

from .matching import NameMatcher, choose_canonical
from .models import (
    DuplicatePair,
    MatchResult,
    NameCluster,
    NameScore,
    RankedCandidate,
    StringScore,
)
from .names import compare_names, name_breakdown, structural_bonus
from .normalize import HONORIFICS, SUFFIXES, sanitize_name, strip_diacritics
from .strings import compare_strings, string_breakdown

__all__ = [
    "DuplicatePair",
    "HONORIFICS",
    "MatchResult",
    "NameCluster",
    "NameMatcher",
    "NameScore",
    "RankedCandidate",
    "StringScore",
    "SUFFIXES",
    "choose_canonical",
    "compare_names",
    "compare_strings",
    "name_breakdown",
    "sanitize_name",
    "string_breakdown",
    "strip_diacritics",
    "structural_bonus",
]
