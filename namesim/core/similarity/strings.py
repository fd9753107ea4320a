"""
Generic string similarity.

The score blends three independent sub-metrics computed on the lowercased,
trimmed inputs:
- Levenshtein edit distance (50%)
- Jaccard overlap of word tokens (30%)
- Longest common substring (20%)

All functions are pure and have no I/O dependencies.
"""

from __future__ import annotations

import re
from typing import Optional

from .models import StringScore

EDIT_WEIGHT = 0.5
JACCARD_WEIGHT = 0.3
SUBSTRING_WEIGHT = 0.2

_NON_WORD = re.compile(r"\W+", re.ASCII)


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Edit distance with unit-cost insertions, deletions and substitutions.

    Examples:
        "kitten", "sitting" → 3
        "", "abc" → 3
    """
    previous = list(range(len(s1) + 1))
    for j in range(1, len(s2) + 1):
        current = [j] + [0] * len(s1)
        for i in range(1, len(s1) + 1):
            cost = 0 if s1[i - 1] == s2[j - 1] else 1
            current[i] = min(
                previous[i] + 1,
                current[i - 1] + 1,
                previous[i - 1] + cost,
            )
        previous = current
    return previous[len(s1)]


def tokenize(value: str) -> set[str]:
    """Split on runs of characters outside [A-Za-z0-9_] and collapse to a set."""
    return {token for token in _NON_WORD.split(value) if token}


def token_jaccard(s1: str, s2: str) -> float:
    tokens1 = tokenize(s1)
    tokens2 = tokenize(s2)
    union = tokens1 | tokens2
    if not union:
        return 0.0
    return len(tokens1 & tokens2) / len(union)


def longest_common_substring(s1: str, s2: str) -> int:
    """
    Length of the longest contiguous run shared by both strings.

    Examples:
        "recieve", "receive" → 3 ("rec")
        "abc", "xyz" → 0
    """
    longest = 0
    previous = [0] * (len(s2) + 1)
    for i in range(1, len(s1) + 1):
        current = [0] * (len(s2) + 1)
        for j in range(1, len(s2) + 1):
            if s1[i - 1] == s2[j - 1]:
                current[j] = previous[j - 1] + 1
                if current[j] > longest:
                    longest = current[j]
        previous = current
    return longest


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def string_breakdown(a: Optional[str], b: Optional[str]) -> StringScore:
    """
    Compare two strings and return every sub-score.

    Absent or empty input short-circuits to an all-zero breakdown.

    Args:
        a: First string
        b: Second string

    Returns:
        StringScore with the edit, jaccard and substring sub-scores and the
        blended score
    """
    if not a or not b:
        return StringScore(edit=0.0, jaccard=0.0, substring=0.0, score=0.0)

    a = a.lower().strip()
    b = b.lower().strip()
    longer = max(len(a), len(b))

    # Whitespace-only input trims to nothing on both sides
    if longer == 0:
        edit = 0.0
        substring = 0.0
    else:
        edit = 1 - levenshtein_distance(a, b) / longer
        substring = longest_common_substring(a, b) / longer

    jaccard = token_jaccard(a, b)
    score = EDIT_WEIGHT * edit + JACCARD_WEIGHT * jaccard + SUBSTRING_WEIGHT * substring

    return StringScore(edit=edit, jaccard=jaccard, substring=substring, score=_clamp(score))


def compare_strings(a: Optional[str], b: Optional[str]) -> float:
    """
    Similarity between two strings, from 0.0 (unrelated) to 1.0 (identical).

    Comparison ignores case and surrounding whitespace.

    Examples:
        compare_strings("Hello", "hello") → 1.0
        compare_strings("recieve", "receive") → ~0.44
        compare_strings(None, "test") → 0.0
    """
    return string_breakdown(a, b).score
