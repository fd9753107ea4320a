"""
Personal name comparison.

Names are sanitized first, then scored with the generic string similarity
plus a small structural bonus for shared surname and first initial.
"""

from __future__ import annotations

from typing import Optional

from .models import NameScore
from .normalize import sanitize_name
from .strings import string_breakdown

SURNAME_BONUS = 0.05
INITIAL_BONUS = 0.02


def structural_bonus(a_sanitized: str, b_sanitized: str) -> float:
    """
    Additive bonus for two already-sanitized names.

    - 0.05 if the last tokens match
    - 0.02 if the first tokens start with the same character

    Examples:
        "john a smith", "john b smith" → 0.07
        "john doe", "jane smith" → 0.02
        "alice", "bob" → 0.0
    """
    a_tokens = [token for token in a_sanitized.split(" ") if token]
    b_tokens = [token for token in b_sanitized.split(" ") if token]
    if not a_tokens or not b_tokens:
        return 0.0

    bonus = 0.0
    if a_tokens[-1] == b_tokens[-1]:
        bonus += SURNAME_BONUS
    if a_tokens[0][0] == b_tokens[0][0]:
        bonus += INITIAL_BONUS
    return bonus


def name_breakdown(a: Optional[object], b: Optional[object]) -> NameScore:
    """
    Compare two names and return the intermediate values.

    Args:
        a: First raw name
        b: Second raw name

    Returns:
        NameScore with the sanitized forms, base string score, bonus and the
        final score
    """
    left = sanitize_name(a)
    right = sanitize_name(b)
    base = string_breakdown(left, right)
    bonus = structural_bonus(left, right)
    return NameScore(
        left=left,
        right=right,
        base=base,
        bonus=bonus,
        score=min(1.0, base.score + bonus),
    )


def compare_names(a: Optional[object], b: Optional[object]) -> float:
    """
    Similarity between two personal names, from 0.0 to 1.0.

    Examples:
        compare_names("José García", "Jose Garcia") → 1.0
        compare_names("Dr. John A. Smith, Jr.", "John Smith") → ~0.79
        compare_names("Dr.", "Dr.") → 0.0 (both sanitize to "")
    """
    return name_breakdown(a, b).score
