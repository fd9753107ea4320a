"""
Result models for similarity scoring and matching.

These are pure data models with no dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class StringScore:
    """
    Breakdown of a string comparison.

    Example:
        compare "hello world" with "hello there":
        - edit: 0.545 (5 edits over 11 characters)
        - jaccard: 0.333 ({"hello"} shared out of three tokens)
        - substring: 0.545 ("hello " is the longest shared run)
    """
    edit: float
    """Levenshtein score: 1 - distance / longer length"""

    jaccard: float
    """Token set overlap: |intersection| / |union|"""

    substring: float
    """Longest common substring length over the longer length"""

    score: float
    """Weighted blend of the three sub-scores, clamped to [0, 1]"""


@dataclass(frozen=True, slots=True)
class NameScore:
    """
    Breakdown of a name comparison.

    ``left`` and ``right`` are the sanitized forms actually compared.
    """
    left: str
    right: str
    base: StringScore
    bonus: float
    score: float


@dataclass(frozen=True, slots=True)
class MatchResult:
    """
    Result of matching two values against a threshold.
    """
    matches: bool
    """Whether the score reached the threshold"""

    confidence: float = 0.0
    """The similarity score (0.0 to 1.0)"""

    strategy: Optional[str] = None
    """Scorer used for the decision (names, strings)"""

    details: Optional[str] = None
    """Human-readable explanation of the decision"""


@dataclass(frozen=True, slots=True)
class RankedCandidate:
    candidate: str
    score: float


@dataclass(frozen=True, slots=True)
class DuplicatePair:
    left: str
    right: str
    score: float


@dataclass
class NameCluster:
    """
    A cluster of name variants that likely refer to the same person.

    Example:
        Cluster for John Smith:
        - canonical: "John Smith"
        - variants: {"John Smith", "Mr. John Smith", "JOHN SMITH, JR."}
        - occurrences: 4
    """
    canonical: str
    """The chosen display form for this cluster"""

    variants: set[str] = field(default_factory=set)
    """All observed raw variants"""

    occurrences: int = 0
    """Total number of names that fell into this cluster"""

    members: list[str] = field(default_factory=list, repr=False)
    """Every raw name in input order, duplicates included"""
