"""
Threshold-based matching on top of the similarity scores.

Supports the usual record-linkage operations:
- Single match decision (score >= threshold)
- Ranking candidates against a query
- Duplicate pair detection within a list
- Greedy clustering of name variants with canonical name selection
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from typing import Callable, Optional

from .models import DuplicatePair, MatchResult, NameCluster, RankedCandidate
from .names import compare_names
from .strings import compare_strings

logger = logging.getLogger(__name__)

SCORERS: dict[str, Callable[[Optional[str], Optional[str]], float]] = {
    "names": compare_names,
    "strings": compare_strings,
}

DEFAULT_THRESHOLD = 0.85


def choose_canonical(variants: list[str]) -> str:
    """
    Choose the best display form from a list of raw name variants.

    Selection criteria (in order of importance):
    1. Proper case (not all caps or all lowercase)
    2. Frequency (most common variant)
    3. No comma (avoid "Last, First" format)
    4. Fewer words (drops honorifics and suffixes)
    5. Shorter length
    6. Alphabetical tiebreaker

    Examples:
        ["JOHN SMITH", "John Smith"] → "John Smith"
        ["Mr. John Smith", "John Smith"] → "John Smith"

    Args:
        variants: Raw names, duplicates included

    Returns:
        Best canonical name, or "" for an empty list
    """
    if not variants:
        return ""

    counts: dict[str, int] = defaultdict(int)
    for variant in variants:
        counts[variant] += 1

    def score(name: str) -> tuple:
        is_all_caps = 1 if name.isupper() else 0
        is_all_lower = 1 if name.islower() else 0
        has_proper_case = 1 if not is_all_caps and not is_all_lower else 0
        has_comma = 1 if "," in name else 0
        words = [part for part in name.split() if part]
        return (
            -has_proper_case,
            -counts[name],
            has_comma,
            len(words),
            len(name),
            name.casefold(),
        )

    return min(counts, key=score)


class NameMatcher:
    """
    Applies a similarity threshold to name or string scores.

    Usage:
        matcher = NameMatcher(threshold=0.8)
        result = matcher.match("Dr. Jane Doe", "Jane Doe")
        if result.matches:
            print(f"Matched with confidence {result.confidence:.2f}")
    """

    def __init__(self, threshold: float = DEFAULT_THRESHOLD, mode: str = "names") -> None:
        """
        Initialize the matcher.

        Args:
            threshold: Minimum score (inclusive) for two values to match
            mode: Scorer to use, 'names' or 'strings'
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be between 0 and 1, got {threshold!r}")
        if mode not in SCORERS:
            raise ValueError(f"unknown mode {mode!r}; expected one of {sorted(SCORERS)}")
        self.threshold = threshold
        self.mode = mode
        self._scorer = SCORERS[mode]

    def score(self, a: Optional[str], b: Optional[str]) -> float:
        return self._scorer(a, b)

    def match(self, a: Optional[str], b: Optional[str]) -> MatchResult:
        """
        Decide whether two values refer to the same thing.

        Args:
            a: First value
            b: Second value

        Returns:
            MatchResult with the decision, score and explanation
        """
        confidence = self.score(a, b)
        matches = confidence >= self.threshold
        relation = ">=" if matches else "<"
        return MatchResult(
            matches=matches,
            confidence=confidence,
            strategy=self.mode,
            details=f"{self.mode} score {confidence:.3f} {relation} threshold {self.threshold:.3f}",
        )

    def rank(
        self, query: Optional[str], candidates: Iterable[str], limit: Optional[int] = None
    ) -> list[RankedCandidate]:
        """
        Score every candidate against the query, best first.

        Candidates scoring 0 are dropped. Ties keep their input order.
        """
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit!r}")
        ranked: list[RankedCandidate] = []
        for candidate in candidates:
            score = self.score(query, candidate)
            if score > 0:
                ranked.append(RankedCandidate(candidate=candidate, score=score))
        ranked.sort(key=lambda item: item.score, reverse=True)
        if limit is not None:
            ranked = ranked[:limit]
        return ranked

    def find_duplicates(self, names: Iterable[str]) -> list[DuplicatePair]:
        """
        Find every pair of names scoring at or above the threshold.

        Pairs keep input order (left appears before right) and are sorted
        by score, highest first.
        """
        items = [name for name in names if name]
        pairs: list[DuplicatePair] = []
        for i, left in enumerate(items):
            for right in items[i + 1:]:
                score = self.score(left, right)
                if score >= self.threshold:
                    pairs.append(DuplicatePair(left=left, right=right, score=score))
        pairs.sort(key=lambda pair: pair.score, reverse=True)
        logger.debug("Found %d duplicate pair(s) among %d name(s)", len(pairs), len(items))
        return pairs

    def cluster(self, names: Iterable[str]) -> list[NameCluster]:
        """
        Group names into clusters of likely duplicates.

        Each name joins the first cluster whose canonical name it matches,
        otherwise it starts a new cluster. The canonical name is re-chosen
        every time a cluster grows.

        Args:
            names: Raw names; empty values are skipped

        Returns:
            Clusters in order of first appearance
        """
        clusters: list[NameCluster] = []
        for name in names:
            if not name:
                continue

            target = next(
                (cluster for cluster in clusters if self.score(name, cluster.canonical) >= self.threshold),
                None,
            )
            if target is None:
                clusters.append(NameCluster(canonical=name, variants={name}, occurrences=1, members=[name]))
                continue

            target.variants.add(name)
            target.members.append(name)
            target.occurrences += 1
            previous = target.canonical
            target.canonical = choose_canonical(target.members)
            if target.canonical != previous:
                logger.debug("Cluster canonical changed: %r -> %r", previous, target.canonical)

        logger.debug("Built %d cluster(s)", len(clusters))
        return clusters
