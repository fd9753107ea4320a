from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from ..core.similarity import NameMatcher, RankedCandidate
from .output import print_json, score_line


def run(
    matcher: NameMatcher,
    query: str,
    candidates: Sequence[str],
    *,
    limit: Optional[int] = None,
    json_output: bool = False,
) -> list[RankedCandidate]:
    ranked = matcher.rank(query, candidates, limit=limit)
    if json_output:
        print_json(ranked)
        return ranked
    if not ranked:
        print("No candidates matched.")
        return ranked
    for item in ranked:
        marker = "*" if item.score >= matcher.threshold else " "
        print(f"{marker} {score_line(item.candidate, item.score)}")
    return ranked
