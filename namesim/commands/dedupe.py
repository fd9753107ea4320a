from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from ..core.similarity import NameMatcher
from .output import print_json, score_line

logger = logging.getLogger(__name__)


def read_names(source: Optional[Path], stdin: Optional[TextIO] = None) -> list[str]:
    if source is None or str(source) == "-":
        lines = (stdin or sys.stdin).read().splitlines()
    else:
        lines = source.read_text(encoding="utf-8").splitlines()
    names = [line.strip() for line in lines]
    names = [name for name in names if name]
    logger.info("Loaded %d name(s)", len(names))
    return names


def run(
    matcher: NameMatcher,
    names: list[str],
    *,
    clusters: bool = False,
    json_output: bool = False,
) -> int:
    if clusters:
        groups = [group for group in matcher.cluster(names) if group.occurrences > 1]
        if json_output:
            print_json(groups)
            return len(groups)
        if not groups:
            print("No duplicates found.")
            return 0
        for group in groups:
            print(f"{group.canonical} ({group.occurrences} occurrences)")
            for variant in sorted(group.variants):
                print(f"  - {variant}")
        return len(groups)

    pairs = matcher.find_duplicates(names)
    if json_output:
        print_json(pairs)
        return len(pairs)
    if not pairs:
        print("No duplicates found.")
        return 0
    for pair in pairs:
        print(score_line(f"{pair.left} <-> {pair.right}", pair.score))
    return len(pairs)
