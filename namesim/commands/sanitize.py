from __future__ import annotations

from collections.abc import Iterable

from ..core.similarity import sanitize_name


def run(names: Iterable[str]) -> list[str]:
    results = [sanitize_name(name) for name in names]
    for line in results:
        print(line)
    return results
