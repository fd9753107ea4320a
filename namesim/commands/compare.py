from __future__ import annotations

from ..core.similarity import name_breakdown, string_breakdown
from ..core.similarity.models import StringScore
from .output import print_json, score_line


def _print_string_score(result: StringScore) -> None:
    print(score_line("edit distance", result.edit))
    print(score_line("token jaccard", result.jaccard))
    print(score_line("common substring", result.substring))


def run(a: str, b: str, *, strings: bool = False, json_output: bool = False) -> float:
    if strings:
        result = string_breakdown(a, b)
        if json_output:
            print_json(result)
            return result.score
        _print_string_score(result)
        print(score_line("score", result.score))
        return result.score

    names = name_breakdown(a, b)
    if json_output:
        print_json(names)
        return names.score
    print(f"left:  {names.left!r}")
    print(f"right: {names.right!r}")
    _print_string_score(names.base)
    print(score_line("base", names.base.score))
    print(score_line("structural bonus", names.bonus))
    print(score_line("score", names.score))
    return names.score
