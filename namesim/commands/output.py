from __future__ import annotations

import json
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class ScoreLine:
    label: str
    score: float
    detail: Optional[str] = None

    def render(self) -> str:
        if self.detail:
            return f"{self.score:.4f}  {self.label} ({self.detail})"
        return f"{self.score:.4f}  {self.label}"


def score_line(label: str, score: float, detail: Optional[str] = None) -> str:
    return ScoreLine(label, score, detail).render()


def to_payload(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        payload = asdict(value)
        for key, item in payload.items():
            if isinstance(item, set):
                payload[key] = sorted(item)
        payload.pop("members", None)
        return payload
    if isinstance(value, list):
        return [to_payload(item) for item in value]
    return value


def print_json(value: Any) -> None:
    print(json.dumps(to_payload(value), indent=2, sort_keys=True, ensure_ascii=False))
