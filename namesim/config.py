from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator


class MatchingSettings(BaseModel):
    threshold: float = Field(default=0.85, ge=0.0, le=1.0)
    mode: Literal["names", "strings"] = "names"
    limit: int = Field(default=10, ge=1)

    @field_validator("mode", mode="before")
    @classmethod
    def _normalize_mode(cls, value: str) -> str:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class Settings(BaseModel):
    matching: MatchingSettings = MatchingSettings()

    @classmethod
    def load(cls, path: Path) -> "Settings":
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
        return cls.model_validate(raw or {})


def find_config(explicit_path: Optional[Path]) -> Optional[Path]:
    if explicit_path:
        if not explicit_path.exists():
            raise FileNotFoundError(f"Config file not found: {explicit_path}")
        return explicit_path
    cwd = Path.cwd()
    for candidate in (cwd / "namesim.yaml", cwd / "namesim.yml"):
        if candidate.exists():
            return candidate
    return None


def load_settings(explicit_path: Optional[Path] = None) -> Settings:
    path = find_config(explicit_path)
    if path is None:
        return Settings()
    return Settings.load(path)
