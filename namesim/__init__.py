"String and personal-name similarity scoring."

from importlib import metadata

from .core.similarity import (
    compare_names,
    compare_strings,
    sanitize_name,
    strip_diacritics,
    structural_bonus,
)

__all__ = [
    "__version__",
    "compare_names",
    "compare_strings",
    "sanitize_name",
    "strip_diacritics",
    "structural_bonus",
]


def __getattr__(name: str) -> str:
    if name == "__version__":
        try:
            return metadata.version("namesim")
        except metadata.PackageNotFoundError:  # pragma: no cover - during editable dev installs
            return "0.0.0"
    raise AttributeError(name)
