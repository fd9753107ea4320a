"""
Core domain layer for namesim.

This package contains the pure scoring logic with no external dependencies.
Everything here is deterministic and testable without I/O.
"""

from __future__ import annotations

__all__ = []
