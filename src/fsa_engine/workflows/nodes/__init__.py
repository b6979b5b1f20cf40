"""Convenience re-exports for workflow nodes."""
from __future__ import annotations

from . import (
    executive_summary,
    persist_run,
    resolve_benchmarks,
    tiers,
    validate_input,
)

__all__ = [
    "executive_summary",
    "persist_run",
    "resolve_benchmarks",
    "tiers",
    "validate_input",
]
