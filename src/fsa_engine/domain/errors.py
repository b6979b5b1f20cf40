"""Exceptions raised by the analysis engine and its collaborators."""
from __future__ import annotations


class AnalysisError(Exception):
    """Base class for engine errors."""


class EmptyStatementsError(AnalysisError, ValueError):
    """Raised when a run is requested without any financial statement."""

    def __init__(self) -> None:
        super().__init__("At least one financial statement is required to run the analyses.")


class UnknownAnalysisError(AnalysisError, KeyError):
    """Raised when an analysis id or category is not part of the registry."""

    def __init__(self, kind: str, names) -> None:
        self.kind = kind
        self.names = sorted(names)
        super().__init__(f"Unknown {kind}: {', '.join(self.names)}")

    def __str__(self) -> str:
        return str(self.args[0])


class BenchmarkUnavailableError(AnalysisError):
    """Raised by a benchmark provider that cannot supply a value."""


class AnalysisCancelled(AnalysisError):
    """Raised when the caller abandons a run before it completes."""
