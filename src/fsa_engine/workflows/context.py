"""Workflow dependency container."""
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional

from config import Config
from fsa_engine.domain.services.engine import AnalysisEngine
from fsa_engine.infrastructure.benchmarks import HttpBenchmarkProvider
from fsa_engine.infrastructure.db.sqlite import SQLiteRepository


@dataclass
class WorkflowContext:
    """Holds heavy-weight dependencies shared by LangGraph nodes."""

    config: Config
    engine: AnalysisEngine
    repository: Optional[SQLiteRepository]
    http_provider: Optional[HttpBenchmarkProvider]
    cancel_event: threading.Event = field(default_factory=threading.Event)

    def close(self) -> None:
        """Release any dependencies that need explicit cleanup."""
        if self.http_provider is not None:
            self.http_provider.close()
        if self.repository is not None:
            self.repository.engine.dispose()
