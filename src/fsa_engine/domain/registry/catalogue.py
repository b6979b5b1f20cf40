"""Assembly of the default analysis catalogue across the three tiers."""
from __future__ import annotations

from fsa_engine.domain.registry.advanced import ADVANCED_DEFINITIONS
from fsa_engine.domain.registry.base import AnalysisRegistry
from fsa_engine.domain.registry.classical import CLASSICAL_DEFINITIONS
from fsa_engine.domain.registry.intermediate import INTERMEDIATE_DEFINITIONS


def build_default_registry() -> AnalysisRegistry:
    """Return every analysis in tier order: classical, intermediate, advanced."""
    return AnalysisRegistry([*CLASSICAL_DEFINITIONS, *INTERMEDIATE_DEFINITIONS, *ADVANCED_DEFINITIONS])
