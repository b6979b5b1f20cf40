"""Registry primitives: analysis definitions and the ordered, read-only registry."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Union

from fsa_engine.domain.errors import UnknownAnalysisError
from fsa_engine.domain.services.calculations import StatementHistory


class Tier(str, Enum):
    CLASSICAL = "classical"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Polarity(str, Enum):
    """Direction in which a larger value is favourable."""

    HIGHER = "higher"
    LOWER = "lower"


UNITS = ("ratio", "percent", "times", "days", "currency", "per_share", "years", "score", "probability")
PROFILES = ("ratio", "vertical", "horizontal")


@dataclass(frozen=True)
class Measurement:
    """A computed value plus auxiliary figures used by enrichment and charts."""

    value: float
    details: Mapping[str, float] = field(default_factory=dict)


ComputeResult = Union[float, Measurement]
ComputeFn = Callable[[StatementHistory], ComputeResult]
ScaleFn = Callable[[StatementHistory], float]


@dataclass(frozen=True)
class AnalysisDefinition:
    """Static description of one analysis.

    ``benchmark`` is the built-in default used by the static provider. When
    ``scale`` is set the benchmark is a percentage of ``scale(history)``.
    ``negative_favourable`` marks lower-is-better analyses whose value can be
    legitimately negative (a net cash position, a negative cash cycle).
    """

    id: str
    tier: Tier
    category: str
    compute: ComputeFn
    polarity: Polarity
    benchmark: float
    min_history: int = 1
    benchmark_key: Optional[str] = None
    unit: str = "ratio"
    profile: str = "ratio"
    scale: Optional[ScaleFn] = None
    reference: bool = False
    negative_favourable: bool = False

    def __post_init__(self) -> None:
        if self.unit not in UNITS:
            raise ValueError(f"Analysis '{self.id}' has unknown unit '{self.unit}'.")
        if self.profile not in PROFILES:
            raise ValueError(f"Analysis '{self.id}' has unknown profile '{self.profile}'.")
        if self.min_history < 1:
            raise ValueError(f"Analysis '{self.id}' must require at least one period.")
        if self.benchmark_key is None:
            object.__setattr__(self, "benchmark_key", self.id)

    @property
    def lower_is_better(self) -> bool:
        return self.polarity is Polarity.LOWER


def define(
    analysis_id: str,
    tier: Tier,
    category: str,
    compute: ComputeFn,
    benchmark: float,
    *,
    lower: bool = False,
    **options,
) -> AnalysisDefinition:
    return AnalysisDefinition(
        id=analysis_id,
        tier=tier,
        category=category,
        compute=compute,
        polarity=Polarity.LOWER if lower else Polarity.HIGHER,
        benchmark=benchmark,
        **options,
    )


def reference_level(analysis_id: str, category: str, level: float, unit: str = "score", *, lower: bool = False) -> AnalysisDefinition:
    """An advanced entry reporting a calibrated reference level."""
    return define(
        analysis_id,
        Tier.ADVANCED,
        category,
        lambda _history: level,
        level,
        lower=lower,
        unit=unit,
        reference=True,
    )


class AnalysisRegistry:
    """Ordered, read-only collection of analysis definitions."""

    def __init__(self, definitions: Iterable[AnalysisDefinition]) -> None:
        self._definitions: List[AnalysisDefinition] = list(definitions)
        self._index: Dict[str, AnalysisDefinition] = {}
        for definition in self._definitions:
            if definition.id in self._index:
                raise ValueError(f"Duplicate analysis id '{definition.id}'.")
            self._index[definition.id] = definition

    def __iter__(self) -> Iterator[AnalysisDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, analysis_id: object) -> bool:
        return analysis_id in self._index

    def __repr__(self) -> str:
        return f"AnalysisRegistry({len(self)} definitions)"

    @property
    def ids(self) -> List[str]:
        return [d.id for d in self._definitions]

    def get(self, analysis_id: str) -> AnalysisDefinition:
        try:
            return self._index[analysis_id]
        except KeyError:
            raise UnknownAnalysisError("analysis id", [analysis_id]) from None

    def categories(self) -> List[str]:
        seen: Dict[str, None] = {}
        for definition in self._definitions:
            seen.setdefault(definition.category, None)
        return list(seen)

    def tiers(self) -> List[Tier]:
        present = {d.tier for d in self._definitions}
        return [tier for tier in Tier if tier in present]

    def by_tier(self, tier: Union[Tier, str]) -> "AnalysisRegistry":
        wanted = Tier(tier)
        return AnalysisRegistry(d for d in self._definitions if d.tier is wanted)

    def select(
        self,
        ids: Optional[Sequence[str]] = None,
        categories: Optional[Sequence[str]] = None,
        tiers: Optional[Sequence[Union[Tier, str]]] = None,
    ) -> "AnalysisRegistry":
        """Subset in original order; every filter given must match."""
        if ids:
            missing = [i for i in ids if i not in self._index]
            if missing:
                raise UnknownAnalysisError("analysis id", missing)
        if categories:
            known = set(self.categories())
            missing = [c for c in categories if c not in known]
            if missing:
                raise UnknownAnalysisError("category", missing)
        wanted_ids = set(ids) if ids else None
        wanted_categories = set(categories) if categories else None
        wanted_tiers = {Tier(t) for t in tiers} if tiers else None
        return AnalysisRegistry(
            d
            for d in self._definitions
            if (wanted_ids is None or d.id in wanted_ids)
            and (wanted_categories is None or d.category in wanted_categories)
            and (wanted_tiers is None or d.tier in wanted_tiers)
        )
