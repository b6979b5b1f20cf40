from __future__ import annotations

import pytest

from fsa_engine.domain.errors import UnknownAnalysisError
from fsa_engine.domain.registry.base import UNITS, AnalysisRegistry, Polarity, Tier, define, reference_level
from fsa_engine.domain.registry.catalogue import build_default_registry
from fsa_engine.infrastructure.benchmarks import CATEGORY_DEFAULTS


def test_default_registry_has_unique_ids_across_all_tiers():
    registry = build_default_registry()
    ids = registry.ids

    assert len(ids) == len(set(ids))
    assert len(registry) >= 180
    assert registry.tiers() == [Tier.CLASSICAL, Tier.INTERMEDIATE, Tier.ADVANCED]
    assert sum(len(registry.by_tier(tier)) for tier in Tier) == len(registry)


def test_definitions_are_well_formed():
    for definition in build_default_registry():
        assert definition.unit in UNITS
        assert definition.min_history >= 1
        assert definition.benchmark_key
        assert definition.category in CATEGORY_DEFAULTS
        assert callable(definition.compute)


def test_known_polarities():
    registry = build_default_registry()

    assert registry.get("current_ratio").polarity is Polarity.HIGHER
    assert registry.get("debt_to_equity").lower_is_better
    assert registry.get("days_in_receivables").lower_is_better
    assert registry.get("horizontal_analysis").min_history == 2


def test_select_preserves_registry_order():
    registry = build_default_registry()
    liquidity = registry.select(categories=["liquidity"])

    assert len(liquidity) > 0
    assert all(d.category == "liquidity" for d in liquidity)
    positions = [registry.ids.index(i) for i in liquidity.ids]
    assert positions == sorted(positions)

    picked = registry.select(ids=["quick_ratio", "current_ratio"])
    assert picked.ids == ["current_ratio", "quick_ratio"]

    advanced_only = registry.select(tiers=["advanced"])
    assert all(d.tier is Tier.ADVANCED for d in advanced_only)


def test_select_rejects_unknown_names():
    registry = build_default_registry()

    with pytest.raises(UnknownAnalysisError) as excinfo:
        registry.select(ids=["current_ratio", "made_up"])
    assert "made_up" in str(excinfo.value)

    with pytest.raises(UnknownAnalysisError):
        registry.select(categories=["astrology"])

    with pytest.raises(KeyError):
        registry.get("made_up")


def test_duplicate_ids_rejected():
    definition = define("dup", Tier.CLASSICAL, "liquidity", lambda h: 1.0, 1.0)

    with pytest.raises(ValueError):
        AnalysisRegistry([definition, definition])


def test_invalid_definition_options_rejected():
    with pytest.raises(ValueError):
        define("bad_unit", Tier.CLASSICAL, "liquidity", lambda h: 1.0, 1.0, unit="furlongs")
    with pytest.raises(ValueError):
        define("bad_history", Tier.CLASSICAL, "liquidity", lambda h: 1.0, 1.0, min_history=0)


def test_reference_levels_report_their_level():
    definition = reference_level("calibrated", "statistical", 15.8)

    assert definition.reference
    assert definition.tier is Tier.ADVANCED
    assert definition.compute(None) == 15.8
    assert definition.benchmark == 15.8
