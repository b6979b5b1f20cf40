"""Benchmark comparison, rating and competitive position.

All three are derived from the same polarity-adjusted performance figure:
``value / benchmark`` when a higher value is favourable and
``benchmark / value`` otherwise.
"""
from __future__ import annotations

import math

from fsa_engine.domain.services.calculations import NAN, finite
from fsa_engine.i18n.messages import MessageCatalog

SIMILARITY_BAND = 5.0

# (lower bound of performance, rating, position key), best first.
RATING_BANDS = (
    (1.2, "excellent", "superior"),
    (1.1, "very_good", "strong"),
    (0.9, "good", "average"),
    (0.8, "acceptable", "weak"),
)
UNDETERMINED_RATING = "acceptable"


def difference_pct(value: float, benchmark: float) -> float:
    """Signed distance from the benchmark as a percentage of the benchmark."""
    if not finite(value) or not finite(benchmark) or benchmark == 0:
        return NAN
    return (value - benchmark) / benchmark * 100.0


def performance(
    value: float,
    benchmark: float,
    lower_is_better: bool = False,
    negative_favourable: bool = False,
) -> float:
    """Polarity-adjusted ratio to the benchmark; 1.0 means on par.

    A lower-is-better value of exactly zero is unbeatable. A negative one
    usually comes from a negative denominator (negative equity, EBITDA or
    cash flow) and falls through to ``benchmark / value``, which rates poor,
    unless the analysis declares negative values favourable.
    """
    if not finite(value) or not finite(benchmark):
        return NAN
    if lower_is_better and (value == 0 or (value < 0 and negative_favourable)):
        return math.inf
    if benchmark == 0:
        return NAN
    return benchmark / value if lower_is_better else value / benchmark


def rate(score: float) -> str:
    if math.isnan(score):
        return UNDETERMINED_RATING
    for bound, rating, _position in RATING_BANDS:
        if score >= bound:
            return rating
    return "poor"


def position_key(score: float) -> str:
    if math.isnan(score):
        return "undetermined"
    for bound, _rating, position in RATING_BANDS:
        if score >= bound:
            return position
    return "very_weak"


def comparison_text(catalog: MessageCatalog, value: float, benchmark: float) -> str:
    difference = difference_pct(value, benchmark)
    if math.isnan(difference):
        return catalog.text("na.comparison")
    if abs(difference) < SIMILARITY_BAND:
        return catalog.text("comparison.similar")
    key = "comparison.above" if difference > 0 else "comparison.below"
    return catalog.text(key, difference=f"{abs(difference):.1f}")


def position_text(catalog: MessageCatalog, score: float) -> str:
    key = position_key(score)
    if key == "undetermined":
        return catalog.text("na.position")
    return catalog.text(f"position.{key}")


def format_value(catalog: MessageCatalog, value: float, unit: str) -> str:
    """Human-readable rendering of a computed value in its unit."""
    if unit == "percent":
        return f"{value:.2f}%"
    if unit == "times":
        return f"{value:.2f}x"
    if unit == "days":
        return catalog.text("unit.days", value=f"{value:.1f}")
    if unit == "years":
        return catalog.text("unit.years", value=f"{value:.1f}")
    if unit == "probability" and abs(value) < 1:
        return f"{value:.4f}"
    if unit in ("currency", "per_share") or abs(value) >= 1000:
        return f"{value:,.2f}" if abs(value) < 1000 else f"{value:,.0f}"
    return f"{value:.2f}"
