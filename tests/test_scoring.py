from __future__ import annotations

import math

from fsa_engine.domain.models.results import RATINGS
from fsa_engine.domain.services.scoring import (
    comparison_text,
    difference_pct,
    format_value,
    performance,
    position_text,
    rate,
)
from fsa_engine.i18n.messages import MessageCatalog


def close(a: float, b: float, tol: float = 1e-6) -> bool:
    return abs(a - b) <= tol


def test_comparison_above_benchmark_uses_one_decimal():
    en = MessageCatalog("en")
    value = 895_000_000 / 325_000_000

    assert close(difference_pct(value, 2.0), 37.6923, 1e-3)
    assert comparison_text(en, value, 2.0) == "Above industry average by 37.7%"


def test_comparison_similar_and_below():
    en = MessageCatalog("en")

    assert comparison_text(en, 2.05, 2.0) == "Similar to industry average"
    assert comparison_text(en, 1.91, 2.0) == "Similar to industry average"
    assert comparison_text(en, 1.5, 2.0) == "Below industry average by 25.0%"


def test_comparison_without_usable_benchmark():
    en = MessageCatalog("en")

    assert comparison_text(en, 1.5, 0.0) == "Not applicable"
    assert comparison_text(en, 1.5, float("nan")) == "Not applicable"


def test_rating_band_edges():
    assert rate(1.2) == "excellent"
    assert rate(1.19) == "very_good"
    assert rate(1.1) == "very_good"
    assert rate(1.0) == "good"
    assert rate(0.9) == "good"
    assert rate(0.85) == "acceptable"
    assert rate(0.8) == "acceptable"
    assert rate(0.79) == "poor"
    assert rate(float("nan")) == "acceptable"


def test_performance_respects_polarity():
    assert close(performance(3.0, 2.0), 1.5)
    assert close(performance(40.0, 45.0, lower_is_better=True), 1.125)
    # No debt at all is the best possible leverage.
    assert math.isinf(performance(0.0, 0.6, lower_is_better=True))
    assert rate(performance(0.0, 0.6, lower_is_better=True)) == "excellent"
    assert math.isnan(performance(1.0, 0.0))


def test_negative_lower_is_better_values():
    # Negative equity turns debt-to-equity negative; that is not low leverage.
    assert performance(-11.0, 0.6, lower_is_better=True) < 0
    assert rate(performance(-11.0, 0.6, lower_is_better=True)) == "poor"
    # A negative cash cycle is genuinely favourable.
    assert math.isinf(performance(-10.0, 45.0, lower_is_better=True, negative_favourable=True))


def test_rating_is_monotonic_in_value():
    benchmark = 2.0
    values = [0.1 * step for step in range(1, 60)]

    higher = [RATINGS.index(rate(performance(v, benchmark))) for v in values]
    assert higher == sorted(higher, reverse=True)

    lower = [RATINGS.index(rate(performance(v, benchmark, lower_is_better=True))) for v in values]
    assert lower == sorted(lower)


def test_position_text_follows_rating_bands():
    en = MessageCatalog("en")

    assert position_text(en, 1.5) == "Superior - First Quartile"
    assert position_text(en, 1.15) == "Strong - Second Quartile"
    assert position_text(en, 1.0) == "Average - Second Quartile"
    assert position_text(en, 0.85) == "Weak - Third Quartile"
    assert position_text(en, 0.5) == "Very Weak - Fourth Quartile"
    assert position_text(en, float("nan")) == "Not determined"


def test_format_value_by_unit():
    en = MessageCatalog("en")
    ar = MessageCatalog("ar")

    assert format_value(en, 12.345, "percent") == "12.35%"
    assert format_value(en, 4.5, "times") == "4.50x"
    assert format_value(en, 36.5, "days") == "36.5 days"
    assert format_value(ar, 36.5, "days") == "36.5 يوم"
    assert format_value(en, 0.12345, "probability") == "0.1235"
    assert format_value(en, 1_234_567.0, "currency") == "1,234,567"
    assert format_value(en, 2.7538, "ratio") == "2.75"
