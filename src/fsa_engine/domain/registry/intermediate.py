"""Tier 2 catalogue: comparisons, valuation models and performance indices."""
from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np

from fsa_engine.domain.registry.base import AnalysisDefinition, Measurement, Tier, define
from fsa_engine.domain.services.calculations import (
    NAN,
    StatementHistory,
    cagr,
    dcf_fcff,
    finite,
    percent,
    safe_div,
)

DCF_YEARS = 5
# Growth used in the DCF is clamped to a plausible band.
DCF_GROWTH_BOUNDS = (-0.10, 0.20)
SENSITIVITY_STEP = 0.01

SECTOR_PROFILE = {"gross_margin": 25.0, "net_margin": 8.0, "roe": 15.0, "roa": 10.0}
COMPETITOR_PROFILE = {"current_ratio": 2.0, "asset_turnover": 1.2, "operating_margin": 12.0}


def _intermediate(analysis_id: str, category: str, compute, benchmark: float, **options) -> AnalysisDefinition:
    return define(analysis_id, Tier.INTERMEDIATE, category, compute, benchmark, **options)


def _composite(actual: Dict[str, float], profile: Dict[str, float]) -> Measurement:
    """Mean of actual/reference ratios as a percentage; non-finite parts are skipped."""
    parts = {key: safe_div(actual[key], reference) for key, reference in profile.items()}
    usable = [v for v in parts.values() if finite(v)]
    value = float(np.mean(usable)) * 100.0 if usable else NAN
    return Measurement(value, {**actual, **{f"{k}_index": v for k, v in parts.items()}})


def _roe(h: StatementHistory) -> float:
    return percent(h.inc.net_income, h.bs.total_equity)


def _roa(h: StatementHistory) -> float:
    return percent(h.inc.net_income, h.bs.total_assets)


def _eps(h: StatementHistory) -> float:
    return h.inc.earnings_per_share or safe_div(h.inc.net_income, h.inc.shares_outstanding)


# ----------------------------
# Comparison
# ----------------------------

def sector_comparison(h: StatementHistory) -> Measurement:
    actual = {
        "gross_margin": percent(h.inc.gross_profit, h.inc.revenue),
        "net_margin": percent(h.inc.net_income, h.inc.revenue),
        "roe": _roe(h),
        "roa": _roa(h),
    }
    return _composite(actual, SECTOR_PROFILE)


def historical_comparison(h: StatementHistory) -> float:
    prev = h.previous
    prev_roe = percent(prev.income_statement.net_income, prev.balance_sheet.total_equity)
    if not finite(prev_roe) or prev_roe <= 0:
        return NAN
    return percent(_roe(h), prev_roe)


def competitive_analysis(h: StatementHistory) -> Measurement:
    actual = {
        "current_ratio": safe_div(h.bs.total_current_assets, h.bs.total_current_liabilities),
        "asset_turnover": safe_div(h.inc.revenue, h.bs.total_assets),
        "operating_margin": percent(h.inc.operating_income, h.inc.revenue),
    }
    return _composite(actual, COMPETITOR_PROFILE)


# ----------------------------
# Valuation
# ----------------------------

def _dcf_growth(h: StatementHistory) -> float:
    rate = cagr(h.series("revenue")) if len(h) > 1 else NAN
    if not finite(rate):
        rate = h.assumptions.terminal_growth
    low, high = DCF_GROWTH_BOUNDS
    return min(max(rate, low), high)


def _run_dcf(h: StatementHistory, wacc: float) -> Tuple[float, float, float]:
    return dcf_fcff(
        fcf=h.free_cash_flow,
        growth=_dcf_growth(h),
        wacc=wacc,
        terminal_growth=h.assumptions.terminal_growth,
        years=DCF_YEARS,
        net_debt=h.bs.total_debt - h.bs.cash,
        shares=h.inc.shares_outstanding,
    )


def dcf_valuation(h: StatementHistory) -> Measurement:
    enterprise_value, equity_value, per_share = _run_dcf(h, h.assumptions.cost_of_capital)
    return Measurement(
        enterprise_value,
        {"equity_value": equity_value, "per_share": per_share, "growth": _dcf_growth(h)},
    )


def gordon_growth(h: StatementHistory) -> float:
    a = h.assumptions
    if a.required_return <= a.dividend_growth:
        return NAN
    return h.inc.dividends_per_share * (1.0 + a.dividend_growth) / (a.required_return - a.dividend_growth)


def multiples_valuation(h: StatementHistory) -> float:
    return _eps(h) * h.assumptions.earnings_multiple


def fair_value(h: StatementHistory) -> Measurement:
    estimates = {
        "dcf": _run_dcf(h, h.assumptions.cost_of_capital)[2],
        "multiples": multiples_valuation(h),
        "gordon": gordon_growth(h),
    }
    usable = [v for v in estimates.values() if finite(v) and v > 0]
    value = float(np.mean(usable)) if usable else NAN
    return Measurement(value, estimates)


def valuation_sensitivity(h: StatementHistory) -> Measurement:
    wacc = h.assumptions.cost_of_capital
    base = _run_dcf(h, wacc)[0]
    low = _run_dcf(h, wacc + SENSITIVITY_STEP)[0]
    high = _run_dcf(h, wacc - SENSITIVITY_STEP)[0]
    swing = percent(abs(high - low), abs(base))
    return Measurement(swing, {"base": base, "wacc_up": low, "wacc_down": high})


def eva(h: StatementHistory) -> float:
    return h.nopat - h.assumptions.cost_of_capital * h.capital_employed


def mva(h: StatementHistory) -> float:
    return h.market_cap + h.bs.total_debt - h.capital_employed


def _roa_volatility(h: StatementHistory) -> float:
    roa = (h.ratio_series("net_income", "total_assets") * 100.0).dropna()
    if len(roa) >= 3:
        sigma = float(roa.std(ddof=1))
        if sigma > 0:
            return sigma
    return h.assumptions.equity_volatility * 100.0


def risk_adjusted_return(h: StatementHistory) -> float:
    return safe_div(_roa(h) - h.assumptions.risk_free_rate * 100.0, _roa_volatility(h))


def sharpe_ratio(h: StatementHistory) -> float:
    a = h.assumptions
    return safe_div(_roe(h) - a.risk_free_rate * 100.0, a.equity_volatility * 100.0)


def treynor_ratio(h: StatementHistory) -> float:
    a = h.assumptions
    return safe_div(_roe(h) - a.risk_free_rate * 100.0, a.beta)


def risk_return_analysis(h: StatementHistory) -> float:
    return safe_div(_roa(h), safe_div(h.bs.total_liabilities, h.bs.total_assets))


def relative_valuation(h: StatementHistory) -> float:
    eps = _eps(h)
    if not finite(eps) or eps <= 0:
        return NAN
    pe = h.assumptions.share_price / eps
    # 15x is the reference market multiple
    return percent(15.0, pe)


def _price_scale(h: StatementHistory) -> float:
    return h.assumptions.share_price


def _market_cap_scale(h: StatementHistory) -> float:
    return h.market_cap


# ----------------------------
# Performance
# ----------------------------

def overall_performance(h: StatementHistory) -> Measurement:
    actual = {
        "gross_margin": percent(h.inc.gross_profit, h.inc.revenue),
        "operating_margin": percent(h.inc.operating_income, h.inc.revenue),
        "roe": _roe(h),
        "roa": _roa(h),
        "current_ratio": safe_div(h.bs.total_current_assets, h.bs.total_current_liabilities),
    }
    profile = {"gross_margin": 25.0, "operating_margin": 12.0, "roe": 15.0, "roa": 10.0, "current_ratio": 2.0}
    return _composite(actual, profile)


def management_quality(h: StatementHistory) -> Measurement:
    details = {
        "roe": _roe(h),
        "roce": percent(h.inc.operating_income, h.capital_employed),
        "gross_margin": percent(h.inc.gross_profit, h.inc.revenue),
    }
    usable = [v for v in details.values() if finite(v)]
    return Measurement(float(np.mean(usable)) if usable else NAN, details)


COMPARISON: List[AnalysisDefinition] = [
    _intermediate("sector_comparison", "comparison", sector_comparison, 100.0, unit="score"),
    _intermediate("historical_comparison", "comparison", historical_comparison, 100.0, unit="score", min_history=2),
    _intermediate("competitive_analysis", "comparison", competitive_analysis, 100.0, unit="score"),
]

VALUATION: List[AnalysisDefinition] = [
    _intermediate("dcf_valuation", "valuation", dcf_valuation, 100.0, unit="currency", scale=_market_cap_scale),
    _intermediate("gordon_growth", "valuation", gordon_growth, 100.0, unit="per_share", scale=_price_scale),
    _intermediate("multiples_valuation", "valuation", multiples_valuation, 100.0, unit="per_share", scale=_price_scale),
    _intermediate("eva", "valuation", eva, 2.0, unit="currency", scale=lambda h: h.capital_employed),
    _intermediate("mva", "valuation", mva, 50.0, unit="currency", scale=lambda h: h.capital_employed),
    _intermediate("fair_value", "valuation", fair_value, 100.0, unit="per_share", scale=_price_scale),
    _intermediate("valuation_sensitivity", "valuation", valuation_sensitivity, 30.0, lower=True, unit="percent"),
    _intermediate("risk_adjusted_return", "valuation", risk_adjusted_return, 1.0),
    _intermediate("sharpe_ratio", "valuation", sharpe_ratio, 1.0),
    _intermediate("treynor_ratio", "valuation", treynor_ratio, 8.0),
    _intermediate("risk_return_analysis", "valuation", risk_return_analysis, 20.0),
    _intermediate(
        "financial_break_even",
        "valuation",
        lambda h: percent(h.inc.interest_expense, h.inc.operating_ebit),
        30.0,
        lower=True,
        unit="percent",
    ),
    _intermediate("relative_valuation", "valuation", relative_valuation, 100.0, unit="score"),
]

PERFORMANCE: List[AnalysisDefinition] = [
    _intermediate(
        "operating_efficiency",
        "performance",
        lambda h: percent(h.inc.operating_income, h.inc.cost_of_goods_sold + h.inc.total_operating_expenses),
        12.0,
        unit="percent",
    ),
    _intermediate("overall_performance", "performance", overall_performance, 100.0, unit="score"),
    _intermediate(
        "productivity_analysis",
        "performance",
        lambda h: safe_div(h.inc.gross_profit, h.inc.total_operating_expenses),
        1.2,
    ),
    _intermediate(
        "capital_efficiency",
        "performance",
        lambda h: percent(h.nopat, h.invested_capital),
        12.0,
        unit="percent",
    ),
    _intermediate("management_quality", "performance", management_quality, 20.0, unit="percent"),
]


INTERMEDIATE_DEFINITIONS: List[AnalysisDefinition] = [*COMPARISON, *VALUATION, *PERFORMANCE]
