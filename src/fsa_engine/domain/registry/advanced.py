"""Tier 3 catalogue: modeling, statistics, forecasting, risk, portfolio, M&A,
detection and time-series analyses.

Entries the statements can inform use statement-driven models built on numpy,
pandas and scipy. The remaining entries report a calibrated reference level
(``reference_level``); their benchmark equals that level so they rate "good"
until a statement-driven model replaces them behind the same interface.
"""
from __future__ import annotations

import math
from typing import Dict, List

import numpy as np
import pandas as pd
from scipy import special, stats

from fsa_engine.domain.registry.base import AnalysisDefinition, Measurement, Tier, define, reference_level
from fsa_engine.domain.services.calculations import (
    NAN,
    StatementHistory,
    altman_z,
    altman_z_double,
    beneish_m,
    benford_conformity,
    capm_cost_of_equity,
    distance_to_default,
    ewma_volatility,
    finite,
    historical_var,
    normal_cdf,
    pct_changes,
    percent,
    piotroski_signals,
    safe_div,
    statement_values,
)

REVENUE_SHOCKS = (-0.30, -0.20, -0.10, 0.0, 0.10, 0.20)
STRESS_REVENUE_SHOCK = 0.20
STRESS_RATE_MULTIPLIER = 1.5
RATE_SHOCK = 0.02
# Forecast growth is clamped to +/-50% per period.
FORECAST_GROWTH_LIMIT = 50.0
STOCK_PRICE_MULTIPLE = 15.0
ANOMALY_Z_LIMIT = 2.0


def _advanced(analysis_id: str, category: str, compute, benchmark: float, **options) -> AnalysisDefinition:
    return define(analysis_id, Tier.ADVANCED, category, compute, benchmark, **options)


def _growth_series(h: StatementHistory, column: str) -> pd.Series:
    return pct_changes(h.series(column)).replace([np.inf, -np.inf], np.nan).dropna()


def _contribution_margin(h: StatementHistory) -> float:
    return h.inc.revenue - 0.7 * h.inc.cost_of_goods_sold


def _revenue_scale(h: StatementHistory) -> float:
    return h.inc.revenue


# ----------------------------
# Modeling
# ----------------------------

def monte_carlo(h: StatementHistory) -> Measurement:
    """Share of simulated next-period revenue paths that do not fall."""
    a = h.assumptions
    history = _growth_series(h, "revenue") / 100.0
    mu = float(history.mean()) if len(history) >= 1 else a.terminal_growth
    sigma = float(history.std(ddof=1)) if len(history) >= 2 else a.equity_volatility
    if not finite(sigma) or sigma <= 0:
        sigma = a.equity_volatility
    rng = np.random.default_rng(a.simulation_seed)
    draws = rng.normal(mu, sigma, a.simulation_paths)
    revenue = h.inc.revenue * (1.0 + draws)
    return Measurement(
        float((draws >= 0).mean()) * 100.0,
        {
            "mean_growth": mu * 100.0,
            "volatility": sigma * 100.0,
            "p5_revenue": float(np.percentile(revenue, 5)),
            "p95_revenue": float(np.percentile(revenue, 95)),
        },
    )


def regression_model(h: StatementHistory) -> float:
    """Adjusted R-squared of net income regressed on revenue and operating expenses.

    Undefined until there are more periods than fitted coefficients.
    """
    y = h.series("net_income").to_numpy(dtype=float)
    x = np.column_stack(
        [np.ones(len(y)), h.series("revenue").to_numpy(dtype=float), h.series("total_operating_expenses").to_numpy(dtype=float)]
    )
    n, k = x.shape
    if n <= k:
        return NAN
    coef, *_ = np.linalg.lstsq(x, y, rcond=None)
    residual = y - x @ coef
    ss_tot = float(((y - y.mean()) ** 2).sum())
    r_squared = 1.0 - safe_div(float((residual ** 2).sum()), ss_tot)
    return 1.0 - (1.0 - r_squared) * (n - 1) / (n - k)


def garch_model(h: StatementHistory) -> float:
    return ewma_volatility(_growth_series(h, "revenue"))


def _ocf_tail(h: StatementHistory):
    changes = h.series("cf_net_cash_from_operations").diff().dropna()
    return historical_var(changes)


def var_model(h: StatementHistory) -> float:
    var, _ = _ocf_tail(h)
    return percent(var, abs(h.operating_cash_flow))


def conditional_var(h: StatementHistory) -> float:
    _, cvar = _ocf_tail(h)
    return percent(cvar, abs(h.operating_cash_flow))


def scenario_model(h: StatementHistory) -> Measurement:
    margin = _contribution_margin(h)
    outcomes = {f"shock_{int(s * 100)}": h.inc.operating_income + s * margin for s in REVENUE_SHOCKS}
    survived = sum(1 for v in outcomes.values() if v > 0)
    return Measurement(survived / len(REVENUE_SHOCKS) * 100.0, outcomes)


def advanced_dupont(h: StatementHistory) -> Measurement:
    """ROE rebuilt from operating return and financial leverage (RNOA + FLEV x spread)."""
    bs, inc = h.bs, h.inc
    net_debt = bs.total_debt - bs.cash - bs.short_term_investments
    net_operating_assets = bs.total_equity + net_debt
    rnoa = safe_div(h.nopat, net_operating_assets)
    nbc = safe_div(inc.interest_expense * (1.0 - h.assumptions.tax_rate), net_debt) if net_debt > 0 else 0.0
    flev = safe_div(net_debt, bs.total_equity)
    roe = rnoa + flev * (rnoa - nbc)
    return Measurement(roe * 100.0, {"rnoa": rnoa * 100.0, "flev": flev, "nbc": nbc * 100.0})


def equilibrium_model(h: StatementHistory) -> float:
    bs = h.bs
    funding = bs.total_liabilities + bs.total_equity
    larger = max(abs(bs.total_assets), abs(funding))
    return percent(min(abs(bs.total_assets), abs(funding)), larger)


def _clip(value: float, low: float = -10.0, high: float = 10.0) -> float:
    """Bound a feature ratio; tiny denominators otherwise dominate the score."""
    return float(np.clip(value, low, high)) if finite(value) else value


def ai_model(h: StatementHistory) -> Measurement:
    """Logistic health score (0-100) over profitability, liquidity and solvency features."""
    bs, inc = h.bs, h.inc
    features = {
        "roa": _clip(safe_div(inc.net_income, bs.total_assets)),
        "current_ratio": _clip(safe_div(bs.total_current_assets, bs.total_current_liabilities), high=3.0),
        "equity_ratio": _clip(safe_div(bs.total_equity, bs.total_assets)),
        "ocf_to_liabilities": _clip(safe_div(h.operating_cash_flow, bs.total_liabilities)),
        "net_margin": _clip(safe_div(inc.net_income, inc.revenue)),
    }
    weights = {"roa": 8.0, "current_ratio": 0.8, "equity_ratio": 2.5, "ocf_to_liabilities": 1.5, "net_margin": 5.0}
    z = -2.0 + sum(weights[k] * (v if finite(v) else 0.0) for k, v in features.items())
    return Measurement(100.0 * float(special.expit(z)), features)


# ----------------------------
# Statistical
# ----------------------------

def _ratio_matrix(h: StatementHistory) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "gross_margin": h.ratio_series("gross_profit", "revenue"),
            "operating_margin": h.ratio_series("operating_income", "revenue"),
            "net_margin": h.ratio_series("net_income", "revenue"),
            "roa": h.ratio_series("net_income", "total_assets"),
            "asset_turnover": h.ratio_series("revenue", "total_assets"),
            "current_ratio": h.ratio_series("total_current_assets", "total_current_liabilities"),
        }
    )


def standard_deviation(h: StatementHistory) -> float:
    return float(_growth_series(h, "revenue").std(ddof=1))


def coefficient_variation(h: StatementHistory) -> float:
    revenue = h.series("revenue")
    return safe_div(float(revenue.std(ddof=1)), float(revenue.mean()))


def correlation_analysis(h: StatementHistory) -> float:
    revenue, income = h.series("revenue"), h.series("net_income")
    if revenue.std() == 0 or income.std() == 0:
        return NAN
    return float(revenue.corr(income))


def hypothesis_testing(h: StatementHistory) -> float:
    """p-value of a one-sample t-test that mean revenue growth is zero."""
    growth = _growth_series(h, "revenue")
    if len(growth) < 2 or float(growth.std(ddof=1)) == 0:
        return NAN
    return float(stats.ttest_1samp(growth.to_numpy(), 0.0).pvalue)


def linear_regression(h: StatementHistory) -> float:
    revenue = h.series("revenue")
    if revenue.std() == 0:
        return NAN
    fit = stats.linregress(np.asarray(revenue.index, dtype=float), revenue.to_numpy(dtype=float))
    return float(fit.rvalue ** 2)


def normality_tests(h: StatementHistory) -> float:
    growth = _growth_series(h, "revenue")
    if len(growth) < 3 or float(growth.std(ddof=1)) == 0:
        return NAN
    return float(stats.shapiro(growth.to_numpy()).pvalue)


def pca(h: StatementHistory) -> float:
    """Variance share (%) of the first principal component of the ratio panel."""
    matrix = _ratio_matrix(h).dropna(axis=1)
    matrix = matrix.loc[:, matrix.std(ddof=0) > 0]
    if matrix.shape[1] < 2:
        return NAN
    standardized = (matrix - matrix.mean()) / matrix.std(ddof=0)
    singular = np.linalg.svd(standardized.to_numpy(dtype=float), compute_uv=False)
    energy = singular ** 2
    return safe_div(float(energy[0]), float(energy.sum())) * 100.0


# ----------------------------
# Forecasting
# ----------------------------

def _trend_fit(h: StatementHistory, column: str):
    values = h.series(column)
    years = np.asarray(values.index, dtype=float)
    slope, intercept = np.polyfit(years, values.to_numpy(dtype=float), 1)
    return slope, intercept, years


def arima_forecast(h: StatementHistory) -> Measurement:
    slope, intercept, years = _trend_fit(h, "revenue")
    forecast = slope * (years[-1] + 1.0) + intercept
    return Measurement(percent(forecast, h.inc.revenue), {"forecast_revenue": float(forecast)})


def traditional_credit(h: StatementHistory) -> Measurement:
    """Banded credit score (0-100) from coverage, leverage, liquidity and margin."""
    bs, inc = h.bs, h.inc
    icr = safe_div(inc.operating_ebit, inc.interest_expense) if inc.interest_expense else math.inf
    de = safe_div(bs.total_liabilities, bs.total_equity)
    cr = safe_div(bs.total_current_assets, bs.total_current_liabilities)
    margin = percent(inc.net_income, inc.revenue)

    def band(value: float, cuts, lower_better: bool = False) -> float:
        if not (finite(value) or value == math.inf):
            return 0.0
        for threshold, points in cuts:
            if (value <= threshold) if lower_better else (value >= threshold):
                return points
        return 0.0

    parts = {
        "coverage": band(icr, [(8.0, 25.0), (4.0, 18.0), (2.0, 10.0), (1.0, 5.0)]),
        "leverage": band(de, [(0.5, 25.0), (1.0, 18.0), (2.0, 10.0), (3.0, 5.0)], lower_better=True),
        "liquidity": band(cr, [(2.0, 25.0), (1.5, 18.0), (1.0, 10.0), (0.8, 5.0)]),
        "margin": band(margin, [(10.0, 25.0), (5.0, 18.0), (0.0, 10.0)]),
    }
    return Measurement(sum(parts.values()), parts)


def _forecast_next(h: StatementHistory, column: str) -> float:
    growth = _growth_series(h, column)
    if growth.empty:
        return NAN
    rate = min(max(float(growth.mean()), -FORECAST_GROWTH_LIMIT), FORECAST_GROWTH_LIMIT)
    return float(h.series(column).iloc[-1]) * (1.0 + rate / 100.0)


def default_probability(h: StatementHistory) -> float:
    dd = distance_to_default(h)
    if not finite(dd):
        return NAN
    return normal_cdf(-dd) * 100.0


# ----------------------------
# Risk
# ----------------------------

def liquidity_risk(h: StatementHistory) -> float:
    bs = h.bs
    return safe_div(bs.total_current_liabilities, bs.cash + bs.short_term_investments + bs.accounts_receivable)


def stress_testing(h: StatementHistory) -> float:
    """Interest cover after a revenue shock and a rise in funding cost."""
    stressed_ebit = h.inc.operating_ebit - STRESS_REVENUE_SHOCK * _contribution_margin(h)
    return safe_div(stressed_ebit, h.inc.interest_expense * STRESS_RATE_MULTIPLIER)


def interest_rate_risk(h: StatementHistory) -> float:
    ebt = h.inc.earnings_before_tax
    if ebt <= 0:
        return NAN
    return percent(RATE_SHOCK * h.bs.total_debt, ebt)


# ----------------------------
# Detection
# ----------------------------

def earnings_manipulation(h: StatementHistory) -> Measurement:
    m_score = beneish_m(h.current, h.previous)
    return Measurement(normal_cdf(m_score) * 100.0, {"m_score": m_score})


def anomaly_detection(h: StatementHistory) -> Measurement:
    """Share (%) of key line items whose latest value lies within 2 sigma of prior periods."""
    columns = [
        "revenue",
        "cost_of_goods_sold",
        "total_operating_expenses",
        "net_income",
        "total_assets",
        "total_liabilities",
        "cf_net_cash_from_operations",
    ]
    flags: Dict[str, float] = {}
    for column in columns:
        values = h.series(column)
        prior, latest = values.iloc[:-1], float(values.iloc[-1])
        sigma = float(prior.std(ddof=1))
        mean = float(prior.mean())
        if sigma > 0:
            flags[column] = abs(latest - mean) / sigma
        else:
            flags[column] = 0.0 if math.isclose(latest, mean) else math.inf
    within = sum(1 for z in flags.values() if z <= ANOMALY_Z_LIMIT)
    return Measurement(within / len(columns) * 100.0, {k: v for k, v in flags.items() if finite(v)})


def _piotroski(h: StatementHistory) -> Dict[str, bool]:
    return piotroski_signals(h.current, h.previous)


def crisis_prediction(h: StatementHistory) -> Measurement:
    signals = _piotroski(h)
    score = sum(signals.values())
    return Measurement((9 - score) / 9.0 * 100.0, {"f_score": float(score)})


def warning_signals(h: StatementHistory) -> Measurement:
    signals = _piotroski(h)
    failed = [name for name, passed in signals.items() if not passed]
    return Measurement(float(len(failed)), {name: 1.0 for name in failed})


def trend_forecasting(h: StatementHistory) -> float:
    slope, _, _ = _trend_fit(h, "revenue")
    return percent(slope, float(h.series("revenue").mean()))


def stock_price_prediction(h: StatementHistory) -> float:
    eps = h.inc.earnings_per_share or safe_div(h.inc.net_income, h.inc.shares_outstanding)
    return eps * STOCK_PRICE_MULTIPLE


def volatility_analysis(h: StatementHistory) -> float:
    return float(_growth_series(h, "cf_net_cash_from_operations").std(ddof=1))


def _price_scale(h: StatementHistory) -> float:
    return h.assumptions.share_price


MODELING: List[AnalysisDefinition] = [
    _advanced("monte_carlo", "modeling", monte_carlo, 60.0, unit="percent"),
    _advanced("regression_model", "modeling", regression_model, 0.85, min_history=4),
    _advanced("garch_model", "modeling", garch_model, 15.0, lower=True, unit="percent", min_history=3),
    _advanced("var_model", "modeling", var_model, 20.0, lower=True, unit="percent", min_history=3),
    _advanced("black_scholes", "modeling", distance_to_default, 2.0, unit="score"),
    _advanced("scenario_model", "modeling", scenario_model, 80.0, unit="percent"),
    _advanced("fcf_model", "modeling", lambda h: percent(h.free_cash_flow, h.inc.revenue), 5.0, unit="percent"),
    _advanced("advanced_dupont", "modeling", advanced_dupont, 15.0, unit="percent"),
    _advanced("bankruptcy_model", "modeling", lambda h: altman_z(h.bs, h.inc), 3.0, unit="score"),
    _advanced("equilibrium_model", "modeling", equilibrium_model, 100.0, unit="percent"),
    _advanced("ai_model", "modeling", ai_model, 70.0, unit="score"),
]

STATISTICAL: List[AnalysisDefinition] = [
    _advanced("standard_deviation", "statistical", standard_deviation, 10.0, lower=True, unit="percent", min_history=3),
    _advanced("coefficient_variation", "statistical", coefficient_variation, 0.35, lower=True, min_history=2),
    _advanced("correlation_analysis", "statistical", correlation_analysis, 0.7, min_history=3),
    _advanced(
        "hypothesis_testing", "statistical", hypothesis_testing, 0.05, lower=True, unit="probability", min_history=3
    ),
    _advanced("linear_regression", "statistical", linear_regression, 0.7, min_history=3),
    reference_level("anova", "statistical", 15.8),
    _advanced("normality_tests", "statistical", normality_tests, 0.05, unit="probability", min_history=4),
    reference_level("time_series_stats", "statistical", 85.3, "percent"),
    reference_level("unit_root_test", "statistical", -3.45),
    reference_level("cointegration", "statistical", 2.0),
    reference_level("error_correction", "statistical", -0.25, "ratio"),
    reference_level("factor_analysis", "statistical", 3.0),
    reference_level("cluster_analysis", "statistical", 4.0),
    _advanced("pca", "statistical", pca, 85.0, unit="percent", min_history=3),
    reference_level("advanced_descriptive", "statistical", 1.25, "ratio"),
    reference_level("nonlinearity_tests", "statistical", 0.08, "probability"),
]

FORECASTING: List[AnalysisDefinition] = [
    _advanced("arima_forecast", "forecasting", arima_forecast, 105.0, unit="score", min_history=3),
    reference_level("neural_network_forecast", "forecasting", 88.9, "percent"),
    reference_level("ml_credit_scoring", "forecasting", 92.3),
    _advanced("traditional_credit", "forecasting", traditional_credit, 70.0, unit="score"),
    _advanced(
        "cash_flow_forecast",
        "forecasting",
        lambda h: _forecast_next(h, "cf_net_cash_from_operations"),
        10.0,
        unit="currency",
        scale=_revenue_scale,
        min_history=2,
    ),
    _advanced("default_probability", "forecasting", default_probability, 2.5, lower=True, unit="probability"),
    _advanced(
        "sales_forecast",
        "forecasting",
        lambda h: _forecast_next(h, "revenue"),
        105.0,
        unit="currency",
        scale=_revenue_scale,
        min_history=2,
    ),
    _advanced(
        "earnings_forecast",
        "forecasting",
        lambda h: _forecast_next(h, "net_income"),
        8.0,
        unit="currency",
        scale=_revenue_scale,
        min_history=2,
    ),
    reference_level("institutional_risk", "forecasting", 3.8),
    reference_level("macro_economic_forecast", "forecasting", 3.2, "percent"),
]

RISK: List[AnalysisDefinition] = [
    _advanced("conditional_var", "risk", conditional_var, 25.0, lower=True, unit="percent", min_history=3),
    reference_level("operational_risk", "risk", 8.5, lower=True),
    reference_level("market_risk", "risk", 12.8, "percent", lower=True),
    reference_level("credit_risk", "risk", 4.2, "percent", lower=True),
    _advanced("liquidity_risk", "risk", liquidity_risk, 1.0, lower=True),
    reference_level("aggregate_risk", "risk", 15.3, lower=True),
    _advanced("stress_testing", "risk", stress_testing, 2.0, unit="times"),
    reference_level("risk_sensitivity", "risk", 1.25, "ratio", lower=True),
    _advanced("interest_rate_risk", "risk", interest_rate_risk, 10.0, lower=True, unit="percent"),
    reference_level("fx_risk", "risk", 3.4, "percent", lower=True),
    reference_level("simulation_risk", "risk", 82.7, "percent"),
    reference_level("model_risk", "risk", 2.1, "percent", lower=True),
    reference_level("concentration_risk", "risk", 18.5, "percent", lower=True),
    reference_level("conditional_loss", "risk", 4_500_000.0, "currency", lower=True),
    reference_level("regulatory_risk", "risk", 7.3, lower=True),
    reference_level("capital_risk", "risk", 12.8, "percent", lower=True),
    reference_level("esg_risk", "risk", 6.5, lower=True),
    reference_level("cyber_risk", "risk", 4.2, lower=True),
    reference_level("reputation_risk", "risk", 3.8, lower=True),
    reference_level("inflation_risk", "risk", 2.5, "percent", lower=True),
    reference_level("industry_risk", "risk", 1.15, "ratio", lower=True),
    reference_level("geopolitical_risk", "risk", 5.7, lower=True),
    reference_level("derivatives_risk", "risk", 8.9, lower=True),
    reference_level("climate_risk", "risk", 4.6, lower=True),
    reference_level("supply_chain_risk", "risk", 6.8, lower=True),
]

PORTFOLIO: List[AnalysisDefinition] = [
    reference_level("markowitz_portfolio", "portfolio", 85.4, "percent"),
    _advanced(
        "capm_analysis",
        "portfolio",
        lambda h: capm_cost_of_equity(h.assumptions) * 100.0,
        12.5,
        lower=True,
        unit="percent",
    ),
    reference_level("fama_french", "portfolio", 0.78, "ratio"),
    reference_level("alpha_beta", "portfolio", 2.3, "percent"),
    reference_level("performance_attribution", "portfolio", 68.7, "percent"),
    reference_level("information_ratio", "portfolio", 0.85, "ratio"),
    reference_level("diversification", "portfolio", 72.4, "percent"),
    reference_level("style_analysis", "portfolio", 58.9, "percent"),
    reference_level("market_timing", "portfolio", 45.6, "percent"),
    reference_level("portfolio_efficiency", "portfolio", 88.2, "percent"),
    reference_level("rebalancing", "portfolio", 15.3, "percent"),
    reference_level("active_risk", "portfolio", 4.2, "percent", lower=True),
    reference_level("quantitative_investment", "portfolio", 82.8),
    reference_level("investment_strategy", "portfolio", 76.5),
]

MERGERS: List[AnalysisDefinition] = [
    reference_level("ma_valuation", "mergers", 1_250_000_000.0, "currency"),
    reference_level("synergy_analysis", "mergers", 85_000_000.0, "currency"),
    reference_level("deal_structure", "mergers", 65.5, "percent"),
    reference_level("shareholder_impact", "mergers", 12.8, "percent"),
    reference_level("ma_risk", "mergers", 7.4, lower=True),
]

DETECTION: List[AnalysisDefinition] = [
    _advanced(
        "fraud_detection",
        "detection",
        lambda h: benford_conformity(statement_values(h.statements)),
        90.0,
        unit="percent",
    ),
    _advanced(
        "earnings_manipulation", "detection", earnings_manipulation, 5.0, lower=True, unit="probability", min_history=2
    ),
    _advanced("anomaly_detection", "detection", anomaly_detection, 90.0, unit="percent", min_history=3),
    _advanced("crisis_prediction", "detection", crisis_prediction, 35.0, lower=True, unit="probability", min_history=2),
    reference_level("volatility_clustering", "detection", 78.3, "percent"),
    _advanced("trend_forecasting", "detection", trend_forecasting, 5.0, unit="percent", min_history=3),
    _advanced(
        "statement_manipulation", "detection", lambda h: altman_z_double(h.bs, h.inc), 2.6, unit="score"
    ),
    _advanced(
        "stock_price_prediction", "detection", stock_price_prediction, 100.0, unit="per_share", scale=_price_scale
    ),
    _advanced("warning_signals", "detection", warning_signals, 3.0, lower=True, unit="score", min_history=2),
    reference_level("performance_prediction", "detection", 78.9, "percent"),
]

TIME_SERIES: List[AnalysisDefinition] = [
    reference_level("trend_seasonality", "time_series", 82.4, "percent"),
    reference_level("business_cycle", "time_series", 3.2, "years"),
    _advanced("volatility_analysis", "time_series", volatility_analysis, 18.5, lower=True, unit="percent", min_history=3),
    reference_level("structural_breaks", "time_series", 2.0),
    reference_level("spectral_analysis", "time_series", 65.8, "percent"),
    reference_level("convergence_divergence", "time_series", 1.25, "ratio"),
]


ADVANCED_DEFINITIONS: List[AnalysisDefinition] = [
    *MODELING,
    *STATISTICAL,
    *FORECASTING,
    *RISK,
    *PORTFOLIO,
    *MERGERS,
    *DETECTION,
    *TIME_SERIES,
]
