"""Tier 1 catalogue: structural analyses, financial ratios and cash-flow analyses.

Every compute function takes a ``StatementHistory`` and returns a float or a
``Measurement``. Divisions go through ``safe_div`` so a zero denominator yields
NaN, which the engine reports as not applicable.
"""
from __future__ import annotations

from typing import List, Tuple

import numpy as np

from fsa_engine.domain.models.financials import IncomeStatement
from fsa_engine.domain.registry.base import AnalysisDefinition, Measurement, Tier, define
from fsa_engine.domain.services.calculations import (
    NAN,
    StatementHistory,
    cagr,
    finite,
    growth,
    pct_changes,
    percent,
    safe_div,
)

DAYS_PER_YEAR = 365.0
# Share of cost of goods sold treated as variable when no cost split is reported.
VARIABLE_COGS_SHARE = 0.7


def _classical(analysis_id: str, category: str, compute, benchmark: float, **options) -> AnalysisDefinition:
    return define(analysis_id, Tier.CLASSICAL, category, compute, benchmark, **options)


def _eps(inc: IncomeStatement) -> float:
    if inc.earnings_per_share:
        return inc.earnings_per_share
    return safe_div(inc.net_income, inc.shares_outstanding)


def _cost_structure(inc: IncomeStatement) -> Tuple[float, float]:
    """(fixed, variable) operating costs."""
    variable = inc.cost_of_goods_sold * VARIABLE_COGS_SHARE
    fixed = inc.total_operating_expenses + inc.cost_of_goods_sold * (1.0 - VARIABLE_COGS_SHARE)
    return fixed, variable


def _break_even_sales(h: StatementHistory) -> float:
    fixed, variable = _cost_structure(h.inc)
    variable_ratio = safe_div(variable, h.inc.revenue)
    return safe_div(fixed, 1.0 - variable_ratio)


def _contribution_margin(h: StatementHistory) -> float:
    return h.inc.revenue - _cost_structure(h.inc)[1]


def _revenue_scale(h: StatementHistory) -> float:
    return h.inc.revenue


def _assets_scale(h: StatementHistory) -> float:
    return h.bs.total_assets


def _equity_scale(h: StatementHistory) -> float:
    return h.bs.total_equity


def _invested_capital_scale(h: StatementHistory) -> float:
    return h.bs.total_equity + h.bs.long_term_debt


# ----------------------------
# Structural
# ----------------------------

def vertical_analysis(h: StatementHistory) -> Measurement:
    bs, inc = h.bs, h.inc
    details = {
        "current_assets_pct": percent(bs.total_current_assets, bs.total_assets),
        "non_current_assets_pct": percent(bs.total_non_current_assets, bs.total_assets),
        "current_liabilities_pct": percent(bs.total_current_liabilities, bs.total_assets),
        "equity_pct": percent(bs.total_equity, bs.total_assets),
        "cogs_pct": percent(inc.cost_of_goods_sold, inc.revenue),
        "net_margin_pct": percent(inc.net_income, inc.revenue),
    }
    return Measurement(percent(inc.revenue - inc.cost_of_goods_sold, inc.revenue), details)


def _growth_details(h: StatementHistory) -> dict:
    prev = h.previous
    if prev is None:
        return {}
    pbs, pinc, pcf = prev.balance_sheet, prev.income_statement, prev.cash_flow_statement
    return {
        "revenue_growth": growth(h.inc.revenue, pinc.revenue),
        "net_income_growth": growth(h.inc.net_income, pinc.net_income),
        "total_assets_growth": growth(h.bs.total_assets, pbs.total_assets),
        "equity_growth": growth(h.bs.total_equity, pbs.total_equity),
        "operating_cash_flow_growth": growth(h.operating_cash_flow, pcf.net_cash_from_operations),
    }


def horizontal_analysis(h: StatementHistory) -> Measurement:
    details = _growth_details(h)
    return Measurement(details["revenue_growth"], details)


def mixed_analysis(h: StatementHistory) -> Measurement:
    details = {
        "operating_margin": percent(h.inc.operating_income, h.inc.revenue),
        "equity_pct": percent(h.bs.total_equity, h.bs.total_assets),
        **_growth_details(h),
    }
    return Measurement(details["operating_margin"], details)


def common_size_analysis(h: StatementHistory) -> Measurement:
    inc = h.inc
    details = {
        "cogs_pct": percent(inc.cost_of_goods_sold, inc.revenue),
        "sga_pct": percent(inc.selling_general_administrative, inc.revenue),
        "rd_pct": percent(inc.research_development, inc.revenue),
        "interest_pct": percent(inc.interest_expense, inc.revenue),
        "tax_pct": percent(inc.income_tax_expense, inc.revenue),
        "net_margin_pct": percent(inc.net_income, inc.revenue),
    }
    return Measurement(percent(inc.total_operating_expenses, inc.revenue), details)


def growth_rates(h: StatementHistory) -> Measurement:
    details = _growth_details(h)
    values = [details[k] for k in ("revenue_growth", "net_income_growth", "total_assets_growth", "equity_growth")]
    finite_values = [v for v in values if finite(v)]
    value = float(np.mean(finite_values)) if finite_values else NAN
    return Measurement(value, details)


def _net_margins(h: StatementHistory):
    return h.ratio_series("net_income", "revenue") * 100.0


def basic_deviation(h: StatementHistory) -> float:
    margins = _net_margins(h).dropna()
    if margins.empty:
        return NAN
    return abs(float(margins.iloc[-1]) - float(margins.mean()))


def simple_variance(h: StatementHistory) -> float:
    margins = _net_margins(h).dropna()
    if len(margins) < 2:
        return NAN
    return float(np.var(margins.to_numpy()))


STRUCTURAL: List[AnalysisDefinition] = [
    _classical("vertical_analysis", "structural", vertical_analysis, 25.0, unit="percent", profile="vertical"),
    _classical("horizontal_analysis", "structural", horizontal_analysis, 5.0, unit="percent", profile="horizontal", min_history=2),
    _classical("mixed_analysis", "structural", mixed_analysis, 12.0, unit="percent"),
    _classical(
        "trend_analysis", "structural", lambda h: cagr(h.series("revenue")) * 100.0, 5.0, unit="percent", min_history=3
    ),
    _classical(
        "basic_comparative_analysis", "structural", lambda h: percent(h.inc.net_income, h.inc.revenue), 8.0, unit="percent"
    ),
    _classical(
        "value_added_analysis",
        "structural",
        lambda h: percent(h.inc.revenue - h.inc.cost_of_goods_sold - h.inc.other_operating_expenses, h.inc.revenue),
        30.0,
        unit="percent",
    ),
    _classical("common_size_analysis", "structural", common_size_analysis, 20.0, lower=True, unit="percent"),
    _classical(
        "simple_time_series",
        "structural",
        lambda h: float(pct_changes(h.series("revenue")).mean()),
        5.0,
        unit="percent",
        min_history=2,
    ),
    _classical(
        "relative_changes",
        "structural",
        lambda h: growth(h.inc.net_income, h.previous.income_statement.net_income),
        5.0,
        unit="percent",
        min_history=2,
    ),
    _classical("growth_rates", "structural", growth_rates, 5.0, unit="percent", min_history=2),
    _classical("basic_deviation", "structural", basic_deviation, 2.0, lower=True, unit="percent"),
    _classical("simple_variance", "structural", simple_variance, 4.0, lower=True, unit="score", min_history=2),
    _classical(
        "index_numbers",
        "structural",
        lambda h: percent(h.inc.revenue, h.first.income_statement.revenue),
        105.0,
        unit="score",
        min_history=2,
    ),
]


# ----------------------------
# Liquidity
# ----------------------------

def defensive_interval(h: StatementHistory) -> float:
    bs, inc = h.bs, h.inc
    daily_expenses = safe_div(
        inc.cost_of_goods_sold + inc.total_operating_expenses - inc.depreciation_amortization, DAYS_PER_YEAR
    )
    return safe_div(bs.cash + bs.short_term_investments + bs.accounts_receivable, daily_expenses)


LIQUIDITY: List[AnalysisDefinition] = [
    _classical("current_ratio", "liquidity", lambda h: safe_div(h.bs.total_current_assets, h.bs.total_current_liabilities), 2.0),
    _classical(
        "quick_ratio",
        "liquidity",
        lambda h: safe_div(
            h.bs.total_current_assets - h.bs.inventory - h.bs.prepaid_expenses, h.bs.total_current_liabilities
        ),
        1.0,
    ),
    _classical(
        "cash_ratio",
        "liquidity",
        lambda h: safe_div(h.bs.cash + h.bs.short_term_investments, h.bs.total_current_liabilities),
        0.2,
    ),
    _classical(
        "operating_cash_flow_ratio",
        "liquidity",
        lambda h: safe_div(h.operating_cash_flow, h.bs.total_current_liabilities),
        0.4,
    ),
    _classical("working_capital_ratio", "liquidity", lambda h: safe_div(h.bs.working_capital, h.bs.total_assets), 0.1),
    _classical("defensive_interval", "liquidity", defensive_interval, 90.0, unit="days"),
    _classical("cash_to_current_assets", "liquidity", lambda h: safe_div(h.bs.cash, h.bs.total_current_assets), 0.25),
    _classical("net_working_capital_ratio", "liquidity", lambda h: safe_div(h.bs.working_capital, h.inc.revenue), 0.15),
    _classical(
        "inventory_to_working_capital",
        "liquidity",
        lambda h: safe_div(h.bs.inventory, h.bs.working_capital),
        0.8,
        lower=True,
    ),
    _classical(
        "current_cash_debt_coverage",
        "liquidity",
        lambda h: safe_div(h.operating_cash_flow, h.bs.short_term_debt),
        2.0,
        unit="times",
    ),
]


# ----------------------------
# Activity
# ----------------------------

def _inventory_days(h: StatementHistory) -> float:
    return safe_div(DAYS_PER_YEAR, safe_div(h.inc.cost_of_goods_sold, h.bs.inventory))


def _receivable_days(h: StatementHistory) -> float:
    return safe_div(DAYS_PER_YEAR, safe_div(h.inc.revenue, h.bs.accounts_receivable))


def _payable_days(h: StatementHistory) -> float:
    return safe_div(DAYS_PER_YEAR, safe_div(h.inc.cost_of_goods_sold, h.bs.accounts_payable))


def cash_conversion_cycle(h: StatementHistory) -> float:
    return _inventory_days(h) + _receivable_days(h) - _payable_days(h)


ACTIVITY: List[AnalysisDefinition] = [
    _classical(
        "inventory_turnover", "activity", lambda h: safe_div(h.inc.cost_of_goods_sold, h.bs.inventory), 6.0, unit="times"
    ),
    _classical("days_in_inventory", "activity", _inventory_days, 60.0, lower=True, unit="days"),
    _classical(
        "receivables_turnover", "activity", lambda h: safe_div(h.inc.revenue, h.bs.accounts_receivable), 8.0, unit="times"
    ),
    _classical("days_in_receivables", "activity", _receivable_days, 45.0, lower=True, unit="days"),
    _classical(
        "payables_turnover",
        "activity",
        lambda h: safe_div(h.inc.cost_of_goods_sold, h.bs.accounts_payable),
        6.0,
        lower=True,
        unit="times",
    ),
    _classical("days_in_payables", "activity", _payable_days, 60.0, unit="days"),
    _classical(
        "cash_conversion_cycle", "activity", cash_conversion_cycle, 45.0, lower=True, unit="days", negative_favourable=True
    ),
    _classical(
        "operating_cycle",
        "activity",
        lambda h: _inventory_days(h) + _receivable_days(h),
        105.0,
        lower=True,
        unit="days",
    ),
    _classical(
        "fixed_assets_turnover",
        "activity",
        lambda h: safe_div(h.inc.revenue, h.bs.property_plant_equipment),
        2.5,
        unit="times",
    ),
    _classical(
        "total_assets_turnover", "activity", lambda h: safe_div(h.inc.revenue, h.bs.total_assets), 1.2, unit="times"
    ),
    _classical(
        "working_capital_turnover", "activity", lambda h: safe_div(h.inc.revenue, h.bs.working_capital), 5.0, unit="times"
    ),
    _classical(
        "net_assets_turnover", "activity", lambda h: safe_div(h.inc.revenue, h.capital_employed), 1.5, unit="times"
    ),
    _classical(
        "invested_capital_turnover",
        "activity",
        lambda h: safe_div(h.inc.revenue, h.bs.total_equity + h.bs.long_term_debt),
        1.8,
        unit="times",
    ),
    _classical("equity_turnover", "activity", lambda h: safe_div(h.inc.revenue, h.bs.total_equity), 2.0, unit="times"),
    _classical(
        "total_productivity",
        "activity",
        lambda h: safe_div(h.inc.revenue, h.inc.cost_of_goods_sold + h.inc.total_operating_expenses),
        1.3,
    ),
]


# ----------------------------
# Profitability
# ----------------------------

def roe(h: StatementHistory) -> float:
    return percent(h.inc.net_income, h.bs.total_equity)


def eps_growth(h: StatementHistory) -> float:
    return growth(_eps(h.inc), _eps(h.previous.income_statement))


def sustainable_growth_rate(h: StatementHistory) -> float:
    inc = h.inc
    payout = safe_div(inc.dividends_per_share * inc.shares_outstanding, inc.net_income)
    return roe(h) * (1.0 - payout)


def profitability_index(h: StatementHistory) -> float:
    cf = h.cf
    return safe_div(cf.net_cash_from_operations + cf.net_cash_from_investing, abs(cf.net_cash_from_investing))


PROFITABILITY: List[AnalysisDefinition] = [
    _classical(
        "gross_profit_margin", "profitability", lambda h: percent(h.inc.gross_profit, h.inc.revenue), 25.0, unit="percent"
    ),
    _classical(
        "operating_margin", "profitability", lambda h: percent(h.inc.operating_income, h.inc.revenue), 12.0, unit="percent"
    ),
    _classical(
        "net_profit_margin", "profitability", lambda h: percent(h.inc.net_income, h.inc.revenue), 8.0, unit="percent"
    ),
    _classical(
        "ebitda_margin", "profitability", lambda h: percent(h.inc.operating_ebitda, h.inc.revenue), 15.0, unit="percent"
    ),
    _classical("roa", "profitability", lambda h: percent(h.inc.net_income, h.bs.total_assets), 10.0, unit="percent"),
    _classical("roe", "profitability", roe, 15.0, unit="percent"),
    _classical(
        "roic",
        "profitability",
        lambda h: percent(h.inc.operating_income * (1.0 - h.assumptions.tax_rate), h.bs.total_equity + h.bs.long_term_debt),
        12.0,
        unit="percent",
    ),
    _classical(
        "roce", "profitability", lambda h: percent(h.inc.operating_income, h.capital_employed), 18.0, unit="percent"
    ),
    _classical("ros", "profitability", lambda h: percent(h.inc.operating_income, h.inc.revenue), 12.0, unit="percent"),
    _classical(
        "operating_cash_flow_margin",
        "profitability",
        lambda h: percent(h.operating_cash_flow, h.inc.revenue),
        10.0,
        unit="percent",
    ),
    _classical("eps", "profitability", lambda h: _eps(h.inc), 5.0, unit="per_share"),
    _classical("eps_growth", "profitability", eps_growth, 10.0, unit="percent", min_history=2),
    _classical(
        "book_value_per_share",
        "profitability",
        lambda h: safe_div(h.bs.total_equity, h.inc.shares_outstanding),
        25.0,
        unit="per_share",
    ),
    _classical(
        "break_even_point",
        "profitability",
        _break_even_sales,
        60.0,
        lower=True,
        unit="currency",
        scale=_revenue_scale,
    ),
    _classical(
        "margin_of_safety",
        "profitability",
        lambda h: percent(h.inc.revenue - _break_even_sales(h), h.inc.revenue),
        30.0,
        unit="percent",
    ),
    _classical(
        "contribution_margin",
        "profitability",
        lambda h: percent(_contribution_margin(h), h.inc.revenue),
        40.0,
        unit="percent",
    ),
    _classical("rona", "profitability", lambda h: percent(h.inc.net_income, h.capital_employed), 12.0, unit="percent"),
    _classical("sustainable_growth_rate", "profitability", sustainable_growth_rate, 12.0, unit="percent"),
    _classical("profitability_index", "profitability", profitability_index, 1.2),
    _classical(
        "payback_period",
        "profitability",
        lambda h: safe_div(abs(h.cf.net_cash_from_investing), h.operating_cash_flow),
        3.0,
        lower=True,
        unit="years",
    ),
]


# ----------------------------
# Leverage
# ----------------------------

def degree_operating_leverage(h: StatementHistory) -> float:
    return safe_div(_contribution_margin(h), h.inc.operating_income)


def degree_financial_leverage(h: StatementHistory) -> float:
    return safe_div(h.inc.operating_ebit, h.inc.earnings_before_tax)


LEVERAGE: List[AnalysisDefinition] = [
    _classical(
        "debt_to_assets", "leverage", lambda h: percent(h.bs.total_liabilities, h.bs.total_assets), 40.0, lower=True, unit="percent"
    ),
    _classical("debt_to_equity", "leverage", lambda h: safe_div(h.bs.total_liabilities, h.bs.total_equity), 0.6, lower=True),
    _classical(
        "debt_to_ebitda", "leverage", lambda h: safe_div(h.bs.total_liabilities, h.inc.operating_ebitda), 3.0, lower=True, unit="times"
    ),
    _classical(
        "times_interest_earned", "leverage", lambda h: safe_div(h.inc.operating_ebit, h.inc.interest_expense), 5.0, unit="times"
    ),
    _classical(
        "debt_service_coverage",
        "leverage",
        lambda h: safe_div(h.operating_cash_flow, h.inc.interest_expense + h.cf.debt_repayment),
        1.25,
        unit="times",
    ),
    _classical("degree_operating_leverage", "leverage", degree_operating_leverage, 2.0, lower=True, unit="times"),
    _classical("degree_financial_leverage", "leverage", degree_financial_leverage, 1.5, lower=True, unit="times"),
    _classical(
        "degree_combined_leverage",
        "leverage",
        lambda h: degree_operating_leverage(h) * degree_financial_leverage(h),
        3.0,
        lower=True,
        unit="times",
    ),
    _classical(
        "equity_to_assets", "leverage", lambda h: percent(h.bs.total_equity, h.bs.total_assets), 60.0, unit="percent"
    ),
    _classical(
        "long_term_debt_ratio",
        "leverage",
        lambda h: percent(h.bs.long_term_debt, h.bs.total_assets),
        25.0,
        lower=True,
        unit="percent",
    ),
    _classical(
        "short_term_debt_ratio",
        "leverage",
        lambda h: percent(h.bs.short_term_debt, h.bs.total_assets),
        15.0,
        lower=True,
        unit="percent",
    ),
    _classical(
        "equity_multiplier", "leverage", lambda h: safe_div(h.bs.total_assets, h.bs.total_equity), 1.67, lower=True, unit="times"
    ),
    _classical(
        "self_financing_ratio",
        "leverage",
        lambda h: percent(h.bs.retained_earnings, h.bs.total_equity),
        50.0,
        unit="percent",
    ),
    _classical(
        "financial_independence",
        "leverage",
        lambda h: percent(h.bs.total_equity, h.bs.total_liabilities),
        150.0,
        unit="percent",
    ),
    _classical(
        "net_debt_ratio",
        "leverage",
        lambda h: percent(h.bs.total_liabilities - h.bs.cash - h.bs.short_term_investments, h.bs.total_assets),
        30.0,
        lower=True,
        negative_favourable=True,
        unit="percent",
    ),
]


# ----------------------------
# Market (assumed share price)
# ----------------------------

def pe_ratio(h: StatementHistory) -> float:
    eps = _eps(h.inc)
    if not finite(eps) or eps <= 0:
        return NAN
    return h.assumptions.share_price / eps


def peg_ratio(h: StatementHistory) -> float:
    rate = eps_growth(h)
    if not finite(rate) or rate <= 0:
        return NAN
    return safe_div(pe_ratio(h), rate)


def payout_ratio(h: StatementHistory) -> float:
    return percent(h.inc.dividends_per_share, _eps(h.inc))


def _price(h: StatementHistory) -> float:
    return h.assumptions.share_price


MARKET: List[AnalysisDefinition] = [
    _classical("pe_ratio", "market", pe_ratio, 15.0, lower=True, unit="times"),
    _classical(
        "pb_ratio",
        "market",
        lambda h: safe_div(_price(h), safe_div(h.bs.total_equity, h.inc.shares_outstanding)),
        2.0,
        lower=True,
        unit="times",
    ),
    _classical(
        "ps_ratio",
        "market",
        lambda h: safe_div(_price(h), safe_div(h.inc.revenue, h.inc.shares_outstanding)),
        2.5,
        lower=True,
        unit="times",
    ),
    _classical(
        "ev_ebitda", "market", lambda h: safe_div(h.enterprise_value, h.inc.operating_ebitda), 10.0, lower=True, unit="times"
    ),
    _classical("ev_sales", "market", lambda h: safe_div(h.enterprise_value, h.inc.revenue), 3.0, lower=True, unit="times"),
    _classical(
        "dividend_yield", "market", lambda h: percent(h.inc.dividends_per_share, _price(h)), 3.0, unit="percent"
    ),
    _classical("payout_ratio", "market", payout_ratio, 40.0, unit="percent"),
    _classical("peg_ratio", "market", peg_ratio, 1.0, lower=True, min_history=2),
    _classical("earnings_yield", "market", lambda h: percent(_eps(h.inc), _price(h)), 6.67, unit="percent"),
    _classical("tobins_q", "market", lambda h: safe_div(h.market_cap, h.bs.total_assets), 1.0, lower=True),
    _classical(
        "price_to_cash_flow",
        "market",
        lambda h: safe_div(_price(h), safe_div(h.operating_cash_flow, h.inc.shares_outstanding)),
        12.0,
        lower=True,
        unit="times",
    ),
    _classical("retention_ratio", "market", lambda h: 100.0 - payout_ratio(h), 60.0, unit="percent"),
    _classical(
        "market_to_book", "market", lambda h: safe_div(h.market_cap, h.bs.total_equity), 2.0, lower=True, unit="times"
    ),
    _classical(
        "cash_coverage_dividends",
        "market",
        lambda h: safe_div(h.operating_cash_flow, h.inc.dividends_per_share * h.inc.shares_outstanding),
        2.0,
        unit="times",
    ),
    _classical(
        "dividend_growth_rate",
        "market",
        lambda h: growth(h.inc.dividends_per_share, h.previous.income_statement.dividends_per_share),
        5.0,
        unit="percent",
        min_history=2,
    ),
]


# ----------------------------
# Cash flow and movement
# ----------------------------

def dupont_three_factor(h: StatementHistory) -> Measurement:
    inc, bs = h.inc, h.bs
    details = {
        "net_margin": safe_div(inc.net_income, inc.revenue),
        "asset_turnover": safe_div(inc.revenue, bs.total_assets),
        "equity_multiplier": safe_div(bs.total_assets, bs.total_equity),
    }
    return Measurement(details["net_margin"] * details["asset_turnover"] * details["equity_multiplier"] * 100.0, details)


def dupont_five_factor(h: StatementHistory) -> Measurement:
    inc, bs = h.inc, h.bs
    ebit = inc.operating_ebit
    details = {
        "tax_burden": safe_div(inc.net_income, inc.earnings_before_tax),
        "interest_burden": safe_div(inc.earnings_before_tax, ebit),
        "ebit_margin": safe_div(ebit, inc.revenue),
        "asset_turnover": safe_div(inc.revenue, bs.total_assets),
        "equity_multiplier": safe_div(bs.total_assets, bs.total_equity),
    }
    return Measurement(float(np.prod(list(details.values()))) * 100.0, details)


def economic_value_added(h: StatementHistory) -> float:
    return h.nopat - h.assumptions.cost_of_capital * _invested_capital_scale(h)


def free_cash_flow_firm(h: StatementHistory) -> float:
    return h.nopat + h.inc.depreciation_amortization - h.cf.capex - h.cf.working_capital_changes


def free_cash_flow_equity(h: StatementHistory) -> float:
    after_tax_interest = h.inc.interest_expense * (1.0 - h.assumptions.tax_rate)
    return free_cash_flow_firm(h) - after_tax_interest + h.cf.debt_issuance - h.cf.debt_repayment


CASH_FLOW: List[AnalysisDefinition] = [
    _classical(
        "basic_cash_flow", "cash_flow", lambda h: h.operating_cash_flow, 10.0, unit="currency", scale=_revenue_scale
    ),
    _classical(
        "working_capital_analysis", "cash_flow", lambda h: h.bs.working_capital, 10.0, unit="currency", scale=_assets_scale
    ),
    _classical(
        "free_cash_flow", "cash_flow", lambda h: h.free_cash_flow, 5.0, unit="currency", scale=_revenue_scale
    ),
    _classical(
        "earnings_quality", "cash_flow", lambda h: safe_div(h.operating_cash_flow, h.inc.net_income), 1.0
    ),
    _classical(
        "accruals_index",
        "cash_flow",
        lambda h: safe_div(h.inc.net_income - h.operating_cash_flow, h.bs.total_assets),
        0.05,
        lower=True,
        negative_favourable=True,
    ),
    _classical(
        "fixed_costs_structure",
        "cash_flow",
        lambda h: percent(_cost_structure(h.inc)[0], h.inc.revenue),
        20.0,
        lower=True,
        unit="percent",
    ),
    _classical(
        "variable_costs_structure",
        "cash_flow",
        lambda h: percent(_cost_structure(h.inc)[1], h.inc.revenue),
        50.0,
        lower=True,
        unit="percent",
    ),
    _classical("dupont_three_factor", "cash_flow", dupont_three_factor, 15.0, unit="percent"),
    _classical("dupont_five_factor", "cash_flow", dupont_five_factor, 15.0, unit="percent"),
    _classical(
        "economic_value_added",
        "cash_flow",
        economic_value_added,
        2.0,
        unit="currency",
        scale=_invested_capital_scale,
    ),
    _classical(
        "market_value_added",
        "cash_flow",
        lambda h: h.market_cap - h.bs.total_equity,
        100.0,
        unit="currency",
        scale=_equity_scale,
    ),
    _classical(
        "cash_cycle_analysis", "cash_flow", cash_conversion_cycle, 45.0, lower=True, unit="days", negative_favourable=True
    ),
    _classical(
        "break_even_analysis",
        "cash_flow",
        _break_even_sales,
        60.0,
        lower=True,
        unit="currency",
        scale=_revenue_scale,
    ),
    _classical(
        "margin_of_safety_analysis",
        "cash_flow",
        lambda h: percent(h.inc.revenue - _break_even_sales(h), h.inc.revenue),
        30.0,
        unit="percent",
    ),
    _classical(
        "operating_leverage_analysis", "cash_flow", degree_operating_leverage, 2.0, lower=True, unit="times"
    ),
    _classical(
        "contribution_margin_analysis",
        "cash_flow",
        lambda h: percent(_contribution_margin(h), h.inc.revenue),
        40.0,
        unit="percent",
    ),
    _classical(
        "free_cash_flow_firm", "cash_flow", free_cash_flow_firm, 5.0, unit="currency", scale=_revenue_scale
    ),
    _classical(
        "free_cash_flow_equity", "cash_flow", free_cash_flow_equity, 4.0, unit="currency", scale=_revenue_scale
    ),
]


CLASSICAL_DEFINITIONS: List[AnalysisDefinition] = [
    *STRUCTURAL,
    *LIQUIDITY,
    *ACTIVITY,
    *PROFITABILITY,
    *LEVERAGE,
    *MARKET,
    *CASH_FLOW,
]
