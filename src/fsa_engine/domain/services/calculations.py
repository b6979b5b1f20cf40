"""Domain service layer providing the numeric building blocks of every analysis.

This module implements:
- ``StatementHistory``: an immutable, ordered view over the statements of one
  run with a pandas frame of every line item, indexed by period
- Safe arithmetic (``safe_div``, ``percent``, ``growth``, ``cagr``)
- Scoring models shared by several analyses (Altman Z and Z'', Piotroski
  signals, Beneish M, Benford conformity, FCFF DCF, Merton distance to default)

The implementations are conservative and robust to missing data. Where a value
cannot be computed due to missing or zero denominators, the result is ``float('nan')``.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from scipy import stats

from fsa_engine.domain.errors import EmptyStatementsError
from fsa_engine.domain.models.financials import (
    BalanceSheet,
    CashFlowStatement,
    FinancialStatement,
    IncomeStatement,
    MarketAssumptions,
)

NAN = float("nan")

# Cash-flow columns are prefixed so they never collide with the income statement.
_SECTION_PREFIXES = (
    ("balance_sheet", BalanceSheet, ""),
    ("income_statement", IncomeStatement, ""),
    ("cash_flow_statement", CashFlowStatement, "cf_"),
)


@dataclass(frozen=True)
class StatementHistory:
    """Ordered (oldest first) statements of one company plus market assumptions."""

    statements: Tuple[FinancialStatement, ...]
    assumptions: MarketAssumptions = field(default_factory=MarketAssumptions)
    frame: pd.DataFrame = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.statements:
            raise EmptyStatementsError()
        object.__setattr__(self, "statements", tuple(self.statements))
        object.__setattr__(self, "frame", _frame_from_statements(self.statements))

    @classmethod
    def from_statements(
        cls,
        statements: Iterable[FinancialStatement],
        assumptions: Optional[MarketAssumptions] = None,
    ) -> "StatementHistory":
        return cls(tuple(statements), assumptions or MarketAssumptions())

    def __len__(self) -> int:
        return len(self.statements)

    @property
    def current(self) -> FinancialStatement:
        return self.statements[-1]

    @property
    def previous(self) -> Optional[FinancialStatement]:
        return self.statements[-2] if len(self.statements) > 1 else None

    @property
    def first(self) -> FinancialStatement:
        return self.statements[0]

    @property
    def years(self) -> List[int]:
        return [s.year for s in self.statements]

    # Shortcuts to the latest period
    @property
    def bs(self) -> BalanceSheet:
        return self.current.balance_sheet

    @property
    def inc(self) -> IncomeStatement:
        return self.current.income_statement

    @property
    def cf(self) -> CashFlowStatement:
        return self.current.cash_flow_statement

    def series(self, column: str) -> pd.Series:
        """Line item across periods, indexed by year."""
        if column not in self.frame:
            raise KeyError(f"Unknown line item '{column}'.")
        return self.frame[column]

    def ratio_series(self, numerator: str, denominator: str) -> pd.Series:
        """Period-by-period ratio with zero denominators mapped to NaN."""
        den = self.series(denominator).replace(0.0, np.nan)
        return self.series(numerator) / den

    # Market-derived figures
    @property
    def shares(self) -> float:
        return self.inc.shares_outstanding if self.inc.shares_outstanding > 0 else NAN

    @property
    def market_cap(self) -> float:
        return self.assumptions.share_price * self.shares

    @property
    def enterprise_value(self) -> float:
        return self.market_cap + self.bs.total_debt - self.bs.cash

    @property
    def invested_capital(self) -> float:
        return self.bs.total_equity + self.bs.total_debt

    @property
    def capital_employed(self) -> float:
        return self.bs.total_assets - self.bs.total_current_liabilities

    @property
    def operating_cash_flow(self) -> float:
        return self.cf.net_cash_from_operations

    @property
    def free_cash_flow(self) -> float:
        return self.cf.net_cash_from_operations - self.cf.capex

    @property
    def nopat(self) -> float:
        return self.inc.operating_ebit * (1.0 - self.assumptions.tax_rate)


# ----------------------------
# Safe arithmetic
# ----------------------------

def safe_div(numerator: float, denominator: float) -> float:
    """Divide, returning NaN for a zero or non-finite denominator."""
    try:
        num = float(numerator)
        den = float(denominator)
    except (TypeError, ValueError):
        return NAN
    if den == 0.0 or math.isnan(den) or math.isnan(num) or math.isinf(den):
        return NAN
    return num / den


def percent(numerator: float, denominator: float) -> float:
    return safe_div(numerator, denominator) * 100.0


def average(a: float, b: float) -> float:
    return (a + b) / 2.0


def growth(current: float, previous: float) -> float:
    """Percentage change relative to the magnitude of the base period."""
    return safe_div(current - previous, abs(previous)) * 100.0


def pct_changes(series: pd.Series) -> pd.Series:
    """Period-over-period changes (%) against the absolute base, first row dropped."""
    base = series.shift(1).abs().replace(0.0, np.nan)
    return ((series - series.shift(1)) / base * 100.0).iloc[1:]


def cagr(series: pd.Series) -> float:
    """Compound annual growth over the window, as a fraction."""
    values = series.dropna()
    if len(values) < 2:
        return NAN
    start_val = float(values.iloc[0])
    end_val = float(values.iloc[-1])
    if start_val <= 0 or end_val <= 0:
        return NAN
    try:
        years = max(int(values.index[-1]) - int(values.index[0]), 1)
    except (TypeError, ValueError):
        years = max(len(values) - 1, 1)
    return (end_val / start_val) ** (1.0 / years) - 1.0


def finite(value: float) -> bool:
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False


# ----------------------------
# Valuation
# ----------------------------

def dcf_fcff(
    *,
    fcf: float,
    growth: float,
    wacc: float,
    terminal_growth: float,
    years: int,
    net_debt: float,
    shares: float,
) -> Tuple[float, float, float]:
    """Compute FCFF-based DCF returning (enterprise_value, equity_value, per_share).

    - Forecast FCF with constant growth for N years.
    - Discount at WACC, compute terminal value using Gordon Growth.
    - Enterprise value is PV of forecast + PV of terminal; subtract net debt for equity value.
    """
    if years <= 0 or wacc <= terminal_growth or not finite(fcf):
        return NAN, NAN, NAN
    cash_flows = [fcf * ((1.0 + growth) ** t) for t in range(1, years + 1)]
    discounts = [(1.0 + wacc) ** t for t in range(1, years + 1)]
    pv_flows = sum(cf / d for cf, d in zip(cash_flows, discounts))
    terminal_cf = cash_flows[-1] * (1.0 + terminal_growth)
    terminal_value = terminal_cf / (wacc - terminal_growth)
    pv_terminal = terminal_value / ((1.0 + wacc) ** years)
    enterprise_value = pv_flows + pv_terminal
    equity_value = enterprise_value - (net_debt if not np.isnan(net_debt) else 0.0)
    per_share = equity_value / shares if shares > 0 else NAN
    return float(enterprise_value), float(equity_value), float(per_share)


def capm_cost_of_equity(assumptions: MarketAssumptions) -> float:
    return assumptions.risk_free_rate + assumptions.beta * (assumptions.market_return - assumptions.risk_free_rate)


def distance_to_default(history: StatementHistory, horizon: float = 1.0) -> float:
    """Merton distance to default using the KMV default point (STD + half LTD)."""
    bs = history.bs
    equity_value = history.market_cap if finite(history.market_cap) else bs.total_equity
    asset_value = equity_value + bs.total_liabilities
    default_point = bs.total_current_liabilities + 0.5 * bs.long_term_debt
    sigma = history.assumptions.asset_volatility
    if asset_value <= 0 or default_point <= 0 or sigma <= 0:
        return NAN
    drift = history.assumptions.risk_free_rate - 0.5 * sigma ** 2
    return (math.log(asset_value / default_point) + drift * horizon) / (sigma * math.sqrt(horizon))


def normal_cdf(value: float) -> float:
    return float(stats.norm.cdf(value))


# ----------------------------
# Scoring models
# ----------------------------

def altman_z(bs: BalanceSheet, inc: IncomeStatement) -> float:
    """Altman Z (1968) with book equity over total liabilities for X4."""
    ta = bs.total_assets
    if ta <= 0:
        return NAN
    tl = bs.total_liabilities or (ta - bs.total_equity)
    a = bs.working_capital / ta
    b = bs.retained_earnings / ta
    c = inc.operating_ebit / ta
    d = bs.total_equity / (tl or 1.0)
    e = inc.revenue / ta
    return 1.2 * a + 1.4 * b + 3.3 * c + 0.6 * d + 1.0 * e


def altman_z_double(bs: BalanceSheet, inc: IncomeStatement) -> float:
    """Altman Z'' (2002) emerging-market model: safe above 2.6, distress below 1.1."""
    ta = bs.total_assets
    if ta <= 0:
        return NAN
    tl = bs.total_liabilities or (ta - bs.total_equity)
    x1 = bs.working_capital / ta
    x2 = bs.retained_earnings / ta
    x3 = inc.operating_ebit / ta
    x4 = bs.total_equity / (tl if tl > 0 else 1.0)
    return 6.56 * x1 + 3.26 * x2 + 6.72 * x3 + 1.05 * x4


def piotroski_signals(current: FinancialStatement, previous: FinancialStatement) -> Dict[str, bool]:
    """The nine Piotroski F-score signals for ``current`` against ``previous``."""
    bs, inc, cf = current.balance_sheet, current.income_statement, current.cash_flow_statement
    pbs, pinc = previous.balance_sheet, previous.income_statement
    roa = safe_div(inc.net_income, bs.total_assets)
    prev_roa = safe_div(pinc.net_income, pbs.total_assets)
    ocf = cf.net_cash_from_operations
    lev = safe_div(bs.long_term_debt, bs.total_assets)
    prev_lev = safe_div(pbs.long_term_debt, pbs.total_assets)
    cr = safe_div(bs.total_current_assets, bs.total_current_liabilities)
    prev_cr = safe_div(pbs.total_current_assets, pbs.total_current_liabilities)
    gm = safe_div(inc.gross_profit, inc.revenue)
    prev_gm = safe_div(pinc.gross_profit, pinc.revenue)
    turnover = safe_div(inc.revenue, bs.total_assets)
    prev_turnover = safe_div(pinc.revenue, pbs.total_assets)
    return {
        "positive_roa": roa > 0,
        "positive_ocf": ocf > 0,
        "improving_roa": roa > prev_roa,
        "ocf_exceeds_net_income": ocf > inc.net_income,
        "lower_leverage": lev <= prev_lev or (bs.long_term_debt == 0 and pbs.long_term_debt == 0),
        "improving_liquidity": cr > prev_cr,
        "no_dilution": inc.shares_outstanding <= pinc.shares_outstanding,
        "improving_gross_margin": gm > prev_gm,
        "improving_turnover": turnover > prev_turnover,
    }


def beneish_m(current: FinancialStatement, previous: FinancialStatement) -> float:
    """Beneish eight-variable M-score; above -1.78 flags likely manipulation."""
    bs, inc, cf = current.balance_sheet, current.income_statement, current.cash_flow_statement
    pbs, pinc = previous.balance_sheet, previous.income_statement

    def index(cur: float, prev: float) -> float:
        value = safe_div(cur, prev)
        return value if finite(value) else 1.0

    dsri = index(safe_div(bs.accounts_receivable, inc.revenue), safe_div(pbs.accounts_receivable, pinc.revenue))
    gmi = index(safe_div(pinc.gross_profit, pinc.revenue), safe_div(inc.gross_profit, inc.revenue))
    aqi = index(
        safe_div(bs.total_assets - bs.total_current_assets - bs.property_plant_equipment, bs.total_assets),
        safe_div(pbs.total_assets - pbs.total_current_assets - pbs.property_plant_equipment, pbs.total_assets),
    )
    sgi = index(inc.revenue, pinc.revenue)
    depi = index(
        safe_div(pinc.depreciation_amortization, pinc.depreciation_amortization + pbs.property_plant_equipment),
        safe_div(inc.depreciation_amortization, inc.depreciation_amortization + bs.property_plant_equipment),
    )
    sgai = index(
        safe_div(inc.selling_general_administrative, inc.revenue),
        safe_div(pinc.selling_general_administrative, pinc.revenue),
    )
    lvgi = index(safe_div(bs.total_liabilities, bs.total_assets), safe_div(pbs.total_liabilities, pbs.total_assets))
    tata = safe_div(inc.net_income - cf.net_cash_from_operations, bs.total_assets)
    if not finite(tata):
        tata = 0.0
    return (
        -4.84
        + 0.920 * dsri
        + 0.528 * gmi
        + 0.404 * aqi
        + 0.892 * sgi
        + 0.115 * depi
        - 0.172 * sgai
        + 4.679 * tata
        - 0.327 * lvgi
    )


_BENFORD = np.log10(1.0 + 1.0 / np.arange(1, 10))


def statement_values(statements: Sequence[FinancialStatement]) -> List[float]:
    """Every non-zero line item of every statement, used for digit tests."""
    values: List[float] = []
    for statement in statements:
        for section, cls, _ in _SECTION_PREFIXES:
            part = getattr(statement, section)
            for f in fields(cls):
                value = getattr(part, f.name)
                if value and finite(value):
                    values.append(float(value))
    return values


def benford_conformity(values: Iterable[float]) -> float:
    """Percentage agreement of first digits with Benford's law (100 = identical)."""
    digits = [int(f"{abs(v):e}"[0]) for v in values if finite(v) and abs(v) >= 1.0]
    if len(digits) < 10:
        return NAN
    observed = np.bincount(digits, minlength=10)[1:] / len(digits)
    distance = 0.5 * float(np.abs(observed - _BENFORD).sum())
    return (1.0 - distance) * 100.0


def ewma_volatility(returns: pd.Series, decay: float = 0.94) -> float:
    """RiskMetrics EWMA volatility of a return series."""
    clean = returns.dropna()
    if len(clean) < 2:
        return NAN
    variance = float(clean.var(ddof=1))
    for value in clean:
        variance = decay * variance + (1.0 - decay) * float(value) ** 2
    return math.sqrt(variance)


def historical_var(changes: pd.Series, level: float = 0.95) -> Tuple[float, float]:
    """(VaR, CVaR) of a change series as positive loss figures."""
    clean = changes.dropna().to_numpy(dtype=float)
    if clean.size < 2:
        return NAN, NAN
    cutoff = float(np.percentile(clean, (1.0 - level) * 100.0))
    tail = clean[clean <= cutoff]
    cvar = float(tail.mean()) if tail.size else cutoff
    return max(-cutoff, 0.0), max(-cvar, 0.0)


# ----------------------------
# Internal helpers
# ----------------------------

def _frame_from_statements(statements: Sequence[FinancialStatement]) -> pd.DataFrame:
    rows: List[Dict[str, float]] = []
    for statement in statements:
        row: Dict[str, float] = {}
        for section, cls, prefix in _SECTION_PREFIXES:
            part = getattr(statement, section)
            for f in fields(cls):
                row[f"{prefix}{f.name}"] = float(getattr(part, f.name))
        row["year"] = statement.year
        rows.append(row)
    df = pd.DataFrame(rows)
    return df.set_index("year")
