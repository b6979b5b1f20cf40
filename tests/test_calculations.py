from __future__ import annotations

import math

import pandas as pd
import pytest

from fsa_engine.domain.errors import EmptyStatementsError
from fsa_engine.domain.models.financials import BalanceSheet, FinancialStatement, IncomeStatement
from fsa_engine.domain.services.calculations import (
    StatementHistory,
    altman_z,
    cagr,
    growth,
    percent,
    piotroski_signals,
    safe_div,
)


def close(a: float, b: float, tol: float = 1e-6) -> bool:
    return abs(a - b) <= tol


def make_statement(year: int, revenue: float, net_income: float, total_assets: float) -> FinancialStatement:
    return FinancialStatement.from_dict(
        {
            "year": year,
            "balanceSheet": {"totalAssets": total_assets, "totalCurrentAssets": total_assets / 2},
            "incomeStatement": {"revenue": revenue, "netIncome": net_income, "sharesOutstanding": 10},
            "cashFlowStatement": {"netCashFromOperations": net_income * 1.2},
        }
    )


def test_safe_arithmetic():
    assert math.isnan(safe_div(1.0, 0.0))
    assert math.isnan(safe_div(1.0, float("nan")))
    assert close(percent(1.0, 4.0), 25.0)
    # Growth is measured against the magnitude of the base period.
    assert close(growth(50.0, -100.0), 150.0)
    assert close(growth(110.0, 100.0), 10.0)
    assert math.isnan(growth(1.0, 0.0))


def test_cagr_uses_year_span():
    series = pd.Series([100.0, 121.0], index=[2021, 2023])

    assert close(cagr(series), 0.1)
    assert math.isnan(cagr(pd.Series([100.0], index=[2023])))
    assert math.isnan(cagr(pd.Series([-5.0, 10.0], index=[2022, 2023])))


def test_history_orders_and_exposes_series():
    statements = [make_statement(2021, 100.0, 10.0, 200.0), make_statement(2022, 120.0, 15.0, 220.0)]
    history = StatementHistory.from_statements(statements)

    assert len(history) == 2
    assert history.years == [2021, 2022]
    assert history.previous.year == 2021
    assert list(history.series("revenue")) == [100.0, 120.0]
    assert list(history.ratio_series("net_income", "revenue").round(4)) == [0.1, 0.125]
    with pytest.raises(KeyError):
        history.series("unknown_line")


def test_history_requires_statements():
    with pytest.raises(EmptyStatementsError):
        StatementHistory.from_statements([])


def test_altman_z_with_book_equity():
    bs = BalanceSheet(
        total_assets=1000.0,
        total_current_assets=400.0,
        total_current_liabilities=200.0,
        retained_earnings=300.0,
        total_liabilities=500.0,
        total_equity=500.0,
    )
    inc = IncomeStatement(revenue=1500.0, operating_income=150.0)

    expected = 1.2 * 0.2 + 1.4 * 0.3 + 3.3 * 0.15 + 0.6 * 1.0 + 1.0 * 1.5
    assert close(altman_z(bs, inc), expected)
    assert math.isnan(altman_z(BalanceSheet(), inc))


def test_piotroski_signals_for_improving_company():
    previous = make_statement(2022, 100.0, 5.0, 200.0)
    current = make_statement(2023, 130.0, 12.0, 210.0)

    signals = piotroski_signals(current, previous)

    assert len(signals) == 9
    assert signals["positive_roa"]
    assert signals["improving_roa"]
    assert signals["ocf_exceeds_net_income"]
    assert signals["improving_turnover"]
    assert signals["no_dilution"]
