"""Domain models describing the financial data consumed by the analysis engine."""
from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar

SUPPORTED_LANGUAGES = ("en", "ar")

SECTORS = (
    "banking",
    "insurance",
    "real-estate",
    "telecommunications",
    "energy",
    "healthcare",
    "manufacturing",
    "retail",
    "transportation",
    "agriculture",
    "construction",
    "education",
    "hospitality",
    "media",
    "mining",
)

ENTITY_TYPES = (
    "public-company",
    "private-company",
    "llc",
    "partnership",
    "sole-proprietorship",
    "branch",
    "holding-company",
    "investment-fund",
    "reit",
    "cooperative",
    "government-entity",
    "non-profit",
)

BENCHMARK_TYPES = (
    "industry",
    "competitors",
    "size-peers",
    "regional",
    "global",
    "historical",
    "best-in-class",
    "market-leaders",
)

# Upstream payloads use camelCase; only names that do not follow the plain
# snake->camel rule need an explicit alias.
_ALIASES: Dict[str, Tuple[str, ...]] = {
    "ebit": ("earningsBeforeInterestTax",),
    "ebitda": ("earningsBeforeInterestTaxDepreciationAmortization",),
    "language": ("analysisLanguage",),
}

T = TypeVar("T")


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _lookup(data: Mapping[str, Any], name: str) -> Any:
    for key in (name, _camel(name), *_ALIASES.get(name, ())):
        if key in data:
            return data[key]
    return None


def _number(value: Any, field_name: str) -> float:
    if value is None or value == "":
        return 0.0
    if isinstance(value, bool):
        raise ValueError(f"Field '{field_name}' must be numeric, got a boolean.")
    try:
        parsed = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Field '{field_name}' must be numeric, got {value!r}.") from exc
    if math.isnan(parsed):
        return 0.0
    return parsed


def _numeric_from_dict(cls: Type[T], data: Optional[Mapping[str, Any]]) -> T:
    data = data or {}
    values = {f.name: _number(_lookup(data, f.name), f.name) for f in fields(cls)}
    return cls(**values)  # type: ignore[arg-type]


@dataclass(frozen=True)
class BalanceSheet:
    """Statement of financial position for one period."""

    cash: float = 0.0
    accounts_receivable: float = 0.0
    inventory: float = 0.0
    short_term_investments: float = 0.0
    prepaid_expenses: float = 0.0
    other_current_assets: float = 0.0
    total_current_assets: float = 0.0
    property_plant_equipment: float = 0.0
    intangible_assets: float = 0.0
    long_term_investments: float = 0.0
    goodwill: float = 0.0
    other_non_current_assets: float = 0.0
    total_non_current_assets: float = 0.0
    total_assets: float = 0.0
    accounts_payable: float = 0.0
    short_term_debt: float = 0.0
    accrued_liabilities: float = 0.0
    taxes_payable: float = 0.0
    other_current_liabilities: float = 0.0
    total_current_liabilities: float = 0.0
    long_term_debt: float = 0.0
    deferred_tax_liabilities: float = 0.0
    other_non_current_liabilities: float = 0.0
    total_non_current_liabilities: float = 0.0
    total_liabilities: float = 0.0
    share_capital: float = 0.0
    retained_earnings: float = 0.0
    additional_paid_in_capital: float = 0.0
    accumulated_other_comprehensive_income: float = 0.0
    treasury_stock: float = 0.0
    total_equity: float = 0.0

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "BalanceSheet":
        return _numeric_from_dict(cls, data)

    @property
    def working_capital(self) -> float:
        return self.total_current_assets - self.total_current_liabilities

    @property
    def total_debt(self) -> float:
        return self.short_term_debt + self.long_term_debt


@dataclass(frozen=True)
class IncomeStatement:
    """Income statement for one period, revenue through per-share figures."""

    revenue: float = 0.0
    cost_of_goods_sold: float = 0.0
    gross_profit: float = 0.0
    selling_general_administrative: float = 0.0
    research_development: float = 0.0
    depreciation_amortization: float = 0.0
    other_operating_expenses: float = 0.0
    total_operating_expenses: float = 0.0
    operating_income: float = 0.0
    interest_income: float = 0.0
    interest_expense: float = 0.0
    other_income: float = 0.0
    other_expenses: float = 0.0
    net_non_operating_income: float = 0.0
    ebit: float = 0.0
    ebitda: float = 0.0
    earnings_before_tax: float = 0.0
    income_tax_expense: float = 0.0
    net_income: float = 0.0
    earnings_per_share: float = 0.0
    diluted_earnings_per_share: float = 0.0
    shares_outstanding: float = 0.0
    dividends_per_share: float = 0.0

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "IncomeStatement":
        return _numeric_from_dict(cls, data)

    @property
    def operating_ebit(self) -> float:
        """EBIT as reported, falling back to operating income when absent."""
        return self.ebit or self.operating_income

    @property
    def operating_ebitda(self) -> float:
        return self.ebitda or (self.operating_ebit + self.depreciation_amortization)


@dataclass(frozen=True)
class CashFlowStatement:
    """Cash-flow statement for one period."""

    net_income: float = 0.0
    depreciation_amortization: float = 0.0
    working_capital_changes: float = 0.0
    accounts_receivable_change: float = 0.0
    inventory_change: float = 0.0
    accounts_payable_change: float = 0.0
    other_operating_activities: float = 0.0
    net_cash_from_operations: float = 0.0
    capital_expenditures: float = 0.0
    acquisitions: float = 0.0
    investment_purchases: float = 0.0
    investment_sales: float = 0.0
    other_investing_activities: float = 0.0
    net_cash_from_investing: float = 0.0
    debt_issuance: float = 0.0
    debt_repayment: float = 0.0
    equity_issuance: float = 0.0
    dividends_paid: float = 0.0
    share_repurchases: float = 0.0
    other_financing_activities: float = 0.0
    net_cash_from_financing: float = 0.0
    net_cash_flow: float = 0.0
    cash_beginning_period: float = 0.0
    cash_end_period: float = 0.0
    free_cash_flow: float = 0.0

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "CashFlowStatement":
        return _numeric_from_dict(cls, data)

    @property
    def capex(self) -> float:
        """Capital expenditure as a positive outflow regardless of sign convention."""
        return abs(self.capital_expenditures)


@dataclass(frozen=True)
class FinancialStatement:
    """One reporting period: the three statements plus identifiers."""

    balance_sheet: BalanceSheet
    income_statement: IncomeStatement
    cash_flow_statement: CashFlowStatement
    year: int
    company_name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FinancialStatement":
        year = _lookup(data, "year")
        if year is None:
            raise ValueError("Financial statement is missing its 'year'.")
        try:
            parsed_year = int(year)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Financial statement year must be an integer, got {year!r}.") from exc
        return cls(
            balance_sheet=BalanceSheet.from_dict(_lookup(data, "balance_sheet")),
            income_statement=IncomeStatement.from_dict(_lookup(data, "income_statement")),
            cash_flow_statement=CashFlowStatement.from_dict(_lookup(data, "cash_flow_statement")),
            year=parsed_year,
            company_name=str(_lookup(data, "company_name") or ""),
        )


@dataclass(frozen=True)
class CompanyInfo:
    """Company metadata supplied once per engine run."""

    name: str
    sector: str = ""
    industry: str = ""
    legal_entity: str = ""
    years_analyzed: int = 1
    benchmark_type: str = "industry"
    language: str = "en"

    def __post_init__(self) -> None:
        if self.language not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"Unsupported analysis language {self.language!r}; expected one of {SUPPORTED_LANGUAGES}."
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CompanyInfo":
        name = _lookup(data, "name")
        if not name:
            raise ValueError("Company info requires a 'name'.")
        years = _lookup(data, "years_analyzed")
        return cls(
            name=str(name),
            sector=str(_lookup(data, "sector") or ""),
            industry=str(_lookup(data, "industry") or ""),
            legal_entity=str(_lookup(data, "legal_entity") or ""),
            years_analyzed=int(years) if years not in (None, "") else 1,
            benchmark_type=str(_lookup(data, "benchmark_type") or "industry"),
            language=str(_lookup(data, "language") or "en").lower(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "sector": self.sector,
            "industry": self.industry,
            "legalEntity": self.legal_entity,
            "yearsAnalyzed": self.years_analyzed,
            "benchmarkType": self.benchmark_type,
            "analysisLanguage": self.language,
        }


@dataclass(frozen=True)
class MarketAssumptions:
    """Market inputs that the statements themselves do not carry."""

    share_price: float = 50.0
    risk_free_rate: float = 0.03
    market_return: float = 0.10
    beta: float = 1.2
    tax_rate: float = 0.25
    cost_of_capital: float = 0.10
    terminal_growth: float = 0.03
    required_return: float = 0.12
    dividend_growth: float = 0.05
    earnings_multiple: float = 18.5
    equity_volatility: float = 0.085
    asset_volatility: float = 0.25
    simulation_seed: int = 42
    simulation_paths: int = 2000
    extras: Dict[str, float] = field(default_factory=dict, compare=False, hash=False)
