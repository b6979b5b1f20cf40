"""JSON input loading for the CLI and workflow."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple, Union

from fsa_engine.domain.errors import EmptyStatementsError
from fsa_engine.domain.models.financials import CompanyInfo, FinancialStatement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisInput:
    company: CompanyInfo
    statements: Tuple[FinancialStatement, ...]


def parse_input(
    document: Mapping[str, Any],
    *,
    language: Optional[str] = None,
    default_language: str = "en",
) -> AnalysisInput:
    """Build domain objects from ``{"company": {...}, "statements": [...]}``.

    ``language`` overrides the document; ``default_language`` applies only when
    the document does not name one.
    """
    if not isinstance(document, Mapping):
        raise ValueError("Input document must be a JSON object.")
    company_data = document.get("company") or document.get("companyInfo")
    if not isinstance(company_data, Mapping):
        raise ValueError("Input document requires a 'company' object.")
    raw_statements = document.get("statements")
    if not isinstance(raw_statements, list):
        raise ValueError("Input document requires a 'statements' list.")
    if not raw_statements:
        raise EmptyStatementsError()

    statements: List[FinancialStatement] = [FinancialStatement.from_dict(item) for item in raw_statements]
    statements.sort(key=lambda statement: statement.year)

    if language is None and not any(key in company_data for key in ("language", "analysisLanguage")):
        language = default_language
    company = CompanyInfo.from_dict(company_data)
    if language:
        company = replace(company, language=language.lower())
    if company.years_analyzed != len(statements):
        logger.debug("Company declares %d year(s); %d statement(s) supplied", company.years_analyzed, len(statements))
        company = replace(company, years_analyzed=len(statements))
    return AnalysisInput(company=company, statements=tuple(statements))


def load_input(
    path: Union[str, Path],
    *,
    language: Optional[str] = None,
    default_language: str = "en",
) -> AnalysisInput:
    file_path = Path(path)
    with file_path.open("r", encoding="utf-8") as handle:
        document = json.load(handle)
    return parse_input(document, language=language, default_language=default_language)
