from __future__ import annotations

import json

import pytest

from fsa_engine.domain.errors import EmptyStatementsError
from fsa_engine.infrastructure.loader import load_input, parse_input


def make_document(**company):
    info = {"name": "Test Co", "sector": "retail", "yearsAnalyzed": 5}
    info.update(company)
    return {
        "company": info,
        "statements": [
            {"year": 2023, "balanceSheet": {"totalAssets": 300}, "incomeStatement": {"revenue": 120}},
            {"year": 2021, "balance_sheet": {"total_assets": 200}, "income_statement": {"revenue": 100}},
            {"year": "2022", "balanceSheet": {"totalAssets": 250}, "incomeStatement": {"revenue": "110"}},
        ],
    }


def test_statements_sorted_oldest_first():
    loaded = parse_input(make_document())

    assert [s.year for s in loaded.statements] == [2021, 2022, 2023]
    assert loaded.statements[0].balance_sheet.total_assets == 200.0
    assert loaded.statements[1].income_statement.revenue == 110.0
    assert loaded.company.years_analyzed == 3
    assert loaded.company.sector == "retail"


def test_language_resolution():
    assert parse_input(make_document()).company.language == "en"
    assert parse_input(make_document(), default_language="ar").company.language == "ar"
    assert parse_input(make_document(analysisLanguage="ar"), default_language="en").company.language == "ar"
    assert parse_input(make_document(analysisLanguage="ar"), language="en").company.language == "en"

    with pytest.raises(ValueError):
        parse_input(make_document(), language="fr")


def test_company_info_key_alias():
    document = make_document()
    document["companyInfo"] = document.pop("company")

    assert parse_input(document).company.name == "Test Co"


def test_malformed_documents_rejected():
    with pytest.raises(EmptyStatementsError):
        parse_input({"company": {"name": "Test Co"}, "statements": []})
    with pytest.raises(ValueError):
        parse_input({"statements": [{"year": 2023}]})
    with pytest.raises(ValueError):
        parse_input({"company": {"name": "Test Co"}})
    with pytest.raises(ValueError):
        parse_input({"company": {"name": "Test Co"}, "statements": [{"balanceSheet": {}}]})
    with pytest.raises(ValueError):
        parse_input({"company": {"name": "Test Co"}, "statements": [{"year": 2023, "balanceSheet": {"cash": "lots"}}]})


def test_load_input_reads_utf8_json(tmp_path):
    path = tmp_path / "input.json"
    path.write_text(json.dumps(make_document(name="شركة الاختبار"), ensure_ascii=False), encoding="utf-8")

    loaded = load_input(path)
    assert loaded.company.name == "شركة الاختبار"
    assert len(loaded.statements) == 3
