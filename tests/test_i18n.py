from __future__ import annotations

import pytest

from fsa_engine.domain.registry.catalogue import build_default_registry
from fsa_engine.i18n.analysis_text import ANALYSIS_TEXT, analysis_text
from fsa_engine.i18n.messages import CATEGORY_TITLES, MESSAGES, STRATEGY_SECTIONS, MessageCatalog


def test_every_analysis_has_bilingual_text():
    registry = build_default_registry()

    assert set(registry.ids) == set(ANALYSIS_TEXT)
    for analysis_id in registry.ids:
        english = analysis_text(analysis_id, "en")
        arabic = analysis_text(analysis_id, "ar")
        assert english.name and english.summary
        assert arabic.name and arabic.summary


def test_every_category_has_titles_and_context():
    registry = build_default_registry()

    for language in ("en", "ar"):
        catalog = MessageCatalog(language)
        for category in registry.categories():
            assert category in CATEGORY_TITLES
            assert catalog.category_title(category)
            assert all(catalog.context(category))


def test_every_template_exists_in_both_languages():
    for template_id, variants in MESSAGES.items():
        assert set(variants) == {"en", "ar"}, template_id
        assert variants["en"] and variants["ar"]


def test_strategy_sections_for_each_profile():
    catalog = MessageCatalog("en")

    for profile in ("ratio", "vertical", "horizontal", "summary"):
        sections = catalog.strategy(profile)
        assert tuple(sections) == tuple(STRATEGY_SECTIONS)
        assert all(sections.values())


def test_templates_format_values():
    en = MessageCatalog("en")
    ar = MessageCatalog("ar")

    assert en.text("comparison.above", difference="12.5") == "Above industry average by 12.5%"
    assert ar.text("comparison.below", difference="3.0") == "أقل من متوسط الصناعة بـ 3.0%"
    assert en.text("unit.years", value="2.5") == "2.5 years"


def test_unsupported_language_and_unknown_template():
    with pytest.raises(ValueError):
        MessageCatalog("fr")
    with pytest.raises(ValueError):
        analysis_text("current_ratio", "fr")
    with pytest.raises(KeyError):
        MessageCatalog("en").text("no.such.template")


def test_unknown_analysis_text_falls_back_to_title():
    assert analysis_text("custom_metric", "en").name == "Custom Metric"
