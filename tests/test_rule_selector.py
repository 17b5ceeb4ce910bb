"""
Tests for the rule catalog and source filtering.
"""

import pytest

from api_inspector.core.catalog import DESIGN_RULES, RULE_SOURCES, SOURCE_RULE_MAP
from api_inspector.core.rule_selector import select_rules


def test_catalog_ids_unique():
    ids = [rule.id for rule in DESIGN_RULES]
    assert len(ids) == len(set(ids))


def test_every_source_rule_exists_in_catalog():
    catalog_ids = {rule.id for rule in DESIGN_RULES}
    for source in RULE_SOURCES:
        assert source.rule_ids <= catalog_ids, source.id


def test_all_returns_whole_catalog():
    rules = select_rules("all")
    assert len(rules) == len(DESIGN_RULES)
    assert rules.ids == [rule.id for rule in DESIGN_RULES]


def test_google_filter_keeps_catalog_order():
    rules = select_rules("google")
    expected = [rule.id for rule in DESIGN_RULES if rule.id in SOURCE_RULE_MAP["google"]]
    assert rules.ids == expected
    assert set(rules.ids) == {
        "rest-001", "rest-004", "error-001", "naming-001", "datatypes-001",
        "operations-001", "objects-001", "arrays-001", "performance-003",
    }


def test_unknown_source_selects_nothing():
    rules = select_rules("no-such-source")
    assert len(rules) == 0
    assert "rest-001" not in rules


def test_rule_set_lookup():
    rules = select_rules("owasp")
    assert "security-001" in rules
    assert rules.get("rest-001") is None
    assert rules.get("security-001").category == "Security"
    assert rules.any_of(("rest-001", "security-002"))
    assert not rules.any_of(("rest-001", "naming-001"))


def test_source_map_is_read_only():
    with pytest.raises(TypeError):
        SOURCE_RULE_MAP["custom"] = frozenset()
