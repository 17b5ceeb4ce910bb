"""
Rule Selector — Narrows the catalog to the rules in scope for one run.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

from api_inspector.core.catalog import DESIGN_RULES, RULE_SOURCES, SOURCE_RULE_MAP
from api_inspector.models.rule_models import DesignRule, RuleSource

ALL_SOURCES = "all"


class RuleSet:
    """Read-only, ordered view of the rules active for an analysis run."""

    def __init__(self, rules: Sequence[DesignRule]) -> None:
        self._rules = tuple(rules)
        self._by_id = {rule.id: rule for rule in self._rules}

    def get(self, rule_id: str) -> DesignRule | None:
        return self._by_id.get(rule_id)

    def any_of(self, rule_ids: Sequence[str]) -> bool:
        return any(rule_id in self._by_id for rule_id in rule_ids)

    @property
    def ids(self) -> list[str]:
        return [rule.id for rule in self._rules]

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._by_id

    def __iter__(self) -> Iterator[DesignRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({len(self._rules)} rules)"


def select_rules(
    source_filter: str = ALL_SOURCES,
    catalog: Sequence[DesignRule] = DESIGN_RULES,
    source_map: Mapping[str, frozenset[str]] = SOURCE_RULE_MAP,
) -> RuleSet:
    """
    Filter the catalog by rule source.

    "all" returns the whole catalog. Any other key returns the catalog entries
    listed for that source, in catalog order; an unknown key selects nothing.
    """
    if source_filter == ALL_SOURCES:
        return RuleSet(catalog)

    rule_ids = source_map.get(source_filter, frozenset())
    return RuleSet([rule for rule in catalog if rule.id in rule_ids])


def list_sources() -> tuple[RuleSource, ...]:
    return RULE_SOURCES
