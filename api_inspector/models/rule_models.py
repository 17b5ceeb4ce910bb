"""
Rule Catalog Data Models — Design rules, rule sources, and severities.

Catalog entries are frozen: they are built once at import time and shared
read-only by every analysis run.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


# Points deducted from the 100-point quality score per violation
SEVERITY_PENALTIES: dict[Severity, int] = {
    Severity.ERROR: 10,
    Severity.WARNING: 5,
    Severity.INFO: 2,
}


class CatalogModel(BaseModel):
    """Frozen base for catalog data, serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RuleExamples(CatalogModel):
    good: tuple[str, ...] = ()
    bad: tuple[str, ...] = ()


class DesignRule(CatalogModel):
    """A single API design rule."""

    id: str = Field(..., description="Stable rule identifier, e.g. 'rest-001'")
    name: str = Field(..., description="Short human-readable rule title")
    category: str
    severity: Severity
    description: str
    rationale: str
    impact: str = ""
    source_name: str = Field(default="", description="Standards body or guide the rule comes from")
    source_url: str = ""
    examples: RuleExamples = Field(default_factory=RuleExamples)


class RuleSource(CatalogModel):
    """A named, curated subset of the catalog. Empty rule_ids means all rules."""

    id: str
    name: str
    organization: str
    description: str = ""
    url: str = ""
    rule_ids: frozenset[str] = frozenset()
