"""
Analysis Request/Response Models — API contract schemas.

These are the public-facing Pydantic models used by the FastAPI endpoints.
Field names serialize in camelCase to match the report format consumed by
the front end and exporters.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from api_inspector.models.probe_models import AuthConfig
from api_inspector.models.rule_models import Severity


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalyzeRequest(ApiModel):
    """Request body for /analyze."""

    # Optional here so a missing value gets the 400 contract instead of a 422
    service_url: str | None = Field(default=None, description="Base URL of the API to inspect")
    source_filter: str = Field(default="all", description="Rule source key, or 'all'")
    auth: AuthConfig | None = None


class OpenApiRequest(ApiModel):
    """Request body for /openapi."""

    service_url: str | None = None
    auth: AuthConfig | None = None


class Violation(ApiModel):
    """One reported deviation from a design rule. Never mutated once appended."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = Field(..., description="Rule id plus append ordinal, e.g. 'rest-001-0'")
    rule_id: str
    rule_name: str
    severity: Severity
    category: str
    description: str = ""
    endpoint: str = ""
    method: str = ""
    details: str
    recommendation: str = ""
    impact: str = ""
    examples: list[str] = Field(default_factory=list)
    source_name: str = ""
    source_url: str = ""


class Recommendation(ApiModel):
    """Prioritized, per-category summary derived from violations."""

    title: str
    description: str
    priority: Literal["high", "medium", "low"]
    category: str
    action_items: list[str] = Field(default_factory=list, max_length=3)


class AnalysisSummary(ApiModel):
    total_rules: int = 0
    # totalRules minus violation count; not a verified pass count and may go negative
    passed_rules: int = 0
    failed_rules: int = 0
    warning_rules: int = 0


class AnalysisResult(ApiModel):
    """Full analysis report for one service."""

    service_name: str
    service_url: str
    analyzed_at: datetime
    overall_score: int = Field(default=100, ge=0, le=100)
    violations: list[Violation] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)
    summary: AnalysisSummary = Field(default_factory=AnalysisSummary)


class EvaluationResult(ApiModel):
    """Output of one rule-engine pass."""

    violations: list[Violation] = Field(default_factory=list)
    evaluators_executed: list[str] = Field(default_factory=list)
    duration_ms: float = 0.0
