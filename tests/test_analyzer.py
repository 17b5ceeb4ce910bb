"""
Tests for the analysis pipeline end to end against mock services.
"""

import asyncio

import httpx
import pytest

from api_inspector.core.analyzer import ApiAnalyzer
from api_inspector.core.catalog import DESIGN_RULES, SOURCE_RULE_MAP
from api_inspector.core.errors import AnalysisError, InvalidServiceUrlError
from api_inspector.core.rule_engine import EvaluatorUnit, RuleEngine
from api_inspector.core.scorer import calculate_score


SERVICE_URL = "http://api.test"


def _analyze(analyzer, url=SERVICE_URL, **kwargs):
    return asyncio.run(analyzer.analyze(url, **kwargs))


def test_full_analysis(analyzer):
    result = _analyze(analyzer)
    rule_ids = {v.rule_id for v in result.violations}

    assert result.service_name == "test"
    assert result.service_url == SERVICE_URL
    assert "security-001" in rule_ids
    assert "security-002" in rule_ids
    assert "http-001" in rule_ids
    assert result.overall_score == calculate_score(result.violations)
    assert result.summary.total_rules == len(DESIGN_RULES)
    assert result.summary.passed_rules == len(DESIGN_RULES) - len(result.violations)


def test_violation_ids_follow_append_order(analyzer):
    result = _analyze(analyzer)
    for ordinal, violation in enumerate(result.violations):
        assert violation.id == f"{violation.rule_id}-{ordinal}"


def test_violations_carry_catalog_metadata(analyzer):
    result = _analyze(analyzer)
    https = next(v for v in result.violations if v.rule_id == "security-001")
    assert https.rule_name == "Use HTTPS for All Endpoints"
    assert https.category == "Security"
    assert https.severity.value == "error"
    assert https.recommendation
    assert https.source_name


def test_repeated_runs_are_identical(analyzer):
    first = _analyze(analyzer).model_dump(exclude={"analyzed_at"})
    second = _analyze(analyzer).model_dump(exclude={"analyzed_at"})
    assert first == second


def test_service_url_echoed_as_given(analyzer):
    result = _analyze(analyzer, url="http://api.test/")
    assert result.service_url == "http://api.test/"
    assert result.service_name == "test"
    assert result.violations == _analyze(analyzer).violations


def test_concurrent_analyses_share_one_analyzer(analyzer):
    async def both():
        return await asyncio.gather(
            analyzer.analyze("http://alpha.test"),
            analyzer.analyze("http://beta.test"),
        )

    alpha, beta = asyncio.run(both())
    sequential = _analyze(analyzer, url="http://alpha.test")

    assert alpha.service_name == "alpha"
    assert beta.service_name == "beta"
    varying = {"analyzed_at", "service_name", "service_url"}
    assert alpha.model_dump(exclude=varying) == beta.model_dump(exclude=varying)
    assert alpha.model_dump(exclude=varying) == sequential.model_dump(exclude=varying)


def test_source_filter_limits_violations(analyzer):
    result = _analyze(analyzer, source_filter="google")
    allowed = SOURCE_RULE_MAP["google"]
    assert result.violations
    assert all(v.rule_id in allowed for v in result.violations)
    assert result.summary.total_rules == len(allowed)


def test_unknown_source_filter_reports_nothing(analyzer):
    result = _analyze(analyzer, source_filter="nope")
    assert result.violations == []
    assert result.overall_score == 100
    assert result.summary.total_rules == 0


def test_unreachable_service_still_reports(unreachable_transport):
    analyzer = ApiAnalyzer(transport=unreachable_transport, verify_host=False)
    result = _analyze(analyzer)

    assert [v.rule_id for v in result.violations] == ["version-001", "security-001"]
    assert result.overall_score == 80
    assert [r.category for r in result.recommendations] == ["Versioning", "Security"]


def test_invalid_url_rejected_before_network():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200)

    analyzer = ApiAnalyzer(transport=httpx.MockTransport(handler), verify_host=False)
    with pytest.raises(InvalidServiceUrlError, match="Invalid URL format"):
        _analyze(analyzer, url="api.example.com")
    with pytest.raises(InvalidServiceUrlError, match="Missing required parameter"):
        _analyze(analyzer, url=None)
    assert calls == []


def test_evaluator_failure_fails_the_run(sample_transport):
    def explode(ctx):
        raise RuntimeError("evaluator crashed")

    engine = RuleEngine([EvaluatorUnit("explode", ("rest-001",), explode)])
    analyzer = ApiAnalyzer(transport=sample_transport, verify_host=False, engine=engine)

    with pytest.raises(AnalysisError, match="^Failed to analyze API: evaluator crashed$"):
        _analyze(analyzer)


def test_deadline_fails_the_run():
    async def slow(request):
        await asyncio.sleep(5)
        return httpx.Response(200)

    analyzer = ApiAnalyzer(transport=httpx.MockTransport(slow), verify_host=False)
    with pytest.raises(AnalysisError, match="deadline"):
        _analyze(analyzer, timeout=0.05)
