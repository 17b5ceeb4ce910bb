"""
Tests for report assembly.
"""

from datetime import timezone

from api_inspector.core.report import assemble_report, extract_service_name
from api_inspector.core.rule_selector import select_rules
from api_inspector.models.analysis_models import Violation
from api_inspector.models.rule_models import Severity


def test_extract_service_name():
    assert extract_service_name("https://api.example.com") == "example"
    assert extract_service_name("https://www.example.com") == "example"
    assert extract_service_name("https://jsonplaceholder.typicode.com") == "jsonplaceholder"
    assert extract_service_name("not a url") == "Unknown Service"
    assert extract_service_name("http://[::1") == "Unknown Service"


def test_summary_counts():
    violations = [
        Violation(id=f"r-{i}", rule_id="r", rule_name="R", severity=severity, category="C", details="d")
        for i, severity in enumerate([Severity.ERROR, Severity.WARNING, Severity.WARNING, Severity.INFO])
    ]
    report = assemble_report("https://api.example.com", select_rules("google"), violations)

    assert report.summary.total_rules == 9
    assert report.summary.passed_rules == 5
    assert report.summary.failed_rules == 1
    assert report.summary.warning_rules == 2
    assert report.overall_score == 78
    assert report.analyzed_at.tzinfo == timezone.utc


def test_passed_rules_may_go_negative():
    violations = [
        Violation(id=f"r-{i}", rule_id="r", rule_name="R", severity=Severity.INFO, category="C", details="d")
        for i in range(3)
    ]
    report = assemble_report("https://api.example.com", select_rules("nope"), violations)
    assert report.summary.passed_rules == -3


def test_report_serializes_camel_case():
    report = assemble_report("https://api.example.com", select_rules("all"), [])
    data = report.model_dump(mode="json", by_alias=True)
    assert set(data) == {
        "serviceName", "serviceUrl", "analyzedAt", "overallScore",
        "violations", "recommendations", "summary",
    }
    assert set(data["summary"]) == {"totalRules", "passedRules", "failedRules", "warningRules"}
