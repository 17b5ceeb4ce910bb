"""
Tests for rules that inspect JSON body samples.
"""

from api_inspector.core.json_body import (
    JsonKind,
    field_tokens,
    kind_of,
    nesting_depth,
    sample_records,
)
from api_inspector.core.rules import data_types, schemas, validation
from api_inspector.core.rules.data_types import is_currency_field, is_date_field
from api_inspector.models.probe_models import HttpMethod


def _by_rule(findings, rule_id):
    return [f for f in findings if f.rule_id == rule_id]


# ── JSON helpers ──


def test_kind_of_classifies_bool_before_number():
    assert kind_of(True) == JsonKind.BOOL
    assert kind_of(1) == JsonKind.NUMBER
    assert kind_of(1.5) == JsonKind.NUMBER
    assert kind_of(None) == JsonKind.NULL
    assert kind_of([]) == JsonKind.ARRAY


def test_nesting_depth():
    assert nesting_depth(1) == 0
    assert nesting_depth({"a": 1}) == 1
    assert nesting_depth({"a": {"b": [1]}}) == 3


def test_nesting_depth_is_bounded():
    value = []
    for _ in range(200):
        value = [value]
    assert nesting_depth(value, limit=10) == 10


def test_sample_records_unwraps_envelope():
    body = {"data": [{"id": 1}, {"id": 2}], "meta": {"total": 2}}
    assert sample_records(body) == [{"id": 1}, {"id": 2}]
    assert sample_records({"id": 7}) == [{"id": 7}]
    assert sample_records("text") == []


def test_field_tokens():
    assert field_tokens("createdAt") == ["created", "at"]
    assert field_tokens("user_id") == ["user", "id"]
    assert field_tokens("HTTPStatus") == ["http", "status"]


def test_date_field_detection():
    assert is_date_field("createdAt")
    assert is_date_field("birth_date")
    assert not is_date_field("updates")
    assert not is_date_field("candidate")
    assert not is_date_field("timezone")
    assert not is_date_field("responseTime")
    assert not is_date_field("timeoutMs")
    assert not is_date_field("time_zone")


def test_currency_field_detection():
    assert is_currency_field("totalPrice")
    assert is_currency_field("unit_price")
    assert is_currency_field("subtotal")
    assert not is_currency_field("feedback")
    assert not is_currency_field("subtotalCount")
    assert not is_currency_field("totalCount")


# ── data types ──


def test_mixed_id_types_flagged(make_endpoint, make_context):
    endpoint = make_endpoint("/users", body_sample=[{"id": 1}, {"id": "2"}])
    findings = _by_rule(data_types.check(make_context([endpoint])), "datatypes-001")
    assert len(findings) == 1
    assert "number, string" in findings[0].details


def test_non_iso_date_flagged(make_endpoint, make_context):
    endpoint = make_endpoint(
        "/users",
        body_sample=[
            {"id": 1, "createdAt": "01/02/2024"},
            {"id": 2, "createdAt": "03/04/2024"},
        ],
    )
    findings = _by_rule(data_types.check(make_context([endpoint])), "datatypes-002")
    # one finding per field, not per record
    assert len(findings) == 1
    assert findings[0].endpoint == "/users"


def test_iso_dates_and_nulls_pass(make_endpoint, make_context):
    endpoint = make_endpoint(
        "/users",
        body_sample=[{"createdAt": "2024-01-02T10:00:00Z", "deletedAt": None}],
    )
    assert _by_rule(data_types.check(make_context([endpoint])), "datatypes-002") == []


def test_float_currency_flagged(make_endpoint, make_context):
    endpoint = make_endpoint("/products", body_sample=[{"price": 19.99}, {"price": 5}])
    findings = _by_rule(data_types.check(make_context([endpoint])), "datatypes-004")
    assert len(findings) == 1


def test_durations_and_tallies_not_flagged(make_endpoint, make_context):
    endpoint = make_endpoint(
        "/stats",
        body_sample=[{"responseTime": 120, "feedback": 4.5, "totalCount": 2.5}],
    )
    findings = data_types.check(make_context([endpoint]))
    assert _by_rule(findings, "datatypes-002") == []
    assert _by_rule(findings, "datatypes-004") == []


def test_boolean_surrogates_flagged(make_endpoint, make_context):
    endpoint = make_endpoint("/users", body_sample={"isActive": "yes", "verified": True})
    findings = _by_rule(data_types.check(make_context([endpoint])), "datatypes-005")
    assert len(findings) == 1
    assert '"isActive"' in findings[0].details


# ── schemas ──


def test_free_form_enum_flagged(make_endpoint, make_context):
    endpoint = make_endpoint("/orders", body_sample=[{"status": "in progress"}])
    findings = _by_rule(schemas.check(make_context([endpoint])), "schema-003")
    assert len(findings) == 1


def test_upper_snake_enum_passes(make_endpoint, make_context):
    endpoint = make_endpoint("/orders", body_sample=[{"status": "IN_PROGRESS", "type": "B2B"}])
    assert _by_rule(schemas.check(make_context([endpoint])), "schema-003") == []


def test_partial_nulls_flagged(make_endpoint, make_context):
    endpoint = make_endpoint("/users", body_sample=[{"id": 1, "nickname": None}])
    assert len(_by_rule(schemas.check(make_context([endpoint])), "nulls-001")) == 1


def test_deep_nesting_flagged(make_endpoint, make_context):
    deep = {"a": {"b": {"c": {"d": {"e": 1}}}}}
    endpoint = make_endpoint("/reports", body_sample=deep)
    findings = _by_rule(schemas.check(make_context([endpoint])), "objects-001")
    assert len(findings) == 1
    assert "5 levels" in findings[0].details


def test_schema_advisories_need_endpoints(make_context):
    assert schemas.check(make_context([])) == []


# ── validation ──


def test_empty_post_accepted_flagged(make_endpoint, make_context):
    endpoint = make_endpoint(
        "/users",
        allowed_methods=frozenset({HttpMethod.GET, HttpMethod.POST}),
        status_by_method={HttpMethod.GET: 200, HttpMethod.POST: 201},
    )
    findings = _by_rule(validation.check(make_context([endpoint])), "validation-001")
    assert len(findings) == 1
    assert findings[0].method == "POST"


def test_large_collection_flagged(make_endpoint, make_context):
    endpoint = make_endpoint("/items", body_sample=[{"id": 1}], body_item_count=500)
    findings = _by_rule(validation.check(make_context([endpoint])), "arrays-002")
    assert len(findings) == 1
    assert "500 items" in findings[0].details


def test_long_string_flagged(make_endpoint, make_context):
    endpoint = make_endpoint("/posts", body_sample=[{"body": "x" * 10_001}])
    assert len(_by_rule(validation.check(make_context([endpoint])), "strings-001")) == 1


def test_malformed_email_and_url_flagged(make_endpoint, make_context):
    endpoint = make_endpoint(
        "/users",
        body_sample=[{"email": "not-an-email", "website": "example"}],
    )
    findings = _by_rule(validation.check(make_context([endpoint])), "strings-002")
    assert len(findings) == 2


def test_well_formed_strings_pass(make_endpoint, make_context):
    endpoint = make_endpoint(
        "/users",
        body_sample=[{"email": "ann@example.com", "website": "https://ann.example.com"}],
    )
    assert _by_rule(validation.check(make_context([endpoint])), "strings-002") == []
