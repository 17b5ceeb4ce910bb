"""
Tests for path-based naming rules.
"""

from api_inspector.core.rules import naming


def _rule_ids(findings):
    return [f.rule_id for f in findings]


def test_singular_resource_flagged(make_endpoint, make_context):
    findings = naming.check(make_context([make_endpoint("/user")]))
    plural = [f for f in findings if f.rule_id == "rest-001"]
    assert len(plural) == 1
    assert plural[0].endpoint == "/user"
    assert '"user"' in plural[0].details


def test_plural_resource_not_flagged(make_endpoint, make_context):
    findings = naming.check(make_context([make_endpoint("/users")]))
    assert "rest-001" not in _rule_ids(findings)


def test_item_id_and_version_segments_ignored(make_endpoint, make_context):
    findings = naming.check(make_context([make_endpoint("/v1/users/42")]))
    assert findings == []


def test_verb_in_path_flagged(make_endpoint, make_context):
    findings = naming.check(make_context([make_endpoint("/getUsers")]))
    verbs = [f for f in findings if f.rule_id == "rest-003"]
    assert len(verbs) == 1
    assert '"get"' in verbs[0].details


def test_verb_inside_noun_not_flagged(make_endpoint, make_context):
    findings = naming.check(make_context([make_endpoint("/targets")]))
    assert "rest-003" not in _rule_ids(findings)


def test_underscore_path_flagged(make_endpoint, make_context):
    findings = naming.check(make_context([make_endpoint("/user_profiles")]))
    assert "rest-004" in _rule_ids(findings)
    assert "rest-001" not in _rule_ids(findings)


def test_hyphenated_path_not_flagged(make_endpoint, make_context):
    findings = naming.check(make_context([make_endpoint("/user-profiles")]))
    assert findings == []


def test_deep_nesting_flagged(make_endpoint, make_context):
    path = "/users/1/posts/2/comments"
    findings = naming.check(make_context([make_endpoint(path)]))
    assert _rule_ids(findings) == ["rest-005"]


def test_root_path_skipped(make_endpoint, make_context):
    assert naming.check(make_context([make_endpoint("")])) == []


def test_out_of_scope_rules_not_checked(make_endpoint, make_context):
    # owasp selects none of the naming rules
    findings = naming.check(make_context([make_endpoint("/getUser_profile")], source="owasp"))
    assert findings == []
