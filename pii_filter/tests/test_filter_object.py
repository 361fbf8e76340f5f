"""Test suite for recursive object filtering."""

import copy

import pytest

from ..rules import Custom, FullRedact


def test_none_and_empty_values(pii_filter):
    """Falsy values come back untouched"""
    assert pii_filter.filter_object(None) is None
    assert pii_filter.filter_object({}) == {}
    assert pii_filter.filter_object([]) == []


def test_email_key_replaced_directly(pii_filter):
    result = pii_filter.filter_object({"id": "x", "email": "a@b.com"})

    assert result == {"id": "x", "email": "[EMAIL_1]"}


def test_email_key_does_not_need_an_email_value(pii_filter):
    """Key-name detection replaces the whole value, no regex involved"""
    result = pii_filter.filter_object({"user_email": "not an address"})

    assert result == {"user_email": "[EMAIL_1]"}


def test_pii_key_names_are_case_insensitive(pii_filter):
    result = pii_filter.filter_object({
        "Email": "a@b.com",
        "Phone_Number": "n/a",
        "Full_Name": "Jane Roe",
        "ORGANIZATION": "Acme",
    })

    assert result == {
        "Email": "[EMAIL_1]",
        "Phone_Number": "[PHONE_1]",
        "Full_Name": "Participant 1",
        "ORGANIZATION": "Company 1",
    }


def test_name_and_company_keys(pii_filter):
    result = pii_filter.filter_object({
        "name": "John Doe",
        "customer_name": "Jane Roe",
        "company": "Cool Startup Inc",
    })

    assert result["name"] == "Participant 1"
    assert result["customer_name"] == "Participant 2"
    assert result["company"] == "Startup Client 1"


def test_nested_objects(pii_filter):
    obj = {
        "user": {
            "email": "test@example.com",
            "profile": {"phone": "555-123-4567"},
        }
    }

    result = pii_filter.filter_object(obj)

    assert result["user"]["email"] == "[EMAIL_1]"
    assert result["user"]["profile"]["phone"] == "[PHONE_1]"


def test_arrays_of_objects(pii_filter):
    result = pii_filter.filter_object([
        {"email": "user1@test.com"},
        {"email": "user2@test.com"},
    ])

    assert result == [{"email": "[EMAIL_1]"}, {"email": "[EMAIL_2]"}]


def test_string_list_items_are_text_scrubbed(pii_filter):
    result = pii_filter.filter_object({"tags": ["urgent", "cc a@b.com"]})

    assert result == {"tags": ["urgent", "cc [EMAIL_1]"]}


def test_tuples_are_treated_as_lists(pii_filter):
    result = pii_filter.filter_object({"tags": ("a@b.com",)})

    assert result == {"tags": ["[EMAIL_1]"]}


def test_top_level_string_is_text_scrubbed(pii_filter):
    assert pii_filter.filter_object("mail a@b.com") == "mail [EMAIL_1]"


def test_safe_fields_preserved(pii_filter):
    obj = {
        "id": "12345",
        "uuid": "abc-def-ghi",
        "createdAt": "2025-12-03T00:00:00Z",
        "url": "https://example.com?email=a@b.com",
        "Status": "555-123-4567",
        "email": "test@example.com",
    }

    result = pii_filter.filter_object(obj)

    assert result["id"] == "12345"
    assert result["uuid"] == "abc-def-ghi"
    assert result["createdAt"] == "2025-12-03T00:00:00Z"
    assert result["url"] == "https://example.com?email=a@b.com"
    assert result["Status"] == "555-123-4567"
    assert result["email"] == "[EMAIL_1]"


def test_free_text_fallback(pii_filter):
    result = pii_filter.filter_object({
        "description": "Call 555-123-4567 or write to a@b.com",
    })

    assert result["description"] == "Call [PHONE_1] or write to [EMAIL_1]"


def test_non_string_scalars_pass_through(pii_filter):
    obj = {"count": 3, "score": 1.5, "archived": False, "owner": None}

    assert pii_filter.filter_object(obj) == obj


def test_custom_field_rules(pii_filter):
    obj = {
        "title": "Product Requirements",
        "customer_name": "Acme Corp",
    }
    field_rules = {
        "title": lambda value, f: value,
        "customer_name": lambda value, f: f.anonymize_company(value),
    }

    result = pii_filter.filter_object(obj, field_rules)

    assert result["title"] == "Product Requirements"
    assert "Client" in result["customer_name"]
    assert "Acme" not in result["customer_name"]


def test_field_rule_wins_over_safe_field(pii_filter):
    result = pii_filter.filter_object(
        {"id": "secret-id", "key": "AI-1"},
        {"id": FullRedact("[ID]")},
    )

    assert result == {"id": "[ID]", "key": "AI-1"}


def test_field_rules_match_exact_case(pii_filter):
    result = pii_filter.filter_object(
        {"title": "mail a@b.com"},
        {"Title": FullRedact()},
    )

    assert result == {"title": "mail [EMAIL_1]"}


def test_field_rules_apply_at_every_depth(pii_filter):
    obj = {"a": {"b": [{"secret": "x"}, {"secret": "y"}]}, "secret": "z"}

    result = pii_filter.filter_object(obj, {"secret": FullRedact()})

    assert result == {
        "a": {"b": [{"secret": "[REDACTED]"}, {"secret": "[REDACTED]"}]},
        "secret": "[REDACTED]",
    }


def test_field_rule_receives_filter_instance(pii_filter):
    seen = []
    rule = Custom(lambda value, f: seen.append(f) or value.upper())

    result = pii_filter.filter_object({"label": "beta"}, {"label": rule})

    assert result == {"label": "BETA"}
    assert seen == [pii_filter]


def test_field_rule_errors_propagate(pii_filter):
    def broken(value, f):
        raise ValueError("bad rule")

    with pytest.raises(ValueError, match="bad rule"):
        pii_filter.filter_object({"title": "x"}, {"title": broken})


def test_input_is_not_mutated(pii_filter):
    obj = {"user": {"email": "a@b.com", "tags": ["b@c.com"]}, "id": "1"}
    original = copy.deepcopy(obj)

    result = pii_filter.filter_object(obj)

    assert obj == original
    assert result is not obj
    assert result["user"] is not obj["user"]


def test_nested_empty_containers_are_copied(pii_filter):
    obj = {"meta": {}, "items": []}

    result = pii_filter.filter_object(obj)

    assert result == {"meta": {}, "items": []}
    assert result["meta"] is not obj["meta"]


def test_disabled_filter_returns_same_object(disabled_filter):
    obj = {"email": "a@b.com", "name": "John"}

    assert disabled_filter.filter_object(obj) is obj
