# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : test_casing.py
#   file_relpath : tests/core/test_casing.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Tests for key casing and `CaseRules`."""

from __future__ import annotations

import dataclasses

import pytest

from codepipeline_requests.core.casing import (
    DEFAULT_CASE_RULES,
    CaseRules,
    Casing,
    RawKey,
    apply_casing,
    case_key,
    split_words,
)
from codepipeline_requests.core.normalize import normalize
from tests.conftest import parametrize


@parametrize(
    ("key", "words"),
    [
        ("role_arn", ["role", "arn"]),
        ("abc-def", ["abc", "def"]),
        ("testThings", ["test", "Things"]),
        ("S3Bucket", ["S3", "Bucket"]),
        ("__leading__", ["leading"]),
        ("", []),
        ("_-_", []),
    ],
)
def test_split_words(key: str, words: list[str]) -> None:
    assert split_words(key) == words


@parametrize(
    ("key", "casing", "expected"),
    [
        ("test_things", Casing.LOWER, "testThings"),
        ("test_things", Casing.UPPER, "TestThings"),
        ("abc-def", Casing.LOWER, "abcDef"),
        ("abc-def", Casing.UPPER, "AbcDef"),
        ("testThings", Casing.LOWER, "testThings"),
        ("TestThings", Casing.LOWER, "testThings"),
        ("s3_bucket", Casing.UPPER, "S3Bucket"),
        ("s3_object_key", Casing.UPPER, "S3ObjectKey"),
        ("entity_url_template", Casing.LOWER, "entityUrlTemplate"),
        ("ABC_def", Casing.LOWER, "aBCDef"),
        ("x", Casing.UPPER, "X"),
        ("", Casing.LOWER, ""),
        ("__", Casing.UPPER, ""),
    ],
)
def test_case_key(key: str, casing: Casing, expected: str) -> None:
    assert case_key(key, casing) == expected


def test_case_key_keeps_rest_of_later_words() -> None:
    """Only the first character of a following word is touched."""
    assert case_key("deployment_gROUP", Casing.LOWER) == "deploymentGROUP"


def test_case_key_accepts_plain_string_casing() -> None:
    assert case_key("role_arn", "lower") == "roleArn"  # type: ignore[arg-type]
    assert case_key("role_arn", "upper") == "RoleArn"  # type: ignore[arg-type]


def test_raw_key_is_never_cased() -> None:
    key = RawKey("my_custom-Key")
    assert case_key(key, Casing.UPPER) is key
    assert repr(key) == "RawKey('my_custom-Key')"


@parametrize("key", [1, 2.5, None, ("a", "b")])
def test_non_str_keys_pass_through(key: object) -> None:
    assert case_key(key, Casing.UPPER) is key


def test_default_rules() -> None:
    assert DEFAULT_CASE_RULES.default is Casing.LOWER
    assert dict(DEFAULT_CASE_RULES.keys) == {
        "s3_bucket": Casing.UPPER,
        "s3_object_key": Casing.UPPER,
    }
    assert dict(DEFAULT_CASE_RULES.subkeys) == {}


def test_case_rules_are_immutable() -> None:
    rules = CaseRules(keys={"a": Casing.UPPER})
    with pytest.raises(dataclasses.FrozenInstanceError):
        rules.default = Casing.UPPER  # type: ignore[misc]
    with pytest.raises(TypeError):
        rules.keys["b"] = Casing.UPPER  # type: ignore[index]


def test_case_rules_coerce_strings() -> None:
    rules = CaseRules(default="upper", keys={"a": "lower"}, subkeys={"p": {"c": "upper"}})  # type: ignore[arg-type]
    assert rules.default is Casing.UPPER
    assert rules.keys["a"] is Casing.LOWER
    assert rules.subkeys["p"]["c"] is Casing.UPPER


def test_case_rules_do_not_alias_caller_dicts() -> None:
    keys = {"a": Casing.UPPER}
    rules = CaseRules(keys=keys)
    keys["b"] = Casing.UPPER
    assert "b" not in rules.keys


def test_apply_casing_uses_default_and_overrides() -> None:
    body = {"s3_bucket": "b", "s3_object_key": "k", "role_arn": "r"}
    assert apply_casing(body) == {"S3Bucket": "b", "S3ObjectKey": "k", "roleArn": "r"}


def test_apply_casing_overrides_apply_at_any_depth() -> None:
    body = {"configuration": {"s3_bucket": "b"}}
    assert apply_casing(body) == {"configuration": {"S3Bucket": "b"}}


def test_apply_casing_recurses_into_lists() -> None:
    body = {"stages": [{"run_order": 1}, [{"action_name": "x"}], "literal_value"]}
    assert apply_casing(body) == {
        "stages": [{"runOrder": 1}, [{"actionName": "x"}], "literal_value"]
    }


def test_apply_casing_leaves_values_alone() -> None:
    assert apply_casing({"name": "snake_case_value"}) == {"name": "snake_case_value"}


def test_subkey_table_applies_only_to_children_of_parent() -> None:
    rules = CaseRules(default=Casing.LOWER, subkeys={"outer": {"inner": Casing.UPPER}})
    result = apply_casing({"outer": {"inner": 1, "sibling": 2}, "inner": 3}, rules)
    assert result == {"outer": {"Inner": 1, "sibling": 2}, "inner": 3}


def test_subkey_table_replaces_keys_for_children() -> None:
    """Inside the parent, the top-level overrides no longer apply."""
    rules = CaseRules(
        keys={"s3_bucket": Casing.UPPER},
        subkeys={"configuration": {"project_name": Casing.UPPER}},
    )
    result = apply_casing({"configuration": {"s3_bucket": "b", "project_name": "p"}}, rules)
    assert result == {"configuration": {"s3Bucket": "b", "ProjectName": "p"}}


def test_subkey_substitution_persists_to_grandchildren() -> None:
    rules = CaseRules(subkeys={"outer": {"leaf": Casing.UPPER}})
    result = apply_casing({"outer": {"middle": {"leaf": 1}}}, rules)
    assert result == {"outer": {"middle": {"Leaf": 1}}}


def test_subkey_tables_stay_available_below_a_parent() -> None:
    """A subkey table only replaces ``keys``; ``subkeys`` keeps every table."""
    rules = CaseRules(
        subkeys={
            "outer": {"x": Casing.UPPER},
            "middle": {"y": Casing.UPPER},
        }
    )
    result = apply_casing({"outer": {"middle": {"x": 1, "y": 2}}}, rules)
    assert result == {"outer": {"middle": {"x": 1, "Y": 2}}}


def test_apply_casing_leaves_raw_keys_and_their_subtree_rules() -> None:
    body = {"artifact_stores": {RawKey("us-east-1"): {"encryption_key": {"id": "k"}}}}
    assert apply_casing(body) == {
        "artifactStores": {"us-east-1": {"encryptionKey": {"id": "k"}}}
    }


def test_for_children_of_returns_self_without_table() -> None:
    rules = CaseRules(subkeys={"a": {"b": Casing.UPPER}})
    assert rules.for_children_of("z") is rules
    child = rules.for_children_of("a")
    assert dict(child.keys) == {"b": Casing.UPPER}
    assert child.subkeys == rules.subkeys


def test_normalize_then_case_custom_action_settings() -> None:
    value = {
        "action_type_setting": {"entity_url_template": "x"},
        "configuration_properties": [{"name": "n", "key": True}],
    }
    assert apply_casing(normalize(value)) == {
        "actionTypeSetting": {"entityUrlTemplate": "x"},
        "configurationProperties": [{"name": "n", "key": True}],
    }


def test_override_only_touches_listed_key() -> None:
    rules = CaseRules(default=Casing.LOWER, keys={"s3_bucket": Casing.UPPER})
    assert apply_casing({"s3_bucket": 1, "other_key": 2}, rules) == {"S3Bucket": 1, "otherKey": 2}
