# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : test_builder.py
#   file_relpath : tests/request/test_builder.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Tests for the request builder pipeline and the descriptor it returns."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from codepipeline_requests.core.casing import CaseRules, Casing, RawKey
from codepipeline_requests.request.builder import (
    build_operation,
    build_request,
    direct_request,
    operation_target,
)
from codepipeline_requests.request.descriptor import RequestDescriptor
from tests.conftest import parametrize

JSON_CONTENT_TYPE = ("content-type", "application/x-amz-json-1.1")


@parametrize(
    ("operation", "target"),
    [
        ("acknowledge_job", "CodePipeline_20150709.AcknowledgeJob"),
        ("put_job_success_result", "CodePipeline_20150709.PutJobSuccessResult"),
        ("list_tags_for_resource", "CodePipeline_20150709.ListTagsForResource"),
    ],
)
def test_operation_target(operation: str, target: str) -> None:
    assert operation_target(operation) == target


def test_build_request_envelope() -> None:
    request = build_request("get_pipeline_state", {"name": "P"})
    assert request.method == "POST"
    assert request.path == "/"
    assert request.service == "codepipeline"
    assert request.operation == "get_pipeline_state"
    assert request.headers == (
        ("x-amz-target", "CodePipeline_20150709.GetPipelineState"),
        JSON_CONTENT_TYPE,
    )
    assert request.target == "CodePipeline_20150709.GetPipelineState"
    assert request.body == {"name": "P"}


def test_descriptor_is_frozen() -> None:
    request = build_request("get_pipeline_state", {"name": "P"})
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.method = "GET"  # type: ignore[misc]


def test_descriptor_to_dict() -> None:
    request = build_request("delete_webhook", {"name": "W"})
    assert request.to_dict() == {
        "operation": "delete_webhook",
        "service": "codepipeline",
        "method": "POST",
        "path": "/",
        "headers": [
            ["x-amz-target", "CodePipeline_20150709.DeleteWebhook"],
            ["content-type", "application/x-amz-json-1.1"],
        ],
        "body": {"name": "W"},
    }


def test_build_operation_merges_required_over_optional() -> None:
    request = build_operation(
        "list_pipeline_executions",
        {"pipeline_name": "Required"},
        [("pipeline_name", "Optional"), ("max_results", 10)],
    )
    assert request.body == {"pipelineName": "Required", "maxResults": 10}


@parametrize("optional", [None, [], (), {}])
def test_build_operation_with_no_optional_fields(optional: object) -> None:
    request = build_operation("get_job_details", {"job_id": "j"}, optional)
    assert request.body == {"jobId": "j"}


def test_build_operation_normalizes_required_values() -> None:
    request = build_operation(
        "poll_for_jobs",
        {"action_type_id": [("category", "Build"), ("owner", "Custom")]},
    )
    assert request.body == {"actionTypeId": {"category": "Build", "owner": "Custom"}}


def test_build_operation_keeps_empty_required_list() -> None:
    request = build_operation("untag_resource", {"resource_arn": "a", "tag_keys": []})
    assert request.body == {"resourceArn": "a", "tagKeys": []}


def test_build_operation_uses_given_rules() -> None:
    rules = CaseRules(default=Casing.UPPER)
    request = build_operation("get_job_details", {"job_id": "j"}, rules=rules)
    assert request.body == {"JobId": "j"}


def test_build_operation_ignores_non_mapping_optional(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        request = build_operation("get_job_details", {"job_id": "j"}, ["stray", "values"])
    assert request.body == {"jobId": "j"}
    assert "Ignoring non-mapping optional fields" in caplog.text


def test_build_operation_leaves_raw_keys_alone() -> None:
    request = build_operation(
        "start_pipeline_execution",
        {"name": "P"},
        {"variables": [{"name": "my_var", "value": "x"}], "extra": {RawKey("keep_me"): 1}},
    )
    assert request.body == {
        "name": "P",
        "variables": [{"name": "my_var", "value": "x"}],
        "extra": {"keep_me": 1},
    }


def test_direct_request_is_untouched() -> None:
    data = {"snake_key": [("a", 1)]}
    request = direct_request("get_pipeline", data)
    assert isinstance(request, RequestDescriptor)
    assert request.body == {"snake_key": [("a", 1)]}
    assert request.target == "CodePipeline_20150709.GetPipeline"


def test_direct_request_does_not_share_nested_containers() -> None:
    data = {"pipeline": {"name": "P", "stages": [{"name": "Source"}]}}
    request = direct_request("update_pipeline", data)
    data["pipeline"]["name"] = "Q"
    data["pipeline"]["stages"].append({"name": "Build"})
    assert request.body == {"pipeline": {"name": "P", "stages": [{"name": "Source"}]}}
