# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : pipelines.py
#   file_relpath : src/codepipeline_requests/operations/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Pipeline definition operations: create, read, update, delete and list.

A pipeline declaration is a nested structure of stages, actions and artifact
stores. Keys are snake_case; maps whose keys are chosen by the caller (the
``artifact_stores`` region map, action ``configuration`` maps) should use
`RawKey` keys so they reach the wire verbatim:

```python
from codepipeline_requests import RawKey, create_pipeline

create_pipeline({
    "name": "MyPipeline",
    "role_arn": "arn:aws:iam::111111111111:role/AWS-CodePipeline-Service",
    "artifact_store": {"type": "S3", "location": "my-bucket"},
    "stages": [
        {
            "name": "Source",
            "actions": [
                {
                    "name": "Source",
                    "action_type_id": {
                        "category": "Source", "owner": "AWS", "provider": "S3", "version": "1",
                    },
                    "configuration": {
                        "s3_bucket": "my-bucket",  # -> "S3Bucket" via the default rules
                        RawKey("PollForSourceChanges"): "false",
                    },
                    "output_artifacts": [{"name": "MyApp"}],
                },
            ],
        },
    ],
})
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codepipeline_requests.core.casing import DEFAULT_CASE_RULES
from codepipeline_requests.core.normalize import normalize
from codepipeline_requests.request.builder import build_operation

if TYPE_CHECKING:
    from collections.abc import Iterable

    from codepipeline_requests.core.casing import CaseRules
    from codepipeline_requests.request.descriptor import RequestDescriptor


def create_pipeline(
    pipeline: object,
    tags: Iterable[object] | None = None,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Create a pipeline.

    Args:
        pipeline: The pipeline declaration.
        tags: Tags to apply, each a ``{"key": ..., "value": ...}`` mapping or
            pair sequence. The body always carries a ``tags`` list, empty when
            no tags are given.
        rules: Casing rules for the request body.

    Returns:
        The ``CreatePipeline`` request.
    """
    tag_list: list[object] = [normalize(tag) for tag in tags or ()]
    return build_operation(
        "create_pipeline",
        {"pipeline": pipeline, "tags": tag_list},
        rules=rules,
    )


def update_pipeline(pipeline: object, *, rules: CaseRules = DEFAULT_CASE_RULES) -> RequestDescriptor:
    """Update a specified pipeline with edits or changes to its structure.

    The pipeline ``version`` is incremented by the service.
    """
    return build_operation("update_pipeline", {"pipeline": pipeline}, rules=rules)


def delete_pipeline(name: str, *, rules: CaseRules = DEFAULT_CASE_RULES) -> RequestDescriptor:
    """Delete the specified pipeline."""
    return build_operation("delete_pipeline", {"name": name}, rules=rules)


def get_pipeline(
    name: str,
    options: object = None,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Return the metadata, structure, stages and actions of a pipeline.

    Args:
        name: The name of the pipeline.
        options: Optional ``version``; the latest version is returned when
            omitted.
        rules: Casing rules for the request body.

    Returns:
        The ``GetPipeline`` request.
    """
    return build_operation("get_pipeline", {"name": name}, options, rules=rules)


def get_pipeline_state(name: str, *, rules: CaseRules = DEFAULT_CASE_RULES) -> RequestDescriptor:
    """Return information about the state of a pipeline, including its stages and actions."""
    return build_operation("get_pipeline_state", {"name": name}, rules=rules)


def list_pipelines(options: object = None, *, rules: CaseRules = DEFAULT_CASE_RULES) -> RequestDescriptor:
    """Get a summary of all of the pipelines associated with your account.

    ``options`` may carry ``next_token`` and ``max_results``.
    """
    return build_operation("list_pipelines", {}, options, rules=rules)
