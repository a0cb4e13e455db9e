# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : tags.py
#   file_relpath : src/codepipeline_requests/operations/tags.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Resource tagging operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codepipeline_requests.core.casing import DEFAULT_CASE_RULES
from codepipeline_requests.core.normalize import normalize
from codepipeline_requests.request.builder import build_operation

if TYPE_CHECKING:
    from collections.abc import Iterable

    from codepipeline_requests.core.casing import CaseRules
    from codepipeline_requests.request.descriptor import RequestDescriptor


def tag_resource(
    resource_arn: str,
    tags: Iterable[object],
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Add to or modify the tags of the given resource.

    Args:
        resource_arn: The ARN of the resource to tag.
        tags: Tags to add, each with a ``key`` and a ``value``.
        rules: Casing rules for the request body.

    Returns:
        The ``TagResource`` request.
    """
    return build_operation(
        "tag_resource",
        {"resource_arn": resource_arn, "tags": [normalize(tag) for tag in tags]},
        rules=rules,
    )


def untag_resource(
    resource_arn: str,
    tag_keys: Iterable[str],
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Remove tags from a resource."""
    return build_operation(
        "untag_resource",
        {"resource_arn": resource_arn, "tag_keys": list(tag_keys)},
        rules=rules,
    )


def list_tags_for_resource(
    resource_arn: str,
    options: object = None,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Get the set of key-value pairs (metadata) that are used to manage the resource.

    ``options`` may carry ``next_token`` and ``max_results``.
    """
    return build_operation(
        "list_tags_for_resource",
        {"resource_arn": resource_arn},
        options,
        rules=rules,
    )
