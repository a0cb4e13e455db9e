# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : action_types.py
#   file_relpath : src/codepipeline_requests/operations/action_types.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Action type operations: custom action types, action type lookups and rule types."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codepipeline_requests.core.casing import DEFAULT_CASE_RULES
from codepipeline_requests.operations.validators import ACTION_CATEGORIES, require_choice
from codepipeline_requests.request.builder import build_operation

if TYPE_CHECKING:
    from codepipeline_requests.core.casing import CaseRules
    from codepipeline_requests.request.descriptor import RequestDescriptor


def create_custom_action_type(
    category: str,
    provider: str,
    version: str,
    input_artifact_details: object,
    output_artifact_details: object,
    options: object = None,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Create a new custom action for use in your pipelines.

    Example:
        ```python
        create_custom_action_type(
            "Source",
            "AWS CodeDeploy",
            "1",
            [("minimum_count", 0), ("maximum_count", 100)],
            {"minimum_count": 0, "maximum_count": 100},
            {
                "action_type_setting": {"entity_url_template": "https://example.com"},
                "configuration_properties": [{"name": "n", "key": True}],
            },
        )
        ```

    Args:
        category: One of ``Source``, ``Build``, ``Deploy``, ``Test``,
            ``Invoke`` or ``Approval``.
        provider: The provider of the service used in the custom action.
        version: The version identifier of the custom action.
        input_artifact_details: ``minimum_count`` and ``maximum_count`` of
            input artifacts.
        output_artifact_details: ``minimum_count`` and ``maximum_count`` of
            output artifacts.
        options: Optional ``action_type_setting``, ``configuration_properties``
            and ``tags``.
        rules: Casing rules for the request body.

    Returns:
        The ``CreateCustomActionType`` request.

    Raises:
        InvalidArgumentError: If ``category`` is not an allowed action category.
    """
    require_choice("category", category, ACTION_CATEGORIES)
    return build_operation(
        "create_custom_action_type",
        {
            "category": category,
            "provider": provider,
            "version": version,
            "input_artifact_details": input_artifact_details,
            "output_artifact_details": output_artifact_details,
        },
        options,
        rules=rules,
    )


def delete_custom_action_type(
    category: str,
    provider: str,
    version: str,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Mark a custom action as deleted.

    Raises:
        InvalidArgumentError: If ``category`` is not an allowed action category.
    """
    require_choice("category", category, ACTION_CATEGORIES)
    return build_operation(
        "delete_custom_action_type",
        {"category": category, "provider": provider, "version": version},
        rules=rules,
    )


def get_action_type(
    category: str,
    owner: str,
    provider: str,
    version: str,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Return information about an action type created for an external provider."""
    return build_operation(
        "get_action_type",
        {"category": category, "owner": owner, "provider": provider, "version": version},
        rules=rules,
    )


def update_action_type(action_type: object, *, rules: CaseRules = DEFAULT_CASE_RULES) -> RequestDescriptor:
    """Update an action type that was created with any supported integration model.

    ``action_type`` is the full action type declaration; it is sent as
    ``actionType``.
    """
    return build_operation("update_action_type", {"action_type": action_type}, rules=rules)


def list_action_types(options: object = None, *, rules: CaseRules = DEFAULT_CASE_RULES) -> RequestDescriptor:
    """Get a summary of all CodePipeline action types associated with your account.

    Args:
        options: Optional ``action_owner_filter``, ``next_token`` and
            ``region_filter``.
        rules: Casing rules for the request body.

    Returns:
        The ``ListActionTypes`` request.
    """
    return build_operation("list_action_types", {}, options, rules=rules)


def list_rule_types(options: object = None, *, rules: CaseRules = DEFAULT_CASE_RULES) -> RequestDescriptor:
    """List the rules for the condition; ``options`` may carry ``rule_owner_filter`` and ``region_filter``."""
    return build_operation("list_rule_types", {}, options, rules=rules)
