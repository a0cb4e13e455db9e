# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : stages.py
#   file_relpath : src/codepipeline_requests/operations/stages.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Stage and action control operations.

Covers stage transitions, retries, rollbacks, condition overrides, manual
approvals and action revisions. Enumerated arguments are validated up front
and raise `InvalidArgumentError` on a bad value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codepipeline_requests.core.casing import DEFAULT_CASE_RULES
from codepipeline_requests.core.errors import InvalidArgumentError
from codepipeline_requests.core.normalize import normalize
from codepipeline_requests.operations.validators import (
    APPROVAL_STATUSES,
    CONDITION_TYPES,
    RETRY_MODES,
    TRANSITION_TYPES,
    require_choice,
)
from codepipeline_requests.request.builder import build_operation

if TYPE_CHECKING:
    from codepipeline_requests.core.casing import CaseRules
    from codepipeline_requests.request.descriptor import RequestDescriptor


def disable_stage_transition(
    pipeline_name: str,
    stage_name: str,
    transition_type: str,
    reason: str,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Prevent artifacts in a pipeline from transitioning to the next stage.

    Args:
        pipeline_name: The name of the pipeline.
        stage_name: The name of the stage.
        transition_type: ``"Inbound"`` or ``"Outbound"``.
        reason: Why the transition is disabled (shown in the console).
        rules: Casing rules for the request body.

    Returns:
        The ``DisableStageTransition`` request.

    Raises:
        InvalidArgumentError: If ``transition_type`` is not allowed.
    """
    require_choice("transition_type", transition_type, TRANSITION_TYPES)
    return build_operation(
        "disable_stage_transition",
        {
            "pipeline_name": pipeline_name,
            "stage_name": stage_name,
            "transition_type": transition_type,
            "reason": reason,
        },
        rules=rules,
    )


def enable_stage_transition(
    pipeline_name: str,
    stage_name: str,
    transition_type: str,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Enable artifacts in a pipeline to transition to a stage.

    Raises:
        InvalidArgumentError: If ``transition_type`` is not ``"Inbound"`` or
            ``"Outbound"``.
    """
    require_choice("transition_type", transition_type, TRANSITION_TYPES)
    return build_operation(
        "enable_stage_transition",
        {
            "pipeline_name": pipeline_name,
            "stage_name": stage_name,
            "transition_type": transition_type,
        },
        rules=rules,
    )


def retry_stage_execution(
    pipeline_name: str,
    stage_name: str,
    pipeline_execution_id: str,
    retry_mode: str = "FAILED_ACTIONS",
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Resume the pipeline execution by retrying the last failed actions in a stage.

    Raises:
        InvalidArgumentError: If ``retry_mode`` is not ``"FAILED_ACTIONS"`` or
            ``"ALL_ACTIONS"``.
    """
    require_choice("retry_mode", retry_mode, RETRY_MODES)
    return build_operation(
        "retry_stage_execution",
        {
            "pipeline_name": pipeline_name,
            "stage_name": stage_name,
            "pipeline_execution_id": pipeline_execution_id,
            "retry_mode": retry_mode,
        },
        rules=rules,
    )


def rollback_stage(
    pipeline_name: str,
    stage_name: str,
    target_pipeline_execution_id: str,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Roll back a stage to the artifacts of a previous successful execution."""
    return build_operation(
        "rollback_stage",
        {
            "pipeline_name": pipeline_name,
            "stage_name": stage_name,
            "target_pipeline_execution_id": target_pipeline_execution_id,
        },
        rules=rules,
    )


def override_stage_condition(
    pipeline_name: str,
    stage_name: str,
    pipeline_execution_id: str,
    condition_type: str,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Override a stage condition.

    Raises:
        InvalidArgumentError: If ``condition_type`` is not ``"BEFORE_ENTRY"``
            or ``"ON_SUCCESS"``.
    """
    require_choice("condition_type", condition_type, CONDITION_TYPES)
    return build_operation(
        "override_stage_condition",
        {
            "pipeline_name": pipeline_name,
            "stage_name": stage_name,
            "pipeline_execution_id": pipeline_execution_id,
            "condition_type": condition_type,
        },
        rules=rules,
    )


def put_action_revision(
    pipeline_name: str,
    stage_name: str,
    action_name: str,
    action_revision: object,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Provide information to CodePipeline about new revisions to a source.

    Args:
        pipeline_name: The name of the pipeline that starts processing the revision.
        stage_name: The name of the stage that contains the action.
        action_name: The name of the action that processes the revision.
        action_revision: ``revision_id``, ``revision_change_id`` and ``created``.
        rules: Casing rules for the request body.

    Returns:
        The ``PutActionRevision`` request.
    """
    return build_operation(
        "put_action_revision",
        {
            "pipeline_name": pipeline_name,
            "stage_name": stage_name,
            "action_name": action_name,
            "action_revision": action_revision,
        },
        rules=rules,
    )


def put_approval_result(
    pipeline_name: str,
    stage_name: str,
    action_name: str,
    token: str,
    result: object,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Provide the response to a manual approval request.

    Args:
        pipeline_name: The name of the pipeline.
        stage_name: The name of the stage with the approval action.
        action_name: The name of the approval action.
        token: The approval token returned by `get_pipeline_state`.
        result: ``status`` (``"Approved"`` or ``"Rejected"``) and ``summary``.
        rules: Casing rules for the request body.

    Returns:
        The ``PutApprovalResult`` request.

    Raises:
        InvalidArgumentError: If ``result`` has no valid ``status``.
    """
    fields: object = normalize(result)
    if not isinstance(fields, dict):
        raise InvalidArgumentError("result", result, ("status", "summary"))
    require_choice("result.status", fields.get("status"), APPROVAL_STATUSES)
    return build_operation(
        "put_approval_result",
        {
            "pipeline_name": pipeline_name,
            "stage_name": stage_name,
            "action_name": action_name,
            "token": token,
            "result": fields,
        },
        rules=rules,
    )
