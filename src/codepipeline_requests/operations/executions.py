# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : executions.py
#   file_relpath : src/codepipeline_requests/operations/executions.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Pipeline execution operations: start, stop, inspect and list runs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codepipeline_requests.core.casing import DEFAULT_CASE_RULES
from codepipeline_requests.request.builder import build_operation

if TYPE_CHECKING:
    from codepipeline_requests.core.casing import CaseRules
    from codepipeline_requests.request.descriptor import RequestDescriptor


def get_pipeline_execution(
    pipeline_name: str,
    pipeline_execution_id: str,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Return information about an execution of a pipeline.

    Args:
        pipeline_name: The name of the pipeline.
        pipeline_execution_id: The ID of the pipeline execution.
        rules: Casing rules for the request body.

    Returns:
        The ``GetPipelineExecution`` request.
    """
    return build_operation(
        "get_pipeline_execution",
        {"pipeline_name": pipeline_name, "pipeline_execution_id": pipeline_execution_id},
        rules=rules,
    )


def list_pipeline_executions(
    pipeline_name: str,
    options: object = None,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Get a summary of the most recent executions for a pipeline.

    Args:
        pipeline_name: The name of the pipeline.
        options: Optional ``max_results``, ``next_token`` and ``filter``
            (e.g. ``{"succeeded_in_stage": {"stage_name": "Deploy"}}``).
        rules: Casing rules for the request body.

    Returns:
        The ``ListPipelineExecutions`` request.
    """
    return build_operation(
        "list_pipeline_executions",
        {"pipeline_name": pipeline_name},
        options,
        rules=rules,
    )


def start_pipeline_execution(
    name: str,
    options: object = None,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Start the specified pipeline, processing the latest commit to its source location.

    ``options`` may carry ``client_request_token``, ``variables`` and
    ``source_revisions``.
    """
    return build_operation("start_pipeline_execution", {"name": name}, options, rules=rules)


def stop_pipeline_execution(
    pipeline_name: str,
    pipeline_execution_id: str,
    options: object = None,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Stop the specified pipeline execution.

    Args:
        pipeline_name: The name of the pipeline.
        pipeline_execution_id: The ID of the execution to stop.
        options: Optional ``abandon`` (bool) and ``reason``.
        rules: Casing rules for the request body.

    Returns:
        The ``StopPipelineExecution`` request.
    """
    return build_operation(
        "stop_pipeline_execution",
        {"pipeline_name": pipeline_name, "pipeline_execution_id": pipeline_execution_id},
        options,
        rules=rules,
    )


def list_action_executions(
    pipeline_name: str,
    options: object = None,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """List the action executions that have occurred in a pipeline.

    ``options`` may carry ``filter`` (``pipeline_execution_id``),
    ``max_results`` and ``next_token``.
    """
    return build_operation(
        "list_action_executions",
        {"pipeline_name": pipeline_name},
        options,
        rules=rules,
    )


def list_rule_executions(
    pipeline_name: str,
    options: object = None,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """List the rule executions that have occurred in a pipeline."""
    return build_operation(
        "list_rule_executions",
        {"pipeline_name": pipeline_name},
        options,
        rules=rules,
    )


def list_deploy_action_execution_targets(
    action_execution_id: str,
    options: object = None,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """List the targets for the deploy action execution."""
    return build_operation(
        "list_deploy_action_execution_targets",
        {"action_execution_id": action_execution_id},
        options,
        rules=rules,
    )
