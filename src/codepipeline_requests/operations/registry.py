# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : registry.py
#   file_relpath : src/codepipeline_requests/operations/registry.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Read-only registry of operation builders, keyed by snake_case operation name.

The CLI uses it to dispatch ``render <operation>``; library callers can use
it for dynamic dispatch too:

```python
from codepipeline_requests.operations.registry import get_operation

request = get_operation("get_pipeline_state")("MyPipeline")
```

Notes:
    The public view is a `MappingProxyType` and must not be mutated.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from codepipeline_requests.core.errors import UnknownOperationError
from codepipeline_requests.operations import (
    action_types,
    executions,
    jobs,
    pipelines,
    stages,
    tags,
    webhooks,
)
from codepipeline_requests.request.builder import operation_target

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from codepipeline_requests.request.descriptor import RequestDescriptor

    OperationBuilder = Callable[..., RequestDescriptor]

_BUILDERS: Final[tuple[OperationBuilder, ...]] = (
    # jobs
    jobs.acknowledge_job,
    jobs.acknowledge_third_party_job,
    jobs.get_job_details,
    jobs.get_third_party_job_details,
    jobs.poll_for_jobs,
    jobs.poll_for_third_party_jobs,
    jobs.put_job_failure_result,
    jobs.put_job_success_result,
    jobs.put_third_party_job_failure_result,
    jobs.put_third_party_job_success_result,
    # pipelines
    pipelines.create_pipeline,
    pipelines.update_pipeline,
    pipelines.delete_pipeline,
    pipelines.get_pipeline,
    pipelines.get_pipeline_state,
    pipelines.list_pipelines,
    # executions
    executions.get_pipeline_execution,
    executions.list_pipeline_executions,
    executions.start_pipeline_execution,
    executions.stop_pipeline_execution,
    executions.list_action_executions,
    executions.list_rule_executions,
    executions.list_deploy_action_execution_targets,
    # stages
    stages.disable_stage_transition,
    stages.enable_stage_transition,
    stages.retry_stage_execution,
    stages.rollback_stage,
    stages.override_stage_condition,
    stages.put_action_revision,
    stages.put_approval_result,
    # action types
    action_types.create_custom_action_type,
    action_types.delete_custom_action_type,
    action_types.get_action_type,
    action_types.update_action_type,
    action_types.list_action_types,
    action_types.list_rule_types,
    # webhooks
    webhooks.put_webhook,
    webhooks.delete_webhook,
    webhooks.list_webhooks,
    webhooks.register_webhook_with_third_party,
    webhooks.deregister_webhook_with_third_party,
    # tags
    tags.tag_resource,
    tags.untag_resource,
    tags.list_tags_for_resource,
)

OPERATIONS: Final[Mapping[str, OperationBuilder]] = MappingProxyType(
    {builder.__name__: builder for builder in _BUILDERS}
)


def operation_names() -> tuple[str, ...]:
    """Return all registered operation names (sorted)."""
    return tuple(sorted(OPERATIONS))


def get_operation(name: str) -> OperationBuilder:
    """Return the builder registered under ``name``.

    Args:
        name: snake_case operation name. Hyphens are accepted in place of
            underscores (``get-pipeline`` == ``get_pipeline``).

    Returns:
        The operation builder.

    Raises:
        UnknownOperationError: If no operation is registered under ``name``.
    """
    key: str = name.strip().replace("-", "_")
    try:
        return OPERATIONS[key]
    except KeyError:
        raise UnknownOperationError(name) from None


def describe_operations() -> list[dict[str, str]]:
    """Return ``{"name", "target"}`` entries for every operation, sorted by name."""
    return [{"name": name, "target": operation_target(name)} for name in operation_names()]
