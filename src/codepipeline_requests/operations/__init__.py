# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : __init__.py
#   file_relpath : src/codepipeline_requests/operations/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""One builder function per CodePipeline API operation.

Every function takes its required arguments positionally, optional fields
as a trailing mapping or ``(key, value)`` sequence, and a keyword-only
``rules`` (`CaseRules`) that defaults to the package defaults. Each returns
a [`RequestDescriptor`][codepipeline_requests.request.descriptor.RequestDescriptor].
"""

from __future__ import annotations

from codepipeline_requests.operations.action_types import (
    create_custom_action_type,
    delete_custom_action_type,
    get_action_type,
    list_action_types,
    list_rule_types,
    update_action_type,
)
from codepipeline_requests.operations.executions import (
    get_pipeline_execution,
    list_action_executions,
    list_deploy_action_execution_targets,
    list_pipeline_executions,
    list_rule_executions,
    start_pipeline_execution,
    stop_pipeline_execution,
)
from codepipeline_requests.operations.jobs import (
    acknowledge_job,
    acknowledge_third_party_job,
    get_job_details,
    get_third_party_job_details,
    poll_for_jobs,
    poll_for_third_party_jobs,
    put_job_failure_result,
    put_job_success_result,
    put_third_party_job_failure_result,
    put_third_party_job_success_result,
)
from codepipeline_requests.operations.pipelines import (
    create_pipeline,
    delete_pipeline,
    get_pipeline,
    get_pipeline_state,
    list_pipelines,
    update_pipeline,
)
from codepipeline_requests.operations.registry import (
    OPERATIONS,
    describe_operations,
    get_operation,
    operation_names,
)
from codepipeline_requests.operations.stages import (
    disable_stage_transition,
    enable_stage_transition,
    override_stage_condition,
    put_action_revision,
    put_approval_result,
    retry_stage_execution,
    rollback_stage,
)
from codepipeline_requests.operations.tags import (
    list_tags_for_resource,
    tag_resource,
    untag_resource,
)
from codepipeline_requests.operations.webhooks import (
    delete_webhook,
    deregister_webhook_with_third_party,
    list_webhooks,
    put_webhook,
    register_webhook_with_third_party,
)

__all__ = [
    "OPERATIONS",
    "acknowledge_job",
    "acknowledge_third_party_job",
    "create_custom_action_type",
    "create_pipeline",
    "delete_custom_action_type",
    "delete_pipeline",
    "delete_webhook",
    "deregister_webhook_with_third_party",
    "describe_operations",
    "disable_stage_transition",
    "enable_stage_transition",
    "get_action_type",
    "get_job_details",
    "get_operation",
    "get_pipeline",
    "get_pipeline_execution",
    "get_pipeline_state",
    "get_third_party_job_details",
    "list_action_executions",
    "list_action_types",
    "list_deploy_action_execution_targets",
    "list_pipeline_executions",
    "list_pipelines",
    "list_rule_executions",
    "list_rule_types",
    "list_tags_for_resource",
    "list_webhooks",
    "operation_names",
    "override_stage_condition",
    "poll_for_jobs",
    "poll_for_third_party_jobs",
    "put_action_revision",
    "put_approval_result",
    "put_job_failure_result",
    "put_job_success_result",
    "put_third_party_job_failure_result",
    "put_third_party_job_success_result",
    "put_webhook",
    "register_webhook_with_third_party",
    "retry_stage_execution",
    "rollback_stage",
    "start_pipeline_execution",
    "stop_pipeline_execution",
    "tag_resource",
    "untag_resource",
    "update_action_type",
    "update_pipeline",
]
