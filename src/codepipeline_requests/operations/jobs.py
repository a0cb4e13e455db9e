# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : jobs.py
#   file_relpath : src/codepipeline_requests/operations/jobs.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Job worker operations.

Job workers poll for work (`poll_for_jobs`), acknowledge it
(`acknowledge_job`), and report the outcome (`put_job_success_result` /
`put_job_failure_result`). The ``third_party`` variants serve partner
actions and additionally carry a ``client_token``.

Structured arguments accept mappings or ``(key, value)`` sequences with
snake_case keys, e.g.:

```python
poll_for_jobs(
    {"category": "Build", "owner": "Custom", "provider": "MyBuilder", "version": "1"},
    {"max_batch_size": 5},
)
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codepipeline_requests.core.casing import DEFAULT_CASE_RULES
from codepipeline_requests.request.builder import build_operation

if TYPE_CHECKING:
    from codepipeline_requests.core.casing import CaseRules
    from codepipeline_requests.request.descriptor import RequestDescriptor


def acknowledge_job(
    job_id: str,
    nonce: str,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Confirm that a job worker has received the specified job.

    Args:
        job_id: The unique system-generated ID of the job.
        nonce: The nonce returned by `poll_for_jobs` for this job.
        rules: Casing rules for the request body.

    Returns:
        The ``AcknowledgeJob`` request.
    """
    return build_operation("acknowledge_job", {"job_id": job_id, "nonce": nonce}, rules=rules)


def acknowledge_third_party_job(
    client_token: str,
    job_id: str,
    nonce: str,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Confirm a job worker has received the specified partner job."""
    return build_operation(
        "acknowledge_third_party_job",
        {"client_token": client_token, "job_id": job_id, "nonce": nonce},
        rules=rules,
    )


def get_job_details(job_id: str, *, rules: CaseRules = DEFAULT_CASE_RULES) -> RequestDescriptor:
    """Return information about a job. Used for custom actions only."""
    return build_operation("get_job_details", {"job_id": job_id}, rules=rules)


def get_third_party_job_details(
    job_id: str,
    client_token: str,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Request the details of a job for a partner action."""
    return build_operation(
        "get_third_party_job_details",
        {"job_id": job_id, "client_token": client_token},
        rules=rules,
    )


def poll_for_jobs(
    action_type_id: object,
    options: object = None,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Return information about any jobs for CodePipeline to act on.

    Args:
        action_type_id: ``category``, ``owner``, ``provider`` and ``version``
            of the action type to poll for.
        options: Optional ``max_batch_size`` and ``query_param``. The keys of
            ``query_param`` are action configuration property names; wrap them
            in `RawKey` if they must not be camel-cased.
        rules: Casing rules for the request body.

    Returns:
        The ``PollForJobs`` request.
    """
    return build_operation(
        "poll_for_jobs",
        {"action_type_id": action_type_id},
        options,
        rules=rules,
    )


def poll_for_third_party_jobs(
    action_type_id: object,
    options: object = None,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Determine whether there are any third party jobs for a job worker to act on.

    ``options`` may carry ``max_batch_size``.
    """
    return build_operation(
        "poll_for_third_party_jobs",
        {"action_type_id": action_type_id},
        options,
        rules=rules,
    )


def put_job_failure_result(
    job_id: str,
    failure_details: object,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Report a job failure as returned to the pipeline by a job worker.

    Args:
        job_id: The unique system-generated ID of the job that failed.
        failure_details: ``type``, ``message`` and optionally
            ``external_execution_id``; sent as ``failureDetails``.
        rules: Casing rules for the request body.

    Returns:
        The ``PutJobFailureResult`` request.
    """
    return build_operation(
        "put_job_failure_result",
        {"job_id": job_id, "failure_details": failure_details},
        rules=rules,
    )


def put_job_success_result(
    job_id: str,
    options: object = None,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Report a job success as returned to the pipeline by a job worker.

    ``options`` may carry ``continuation_token``, ``current_revision``,
    ``execution_details`` and ``output_variables``.
    """
    return build_operation("put_job_success_result", {"job_id": job_id}, options, rules=rules)


def put_third_party_job_failure_result(
    job_id: str,
    client_token: str,
    failure_details: object,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Report the failure of a third party job."""
    return build_operation(
        "put_third_party_job_failure_result",
        {"job_id": job_id, "client_token": client_token, "failure_details": failure_details},
        rules=rules,
    )


def put_third_party_job_success_result(
    job_id: str,
    client_token: str,
    options: object = None,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Report the success of a third party job."""
    return build_operation(
        "put_third_party_job_success_result",
        {"job_id": job_id, "client_token": client_token},
        options,
        rules=rules,
    )
