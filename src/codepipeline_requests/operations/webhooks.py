# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : webhooks.py
#   file_relpath : src/codepipeline_requests/operations/webhooks.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Webhook operations.

A webhook definition looks like:

```python
{
    "name": "my-webhook",
    "target_pipeline": "MyPipeline",
    "target_action": "Source",
    "filters": [{"json_path": "$.ref", "match_equals": "refs/heads/{Branch}"}],
    "authentication": "GITHUB_HMAC",
    "authentication_configuration": {"secret_token": "..."},
}
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


def put_webhook(
    webhook: object,
    tags: Iterable[object] | None = None,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Define a webhook and return a unique webhook URL generated by CodePipeline.

    Args:
        webhook: The webhook definition.
        tags: Optional tags; ``tags`` is only sent when at least one is given.
        rules: Casing rules for the request body.

    Returns:
        The ``PutWebhook`` request.
    """
    required: dict[str, object] = {"webhook": webhook}
    if tags:
        required["tags"] = [normalize(tag) for tag in tags]
    return build_operation("put_webhook", required, rules=rules)


def delete_webhook(name: str, *, rules: CaseRules = DEFAULT_CASE_RULES) -> RequestDescriptor:
    """Delete a previously created webhook by name."""
    return build_operation("delete_webhook", {"name": name}, rules=rules)


def list_webhooks(options: object = None, *, rules: CaseRules = DEFAULT_CASE_RULES) -> RequestDescriptor:
    """Get a listing of all the webhooks in this Region for this account.

    ``options`` may carry ``next_token`` and ``max_results``.
    """
    return build_operation("list_webhooks", {}, options, rules=rules)


def register_webhook_with_third_party(
    webhook_name: str,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Configure a connection between the webhook and the external tool with events to be detected."""
    return build_operation(
        "register_webhook_with_third_party",
        {"webhook_name": webhook_name},
        rules=rules,
    )


def deregister_webhook_with_third_party(
    webhook_name: str,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Remove the connection between the webhook and the external tool.

    Currently supported only for webhooks that target an action type of GitHub.
    """
    return build_operation(
        "deregister_webhook_with_third_party",
        {"webhook_name": webhook_name},
        rules=rules,
    )
