# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : builder.py
#   file_relpath : src/codepipeline_requests/request/builder.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Request builders: turn operation arguments into a `RequestDescriptor`.

Pipeline for a typical operation (`build_operation`):

1. ``normalize`` the optional-fields argument (``None`` means empty).
2. ``normalize`` each required field and merge it in; required fields win.
3. ``apply_casing`` with the caller's `CaseRules`.
4. Wrap the body with the two fixed headers (`build_request`).

Naming:
- `operation_target(...)` -> ``x-amz-target`` header value
- `build_request(...)` -> descriptor from an already-shaped body
- `build_operation(...)` -> the full normalize/merge/case/wrap pipeline
- `direct_request(...)` -> descriptor from caller data, untouched
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from codepipeline_requests.config.logging import get_logger
from codepipeline_requests.constants import (
    API_NAMESPACE,
    API_VERSION,
    CONTENT_TYPE,
    CONTENT_TYPE_HEADER,
    TARGET_HEADER,
)
from codepipeline_requests.core.casing import DEFAULT_CASE_RULES, Casing, apply_casing, case_key
from codepipeline_requests.core.normalize import normalize
from codepipeline_requests.request.descriptor import RequestDescriptor

if TYPE_CHECKING:
    from collections.abc import Mapping

    from codepipeline_requests.config.logging import PipelineLogger
    from codepipeline_requests.core.casing import CaseRules

logger: PipelineLogger = get_logger(__name__)


def operation_target(operation: str) -> str:
    """Return the ``x-amz-target`` header value for ``operation``.

    Args:
        operation: snake_case operation name, e.g. ``"acknowledge_job"``.

    Returns:
        ``"<Namespace>_<Version>.<Operation>"``, e.g.
        ``"CodePipeline_20150709.AcknowledgeJob"``.
    """
    return f"{API_NAMESPACE}_{API_VERSION}.{case_key(operation, Casing.UPPER)}"


def build_request(operation: str, body: Mapping[Any, Any]) -> RequestDescriptor:
    """Wrap an already-cased body into a `RequestDescriptor`.

    Args:
        operation: snake_case operation name.
        body: The request document, ready for JSON encoding.

    Returns:
        A new descriptor with the target and content-type headers.
    """
    headers: tuple[tuple[str, str], ...] = (
        (TARGET_HEADER, operation_target(operation)),
        (CONTENT_TYPE_HEADER, CONTENT_TYPE),
    )
    logger.debug("Built %s request with %d top-level field(s)", operation, len(body))
    return RequestDescriptor(operation=operation, headers=headers, body=dict(body))


def build_operation(
    operation: str,
    required: Mapping[str, object],
    optional: object = None,
    *,
    rules: CaseRules = DEFAULT_CASE_RULES,
) -> RequestDescriptor:
    """Run the full normalize/merge/case pipeline for one operation.

    Args:
        operation: snake_case operation name.
        required: Required fields keyed by their snake_case name. Values may be
            scalars, mappings or pair sequences.
        optional: Optional fields as a mapping or pair sequence; ``None`` is
            treated as empty.
        rules: Casing rules applied to the merged document.

    Returns:
        The request descriptor.
    """
    base: Any = normalize(optional) if optional is not None else {}
    if not isinstance(base, dict):
        # A plain list of values carries no field names; nothing to merge.
        logger.warning("Ignoring non-mapping optional fields for %s: %r", operation, optional)
        base = {}
    logger.trace("%s optional fields: %r", operation, base)

    merged: dict[Any, Any] = {
        **base,
        **{key: _normalize_required(value) for key, value in required.items()},
    }
    body: Any = apply_casing(merged, rules)
    logger.trace("%s cased body: %r", operation, body)
    return build_request(operation, body)


def _normalize_required(value: object) -> object:
    # Required empty sequences (e.g. ``tags=[]``) stay lists on the wire.
    if isinstance(value, (list, tuple)) and not value:
        return []
    return normalize(value)


def direct_request(operation: str, data: Mapping[Any, Any]) -> RequestDescriptor:
    """Build a descriptor from ``data`` as-is, with no normalization or casing.

    Use this for operations or fields the typed wrappers do not cover yet.
    ``data`` is deep-copied, so later changes to the caller's containers do
    not reach the descriptor.

    Args:
        operation: snake_case operation name.
        data: The final request document.

    Returns:
        The request descriptor.
    """
    return build_request(operation, copy.deepcopy(dict(data)))
