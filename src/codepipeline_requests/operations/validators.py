# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : validators.py
#   file_relpath : src/codepipeline_requests/operations/validators.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Allowed values for enumerated operation arguments.

Operation wrappers validate these before any normalization runs, so a bad
value surfaces as `InvalidArgumentError` at the call site rather than as a
service-side validation error.
"""

from __future__ import annotations

from typing import Final

from codepipeline_requests.core.errors import InvalidArgumentError

ACTION_CATEGORIES: Final[tuple[str, ...]] = (
    "Source",
    "Build",
    "Deploy",
    "Test",
    "Invoke",
    "Approval",
)
TRANSITION_TYPES: Final[tuple[str, ...]] = ("Inbound", "Outbound")
RETRY_MODES: Final[tuple[str, ...]] = ("FAILED_ACTIONS", "ALL_ACTIONS")
CONDITION_TYPES: Final[tuple[str, ...]] = ("BEFORE_ENTRY", "ON_SUCCESS")
APPROVAL_STATUSES: Final[tuple[str, ...]] = ("Approved", "Rejected")


def require_choice(argument: str, value: object, allowed: tuple[str, ...]) -> str:
    """Return ``value`` if it is one of ``allowed``.

    Args:
        argument: Argument name used in the error message.
        value: The caller-supplied value.
        allowed: Accepted values (case-sensitive).

    Returns:
        ``value``, unchanged.

    Raises:
        InvalidArgumentError: If ``value`` is not in ``allowed``.
    """
    if not isinstance(value, str) or value not in allowed:
        raise InvalidArgumentError(argument, value, allowed)
    return value
