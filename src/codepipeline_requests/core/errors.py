# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : errors.py
#   file_relpath : src/codepipeline_requests/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Exceptions raised by the request-building layer.

The normalizer and key-caser never raise; these errors come from argument
validation in the operation wrappers, registry lookups and configuration
loading. The CLI translates them into Click exceptions with exit codes (see
[`codepipeline_requests.cli.errors`][codepipeline_requests.cli.errors]).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class CodePipelineError(Exception):
    """Base class for all CodePipeline Requests errors."""


class InvalidArgumentError(CodePipelineError, ValueError):
    """An enumerated argument is outside its allowed set of values.

    Attributes:
        argument: Name of the offending argument (e.g. ``"category"``).
        value: The rejected value.
        allowed: The accepted values, in declaration order.
    """

    def __init__(self, argument: str, value: object, allowed: Iterable[str]) -> None:
        self.argument: str = argument
        self.value: object = value
        self.allowed: tuple[str, ...] = tuple(allowed)
        super().__init__(
            f"Invalid {argument} {value!r} - valid choices: {', '.join(self.allowed)}"
        )


class UnknownOperationError(CodePipelineError, KeyError):
    """No operation is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name: str = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown operation '{self.name}'"


class ConfigError(CodePipelineError):
    """Casing configuration is missing, unreadable or malformed."""
