# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : __init__.py
#   file_relpath : src/codepipeline_requests/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Core, transport-agnostic primitives.

Included modules:

- ``normalize``
  Folds mappings and ``(key, value)`` sequences into one canonical nested
  ``dict``/``list`` shape.

- ``casing``
  Rewrites snake_case keys into the camelCase the service expects, driven by
  an immutable `CaseRules` value.

- ``errors``
  The exception hierarchy shared by the operation wrappers, the registry and
  the configuration loader.

Everything here is pure and free of CLI or I/O concerns.
"""

from __future__ import annotations

from codepipeline_requests.core.casing import (
    DEFAULT_CASE_RULES,
    CaseRules,
    Casing,
    RawKey,
    apply_casing,
    case_key,
    split_words,
)
from codepipeline_requests.core.errors import (
    CodePipelineError,
    ConfigError,
    InvalidArgumentError,
    UnknownOperationError,
)
from codepipeline_requests.core.normalize import NormalizedValue, is_pair_sequence, normalize

__all__ = [
    "DEFAULT_CASE_RULES",
    "CaseRules",
    "Casing",
    "CodePipelineError",
    "ConfigError",
    "InvalidArgumentError",
    "NormalizedValue",
    "RawKey",
    "UnknownOperationError",
    "apply_casing",
    "case_key",
    "is_pair_sequence",
    "normalize",
    "split_words",
]
