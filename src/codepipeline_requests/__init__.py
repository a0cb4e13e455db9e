# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : __init__.py
#   file_relpath : src/codepipeline_requests/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""CodePipeline Requests package.

Builds request descriptors (method, path, headers, JSON body) for the AWS
CodePipeline control-plane API. Callers describe inputs with snake_case keys
as mappings or ``(key, value)`` sequences; the package normalizes them,
converts keys to the casing the service expects and wraps the result with
the fixed JSON-1.1 headers. Sending the request is left to the caller's
transport.

```python
from codepipeline_requests import get_pipeline_state, serialize_body

request = get_pipeline_state("MyPipeline")
request.target          # 'CodePipeline_20150709.GetPipelineState'
serialize_body(request) # '{"name":"MyPipeline"}'
```
"""

from __future__ import annotations

from codepipeline_requests.constants import PACKAGE_VERSION
from codepipeline_requests.core import (
    DEFAULT_CASE_RULES,
    CaseRules,
    Casing,
    CodePipelineError,
    ConfigError,
    InvalidArgumentError,
    RawKey,
    UnknownOperationError,
    apply_casing,
    case_key,
    normalize,
)
from codepipeline_requests.operations import *  # noqa: F403
from codepipeline_requests.operations import __all__ as _operations_all
from codepipeline_requests.request import (
    RequestDescriptor,
    build_operation,
    build_request,
    direct_request,
    operation_target,
    serialize_body,
    serialize_request,
)

__version__: str = PACKAGE_VERSION

__all__ = [
    "DEFAULT_CASE_RULES",
    "CaseRules",
    "Casing",
    "CodePipelineError",
    "ConfigError",
    "InvalidArgumentError",
    "RawKey",
    "RequestDescriptor",
    "UnknownOperationError",
    "__version__",
    "apply_casing",
    "build_operation",
    "build_request",
    "case_key",
    "direct_request",
    "normalize",
    "operation_target",
    "serialize_body",
    "serialize_request",
    *_operations_all,
]
