# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : __init__.py
#   file_relpath : src/codepipeline_requests/request/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Request envelope infrastructure.

Separation of concerns:

1) Descriptor (immutable value handed to a transport)
   - [`codepipeline_requests.request.descriptor`][codepipeline_requests.request.descriptor]

2) Builders (normalize, merge, case, wrap; no serialization)
   - [`codepipeline_requests.request.builder`][codepipeline_requests.request.builder]
   - Naming: `build_*`, `operation_target`, `direct_request`

3) Serialization (descriptors to strings; no printing)
   - [`codepipeline_requests.request.serializers`][codepipeline_requests.request.serializers]
   - Naming: `serialize_*` returns `str`

Rule of thumb: if it imports `click`, it does not belong here.
"""

from __future__ import annotations

from codepipeline_requests.request.builder import (
    build_operation,
    build_request,
    direct_request,
    operation_target,
)
from codepipeline_requests.request.descriptor import RequestDescriptor, RequestKey
from codepipeline_requests.request.serializers import (
    serialize_body,
    serialize_request,
    to_json_compatible,
)

__all__ = [
    "RequestDescriptor",
    "RequestKey",
    "build_operation",
    "build_request",
    "direct_request",
    "operation_target",
    "serialize_body",
    "serialize_request",
    "to_json_compatible",
]
