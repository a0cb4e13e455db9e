# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : descriptor.py
#   file_relpath : src/codepipeline_requests/request/descriptor.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""The request descriptor handed to an HTTP transport.

A `RequestDescriptor` is built once per operation call and never mutated.
It carries everything a transport needs (method, path, headers and a JSON
body as Python data) but performs no I/O itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final

from codepipeline_requests.constants import HTTP_METHOD, HTTP_PATH, SERVICE, TARGET_HEADER


class RequestKey:
    """Canonical keys used by `RequestDescriptor.to_dict`."""

    OPERATION: Final[str] = "operation"
    SERVICE: Final[str] = "service"
    METHOD: Final[str] = "method"
    PATH: Final[str] = "path"
    HEADERS: Final[str] = "headers"
    BODY: Final[str] = "body"


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """An immutable description of one CodePipeline API call.

    Attributes:
        operation: snake_case operation name (e.g. ``"create_pipeline"``).
        headers: Exactly two ``(name, value)`` pairs: the ``x-amz-target``
            header naming the operation and the JSON content type.
        body: The normalized, camel-cased request document.
        service: Service identifier used for endpoint resolution.
        method: HTTP method (always ``POST``).
        path: Request path (always ``/``).
    """

    operation: str
    headers: tuple[tuple[str, str], ...]
    body: dict[Any, Any]
    service: str = SERVICE
    method: str = HTTP_METHOD
    path: str = HTTP_PATH

    @property
    def target(self) -> str:
        """The value of the ``x-amz-target`` header."""
        return dict(self.headers)[TARGET_HEADER]

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this descriptor.

        Headers are rendered as a list of ``[name, value]`` pairs to keep
        their order.
        """
        return {
            RequestKey.OPERATION: self.operation,
            RequestKey.SERVICE: self.service,
            RequestKey.METHOD: self.method,
            RequestKey.PATH: self.path,
            RequestKey.HEADERS: [list(h) for h in self.headers],
            RequestKey.BODY: self.body,
        }
