# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : constants.py
#   file_relpath : src/codepipeline_requests/constants.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""CodePipeline Requests constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

PACKAGE_NAME: Final[str] = "codepipeline-requests"
PACKAGE_VERSION: str = get_version(PACKAGE_NAME)

# Service identity
SERVICE: Final[str] = "codepipeline"
API_NAMESPACE: Final[str] = "CodePipeline"
API_VERSION: Final[str] = "20150709"

# Request envelope
HTTP_METHOD: Final[str] = "POST"
HTTP_PATH: Final[str] = "/"
TARGET_HEADER: Final[str] = "x-amz-target"
CONTENT_TYPE_HEADER: Final[str] = "content-type"
CONTENT_TYPE: Final[str] = "application/x-amz-json-1.1"

# Config discovery
CONFIG_FILE_NAME: Final[str] = "codepipeline-requests.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "codepipeline-requests"
LOG_LEVEL_ENV_VAR: Final[str] = "CODEPIPELINE_REQUESTS_LOG_LEVEL"
