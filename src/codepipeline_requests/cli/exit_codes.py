# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : exit_codes.py
#   file_relpath : src/codepipeline_requests/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Exit codes for the CodePipeline Requests CLI.

Values follow the BSD `sysexits` convention so other tooling can interpret
failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Invalid invocation (unknown operation, bad flags or
            arguments that do not bind to the operation). Mirrors BSD
            ``EX_USAGE (64)``.
        DATA_ERROR: Malformed parameters (invalid JSON, a value outside its
            allowed set). Mirrors BSD ``EX_DATAERR (65)``.
        NO_INPUT: A parameters or config file does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Invalid casing configuration. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    NO_INPUT = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
