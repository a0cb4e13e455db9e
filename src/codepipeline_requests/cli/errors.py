# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : errors.py
#   file_relpath : src/codepipeline_requests/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Exceptions for the CodePipeline Requests CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with
    standardized messages and exit codes. Library errors from
    `codepipeline_requests.core.errors` are translated into these at the
    command boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from codepipeline_requests.cli.exit_codes import ExitCode


class CliError(click.ClickException):
    """Base class for all CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class CliUsageError(CliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CliDataError(CliError):
    """Error for malformed input data (bad JSON, invalid argument values)."""

    exit_code = ExitCode.DATA_ERROR


class CliNoInputError(CliError):
    """Error when an input file does not exist."""

    exit_code = ExitCode.NO_INPUT


class CliConfigError(CliError):
    """Error for configuration errors (unreadable/malformed casing config)."""

    exit_code = ExitCode.CONFIG_ERROR
