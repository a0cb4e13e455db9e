# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""CLI test helpers.

`run_cli()` invokes the Click group in-process; `run_cli_in()` does the same
from a given working directory so config discovery sees only the files the
test created.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from codepipeline_requests.cli.exit_codes import ExitCode
from codepipeline_requests.cli.main import cli
from codepipeline_requests.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["operations"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def run_cli_in(
    cwd: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory."""
    saved: str = os.getcwd()
    try:
        os.chdir(cwd)
        return run_cli(argv, input_text=input_text)
    finally:
        os.chdir(saved)


def assert_SUCCESS(result: Result) -> None:  # noqa: N802
    """Assert that the command exited with `ExitCode.SUCCESS`."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Reinstall the suite's TRACE logging after the CLI reconfigured it."""
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)
