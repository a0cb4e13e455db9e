# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : version.py
#   file_relpath : src/codepipeline_requests/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""`version` command.

Prints the package version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from codepipeline_requests.cli.options import (
    OutputFormat,
    get_effective_verbosity,
    output_format_option,
)
from codepipeline_requests.constants import API_VERSION, PACKAGE_NAME, PACKAGE_VERSION

if TYPE_CHECKING:
    from codepipeline_requests.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of codepipeline-requests.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the installed version, and the targeted API version when verbose.

    Args:
        output_format (OutputFormat | None): Optional output format (text or json).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": PACKAGE_VERSION, "api_version": API_VERSION}))
    elif vlevel > 0:
        console.print(console.styled(f"{PACKAGE_NAME} version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(PACKAGE_VERSION, bold=True)}")
        console.print(f"    CodePipeline API {API_VERSION}")
    else:
        console.print(console.styled(PACKAGE_VERSION, bold=True))
