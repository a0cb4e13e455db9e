# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : operations.py
#   file_relpath : src/codepipeline_requests/cli/commands/operations.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""`operations` command.

Lists every registered operation with the target header it sends.
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
from codepipeline_requests.operations.registry import describe_operations

if TYPE_CHECKING:
    from codepipeline_requests.cli.console import ClickConsole


@click.command(
    name="operations",
    help="List the supported CodePipeline operations.",
)
@output_format_option
def operations_command(*, output_format: OutputFormat | None = None) -> None:
    """List operation names; with ``-v`` (or JSON) include the target header.

    Args:
        output_format (OutputFormat | None): Optional output format (text or json).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel = get_effective_verbosity(ctx)

    entries = describe_operations()
    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps(entries, indent=2))
        return

    if vlevel > 0:
        console.print(console.styled("Supported operations:\n", bold=True, underline=True))
    width = max(len(e["name"]) for e in entries)
    for entry in entries:
        if vlevel > 0:
            target = console.styled(entry["target"], dim=True)
            console.print(f"  {entry['name']:<{width}}  {target}")
        else:
            console.print(entry["name"])
