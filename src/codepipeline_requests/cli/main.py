# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : main.py
#   file_relpath : src/codepipeline_requests/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Click entry point for the ``codepipeline-requests`` CLI.

Group-level options are initialized once and placed into ``ctx.obj``;
subcommands read the console and verbosity from there.
"""

from __future__ import annotations

import click

from codepipeline_requests.cli.commands.operations import operations_command
from codepipeline_requests.cli.commands.render import render_command
from codepipeline_requests.cli.commands.version import version_command
from codepipeline_requests.cli.console import ClickConsole
from codepipeline_requests.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from codepipeline_requests.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via the environment only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    enable_color = not no_color
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Build AWS CodePipeline API request descriptors.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the codepipeline-requests CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'codepipeline-requests render OPERATION' to build a request.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(operations_command)

cli.add_command(render_command)

if __name__ == "__main__":
    cli()
