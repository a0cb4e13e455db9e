# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : options.py
#   file_relpath : src/codepipeline_requests/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Common CLI options and their resolution logic.

This module centralizes reusable options (verbosity, color, output format)
so commands and the group stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, NoReturn, TypeVar, cast

import click

from codepipeline_requests.cli.errors import CliUsageError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from typing import ParamSpec

    P = ParamSpec("P")

R = TypeVar("R")
E = TypeVar("E", bound=Enum)


class OutputFormat(str, Enum):
    """Output format for listing commands.

    Members:
      TEXT: Human-friendly text output; may include ANSI color if enabled.
      JSON: Machine-readable JSON without color.
    """

    TEXT = "text"
    JSON = "json"


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum (case-insensitive)."""
        if value is None or isinstance(value, self.enum_cls):
            return value

        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }
        key = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        ``verbose_count`` when positive, ``-quiet_count`` when quiet was
        requested, else 0 (terse).

    Raises:
        CliUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise CliUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return verbose_count
    return -quiet_count


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the group context (default 0)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counted ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` flag to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in program output.",
    )(f)


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format text|json`` to a command."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
