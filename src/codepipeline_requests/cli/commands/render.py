# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : render.py
#   file_relpath : src/codepipeline_requests/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""`render` command.

Builds the request descriptor for one operation and prints it as JSON.

Parameters are a JSON object of keyword arguments, read from a file or from
STDIN (``--params -``):

```bash
echo '{"name": "MyPipeline"}' | codepipeline-requests render get-pipeline-state --params -
```

Casing rules come from ``--config`` or, failing that, from the nearest
``codepipeline-requests.toml`` / ``pyproject.toml`` above the working
directory.

JSON has no `RawKey`, so the keys of ``artifact_stores``, ``query_param``
and action ``configuration`` maps are passed through as written.
"""

from __future__ import annotations

import inspect
import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

import click

from codepipeline_requests.cli.errors import (
    CliConfigError,
    CliDataError,
    CliNoInputError,
    CliUsageError,
)
from codepipeline_requests.config.loaders import discover_config_file, load_case_rules
from codepipeline_requests.config.logging import get_logger
from codepipeline_requests.core.casing import DEFAULT_CASE_RULES, RawKey
from codepipeline_requests.core.errors import (
    ConfigError,
    InvalidArgumentError,
    UnknownOperationError,
)
from codepipeline_requests.operations.registry import get_operation
from codepipeline_requests.request.serializers import serialize_request

if TYPE_CHECKING:
    from codepipeline_requests.cli.console import ClickConsole
    from codepipeline_requests.config.logging import PipelineLogger
    from codepipeline_requests.core.casing import CaseRules

logger: PipelineLogger = get_logger(__name__)

STDIN_MARKER = "-"

# Maps keyed by caller-chosen names (regions, action property names).
RAW_KEY_TABLES: Final[frozenset[str]] = frozenset({"artifact_stores", "query_param"})
ACTIONS_KEY: Final = "actions"
ACTION_CONFIGURATION_KEY: Final = "configuration"


def read_params(source: str | None) -> dict[str, Any]:
    """Read operation keyword arguments as a JSON object.

    Args:
        source: A file path, ``"-"`` for STDIN, or None for no parameters.

    Returns:
        The decoded JSON object.

    Raises:
        CliNoInputError: If the file does not exist.
        CliDataError: If the input is not a valid JSON object.
    """
    if source is None:
        return {}
    if source == STDIN_MARKER:
        text: str = click.get_text_stream("stdin").read()
        origin = "<stdin>"
    else:
        path = Path(source)
        if not path.is_file():
            raise CliNoInputError(f"Parameters file not found: {source}")
        text = path.read_text(encoding="utf-8")
        origin = str(path)

    try:
        data: Any = json.loads(text) if text.strip() else {}
    except json.JSONDecodeError as e:
        raise CliDataError(f"Invalid JSON in {origin}: {e}") from e
    if not isinstance(data, dict):
        raise CliDataError(f"Parameters in {origin} must be a JSON object, got {type(data).__name__}")
    return data


def mark_raw_keys(value: Any, *, in_action: bool = False) -> Any:
    """Wrap the keys of caller-keyed maps in `RawKey`.

    Applies to ``artifact_stores`` and ``query_param`` maps anywhere in
    ``value`` and to the ``configuration`` map of each item under
    ``actions``. Values below those keys are still walked, so an artifact
    store body keeps its normal casing.

    Args:
        value: Decoded JSON parameters.
        in_action: True while walking the items of an ``actions`` list.

    Returns:
        A copy of ``value`` with the affected keys wrapped.
    """
    if isinstance(value, list):
        return [mark_raw_keys(item, in_action=in_action) for item in value]
    if not isinstance(value, dict):
        return value

    marked: dict[Any, Any] = {}
    for key, item in value.items():
        raw_table: bool = key in RAW_KEY_TABLES or (in_action and key == ACTION_CONFIGURATION_KEY)
        if raw_table and isinstance(item, dict):
            marked[key] = {RawKey(k): mark_raw_keys(v) for k, v in item.items()}
        else:
            marked[key] = mark_raw_keys(item, in_action=key == ACTIONS_KEY)
    return marked


def resolve_case_rules(config: str | None) -> CaseRules:
    """Load casing rules from ``config`` or the discovered config file.

    Raises:
        CliNoInputError: If an explicit config file does not exist.
        CliConfigError: If the config file is malformed.
    """
    path: Path | None
    if config is not None:
        path = Path(config)
        if not path.is_file():
            raise CliNoInputError(f"Config file not found: {config}")
    else:
        path = discover_config_file()
    if path is None:
        logger.debug("No config file found; using default casing rules")
        return DEFAULT_CASE_RULES

    logger.info("Loading casing rules from %s", path)
    try:
        return load_case_rules(path)
    except ConfigError as e:
        raise CliConfigError(str(e)) from e


@click.command(
    name="render",
    help="Build the request for OPERATION and print it as JSON.",
)
@click.argument("operation")
@click.option(
    "--params",
    "params_source",
    metavar="FILE|-",
    default=None,
    help="JSON object of keyword arguments ('-' reads STDIN).",
)
@click.option(
    "--config",
    "config",
    metavar="FILE",
    default=None,
    help="TOML file with a [casing] table (or pyproject.toml).",
)
@click.option(
    "--compact",
    is_flag=True,
    default=False,
    help="Print the descriptor on a single line.",
)
def render_command(
    *,
    operation: str,
    params_source: str | None = None,
    config: str | None = None,
    compact: bool = False,
) -> None:
    """Render one operation's request descriptor.

    Args:
        operation (str): Operation name, snake_case or kebab-case.
        params_source (str | None): Parameters file, ``-`` for STDIN, or None.
        config (str | None): Explicit casing config file.
        compact (bool): Emit single-line JSON.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    try:
        builder = get_operation(operation)
    except UnknownOperationError as e:
        raise CliUsageError(f"{e}. Run 'codepipeline-requests operations' for the list.") from e

    params: dict[str, Any] = mark_raw_keys(read_params(params_source))
    if "rules" in params:
        raise CliUsageError("'rules' cannot be passed as a parameter; use --config instead.")
    try:
        inspect.signature(builder).bind(**params)
    except TypeError as e:
        raise CliUsageError(f"Invalid parameters for '{builder.__name__}': {e}") from e

    rules: CaseRules = resolve_case_rules(config)

    try:
        request = builder(**params, rules=rules)
    except InvalidArgumentError as e:
        raise CliDataError(str(e)) from e

    console.print(serialize_request(request, indent=None if compact else 2))
