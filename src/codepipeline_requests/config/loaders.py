# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : loaders.py
#   file_relpath : src/codepipeline_requests/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Load casing rules from TOML.

Sources, in lookup order:
- an explicit file passed by the caller (``--config`` on the CLI);
- ``codepipeline-requests.toml`` with a top-level ``[casing]`` table;
- ``pyproject.toml`` with ``[tool.codepipeline-requests.casing]``.

Parsing is done with `tomlkit` and returned as plain ``dict`` structures.
A ``[casing]`` table extends the built-in rules rather than replacing them:

```toml
[casing]
default = "lower"

[casing.keys]
s3_bucket = "upper"

[casing.subkeys.configuration]
project_name = "upper"
```
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from codepipeline_requests.config.keys import Toml
from codepipeline_requests.config.logging import get_logger
from codepipeline_requests.constants import CONFIG_FILE_NAME, PYPROJECT_TOOL_SECTION
from codepipeline_requests.core.casing import DEFAULT_CASE_RULES, CaseRules, Casing
from codepipeline_requests.core.errors import ConfigError

if TYPE_CHECKING:
    from codepipeline_requests.config.logging import PipelineLogger

TomlTable = dict[str, Any]

logger: PipelineLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content as plain Python data.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_casing_table(data: TomlTable, *, pyproject: bool = False) -> TomlTable | None:
    """Return the ``casing`` table from parsed TOML data, if present.

    Args:
        data: Parsed TOML document.
        pyproject: If True, look under ``[tool.codepipeline-requests]``.

    Returns:
        The casing table, or None when the document has none.

    Raises:
        ConfigError: If the section exists but is not a table.
    """
    section: Any = data
    if pyproject:
        tool: Any = data.get(Toml.SECTION_TOOL, {})
        if not isinstance(tool, dict):
            raise ConfigError(f"[{Toml.SECTION_TOOL}] must be a table, got {type(tool).__name__}")
        section = tool.get(PYPROJECT_TOOL_SECTION)
        if section is None:
            return None
        if not isinstance(section, dict):
            raise ConfigError(f"[{Toml.SECTION_TOOL}.{PYPROJECT_TOOL_SECTION}] must be a table")
    table: Any = section.get(Toml.SECTION_CASING)
    if table is None:
        return None
    if not isinstance(table, dict):
        raise ConfigError(f"[{Toml.SECTION_CASING}] must be a table, got {type(table).__name__}")
    return cast("TomlTable", table)


def _parse_casing(value: Any, where: str) -> Casing:
    if isinstance(value, str):
        try:
            return Casing(value.strip().lower())
        except ValueError:
            pass
    choices: str = ", ".join(c.value for c in Casing)
    raise ConfigError(f"{where}: invalid casing {value!r} - valid choices: {choices}")


def _parse_key_table(value: Any, where: str) -> dict[str, Casing]:
    if not isinstance(value, dict):
        raise ConfigError(f"{where} must be a table, got {type(value).__name__}")
    return {str(k): _parse_casing(v, f"{where}.{k}") for k, v in value.items()}


def case_rules_from_table(table: TomlTable, base: CaseRules = DEFAULT_CASE_RULES) -> CaseRules:
    """Build `CaseRules` by layering a ``[casing]`` table over ``base``.

    Args:
        table: The parsed ``casing`` table.
        base: Rules to extend; ``keys`` and ``subkeys`` entries from ``table``
            are merged over those of ``base``.

    Returns:
        A new `CaseRules` instance.

    Raises:
        ConfigError: On unknown keys or invalid casing values.
    """
    unknown: set[str] = set(table) - Toml.ALLOWED_CASING_KEYS
    if unknown:
        raise ConfigError(
            f"Unknown key(s) in [{Toml.SECTION_CASING}]: {', '.join(sorted(unknown))}"
        )

    default: Casing = base.default
    if Toml.KEY_DEFAULT in table:
        default = _parse_casing(table[Toml.KEY_DEFAULT], f"{Toml.SECTION_CASING}.{Toml.KEY_DEFAULT}")

    keys: dict[str, Casing] = dict(base.keys)
    if Toml.KEY_KEYS in table:
        keys.update(_parse_key_table(table[Toml.KEY_KEYS], f"{Toml.SECTION_CASING}.{Toml.KEY_KEYS}"))

    subkeys: dict[str, dict[str, Casing]] = {k: dict(v) for k, v in base.subkeys.items()}
    if Toml.KEY_SUBKEYS in table:
        where: str = f"{Toml.SECTION_CASING}.{Toml.KEY_SUBKEYS}"
        raw_subkeys: Any = table[Toml.KEY_SUBKEYS]
        if not isinstance(raw_subkeys, dict):
            raise ConfigError(f"{where} must be a table, got {type(raw_subkeys).__name__}")
        for parent, sub in raw_subkeys.items():
            subkeys.setdefault(str(parent), {}).update(_parse_key_table(sub, f"{where}.{parent}"))

    rules = CaseRules(default=default, keys=keys, subkeys=subkeys)
    logger.debug(
        "Loaded casing rules: default=%s, %d key override(s), %d subkey table(s)",
        rules.default.value,
        len(rules.keys),
        len(rules.subkeys),
    )
    return rules


def load_case_rules(path: Path, base: CaseRules = DEFAULT_CASE_RULES) -> CaseRules:
    """Load casing rules from a TOML file.

    ``pyproject.toml`` files are read from ``[tool.codepipeline-requests.casing]``;
    any other file from its top-level ``[casing]`` table. A file without a
    casing table yields ``base`` unchanged.

    Raises:
        ConfigError: If the file is unreadable or the table is malformed.
    """
    data: TomlTable = load_toml_dict(path)
    table: TomlTable | None = extract_casing_table(data, pyproject=path.name == "pyproject.toml")
    if table is None:
        logger.info("No casing table in %s; using base rules", path)
        return base
    return case_rules_from_table(table, base)


def discover_config_file(start: Path | None = None) -> Path | None:
    """Find the nearest config file, walking up from ``start`` (default: CWD).

    In each directory ``codepipeline-requests.toml`` wins over a
    ``pyproject.toml`` that has a ``[tool.codepipeline-requests]`` section.

    Returns:
        The path of the config file, or None if none is found.
    """
    current: Path = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject: Path = directory / "pyproject.toml"
        if pyproject.is_file():
            try:
                data: TomlTable = load_toml_dict(pyproject)
            except ConfigError:
                logger.warning("Skipping unreadable %s during config discovery", pyproject)
                continue
            tool: Any = data.get(Toml.SECTION_TOOL, {})
            if not isinstance(tool, dict):
                logger.warning(
                    "Skipping %s during config discovery: [%s] is not a table",
                    pyproject,
                    Toml.SECTION_TOOL,
                )
                continue
            if PYPROJECT_TOOL_SECTION in tool:
                return pyproject
    return None
