# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Tests for loading casing rules from TOML files."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from codepipeline_requests.config.loaders import (
    case_rules_from_table,
    discover_config_file,
    extract_casing_table,
    load_case_rules,
    load_toml_dict,
)
from codepipeline_requests.core.casing import DEFAULT_CASE_RULES, Casing
from codepipeline_requests.core.errors import ConfigError
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


CONFIG_TOML = """\
[casing]
default = "lower"

[casing.keys]
project_name = "upper"

[casing.subkeys.configuration]
s3_bucket = "lower"
"""


def test_load_toml_dict_returns_plain_data(tmp_path: Path) -> None:
    path = tmp_path / "c.toml"
    path.write_text(CONFIG_TOML, encoding="utf-8")
    data = load_toml_dict(path)
    assert type(data) is dict
    assert data["casing"]["keys"] == {"project_name": "upper"}


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Cannot read"):
        load_toml_dict(tmp_path / "missing.toml")


def test_load_toml_dict_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / "bad.toml"
    path.write_text("[casing\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_toml_dict(path)


def test_load_case_rules_merges_over_defaults(tmp_path: Path) -> None:
    path = tmp_path / "codepipeline-requests.toml"
    path.write_text(CONFIG_TOML, encoding="utf-8")
    rules = load_case_rules(path)
    assert rules.default is Casing.LOWER
    assert dict(rules.keys) == {
        "s3_bucket": Casing.UPPER,
        "s3_object_key": Casing.UPPER,
        "project_name": Casing.UPPER,
    }
    assert dict(rules.subkeys["configuration"]) == {"s3_bucket": Casing.LOWER}


def test_load_case_rules_from_pyproject(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "x"\n\n[tool.codepipeline-requests.casing]\ndefault = "UPPER"\n',
        encoding="utf-8",
    )
    rules = load_case_rules(path)
    assert rules.default is Casing.UPPER
    assert rules.keys == DEFAULT_CASE_RULES.keys


def test_load_case_rules_without_table_returns_base(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert load_case_rules(path) is DEFAULT_CASE_RULES


@parametrize(
    ("table", "message"),
    [
        ({"default": "title"}, "invalid casing"),
        ({"default": 1}, "invalid casing"),
        ({"keys": {"a": "sideways"}}, "casing.keys.a"),
        ({"keys": ["a"]}, "must be a table"),
        ({"subkeys": {"p": "upper"}}, "casing.subkeys.p must be a table"),
        ({"subkeys": "upper"}, "must be a table"),
        ({"colour": "red"}, "Unknown key"),
    ],
)
def test_case_rules_from_table_rejects_bad_values(table: dict[str, object], message: str) -> None:
    with pytest.raises(ConfigError, match=message):
        case_rules_from_table(table)


def test_case_rules_from_table_empty_keeps_base() -> None:
    rules = case_rules_from_table({})
    assert rules == DEFAULT_CASE_RULES


def test_extract_casing_table_rejects_scalar() -> None:
    with pytest.raises(ConfigError):
        extract_casing_table({"casing": "upper"})
    assert extract_casing_table({}) is None
    assert extract_casing_table({"tool": {}}, pyproject=True) is None


def test_discover_prefers_dedicated_file(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.codepipeline-requests]\n", encoding="utf-8")
    (tmp_path / "codepipeline-requests.toml").write_text(CONFIG_TOML, encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert discover_config_file(nested) == (tmp_path / "codepipeline-requests.toml").resolve()


def test_discover_uses_pyproject_with_tool_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "[tool.codepipeline-requests.casing]\ndefault = 'upper'\n", encoding="utf-8"
    )
    assert discover_config_file(tmp_path) == (tmp_path / "pyproject.toml").resolve()


def test_discover_skips_unrelated_pyproject(tmp_path: Path) -> None:
    project = tmp_path / "proj"
    project.mkdir()
    (project / "pyproject.toml").write_text("[tool.black]\n", encoding="utf-8")
    found = discover_config_file(project)
    assert found is None or not found.is_relative_to(project.resolve())


@parametrize("tool_value", ['"x"', "1"])
def test_load_case_rules_rejects_scalar_tool(tmp_path: Path, tool_value: str) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text(f"tool = {tool_value}\n", encoding="utf-8")
    with pytest.raises(ConfigError, match=r"\[tool\] must be a table"):
        load_case_rules(path)


def test_discover_skips_pyproject_with_scalar_tool(tmp_path: Path) -> None:
    project = tmp_path / "proj"
    project.mkdir()
    (project / "pyproject.toml").write_text("tool = 1\n", encoding="utf-8")
    found = discover_config_file(project)
    assert found is None or not found.is_relative_to(project.resolve())
