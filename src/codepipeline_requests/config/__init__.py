# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : __init__.py
#   file_relpath : src/codepipeline_requests/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Configuration: logging setup and TOML-based casing rules."""

from __future__ import annotations

from codepipeline_requests.config.loaders import (
    case_rules_from_table,
    discover_config_file,
    extract_casing_table,
    load_case_rules,
    load_toml_dict,
)

__all__ = [
    "case_rules_from_table",
    "discover_config_file",
    "extract_casing_table",
    "load_case_rules",
    "load_toml_dict",
]
