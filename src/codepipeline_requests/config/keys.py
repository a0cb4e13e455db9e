# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : keys.py
#   file_relpath : src/codepipeline_requests/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Canonical TOML section and key names for casing configuration.

These constants are the external configuration schema as it appears in
``codepipeline-requests.toml`` and in ``[tool.codepipeline-requests]``
inside ``pyproject.toml``. Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by the casing configuration."""

    # [tool.<name>] in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"

    # [casing]
    SECTION_CASING: Final[str] = "casing"

    KEY_DEFAULT: Final[str] = "default"
    KEY_KEYS: Final[str] = "keys"
    KEY_SUBKEYS: Final[str] = "subkeys"

    ALLOWED_CASING_KEYS: Final[frozenset[str]] = frozenset({KEY_DEFAULT, KEY_KEYS, KEY_SUBKEYS})
