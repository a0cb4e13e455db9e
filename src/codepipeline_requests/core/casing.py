# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : casing.py
#   file_relpath : src/codepipeline_requests/core/casing.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Recursive camel-casing of mapping keys for the CodePipeline wire format.

Python callers write request data with snake_case keys; the service expects
camelCase. Most keys use a lower-case first word (``role_arn`` -> ``roleArn``),
a few use an upper-case one (``s3_bucket`` -> ``S3Bucket``). `CaseRules`
captures both the default and the exceptions:

- ``default``: the `Casing` applied when no override matches.
- ``keys``: per-key overrides, consulted for every key at the current level.
- ``subkeys``: per-parent replacement tables. While casing the children of a
  key listed here, ``keys`` is swapped for the table registered under it.

Key kinds:
    Plain ``str`` keys are identifiers and get cased. Wrap a key in `RawKey`
    to pass it through verbatim, e.g. for free-form maps whose keys are chosen
    by the caller (``{RawKey("us-east-1"): {...}}``). Non-``str`` keys are
    left alone as well.

Example:
    ```python
    from codepipeline_requests.core.casing import Casing, CaseRules, apply_casing

    rules = CaseRules(default=Casing.LOWER, subkeys={"outer": {"inner": Casing.UPPER}})
    apply_casing({"outer": {"inner": 1, "sibling": 2}, "inner": 3}, rules)
    # {"outer": {"Inner": 1, "sibling": 2}, "inner": 3}
    ```
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from codepipeline_requests.core.normalize import NormalizedValue

# Word boundaries: start of string, a separator, or just before an uppercase letter.
_WORD_BOUNDARY: Final[re.Pattern[str]] = re.compile(r"(?:^|[-_])|(?=[A-Z])")


class Casing(str, Enum):
    """How the first word of a key is cased.

    Attributes:
        UPPER: Every word starts with an uppercase letter (``TestThings``).
        LOWER: The first word is lowercased, following words start with an
            uppercase letter (``testThings``).
    """

    UPPER = "upper"
    LOWER = "lower"


class RawKey(str):
    """A mapping key that must reach the wire exactly as written."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"RawKey({str.__repr__(self)})"


def _freeze(table: Mapping[str, Casing]) -> Mapping[str, Casing]:
    return MappingProxyType({k: Casing(v) for k, v in table.items()})


@dataclass(frozen=True, slots=True)
class CaseRules:
    """Immutable rules for `apply_casing`.

    Attributes:
        default: Casing used when ``keys`` has no entry for a key.
        keys: Per-key casing overrides.
        subkeys: Parent key -> replacement ``keys`` table used for that
            parent's children. ``default`` and ``subkeys`` themselves are not
            replaced.
    """

    default: Casing = Casing.LOWER
    keys: Mapping[str, Casing] = field(default_factory=dict)
    subkeys: Mapping[str, Mapping[str, Casing]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Accept plain strings and dicts, store read-only views.
        object.__setattr__(self, "default", Casing(self.default))
        object.__setattr__(self, "keys", _freeze(self.keys))
        object.__setattr__(
            self,
            "subkeys",
            MappingProxyType({k: _freeze(v) for k, v in self.subkeys.items()}),
        )

    def casing_for(self, key: object) -> Casing:
        """Return the casing that applies to ``key`` at this level."""
        if isinstance(key, str):
            return self.keys.get(key, self.default)
        return self.default

    def for_children_of(self, key: object) -> CaseRules:
        """Return the rules to use for the value stored under ``key``.

        Args:
            key: The parent key (before casing).

        Returns:
            A derived copy whose ``keys`` is the subkey table registered for
            ``key``, or ``self`` when there is none.
        """
        if isinstance(key, str) and key in self.subkeys:
            return replace(self, keys=self.subkeys[key])
        return self


DEFAULT_CASE_RULES: Final[CaseRules] = CaseRules(
    default=Casing.LOWER,
    keys={"s3_bucket": Casing.UPPER, "s3_object_key": Casing.UPPER},
    subkeys={},
)


def split_words(key: str) -> list[str]:
    """Split an identifier into words.

    Separators are ``_`` and ``-``; an uppercase letter also starts a new
    word. Empty pieces are dropped.

    Args:
        key: Identifier such as ``"role_arn"``, ``"abc-def"`` or ``"testThings"``.

    Returns:
        The words in order, e.g. ``["test", "Things"]``.
    """
    return [word for word in _WORD_BOUNDARY.split(key) if word]


def _capitalize_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def case_key(key: Any, casing: Casing = Casing.LOWER) -> Any:
    """Camel-case a single identifier key.

    Args:
        key: The key. `RawKey` instances and non-``str`` values are returned
            unchanged.
        casing: `Casing.LOWER` lowercases the first word; `Casing.UPPER`
            capitalizes it. Following words always get an uppercase first
            character; the rest of each word is kept as split.

    Returns:
        The camel-cased key, e.g. ``"test_things"`` -> ``"testThings"``.
    """
    if not isinstance(key, str) or isinstance(key, RawKey):
        return key

    words: list[str] = split_words(key)
    if not words:
        return ""
    lower_first: bool = Casing(casing) is Casing.LOWER
    head: str = words[0].lower() if lower_first else _capitalize_first(words[0])
    return head + "".join(_capitalize_first(word) for word in words[1:])


def apply_casing(value: NormalizedValue, rules: CaseRules = DEFAULT_CASE_RULES) -> NormalizedValue:
    """Recursively camel-case every mapping key in ``value``.

    Args:
        value: A normalized tree (see
            [`normalize`][codepipeline_requests.core.normalize.normalize]).
        rules: The casing rules for this level.

    Returns:
        A tree of the same shape with cased keys. Lists are traversed with the
        same ``rules``; scalars are returned unchanged.
    """
    if isinstance(value, Mapping):
        return {
            case_key(key, rules.casing_for(key)): apply_casing(item, rules.for_children_of(key))
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [apply_casing(item, rules) for item in value]
    return value
