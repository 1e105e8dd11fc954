"""Case conversions for module names.

The rules are intentionally narrow: only underscores separate words for the
Pascal/camel conversions, and hyphens are left untouched.  Matching is ASCII
only so the output stays a valid TypeScript identifier fragment.
"""

from __future__ import annotations

import re

_PASCAL_PATTERN = re.compile(r"^\w|_\w", re.ASCII)
_UNDERSCORE_CHAR = re.compile(r"_.")
_FIRST_WORD_CHAR = re.compile(r"^\w", re.ASCII)
_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")


def to_pascal_case(value: str) -> str:
    """Convert ``some_thing`` to ``SomeThing``.

    Uppercases the first character and every character following an
    underscore, dropping that underscore.
    """
    return _PASCAL_PATTERN.sub(
        lambda match: match.group(0).replace("_", "", 1).upper(), value
    )


def to_camel_case(value: str) -> str:
    """Convert ``some_thing`` to ``someThing``."""
    camel = _UNDERSCORE_CHAR.sub(lambda match: match.group(0)[1].upper(), value)
    return _FIRST_WORD_CHAR.sub(lambda match: match.group(0).lower(), camel, count=1)


def to_kebab_case(value: str) -> str:
    """Convert ``SomeThing`` to ``some-thing``."""
    return _LOWER_UPPER.sub(r"\1-\2", value).lower()
