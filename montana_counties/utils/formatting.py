"""Text normalization helpers."""

from __future__ import annotations

from ..core.exceptions import InvalidUserInput

TITLE_DELIMITERS = frozenset(" -&")


def fold_key(value: str) -> str:
    """Trim surrounding whitespace and lower-case ``value``."""

    return value.strip().lower()


def title_case(value: str | None) -> str | None:
    """Capitalize the first letter and every letter following a delimiter.

    Delimiters are space, hyphen and ampersand; all other letters are
    lower-cased. Blank input is returned unchanged.

    >>> title_case("SILVER-bow")
    'Silver-Bow'
    """

    if value is None or not value.strip():
        return value

    chars = []
    for index, char in enumerate(value):
        if index == 0 or value[index - 1] in TITLE_DELIMITERS:
            chars.append(char.upper())
        else:
            chars.append(char.lower())
    return "".join(chars).strip()


def parse_county_code(value: str) -> int:
    """Fold ``value`` and parse it as a numeric county code."""

    folded = fold_key(value)
    if not folded:
        raise InvalidUserInput("Please enter some text")
    try:
        return int(folded)
    except ValueError as exc:
        raise InvalidUserInput(
            f"Invalid county code: {value!r}", details={"input": value}
        ) from exc


def require_text(value: str) -> str:
    """Fold ``value`` and reject blank input."""

    folded = fold_key(value)
    if not folded:
        raise InvalidUserInput("Please enter some text")
    return folded
