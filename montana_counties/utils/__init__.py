"""Utility helpers for the county lookup tool."""

from .formatting import fold_key, parse_county_code, require_text, title_case
from .io import (
    AUTO_ENCODING,
    check_encoding,
    detect_encoding,
    ends_with_newline,
    resolve_encoding,
)

__all__ = [
    "fold_key",
    "parse_county_code",
    "require_text",
    "title_case",
    "AUTO_ENCODING",
    "check_encoding",
    "detect_encoding",
    "ends_with_newline",
    "resolve_encoding",
]
