"""File IO utilities."""

from __future__ import annotations

import codecs
import os

import chardet

AUTO_ENCODING = "auto"


def detect_encoding(path: os.PathLike[str] | str) -> str:
    """Detect the encoding of a text file."""

    with open(path, "rb") as handle:
        raw = handle.read()
    detection = chardet.detect(raw)
    return detection.get("encoding") or "utf-8"


def check_encoding(encoding: str) -> str:
    """Return ``encoding`` unchanged, raising ``LookupError`` if it is unknown."""

    if encoding != AUTO_ENCODING:
        codecs.lookup(encoding)
    return encoding


def resolve_encoding(path: os.PathLike[str] | str, encoding: str) -> str:
    """Turn ``"auto"`` into the detected encoding of ``path``.

    Empty, missing and pure ASCII files resolve to UTF-8 so that non-ASCII
    text can still be appended to them.
    """

    if encoding != AUTO_ENCODING:
        return encoding
    if not os.path.exists(path) or os.path.getsize(path) == 0:
        return "utf-8"
    detected = detect_encoding(path)
    if codecs.lookup(detected).name == "ascii":
        return "utf-8"
    return detected


def ends_with_newline(path: os.PathLike[str] | str) -> bool:
    """Return ``True`` when ``path`` is empty or its last byte is a newline."""

    with open(path, "rb") as handle:
        handle.seek(0, os.SEEK_END)
        if handle.tell() == 0:
            return True
        handle.seek(-1, os.SEEK_END)
        return handle.read(1) == b"\n"
