"""Filesystem-safe names for generated folders and fixture files."""

from __future__ import annotations

import re

NOT_ALLOWED_CHARS = re.compile(r'[<>:"/\\|?*]')
LINE_BREAKS = re.compile(r"[\r\n]")
WHITESPACE_RUN = re.compile(r"\s+")


def sanitize(text: str | None) -> str:
    """Turn free text (titles, descriptions) into a folder or file name token.

    Line breaks are dropped, surrounding whitespace trimmed, inner whitespace
    runs replaced by a single underscore and characters that Windows or POSIX
    refuse in file names removed. Empty input gives an empty token.
    """

    if not text:
        return ""
    name = LINE_BREAKS.sub("", text).strip()
    name = WHITESPACE_RUN.sub("_", name)
    return NOT_ALLOWED_CHARS.sub("", name)
