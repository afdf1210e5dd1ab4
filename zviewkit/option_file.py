"""Key=value settings stored in UTF-16 text files."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from .unicode_file import read_unicode_lines, write_unicode_lines

_COMMENT_PREFIXES = ("#", "/")
_MIN_LINE_LENGTH = 4


def parse_option_lines(lines: Iterable[str]) -> dict[str, str]:
    """Build a mapping from "key=value" lines.

    Empty lines, lines starting with '#' or '/', lines of three characters or
    fewer and lines without '=' are ignored. A later key replaces an earlier one.
    """
    settings: dict[str, str] = {}
    for line in lines:
        if not line or line.startswith(_COMMENT_PREFIXES):
            continue
        if len(line) < _MIN_LINE_LENGTH:
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        settings[key] = value
    return settings


def load_options(path: str | os.PathLike[str]) -> dict[str, str]:
    """Read a settings file into a mapping."""
    return parse_option_lines(read_unicode_lines(path))


def save_options(path: str | os.PathLike[str], settings: Mapping[str, str]) -> None:
    """Write a mapping to a settings file, keys in sorted order."""
    write_unicode_lines(path, (f"{key}={settings[key]}" for key in sorted(settings)))