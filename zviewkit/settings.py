"""Viewer options with defaults, kept in a UTF-16 key=value file."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass

from .option_file import load_options, save_options
from .unicode_file import NotUnicodeFileError

OPTION_FILENAME = "zviewer.ini"

# Key in the settings file and the Options attribute it is stored in.
_PERSISTED: tuple[tuple[str, str], ...] = (
    ("maximumcachememoryMB", "max_cache_memory_mb"),
    ("maximumcachefilenum", "max_cache_image_num"),
    ("loop_view", "loop_images"),
    ("stretch_small_to_big", "small_to_big_stretch"),
    ("stretch_big_to_small", "big_to_small_stretch"),
    ("use_open_cmd_shell", "use_open_cmd_in_shell"),
    ("use_preview_shell", "use_preview_in_shell"),
    ("use_debug", "use_debug"),
    ("use_auto_rotation", "use_auto_rotation"),
    ("last_copy_directory", "last_copy_directory"),
    ("last_move_directory", "last_move_directory"),
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    """Read a leading integer the way atoi does: 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def default_option_path() -> str:
    """Return the settings file in the local application data folder.

    Falls back to the folder of the running program when that folder is unknown.
    """
    base = os.environ.get("LOCALAPPDATA")
    if not base:
        base = os.path.dirname(os.path.abspath(sys.argv[0] or "."))
    return os.path.join(base, OPTION_FILENAME)


@dataclass
class Options:
    """Viewer options. Those listed for the settings file are saved; the rest last one session."""

    max_cache_memory_mb: int = 50
    max_cache_image_num: int = 50
    loop_images: bool = False
    small_to_big_stretch: bool = False
    big_to_small_stretch: bool = False
    use_open_cmd_in_shell: bool = False
    use_preview_in_shell: bool = True
    use_debug: bool = True
    use_auto_rotation: bool = True
    last_copy_directory: str = ""
    last_move_directory: str = ""

    right_top_first_draw: bool = False
    slide_mode: bool = False
    slide_mode_period_ms: int = 5000
    always_on_top: bool = False
    full_screen: bool = False
    dont_save: bool = False

    def to_mapping(self) -> dict[str, str]:
        """Return the saved options as settings-file text values."""
        mapping: dict[str, str] = {}
        for key, attr in _PERSISTED:
            value = getattr(self, attr)
            if isinstance(value, bool):
                mapping[key] = "true" if value else "false"
            else:
                mapping[key] = str(value)
        return mapping

    def apply_mapping(self, mapping: dict[str, str]) -> None:
        """Set the saved options found in mapping; keys not present are left alone."""
        for key, attr in _PERSISTED:
            if key not in mapping:
                continue
            text = mapping[key]
            current = getattr(self, attr)
            if isinstance(current, bool):
                setattr(self, attr, text == "true")
            elif isinstance(current, int):
                setattr(self, attr, _to_int(text))
            else:
                setattr(self, attr, text)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> Options:
        """Return default options overridden by the settings file, if it can be read."""
        options = cls()
        try:
            mapping = load_options(path if path is not None else default_option_path())
        except (OSError, NotUnicodeFileError):
            return options
        options.apply_mapping(mapping)
        return options

    def save(self, path: str | os.PathLike[str] | None = None) -> None:
        """Write the saved options to the settings file unless saving is turned off."""
        if self.dont_save:
            return
        save_options(path if path is not None else default_option_path(), self.to_mapping())