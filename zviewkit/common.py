"""Shared helpers: size fitting, path splitting and file list ordering."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

_SEPARATORS = ("/", "\\")
_MAX_DUMP_FILES = 100


@dataclass(frozen=True)
class Size:
    """A width and height in pixels."""

    width: int
    height: int


@dataclass
class FileData:
    """A file entry as shown in a folder listing."""

    name: str
    modified: int = 0
    size: int = 0


def resized_big_to_small(maximum: Size, original: Size) -> Size:
    """Shrink original to fit inside maximum, keeping its aspect ratio.

    An original that already fits is returned unchanged.
    """
    if original.width <= maximum.width and original.height <= maximum.height:
        return original
    if original.width <= 0 or original.height <= 0:
        raise ValueError(f"cannot scale {original}")

    width_rate = maximum.width / original.width
    height_rate = maximum.height / original.height
    rate = width_rate if height_rate >= width_rate else height_rate
    return Size(int(original.width * rate), int(original.height * rate))


def resized_small_to_big(maximum: Size, original: Size) -> Size:
    """Scale original so it fills maximum on one side, keeping its aspect ratio."""
    if original.width > maximum.width and original.height > maximum.height:
        return resized_big_to_small(maximum, original)
    if original.width <= 0 or original.height <= 0:
        raise ValueError(f"cannot scale {original}")
    if maximum.width <= 0 or maximum.height <= 0:
        raise ValueError(f"cannot scale into {maximum}")

    width_rate = original.width / maximum.width
    height_rate = original.height / maximum.height
    if height_rate <= width_rate:
        return Size(maximum.width, maximum.width * original.height // original.width)
    return Size(original.width * maximum.height // original.height, maximum.height)


def _split_drive(path: str) -> tuple[str, str]:
    if len(path) >= 2 and path[1] == ":":
        return path[:2], path[2:]
    return "", path


def _last_separator(path: str) -> int:
    return max(path.rfind(sep) for sep in _SEPARATORS)


def folder_from_full_filename(path: str) -> str:
    """Return the drive and folder part of a path, with its trailing separator."""
    drive, rest = _split_drive(path)
    index = _last_separator(rest)
    return drive + rest[: index + 1]


def filename_from_full_filename(path: str) -> str:
    """Return the file name with its extension, without drive or folder."""
    _, rest = _split_drive(path)
    return rest[_last_separator(rest) + 1 :]


def filename_without_ext(path: str) -> str:
    """Return the file name without drive, folder or extension."""
    name = filename_from_full_filename(path)
    dot = name.rfind(".")
    return name if dot < 0 else name[:dot]


def dump_filename(folder: str | os.PathLike[str], version: str) -> str:
    """Return the first unused crash dump file name in folder.

    Names run from ZViewer<version>_0.dmp to ZViewer<version>_99.dmp; when all
    exist the last one is returned.
    """
    candidate = ""
    for number in range(_MAX_DUMP_FILES):
        candidate = os.path.join(folder, f"ZViewer{version}_{number}.dmp")
        if not os.path.exists(candidate):
            break
    return candidate


def sort_by_name(files: Iterable[FileData]) -> list[FileData]:
    """Order files by name, ignoring case."""
    return sorted(files, key=lambda item: item.name.lower())


def sort_by_size(files: Iterable[FileData]) -> list[FileData]:
    """Order files from largest to smallest."""
    return sorted(files, key=lambda item: item.size, reverse=True)


def sort_by_modified(files: Iterable[FileData]) -> list[FileData]:
    """Order files from most recently modified to oldest."""
    return sorted(files, key=lambda item: item.modified, reverse=True)


def sort_by_length_then_name(names: Iterable[str]) -> list[str]:
    """Order names by length, then by exact text."""
    return sorted(names, key=lambda name: (len(name), name))