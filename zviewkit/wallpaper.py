"""Setting and clearing the desktop wallpaper through the user's desktop settings."""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping

DESKTOP_KEY = "Control Panel\\Desktop"

# Receives the values to store under DESKTOP_KEY and the bitmap to apply.
WallpaperWriter = Callable[[Mapping[str, str], str], None]


class WallpaperStyle(enum.Enum):
    """How the wallpaper bitmap is laid out; the value is the stored style code."""

    CENTER = "0"
    TILE = "1"
    STRETCH = "2"


def wallpaper_registry_values(filename: str, style: WallpaperStyle) -> dict[str, str]:
    """Return the desktop setting values that select filename in the given style."""
    return {
        "WallpaperStyle": style.value,
        "Wallpaper": filename,
        "TileWallpaper": "1" if style is WallpaperStyle.TILE else "0",
    }


def set_desktop_wallpaper(
    filename: str, style: WallpaperStyle, writer: WallpaperWriter
) -> dict[str, str]:
    """Store the wallpaper settings through writer and return what was stored.

    The bitmap named by filename should be a BMP file.
    """
    values = wallpaper_registry_values(filename, style)
    writer(values, filename)
    return values


def clear_desktop_wallpaper(writer: WallpaperWriter) -> dict[str, str]:
    """Remove the desktop wallpaper."""
    return set_desktop_wallpaper("", WallpaperStyle.CENTER, writer)