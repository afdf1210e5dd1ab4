import pytest

from zviewkit.wallpaper import (
    WallpaperStyle,
    clear_desktop_wallpaper,
    set_desktop_wallpaper,
    wallpaper_registry_values,
)


class _Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, values, filename):
        self.calls.append((dict(values), filename))


@pytest.mark.parametrize(
    "style,code",
    [
        (WallpaperStyle.CENTER, "0"),
        (WallpaperStyle.TILE, "1"),
        (WallpaperStyle.STRETCH, "2"),
    ],
)
def test_style_codes(style, code):
    values = wallpaper_registry_values("C:\\Windows\\zviewer_bg.bmp", style)
    assert values["WallpaperStyle"] == code
    assert values["Wallpaper"] == "C:\\Windows\\zviewer_bg.bmp"


@pytest.mark.parametrize(
    "style,tile",
    [
        (WallpaperStyle.CENTER, "0"),
        (WallpaperStyle.TILE, "1"),
        (WallpaperStyle.STRETCH, "0"),
    ],
)
def test_tile_flag_only_for_tile(style, tile):
    assert wallpaper_registry_values("a.bmp", style)["TileWallpaper"] == tile


def test_set_passes_values_and_file_to_writer():
    recorder = _Recorder()
    stored = set_desktop_wallpaper("bg.bmp", WallpaperStyle.STRETCH, recorder)
    assert recorder.calls == [(stored, "bg.bmp")]
    assert stored == wallpaper_registry_values("bg.bmp", WallpaperStyle.STRETCH)


def test_clear_stores_empty_centered_wallpaper():
    recorder = _Recorder()
    stored = clear_desktop_wallpaper(recorder)
    assert stored == {"WallpaperStyle": "0", "Wallpaper": "", "TileWallpaper": "0"}
    assert recorder.calls == [(stored, "")]


def test_writer_error_propagates():
    def failing(values, filename):
        raise OSError("access denied")

    with pytest.raises(OSError):
        set_desktop_wallpaper("bg.bmp", WallpaperStyle.TILE, failing)