"""Known image file extensions and the open/save dialog filter built from them."""

from __future__ import annotations

from dataclasses import dataclass, field

from .common import filename_from_full_filename


@dataclass(frozen=True)
class ExtSetting:
    """An image file extension and the index of its icon in the icon library."""

    icon_index: int
    ext: str


_DEFAULT_SETTINGS: tuple[ExtSetting, ...] = (
    ExtSetting(1, "bmp"),
    ExtSetting(1, "wbmp"),
    ExtSetting(2, "jpg"),
    ExtSetting(2, "jpeg"),
    ExtSetting(2, "jpe"),
    ExtSetting(2, "jp2"),
    ExtSetting(2, "j2k"),
    ExtSetting(3, "png"),
    ExtSetting(4, "psd"),
    ExtSetting(5, "gif"),
    ExtSetting(0, "dds"),
    ExtSetting(0, "tga"),
    ExtSetting(0, "pcx"),
    ExtSetting(0, "xpm"),
    ExtSetting(0, "xbm"),
    ExtSetting(0, "tif"),
    ExtSetting(0, "tiff"),
    ExtSetting(0, "cut"),
    ExtSetting(6, "ico"),
    ExtSetting(0, "hdr"),
    ExtSetting(0, "jng"),
    ExtSetting(0, "koa"),
    ExtSetting(0, "mng"),
    ExtSetting(0, "pcd"),
    ExtSetting(0, "ras"),
)


def _extension(filename: str) -> str:
    """Return the extension of filename including its leading dot, or ''."""
    name = filename_from_full_filename(filename)
    dot = name.rfind(".")
    return "" if dot < 0 else name[dot:]


@dataclass
class ExtInfo:
    """The image file extensions the viewer can open."""

    settings: list[ExtSetting] = field(default_factory=lambda: list(_DEFAULT_SETTINGS))

    def is_valid_image_file_ext(self, filename: str) -> bool:
        """Tell whether filename has one of the known image extensions, ignoring case."""
        ext = _extension(filename)
        if len(ext) < 2:
            return False
        wanted = ext[1:].lower()
        return any(setting.ext == wanted for setting in self.settings)

    def file_dialog_filter(self) -> str:
        """Return the NUL-separated filter string for file open and save dialogs."""
        names = ",".join(setting.ext for setting in self.settings)
        patterns = ";".join(f"*.{setting.ext}" for setting in self.settings)
        return f"ImageFiles({names})\0{patterns}\0All(*.*)\0*.*\0"