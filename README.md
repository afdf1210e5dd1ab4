# zviewkit

Building blocks for a desktop image viewer: option files, known image
extensions, translated messages, size fitting, file-list ordering and desktop
wallpaper settings. Pure Python, no third-party dependencies.

## Install

```
pip install zviewkit
pip install "zviewkit[test]"   # with the test tools
```

## What is inside

- `zviewkit.unicode_file`: read and write UTF-16 text files with a byte-order
  mark. `read_unicode_lines(path)` accepts little- or big-endian files and
  returns the lines without `\r` or `\n`; `write_unicode_lines(path, lines)`
  writes little-endian UTF-16 with a mark and CRLF line ends. A file that is
  too short, has an odd length or lacks a mark raises `NotUnicodeFileError`.
- `zviewkit.option_file`: `key=value` option files. `parse_option_lines`,
  `load_options` and `save_options` (keys written in sorted order). Lines that
  are empty, three characters or shorter, start with `#` or `/`, or have no
  `=` are ignored; a later key replaces an earlier one.
- `zviewkit.common`:
  - `Size`, `resized_big_to_small(maximum, original)` (shrink to fit, keeping
    the aspect ratio) and `resized_small_to_big(maximum, original)` (fill one
    side of the maximum).
  - Path helpers accepting `/` or `\` and a drive letter:
    `folder_from_full_filename`, `filename_from_full_filename`,
    `filename_without_ext`.
  - `dump_filename(folder, version)`: the first unused name from
    `ZViewer<version>_0.dmp` to `ZViewer<version>_99.dmp`.
  - `FileData` with `sort_by_name` (case-insensitive), `sort_by_size`
    (largest first), `sort_by_modified` (newest first), and
    `sort_by_length_then_name` for plain strings.
- `zviewkit.ext_info`: `ExtInfo` holds the known image extensions as
  `ExtSetting` entries (icon index and extension).
  `is_valid_image_file_ext(filename)` checks an extension ignoring case;
  `file_dialog_filter()` returns the NUL-separated filter string for open and
  save dialogs.
- `zviewkit.settings`: `Options`, a dataclass of viewer options with defaults.
  `to_mapping()` / `apply_mapping()` convert the saved options to and from
  text values; `Options.load(path)` falls back to defaults when the file cannot
  be read; `save(path)` does nothing when `dont_save` is set.
  `default_option_path()` points at `zviewer.ini` in `LOCALAPPDATA`, or next to
  the running program.
- `zviewkit.messages`: `MessageCatalog(folder, language)` loads
  `english.txt` or `korean.txt` (see `Language`) from a folder;
  `get(key)` returns the key itself when no message is known.
- `zviewkit.wallpaper`: `WallpaperStyle` (CENTER, TILE, STRETCH),
  `wallpaper_registry_values`, and `set_desktop_wallpaper` /
  `clear_desktop_wallpaper`, which hand the values to a writer callable you
  supply.

## Example

```python
from zviewkit.common import Size, resized_big_to_small
from zviewkit.ext_info import ExtInfo

print(resized_big_to_small(Size(128, 128), Size(1024, 768)))  # Size(width=128, height=96)
print(ExtInfo().is_valid_image_file_ext("holiday.JPG"))         # True
```

## What it does not do

- It does not decode, display, resize or save images; `resized_big_to_small`
  and friends only compute sizes.
- It does not write the desktop settings itself: the wallpaper functions call
  the writer you pass in.
- It provides no file-manager context menu and no command-line program.