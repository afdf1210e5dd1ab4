import pytest

from zviewkit.messages import Language, MessageCatalog
from zviewkit.unicode_file import write_unicode_lines


@pytest.fixture
def folder(tmp_path):
    write_unicode_lines(
        tmp_path / "english.txt",
        ["# comment", "VIEW_IN_ZVIEWER=View in viewer", "SAVE=Save as"],
    )
    write_unicode_lines(tmp_path / "korean.txt", ["VIEW_IN_ZVIEWER=보기"])
    return tmp_path


def test_english_is_loaded_by_default(folder):
    catalog = MessageCatalog(folder)
    assert catalog.get("VIEW_IN_ZVIEWER") == "View in viewer"
    assert catalog.get("SAVE") == "Save as"


def test_unknown_key_returns_key(folder):
    catalog = MessageCatalog(folder)
    assert catalog.get("CANNOT_LOAD_IMAGE_FILE") == "CANNOT_LOAD_IMAGE_FILE"


def test_korean_overrides_loaded_messages(folder):
    catalog = MessageCatalog(folder)
    catalog.set_language(Language.KOREAN)
    assert catalog.get("VIEW_IN_ZVIEWER") == "보기"
    assert catalog.get("SAVE") == "Save as"


def test_missing_folder_gives_keys(tmp_path):
    catalog = MessageCatalog(tmp_path / "absent")
    assert catalog.get("SAVE") == "SAVE"


def test_unreadable_language_file_keeps_messages(folder):
    (folder / "korean.txt").write_bytes(b"plain")
    catalog = MessageCatalog(folder)
    catalog.set_language(Language.KOREAN)
    assert catalog.get("VIEW_IN_ZVIEWER") == "View in viewer"


def test_language_file_names_are_read(tmp_path):
    write_unicode_lines(tmp_path / "english.txt", ["GREETING=hello"])
    write_unicode_lines(tmp_path / "korean.txt", ["GREETING=annyeong"])
    catalog = MessageCatalog(tmp_path)
    assert catalog.get("GREETING") == "hello"
    catalog.set_language(Language.KOREAN)
    assert catalog.get("GREETING") == "annyeong"
    catalog.set_language(Language.ENGLISH)
    assert catalog.get("GREETING") == "hello"