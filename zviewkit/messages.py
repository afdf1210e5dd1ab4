"""Translated user interface messages loaded from per-language files."""

from __future__ import annotations

import enum
import os

from .option_file import load_options
from .unicode_file import NotUnicodeFileError


class Language(enum.Enum):
    """A user interface language and the name of its message file."""

    ENGLISH = "english.txt"
    KOREAN = "korean.txt"


class MessageCatalog:
    """Messages read from a language folder, looked up by key."""

    def __init__(self, folder: str | os.PathLike[str], language: Language = Language.ENGLISH) -> None:
        self.folder = folder
        self._messages: dict[str, str] = {}
        self.set_language(language)

    def set_language(self, language: Language) -> None:
        """Load the messages of a language over those already loaded.

        A missing or unreadable file leaves the current messages as they are.
        """
        try:
            messages = load_options(os.path.join(self.folder, language.value))
        except (OSError, NotUnicodeFileError):
            return
        self._messages.update(messages)

    def get(self, key: str) -> str:
        """Return the message for key, or the key itself when it is unknown."""
        return self._messages.get(key, key)