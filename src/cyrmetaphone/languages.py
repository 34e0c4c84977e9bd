from __future__ import annotations

from enum import Enum
from typing import Union


class Language(str, Enum):
    RUSSIAN = "ru"
    UKRAINIAN = "uk"

    @classmethod
    def parse(cls, value: Union["Language", str]) -> "Language":
        """
        Accepts a Language, a code ("ru", "uk", "ua") or a name
        ("russian", "Ukrainian"). Anything else is a caller bug.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(f"Unsupported language: {value!r} (expected one of: ru, uk)")


_ALIASES = {
    "ru": Language.RUSSIAN,
    "russian": Language.RUSSIAN,
    "uk": Language.UKRAINIAN,
    "ua": Language.UKRAINIAN,
    "ukrainian": Language.UKRAINIAN,
}
