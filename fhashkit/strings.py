"""Per-language string tables with fallback to a base language."""

from __future__ import annotations

import threading
from collections.abc import Mapping

BASE_LANG = -1


class StringsMap:
    """A read-only table of localised strings keyed by identifier."""

    def __init__(self, strings: Mapping[str, str] | None = None) -> None:
        self._strings = dict(strings or {})

    def get(self, key: str) -> str | None:
        """Return the string for ``key``, or None if the table lacks it."""
        return self._strings.get(key)


class StringsManager:
    """Process-wide registry of string tables for each language id."""

    _instance: StringsManager | None = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._lang_maps: dict[int, StringsMap] = {}

    @classmethod
    def instance(cls) -> StringsManager:
        """Return the shared manager, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared manager and every table registered with it."""
        with cls._instance_lock:
            cls._instance = None

    def register(self, lang_id: int, strings_map: StringsMap) -> None:
        """Register (or replace) the table for ``lang_id``."""
        self._lang_maps[lang_id] = strings_map

    def get_string(self, lang_id: int, key: str) -> str:
        """Look ``key`` up for ``lang_id``, then in the base table, else return the key."""
        for lang in (lang_id, BASE_LANG):
            table = self._lang_maps.get(lang)
            if table is not None:
                value = table.get(key)
                if value is not None:
                    return value
        return key


_ui_lang_lock = threading.Lock()
_ui_lang = BASE_LANG


def register_strings_for_lang(lang_id: int, strings_map: StringsMap) -> None:
    """Register a table with the shared manager."""
    StringsManager.instance().register(lang_id, strings_map)


def set_current_ui_lang(lang_id: int) -> None:
    """Choose the language used by :func:`get_string`."""
    global _ui_lang
    with _ui_lang_lock:
        _ui_lang = lang_id


def current_ui_lang() -> int:
    """Return the language used by :func:`get_string`."""
    with _ui_lang_lock:
        return _ui_lang


def get_string(key: str) -> str:
    """Return ``key`` localised for the current UI language."""
    return StringsManager.instance().get_string(current_ui_lang(), key)