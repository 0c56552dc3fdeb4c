"""Persisted settings scoped to one configuration section."""
from __future__ import annotations

from abc import ABC, abstractmethod

from core import storage
from core.constants import PROFILES_SETTING_KEY, SETTINGS_CPY_SECTION


class SettingStore(ABC):
    @abstractmethod
    def get(self, key: str) -> str | None:
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: str | None) -> None:
        raise NotImplementedError

    def configured_profile(self) -> str | None:
        """Return the configured profile name, if any."""
        return self.get(PROFILES_SETTING_KEY)


class SqliteSettingStore(SettingStore):
    """Settings kept in the SQLite app_state table as '<section>.<key>'."""

    def __init__(self, section: str = SETTINGS_CPY_SECTION):
        self.section = section

    def _key(self, key: str) -> str:
        return f"{self.section}.{key}"

    def get(self, key: str) -> str | None:
        return storage.get_app_state(self._key(key))

    def set(self, key: str, value: str | None) -> None:
        storage.set_app_state(self._key(key), value)
