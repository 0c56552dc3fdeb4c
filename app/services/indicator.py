"""Indicator state and the synchronizer that recomputes it from settings."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from core.constants import CHANGE_PROFILE_COMMAND, DEFAULT_STATUS_TEXT, INDICATOR_PREFIX
from core.profiles import CatalogProvider
from core.resolver import profile_from_settings
from core.settings import SettingStore

LOG = logging.getLogger(__name__)


class IndicatorDisposedError(RuntimeError):
    pass


class IndicatorSink(ABC):
    """Renders the indicator text; handles are opaque to the synchronizer."""

    @abstractmethod
    def create_indicator(self) -> object:
        raise NotImplementedError

    @abstractmethod
    def set_text(self, handle: object, text: str) -> None:
        raise NotImplementedError

    def set_command(self, handle: object, command: str) -> None:
        return None

    @abstractmethod
    def show(self, handle: object) -> None:
        raise NotImplementedError

    @abstractmethod
    def dispose(self, handle: object) -> None:
        raise NotImplementedError


class IndicatorState:
    def __init__(self):
        self.text = DEFAULT_STATUS_TEXT
        self.disposed = False


def indicator_text(profile_name: str | None) -> str:
    if profile_name:
        return INDICATOR_PREFIX + profile_name
    return DEFAULT_STATUS_TEXT


class IndicatorSynchronizer:
    """Keeps the indicator in line with the globally configured profile.

    Only the settings strategy is consulted: the indicator shows the session
    default, not a per-program resolution.
    """

    def __init__(
        self,
        catalog_provider: CatalogProvider,
        settings: SettingStore,
        state: IndicatorState,
        sink: IndicatorSink,
    ):
        self.catalog_provider = catalog_provider
        self.settings = settings
        self.state = state
        self.sink = sink
        self.handle = sink.create_indicator()
        sink.set_command(self.handle, CHANGE_PROFILE_COMMAND)
        sink.set_text(self.handle, state.text)
        sink.show(self.handle)

    def refresh(self) -> str:
        """Recompute the indicator text. Catalog errors propagate untouched."""
        if self.state.disposed:
            raise IndicatorDisposedError("Indicator refreshed after dispose")
        catalog = self.catalog_provider.list_profiles()
        profile = profile_from_settings(catalog, self.settings.configured_profile())
        text = indicator_text(profile)
        self.state.text = text
        self.sink.set_text(self.handle, text)
        LOG.debug("Indicator refreshed: %s", text)
        return text

    def dispose(self) -> None:
        if self.state.disposed:
            return
        self.sink.dispose(self.handle)
        self.state.disposed = True
