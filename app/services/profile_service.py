"""Profile lookup for programs: settings phase, document phase, picker."""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from core.constants import PICKER_PLACEHOLDER, PROFILES_SETTING_KEY
from core.profiles import CatalogProvider, Profile
from core.resolver import (
    OpenDocument,
    ProfileChoice,
    build_choices,
    profile_from_documents,
    profile_from_settings,
)
from core.settings import SettingStore

LOG = logging.getLogger(__name__)

# picker(choices, placeholder) -> chosen label, or None when cancelled
Picker = Callable[[Sequence[ProfileChoice], str], "str | None"]


class ProfileService:
    def __init__(self, catalog_provider: CatalogProvider, settings: SettingStore):
        self.catalog_provider = catalog_provider
        self.settings = settings

    def _catalog(self, catalog: dict[str, Profile] | None) -> dict[str, Profile]:
        return catalog if catalog is not None else self.catalog_provider.list_profiles()

    def profile_from_settings(self, catalog: dict[str, Profile] | None = None) -> str | None:
        """Return the configured profile if the catalog still lists it."""
        return profile_from_settings(self._catalog(catalog), self.settings.configured_profile())

    def profile_from_document(
        self,
        program_name: str,
        documents: Iterable[OpenDocument],
        catalog: dict[str, Profile] | None = None,
    ) -> str | None:
        """Return the profile named by the parent folder of an open program."""
        return profile_from_documents(program_name, self._catalog(catalog), documents)

    def resolve_profile(self, program_name: str, documents: Iterable[OpenDocument]) -> str | None:
        """Settings phase first, then the document phase."""
        catalog = self.catalog_provider.list_profiles()
        profile = self.profile_from_settings(catalog)
        if profile:
            LOG.debug("Profile for %s taken from settings: %s", program_name, profile)
            return profile
        profile = self.profile_from_document(program_name, documents, catalog)
        if profile:
            LOG.debug("Profile for %s taken from open documents: %s", program_name, profile)
        else:
            LOG.debug("No profile found for %s", program_name)
        return profile

    def present_choices(
        self,
        picker: Picker,
        catalog: dict[str, Profile] | None = None,
        default_name: str | None = None,
    ) -> str | None:
        """Show the catalog to the user. Returns the chosen name; never persists.

        A supplied catalog is used together with the supplied default name;
        without one, both are fetched from the provider.
        """
        if catalog is None:
            catalog = self.catalog_provider.list_profiles()
            default_name = self.catalog_provider.get_default_profile_name()
        choices = build_choices(catalog, default_name)
        return picker(choices, PICKER_PLACEHOLDER) or None

    def remember_profile(self, profile_name: str) -> None:
        self.settings.set(PROFILES_SETTING_KEY, profile_name)
        LOG.info("Configured profile set to %s", profile_name)

    def choose_profile(
        self,
        picker: Picker,
        catalog: dict[str, Profile] | None = None,
        default_name: str | None = None,
    ) -> str | None:
        """Present the catalog and persist the selection, if any."""
        selected = self.present_choices(picker, catalog, default_name)
        if selected:
            self.remember_profile(selected)
        return selected
