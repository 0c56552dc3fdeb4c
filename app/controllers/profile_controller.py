from core.profiles import (
    create_profile,
    delete_profile,
    set_default_profile,
)


class ProfileController:
    def __init__(self, profile_service, synchronizer, app_state):
        self.service = profile_service
        self.synchronizer = synchronizer
        self.app_state = app_state

    def load_catalog(self):
        """
        Mutates: none.
        Returns: (dict[str, Profile], str | None) catalog and default profile name.
        """
        provider = self.service.catalog_provider
        return provider.list_profiles(), provider.get_default_profile_name()

    def resolve_for_program(self, program_name=None, documents=None):
        """Mutates: none. Returns: (bool, str | None, str)."""
        program_name = program_name or self.app_state.active_program
        if not program_name:
            return False, None, "Open a program first."
        if documents is None:
            documents = self.app_state.snapshot_documents()
        profile = self.service.resolve_profile(program_name, documents)
        if not profile:
            return False, None, f"No profile found for {program_name}."
        return True, profile, f"{program_name} uses profile {profile}."

    def pick_profile(self, picker, catalog, default_name=None):
        """Mutates: none. Does NOT touch the catalog provider. Returns: (bool, str | None, str)."""
        if not catalog:
            return False, None, "No profiles available."
        selected = self.service.present_choices(picker, catalog, default_name)
        if not selected:
            return False, None, "No profile selected."
        return True, selected, f"Profile '{selected}' selected."

    def remember_profile(self, name):
        """Mutates: configured profile, indicator. Returns: (bool, str)."""
        self.service.remember_profile(name)
        self.synchronizer.refresh()
        return True, f"Profile '{name}' selected."

    def create_profile(self, name, user, host, port):
        """Mutates: catalog. Returns: (bool, str)."""
        return create_profile(name, user, host, port)

    def delete_profile(self, name):
        """Mutates: catalog, indicator. Returns: (bool, str)."""
        success, message = delete_profile(name)
        if success:
            self.synchronizer.refresh()
        return success, message

    def set_default_profile(self, name):
        """Mutates: catalog default flag. Does NOT mutate: configured profile. Returns: (bool, str)."""
        return set_default_profile(name)
