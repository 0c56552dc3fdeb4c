"""Profile switching tests through the controller with SQLite collaborators."""
import os
import tempfile
import unittest
from pathlib import Path

from app.services.indicator import IndicatorSink
from core import profiles


class RecordingSink(IndicatorSink):
    def create_indicator(self):
        return object()

    def set_text(self, handle, text):
        self.text = text

    def set_command(self, handle, command):
        return None

    def show(self, handle):
        return None

    def dispose(self, handle):
        return None


class CountingCatalog(profiles.CatalogProvider):
    def __init__(self, inner):
        self.inner = inner
        self.calls = 0

    def list_profiles(self):
        self.calls += 1
        return self.inner.list_profiles()

    def get_default_profile_name(self):
        self.calls += 1
        return self.inner.get_default_profile_name()


class ProfileSwitchingTests(unittest.TestCase):
    """Validate selection, persistence and indicator updates."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        self.original_cwd = os.getcwd()
        os.chdir(self.temp_dir.name)
        os.environ["APP_DB_PATH"] = str(Path(self.temp_dir.name) / "Data" / "app.db")
        from app.app_state import AppState
        from app.controllers.profile_controller import ProfileController
        from app.services.indicator import IndicatorState, IndicatorSynchronizer
        from app.services.profile_service import ProfileService
        from core.settings import SqliteSettingStore

        profiles.create_profile("PROFA", "u1", "h1", 1)
        profiles.create_profile("PROFB", "u2", "h2", 2)
        profiles.set_default_profile("PROFB")

        self.settings = SqliteSettingStore()
        self.catalog = CountingCatalog(profiles.SqliteCatalogProvider())
        self.service = ProfileService(self.catalog, self.settings)
        self.state = IndicatorState()
        self.sink = RecordingSink()
        self.synchronizer = IndicatorSynchronizer(
            self.service.catalog_provider, self.settings, self.state, self.sink
        )
        self.app_state = AppState()
        self.controller = ProfileController(self.service, self.synchronizer, self.app_state)

    def tearDown(self):
        os.chdir(self.original_cwd)
        os.environ.pop("APP_DB_PATH", None)

    def test_refresh_after_setting_written(self):
        """Indicator shows the persisted profile once it is in the catalog."""
        self.settings.set("profiles", "PROFA")
        self.synchronizer.refresh()
        self.assertEqual(self.state.text, "CPY profile: PROFA")
        self.assertEqual(self.sink.text, "CPY profile: PROFA")

    def test_refresh_with_unknown_setting(self):
        self.settings.set("profiles", "GONE")
        self.synchronizer.refresh()
        self.assertEqual(self.state.text, "CPY profile: undefined")

    def test_load_catalog_returns_profiles_and_default(self):
        catalog, default_name = self.controller.load_catalog()
        self.assertEqual(sorted(catalog), ["PROFA", "PROFB"])
        self.assertEqual(default_name, "PROFB")

    def test_pick_profile_uses_supplied_catalog_only(self):
        catalog, default_name = self.controller.load_catalog()
        self.catalog.calls = 0
        seen = []

        def picker(choices, placeholder):
            seen.extend(choice.label for choice in choices)
            return "PROFA"

        success, selected, _ = self.controller.pick_profile(picker, catalog, default_name)
        self.assertTrue(success)
        self.assertEqual(selected, "PROFA")
        self.assertEqual(seen, ["PROFB", "PROFA"])
        self.assertEqual(self.catalog.calls, 0)
        self.assertIsNone(self.settings.configured_profile())

    def test_pick_then_remember_persists_and_refreshes(self):
        catalog, default_name = self.controller.load_catalog()
        _, selected, _ = self.controller.pick_profile(lambda choices, placeholder: "PROFA", catalog, default_name)
        success, _ = self.controller.remember_profile(selected)
        self.assertTrue(success)
        self.assertEqual(self.settings.configured_profile(), "PROFA")
        self.assertEqual(self.state.text, "CPY profile: PROFA")

    def test_cancelled_selection_changes_nothing(self):
        catalog, default_name = self.controller.load_catalog()
        success, selected, message = self.controller.pick_profile(
            lambda choices, placeholder: None, catalog, default_name
        )
        self.assertFalse(success)
        self.assertIsNone(selected)
        self.assertEqual(message, "No profile selected.")
        self.assertIsNone(self.settings.configured_profile())
        self.assertEqual(self.state.text, "CPY profile: undefined")

    def test_pick_profile_with_empty_catalog(self):
        opened = []
        success, selected, message = self.controller.pick_profile(lambda *args: opened.append(args), {})
        self.assertFalse(success)
        self.assertIsNone(selected)
        self.assertEqual(message, "No profiles available.")
        self.assertEqual(opened, [])

    def test_resolve_for_program_from_open_document(self):
        self.app_state.open_document("/ws/PROFA/foo.cbl")
        success, profile, _ = self.controller.resolve_for_program("foo.cbl")
        self.assertTrue(success)
        self.assertEqual(profile, "PROFA")

    def test_resolve_for_program_with_supplied_documents(self):
        from core.resolver import OpenDocument

        success, profile, _ = self.controller.resolve_for_program(
            "foo.cbl", (OpenDocument("/ws/PROFB/foo.cbl"),)
        )
        self.assertTrue(success)
        self.assertEqual(profile, "PROFB")

    def test_resolve_for_active_program_prefers_setting(self):
        self.settings.set("profiles", "PROFB")
        self.app_state.open_document("/ws/PROFA/foo.cbl")
        success, profile, _ = self.controller.resolve_for_program()
        self.assertTrue(success)
        self.assertEqual(profile, "PROFB")

    def test_resolve_without_program(self):
        success, profile, message = self.controller.resolve_for_program()
        self.assertFalse(success)
        self.assertIsNone(profile)
        self.assertEqual(message, "Open a program first.")

    def test_deleting_configured_profile_clears_indicator(self):
        self.settings.set("profiles", "PROFA")
        self.synchronizer.refresh()
        success, _ = self.controller.delete_profile("PROFA")
        self.assertTrue(success)
        self.assertEqual(self.state.text, "CPY profile: undefined")

    def test_set_default_profile_keeps_configured_profile(self):
        self.settings.set("profiles", "PROFB")
        success, _ = self.controller.set_default_profile("PROFA")
        self.assertTrue(success)
        self.assertEqual(self.catalog.get_default_profile_name(), "PROFA")
        self.assertEqual(self.settings.configured_profile(), "PROFB")


class AppStateTests(unittest.TestCase):
    def test_open_documents_keep_tab_order(self):
        from app.app_state import AppState

        state = AppState()
        state.open_document("/ws/A/one.cbl")
        state.open_document("/ws/B/two.cob")
        state.open_document("/ws/A/one.cbl")
        self.assertEqual([d.path for d in state.snapshot_documents()], ["/ws/A/one.cbl", "/ws/B/two.cob"])
        self.assertEqual(state.active_program, "one.cbl")

    def test_non_program_does_not_change_active_program(self):
        from app.app_state import AppState

        state = AppState()
        state.open_document("/ws/A/one.cbl")
        state.open_document("/ws/A/notes.txt")
        self.assertEqual(state.active_program, "one.cbl")

    def test_closing_last_copy_clears_active_program(self):
        from app.app_state import AppState

        state = AppState()
        state.open_document("/ws/A/one.cbl")
        state.close_document("/ws/A/one.cbl")
        self.assertIsNone(state.active_program)
        self.assertEqual(state.snapshot_documents(), ())
