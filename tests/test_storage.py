"""Storage tests for SQLite profiles, the catalog provider and settings."""
import os
import tempfile
import unittest
from pathlib import Path

from core import profiles
from core import storage
from core.settings import SqliteSettingStore


class StorageTests(unittest.TestCase):
    """Validate SQLite storage behavior."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        self.original_cwd = os.getcwd()
        os.chdir(self.temp_dir.name)
        os.environ["APP_DB_PATH"] = str(Path(self.temp_dir.name) / "Data" / "app.db")

    def tearDown(self):
        os.chdir(self.original_cwd)
        os.environ.pop("APP_DB_PATH", None)

    def test_profile_create_and_list(self):
        """Profiles create and list via SQLite in insertion order."""
        success, _ = profiles.create_profile("Beta", "u2", "h2", "2")
        self.assertTrue(success)
        profiles.create_profile("Alpha", "u1", "h1", 1)
        catalog = profiles.SqliteCatalogProvider().list_profiles()
        self.assertEqual(list(catalog), ["Beta", "Alpha"])
        self.assertEqual(catalog["Beta"], profiles.Profile("Beta", "u2", "h2", 2))
        self.assertEqual(catalog["Alpha"].description, "u1@h1:1")

    def test_duplicate_profile_rejected(self):
        profiles.create_profile("Alpha")
        success, message = profiles.create_profile("Alpha")
        self.assertFalse(success)
        self.assertIn("already exists", message)

    def test_invalid_profile_names_rejected(self):
        for name in ["", "   ", "..", "a/b", "a\\b", " padded", "bad name"]:
            success, _ = profiles.create_profile(name)
            self.assertFalse(success, name)

    def test_invalid_port_rejected(self):
        self.assertFalse(profiles.create_profile("Alpha", "u", "h", "abc")[0])
        self.assertFalse(profiles.create_profile("Alpha", "u", "h", 70000)[0])
        self.assertTrue(profiles.create_profile("Alpha", "u", "h", "")[0])

    def test_delete_profile(self):
        profiles.create_profile("Gamma")
        success, _ = profiles.delete_profile("Gamma")
        self.assertTrue(success)
        self.assertNotIn("Gamma", profiles.SqliteCatalogProvider().list_profiles())
        success, message = profiles.delete_profile("Gamma")
        self.assertFalse(success)
        self.assertEqual(message, "Profile not found.")

    def test_default_profile_flag(self):
        provider = profiles.SqliteCatalogProvider()
        profiles.create_profile("One")
        profiles.create_profile("Two")
        self.assertIsNone(provider.get_default_profile_name())
        self.assertTrue(profiles.set_default_profile("Two")[0])
        self.assertEqual(provider.get_default_profile_name(), "Two")
        profiles.set_default_profile("One")
        self.assertEqual(provider.get_default_profile_name(), "One")
        self.assertFalse(profiles.set_default_profile("Missing")[0])
        profiles.set_default_profile(None)
        self.assertIsNone(provider.get_default_profile_name())

    def test_setting_store_round_trip(self):
        store = SqliteSettingStore()
        self.assertIsNone(store.get("profiles"))
        store.set("profiles", "Alpha")
        self.assertEqual(store.get("profiles"), "Alpha")
        self.assertEqual(store.configured_profile(), "Alpha")
        self.assertEqual(storage.get_app_state("cpy-manager.profiles"), "Alpha")
        store.set("profiles", None)
        self.assertIsNone(store.configured_profile())

    def test_setting_store_sections_are_isolated(self):
        SqliteSettingStore("one").set("profiles", "A")
        self.assertIsNone(SqliteSettingStore("two").get("profiles"))


class ParseConnectionTests(unittest.TestCase):
    def test_full_connection(self):
        self.assertEqual(profiles.parse_connection("u1@h1:1"), ("u1", "h1", "1"))

    def test_missing_parts(self):
        self.assertEqual(profiles.parse_connection("h1:22"), ("", "h1", "22"))
        self.assertEqual(profiles.parse_connection("u1@h1"), ("u1", "h1", None))
        self.assertEqual(profiles.parse_connection(""), ("", "", None))
