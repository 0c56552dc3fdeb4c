import sys

from PyQt6.QtWidgets import QApplication

from app.app_state import AppState
from app.services.profile_service import ProfileService
from app.ui.app_shell import AppShell
from core import storage
from core.logging_setup import setup_logging
from core.profiles import SqliteCatalogProvider
from core.settings import SqliteSettingStore


def main(argv=None):
    argv = sys.argv if argv is None else argv
    setup_logging()
    storage.init_db()

    app = QApplication(argv)
    app.setOrganizationName("cpy-profiles")
    app.setApplicationName("CPY Profiles")

    app_state = AppState()
    for path in argv[1:]:
        app_state.open_document(path)

    settings_store = SqliteSettingStore()
    profile_service = ProfileService(SqliteCatalogProvider(), settings_store)

    window = AppShell(app_state, profile_service, settings_store)
    window.refresh_documents()
    app.aboutToQuit.connect(window.shutdown)
    window.show()
    return app.exec()


# ---------------- ENTRY ----------------
if __name__ == "__main__":
    sys.exit(main())
