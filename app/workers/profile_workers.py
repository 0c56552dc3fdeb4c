"""Worker threads for catalog-bound profile operations."""
import logging

from PyQt6.QtCore import QThread, pyqtSignal

from core import notifier as notif


class IndicatorRefreshWorker(QThread):
    """Refresh the profile indicator off the UI thread."""
    refreshed = pyqtSignal(str)
    refreshFailed = pyqtSignal(str)

    def __init__(self, synchronizer):
        super().__init__()
        self.synchronizer = synchronizer

    def run(self):
        """Emit the new indicator text, or an error message on failure."""
        try:
            text = self.synchronizer.refresh()
        except Exception as exc:
            logging.error("Profile indicator refresh failed", exc_info=True)
            notif.alert(f"Could not list profiles ({exc})")
            self.refreshFailed.emit(f"Could not list profiles ({exc})")
            return
        self.refreshed.emit(text)


class CatalogFetchWorker(QThread):
    """List the catalog and its default profile for the picker."""
    catalogReady = pyqtSignal(object, object)
    catalogFailed = pyqtSignal(str)

    def __init__(self, controller):
        super().__init__()
        self.controller = controller

    def run(self):
        """Emit (catalog, default name) or an error message."""
        try:
            catalog, default_name = self.controller.load_catalog()
        except Exception as exc:
            logging.error("Profile catalog listing failed", exc_info=True)
            notif.alert(f"Could not list profiles ({exc})")
            self.catalogFailed.emit(f"Could not list profiles ({exc})")
            return
        self.catalogReady.emit(catalog, default_name)


class ProfileTaskWorker(QThread):
    """Run one controller action returning (success, message) off the UI thread."""
    taskDone = pyqtSignal(bool, str)
    taskFailed = pyqtSignal(str)

    def __init__(self, action, *args):
        super().__init__()
        self.action = action
        self.args = args

    def run(self):
        try:
            success, message = self.action(*self.args)
        except Exception as exc:
            logging.error("Profile action %s failed", self.action.__name__, exc_info=True)
            notif.alert(f"Profile update failed ({exc})")
            self.taskFailed.emit(f"Profile update failed ({exc})")
            return
        self.taskDone.emit(success, message)


class ProfileResolveWorker(QThread):
    """Resolve the profile for a program without blocking the UI."""
    resolved = pyqtSignal(str, str)
    notResolved = pyqtSignal(str)
    resolveFailed = pyqtSignal(str)

    def __init__(self, controller, program_name, documents):
        super().__init__()
        self.controller = controller
        self.program_name = program_name
        self.documents = tuple(documents)

    def run(self):
        """Emit (program, profile) or report absence/failure."""
        try:
            success, profile, _ = self.controller.resolve_for_program(self.program_name, self.documents)
        except Exception as exc:
            logging.error("Profile resolution failed for %s", self.program_name, exc_info=True)
            notif.alert(f"Profile lookup failed ({exc})")
            self.resolveFailed.emit(f"Profile lookup failed ({exc})")
            return
        if success:
            self.resolved.emit(self.program_name, profile)
        else:
            self.notResolved.emit(self.program_name)
