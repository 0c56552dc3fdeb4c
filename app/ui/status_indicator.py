"""Qt rendition of the profile indicator: a clickable status bar button."""
from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtWidgets import QPushButton, QStatusBar

from app.services.indicator import IndicatorSink
from app.ui.theme import Styles
from app.ui.widget_utils import disable_button_focus_rect


class _IndicatorBridge(QObject):
    """Carries text updates to the UI thread (queued when sent from workers)."""
    textRequested = pyqtSignal(object, str)
    commandTriggered = pyqtSignal(str)

    def __init__(self):
        super().__init__()
        self.disposed = set()
        self.textRequested.connect(self._apply_text)

    def _apply_text(self, button, text):
        # A queued update may arrive after the button was released.
        if button in self.disposed:
            return
        button.setText(text)


class QtIndicatorSink(IndicatorSink):
    def __init__(self, status_bar: QStatusBar):
        self.status_bar = status_bar
        self.bridge = _IndicatorBridge()
        self.commandTriggered = self.bridge.commandTriggered

    def create_indicator(self):
        button = QPushButton()
        button.setObjectName("profile_indicator")
        button.setStyleSheet(Styles.indicator())
        disable_button_focus_rect(button)
        button.hide()
        self.status_bar.addPermanentWidget(button)
        return button

    def is_disposed(self, handle):
        return handle in self.bridge.disposed

    def set_text(self, handle, text):
        if self.is_disposed(handle):
            return
        self.bridge.textRequested.emit(handle, text)

    def set_command(self, handle, command):
        handle.setToolTip("Change the default profile")
        handle.clicked.connect(lambda _=False, c=command: self.bridge.commandTriggered.emit(c))

    def show(self, handle):
        handle.show()

    def dispose(self, handle):
        if self.is_disposed(handle):
            return
        self.bridge.disposed.add(handle)
        self.status_bar.removeWidget(handle)
        handle.deleteLater()
