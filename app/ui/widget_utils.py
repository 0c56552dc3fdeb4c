from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QPushButton, QWidget

from app.ui.theme import Styles


def disable_widget_interaction(widget: QWidget):
    """Disable interactive/focus states for display-only widgets."""
    widget.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    if isinstance(widget, QLabel):
        widget.setTextInteractionFlags(Qt.TextInteractionFlag.NoTextInteraction)


def disable_button_focus_rect(button: QPushButton):
    """Disable focus rectangle on button while keeping it clickable."""
    button.setFocusPolicy(Qt.FocusPolicy.NoFocus)


def make_button(text: str, style: str | None = None) -> QPushButton:
    """Create a styled push button without a focus rectangle."""
    button = QPushButton(text)
    button.setStyleSheet(style if style is not None else Styles.button())
    disable_button_focus_rect(button)
    return button


def make_info_label(text: str = "", color: str | None = None) -> QLabel:
    """Create a display-only info label."""
    label = QLabel(text)
    label.setStyleSheet(Styles.info_label(color) if color else Styles.info_label())
    disable_widget_interaction(label)
    return label
