from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
)

from app.ui.theme import Colors, Styles
from app.ui.widget_utils import make_info_label


class ProfilePickerDialog(QDialog):
    """Single-choice list of profiles; the first entry starts selected."""

    def __init__(self, choices, placeholder, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Select Profile")
        self.setMinimumWidth(360)

        self.prompt_label = make_info_label(placeholder, Colors.FG_MUTED)

        self.list_widget = QListWidget()
        self.list_widget.setStyleSheet(Styles.list_widget())
        for choice in choices:
            item = QListWidgetItem(f"{choice.label}    {choice.description}")
            item.setData(Qt.ItemDataRole.UserRole, choice.label)
            item.setToolTip(choice.description)
            self.list_widget.addItem(item)
        if self.list_widget.count():
            self.list_widget.setCurrentRow(0)
        self.list_widget.itemDoubleClicked.connect(lambda _: self.accept())

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)

        layout = QVBoxLayout()
        layout.addWidget(self.prompt_label)
        layout.addWidget(self.list_widget)
        layout.addWidget(buttons)
        self.setLayout(layout)

    def labels(self):
        return [
            self.list_widget.item(row).data(Qt.ItemDataRole.UserRole)
            for row in range(self.list_widget.count())
        ]

    def selected_label(self):
        item = self.list_widget.currentItem()
        if item is None:
            return None
        return item.data(Qt.ItemDataRole.UserRole)


def make_picker(parent=None):
    """Return a picker callable backed by a modal ProfilePickerDialog."""
    def pick(choices, placeholder):
        if not choices:
            return None
        dialog = ProfilePickerDialog(choices, placeholder, parent)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return None
        return dialog.selected_label()

    return pick
