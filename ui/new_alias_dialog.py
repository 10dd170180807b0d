"""Modal dialog for binding a readable alias to an address."""

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QDialog, QHBoxLayout, QLabel, QLineEdit, QPushButton, QVBoxLayout,
)

from core.new_alias_form import AliasStore, DialogState, NewAliasForm

DIALOG_WIDTH = 400
DIALOG_HEIGHT = 150


class NewAliasDialog(QDialog):
    """Address + Alias inputs, a status line, and Save / Cancel."""

    alias_saved = pyqtSignal(str, str)  # address, alias

    def __init__(self, validate_and_store: AliasStore, parent=None):
        super().__init__(parent)
        self.setWindowTitle("New Alias")
        self.setFixedSize(DIALOG_WIDTH, DIALOG_HEIGHT)
        self.setWindowModality(Qt.WindowModality.ApplicationModal)

        self.form = NewAliasForm(validate_and_store)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 8, 11, 8)
        layout.setSpacing(4)

        layout.addWidget(QLabel("Address"))
        self.input_address = QLineEdit()
        self.input_address.setFixedWidth(225)
        self.input_address.textChanged.connect(self.form.set_address)
        layout.addWidget(self.input_address)

        layout.addWidget(QLabel("Alias"))
        self.input_alias = QLineEdit()
        self.input_alias.setFixedWidth(225)
        self.input_alias.textChanged.connect(self.form.set_alias)
        layout.addWidget(self.input_alias)

        btn_row = QHBoxLayout()
        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: #c62828;")
        self.status_label.setVisible(False)
        self.btn_cancel = QPushButton("Cancel")
        self.btn_save = QPushButton("Save")
        self.btn_save.setDefault(True)
        self.btn_cancel.clicked.connect(self.reject)
        self.btn_save.clicked.connect(self._save)
        btn_row.addWidget(self.status_label, 1)
        btn_row.addWidget(self.btn_cancel)
        btn_row.addWidget(self.btn_save)
        layout.addLayout(btn_row)

    def status_message(self) -> str:
        return self.status_label.text()

    def _save(self):
        # The draft is gone after a successful save.
        address = self.input_address.text().strip()
        alias = self.input_alias.text().strip()
        state = self.form.save()
        if state == DialogState.CLOSED_SAVED:
            self.alias_saved.emit(address, alias)
            self.accept()
            return
        self._show_status(self.form.status_message)

    def _show_status(self, message: str):
        self.status_label.setText(message)
        self.status_label.setVisible(bool(message))

    def reject(self):
        # Escape and the title-bar close button end up here too.
        if self.form.is_open:
            self.form.cancel()
        super().reject()
