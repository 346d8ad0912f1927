# gui/login_page.py
from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QFormLayout, QLineEdit, QPushButton, QLabel
)


class LoginPage(QWidget):
    """Credentials are not checked; pressing Sign In is enough."""
    logged_in = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        root = QVBoxLayout(self)
        root.addStretch(1)

        box = QGroupBox("Shippy Admin")
        box.setMaximumWidth(380)
        form = QFormLayout(box)

        title = QLabel("Sign in to your dashboard")
        title.setStyleSheet("font-weight:600;")
        form.addRow(title)

        self.txt_user = QLineEdit()
        self.txt_user.setPlaceholderText("Enter username")
        form.addRow("Username", self.txt_user)

        self.txt_password = QLineEdit()
        self.txt_password.setPlaceholderText("Enter password")
        self.txt_password.setEchoMode(QLineEdit.Password)
        form.addRow("Password", self.txt_password)

        self.btn_login = QPushButton("Sign In")
        form.addRow(self.btn_login)

        root.addWidget(box, 0, Qt.AlignHCenter)
        root.addStretch(1)

        self.btn_login.clicked.connect(self._on_login)
        self.txt_password.returnPressed.connect(self._on_login)

    def _on_login(self):
        self.txt_password.clear()
        self.logged_in.emit()
