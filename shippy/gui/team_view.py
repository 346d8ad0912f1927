# gui/team_view.py
from datetime import date

from PySide6.QtWidgets import QLabel, QLineEdit, QComboBox, QDateEdit

from shippy.gui.record_table import RecordTableView
from shippy.logic.collection import TeamCollection
from shippy.models.team_member import ROLE_OPTIONS


class TeamView(RecordTableView):
    title = "Team Members"
    add_label = "Add Member"
    columns = [
        ("Member", "name"),
        ("Email", "email"),
        ("Phone", "phone"),
        ("Role", "role"),
        ("Join Date", "join_date"),
    ]

    def make_controller(self):
        return TeamCollection(self.store)

    def build_form(self, form):
        self.txt_name = QLineEdit(); self.txt_name.setPlaceholderText("Enter full name")
        self.txt_email = QLineEdit(); self.txt_email.setPlaceholderText("Enter email address")
        self.txt_phone = QLineEdit(); self.txt_phone.setPlaceholderText("Enter phone number")
        self.cmb_role = QComboBox(); self.cmb_role.addItems(ROLE_OPTIONS)
        self.date_join = QDateEdit(); self.date_join.setCalendarPopup(True)
        self.date_join.setDisplayFormat("yyyy-MM-dd")

        r = 0
        form.addWidget(QLabel("Full Name*"), r, 0); form.addWidget(self.txt_name, r, 1)
        form.addWidget(QLabel("Email*"), r, 2); form.addWidget(self.txt_email, r, 3); r += 1
        form.addWidget(QLabel("Phone"), r, 0); form.addWidget(self.txt_phone, r, 1)
        form.addWidget(QLabel("Role"), r, 2); form.addWidget(self.cmb_role, r, 3); r += 1
        form.addWidget(QLabel("Join Date"), r, 0); form.addWidget(self.date_join, r, 1)
        self.clear_form()

    def collect_form(self) -> dict:
        return {
            "name": self.txt_name.text(),
            "email": self.txt_email.text(),
            "phone": self.txt_phone.text().strip(),
            "role": self.cmb_role.currentText(),
            "join_date": self.date_join.date().toPython(),
        }

    def clear_form(self):
        self.txt_name.clear()
        self.txt_email.clear()
        self.txt_phone.clear()
        self.cmb_role.setCurrentText("Employee")
        self.date_join.setDate(date.today())

    def display(self, record, field) -> str:
        if field == "join_date":
            return record.join_date.isoformat() if record.join_date else ""
        return super().display(record, field)

    def make_editor(self, record, field):
        if field == "role":
            return self.combo_editor(record, field, ROLE_OPTIONS)
        if field == "join_date":
            return self.date_editor(record, field)
        return self.text_editor(record, field)
