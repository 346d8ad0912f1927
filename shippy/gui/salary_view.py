# gui/salary_view.py
from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QGroupBox, QLabel, QPushButton,
    QLineEdit, QDateEdit, QStackedWidget, QTableWidget, QTableWidgetItem,
    QAbstractItemView, QHeaderView, QProgressBar
)

from shippy.gui.withdrawal_dialog import WithdrawalDialog
from shippy.logic.salary import SalaryController
from shippy.logic.withdrawal import WithdrawalWizard
from shippy.utils.date_helper import display_date
from shippy.utils.parse_utils import money, parse_float

# (field, card title)
CARDS = [
    ("total_earnings", "Total Earnings"),
    ("current_salary", "Current Salary"),
    ("next_salary_date", "Next Salary Date"),
    ("next_salary_amount", "Next Salary Amount"),
]


class FieldCard(QGroupBox):
    """One salary figure with its own Edit / Save / Cancel."""

    def __init__(self, view, field: str, title: str):
        super().__init__(title)
        self.view = view
        self.field = field

        v = QVBoxLayout(self)
        self.stack = QStackedWidget()

        self.value_label = QLabel("")
        self.value_label.setStyleSheet("font-size:20px; font-weight:600;")
        self.stack.addWidget(self.value_label)

        if field == "next_salary_date":
            self.editor = QDateEdit()
            self.editor.setCalendarPopup(True)
            self.editor.setDisplayFormat("yyyy-MM-dd")
            self.editor.dateChanged.connect(lambda qd: view.controller.stage(qd.toPython()))
        else:
            self.editor = QLineEdit()
            self.editor.textEdited.connect(lambda t: view.controller.stage(parse_float(t)))
        self.stack.addWidget(self.editor)
        v.addWidget(self.stack)

        row = QHBoxLayout()
        self.btn_edit = QPushButton("Edit")
        self.btn_save = QPushButton("Save")
        self.btn_cancel = QPushButton("Cancel")
        row.addStretch(1)
        for b in (self.btn_edit, self.btn_save, self.btn_cancel):
            row.addWidget(b)
        v.addLayout(row)

        self.btn_edit.clicked.connect(lambda: view.begin_edit(field))
        self.btn_save.clicked.connect(lambda: view.commit(field))
        self.btn_cancel.clicked.connect(view.cancel_edit)

    def render(self, state, editing: bool):
        value = getattr(state, self.field)
        if self.field == "next_salary_date":
            self.value_label.setText(display_date(value))
        else:
            self.value_label.setText(money(value))

        if editing:
            if isinstance(self.editor, QDateEdit):
                self.editor.setDate(QDate(value.year, value.month, value.day))
            else:
                self.editor.setText(f"{value:.2f}".rstrip("0").rstrip(".") if value else "")
            self.editor.setFocus()
        self.stack.setCurrentIndex(1 if editing else 0)
        self.btn_edit.setVisible(not editing)
        self.btn_save.setVisible(editing)
        self.btn_cancel.setVisible(editing)


class SalaryView(QWidget):
    def __init__(self, store, parent=None):
        super().__init__(parent)
        self.store = store
        self.controller = None
        self._build_ui()
        self.reload()

    # ---------- UI ----------
    def _build_ui(self):
        root = QVBoxLayout(self)

        top = QHBoxLayout()
        title = QLabel("Salary Overview")
        title.setStyleSheet("font-weight:600; font-size:15px;")
        top.addWidget(title)
        top.addStretch(1)
        self.btn_withdraw = QPushButton("Withdraw Salary")
        top.addWidget(self.btn_withdraw)
        root.addLayout(top)

        grid = QGridLayout()
        self.cards = {}
        for i, (field, caption) in enumerate(CARDS):
            card = FieldCard(self, field, caption)
            self.cards[field] = card
            grid.addWidget(card, 0, i)
        root.addLayout(grid)

        # countdown
        countdown = QGroupBox("Days Until Next Salary")
        cl = QGridLayout(countdown)
        self.days_label = QLabel("")
        self.days_label.setStyleSheet("font-size:22px; font-weight:700;")
        self.days_caption = QLabel("")
        self.progress = QProgressBar()
        self.progress.setRange(0, 100)
        cl.addWidget(self.days_label, 0, 0)
        cl.addWidget(self.days_caption, 1, 0)
        cl.addWidget(QLabel("Monthly Progress"), 0, 1)
        cl.addWidget(self.progress, 1, 1)
        root.addWidget(countdown)

        bottom = QHBoxLayout()

        hist_box = QGroupBox("Salary History")
        hv = QVBoxLayout(hist_box)
        self.history = QTableWidget(0, 4)
        self.history.setHorizontalHeaderLabels(["Month", "Paid On", "Amount", "Status"])
        self.history.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.history.setSelectionMode(QAbstractItemView.NoSelection)
        self.history.verticalHeader().setVisible(False)
        self.history.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        hv.addWidget(self.history)
        bottom.addWidget(hist_box, 1)

        info_box = QGroupBox("Salary Information")
        self.info = QGridLayout(info_box)
        self.info_values = {}
        labels = [
            ("base", "Base Salary:"), ("next", "Next Salary:"), ("date", "Next Date:"),
            ("currency", "Currency:"), ("cycle", "Payment Cycle:"),
            ("total", "Total from Shippy:"), ("average", "Average Monthly:"),
            ("updated", "Last Updated:"),
        ]
        for r, (key, text) in enumerate(labels):
            val = QLabel("")
            val.setStyleSheet("font-weight:500;")
            self.info.addWidget(QLabel(text), r, 0)
            self.info.addWidget(val, r, 1)
            self.info_values[key] = val
        bottom.addWidget(info_box, 1)
        root.addLayout(bottom)

        self.btn_withdraw.clicked.connect(self.open_withdrawal)

    # ---------- data/binding ----------
    def reload(self):
        """Load (and roll the payday forward if needed) on every visit."""
        self.controller = SalaryController(self.store)
        self.refresh()

    def refresh(self):
        c = self.controller
        state = c.state
        for field, card in self.cards.items():
            card.render(state, c.editing_field == field)

        days = c.days_until_next_salary()
        self.days_label.setText(str(days) if days > 0 else "Due Today!")
        self.days_caption.setText("Days remaining" if days > 0 else "Payment due")
        self.progress.setValue(max(0, min(100, c.monthly_progress())))

        self.history.setRowCount(0)
        for rec in c.history():
            r = self.history.rowCount()
            self.history.insertRow(r)
            self.history.setItem(r, 0, QTableWidgetItem(rec["month"]))
            self.history.setItem(r, 1, QTableWidgetItem(rec["date"]))
            self.history.setItem(r, 2, QTableWidgetItem(money(rec["amount"])))
            self.history.setItem(r, 3, QTableWidgetItem(rec["status"]))

        self.info_values["base"].setText(money(state.current_salary))
        self.info_values["next"].setText(money(state.next_salary_amount))
        self.info_values["date"].setText(display_date(state.next_salary_date))
        self.info_values["currency"].setText("INR (₹)")
        self.info_values["cycle"].setText("Monthly")
        self.info_values["total"].setText(money(state.total_earnings))
        self.info_values["average"].setText(money(c.average_monthly()))
        self.info_values["updated"].setText(state.last_update.isoformat())

    # ---------- editing ----------
    def begin_edit(self, field: str):
        self.controller.edit(field)
        self.refresh()

    def commit(self, field: str):
        self.controller.commit(field)
        self.refresh()

    def cancel_edit(self):
        self.controller.cancel()
        self.refresh()

    # ---------- withdrawal ----------
    def open_withdrawal(self):
        wizard = WithdrawalWizard(lambda: self.controller.state.total_earnings)
        WithdrawalDialog(self, wizard).exec()
