# gui/withdrawal_dialog.py
from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QStackedWidget, QWidget, QLabel, QPushButton,
    QDoubleSpinBox, QComboBox, QLineEdit, QFormLayout, QButtonGroup, QProgressBar
)

from shippy import config
from shippy.logic.withdrawal import WithdrawalWizard, WizardState
from shippy.models.withdrawal import CARD_NUMBER_MAX, IFSC_CODES, METHOD_LABELS, METHODS
from shippy.utils.parse_utils import money

PAGE_INDEX = {
    WizardState.AMOUNT_ENTRY: 0,
    WizardState.METHOD_ENTRY: 1,
    WizardState.PROCESSING: 2,
    WizardState.FAILED: 3,
}


class WithdrawalDialog(QDialog):
    """
    Modal around WithdrawalWizard.
    Processing lasts PROCESSING_DELAY_MS, the failure page FAILURE_DISPLAY_MS,
    then the dialog closes on its own. It cannot be closed while processing.
    """

    def __init__(self, parent, wizard: WithdrawalWizard):
        super().__init__(parent)
        self.setWindowTitle("Withdraw Salary")
        self.setModal(True)
        self.resize(460, 420)
        self.wizard = wizard
        self.wizard.open()

        self.pages = QStackedWidget()
        self.pages.addWidget(self._build_amount_page())
        self.pages.addWidget(self._build_method_page())
        self.pages.addWidget(self._build_processing_page())
        self.pages.addWidget(self._build_failed_page())

        root = QVBoxLayout(self)
        root.addWidget(self.pages)
        self._sync()

    # ---------- pages ----------
    def _build_amount_page(self) -> QWidget:
        page = QWidget()
        v = QVBoxLayout(page)
        title = QLabel("Withdraw Salary")
        title.setStyleSheet("font-size:17px; font-weight:600;")
        v.addWidget(title)

        v.addWidget(QLabel(f"Available: {money(self.wizard.total_earnings())}"))

        form = QFormLayout()
        self.spin_amount = QDoubleSpinBox()
        self.spin_amount.setRange(0, 1_000_000_000)
        self.spin_amount.setDecimals(2)
        self.spin_amount.setPrefix(config.CURRENCY)
        form.addRow("Withdrawal Amount", self.spin_amount)

        source = QComboBox()
        source.addItem("Shippy Earnings")
        form.addRow("Select Salary Source", source)
        v.addLayout(form)
        v.addStretch(1)

        row = QHBoxLayout()
        btn_cancel = QPushButton("Cancel")
        self.btn_continue = QPushButton("Continue to Payment Details")
        row.addWidget(btn_cancel)
        row.addStretch(1)
        row.addWidget(self.btn_continue)
        v.addLayout(row)

        self.spin_amount.valueChanged.connect(self._on_amount_changed)
        self.btn_continue.clicked.connect(self._on_continue)
        btn_cancel.clicked.connect(self.reject)
        return page

    def _build_method_page(self) -> QWidget:
        page = QWidget()
        v = QVBoxLayout(page)
        title = QLabel("Payment Details")
        title.setStyleSheet("font-size:17px; font-weight:600;")
        v.addWidget(title)
        v.addWidget(QLabel("Select Withdrawal Method"))

        method_row = QHBoxLayout()
        self.method_group = QButtonGroup(self)
        self.method_group.setExclusive(True)
        for i, m in enumerate(METHODS):
            btn = QPushButton(METHOD_LABELS[m])
            btn.setCheckable(True)
            btn.setProperty("method", m)
            self.method_group.addButton(btn, i)
            method_row.addWidget(btn)
        self.method_group.button(0).setChecked(True)
        v.addLayout(method_row)

        # method specific fields, one form per method
        self.detail_forms = {}

        bank = QWidget(); bf = QFormLayout(bank)
        self.txt_account = QLineEdit(); self.txt_account.setPlaceholderText("Enter account number")
        self.cmb_ifsc = QComboBox(); self.cmb_ifsc.addItem("Select IFSC Code", userData="")
        for code in IFSC_CODES:
            self.cmb_ifsc.addItem(code, userData=code)
        self.txt_holder = QLineEdit(); self.txt_holder.setPlaceholderText("Enter account holder name")
        bf.addRow("Account Number", self.txt_account)
        bf.addRow("IFSC Code", self.cmb_ifsc)
        bf.addRow("Account Holder Name", self.txt_holder)
        self.detail_forms["bank"] = bank

        upi = QWidget(); uf = QFormLayout(upi)
        self.txt_upi = QLineEdit(); self.txt_upi.setPlaceholderText("Enter UPI ID (e.g., user@paytm)")
        uf.addRow("UPI ID", self.txt_upi)
        self.detail_forms["upi"] = upi

        card = QWidget(); cf = QFormLayout(card)
        self.txt_card = QLineEdit(); self.txt_card.setPlaceholderText("Enter card number")
        self.txt_card.setMaxLength(CARD_NUMBER_MAX)
        cf.addRow("Card Number", self.txt_card)
        self.detail_forms["card"] = card

        for w in self.detail_forms.values():
            v.addWidget(w)
        v.addStretch(1)

        row = QHBoxLayout()
        btn_back = QPushButton("Back")
        btn_submit = QPushButton("Submit Withdrawal")
        row.addWidget(btn_back)
        row.addStretch(1)
        row.addWidget(btn_submit)
        v.addLayout(row)

        self.method_group.idClicked.connect(lambda i: self._on_method(METHODS[i]))
        self.txt_account.textEdited.connect(lambda t: self.wizard.set_detail("account_number", t))
        self.cmb_ifsc.currentIndexChanged.connect(
            lambda _i: self.wizard.set_detail("ifsc_code", self.cmb_ifsc.currentData()))
        self.txt_holder.textEdited.connect(lambda t: self.wizard.set_detail("account_holder_name", t))
        self.txt_upi.textEdited.connect(lambda t: self.wizard.set_detail("upi_id", t))
        self.txt_card.textEdited.connect(lambda t: self.wizard.set_detail("card_number", t))
        btn_back.clicked.connect(self._on_back)
        btn_submit.clicked.connect(self._on_submit)
        return page

    def _build_processing_page(self) -> QWidget:
        page = QWidget()
        v = QVBoxLayout(page)
        v.addStretch(1)
        busy = QProgressBar()
        busy.setRange(0, 0)
        v.addWidget(busy)
        title = QLabel("Processing Withdrawal...")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size:16px; font-weight:600;")
        v.addWidget(title)
        note = QLabel("Please wait while we process your request.")
        note.setAlignment(Qt.AlignCenter)
        v.addWidget(note)
        v.addStretch(1)
        return page

    def _build_failed_page(self) -> QWidget:
        page = QWidget()
        v = QVBoxLayout(page)
        v.addStretch(1)
        title = QLabel("⚠ Withdrawal Failed")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size:16px; font-weight:600; color:#7f1d1d;")
        v.addWidget(title)
        self.error_label = QLabel("")
        self.error_label.setWordWrap(True)
        self.error_label.setAlignment(Qt.AlignCenter)
        self.error_label.setStyleSheet("color:#dc2626;")
        v.addWidget(self.error_label)
        contact = QLabel(f"Contact Support:\n{config.SUPPORT_EMAIL}\n{config.SUPPORT_PHONE}")
        contact.setAlignment(Qt.AlignCenter)
        contact.setStyleSheet("background:#fef2f2; border:1px solid #fecaca; border-radius:6px; padding:10px;")
        v.addWidget(contact)
        v.addStretch(1)
        return page

    # ---------- state → UI ----------
    def _sync(self):
        state = self.wizard.state
        if state is WizardState.CLOSED:
            self.done(QDialog.Accepted if self.wizard.receipt else QDialog.Rejected)
            return
        self.pages.setCurrentIndex(PAGE_INDEX[state])
        if state is WizardState.AMOUNT_ENTRY:
            self.btn_continue.setEnabled(self.wizard.can_continue())
        elif state is WizardState.METHOD_ENTRY:
            method = self.wizard.request.method
            for m, w in self.detail_forms.items():
                w.setVisible(m == method)
        elif state is WizardState.FAILED:
            self.error_label.setText(self.wizard.error or "")

    # ---------- handlers ----------
    def _on_amount_changed(self, value: float):
        self.wizard.set_amount(value)
        self._sync()

    def _on_continue(self):
        self.wizard.submit_amount()
        self._sync()

    def _on_method(self, method: str):
        self.wizard.choose_method(method)
        self._sync()

    def _on_back(self):
        self.wizard.back()
        self._sync()

    def _on_submit(self):
        if not self.wizard.submit():
            return
        self._sync()
        QTimer.singleShot(config.PROCESSING_DELAY_MS, self._on_processing_done)

    def _on_processing_done(self):
        self.wizard.finish_processing()
        self._sync()
        if self.wizard.state is WizardState.FAILED:
            QTimer.singleShot(config.FAILURE_DISPLAY_MS, self._on_failure_shown)

    def _on_failure_shown(self):
        self.wizard.dismiss()
        self._sync()

    def reject(self):
        # Esc / close button / Cancel
        if self.wizard.state is WizardState.CLOSED or self.wizard.cancel():
            super().reject()

    def closeEvent(self, event):
        if self.wizard.is_open and not self.wizard.cancel():
            event.ignore()
            return
        super().closeEvent(event)
