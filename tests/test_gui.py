# tests/test_gui.py
import time

import pytest
from PySide6.QtWidgets import QMessageBox

from shippy import config
from shippy.data.store import PRODUCTS_KEY
from shippy.gui.products_view import ProductsView
from shippy.gui.withdrawal_dialog import WithdrawalDialog
from shippy.logic.withdrawal import SERVER_UNREACHABLE, WithdrawalWizard, WizardState
from shippy.models.withdrawal import Receipt


def _pump(qapp, until, timeout=2.0):
    deadline = time.monotonic() + timeout
    while not until() and time.monotonic() < deadline:
        qapp.processEvents()
    return until()


@pytest.fixture
def no_delays(monkeypatch):
    monkeypatch.setattr(config, "PROCESSING_DELAY_MS", 0)
    monkeypatch.setattr(config, "FAILURE_DISPLAY_MS", 0)


def _submitted_dialog(wizard, outcome):
    dialog = WithdrawalDialog(None, wizard)
    dialog.accepted.connect(lambda: outcome.append("accepted"))
    dialog.rejected.connect(lambda: outcome.append("rejected"))
    dialog.spin_amount.setValue(500)
    dialog._on_continue()
    assert wizard.state is WizardState.METHOD_ENTRY
    dialog._on_submit()
    return dialog


def test_dialog_fails_then_closes_itself(qapp, no_delays, monkeypatch):
    outcome = []
    wizard = WithdrawalWizard(lambda: 1000)
    dialog = _submitted_dialog(wizard, outcome)
    assert wizard.state is WizardState.PROCESSING
    assert dialog.pages.currentIndex() == 2

    # close requests are ignored while processing
    dialog.reject()
    assert wizard.state is WizardState.PROCESSING
    assert outcome == []

    pages_at_dismiss = []

    def on_failure_shown():
        pages_at_dismiss.append(dialog.pages.currentIndex())
        WithdrawalDialog._on_failure_shown(dialog)

    monkeypatch.setattr(dialog, "_on_failure_shown", on_failure_shown)
    assert _pump(qapp, lambda: not wizard.is_open)
    assert pages_at_dismiss == [3]
    assert dialog.error_label.text() == SERVER_UNREACHABLE
    assert outcome == ["rejected"]


def test_dialog_accepts_on_receipt(qapp, no_delays):
    class Paid:
        def submit(self, request):
            return Receipt(reference="PAY-1", amount=request.amount, method=request.method)

    outcome = []
    wizard = WithdrawalWizard(lambda: 1000, gateway=Paid())
    _submitted_dialog(wizard, outcome)
    assert _pump(qapp, lambda: not wizard.is_open)
    assert wizard.receipt.amount == 500
    assert outcome == ["accepted"]


def test_add_with_blank_name_warns_and_stores_nothing(qapp, store, monkeypatch):
    warnings = []
    monkeypatch.setattr(QMessageBox, "warning", lambda parent, title, text: warnings.append(text))
    view = ProductsView(store)
    before = store.load(PRODUCTS_KEY)

    view._on_add()
    assert warnings == ["Name required."]
    assert store.load(PRODUCTS_KEY) == before

    view.txt_name.setText("Canvas Bag")
    view._on_add()
    assert warnings == ["Name required."]
    assert store.load(PRODUCTS_KEY)[-1]["name"] == "Canvas Bag"
