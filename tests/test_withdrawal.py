# tests/test_withdrawal.py
import pytest

from shippy.exceptions import PaymentError
from shippy.logic.withdrawal import SERVER_UNREACHABLE, WithdrawalWizard, WizardState
from shippy.models.withdrawal import Receipt


def _wizard(total=170000, gateway=None):
    wiz = WithdrawalWizard(lambda: total, gateway=gateway)
    wiz.open()
    return wiz


def test_starts_closed_then_opens_at_amount_entry():
    wiz = WithdrawalWizard(lambda: 170000)
    assert wiz.state is WizardState.CLOSED
    wiz.open()
    assert wiz.state is WizardState.AMOUNT_ENTRY
    assert wiz.request.amount == 0
    assert wiz.request.method == "bank"


def test_amount_within_earnings_moves_to_method_entry():
    wiz = _wizard()
    wiz.set_amount(5000)
    assert wiz.can_continue()
    assert wiz.submit_amount() is True
    assert wiz.state is WizardState.METHOD_ENTRY


@pytest.mark.parametrize("amount", [200000, 0, -10])
def test_amount_outside_guard_stays_put(amount):
    wiz = _wizard()
    wiz.set_amount(amount)
    assert not wiz.can_continue()
    assert wiz.submit_amount() is False
    assert wiz.state is WizardState.AMOUNT_ENTRY


def test_amount_equal_to_earnings_is_allowed():
    wiz = _wizard()
    wiz.set_amount(170000)
    assert wiz.submit_amount()


@pytest.mark.parametrize("method", ["bank", "upi", "card"])
def test_every_method_ends_in_failure(method):
    wiz = _wizard()
    wiz.set_amount(5000)
    wiz.submit_amount()
    wiz.choose_method(method)
    # no payment details filled in: still accepted
    assert wiz.submit() is True
    assert wiz.state is WizardState.PROCESSING

    wiz.finish_processing()
    assert wiz.state is WizardState.FAILED
    assert wiz.error == SERVER_UNREACHABLE
    assert wiz.receipt is None


def test_dismiss_after_failure_discards_request():
    wiz = _wizard()
    wiz.set_amount(5000)
    wiz.submit_amount()
    wiz.submit()
    wiz.finish_processing()
    wiz.dismiss()
    assert wiz.state is WizardState.CLOSED
    assert wiz.request is None
    wiz.open()
    assert wiz.request.amount == 0


def test_processing_cannot_be_cancelled():
    wiz = _wizard()
    wiz.set_amount(5000)
    wiz.submit_amount()
    wiz.submit()
    assert wiz.cancel() is False
    assert wiz.state is WizardState.PROCESSING


@pytest.mark.parametrize("to_method_step", [False, True])
def test_cancel_before_processing(to_method_step):
    wiz = _wizard()
    wiz.set_amount(5000)
    if to_method_step:
        wiz.submit_amount()
    assert wiz.cancel() is True
    assert wiz.state is WizardState.CLOSED
    assert wiz.request is None


def test_back_keeps_amount():
    wiz = _wizard()
    wiz.set_amount(5000)
    wiz.submit_amount()
    wiz.back()
    assert wiz.state is WizardState.AMOUNT_ENTRY
    assert wiz.request.amount == 5000


def test_details_are_kept_per_method():
    wiz = _wizard()
    wiz.set_amount(100)
    wiz.submit_amount()
    wiz.choose_method("card")
    wiz.set_detail("card_number", "12345678901234567890")
    assert wiz.request.details() == {"card_number": "1234567890123456"}


def test_unknown_method_or_detail_raises():
    wiz = _wizard()
    wiz.set_amount(100)
    wiz.submit_amount()
    with pytest.raises(ValueError):
        wiz.choose_method("cheque")
    with pytest.raises(ValueError):
        wiz.set_detail("pin", "0000")


def test_submit_only_from_method_entry():
    wiz = _wizard()
    assert wiz.submit() is False
    assert wiz.state is WizardState.AMOUNT_ENTRY


def test_earnings_read_at_guard_time():
    total = {"value": 1000}
    wiz = WithdrawalWizard(lambda: total["value"])
    wiz.open()
    wiz.set_amount(5000)
    assert not wiz.can_continue()
    total["value"] = 10000
    assert wiz.can_continue()


class RecordingGateway:
    def __init__(self, fail=False):
        self.fail = fail
        self.requests = []

    def submit(self, request):
        self.requests.append(request)
        if self.fail:
            raise PaymentError("bank is closed")
        return Receipt(reference="R-1", amount=request.amount, method=request.method)


def test_gateway_is_pluggable():
    gw = RecordingGateway()
    wiz = _wizard(gateway=gw)
    wiz.set_amount(2500)
    wiz.submit_amount()
    wiz.choose_method("upi")
    wiz.set_detail("upi_id", "me@upi")
    wiz.submit()
    wiz.finish_processing()

    assert gw.requests[0].upi_id == "me@upi"
    assert wiz.receipt.amount == 2500
    assert wiz.state is WizardState.CLOSED


def test_gateway_error_message_is_shown():
    wiz = _wizard(gateway=RecordingGateway(fail=True))
    wiz.set_amount(10)
    wiz.submit_amount()
    wiz.submit()
    wiz.finish_processing()
    assert wiz.state is WizardState.FAILED
    assert wiz.error == "bank is closed"
