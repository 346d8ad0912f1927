# logic/withdrawal.py
from __future__ import annotations
import enum
import logging
from typing import Callable, Optional, Protocol

from shippy.exceptions import PaymentError
from shippy.models.withdrawal import (
    CARD_NUMBER_MAX, METHOD_FIELDS, METHODS, Receipt, WithdrawalRequest,
)

logger = logging.getLogger(__name__)

SERVER_UNREACHABLE = "Unable to connect to server. Please contact the server owner to withdraw money."


class PaymentGateway(Protocol):
    def submit(self, request: WithdrawalRequest) -> Receipt:
        """Return a receipt, or raise PaymentError."""


class SimulatedGateway:
    """Stand-in for the payout backend: it is never reachable."""

    def submit(self, request: WithdrawalRequest) -> Receipt:
        raise PaymentError(SERVER_UNREACHABLE)


class WizardState(enum.Enum):
    CLOSED = "closed"
    AMOUNT_ENTRY = "amount"
    METHOD_ENTRY = "method"
    PROCESSING = "processing"
    FAILED = "failed"


class WithdrawalWizard:
    """
    Amount → method/details → processing → failed → closed.

    The wizard holds no timers; the caller decides when processing finishes
    (finish_processing) and when the failure page goes away (dismiss).
    Processing cannot be cancelled.
    """

    def __init__(self, total_earnings: Callable[[], float], gateway: Optional[PaymentGateway] = None):
        self.total_earnings = total_earnings
        self.gateway = gateway or SimulatedGateway()
        self.state = WizardState.CLOSED
        self.request: Optional[WithdrawalRequest] = None
        self.error: Optional[str] = None
        self.receipt: Optional[Receipt] = None

    @property
    def is_open(self) -> bool:
        return self.state is not WizardState.CLOSED

    def open(self):
        self.state = WizardState.AMOUNT_ENTRY
        self.request = WithdrawalRequest()
        self.error = None
        self.receipt = None

    def _close(self):
        # request is dropped without being stored anywhere
        self.state = WizardState.CLOSED
        self.request = None

    # ---------- step 1: amount ----------
    def set_amount(self, amount: float):
        if self.state is WizardState.AMOUNT_ENTRY:
            self.request.amount = amount

    def can_continue(self) -> bool:
        return (self.state is WizardState.AMOUNT_ENTRY
                and 0 < self.request.amount <= self.total_earnings())

    def submit_amount(self) -> bool:
        if not self.can_continue():
            return False
        self.state = WizardState.METHOD_ENTRY
        return True

    # ---------- step 2: method ----------
    def choose_method(self, method: str):
        if method not in METHODS:
            raise ValueError(f"unknown withdrawal method: {method!r}")
        if self.state is WizardState.METHOD_ENTRY:
            self.request.method = method

    def set_detail(self, name: str, value: str):
        known = {n for fields in METHOD_FIELDS.values() for n in fields}
        if name not in known:
            raise ValueError(f"unknown payment detail: {name!r}")
        if self.state is not WizardState.METHOD_ENTRY:
            return
        if name == "card_number":
            value = value[:CARD_NUMBER_MAX]
        setattr(self.request, name, value)

    def back(self):
        if self.state is WizardState.METHOD_ENTRY:
            self.state = WizardState.AMOUNT_ENTRY

    def submit(self) -> bool:
        # payment details are not checked
        if self.state is not WizardState.METHOD_ENTRY:
            return False
        self.state = WizardState.PROCESSING
        logger.info("withdrawal of %s via %s submitted", self.request.amount, self.request.method)
        return True

    # ---------- processing ----------
    def finish_processing(self):
        if self.state is not WizardState.PROCESSING:
            return
        try:
            receipt = self.gateway.submit(self.request)
        except PaymentError as e:
            logger.info("withdrawal failed: %s", e)
            self.error = str(e)
            self.state = WizardState.FAILED
            return
        self.receipt = receipt
        self._close()

    def dismiss(self):
        if self.state is WizardState.FAILED:
            self._close()

    def cancel(self) -> bool:
        if self.state in (WizardState.AMOUNT_ENTRY, WizardState.METHOD_ENTRY):
            self._close()
            return True
        return False
