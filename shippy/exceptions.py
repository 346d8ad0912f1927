# exceptions.py
class PaymentError(Exception):
    """Raised by a payment gateway when a withdrawal cannot be completed."""


class UnknownTab(ValueError):
    def __init__(self, tab):
        super().__init__(f"unknown tab: {tab!r}")
        self.tab = tab
