# models/withdrawal.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, Optional

Method = Literal["bank", "upi", "card"]
METHODS = ("bank", "upi", "card")
METHOD_LABELS = {"bank": "Bank Transfer", "upi": "UPI", "card": "Card"}

# Detail fields shown for each method
METHOD_FIELDS = {
    "bank": ("account_number", "ifsc_code", "account_holder_name"),
    "upi": ("upi_id",),
    "card": ("card_number",),
}
CARD_NUMBER_MAX = 16

IFSC_CODES = [
    "SBIN0000001", "HDFC0000001", "ICIC0000001", "AXIS0000001", "PUNB0000001",
    "CNRB0000001", "UBIN0000001", "IOBA0000001", "BKID0000001", "CBIN0000001",
    "ALLA0000001", "VIJB0000001", "INDB0000001", "MAHB0000001", "TMBL0000001",
]


@dataclass
class WithdrawalRequest:
    """Lives for one wizard session only; never written to storage."""
    amount: float = 0
    method: Method = "bank"
    account_number: Optional[str] = None
    ifsc_code: Optional[str] = None
    account_holder_name: Optional[str] = None
    upi_id: Optional[str] = None
    card_number: Optional[str] = None

    def details(self) -> dict:
        return {name: getattr(self, name) for name in METHOD_FIELDS[self.method]}


@dataclass(frozen=True)
class Receipt:
    reference: str
    amount: float
    method: Method
    issued_at: datetime = field(default_factory=datetime.now)
