"""
SEPA QR - EPC payment payloads for banking apps

Builds the text record that an EPC QR code ("GiroCode") carries:
1. Collect beneficiary, amount and remittance fields through a fluent builder
2. Validate every field against the EPC069-12 limits as it is set
3. Check cross-field rules and render the 12-line payload

The QR symbol itself is drawn by whatever QR library the host app uses.
"""

from sepa_qr.domain.defaults import CharacterSet
from sepa_qr.domain.exceptions import (
    InvalidStateError,
    MissingValueError,
    OutOfRangeError,
    SepaQrError,
)
from sepa_qr.domain.payment_record import PaymentRecord
from sepa_qr.domain.value_objects import Amount

__version__ = "1.0.0"

__all__ = [
    "Amount",
    "CharacterSet",
    "InvalidStateError",
    "MissingValueError",
    "OutOfRangeError",
    "PaymentRecord",
    "SepaQrError",
]
