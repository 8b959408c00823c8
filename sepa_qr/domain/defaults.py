"""
Scheme constants for EPC QR payloads.

Values come from EPC069-12 ("Quick Response Code: Guidelines to Enable
Data Capture for the Initiation of a SEPA Credit Transfer").
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum


class CharacterSet(str, Enum):
    """
    Character set tag written on line 3 of the payload.

    The value is the single-character numeric code defined by the EPC.
    Only UTF-8 is supported.
    """

    UTF8 = "1"

    @property
    def code(self) -> str:
        return self.value

    @property
    def codec(self) -> str:
        """Python codec used when the payload is turned into bytes."""
        return _CODECS[self]


_CODECS = {
    CharacterSet.UTF8: "utf-8",
}


DEFAULT_SERVICE_TAG = "BCD"
DEFAULT_VERSION = 2
DEFAULT_CHARACTER_SET = CharacterSet.UTF8
DEFAULT_IDENTIFICATION_CODE = "SCT"

# EUR is the only currency an SCT payload can carry
CURRENCY = "EUR"

SUPPORTED_VERSIONS = (1, 2)

# (min, max) trimmed lengths
NAME_LENGTH = (1, 70)
ACCOUNT_NUMBER_LENGTH = (1, 34)
PURPOSE_LENGTH = (1, 4)
STRUCTURED_REMITTANCE_LENGTH = (1, 35)
UNSTRUCTURED_REMITTANCE_LENGTH = (1, 140)
INFORMATION_LENGTH = (1, 70)

# BIC8 or BIC11
BIC_LENGTHS = (8, 11)

MIN_AMOUNT = Decimal("0.01")
MAX_AMOUNT = Decimal("999999999.99")
