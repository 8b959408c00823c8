"""
PaymentRecord - the EPC QR payload builder

A record is filled in through chained setters and rendered once complete:

    payload = (
        PaymentRecord()
        .set_name("John Doe")
        .set_account_number("DE89370400440532013000")
        .set_amount(Decimal("100.00"))
        .render()
    )

Field limits are enforced by each setter. Rules that involve more than
one field are only checked by render(), so fields can be set in any order.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import structlog

from sepa_qr.domain.defaults import (
    ACCOUNT_NUMBER_LENGTH,
    BIC_LENGTHS,
    DEFAULT_CHARACTER_SET,
    DEFAULT_IDENTIFICATION_CODE,
    DEFAULT_SERVICE_TAG,
    DEFAULT_VERSION,
    INFORMATION_LENGTH,
    NAME_LENGTH,
    PURPOSE_LENGTH,
    STRUCTURED_REMITTANCE_LENGTH,
    UNSTRUCTURED_REMITTANCE_LENGTH,
    CharacterSet,
)
from sepa_qr.domain.validation import (
    AmountInput,
    validate_amount,
    validate_exact_lengths,
    validate_record,
    validate_text,
    validate_version,
)
from sepa_qr.domain.value_objects import Amount

# Bound to a stdlib logger so nothing is printed until the host app configures logging
logger = structlog.wrap_logger(logging.getLogger(__name__))


class PaymentRecord:
    """
    SEPA credit transfer as carried by an EPC QR code.

    Service tag, character set and identification code are fixed. Every
    other field has a setter that returns the record; optional fields also
    have a clear_* method.

    Not thread-safe: setters mutate the record in place.
    """

    def __init__(self) -> None:
        self._service_tag = DEFAULT_SERVICE_TAG
        self._version = DEFAULT_VERSION
        self._character_set = DEFAULT_CHARACTER_SET
        self._identification_code = DEFAULT_IDENTIFICATION_CODE

        self._bic: Optional[str] = None
        self._name: Optional[str] = None
        self._account_number: Optional[str] = None
        self._amount: Optional[Amount] = None
        self._purpose: Optional[str] = None
        self._structured_remittance_information: Optional[str] = None
        self._unstructured_remittance_information: Optional[str] = None
        self._information: Optional[str] = None

    # ------------------------------------------------------------------
    # Fixed fields
    # ------------------------------------------------------------------

    @property
    def service_tag(self) -> str:
        return self._service_tag

    @property
    def character_set(self) -> CharacterSet:
        return self._character_set

    @property
    def identification_code(self) -> str:
        return self._identification_code

    # ------------------------------------------------------------------
    # Settable fields
    # ------------------------------------------------------------------

    @property
    def version(self) -> int:
        return self._version

    @property
    def bic(self) -> Optional[str]:
        """BIC of the beneficiary bank. Mandatory in version 1 only."""
        return self._bic

    @property
    def name(self) -> Optional[str]:
        """Name of the beneficiary."""
        return self._name

    @property
    def account_number(self) -> Optional[str]:
        """IBAN of the beneficiary. Only the length is checked."""
        return self._account_number

    @property
    def amount(self) -> Optional[Amount]:
        """Amount in EUR, None until set."""
        return self._amount

    @property
    def purpose(self) -> Optional[str]:
        """Four-letter ISO 20022 purpose code, e.g. "CHAR" or "GDDS"."""
        return self._purpose

    @property
    def structured_remittance_information(self) -> Optional[str]:
        """Creditor reference (ISO 11649 "RF..." reference)."""
        return self._structured_remittance_information

    @property
    def unstructured_remittance_information(self) -> Optional[str]:
        """Free-text remittance line shown to the payer."""
        return self._unstructured_remittance_information

    @property
    def information(self) -> Optional[str]:
        """Beneficiary to originator information."""
        return self._information

    def set_version(self, version: int) -> PaymentRecord:
        """Set the payload version. Only 1 or 2 is allowed."""
        self._version = validate_version(version)
        return self

    def set_bic(self, bic: str) -> PaymentRecord:
        """Set the BIC (8 or 11 characters once trimmed)."""
        self._bic = validate_exact_lengths("bic", bic, BIC_LENGTHS)
        return self

    def clear_bic(self) -> PaymentRecord:
        self._bic = None
        return self

    def set_name(self, name: str) -> PaymentRecord:
        self._name = validate_text("name", name, *NAME_LENGTH)
        return self

    def set_account_number(self, account_number: str) -> PaymentRecord:
        self._account_number = validate_text(
            "account_number", account_number, *ACCOUNT_NUMBER_LENGTH
        )
        return self

    def set_amount(self, amount: AmountInput) -> PaymentRecord:
        """
        Set the amount in EUR.

        Accepts Decimal, int, float or a numeric string between 0.01 and
        999999999.99. The value is kept with two fraction digits.
        """
        self._amount = validate_amount(amount)
        return self

    def set_purpose(self, purpose: str) -> PaymentRecord:
        self._purpose = validate_text("purpose", purpose, *PURPOSE_LENGTH)
        return self

    def clear_purpose(self) -> PaymentRecord:
        self._purpose = None
        return self

    def set_structured_remittance_information(
        self, structured_remittance_information: str
    ) -> PaymentRecord:
        self._structured_remittance_information = validate_text(
            "structured_remittance_information",
            structured_remittance_information,
            *STRUCTURED_REMITTANCE_LENGTH,
        )
        return self

    def clear_structured_remittance_information(self) -> PaymentRecord:
        self._structured_remittance_information = None
        return self

    def set_unstructured_remittance_information(
        self, unstructured_remittance_information: str
    ) -> PaymentRecord:
        self._unstructured_remittance_information = validate_text(
            "unstructured_remittance_information",
            unstructured_remittance_information,
            *UNSTRUCTURED_REMITTANCE_LENGTH,
        )
        return self

    def clear_unstructured_remittance_information(self) -> PaymentRecord:
        self._unstructured_remittance_information = None
        return self

    def set_information(self, information: str) -> PaymentRecord:
        self._information = validate_text("information", information, *INFORMATION_LENGTH)
        return self

    def clear_information(self) -> PaymentRecord:
        self._information = None
        return self

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def render(self) -> str:
        """
        Build the QR payload text.

        Twelve lines in EPC order, each terminated by "\\n" (including the
        last). Absent optional fields become empty lines.

        Raises:
            InvalidStateError: a cross-field rule is broken
            MissingValueError: name, account number or amount is not set
        """
        validate_record(self)

        lines = [
            self._service_tag,
            f"{self._version:03d}",
            self._character_set.code,
            self._identification_code,
            self._bic or "",
            self._name,
            self._account_number,
            self._amount.to_payload_field(),
            self._purpose or "",
            self._structured_remittance_information or "",
            self._unstructured_remittance_information or "",
            self._information or "",
        ]
        payload = "".join(f"{line}\n" for line in lines)

        # Payment details stay out of the logs
        logger.debug(
            "sepa_payload_rendered",
            version=self._version,
            lines=len(lines),
            payload_length=len(payload),
        )
        return payload

    def encode(self) -> bytes:
        """Rendered payload as bytes in the record's character set."""
        return self.render().encode(self._character_set.codec)

    def to_dict(self) -> dict[str, Any]:
        """Snapshot of every field, amounts as Decimal."""
        return {
            "service_tag": self._service_tag,
            "version": self._version,
            "character_set": self._character_set.value,
            "identification_code": self._identification_code,
            "bic": self._bic,
            "name": self._name,
            "account_number": self._account_number,
            "amount": self._amount.value if self._amount is not None else None,
            "purpose": self._purpose,
            "structured_remittance_information": self._structured_remittance_information,
            "unstructured_remittance_information": self._unstructured_remittance_information,
            "information": self._information,
        }

    def __repr__(self) -> str:
        return (
            f"PaymentRecord(version={self._version}, name={self._name!r}, "
            f"amount={self._amount!r})"
        )
