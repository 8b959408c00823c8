"""
Validation - two layers, checked at different times

1. Field level: runs when a setter is called. Each function normalizes its
   input (trims text, quantizes amounts) and returns the value to store,
   or raises MissingValueError / OutOfRangeError.
2. Record level: runs when the payload is rendered. Checks rules that span
   several fields (version 1 needs a BIC, only one kind of remittance
   information) and that required fields were set at all.

Keeping the layers apart means a record can pass through invalid
intermediate states while it is being filled in, e.g. both remittance
fields set for a moment before one is cleared.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional, Protocol, Union

from sepa_qr.domain.defaults import MAX_AMOUNT, MIN_AMOUNT, SUPPORTED_VERSIONS
from sepa_qr.domain.exceptions import (
    InvalidStateError,
    MissingValueError,
    OutOfRangeError,
)
from sepa_qr.domain.value_objects import Amount

AmountInput = Union[Decimal, int, float, str]


class RecordView(Protocol):
    """Read side of a payment record, as seen by the render-time checks."""

    @property
    def version(self) -> int: ...

    @property
    def bic(self) -> Optional[str]: ...

    @property
    def name(self) -> Optional[str]: ...

    @property
    def account_number(self) -> Optional[str]: ...

    @property
    def amount(self) -> Optional[Amount]: ...

    @property
    def structured_remittance_information(self) -> Optional[str]: ...

    @property
    def unstructured_remittance_information(self) -> Optional[str]: ...


# ============================================================================
# FIELD LEVEL
# ============================================================================

def _require_text(field: str, value: Any) -> str:
    if value is None:
        raise MissingValueError(field)
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a string, got {type(value).__name__}")
    return value.strip()


def validate_text(field: str, value: Optional[str], min_length: int, max_length: int) -> str:
    """
    Trim a text field and check its length.

    Whitespace-only input trims to "" and fails the lower bound.
    """
    text = _require_text(field, value)
    if len(text) < min_length or len(text) > max_length:
        raise OutOfRangeError(
            field,
            f"The value should have a length between {min_length} and {max_length}",
        )
    return text


def validate_exact_lengths(field: str, value: Optional[str], lengths: Iterable[int]) -> str:
    """Trim a text field whose length must be one of a fixed set (BIC8/BIC11)."""
    allowed = tuple(lengths)
    text = _require_text(field, value)
    if len(text) not in allowed:
        options = " or ".join(str(n) for n in allowed)
        raise OutOfRangeError(field, f"The value should have a length of {options}")
    return text


def validate_version(version: Optional[int]) -> int:
    if version is None:
        raise MissingValueError("version")
    # bool is an int subclass; True would otherwise pass as version 1
    if isinstance(version, bool) or not isinstance(version, int):
        raise TypeError(f"version must be an int, got {type(version).__name__}")
    if version not in SUPPORTED_VERSIONS:
        raise OutOfRangeError("version", "Only 1 or 2 is allowed")
    return version


def validate_amount(amount: Optional[AmountInput]) -> Amount:
    """
    Check an amount against the EPC limits and quantize it to cents.

    Floats go through str() first so 0.1 stays 0.1 rather than
    0.1000000000000000055511151231257827.
    """
    if amount is None:
        raise MissingValueError("amount")
    if isinstance(amount, bool):
        raise TypeError("amount must be a number, got bool")

    bound_message = f"The value should be between {MIN_AMOUNT} and {MAX_AMOUNT}"
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount).strip())
    except InvalidOperation:
        raise OutOfRangeError("amount", bound_message) from None

    if not value.is_finite() or value < MIN_AMOUNT or value > MAX_AMOUNT:
        raise OutOfRangeError("amount", bound_message)
    return Amount(value=value)


# ============================================================================
# RECORD LEVEL
# ============================================================================

def validate_record(record: RecordView) -> None:
    """
    Render-time checks, in a fixed order. The first failure wins.

    Raises:
        InvalidStateError: version 1 without BIC, or both remittance fields set
        MissingValueError: name, account number or amount not set
    """
    if record.version == 1 and record.bic is None:
        raise InvalidStateError("BIC is required for version 1", field="bic")

    if record.name is None:
        raise MissingValueError("name", "Name is required")

    if record.account_number is None:
        raise MissingValueError("account_number", "Account number is required")

    if record.amount is None:
        raise MissingValueError("amount", "Amount is required")

    if (
        record.structured_remittance_information is not None
        and record.unstructured_remittance_information is not None
    ):
        raise InvalidStateError(
            "Only structured or unstructured remittance information can be set, not both"
        )
