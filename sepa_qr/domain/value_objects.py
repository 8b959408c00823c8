"""
Value Objects - Immutable Payment Concepts

Two amounts are equal if their values are equal.

Why a value object for a single Decimal?
- The EPC payload always shows exactly two fraction digits
- Formatting must not depend on the host's locale ("100.00", never "100,00")
- Once quantized, the amount cannot drift between validation and rendering
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, field_validator

from sepa_qr.domain.defaults import CURRENCY

CENT = Decimal("0.01")


class Amount(BaseModel):
    """
    EUR amount of a credit transfer.

    Range checks live in the field validators; this object only owns
    precision and formatting.
    """

    model_config = ConfigDict(frozen=True)

    value: Decimal

    @field_validator("value")
    @classmethod
    def quantize_to_cents(cls, v: Decimal) -> Decimal:
        """Keep exactly two fraction digits."""
        return v.quantize(CENT, rounding=ROUND_HALF_UP)

    @property
    def currency(self) -> str:
        return CURRENCY

    def formatted(self) -> str:
        """
        Plain decimal text with two fraction digits.

        Example: Amount(value=Decimal("100")).formatted() == "100.00"
        """
        return f"{self.value:.2f}"

    def to_payload_field(self) -> str:
        """Amount line of the payload, e.g. "EUR100.00"."""
        return f"{self.currency}{self.formatted()}"

    def __str__(self) -> str:
        return self.to_payload_field()

    def __repr__(self) -> str:
        return f"Amount({self.value}, {self.currency})"
