"""
Tests for the two validation layers, independent of PaymentRecord.
"""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from sepa_qr.domain.exceptions import (
    InvalidStateError,
    MissingValueError,
    OutOfRangeError,
)
from sepa_qr.domain.validation import (
    validate_amount,
    validate_exact_lengths,
    validate_record,
    validate_text,
    validate_version,
)
from sepa_qr.domain.value_objects import Amount


def make_view(**overrides) -> SimpleNamespace:
    """Helper to create a valid record view."""
    fields = {
        "version": 2,
        "bic": None,
        "name": "John Doe",
        "account_number": "DE89370400440532013000",
        "amount": Amount(value=Decimal("100")),
        "structured_remittance_information": None,
        "unstructured_remittance_information": None,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


class TestFieldValidation:

    @pytest.mark.unit
    def test_validate_text_returns_trimmed_value(self) -> None:
        assert validate_text("name", "  John Doe  ", 1, 70) == "John Doe"

    @pytest.mark.unit
    def test_validate_text_names_field_and_bound(self) -> None:
        with pytest.raises(OutOfRangeError, match="between 1 and 4") as exc_info:
            validate_text("purpose", "ABCDE", 1, 4)

        assert exc_info.value.field == "purpose"
        assert exc_info.value.error_code == "out_of_range"

    @pytest.mark.unit
    def test_validate_text_rejects_non_string(self) -> None:
        with pytest.raises(TypeError, match="name must be a string"):
            validate_text("name", 123, 1, 70)

    @pytest.mark.unit
    def test_validate_exact_lengths(self) -> None:
        assert validate_exact_lengths("bic", " COBADEFF ", (8, 11)) == "COBADEFF"

        with pytest.raises(OutOfRangeError, match="length of 8 or 11"):
            validate_exact_lengths("bic", "COBADEFFX", (8, 11))

    @pytest.mark.unit
    def test_validate_version_rejects_bool(self) -> None:
        with pytest.raises(TypeError):
            validate_version(True)

    @pytest.mark.unit
    def test_validate_version_rejects_float(self) -> None:
        with pytest.raises(TypeError):
            validate_version(2.0)

    @pytest.mark.unit
    def test_validate_amount_returns_value_object(self) -> None:
        amount = validate_amount("0.1")

        assert isinstance(amount, Amount)
        assert amount.value == Decimal("0.10")

    @pytest.mark.unit
    def test_validate_amount_keeps_float_precision(self) -> None:
        assert validate_amount(0.1).formatted() == "0.10"
        assert validate_amount(19.99).formatted() == "19.99"

    @pytest.mark.unit
    def test_validate_amount_rejects_bool(self) -> None:
        with pytest.raises(TypeError):
            validate_amount(True)

    @pytest.mark.unit
    def test_validate_amount_bound_message(self) -> None:
        with pytest.raises(OutOfRangeError) as exc_info:
            validate_amount(0)

        assert exc_info.value.message == "The value should be between 0.01 and 999999999.99"


class TestRecordValidation:

    @pytest.mark.unit
    def test_valid_record_passes(self) -> None:
        validate_record(make_view())
        # Should not raise any exception

    @pytest.mark.unit
    def test_version_one_without_bic(self) -> None:
        with pytest.raises(InvalidStateError, match="BIC is required for version 1") as exc_info:
            validate_record(make_view(version=1))

        assert exc_info.value.error_code == "invalid_state"

    @pytest.mark.unit
    def test_version_one_with_bic(self) -> None:
        validate_record(make_view(version=1, bic="COBADEFF"))

    @pytest.mark.unit
    @pytest.mark.parametrize("field", ["name", "account_number", "amount"])
    def test_missing_required_field(self, field) -> None:
        with pytest.raises(MissingValueError) as exc_info:
            validate_record(make_view(**{field: None}))

        assert exc_info.value.field == field

    @pytest.mark.unit
    def test_check_order(self) -> None:
        """Version/BIC rule comes first, then name, account number and amount."""
        view = make_view(version=1, name=None, account_number=None, amount=None)
        with pytest.raises(InvalidStateError):
            validate_record(view)

        view.bic = "COBADEFF"
        with pytest.raises(MissingValueError, match="Name"):
            validate_record(view)

        view.name = "John Doe"
        with pytest.raises(MissingValueError, match="Account number"):
            validate_record(view)

        view.account_number = "DE89370400440532013000"
        with pytest.raises(MissingValueError, match="Amount"):
            validate_record(view)

    @pytest.mark.unit
    def test_both_remittance_fields(self) -> None:
        view = make_view(
            structured_remittance_information="RF18539007547034",
            unstructured_remittance_information="Invoice 7",
        )

        with pytest.raises(InvalidStateError, match="not both"):
            validate_record(view)

    @pytest.mark.unit
    def test_required_fields_checked_before_remittance_rule(self) -> None:
        view = make_view(
            amount=None,
            structured_remittance_information="RF18539007547034",
            unstructured_remittance_information="Invoice 7",
        )

        with pytest.raises(MissingValueError):
            validate_record(view)
