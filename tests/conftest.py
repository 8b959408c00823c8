"""
Pytest configuration and fixtures for SEPA QR tests.
"""

import logging
from decimal import Decimal

import pytest
import structlog

from sepa_qr.config import get_settings
from sepa_qr.domain.payment_record import PaymentRecord

JOHN_DOE_IBAN = "DE89370400440532013000"


@pytest.fixture
def record() -> PaymentRecord:
    """Fresh record with nothing set."""
    return PaymentRecord()


@pytest.fixture
def complete_record() -> PaymentRecord:
    """Record holding the minimum fields render() needs."""
    return (
        PaymentRecord()
        .set_name("John Doe")
        .set_account_number(JOHN_DOE_IBAN)
        .set_amount(Decimal("100.00"))
    )


@pytest.fixture(autouse=True)
def reset_logging_state():
    """Keep logging configuration and cached settings from leaking between tests."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    get_settings.cache_clear()

    yield

    structlog.reset_defaults()
    get_settings.cache_clear()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
