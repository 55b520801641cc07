"""Pytest fixtures for NBU QR tests."""

import pytest

from nbuqr.transformers import PaymentRecord


@pytest.fixture
def valid_iban() -> str:
    """A valid Ukrainian IBAN."""
    return "UA213223130000026007233566001"


@pytest.fixture
def valid_inputs(valid_iban) -> dict[str, str]:
    """Inputs for a payment that passes every check."""
    return {
        "account_id": valid_iban,
        "tax_id": "12345678",
        "amount": "123.45",
        "recipient": "Company Name",
        "purpose": "Payment for services",
    }


@pytest.fixture
def payment_record(valid_iban) -> PaymentRecord:
    """An already validated payment record."""
    return PaymentRecord(
        recipient="Company Name",
        account_id=valid_iban,
        amount="UAH123.45",
        tax_id="12345678",
        purpose="Payment for services",
    )


@pytest.fixture
def expected_payload(valid_iban) -> str:
    """Canonical payload of the payment_record fixture with default header."""
    return "\n".join(
        [
            "BCD",
            "001",
            "1",
            "UCT",
            "",
            "Company Name",
            valid_iban,
            "UAH123.45",
            "12345678",
            "",
            "",
            "Payment for services",
        ]
    )
