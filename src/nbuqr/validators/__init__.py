"""Validation utilities for NBU QR payment data."""

from .base import ValidationError, ValidationResult
from .amount import Amount, AmountValidator, normalize_amount, parse_amount
from .identifiers import (
    AccountId,
    AccountIdValidator,
    TaxId,
    TaxIdType,
    TaxIdValidator,
    parse_account_id,
    parse_tax_id,
)
from .lengths import FIELD_LENGTH_LIMITS, limit

__all__ = [
    "ValidationError",
    "ValidationResult",
    "Amount",
    "AmountValidator",
    "normalize_amount",
    "parse_amount",
    "AccountId",
    "AccountIdValidator",
    "TaxId",
    "TaxIdType",
    "TaxIdValidator",
    "parse_account_id",
    "parse_tax_id",
    "FIELD_LENGTH_LIMITS",
    "limit",
]
