"""Amount parsing, normalization and validation for NBU QR payloads."""

import logging
import re
from dataclasses import dataclass

from .base import ValidationResult

logger = logging.getLogger(__name__)

# Amounts are always in Ukrainian hryvnia
CURRENCY = "UAH"
DECIMAL_SEPARATOR = "."

# Units longer than this exceed 999,999,999.99
MAX_UNITS_DIGITS = 9

_WHITESPACE_RE = re.compile(r"\s")
# Searched, not fully matched: anything after the cents is ignored. ASCII digits only
_AMOUNT_RE = re.compile(r"(?P<units>\d+)[,.]?(?P<cents>\d{0,2})", re.ASCII)

_ZERO_CENTS = frozenset({"", "0", "00"})


@dataclass(frozen=True)
class Amount:
    """
    Canonical monetary amount.

    Attributes:
        units: Whole hryvnias as digits without leading zeros ("0" for zero)
        cents: Kopiykas without trailing zeros, or None when there are none
    """

    units: str = "0"
    cents: str | None = None

    def to_canonical_string(self) -> str:
        """Render as the NBU amount field, e.g. ``UAH100.5``."""
        if self.cents is None:
            return f"{CURRENCY}{self.units}"
        return f"{CURRENCY}{self.units}{DECIMAL_SEPARATOR}{self.cents}"


class AmountValidator:
    """Validates canonical amounts against NBU bounds."""

    def __init__(self, max_units_digits: int = MAX_UNITS_DIGITS):
        """
        Initialize the amount validator.

        Args:
            max_units_digits: Maximum number of digits allowed in the units part
        """
        self.max_units_digits = max_units_digits

    def validate(self, amount: Amount) -> ValidationResult[Amount]:
        """
        Validate an amount.

        The magnitude check runs before the zero check.

        Args:
            amount: Parsed amount

        Returns:
            ValidationResult holding the unchanged amount on success
        """
        if len(amount.units) > self.max_units_digits:
            return ValidationResult.failure(
                "amount",
                "AMOUNT_TOO_LARGE",
                f"Amount greater than {'9' * self.max_units_digits}.99",
            )

        if amount.units == "0" and amount.cents is None:
            return ValidationResult.failure("amount", "ZERO_AMOUNT", "Zero amount")

        return ValidationResult.success(amount)

    def is_valid(self, amount: Amount) -> bool:
        """Check if an amount is valid."""
        return self.validate(amount).is_valid


_default_validator = AmountValidator()


def _normalize_units(units: str) -> str:
    return units.lstrip("0") or "0"


def _normalize_cents(cents: str | None) -> str | None:
    if cents is None or cents in _ZERO_CENTS:
        return None
    return cents.rstrip("0")


def parse_amount(raw: str, validator: AmountValidator | None = None) -> ValidationResult[Amount]:
    """
    Parse free-form amount text into a validated Amount.

    Whitespace anywhere in the text is dropped, then the first run of digits is
    taken as units, optionally followed by ``.`` or ``,`` and up to two cent
    digits.

    Args:
        raw: Amount text, e.g. ``"0123.40"`` or ``"100 , 5"``
        validator: Validator to apply, defaults to the NBU bounds

    Returns:
        ValidationResult with the Amount, or the parse/validation failure
    """
    cleaned = _WHITESPACE_RE.sub("", raw)
    match = _AMOUNT_RE.search(cleaned)
    if match is None:
        logger.debug("No amount found in %r", raw)
        return ValidationResult.failure("amount", "INVALID_AMOUNT", "Invalid amount")

    amount = Amount(
        units=_normalize_units(match.group("units")),
        cents=_normalize_cents(match.group("cents")),
    )
    return (validator or _default_validator).validate(amount)


def normalize_amount(raw: str, validator: AmountValidator | None = None) -> ValidationResult[str]:
    """
    Parse an amount and render it as the canonical NBU string.

    Examples:
        ``"0123.40"`` -> ``"UAH123.4"``, ``"123"`` -> ``"UAH123"``
    """
    result = parse_amount(raw, validator)
    if not result.is_valid:
        return ValidationResult.from_error(result.error)
    return ValidationResult.success(result.value.to_canonical_string())
