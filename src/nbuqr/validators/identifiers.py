"""Account (IBAN) and Ukrainian tax identifier validation.

Structural checks are delegated to python-stdnum; this module only adapts its
exceptions to ValidationResult and applies the NBU-specific rules on top.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from stdnum import iban
from stdnum.exceptions import ValidationError as StdnumValidationError
from stdnum.ua import edrpou, rntrc

from ..config import settings
from .base import ValidationResult

logger = logging.getLogger(__name__)

INVALID_ACCOUNT_ID_MESSAGE = "Invalid account identifier"
INVALID_TAX_ID_MESSAGE = "Invalid Tax ID"


@dataclass(frozen=True)
class AccountId:
    """Parsed IBAN."""

    country_code: str
    check_digits: str
    bban: str

    @property
    def compact(self) -> str:
        """IBAN without spaces, e.g. ``UA213223130000026007233566001``."""
        return f"{self.country_code}{self.check_digits}{self.bban}"


class TaxIdType(str, Enum):
    """Kind of Ukrainian tax identifier."""

    EDRPOU = "edrpou"  # legal entities, 8 digits
    RNTRC = "rntrc"  # individuals, 10 digits


@dataclass(frozen=True)
class TaxId:
    """Parsed tax identifier."""

    code: str
    id_type: TaxIdType


def parse_account_id(raw: str) -> ValidationResult[AccountId]:
    """
    Parse and structurally validate an IBAN.

    Args:
        raw: IBAN in any spacing or letter case

    Returns:
        ValidationResult with the parsed AccountId
    """
    if not raw.strip():
        return ValidationResult.failure("account_id", "INVALID_ACCOUNT_ID", INVALID_ACCOUNT_ID_MESSAGE)

    try:
        number = iban.validate(raw)
    except StdnumValidationError as e:
        logger.debug("Rejected account identifier %r: %s", raw, e)
        return ValidationResult.failure("account_id", "INVALID_ACCOUNT_ID", INVALID_ACCOUNT_ID_MESSAGE)

    return ValidationResult.success(
        AccountId(country_code=number[:2], check_digits=number[2:4], bban=number[4:])
    )


class AccountIdValidator:
    """Validates that an IBAN is well-formed and belongs to one country."""

    def __init__(self, country_code: str | None = None):
        """
        Initialize the account identifier validator.

        Args:
            country_code: Required IBAN country, defaults to settings
        """
        self.country_code = (country_code or settings.account_country_code).upper()

    def validate(self, raw: str) -> ValidationResult[str]:
        """
        Validate an IBAN and return its compact form.

        Args:
            raw: IBAN text

        Returns:
            ValidationResult with the compact IBAN
        """
        result = parse_account_id(raw)
        if not result.is_valid:
            return ValidationResult.from_error(result.error)

        account_id = result.value
        if account_id.country_code != self.country_code:
            logger.debug(
                "Account identifier country %s does not match %s",
                account_id.country_code,
                self.country_code,
            )
            return ValidationResult.failure("account_id", "INVALID_ACCOUNT_ID", INVALID_ACCOUNT_ID_MESSAGE)

        return ValidationResult.success(account_id.compact)

    def is_valid(self, raw: str) -> bool:
        """Check if an IBAN is valid."""
        return self.validate(raw).is_valid


def parse_tax_id(raw: str) -> ValidationResult[TaxId]:
    """
    Parse and validate an EDRPOU or RNTRC code.

    The kind is chosen by digit count: 8 for EDRPOU, 10 for RNTRC.

    Args:
        raw: Tax identifier text

    Returns:
        ValidationResult with the parsed TaxId
    """
    compacted = "".join(raw.split())
    if len(compacted) == 8:
        module, id_type = edrpou, TaxIdType.EDRPOU
    elif len(compacted) == 10:
        module, id_type = rntrc, TaxIdType.RNTRC
    else:
        return ValidationResult.failure("tax_id", "INVALID_TAX_ID", INVALID_TAX_ID_MESSAGE)

    try:
        code = module.validate(compacted)
    except StdnumValidationError as e:
        logger.debug("Rejected %s %r: %s", id_type.value, raw, e)
        return ValidationResult.failure("tax_id", "INVALID_TAX_ID", INVALID_TAX_ID_MESSAGE)

    return ValidationResult.success(TaxId(code=code, id_type=id_type))


class TaxIdValidator:
    """Validates tax identifiers and returns their canonical code."""

    def validate(self, raw: str) -> ValidationResult[str]:
        """Validate a tax identifier and return its code."""
        result = parse_tax_id(raw)
        if not result.is_valid:
            return ValidationResult.from_error(result.error)
        return ValidationResult.success(result.value.code)

    def is_valid(self, raw: str) -> bool:
        """Check if a tax identifier is valid."""
        return self.validate(raw).is_valid
