"""Payment record builder."""

import logging
from collections.abc import Mapping

from ..validators import (
    FIELD_LENGTH_LIMITS,
    AccountIdValidator,
    AmountValidator,
    TaxIdValidator,
    ValidationResult,
    limit,
    normalize_amount,
)
from .base import FieldSpec, PaymentRecord, passthrough

logger = logging.getLogger(__name__)


class PaymentRecordBuilder:
    """Builds a PaymentRecord from named text inputs."""

    def __init__(
        self,
        account_id_validator: AccountIdValidator | None = None,
        tax_id_validator: TaxIdValidator | None = None,
        amount_validator: AmountValidator | None = None,
    ):
        self.account_id_validator = account_id_validator or AccountIdValidator()
        self.tax_id_validator = tax_id_validator or TaxIdValidator()
        self.amount_validator = amount_validator or AmountValidator()

        # Processing order is part of the contract: the first failing field wins
        self.fields: tuple[FieldSpec, ...] = (
            FieldSpec("account_id", self.account_id_validator.validate, FIELD_LENGTH_LIMITS["account_id"]),
            FieldSpec("tax_id", self.tax_id_validator.validate, FIELD_LENGTH_LIMITS["tax_id"]),
            FieldSpec("amount", self._amount, FIELD_LENGTH_LIMITS["amount"]),
            FieldSpec("recipient", passthrough, FIELD_LENGTH_LIMITS["recipient"]),
            FieldSpec("purpose", passthrough, FIELD_LENGTH_LIMITS["purpose"]),
        )

    def build(self, inputs: Mapping[str, str | None]) -> ValidationResult[PaymentRecord]:
        """
        Validate inputs and assemble a payment record.

        Fields are processed in order account_id, tax_id, amount, recipient,
        purpose. Processing stops at the first missing or invalid field and
        its failure is returned as is.

        Args:
            inputs: Raw field values keyed by field name

        Returns:
            ValidationResult with the PaymentRecord, or the first failure
        """
        values: dict[str, str] = {}

        for spec in self.fields:
            result = self._process_field(spec, inputs)
            if not result.is_valid:
                logger.warning(
                    "Payment record rejected at %s: %s",
                    result.error.field,
                    result.error_code,
                )
                return ValidationResult.from_error(result.error)
            values.setdefault(spec.name, result.value)

        logger.debug("Built payment record for account %s", values["account_id"])
        return ValidationResult.success(PaymentRecord(**values))

    def _process_field(self, spec: FieldSpec, inputs: Mapping[str, str | None]) -> ValidationResult[str]:
        """Look up, transform and truncate one field."""
        value = inputs.get(spec.name)
        if value is None:
            if spec.required:
                return ValidationResult.failure(spec.name, "MISSING_FIELD", f"Option {spec.name} is required")
            return ValidationResult.success("")

        result = spec.transformer(value)
        if not result.is_valid:
            return result
        return ValidationResult.success(limit(result.value, spec.max_length))

    def _amount(self, value: str) -> ValidationResult[str]:
        return normalize_amount(value, self.amount_validator)


_default_builder = PaymentRecordBuilder()


def build_payment_record(inputs: Mapping[str, str | None]) -> ValidationResult[PaymentRecord]:
    """Build a payment record with the default validators."""
    return _default_builder.build(inputs)
