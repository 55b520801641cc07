"""Payment record schema and field descriptors."""

from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from ..validators import ValidationResult


class PaymentRecord(BaseModel):
    """
    Open data of an NBU payment QR code.

    Every field is already validated and length-limited when produced by the
    builder; the max lengths below repeat the NBU limits for records built by
    hand.
    """

    model_config = ConfigDict(frozen=True)

    recipient: str = Field(..., max_length=70, description="Payment recipient name")
    account_id: str = Field(..., max_length=34, description="Compact recipient IBAN")
    amount: str = Field(..., max_length=15, description="Amount with currency, e.g. UAH100.5")
    tax_id: str = Field(..., max_length=10, description="Recipient EDRPOU or RNTRC code")
    purpose: str = Field(..., max_length=140, description="Purpose of payment")


FieldTransformer = Callable[[str], ValidationResult[str]]


def passthrough(value: str) -> ValidationResult[str]:
    """Accept free text unchanged."""
    return ValidationResult.success(value)


@dataclass(frozen=True)
class FieldSpec:
    """How one input field is turned into a record field."""

    name: str
    transformer: FieldTransformer
    max_length: int
    required: bool = True
