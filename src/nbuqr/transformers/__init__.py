"""Transformers turning raw inputs into payment records."""

from .base import FieldSpec, PaymentRecord
from .payment_record import PaymentRecordBuilder, build_payment_record

__all__ = [
    "FieldSpec",
    "PaymentRecord",
    "PaymentRecordBuilder",
    "build_payment_record",
]
