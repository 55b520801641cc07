"""Generation of National Bank of Ukraine payment QR codes."""

from .exceptions import ConfigurationError, NbuQrError, UnsupportedVersionError
from .handlers import GeneratedQr, QrCodeHandler
from .payload import QrFormat, RenderOptions, build_link, encode_payload, format_payload, render_qr
from .transformers import PaymentRecord, PaymentRecordBuilder, build_payment_record
from .validators import Amount, AmountValidator, ValidationError, ValidationResult, normalize_amount, parse_amount

__all__ = [
    "ConfigurationError",
    "NbuQrError",
    "UnsupportedVersionError",
    "GeneratedQr",
    "QrCodeHandler",
    "QrFormat",
    "RenderOptions",
    "build_link",
    "encode_payload",
    "format_payload",
    "render_qr",
    "PaymentRecord",
    "PaymentRecordBuilder",
    "build_payment_record",
    "Amount",
    "AmountValidator",
    "ValidationError",
    "ValidationResult",
    "normalize_amount",
    "parse_amount",
]
