"""Canonical payload formatting and link encoding."""

import base64
import logging

from ..config import settings
from ..transformers import PaymentRecord
from ..validators import ValidationResult
from .encoding import encoding_label, resolve_encoding
from .version import normalize_version

logger = logging.getLogger(__name__)

PAYLOAD_SEPARATOR = "\n"


def format_payload(
    record: PaymentRecord,
    service_label: str | None = None,
    version: int | str | None = None,
    encoding: int | str | None = None,
    function_code: str | None = None,
) -> ValidationResult[str]:
    """
    Serialize a payment record into the 12-line NBU payload.

    Empty lines 5, 10 and 11 are reserved slots of the standard and are
    always emitted.

    Args:
        record: Validated payment record
        service_label: Service label, defaults to settings (``BCD``)
        version: Payload version, defaults to settings
        encoding: Encoding id or alias, defaults to settings
        function_code: Function code, defaults to settings (``UCT``)

    Returns:
        ValidationResult with the payload text

    Raises:
        UnsupportedVersionError: If the version is not supported
    """
    normalized_version = normalize_version(version)

    encoding_result = resolve_encoding(settings.default_encoding if encoding is None else encoding)
    if not encoding_result.is_valid:
        return ValidationResult.from_error(encoding_result.error)

    lines = [
        service_label if service_label is not None else settings.service_label,
        normalized_version,
        str(encoding_result.value),
        function_code if function_code is not None else settings.function_code,
        "",
        record.recipient,
        record.account_id,
        record.amount,
        record.tax_id,
        "",
        "",
        record.purpose,
    ]
    return ValidationResult.success(PAYLOAD_SEPARATOR.join(lines))


def encode_payload(payload: str, encoding: int | str | None = None) -> ValidationResult[str]:
    """
    Encode a payload with URL-safe base64 and no padding.

    The payload is converted to bytes with the charset of the encoding id, so
    it has to match the id written in the payload header.

    Args:
        payload: Payload text
        encoding: Encoding id or alias, defaults to settings

    Returns:
        ValidationResult with the encoded payload
    """
    encoding_result = resolve_encoding(settings.default_encoding if encoding is None else encoding)
    if not encoding_result.is_valid:
        return ValidationResult.from_error(encoding_result.error)

    charset = encoding_label(encoding_result.value).value
    try:
        raw = payload.encode(charset)
    except UnicodeEncodeError as e:
        logger.warning("Payload cannot be encoded as %s: %s", charset, e)
        return ValidationResult.failure(
            "payload", "ENCODING_FAILED", f"Payload is not representable in {charset}"
        )

    return ValidationResult.success(base64.urlsafe_b64encode(raw).decode("ascii").rstrip("="))


def build_link(encoded: str, base_url: str | None = None) -> str:
    """Append an encoded payload to the NBU QR base URL."""
    return f"{base_url if base_url is not None else settings.base_url}{encoded}"
