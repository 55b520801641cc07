"""Handler producing NBU payment QR codes from raw inputs."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from ..config import settings
from ..payload import (
    QrFormat,
    RenderOptions,
    build_link,
    encode_payload,
    format_payload,
    render_qr,
)
from ..transformers import PaymentRecord, PaymentRecordBuilder
from ..validators import ValidationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedQr:
    """Everything produced for one payment."""

    record: PaymentRecord
    payload: str
    encoded: str
    link: str
    image: str | bytes
    format: QrFormat


class QrCodeHandler:
    """Runs inputs through build, format, encode, link and render."""

    def __init__(self, builder: PaymentRecordBuilder | None = None, base_url: str | None = None):
        self.builder = builder or PaymentRecordBuilder()
        self.base_url = base_url or settings.base_url

    def create_payload(
        self,
        inputs: Mapping[str, str | None],
        version: int | str | None = None,
        encoding: int | str | None = None,
    ) -> ValidationResult[str]:
        """Build a payment record and format it as the canonical payload."""
        record_result = self.builder.build(inputs)
        if not record_result.is_valid:
            return ValidationResult.from_error(record_result.error)
        return format_payload(record_result.value, version=version, encoding=encoding)

    def create_link(
        self,
        inputs: Mapping[str, str | None],
        version: int | str | None = None,
        encoding: int | str | None = None,
    ) -> ValidationResult[str]:
        """Build the bank.gov.ua link carrying the encoded payload."""
        payload_result = self.create_payload(inputs, version=version, encoding=encoding)
        if not payload_result.is_valid:
            return payload_result

        encoded_result = encode_payload(payload_result.value, encoding=encoding)
        if not encoded_result.is_valid:
            return encoded_result
        return ValidationResult.success(build_link(encoded_result.value, self.base_url))

    def create(
        self,
        inputs: Mapping[str, str | None],
        qr_format: QrFormat | str | None = None,
        options: RenderOptions | None = None,
        version: int | str | None = None,
        encoding: int | str | None = None,
    ) -> ValidationResult[GeneratedQr]:
        """
        Produce a QR code for a payment.

        Args:
            inputs: Raw field values keyed by field name
            qr_format: svg, png or text, defaults to settings
            options: Rendering style options
            version: Payload version, defaults to settings
            encoding: Encoding id or alias, defaults to settings

        Returns:
            ValidationResult with the GeneratedQr, or the first failure

        Raises:
            UnsupportedVersionError: If the version is not supported
        """
        record_result = self.builder.build(inputs)
        if not record_result.is_valid:
            return ValidationResult.from_error(record_result.error)
        record = record_result.value

        payload_result = format_payload(record, version=version, encoding=encoding)
        if not payload_result.is_valid:
            return ValidationResult.from_error(payload_result.error)

        encoded_result = encode_payload(payload_result.value, encoding=encoding)
        if not encoded_result.is_valid:
            return ValidationResult.from_error(encoded_result.error)

        link = build_link(encoded_result.value, self.base_url)
        qr_format = qr_format or settings.default_format
        image_result = render_qr(link, qr_format, options)
        if not image_result.is_valid:
            return ValidationResult.from_error(image_result.error)

        logger.debug("Generated %s QR code for %s", qr_format, record.account_id)
        return ValidationResult.success(
            GeneratedQr(
                record=record,
                payload=payload_result.value,
                encoded=encoded_result.value,
                link=link,
                image=image_result.value,
                format=QrFormat(qr_format),
            )
        )
