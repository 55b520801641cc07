"""Unit tests for the QR code handler."""

import base64

import pytest

from nbuqr.exceptions import UnsupportedVersionError
from nbuqr.handlers import GeneratedQr, QrCodeHandler
from nbuqr.payload import QrFormat, RenderOptions


def _decode(encoded: str) -> bytes:
    return base64.urlsafe_b64decode(encoded + "=" * (-len(encoded) % 4))


class TestQrCodeHandler:
    """Tests for QrCodeHandler."""

    @pytest.fixture
    def handler(self):
        """Create a QrCodeHandler instance."""
        return QrCodeHandler()

    def test_create_payload(self, handler, valid_inputs, expected_payload):
        """Test building the canonical payload from inputs."""
        result = handler.create_payload(valid_inputs)
        assert result.is_valid is True
        assert result.value == expected_payload

    def test_create_payload_with_header_options(self, handler, valid_inputs):
        """Test passing version and encoding through."""
        segments = handler.create_payload(valid_inputs, version=2, encoding="win1251").value.split("\n")
        assert segments[1:3] == ["002", "2"]

    def test_create_link(self, handler, valid_inputs, expected_payload):
        """Test that the link carries the encoded payload."""
        result = handler.create_link(valid_inputs)
        assert result.is_valid is True
        assert result.value.startswith("https://bank.gov.ua/qr/")
        encoded = result.value.removeprefix("https://bank.gov.ua/qr/")
        assert _decode(encoded).decode("utf-8") == expected_payload

    def test_create_link_custom_base_url(self, valid_inputs):
        """Test overriding the base URL."""
        handler = QrCodeHandler(base_url="https://example.com/qr/")
        assert handler.create_link(valid_inputs).value.startswith("https://example.com/qr/")

    def test_create_link_windows_1251(self, handler, valid_inputs):
        """Test that windows-1251 payloads are encoded in that charset."""
        valid_inputs["recipient"] = "ТОВ Компанія"
        encoded = handler.create_link(valid_inputs, encoding=2).value.rsplit("/", 1)[1]
        assert "ТОВ Компанія".encode("cp1251") in _decode(encoded)

    def test_create_svg(self, handler, valid_inputs, expected_payload):
        """Test the complete pipeline with SVG output."""
        result = handler.create(valid_inputs, qr_format=QrFormat.SVG)
        assert result.is_valid is True
        generated = result.value
        assert isinstance(generated, GeneratedQr)
        assert generated.payload == expected_payload
        assert generated.link == f"https://bank.gov.ua/qr/{generated.encoded}"
        assert generated.format == QrFormat.SVG
        assert "<svg" in generated.image
        assert generated.record.amount == "UAH123.45"

    def test_create_defaults_to_svg(self, handler, valid_inputs):
        """Test the default output format."""
        assert handler.create(valid_inputs).value.format == QrFormat.SVG

    def test_create_png(self, handler, valid_inputs):
        """Test PNG output with options."""
        result = handler.create(
            valid_inputs,
            qr_format="png",
            options=RenderOptions(color="#123456", background_color="transparent", width=300),
        )
        assert result.value.image.startswith(b"\x89PNG")

    def test_builder_failure_returned_unchanged(self, handler, valid_inputs):
        """Test that the first builder failure is returned."""
        valid_inputs["account_id"] = "bad"
        valid_inputs["amount"] = "0"
        for result in (
            handler.create_payload(valid_inputs),
            handler.create_link(valid_inputs),
            handler.create(valid_inputs),
        ):
            assert result.is_valid is False
            assert result.message == "Invalid account identifier"

    def test_missing_field(self, handler, valid_inputs):
        """Test that a missing field stops the pipeline."""
        del valid_inputs["purpose"]
        assert handler.create(valid_inputs).message == "Option purpose is required"

    def test_unknown_encoding(self, handler, valid_inputs):
        """Test that an unknown encoding stops the pipeline."""
        assert handler.create(valid_inputs, encoding="koi8-u").message == "Unknown encoding"

    def test_unrepresentable_recipient(self, handler, valid_inputs):
        """Test that text outside windows-1251 fails when encoding."""
        valid_inputs["recipient"] = "株式会社"
        result = handler.create(valid_inputs, encoding=2)
        assert result.is_valid is False
        assert result.error_code == "ENCODING_FAILED"

    def test_unknown_format(self, handler, valid_inputs):
        """Test that an unknown output format fails."""
        assert handler.create(valid_inputs, qr_format="gif").error_code == "UNKNOWN_FORMAT"

    def test_unsupported_version_raises(self, handler, valid_inputs):
        """Test that configuration errors propagate as exceptions."""
        with pytest.raises(UnsupportedVersionError):
            handler.create(valid_inputs, version=7)
