"""Handlers composing the QR generation pipeline."""

from .qr_code import GeneratedQr, QrCodeHandler

__all__ = ["GeneratedQr", "QrCodeHandler"]
