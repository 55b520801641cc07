"""NBU QR payload formatting, encoding and rendering."""

from .encoding import ENCODINGS, UTF8, WINDOWS_1251, encoding_label, resolve_encoding
from .formatter import build_link, encode_payload, format_payload
from .renderer import QrFormat, RenderOptions, render_qr
from .version import SUPPORTED_VERSIONS, is_supported_version, normalize_version

__all__ = [
    "ENCODINGS",
    "UTF8",
    "WINDOWS_1251",
    "encoding_label",
    "resolve_encoding",
    "build_link",
    "encode_payload",
    "format_payload",
    "QrFormat",
    "RenderOptions",
    "render_qr",
    "SUPPORTED_VERSIONS",
    "is_supported_version",
    "normalize_version",
]
