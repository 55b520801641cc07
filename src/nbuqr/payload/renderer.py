"""QR symbol rendering via segno."""

import io
import logging
from enum import Enum

import segno
from pydantic import BaseModel, Field

from ..validators import ValidationResult

logger = logging.getLogger(__name__)

TRANSPARENT = "transparent"


class QrFormat(str, Enum):
    """Output format of a rendered QR code."""

    SVG = "svg"
    PNG = "png"
    TEXT = "text"


class RenderOptions(BaseModel):
    """Style options for rendering."""

    color: str = Field(default="#000", description="Module color")
    background_color: str = Field(default="#FFF", description="Background color or 'transparent'")
    width: int | None = Field(default=None, gt=0, description="Target width in pixels")
    border: int | None = Field(default=None, ge=0, description="Quiet zone in modules, segno default if unset")
    viewbox: bool = Field(default=False, description="SVG: size via viewBox only")

    @property
    def light(self) -> str | None:
        """Background color as segno expects it (None is transparent)."""
        if self.background_color.lower() == TRANSPARENT:
            return None
        return self.background_color


def _scale(qr: segno.QRCode, options: RenderOptions) -> int:
    if options.width is None:
        return 1
    symbol_width, _ = qr.symbol_size(scale=1, border=options.border)
    return max(1, options.width // symbol_width)


def render_qr(
    data: str,
    qr_format: QrFormat | str = QrFormat.SVG,
    options: RenderOptions | None = None,
) -> ValidationResult[str | bytes]:
    """
    Render data (normally the payment link) as a QR code.

    Args:
        data: Content to encode
        qr_format: svg, png or text
        options: Style options

    Returns:
        ValidationResult with SVG markup or text (str), or PNG image (bytes)
    """
    options = options or RenderOptions()
    try:
        qr_format = QrFormat(qr_format)
    except ValueError:
        return ValidationResult.failure("format", "UNKNOWN_FORMAT", f"Unknown QR format: {qr_format}")

    try:
        qr = segno.make(data, error="m", micro=False)
    except segno.DataOverflowError as e:
        logger.warning("QR data overflow (%d chars): %s", len(data), e)
        return ValidationResult.failure("data", "QR_DATA_OVERFLOW", "Data too large for QR code")

    if qr_format == QrFormat.TEXT:
        out = io.StringIO()
        qr.terminal(out=out, border=options.border, compact=True)
        return ValidationResult.success(out.getvalue())

    buffer = io.BytesIO()
    if qr_format == QrFormat.SVG:
        qr.save(
            buffer,
            kind="svg",
            scale=_scale(qr, options),
            border=options.border,
            dark=options.color,
            light=options.light,
            omitsize=options.viewbox,
        )
        return ValidationResult.success(buffer.getvalue().decode("utf-8"))

    qr.save(
        buffer,
        kind="png",
        scale=_scale(qr, options),
        border=options.border,
        dark=options.color,
        light=options.light,
    )
    return ValidationResult.success(buffer.getvalue())
