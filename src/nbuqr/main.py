"""CLI entry point for NBU payment QR generation."""

import functools
import logging
import sys

import click

from .config import settings
from .exceptions import UnsupportedVersionError
from .handlers import QrCodeHandler
from .payload import QrFormat, RenderOptions

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def payment_options(command):
    """Attach the payment fields and payload header options to a command."""
    options = [
        click.option("--account-id", help="Recipient IBAN"),
        click.option("--tax-id", help="Recipient EDRPOU or RNTRC code"),
        click.option("--amount", help="Amount in hryvnias, e.g. 100.50"),
        click.option("--recipient", help="Recipient name"),
        click.option("--purpose", help="Purpose of payment"),
        click.option("--version", "version", default=None, help="Payload version (1 or 2)"),
        click.option("--encoding", default=None, help="Encoding id or alias (1, utf-8, 2, cp1251)"),
    ]
    for option in reversed(options):
        command = option(command)

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except UnsupportedVersionError as e:
            raise click.BadParameter(e.message, param_hint="--version") from e

    return wrapper


def _inputs(account_id, tax_id, amount, recipient, purpose) -> dict[str, str | None]:
    return {
        "account_id": account_id,
        "tax_id": tax_id,
        "amount": amount,
        "recipient": recipient,
        "purpose": purpose,
    }


def _fail(message: str | None) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug: bool):
    """Generate National Bank of Ukraine payment QR codes."""
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)


@cli.command()
@payment_options
def payload(account_id, tax_id, amount, recipient, purpose, version, encoding):
    """Print the canonical payload text."""
    result = QrCodeHandler().create_payload(
        _inputs(account_id, tax_id, amount, recipient, purpose),
        version=version,
        encoding=encoding,
    )
    if not result.is_valid:
        _fail(result.message)
    click.echo(result.value)


@cli.command()
@payment_options
def link(account_id, tax_id, amount, recipient, purpose, version, encoding):
    """Print the bank.gov.ua payment link."""
    result = QrCodeHandler().create_link(
        _inputs(account_id, tax_id, amount, recipient, purpose),
        version=version,
        encoding=encoding,
    )
    if not result.is_valid:
        _fail(result.message)
    click.echo(result.value)


@cli.command()
@payment_options
@click.option(
    "--format",
    "qr_format",
    type=click.Choice([f.value for f in QrFormat]),
    default=settings.default_format,
    show_default=True,
    help="Output format",
)
@click.option("--color", default="#000", show_default=True, help="Module color")
@click.option(
    "--background-color",
    default="#FFF",
    show_default=True,
    help="Background color or 'transparent'",
)
@click.option("--width", type=click.IntRange(min=1), default=None, help="Target width in pixels")
@click.option("--viewbox", is_flag=True, help="SVG: size via viewBox only")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write to file instead of stdout",
)
def qr(
    account_id,
    tax_id,
    amount,
    recipient,
    purpose,
    version,
    encoding,
    qr_format,
    color,
    background_color,
    width,
    viewbox,
    output,
):
    """Render the payment QR code."""
    options = RenderOptions(
        color=color,
        background_color=background_color,
        width=width,
        viewbox=viewbox,
    )
    result = QrCodeHandler().create(
        _inputs(account_id, tax_id, amount, recipient, purpose),
        qr_format=qr_format,
        options=options,
        version=version,
        encoding=encoding,
    )
    if not result.is_valid:
        _fail(result.message)

    image = result.value.image
    if output:
        if isinstance(image, bytes):
            with open(output, "wb") as f:
                f.write(image)
        else:
            with open(output, "w", encoding="utf-8") as f:
                f.write(image)
        logger.info("Wrote %s QR code to %s", qr_format, output)
    elif isinstance(image, bytes):
        click.echo(image, nl=False)
    else:
        click.echo(image)


if __name__ == "__main__":
    cli()
