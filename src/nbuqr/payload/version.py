"""Supported NBU QR payload versions."""

from ..config import settings
from ..exceptions import UnsupportedVersionError

SUPPORTED_VERSIONS = (1, 2)


def normalize_version(version: int | str | None = None) -> str:
    """
    Render a payload version as the three-digit header field.

    Args:
        version: Version number or numeric string, defaults to settings

    Returns:
        Zero-padded version, e.g. ``"001"``

    Raises:
        UnsupportedVersionError: If the version is not supported
    """
    if version is None:
        version = settings.default_version

    if isinstance(version, str):
        version = version.strip()
        if not (version.isascii() and version.isdecimal()):
            raise UnsupportedVersionError(version, SUPPORTED_VERSIONS)
        version = int(version)

    if isinstance(version, bool) or not isinstance(version, int):
        raise UnsupportedVersionError(version, SUPPORTED_VERSIONS)

    if version not in SUPPORTED_VERSIONS:
        raise UnsupportedVersionError(version, SUPPORTED_VERSIONS)

    return f"{version:03d}"


def is_supported_version(version: int | str) -> bool:
    """Check if a version can be used in a payload."""
    try:
        normalize_version(version)
    except UnsupportedVersionError:
        return False
    return True
