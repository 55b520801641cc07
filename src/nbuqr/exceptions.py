"""Custom exceptions for NBU QR generation."""


class NbuQrError(Exception):
    """Base exception for NBU QR errors."""

    pass


class ConfigurationError(NbuQrError):
    """Raised when the caller configures the generator with unsupported values."""

    def __init__(self, message: str = "Invalid configuration"):
        self.message = message
        super().__init__(self.message)


class UnsupportedVersionError(ConfigurationError):
    """Raised when a payload version outside the supported set is requested."""

    def __init__(self, version: object, supported: tuple[int, ...]):
        self.version = version
        self.supported = supported
        super().__init__(
            f"Invalid version: {version}. Supported versions: {', '.join(str(v) for v in supported)}"
        )
