"""Character encodings defined by the NBU QR standard."""

from ..validators import ValidationResult

UTF8 = 1
WINDOWS_1251 = 2

ENCODINGS = {
    UTF8: "UTF-8",
    WINDOWS_1251: "windows-1251",
}

# Lowercase aliases, encoding numbers included
ENCODING_LABELS = {
    "1": UTF8,
    "utf8": UTF8,
    "utf-8": UTF8,
    "unicode-1-1-utf-8": UTF8,
    "unicode11utf8": UTF8,
    "unicode20utf8": UTF8,
    "x-unicode20utf8": UTF8,
    "2": WINDOWS_1251,
    "windows-1251": WINDOWS_1251,
    "cp1251": WINDOWS_1251,
    "win": WINDOWS_1251,
    "win1251": WINDOWS_1251,
    "windows": WINDOWS_1251,
    "windows1251": WINDOWS_1251,
    "win-1251": WINDOWS_1251,
    "x-cp1251": WINDOWS_1251,
}


def resolve_encoding(label: str | int) -> ValidationResult[int]:
    """
    Resolve an encoding number or alias to the NBU encoding id.

    Args:
        label: Encoding id (1, "2") or a case-insensitive alias ("UTF-8", "cp1251")

    Returns:
        ValidationResult with the encoding id
    """
    encoding = ENCODING_LABELS.get(str(label).strip().lower())
    if encoding is None:
        return ValidationResult.failure("encoding", "UNKNOWN_ENCODING", "Unknown encoding")
    return ValidationResult.success(encoding)


def encoding_label(encoding: int) -> ValidationResult[str]:
    """Return the charset name of an encoding id."""
    label = ENCODINGS.get(encoding)
    if label is None:
        return ValidationResult.failure("encoding", "UNKNOWN_ENCODING", "Unknown encoding")
    return ValidationResult.success(label)
