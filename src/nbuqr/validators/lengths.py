"""Maximum field lengths defined by the NBU QR standard."""

FIELD_LENGTH_LIMITS = {
    "account_id": 34,
    "tax_id": 10,
    "amount": 15,
    "recipient": 70,
    "purpose": 140,
}


def limit(value: str, max_length: int) -> str:
    """Truncate a value to at most ``max_length`` characters."""
    return value[:max_length]
