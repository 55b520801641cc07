"""Base validation classes and result types."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationError:
    """Represents a single validation error."""

    field: str
    code: str
    message: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for serialization."""
        return {
            "field": self.field,
            "code": self.code,
            "message": self.message,
        }


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """
    Outcome of one pipeline stage.

    Either a valid result carrying ``value``, or an invalid one carrying the
    ``error`` that stopped processing. Stages hand these to each other instead
    of raising, so the first failure reaches the caller unchanged.
    """

    is_valid: bool
    value: T | None = None
    error: ValidationError | None = None

    @classmethod
    def success(cls, value: T) -> "ValidationResult[T]":
        """Build a valid result."""
        return cls(is_valid=True, value=value)

    @classmethod
    def failure(cls, field: str, code: str, message: str) -> "ValidationResult[T]":
        """Build an invalid result from error details."""
        return cls(is_valid=False, error=ValidationError(field=field, code=code, message=message))

    @classmethod
    def from_error(cls, error: ValidationError | None) -> "ValidationResult[T]":
        """Re-wrap the error of another failed result."""
        return cls(is_valid=False, error=error)

    @property
    def message(self) -> str | None:
        """Human-readable failure reason, or None if valid."""
        return self.error.message if self.error else None

    @property
    def error_code(self) -> str | None:
        """Failure code, or None if valid."""
        return self.error.code if self.error else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "is_valid": self.is_valid,
            "errors": [self.error.to_dict()] if self.error else [],
        }
