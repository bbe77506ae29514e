"""
Validation primitives shared by the domain entities.

Entities never leave a half-updated value behind: every constructor and
update function returns a ValidationResult that callers inspect (or unwrap).
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class ValidationError(Exception):
    """Caller-correctable violation of a domain rule."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Outcome of a validated operation: either a value or a ValidationError."""
    value: T | None = None
    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ValidationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ValidationError | str) -> "ValidationResult[T]":
        if isinstance(error, str):
            error = ValidationError(error)
        return cls(error=error)

    @classmethod
    def capture(cls, build: Callable[[], T]) -> "ValidationResult[T]":
        """Run `build`, turning a raised ValidationError into a failed result."""
        try:
            return cls.success(build())
        except ValidationError as e:
            return cls.failure(e)

    def then(self, step: Callable[[T], "ValidationResult[U]"]) -> "ValidationResult[U]":
        """Chain another validated step; short-circuits on the first failure."""
        if not self.ok:
            return ValidationResult(error=self.error)
        return step(self.value)

    def unwrap(self) -> T:
        """Return the value or raise the carried ValidationError."""
        if self.error is not None:
            raise self.error
        return self.value


def require_text(value: str | None, message: str) -> str:
    """Trimmed non-empty string, or ValidationError(message)."""
    if value is None or not str(value).strip():
        raise ValidationError(message)
    return str(value).strip()
