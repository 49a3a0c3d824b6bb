"""Application error types and their HTTP translation."""

from filmesapi.exceptions.base import AppError, NotFoundError
from filmesapi.exceptions.validation import (
    FieldViolation,
    PatchApplicationError,
    ValidationError,
)

__all__ = [
    "AppError",
    "FieldViolation",
    "NotFoundError",
    "PatchApplicationError",
    "ValidationError",
]
