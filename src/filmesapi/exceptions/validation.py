from collections.abc import Iterable
from dataclasses import dataclass

from fastapi import status

from filmesapi.exceptions.base import AppError

PROBLEM_TYPE = "https://tools.ietf.org/html/rfc9110#section-15.5.1"
PROBLEM_TITLE = "One or more validation errors occurred."


@dataclass(frozen=True)
class FieldViolation:
    """A single failed constraint, addressed by its wire-format field name."""

    field: str
    message: str


class ValidationError(AppError):
    """One or more field constraints failed; every violation is kept, in order."""

    status_code = status.HTTP_400_BAD_REQUEST
    detail = PROBLEM_TITLE

    def __init__(self, violations: Iterable[FieldViolation]):
        self.violations = tuple(violations)
        super().__init__(
            "; ".join(f"{v.field}: {v.message}" for v in self.violations) or None
        )

    def errors(self) -> dict[str, list[str]]:
        """Group messages by field, keeping first-seen field order."""
        grouped: dict[str, list[str]] = {}
        for violation in self.violations:
            grouped.setdefault(violation.field, []).append(violation.message)
        return grouped

    def to_problem(self) -> dict:
        return {
            "type": PROBLEM_TYPE,
            "title": PROBLEM_TITLE,
            "status": self.status_code,
            "errors": self.errors(),
        }


class PatchApplicationError(ValidationError):
    """A JSON Patch document could not be applied to its target."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__([FieldViolation(field=path or "patch", message=message)])
