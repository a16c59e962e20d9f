"""Typed errors raised by the employee records core."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError


class EmployeeRecordsError(Exception):
    pass


class InvalidArgumentError(EmployeeRecordsError, ValueError):
    """A parameter value is unusable (blank, out of range, NaN, non-positive)."""


class NotFoundError(EmployeeRecordsError, LookupError):
    def __init__(self, message: str, employee_id: Any = None) -> None:
        self.employee_id = employee_id
        super().__init__(message)


class InvalidFieldError(EmployeeRecordsError, KeyError):
    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Invalid field: {field_name!r}")

    def __str__(self) -> str:
        return self.args[0]


class ValidationFailure(EmployeeRecordsError, ValueError):
    """A value failed type or range validation."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        self.errors = errors or []
        super().__init__(message)

    @classmethod
    def from_validation_error(cls, error: ValidationError, context: str) -> ValidationFailure:
        details = "; ".join(
            f"{'.'.join(str(part) for part in e['loc']) or 'value'}: {e['msg']}" for e in error.errors()
        )
        return cls(f"{context}: {details}", errors=error.errors())
