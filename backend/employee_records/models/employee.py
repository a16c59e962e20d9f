"""Employee record model held by the in-memory store."""

from __future__ import annotations

from typing import Annotated, Any, Union
from uuid import UUID

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationError, field_validator

from employee_records.core.exceptions import ValidationFailure


def _require_text(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("must not be empty")
    return value.strip()


# Shared field constraints, also used by the field update commands.
NonBlankStr = Annotated[str, AfterValidator(_require_text)]
Salary = Annotated[float, Field(ge=0, allow_inf_nan=False)]
PerformanceRating = Annotated[float, Field(ge=0, le=5, allow_inf_nan=False)]
YearsOfExperience = Annotated[int, Field(ge=0)]

EmployeeId = Union[UUID, int, str]


class Employee(BaseModel):
    """A single employee record.

    Every field is validated on construction (including ``model_validate``
    and ``model_validate_json``) and on each assignment; any violation
    raises ``ValidationFailure``. ``id`` cannot be reassigned.

    Employees order naturally by ``years_of_experience`` ascending, so
    ``sorted(employees)`` yields the least experienced first.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    id: EmployeeId = Field(..., frozen=True)
    name: NonBlankStr
    department: NonBlankStr
    salary: Salary
    performance_rating: PerformanceRating
    years_of_experience: YearsOfExperience
    active: bool = True

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ValidationFailure.from_validation_error(e, "Invalid employee") from e

    @classmethod
    def model_validate(cls, obj: Any, *args: Any, **kwargs: Any) -> Employee:
        try:
            return super().model_validate(obj, *args, **kwargs)
        except ValidationError as e:
            raise ValidationFailure.from_validation_error(e, "Invalid employee") from e

    @classmethod
    def model_validate_json(cls, json_data: str | bytes | bytearray, *args: Any, **kwargs: Any) -> Employee:
        try:
            return super().model_validate_json(json_data, *args, **kwargs)
        except ValidationError as e:
            raise ValidationFailure.from_validation_error(e, "Invalid employee") from e

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except ValidationError as e:
            raise ValidationFailure.from_validation_error(e, f"Invalid value for {name}") from e

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self.years_of_experience < other.years_of_experience

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: EmployeeId) -> EmployeeId:
        if isinstance(v, str) and not v.strip():
            raise ValueError("Employee ID cannot be empty")
        return v
