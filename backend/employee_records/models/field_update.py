"""Field update commands applied to stored employees.

Each command carries one validated value for one Employee field, so an
invalid field/value pairing fails when the command is built, before the
store is touched. ``FieldUpdate`` is the discriminated union of all commands.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from employee_records.core.exceptions import InvalidFieldError, ValidationFailure
from employee_records.models.employee import NonBlankStr, PerformanceRating, Salary, YearsOfExperience


class _FieldUpdateBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    attribute: ClassVar[str]

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ValidationFailure.from_validation_error(e, f"Invalid {type(self).__name__}") from e


class SetName(_FieldUpdateBase):
    attribute: ClassVar[str] = "name"

    field: Literal["name"] = "name"
    value: NonBlankStr


class SetDepartment(_FieldUpdateBase):
    attribute: ClassVar[str] = "department"

    field: Literal["department"] = "department"
    value: NonBlankStr


class SetSalary(_FieldUpdateBase):
    attribute: ClassVar[str] = "salary"

    field: Literal["salary"] = "salary"
    value: Salary


class SetPerformanceRating(_FieldUpdateBase):
    attribute: ClassVar[str] = "performance_rating"

    field: Literal["performance_rating"] = "performance_rating"
    value: PerformanceRating


class SetYearsOfExperience(_FieldUpdateBase):
    attribute: ClassVar[str] = "years_of_experience"

    field: Literal["years_of_experience"] = "years_of_experience"
    value: YearsOfExperience


class SetActive(_FieldUpdateBase):
    attribute: ClassVar[str] = "active"

    field: Literal["active"] = "active"
    value: bool


FieldUpdate = Annotated[
    Union[SetName, SetDepartment, SetSalary, SetPerformanceRating, SetYearsOfExperience, SetActive],
    Field(discriminator="field"),
]

field_update_adapter: TypeAdapter[FieldUpdate] = TypeAdapter(FieldUpdate)

# Accepted field names (lower-cased) → discriminator value
_FIELD_NAMES: dict[str, str] = {
    "name": "name",
    "department": "department",
    "salary": "salary",
    "performancerating": "performance_rating",
    "performance_rating": "performance_rating",
    "yearsofexperience": "years_of_experience",
    "years_of_experience": "years_of_experience",
    "isactive": "active",
    "is_active": "active",
    "active": "active",
}


def parse_field_update(field_name: str, value: Any) -> FieldUpdate:
    """Build the update command for a case-insensitive field name.

    Raises InvalidFieldError for an unknown name and ValidationFailure when
    the value does not fit the field.
    """
    if not isinstance(field_name, str):
        raise InvalidFieldError(repr(field_name))

    discriminator = _FIELD_NAMES.get(field_name.strip().lower())
    if discriminator is None:
        raise InvalidFieldError(field_name)

    return field_update_from_dict({"field": discriminator, "value": value})


def field_update_from_dict(data: dict[str, Any]) -> FieldUpdate:
    """Validate a ``{"field": ..., "value": ...}`` payload into a command."""
    try:
        return field_update_adapter.validate_python(data)
    except ValidationError as e:
        raise ValidationFailure.from_validation_error(e, "Invalid field update") from e
