"""Pydantic models for grouped salary and performance reports."""

from __future__ import annotations

from pydantic import BaseModel, Field

from employee_records.models.employee import Employee


class DepartmentSummary(BaseModel):
    """Headcount and averages for one department."""

    department: str
    employee_count: int = Field(..., ge=0)
    active_count: int = Field(..., ge=0)
    average_salary: float
    average_rating: float
    members: list[Employee]


class SalaryBucket(BaseModel):
    """A salary band; ``upper`` is exclusive and None for the open top band."""

    label: str
    lower: float
    upper: float | None = None
    count: int = Field(default=0, ge=0)


class PerformanceBand(BaseModel):
    """A rating band; ``upper`` is exclusive except for the top band."""

    label: str
    lower: float
    upper: float
    members: list[Employee] = []
