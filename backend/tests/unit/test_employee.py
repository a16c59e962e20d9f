from __future__ import annotations

import math
from uuid import uuid4

import pytest
from pydantic import ValidationError

from employee_records.core.exceptions import InvalidFieldError, ValidationFailure
from employee_records.models.employee import Employee
from employee_records.models.field_update import (
    SetActive,
    SetDepartment,
    SetName,
    SetPerformanceRating,
    SetSalary,
    SetYearsOfExperience,
    field_update_from_dict,
    parse_field_update,
)


class TestEmployeeConstruction:
    def test_valid_employee(self, employee_factory):
        employee = employee_factory(7, name="Chris Evans", department="Marketing")
        assert employee.id == 7
        assert employee.name == "Chris Evans"
        assert employee.department == "Marketing"
        assert employee.active is True

    def test_accepts_uuid_and_string_ids(self, employee_factory):
        uid = uuid4()
        assert employee_factory(uid).id == uid
        assert employee_factory("E-100").id == "E-100"

    def test_trims_name_and_department(self, employee_factory):
        employee = employee_factory(name="  Jane  ", department=" HR ")
        assert employee.name == "Jane"
        assert employee.department == "HR"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": "   "},
            {"department": ""},
            {"salary": -5000.0},
            {"salary": math.nan},
            {"performance_rating": 5.1},
            {"performance_rating": -0.1},
            {"years_of_experience": -1},
            {"years_of_experience": 2.5},
        ],
    )
    def test_invalid_values_raise_validation_failure(self, employee_factory, overrides):
        with pytest.raises(ValidationFailure):
            employee_factory(**overrides)

    def test_blank_string_id_rejected(self, employee_factory):
        with pytest.raises(ValidationFailure, match="Employee ID cannot be empty"):
            employee_factory("  ")

    def test_missing_id_rejected(self):
        with pytest.raises(ValidationFailure, match="id"):
            Employee(name="X", department="IT", salary=1.0, performance_rating=1.0, years_of_experience=1)

    def test_validation_failure_chains_pydantic_error(self, employee_factory):
        with pytest.raises(ValidationFailure) as exc_info:
            employee_factory(salary=-1.0)
        assert isinstance(exc_info.value.__cause__, ValidationError)
        assert exc_info.value.errors[0]["loc"] == ("salary",)

    def test_model_validate_raises_validation_failure(self):
        data = {"id": 1, "name": "X", "department": "IT", "salary": -1.0, "performance_rating": 1.0, "years_of_experience": 1}
        with pytest.raises(ValidationFailure, match="salary"):
            Employee.model_validate(data)

    def test_model_validate_json_raises_validation_failure(self):
        payload = '{"id": 1, "name": "X", "department": "IT", "salary": 1.0, "performance_rating": 9, "years_of_experience": 1}'
        with pytest.raises(ValidationFailure, match="performance_rating") as exc_info:
            Employee.model_validate_json(payload)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_model_validate_valid_record(self):
        employee = Employee.model_validate(
            {"id": 7, "name": " Eve ", "department": "IT", "salary": 1.0, "performance_rating": 2.0, "years_of_experience": 3}
        )
        assert employee.name == "Eve"

    def test_integral_float_years_accepted(self, employee_factory):
        assert employee_factory(years_of_experience=3.0).years_of_experience == 3


class TestEmployeeAssignment:
    def test_valid_assignment(self, employee_factory):
        employee = employee_factory()
        employee.salary = 60000
        assert employee.salary == 60000.0

    def test_invalid_assignment_rejected_and_value_kept(self, employee_factory):
        employee = employee_factory(performance_rating=4.0)
        with pytest.raises(ValidationFailure):
            employee.performance_rating = 6.0
        assert employee.performance_rating == 4.0

    def test_id_is_frozen(self, employee_factory):
        employee = employee_factory(1)
        with pytest.raises(ValidationFailure):
            employee.id = 2
        assert employee.id == 1


def test_natural_ordering_by_years_of_experience(employee_factory):
    senior = employee_factory(1, years_of_experience=10)
    junior = employee_factory(2, years_of_experience=1)
    mid = employee_factory(3, years_of_experience=5)

    assert junior < senior
    assert [e.id for e in sorted([senior, junior, mid])] == [2, 3, 1]


def test_equal_records_compare_equal(employee_factory):
    assert employee_factory(1) == employee_factory(1)
    assert employee_factory(1) != employee_factory(1, salary=1.0)


class TestFieldUpdateCommands:
    def test_commands_validate_at_construction(self):
        with pytest.raises(ValidationFailure):
            SetSalary(value=-1)
        with pytest.raises(ValidationFailure):
            SetPerformanceRating(value=7)
        with pytest.raises(ValidationFailure):
            SetName(value=" ")
        with pytest.raises(ValidationFailure):
            SetYearsOfExperience(value=-3)

    def test_commands_are_immutable(self):
        update = SetDepartment(value="Finance")
        with pytest.raises(ValidationError):
            update.value = "Legal"

    def test_name_requires_string(self):
        with pytest.raises(ValidationFailure):
            SetName(value=42)

    @pytest.mark.parametrize(
        ("field_name", "value", "expected_type", "expected_value"),
        [
            ("name", "Jane", SetName, "Jane"),
            ("NAME", "Jane", SetName, "Jane"),
            ("Department", "Finance", SetDepartment, "Finance"),
            ("salary", 70000, SetSalary, 70000.0),
            ("performanceRating", 4, SetPerformanceRating, 4.0),
            ("performance_rating", 3.5, SetPerformanceRating, 3.5),
            ("yearsOfExperience", 8, SetYearsOfExperience, 8),
            ("isActive", False, SetActive, False),
            ("isactive", "true", SetActive, True),
        ],
    )
    def test_parse_field_update(self, field_name, value, expected_type, expected_value):
        update = parse_field_update(field_name, value)
        assert isinstance(update, expected_type)
        assert update.value == expected_value

    def test_parse_unknown_field(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            parse_field_update("nickname", "JD")
        assert exc_info.value.field_name == "nickname"

    def test_parse_invalid_value(self):
        with pytest.raises(ValidationFailure):
            parse_field_update("salary", "lots")

    def test_from_dict_uses_discriminator(self):
        update = field_update_from_dict({"field": "years_of_experience", "value": 4})
        assert isinstance(update, SetYearsOfExperience)
        assert update.attribute == "years_of_experience"

    def test_from_dict_rejects_unknown_discriminator(self):
        with pytest.raises(ValidationFailure):
            field_update_from_dict({"field": "bonus", "value": 1})
