from __future__ import annotations

import pytest

from employee_records.core.config import Settings
from employee_records.models.employee import Employee
from employee_records.services.employee_store import EmployeeStore
from employee_records.services.report_generator import ReportGenerator
from employee_records.services.salary_manager import SalaryManager
from employee_records.services.search_engine import SearchEngine


def make_employee(
    employee_id=1,
    *,
    name: str = "John Doe",
    department: str = "IT",
    salary: float = 50000.0,
    performance_rating: float = 4.2,
    years_of_experience: int = 5,
    active: bool = True,
) -> Employee:
    return Employee(
        id=employee_id,
        name=name,
        department=department,
        salary=salary,
        performance_rating=performance_rating,
        years_of_experience=years_of_experience,
        active=active,
    )


SAMPLE_EMPLOYEES = [
    dict(employee_id=1, name="John Doe", department="IT", salary=50000.0, performance_rating=4.2, years_of_experience=5),
    dict(employee_id=2, name="Jane Smith", department="HR", salary=42000.0, performance_rating=3.8, years_of_experience=3),
    dict(employee_id=3, name="Bob Johnson", department="IT", salary=65000.0, performance_rating=4.5, years_of_experience=7),
    dict(
        employee_id=4,
        name="Alice Brown",
        department="Sales",
        salary=38000.0,
        performance_rating=3.2,
        years_of_experience=2,
        active=False,
    ),
]


@pytest.fixture
def employee_factory():
    return make_employee


@pytest.fixture
def report_settings() -> Settings:
    return Settings(CURRENCY_SYMBOL="$", REPORT_NAME_WIDTH=20, REPORT_DEPARTMENT_WIDTH=15)


@pytest.fixture
def store() -> EmployeeStore:
    return EmployeeStore()


@pytest.fixture
def seeded_store(store) -> EmployeeStore:
    for data in SAMPLE_EMPLOYEES:
        store.add(make_employee(**data))
    return store


@pytest.fixture
def search(seeded_store) -> SearchEngine:
    return SearchEngine(seeded_store)


@pytest.fixture
def salaries(seeded_store, report_settings) -> SalaryManager:
    return SalaryManager(seeded_store, report_settings)


@pytest.fixture
def reports(seeded_store, report_settings) -> ReportGenerator:
    return ReportGenerator(seeded_store, report_settings)
