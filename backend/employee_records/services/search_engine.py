from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Iterator

from employee_records.core.exceptions import InvalidArgumentError, NotFoundError
from employee_records.models.employee import Employee
from employee_records.services import comparators
from employee_records.services.comparators import Comparator, sort_key
from employee_records.services.employee_store import EmployeeStore, employee_store

logger = logging.getLogger(__name__)

MIN_RATING = 0.0
MAX_RATING = 5.0


def _require_text(value: str, label: str) -> str:
    if not value or not value.strip():
        raise InvalidArgumentError(f"{label} cannot be empty")
    return value.strip()


def _require_number(value: float, label: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
        raise InvalidArgumentError(f"{label} must be a number, got {value!r}")
    return value


class SearchEngine:
    """Read-only queries over store snapshots."""

    def __init__(self, store: EmployeeStore) -> None:
        self.store = store

    def __iter__(self) -> Iterator[Employee]:
        return iter(self.store.get_all())

    def find_by_department(self, department: str) -> list[Employee]:
        wanted = _require_text(department, "Department").casefold()
        return [e for e in self.store.get_all() if e.department.casefold() == wanted]

    def find_by_name(self, search_term: str) -> list[Employee]:
        wanted = _require_text(search_term, "Search term").casefold()
        return [e for e in self.store.get_all() if wanted in e.name.casefold()]

    def find_by_minimum_rating(self, min_rating: float) -> list[Employee]:
        if not MIN_RATING <= _require_number(min_rating, "Minimum rating") <= MAX_RATING:
            raise InvalidArgumentError(f"Minimum rating must be between {MIN_RATING} and {MAX_RATING}, got {min_rating}")
        return [e for e in self.store.get_all() if e.performance_rating >= min_rating]

    def find_by_salary_range(self, min_salary: float, max_salary: float) -> list[Employee]:
        if _require_number(min_salary, "Minimum salary") > _require_number(max_salary, "Maximum salary"):
            raise InvalidArgumentError(f"Minimum salary {min_salary} exceeds maximum salary {max_salary}")
        return [e for e in self.store.get_all() if min_salary <= e.salary <= max_salary]

    def find_active_employees(self) -> list[Employee]:
        employees = self.store.get_all()
        if not employees:
            raise NotFoundError("No employees in the store")
        return [e for e in employees if e.active]

    def sorted_by_experience(self) -> list[Employee]:
        return sorted(self.store.get_all())

    def sorted_by_salary(self) -> list[Employee]:
        return self.sort_by(comparators.by_salary_descending)

    def sorted_by_performance(self) -> list[Employee]:
        return self.sort_by(comparators.by_performance_descending)

    def sorted_by_department_and_salary(self) -> list[Employee]:
        return self.sort_by(comparators.by_department_then_salary_desc)

    def sorted_by_performance_and_experience(self) -> list[Employee]:
        return self.sort_by(comparators.by_performance_then_experience_desc)

    def sort_by(self, comparator: Comparator) -> list[Employee]:
        employees = self.store.get_all()
        logger.debug("Sorting %d employees by %s", len(employees), getattr(comparator, "__name__", comparator))
        employees.sort(key=sort_key(comparator))
        return employees

    def department_counts(self) -> dict[str, int]:
        return dict(Counter(e.department for e in self.store.get_all()))

    def average_salary(self) -> float:
        employees = self.store.get_all()
        if not employees:
            return 0.0
        return sum(e.salary for e in employees) / len(employees)

    def find_top_performer(self) -> Employee | None:
        """Highest rated employee; ties go to whichever the store yields first."""
        employees = self.store.get_all()
        if not employees:
            return None
        return max(employees, key=lambda e: e.performance_rating)


search_engine = SearchEngine(employee_store)
