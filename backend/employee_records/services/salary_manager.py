from __future__ import annotations

import logging
import math
from collections import defaultdict
from typing import Callable

from employee_records.core.config import Settings, settings
from employee_records.core.exceptions import InvalidArgumentError
from employee_records.models.employee import Employee
from employee_records.models.field_update import SetSalary
from employee_records.services.employee_store import EmployeeStore, employee_store

logger = logging.getLogger(__name__)

EMPTY_SALARY_REPORT = "No employees to display in salary report."


def _validate_percentage(percentage: float) -> None:
    if math.isnan(percentage) or percentage <= 0:
        raise InvalidArgumentError(f"Percentage raise must be positive, got {percentage}")


def _department_key(department: str) -> str:
    if not isinstance(department, str) or not department.strip():
        raise InvalidArgumentError("Department cannot be empty")
    return department.strip().casefold()


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


class SalaryManager:
    """Bulk salary raises and salary aggregates over the store."""

    def __init__(self, store: EmployeeStore, config: Settings | None = None) -> None:
        self.store = store
        self.config = config or settings

    def _give_raise(self, eligible: Callable[[Employee], bool], percentage: float) -> int:
        factor = 1 + percentage / 100
        raised = self.store.update_many(eligible, lambda e: SetSalary(value=e.salary * factor))

        logger.info("Applied %.2f%% raise to %d employee(s)", percentage, len(raised))
        return len(raised)

    def raise_by_performance(self, min_rating: float, percentage: float) -> int:
        _validate_percentage(percentage)
        return self._give_raise(lambda e: e.active and e.performance_rating >= min_rating, percentage)

    def raise_by_experience(self, years_threshold: int, percentage: float) -> int:
        _validate_percentage(percentage)
        return self._give_raise(lambda e: e.active and e.years_of_experience >= years_threshold, percentage)

    def raise_by_department(self, department: str, percentage: float) -> int:
        _validate_percentage(percentage)
        wanted = _department_key(department)
        return self._give_raise(lambda e: e.active and e.department.casefold() == wanted, percentage)

    def top_paid(self, n: int) -> list[Employee]:
        """First ``n`` employees in natural order (fewest years of experience).

        Selection follows the natural ordering, not salary.
        """
        if n <= 0:
            raise InvalidArgumentError(f"Number of employees must be positive, got {n}")
        return self.store.get_all_sorted()[:n]

    def average_salary(self) -> float:
        return _mean([e.salary for e in self.store.get_all()])

    def average_salary_by_department(self, department: str) -> float:
        wanted = _department_key(department)
        return _mean([e.salary for e in self.store.get_all() if e.department.casefold() == wanted])

    def average_salary_per_department(self) -> dict[str, float]:
        salaries: dict[str, list[float]] = defaultdict(list)
        for e in self.store.get_all():
            salaries[e.department].append(e.salary)
        return {department: _mean(values) for department, values in salaries.items()}

    def total_salary_cost(self) -> float:
        return sum((e.salary for e in self.store.get_all() if e.active), 0.0)

    def total_salary_cost_per_department(self) -> dict[str, float]:
        totals: dict[str, float] = defaultdict(float)
        for e in self.store.get_all():
            if e.active:
                totals[e.department] += e.salary
        return dict(totals)

    def salary_gap(self) -> float:
        salaries = [e.salary for e in self.store.get_all()]
        if not salaries:
            return 0.0
        return max(salaries) - min(salaries)

    def any_above_salary(self, department: str, threshold: float) -> bool:
        wanted = _department_key(department)
        return any(e.salary > threshold for e in self.store.get_all() if e.department.casefold() == wanted)

    def format_salary_report(self, employees: list[Employee]) -> str:
        if not employees:
            return EMPTY_SALARY_REPORT

        name_w = self.config.REPORT_NAME_WIDTH
        dept_w = self.config.REPORT_DEPARTMENT_WIDTH
        currency = self.config.CURRENCY_SYMBOL

        lines = [
            "============= SALARY REPORT =============",
            f"{'NAME':<{name_w}} | {'DEPARTMENT':<{dept_w}} | {'SALARY':<10} | RATING",
            "-" * 42,
        ]
        for e in employees:
            lines.append(
                f"{e.name:<{name_w}} | {e.department:<{dept_w}} | "
                f"{currency}{e.salary:>9,.2f} | {e.performance_rating:.1f}"
            )
        lines.append("=" * 41)
        return "\n".join(lines)


salary_manager = SalaryManager(employee_store)
