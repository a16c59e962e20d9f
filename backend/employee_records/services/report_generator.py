"""Human-readable reports over store snapshots (read-only)."""

from __future__ import annotations

import logging
from itertools import groupby

from employee_records.core.config import Settings, settings
from employee_records.models.employee import Employee
from employee_records.models.report import DepartmentSummary, PerformanceBand, SalaryBucket
from employee_records.services.employee_store import EmployeeStore, employee_store

logger = logging.getLogger(__name__)

# (lower, upper) salary bounds; upper is exclusive, None means open-ended
SALARY_BUCKET_BOUNDS: list[tuple[float, float | None]] = [
    (0, 50_000),
    (50_000, 75_000),
    (75_000, 100_000),
    (100_000, 125_000),
    (125_000, None),
]

# Best band first; only the top band includes its upper bound
PERFORMANCE_BANDS: list[tuple[str, float, float]] = [
    ("Outstanding (4.5-5.0)", 4.5, 5.0),
    ("Excellent (4.0-4.4)", 4.0, 4.5),
    ("Good (3.0-3.9)", 3.0, 4.0),
    ("Fair (2.0-2.9)", 2.0, 3.0),
    ("Poor (0-1.9)", 0.0, 2.0),
]

NO_DEPARTMENTS = "No employees in any department."
NO_EMPLOYEES = "No employees to display."
NO_MATCHES = "No matching employees found."


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


class ReportGenerator:
    def __init__(self, store: EmployeeStore, config: Settings | None = None) -> None:
        self.store = store
        self.config = config or settings

    def _money(self, amount: float, fmt: str = ",.2f") -> str:
        return f"{self.config.CURRENCY_SYMBOL}{amount:{fmt}}"

    def _bucket_label(self, lower: float, upper: float | None) -> str:
        if upper is None:
            return f"{self._money(lower, ',.0f')} and above"
        if lower <= 0:
            return f"Below {self._money(upper, ',.0f')}"
        return f"{self._money(lower, ',.0f')} - {self._money(upper - 1, ',.0f')}"

    def department_summaries(self) -> list[DepartmentSummary]:
        employees = sorted(self.store.get_all(), key=lambda e: e.department)
        summaries: list[DepartmentSummary] = []
        for department, group in groupby(employees, key=lambda e: e.department):
            members = list(group)
            summaries.append(
                DepartmentSummary(
                    department=department,
                    employee_count=len(members),
                    active_count=sum(1 for e in members if e.active),
                    average_salary=_mean([e.salary for e in members]),
                    average_rating=_mean([e.performance_rating for e in members]),
                    members=members,
                )
            )
        logger.debug("Built %d department summaries", len(summaries))
        return summaries

    def department_report(self) -> str:
        summaries = self.department_summaries()
        if not summaries:
            return NO_DEPARTMENTS

        lines = ["=================== Department Report ==================="]
        for summary in summaries:
            lines.extend(
                [
                    "",
                    f"Department: {summary.department}",
                    f"Number of Employees: {summary.employee_count}",
                    f"Active Employees: {summary.active_count}",
                    f"Average Salary: {self._money(summary.average_salary, '.2f')}",
                    f"Average Performance Rating: {summary.average_rating:.2f}",
                    "",
                    "Employees:",
                ]
            )
            for e in summary.members:
                lines.append(
                    f"- {e.name} (Experience: {e.years_of_experience} years, Rating: {e.performance_rating:.1f})"
                )
            lines.append("-" * 51)
        return "\n".join(lines)

    def salary_buckets(self) -> list[SalaryBucket]:
        buckets = [
            SalaryBucket(label=self._bucket_label(lower, upper), lower=lower, upper=upper)
            for lower, upper in SALARY_BUCKET_BOUNDS
        ]
        for e in self.store.get_all():
            for bucket in buckets:
                if bucket.upper is None or e.salary < bucket.upper:
                    bucket.count += 1
                    break
        return buckets

    def salary_distribution_report(self) -> str:
        lines = ["============= Salary Distribution ============="]
        for bucket in self.salary_buckets():
            lines.append(f"{bucket.label:<20}: {bucket.count} employee(s)")
        lines.append("=" * 46)
        return "\n".join(lines)

    def performance_bands(self) -> list[PerformanceBand]:
        bands = [PerformanceBand(label=label, lower=lower, upper=upper) for label, lower, upper in PERFORMANCE_BANDS]
        for e in self.store.get_all():
            for band in bands:
                if e.performance_rating >= band.lower:
                    band.members.append(e)
                    break
        return bands

    def performance_report(self) -> str:
        lines = ["============= Performance Report ============="]
        for band in self.performance_bands():
            lines.extend(["", f"{band.label}: {len(band.members)} employee(s)"])
            if band.members:
                lines.append("-" * 42)
                for e in band.members:
                    lines.append(f"- {e.name} (Dept: {e.department}, Rating: {e.performance_rating:.1f})")
        lines.append("=" * 46)
        return "\n".join(lines)

    def employee_table(self, employees: list[Employee] | None = None) -> str:
        if employees is None:
            employees = self.store.get_all()
        if not employees:
            return NO_EMPLOYEES

        name_w = self.config.REPORT_NAME_WIDTH
        dept_w = self.config.REPORT_DEPARTMENT_WIDTH
        lines = [
            "============= Employee List =============",
            f"{'Name':<{name_w}} {'Department':<{dept_w}} {'Salary':<10} {'Rating':<12} {'Years':<8} Active",
            "-" * 42,
        ]
        for e in employees:
            lines.append(
                f"{e.name:<{name_w}} {e.department:<{dept_w}} {self._money(e.salary, '<9.2f')} "
                f"{e.performance_rating:<12.1f} {e.years_of_experience:<8d} {'Yes' if e.active else 'No'}"
            )
        lines.append("=" * 42)
        return "\n".join(lines)

    def search_results(self, employees: list[Employee]) -> str:
        if not employees:
            return NO_MATCHES

        lines = ["===== Search Results =====", f"Found {len(employees)} matching employees:"]
        for e in employees:
            status = "active" if e.active else "inactive"
            lines.append(
                f"{e.name} [{e.id}] - {e.department}, {self._money(e.salary)}, "
                f"rating {e.performance_rating:.1f}, {e.years_of_experience} years, {status}"
            )
        lines.append("=" * 25)
        return "\n".join(lines)


report_generator = ReportGenerator(employee_store)
