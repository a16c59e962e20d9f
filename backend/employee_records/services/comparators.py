"""Ordering strategies over employees.

A comparator is a plain function ``(a, b) -> int`` returning LESS, EQUAL or
GREATER. They hold no state and can be shared freely; ``then`` chains them
and ``sort_key`` adapts one for ``sorted``/``list.sort``.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable

from employee_records.models.employee import Employee

LESS = -1
EQUAL = 0
GREATER = 1

Comparator = Callable[[Employee, Employee], int]


def _compare(a: Any, b: Any) -> int:
    if a < b:
        return LESS
    if a > b:
        return GREATER
    return EQUAL


def by_salary_descending(a: Employee, b: Employee) -> int:
    return _compare(b.salary, a.salary)


def by_performance_descending(a: Employee, b: Employee) -> int:
    return _compare(b.performance_rating, a.performance_rating)


def by_department_ascending(a: Employee, b: Employee) -> int:
    return _compare(a.department, b.department)


def by_name_ascending(a: Employee, b: Employee) -> int:
    return _compare(a.name, b.name)


def by_experience_ascending(a: Employee, b: Employee) -> int:
    """Natural order."""
    return _compare(a.years_of_experience, b.years_of_experience)


def by_experience_descending(a: Employee, b: Employee) -> int:
    return _compare(b.years_of_experience, a.years_of_experience)


def then(primary: Comparator, *tie_breakers: Comparator) -> Comparator:
    """Compose comparators; each later one only decides ties of the earlier ones."""
    chain = (primary, *tie_breakers)

    def _compound(a: Employee, b: Employee) -> int:
        for comparator in chain:
            result = comparator(a, b)
            if result != EQUAL:
                return result
        return EQUAL

    return _compound


def reverse(comparator: Comparator) -> Comparator:
    def _reversed(a: Employee, b: Employee) -> int:
        return comparator(b, a)

    return _reversed


def sort_key(comparator: Comparator):
    return cmp_to_key(comparator)


by_department_then_salary_desc: Comparator = then(by_department_ascending, by_salary_descending)
by_performance_then_experience_desc: Comparator = then(by_performance_descending, by_experience_descending)
