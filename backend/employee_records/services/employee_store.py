"""In-memory employee store (authoritative record collection)."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

from employee_records.core.exceptions import InvalidArgumentError, NotFoundError
from employee_records.models.employee import Employee, EmployeeId
from employee_records.models.field_update import FieldUpdate, parse_field_update

logger = logging.getLogger(__name__)


def _apply(current: Employee, update: FieldUpdate) -> Employee:
    data = current.model_dump()
    data[update.attribute] = update.value
    return Employee(**data)


class EmployeeStore:
    """Keyed collection of employees.

    The store owns the canonical records. Everything handed out is a copy,
    so callers can hold on to results without seeing later writes, and can
    never change a stored record except through ``update``/``update_field``.
    """

    def __init__(self) -> None:
        self._employees: dict[EmployeeId, Employee] = {}
        self._lock = threading.RLock()

    def add(self, employee: Employee) -> bool:
        if employee is None:
            raise InvalidArgumentError("Employee cannot be None")

        with self._lock:
            if employee.id in self._employees:
                logger.info("Employee with ID %s already exists", employee.id)
                return False
            self._employees[employee.id] = employee.model_copy(deep=True)

        logger.info("Employee added: %s (%s)", employee.name, employee.id)
        return True

    def remove(self, employee_id: EmployeeId) -> bool:
        with self._lock:
            removed = self._employees.pop(employee_id, None)

        if removed is None:
            logger.info("Employee with ID %s not found", employee_id)
            return False

        logger.info("Employee removed: %s (%s)", removed.name, employee_id)
        return True

    def get_by_id(self, employee_id: EmployeeId) -> Employee | None:
        with self._lock:
            employee = self._employees.get(employee_id)
            return employee.model_copy(deep=True) if employee is not None else None

    def get_all(self) -> list[Employee]:
        with self._lock:
            return [employee.model_copy(deep=True) for employee in self._employees.values()]

    def get_all_sorted(self) -> list[Employee]:
        return sorted(self.get_all())

    def count(self) -> int:
        with self._lock:
            return len(self._employees)

    def clear(self) -> None:
        with self._lock:
            self._employees.clear()
        logger.debug("Employee store cleared")

    def update(self, employee_id: EmployeeId, update: FieldUpdate) -> Employee:
        """Apply one field update to the stored employee.

        The updated record is validated as a whole and swapped in only if it
        is valid, so a failed update changes nothing.
        """
        with self._lock:
            current = self._employees.get(employee_id)
            if current is None:
                raise NotFoundError(f"Employee with ID {employee_id!r} not found", employee_id=employee_id)

            updated = _apply(current, update)
            self._employees[employee_id] = updated

        logger.debug("Employee %s updated: %s", employee_id, update.attribute)
        return updated.model_copy(deep=True)

    def update_many(
        self,
        select: Callable[[Employee], bool],
        make_update: Callable[[Employee], FieldUpdate],
    ) -> list[Employee]:
        """Apply ``make_update`` to every employee matching ``select``.

        Selection, validation and the writes all happen under one lock
        acquisition. Every updated record is built before the first one is
        swapped in, so either all matching records change or none do.
        """
        with self._lock:
            pending = [
                (employee_id, _apply(current, make_update(current.model_copy(deep=True))))
                for employee_id, current in self._employees.items()
                if select(current.model_copy(deep=True))
            ]
            for employee_id, updated in pending:
                self._employees[employee_id] = updated

        logger.debug("Batch update applied to %d employee(s)", len(pending))
        return [updated.model_copy(deep=True) for _, updated in pending]

    def update_field(self, employee_id: EmployeeId, field_name: str, value: Any) -> bool:
        """Update one field by name (case-insensitive), e.g. ``"salary"``.

        Raises NotFoundError, InvalidFieldError or ValidationFailure; returns
        True once the update is applied.
        """
        with self._lock:
            if employee_id not in self._employees:
                raise NotFoundError(f"Employee with ID {employee_id!r} not found", employee_id=employee_id)
            self.update(employee_id, parse_field_update(field_name, value))
        return True

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, employee_id: object) -> bool:
        with self._lock:
            return employee_id in self._employees


employee_store = EmployeeStore()
