"""Employee roster kept sorted by first name, then last name."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator

from .models import MAX_EMPLOYEES, Employee


class RosterFullError(Exception):
    """Raised when adding to a roster that has reached its capacity."""


def format_employee_code(number: int) -> str:
    """Build an employee code such as ``NV-001``."""
    return f"NV-{number:03d}"


def _sort_key(employee: Employee) -> tuple[str, str]:
    return (employee.first_name, employee.last_name)


def compare_employees(first: Employee, second: Employee) -> int:
    """Negative, zero or positive by first name, then last name."""
    a, b = _sort_key(first), _sort_key(second)
    return (a > b) - (a < b)


class EmployeeRoster:
    """Sorted, bounded list of employees."""

    def __init__(self, employees: Iterable[Employee] = (), capacity: int = MAX_EMPLOYEES) -> None:
        self._capacity = capacity
        self._items: list[Employee] = []
        for employee in employees:
            self.add(employee)

    def add(self, employee: Employee) -> None:
        """Insert *employee* after any with an equal name; raise RosterFullError when full."""
        if len(self._items) >= self._capacity:
            raise RosterFullError("employee roster is full")
        bisect.insort_right(self._items, employee, key=_sort_key)

    def find(self, employee_id: str) -> Employee | None:
        """Return the employee with *employee_id*, or None."""
        return next((e for e in self._items if e.employee_id == employee_id), None)

    def index_of(self, employee_id: str) -> int:
        """Position of the employee with *employee_id*; ValueError if absent."""
        for index, employee in enumerate(self._items):
            if employee.employee_id == employee_id:
                return index
        raise ValueError(f"no employee {employee_id!r}")

    def index_of_material(self, material_id: str) -> int:
        """Position of the first employee with an invoice line for *material_id*."""
        for index, employee in enumerate(self._items):
            if any(
                line.material_id == material_id
                for invoice in employee.invoices
                for line in invoice.lines
            ):
                return index
        raise ValueError(f"no invoice line for material {material_id!r}")

    def remove(self, employee_id: str) -> Employee | None:
        """Remove and return the employee with *employee_id*, or None if absent."""
        try:
            index = self.index_of(employee_id)
        except ValueError:
            return None
        return self._items.pop(index)

    def format_listing(self) -> str:
        if not self._items:
            return "Danh Sach Nhan Vien Rong Hoac Khong Ton Tai"
        lines = ["Danh sach nhan vien theo thu tu ten(ho)"]
        lines.extend(
            f"maNV: {e.employee_id}, Ho: {e.last_name}, Ten: {e.first_name}, "
            f"Phai: {e.gender.label}"
            for e in self._items
        )
        return "\n".join(lines)

    def __contains__(self, employee_id: object) -> bool:
        return any(e.employee_id == employee_id for e in self._items)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Employee:
        return self._items[index]