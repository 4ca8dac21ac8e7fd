"""Plain-text files for materials, employees and their invoices."""

from __future__ import annotations

import copy
from os import PathLike

from .employees import EmployeeRoster
from .invoices import InvoiceBook
from .materials import MaterialTree
from .models import Date, Employee, Gender, Invoice, InvoiceKind, InvoiceLine, Material

_SEPARATOR = "|"
_EMPLOYEE_MARK = "#"
_INVOICE_MARK = "&"
_LINE_MARK = "!"

Path = str | PathLike


def _records(path: Path):
    """Yield the non-empty lines of *path* without their line endings."""
    with open(path, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.rstrip("\r\n")
            if line:
                yield line


def _fields(text: str, count: int) -> list[str]:
    parts = text.split(_SEPARATOR, count - 1)
    if len(parts) != count:
        raise ValueError(f"expected {count} fields in {text!r}")
    return parts


def _first_word(text: str, limit: int) -> str:
    words = text.split()
    return words[0][:limit] if words else ""


def _parse_gender(text: str) -> Gender:
    return Gender.MALE if _first_word(text, 3) == Gender.MALE.value else Gender.FEMALE


def _parse_kind(text: str) -> InvoiceKind:
    return InvoiceKind.IMPORT if _first_word(text, 5) == InvoiceKind.IMPORT.value else InvoiceKind.EXPORT


def _employee_record(employee: Employee) -> str:
    return _SEPARATOR.join(
        (employee.employee_id, employee.last_name, employee.first_name, employee.gender.value)
    )


def _parse_employee(text: str) -> Employee:
    employee_id, last_name, first_name, gender = _fields(text, 4)
    return Employee(employee_id, last_name, first_name, _parse_gender(gender))


def save_materials(tree: MaterialTree, path: Path) -> None:
    """Write one ``code|name|unit|stock`` line per material, in name order."""
    with open(path, "w", encoding="utf-8") as handle:
        for material in tree.inorder():
            handle.write(
                f"{material.code}|{material.name}|{material.unit}|{material.stock}\n"
            )


def load_materials(tree: MaterialTree, path: Path) -> int:
    """Insert every material listed in *path* into *tree*; return how many were read."""
    count = 0
    for line in _records(path):
        code, name, unit, stock = _fields(line, 4)
        tree.insert(Material(code, name, unit, int(stock.strip())))
        count += 1
    return count


def save_employees(roster: EmployeeRoster, path: Path) -> None:
    """Write one ``id|last name|first name|gender`` line per employee."""
    with open(path, "w", encoding="utf-8") as handle:
        for employee in roster:
            handle.write(_employee_record(employee) + "\n")


def load_employees(roster: EmployeeRoster, path: Path) -> int:
    """Add every employee listed in *path* to *roster*; return how many were read."""
    count = 0
    for line in _records(path):
        roster.add(_parse_employee(line))
        count += 1
    return count


def save_all(roster: EmployeeRoster, path: Path) -> None:
    """Write employees with their invoices and invoice lines.

    Employees start with ``#``, invoices with ``&`` and invoice lines with ``!``.
    """
    with open(path, "w", encoding="utf-8") as handle:
        for employee in roster:
            handle.write(_EMPLOYEE_MARK + _employee_record(employee) + "\n")
            for invoice in employee.invoices:
                date = invoice.date
                handle.write(
                    f"{_INVOICE_MARK}{invoice.number}|{date.day}|{date.month}|"
                    f"{date.year}|{invoice.kind.value}\n"
                )
                for line in invoice.lines:
                    handle.write(
                        f"{_LINE_MARK}{line.material_id}|{line.quantity}|"
                        f"{line.unit_price:f}|{line.vat:f}\n"
                    )


def _parse_invoice(text: str) -> Invoice:
    number, day, month, year, kind = _fields(text, 5)
    return Invoice(number, Date(int(day), int(month), int(year)), _parse_kind(kind))


def _parse_line(text: str) -> InvoiceLine:
    material_id, quantity, price, vat = _fields(text, 4)
    return InvoiceLine(material_id, int(quantity), float(price), float(vat))


def load_all(roster: EmployeeRoster, book: InvoiceBook, path: Path) -> int:
    """Read a file written by :func:`save_all`; return the number of employees read.

    Each employee's invoices are kept in date order, and every invoice is
    also filed, as a separate copy, in *book*. Invoice lines are read onto
    the front of their invoice, so they come back in reverse file order.
    """
    employee: Employee | None = None
    issued = InvoiceBook()
    invoice: Invoice | None = None
    count = 0

    def file_invoice() -> None:
        if invoice is not None:
            issued.insert(invoice)
            book.insert(copy.deepcopy(invoice))

    def close_employee() -> None:
        nonlocal count
        if employee is None:
            return
        file_invoice()
        employee.invoices = list(issued)
        roster.add(employee)
        count += 1

    for line in _records(path):
        mark, body = line[0], line[1:]
        if mark == _EMPLOYEE_MARK:
            close_employee()
            employee = _parse_employee(body)
            issued = InvoiceBook()
            invoice = None
        elif mark == _INVOICE_MARK and employee is not None:
            file_invoice()
            invoice = _parse_invoice(body)
        elif mark == _LINE_MARK and invoice is not None:
            invoice.lines.insert(0, _parse_line(body))
    close_employee()
    return count