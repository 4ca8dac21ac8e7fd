"""Invoices ordered by date, stock updates and printable invoice reports."""

from __future__ import annotations

import bisect
from collections.abc import Callable, Iterable, Iterator

from .employees import EmployeeRoster
from .materials import MaterialTree
from .models import Date, Invoice, InvoiceKind, InvoiceLine, Material

_RULE = "------------------------------------------------"
_HEADER = "-------------------- HOA DON --------------------"


class InsufficientStockError(Exception):
    """Raised when an export invoice asks for more than is in stock.

    ``shortages`` maps each offending material id to its current stock,
    or to None when the material is not stocked at all.
    """

    def __init__(self, shortages: dict[str, int | None]) -> None:
        self.shortages = dict(shortages)
        if not self.shortages:
            message = "no materials in stock to export"
        else:
            details = ", ".join(
                f"{code}: {'missing' if stock is None else stock}"
                for code, stock in self.shortages.items()
            )
            message = f"not enough stock to export ({details})"
        super().__init__(message)


def format_invoice_number(number: int) -> str:
    """Build an invoice number such as ``HoaDonCongTy-000000001``."""
    return f"HoaDonCongTy-{number:09d}"


def compare_dates(first: Date, second: Date) -> int:
    """Negative, zero or positive as *first* is before, on or after *second*."""
    return first.compare(second)


def _date_key(date: Date) -> tuple[int, int, int]:
    return (date.year, date.month, date.day)


class InvoiceBook:
    """Invoices kept in ascending date order; a new invoice goes before others of its date."""

    def __init__(self, invoices: Iterable[Invoice] = ()) -> None:
        self._items: list[Invoice] = []
        for invoice in invoices:
            self.insert(invoice)

    def insert(self, invoice: Invoice) -> None:
        """Place *invoice* before the first invoice dated on or after it."""
        position = bisect.bisect_left(
            self._items, _date_key(invoice.date), key=lambda item: _date_key(item.date)
        )
        self._items.insert(position, invoice)

    def create(
        self,
        number: str,
        date: Date,
        kind: InvoiceKind,
        lines: Iterable[InvoiceLine] = (),
    ) -> Invoice:
        """Make a new invoice, insert it and return it; ValueError for an unknown kind."""
        if not isinstance(kind, InvoiceKind):
            raise ValueError(f"invalid invoice kind: {kind!r}")
        invoice = Invoice(number, date, kind, list(lines))
        self.insert(invoice)
        return invoice

    def find(self, number: str) -> Invoice | None:
        """Return the invoice with *number*, or None."""
        return next((inv for inv in self._items if inv.number == number), None)

    def remove(self, number: str) -> Invoice:
        """Remove and return the invoice with *number*; KeyError if absent."""
        for index, invoice in enumerate(self._items):
            if invoice.number == number:
                return self._items.pop(index)
        raise KeyError(number)

    def __contains__(self, number: object) -> bool:
        return any(inv.number == number for inv in self._items)

    def __iter__(self) -> Iterator[Invoice]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


def apply_invoice(
    materials: MaterialTree,
    invoice: Invoice,
    ask_details: Callable[[str], tuple[str, str]] | None = None,
) -> None:
    """Update stock for a confirmed invoice.

    An import adds quantities, creating unknown materials with the name and
    unit returned by ``ask_details(material_id)``. An export subtracts
    quantities only if every line can be served; otherwise nothing changes
    and InsufficientStockError is raised.
    """
    if invoice.kind is InvoiceKind.IMPORT:
        for line in invoice.lines:
            material = materials.find_by_code(line.material_id)
            if material is None:
                if ask_details is None:
                    raise KeyError(line.material_id)
                name, unit = ask_details(line.material_id)
                materials.insert(Material(line.material_id, name, unit, line.quantity))
            else:
                material.stock += line.quantity
        return

    if len(materials) == 0:
        raise InsufficientStockError({line.material_id: None for line in invoice.lines})

    shortages: dict[str, int | None] = {}
    for line in invoice.lines:
        material = materials.find_by_code(line.material_id)
        if material is None:
            shortages[line.material_id] = None
        elif material.stock - line.quantity < 0:
            shortages[line.material_id] = material.stock
    if shortages:
        raise InsufficientStockError(shortages)

    for line in invoice.lines:
        material = materials.find_by_code(line.material_id)
        material.stock -= line.quantity


def format_invoice(employees: EmployeeRoster, materials: MaterialTree, number: str) -> str:
    """Printable report of the invoice *number*; KeyError if no employee issued it."""
    for employee in employees:
        invoice = next((inv for inv in employee.invoices if inv.number == number), None)
        if invoice is None:
            continue
        if not invoice.lines:
            return "Hoa don rong"

        kind = "Nhap" if invoice.kind is InvoiceKind.IMPORT else "Xuat"
        date = invoice.date
        report = [
            _HEADER,
            f"So Hoa Don: {number}",
            f"Ngay: {date.day}/{date.month}/{date.year}",
            f"Nhan Vien: {employee.last_name} {employee.first_name}",
            f"Loai Hoa Don: {kind}",
            _RULE,
        ]
        total = 0
        for line in invoice.lines:
            material = materials.find_by_code(line.material_id)
            if material is None:
                report.append(f"Vat tu voi ma {line.material_id} khong ton tai")
                continue
            value = int(line.quantity * line.unit_price)
            total += value
            report.append(
                f"Ten VT: {material.name}, So Luong: {line.quantity}, "
                f"Don Gia: {line.unit_price:g}, Tri Gia: {value}"
            )
        report.extend([_RULE, f"Tong Tri Gia Hoa Don: {total}", _RULE])
        return "\n".join(report)
    raise KeyError(number)