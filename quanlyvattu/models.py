"""Core records of the warehouse: materials, invoices and employees."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MAX_EMPLOYEES = 500
MENU_ITEMS = 5
MATERIAL_ITEMS = 3


class InvoiceKind(Enum):
    """Whether an invoice brings goods in or sends them out."""

    IMPORT = "nhap"
    EXPORT = "xuat"


class Gender(Enum):
    """Gender of an employee, valued by its stored spelling."""

    MALE = "nam"
    FEMALE = "nu"

    @property
    def label(self) -> str:
        """Capitalised form used in listings."""
        return self.value.capitalize()


@dataclass(frozen=True)
class Date:
    """A calendar date as entered on an invoice."""

    day: int
    month: int
    year: int

    def compare(self, other: Date) -> int:
        """Negative, zero or positive as this date is before, on or after *other*."""
        if self.year != other.year:
            return self.year - other.year
        if self.month != other.month:
            return self.month - other.month
        return self.day - other.day


@dataclass
class Material:
    """A stocked material."""

    code: str
    name: str
    unit: str
    stock: int


@dataclass
class InvoiceLine:
    """One material line of an invoice."""

    material_id: str
    quantity: int
    unit_price: float
    vat: float


@dataclass
class Invoice:
    """An import or export invoice with its lines."""

    number: str
    date: Date
    kind: InvoiceKind
    lines: list[InvoiceLine] = field(default_factory=list)


@dataclass
class Employee:
    """An employee and the invoices they issued."""

    employee_id: str
    last_name: str
    first_name: str
    gender: Gender
    invoices: list[Invoice] = field(default_factory=list)


@dataclass
class MaterialRevenue:
    """Accumulated revenue of one material."""

    material_id: str
    revenue: float = 0.0