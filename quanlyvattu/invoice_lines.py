"""Operations on the material lines of an invoice."""

from __future__ import annotations

from collections.abc import Iterable

from .models import InvoiceLine, MaterialRevenue

_UNSET = -1


def find_line(lines: list[InvoiceLine], material_id: str) -> InvoiceLine | None:
    """Return the first line for *material_id*, or None."""
    return next((line for line in lines if line.material_id == material_id), None)


def add_line(lines: list[InvoiceLine], line: InvoiceLine) -> bool:
    """Put *line* at the front of *lines*; return False if its material is already listed."""
    if find_line(lines, line.material_id) is not None:
        return False
    lines.insert(0, line)
    return True


def remove_line(lines: list[InvoiceLine], material_id: str) -> InvoiceLine:
    """Remove and return the line for *material_id*; raise KeyError if there is none."""
    for index, line in enumerate(lines):
        if line.material_id == material_id:
            return lines.pop(index)
    raise KeyError(material_id)


def _format_amount(value: float) -> str:
    if value == _UNSET:
        return "NONE"
    prefix = "0" if 0 < value < 1 else ""
    return f"{prefix}{value:.3f}"


def format_line(line: InvoiceLine) -> str:
    """One line of text describing *line*."""
    price = _format_amount(line.unit_price)
    vat = _format_amount(line.vat)
    if line.vat != _UNSET:
        vat += "%"
    return (
        f"Ma VT: {line.material_id}, So luong: {line.quantity}, "
        f"Don gia: {price}, VAT: {vat}"
    )


def format_lines(lines: Iterable[InvoiceLine]) -> str:
    """A heading followed by one formatted line per invoice line."""
    lines = list(lines)
    if not lines:
        return "Danh sach chi tiet hoa don rong!"
    return "\n".join(["Danh sach chi tiet hoa don:", *map(format_line, lines)])


def sort_by_revenue(items: Iterable[MaterialRevenue]) -> list[MaterialRevenue]:
    """Return the revenue entries in ascending order of revenue."""
    return sorted(items, key=lambda item: item.revenue)