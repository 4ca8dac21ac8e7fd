import pytest

from quanlyvattu.invoice_lines import (
    add_line,
    find_line,
    format_line,
    format_lines,
    remove_line,
    sort_by_revenue,
)
from quanlyvattu.models import InvoiceLine, MaterialRevenue


def _line(material_id, quantity=1, price=10.0, vat=5.0):
    return InvoiceLine(material_id, quantity, price, vat)


def test_add_line_prepends():
    lines = []
    assert add_line(lines, _line("A")) is True
    assert add_line(lines, _line("B")) is True
    assert [line.material_id for line in lines] == ["B", "A"]


def test_add_line_rejects_duplicate_material():
    lines = []
    add_line(lines, _line("A", 1))
    assert add_line(lines, _line("A", 9)) is False
    assert len(lines) == 1
    assert lines[0].quantity == 1


def test_find_line_returns_same_object():
    first = _line("A")
    lines = [first, _line("B")]
    assert find_line(lines, "A") is first
    assert find_line(lines, "Z") is None
    assert find_line([], "A") is None


def test_remove_line_returns_removed():
    lines = [_line("A"), _line("B"), _line("C")]
    removed = remove_line(lines, "B")
    assert removed.material_id == "B"
    assert [line.material_id for line in lines] == ["A", "C"]


def test_remove_line_missing_raises():
    lines = [_line("A")]
    with pytest.raises(KeyError):
        remove_line(lines, "B")
    assert len(lines) == 1


def test_remove_line_empty_raises():
    with pytest.raises(KeyError):
        remove_line([], "A")


def test_format_line_values():
    line = InvoiceLine("VT1", 5, 1234.5, 10.0)
    assert format_line(line) == "Ma VT: VT1, So luong: 5, Don gia: 1234.500, VAT: 10.000%"


def test_format_line_unset_amounts():
    line = InvoiceLine("VT1", 2, -1, -1)
    assert format_line(line) == "Ma VT: VT1, So luong: 2, Don gia: NONE, VAT: NONE"


def test_format_line_fraction_gets_leading_zero():
    line = InvoiceLine("VT1", 2, 0.5, 3.0)
    assert "Don gia: 00.500" in format_line(line)


def test_format_lines_empty():
    assert format_lines([]) == "Danh sach chi tiet hoa don rong!"


def test_format_lines_heading_and_lines():
    lines = [_line("A"), _line("B", 3)]
    rows = format_lines(lines).split("\n")
    assert rows[0] == "Danh sach chi tiet hoa don:"
    assert rows[1:] == [format_line(lines[0]), format_line(lines[1])]


def test_sort_by_revenue_orders_ascending():
    items = [
        MaterialRevenue("A", 30.0),
        MaterialRevenue("B", 10.0),
        MaterialRevenue("C", 20.0),
        MaterialRevenue("D", 10.0),
    ]
    result = sort_by_revenue(items)
    revenues = [item.revenue for item in result]
    assert revenues == sorted(revenues)
    assert {item.material_id for item in result} == {"A", "B", "C", "D"}
    assert [item.material_id for item in items] == ["A", "B", "C", "D"]


def test_sort_by_revenue_empty():
    assert sort_by_revenue([]) == []