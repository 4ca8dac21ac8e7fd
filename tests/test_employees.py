import pytest

from quanlyvattu.employees import (
    EmployeeRoster,
    RosterFullError,
    compare_employees,
    format_employee_code,
)
from quanlyvattu.models import Date, Employee, Gender, Invoice, InvoiceKind, InvoiceLine


def _sample():
    return [
        Employee("NV001", "Nguyen", "An", Gender.MALE),
        Employee("NV002", "Tran", "Binh", Gender.FEMALE),
        Employee("NV003", "Le", "Cuong", Gender.MALE),
    ]


def test_format_employee_code():
    assert format_employee_code(1) == "NV-001"


def test_compare_employees_uses_first_then_last_name():
    a = Employee("1", "Nguyen", "An", Gender.MALE)
    b = Employee("2", "Tran", "An", Gender.MALE)
    c = Employee("3", "Adams", "Binh", Gender.MALE)
    assert compare_employees(a, b) < 0
    assert compare_employees(b, a) > 0
    assert compare_employees(b, c) < 0
    assert compare_employees(a, a) == 0


def test_roster_is_sorted():
    roster = EmployeeRoster(reversed(_sample()))
    assert [e.employee_id for e in roster] == ["NV001", "NV002", "NV003"]
    keys = [(e.first_name, e.last_name) for e in roster]
    assert keys == sorted(keys)


def test_equal_names_keep_insertion_order():
    roster = EmployeeRoster()
    roster.add(Employee("X1", "Le", "An", Gender.MALE))
    roster.add(Employee("X2", "Le", "An", Gender.FEMALE))
    assert [e.employee_id for e in roster] == ["X1", "X2"]


def test_find_and_index():
    roster = EmployeeRoster(_sample())
    assert roster.find("NV002").last_name == "Tran"
    assert roster.find("NV999") is None
    assert roster.index_of("NV003") == 2
    with pytest.raises(ValueError):
        roster.index_of("NV999")
    assert "NV001" in roster
    assert "NV004" not in roster
    assert roster[1].employee_id == "NV002"


def test_remove():
    roster = EmployeeRoster(_sample())
    removed = roster.remove("NV002")
    assert removed.employee_id == "NV002"
    assert [e.employee_id for e in roster] == ["NV001", "NV003"]
    assert roster.remove("NV004") is None
    assert len(roster) == 2


def test_index_of_material():
    employees = _sample()
    invoice = Invoice(
        "HD1",
        Date(1, 1, 2024),
        InvoiceKind.IMPORT,
        [InvoiceLine("vt-0000005", 2, 10.0, 5.0)],
    )
    employees[2].invoices.append(invoice)
    roster = EmployeeRoster(employees)
    assert roster.index_of_material("vt-0000005") == roster.index_of("NV003")
    with pytest.raises(ValueError):
        roster.index_of_material("vt-0000006")


def test_full_roster_raises():
    roster = EmployeeRoster(capacity=2)
    roster.add(Employee("A", "x", "a", Gender.MALE))
    roster.add(Employee("B", "x", "b", Gender.MALE))
    with pytest.raises(RosterFullError):
        roster.add(Employee("C", "x", "c", Gender.MALE))
    assert len(roster) == 2


def test_format_listing():
    assert EmployeeRoster().format_listing() == "Danh Sach Nhan Vien Rong Hoac Khong Ton Tai"
    lines = EmployeeRoster(_sample()).format_listing().splitlines()
    assert lines[0] == "Danh sach nhan vien theo thu tu ten(ho)"
    assert lines[1] == "maNV: NV001, Ho: Nguyen, Ten: An, Phai: Nam"
    assert lines[2] == "maNV: NV002, Ho: Tran, Ten: Binh, Phai: Nu"