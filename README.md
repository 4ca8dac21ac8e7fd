# quanlyvattu

A small warehouse bookkeeping library, with no dependencies beyond the
standard library. It keeps three kinds of records, all defined in
`quanlyvattu.models`:

- **Materials** (`quanlyvattu.materials.MaterialTree`): a self-balancing
  search tree of `Material` records (`code`, `name`, `unit`, `stock`),
  keyed by name. Inserting a name that is already present is ignored, and
  `insert` returns `False`. `remove(name)` raises `KeyError` for an unknown
  name. Look-ups are `find_by_name`, `find_by_code`, `contains_name` and
  `contains_code`. The tree can be walked with `preorder`, `inorder` and
  `postorder`, and iterating over it yields the materials in name order.
  `format_material_code("VT", 1)` gives `VT-0000001`.
- **Employees** (`quanlyvattu.employees.EmployeeRoster`): up to 500
  `Employee` records, kept ordered by first name and then last name.
  Adding to a full roster raises `RosterFullError`. `find` returns the
  employee or `None`, `index_of` and `index_of_material` raise `ValueError`
  when nothing matches, and `remove` returns the removed employee or `None`.
  `format_employee_code(1)` gives `NV-001`.
- **Invoices** (`quanlyvattu.invoices.InvoiceBook`): `Invoice` records kept
  in ascending date order. A new invoice goes before any already there with
  the same date. Each invoice has a number, a `Date`, an `InvoiceKind`
  (`IMPORT` or `EXPORT`) and a list of `InvoiceLine` items (material code,
  quantity, unit price, VAT). `format_invoice_number(1)` gives
  `HoaDonCongTy-000000001`.

`quanlyvattu.invoice_lines` works on an invoice's list of lines:
`add_line` puts a line at the front and refuses a material already listed,
`find_line` finds a line, `remove_line` removes one and raises `KeyError`
when it is missing, and `format_line` / `format_lines` produce text.
`sort_by_revenue` orders `MaterialRevenue` entries by ascending revenue.

`quanlyvattu.stack.MaterialStack` is a bounded last-in, first-out stack.
By default it holds 500 items. `push` on a full stack raises
`OverflowError`, and `pop` on an empty one raises `IndexError`.

## Stock updates

`apply_invoice(materials, invoice, ask_details)` updates stock for a
confirmed invoice:

- **Imports** add quantities. For a material code that is not in the tree,
  `ask_details(code)` is called, and it must return `(name, unit)`. If
  `ask_details` is `None`, `KeyError` is raised instead.
- **Exports** subtract quantities only if every line can be served.
  Otherwise nothing changes and `InsufficientStockError` is raised. Its
  `shortages` maps each offending code to the current stock, or to `None`
  when the material is not stocked.

`format_invoice(employees, materials, number)` returns a printable report
of an invoice issued by an employee in the roster. It raises `KeyError`
if no employee issued it.

## Installing

```
pip install .
```

Add the `test` extra to get pytest:

```
pip install ".[test]"
```

## Example

```python
from quanlyvattu.models import Date, InvoiceKind, InvoiceLine, Material
from quanlyvattu.materials import MaterialTree, format_material_code
from quanlyvattu.invoices import InvoiceBook, apply_invoice, format_invoice_number

materials = MaterialTree()
materials.insert(Material(format_material_code("VT", 1), "bolt", "box", 10))

book = InvoiceBook()
invoice = book.create(
    format_invoice_number(1),
    Date(day=3, month=5, year=2024),
    InvoiceKind.IMPORT,
    [InvoiceLine("VT-0000001", 5, 2.5, 10.0)],
)
apply_invoice(materials, invoice, ask_details=None)
print(materials.format_listing())
# Ma VT: VT-0000001, Ten vat tu: bolt, Don vi tinh: box, So luong ton: 15
```

## Files

`quanlyvattu.storage` reads and writes UTF-8 text files. Each file holds
one record per line, with fields separated by `|`. Empty lines are skipped
when reading, and each `load_*` function returns how many records it read.

- `save_materials` / `load_materials`: `code|name|unit|stock`, written in
  name order.
- `save_employees` / `load_employees`: `id|last name|first name|nam` or
  `nu`.
- `save_all` / `load_all`: every employee with their invoices and lines.
  Each record starts with a marker character:
  - `#id|last name|first name|gender` starts an employee.
  - `&number|day|month|year|nhap` or `xuat` starts one of their invoices.
  - `!material code|quantity|unit price|VAT` is a line of that invoice.

  `load_all(roster, book, path)` adds the employees to the roster and keeps
  each employee's invoices in date order. It also files a separate copy of
  every invoice in `book`. Invoice lines come back in reverse file order.

## Screens and terminal

`quanlyvattu.layout` draws two table frames onto a `Canvas` of a given
width and height, using box-drawing characters:

- `invoice_listing_layout` for invoices between two dates.
- `annual_revenue_layout` for revenue per month.

`draw_rectangle`, `draw_double_rectangle` and `draw_rectangle_reverse`
draw single boxes. `Canvas.lines()` or `str(canvas)` gives the text.

`quanlyvattu.console` holds terminal helpers that write ANSI escape
sequences:

- `move_cursor` moves the cursor.
- `foreground` and `background` take 4-bit console colours.
- `clear_screen`, `hide_cursor` and `show_cursor` do what their names say.
- `console_size` falls back to 80x25.
- `check_password` asks for a password up to three times by default.

## What the package does not do

There is no interactive warehouse program and no command that starts one.
The library has no menus, no keyboard-driven screens and no loop that
redraws the table layouts. A caller builds the records, calls the
functions above and prints the results.

## Exercises

The `quanlyvattu.exercises` package holds standalone algorithm exercises.
Each one has a command that reads its input from standard input:

| Command                   | What it does                                                         |
|---------------------------|----------------------------------------------------------------------|
| `bounding-lines`          | finds the two lines `y = ax + b` that enclose a point, by bisection  |
| `prime-sort`              | sorts numbers with all primes first, each group ascending            |
| `increasing-subsequences` | counts strictly increasing subsequences of a given length            |
| `order-matching`          | finds the price between 8000 and 10000 that matches the most volume  |
| `combinations`            | lists every k-element subset of 1..n in lexicographic order          |

For example:

```
echo "4 2" | combinations
```

The same functions can be called directly:

- `find_bounding_lines`
- `is_prime`, `primes_first`
- `count_increasing_subsequences`
- `Order`, `sort_buy_orders`, `sort_sell_orders`, `best_match_price`
- `combinations`

## Running the tests

```
pytest
```