# ratedtables

Small keyed record tables that keep count of how much work each lookup,
insertion or removal took. After every operation the table's `efficiency`
attribute holds that count, so an unordered scan table and a sorted table can
be compared on the same data.

## What is in the package

- `ratedtables.records`
  - `DatValue` — abstract base for values stored in a table; subclasses
    implement `copy()`.
  - `TabRecord(key, data)` — a key/value pair. Records compare (`==`, `<`,
    `>`) by key only; `copy()` returns a copy of the stored data (or `None`).
- `ratedtables.marks`
  - `Marks(marks=None, rng=None)` — five marks. Without `marks`, five random
    marks from 1 to 5 are drawn (from `rng` if given). Any other number of
    marks raises `ValueError`. `str()` gives `" | 1 | 2 | 3 | 4 | 5 |"`.
- `ratedtables.tables`
  - `Table` — the abstract interface: `find`, `insert`, `delete`, `is_empty`,
    `is_full`, `len()`, cursor navigation (`reset`, `go_next`, `is_ended`,
    each returning whether the cursor is past the end) and iteration, which
    walks the cursor and yields `(key, value)` pairs.
  - `ArrayTable(size=25)` — holds at most `size` records. `key_at` and
    `value_at` read the record at a `DataPos` (`FIRST`, `CURRENT`, `LAST`),
    returning `""` / `None` for an empty table. `set_current_pos(pos)` moves
    the cursor, falling back to the start when `pos` is out of range.
  - `ScanTable` — `find` scans from the start (efficiency = records
    compared) and leaves the cursor on the match; `delete` moves the last
    record into the removed one's place; deleting a missing key does nothing.
  - `SortTable(size=25, sort_method=SortMethod.QUICK)` — keeps records
    ordered by key. `insert` and `delete` locate the place by bisection;
    `find_record` bisects for a key (efficiency = halving steps), while the
    inherited `find` still scans. `SortTable.from_scan_table(table)` copies
    another table's records and orders them with `sort()`, using
    `SortMethod.INSERT`, `MERGE` or `QUICK`.
  - Inserting into a full table raises `TableFullError`.
- `ratedtables.testkit`
  - `TableTestKit(table, names, rng=None)` — `fill_benchmark()` inserts every
    name with random `Marks`; `show()` prints each record; `measure()` runs
    100 random searches and then 100 random deletions and returns a
    `Metrics` (max, min and average efficiency, and total time in
    microseconds, for each); `print_metrics()` prints those figures and
    returns them. `measure()` raises `ValueError` when there are no names.

## Example

```python
import random

from ratedtables.marks import Marks
from ratedtables.tables import DataPos, ScanTable, SortTable

rng = random.Random(1)
table = ScanTable(10)
for name in ["Olga", "Ivan", "Anna"]:
    table.insert(name, Marks(rng=rng))

print(len(table))             # 3
print(table.find("Ivan"))     # the Marks stored under "Ivan"
print(table.efficiency)       # 2: two records were compared
print(table.find("Nobody"))   # None

table.delete("Olga")
for key, value in table:
    print(key, value)

ordered = SortTable.from_scan_table(table)
print(ordered.key_at(DataPos.FIRST))   # Anna
```

## Benchmarking a table

```python
import random

from ratedtables.tables import ScanTable
from ratedtables.testkit import TableTestKit

names = [f"name{i:03d}" for i in range(200)]
kit = TableTestKit(ScanTable(200), names, random.Random(0))
kit.fill_benchmark()
kit.show()
kit.print_metrics()
```

## What it does not do

There is no command-line tool: benchmarks are run from Python as above.
Tables live in memory only; nothing is saved to disk.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
directory.