import random

import pytest

from ratedtables.tables import ScanTable, SortTable
from ratedtables.testkit import Metrics, TableTestKit

NAMES = [f"name{number:03d}" for number in range(200)]


def _kit(seed=1, table=None):
    table = table if table is not None else ScanTable(200)
    kit = TableTestKit(table, NAMES, random.Random(seed))
    kit.fill_benchmark()
    return kit, table


def test_fill_inserts_every_name():
    _, table = _kit()
    assert len(table) == len(NAMES)
    assert table.is_full()
    assert {key for key, _ in table} == set(NAMES)


def test_show_prints_each_record(capsys):
    kit, table = _kit()
    kit.show()
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(NAMES)
    assert lines[0].startswith("name000  | ")
    assert all(line.endswith(" |") for line in lines)


def test_measure_metrics_are_consistent():
    kit, table = _kit()
    metrics = kit.measure()
    assert 1 <= metrics.min_find_efficiency <= metrics.average_find_efficiency
    assert metrics.average_find_efficiency <= metrics.max_find_efficiency <= len(NAMES)
    assert metrics.min_delete_efficiency <= metrics.average_delete_efficiency
    assert metrics.average_delete_efficiency <= metrics.max_delete_efficiency
    assert metrics.find_time >= 0 and metrics.delete_time >= 0
    assert len(table) < len(NAMES)


def test_measure_is_repeatable_with_seed():
    first = _kit(seed=5)[0].measure()
    second = _kit(seed=5)[0].measure()
    assert first.max_find_efficiency == second.max_find_efficiency
    assert first.average_delete_efficiency == second.average_delete_efficiency


def test_measure_on_sort_table_uses_scan_find():
    kit, table = _kit(table=SortTable(200))
    metrics = kit.measure()
    assert metrics.max_find_efficiency <= len(NAMES)
    assert [key for key, _ in table] == sorted(key for key, _ in table)


def test_print_metrics_output(capsys):
    kit, _ = _kit()
    metrics = kit.print_metrics()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "---------------------"
    assert lines[1] == f"Maximum search efficiency: {metrics.max_find_efficiency}"
    assert lines[6] == f"Average removal efficiency: {metrics.average_delete_efficiency}"
    assert len(lines) == 9


def test_measure_without_names_raises():
    kit = TableTestKit(ScanTable(), [], random.Random(0))
    with pytest.raises(ValueError):
        kit.measure()


def test_metrics_defaults_are_zero():
    metrics = Metrics()
    assert (metrics.max_find_efficiency, metrics.delete_time) == (0, 0.0)