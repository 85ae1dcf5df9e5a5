"""Tables of records: an unordered scanned table and a sorted table.

Every search, insertion or deletion records in ``efficiency`` how much work
the operation took, so implementations can be compared.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from enum import Enum, auto

from .records import DatValue, TabRecord

DEFAULT_SIZE = 25


class TableFullError(Exception):
    """Raised when a record is inserted into a full table."""


class DataPos(Enum):
    """Which record of an array table to read."""

    FIRST = auto()
    CURRENT = auto()
    LAST = auto()


class SortMethod(Enum):
    """Algorithm a sorted table uses to order its records."""

    INSERT = auto()
    MERGE = auto()
    QUICK = auto()


class Table(ABC):
    """A keyed table with a cursor for navigation."""

    def __init__(self) -> None:
        self.efficiency = 0

    def is_empty(self) -> bool:
        return len(self) == 0

    @abstractmethod
    def is_full(self) -> bool:
        """Return True when no more records fit."""

    @abstractmethod
    def find(self, key: str) -> DatValue | None:
        """Return the value stored under ``key``, or None."""

    @abstractmethod
    def insert(self, key: str, value: DatValue | None) -> None:
        """Store ``value`` under ``key``."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the record stored under ``key`` if there is one."""

    @abstractmethod
    def reset(self) -> bool:
        """Move the cursor to the start; return True if the table is ended."""

    @abstractmethod
    def is_ended(self) -> bool:
        """Return True when the cursor is past the last record."""

    @abstractmethod
    def go_next(self) -> bool:
        """Advance the cursor; return True if the table is ended."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of records."""

    @abstractmethod
    def _current(self) -> tuple[str, DatValue | None]:
        """Return the key and value under the cursor."""

    def __iter__(self) -> Iterator[tuple[str, DatValue | None]]:
        """Walk the table with its cursor, yielding (key, value) pairs."""
        if self.reset():
            return
        while True:
            yield self._current()
            if self.go_next():
                return


class ArrayTable(Table):
    """A table holding at most ``size`` records in a sequence."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        super().__init__()
        if size < 0:
            raise ValueError("table size must not be negative")
        self._size = size
        self._records: list[TabRecord] = []
        self._cur_pos = 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def current_pos(self) -> int:
        return self._cur_pos

    def __len__(self) -> int:
        return len(self._records)

    def is_full(self) -> bool:
        return len(self._records) >= self._size

    def _record_at(self, position: DataPos) -> TabRecord:
        if position is DataPos.FIRST:
            return self._records[0]
        if position is DataPos.LAST:
            return self._records[-1]
        return self._records[self._cur_pos]

    def key_at(self, position: DataPos = DataPos.CURRENT) -> str:
        """Return the key at ``position``, or "" for an empty table."""
        if self.is_empty():
            return ""
        return self._record_at(position).key

    def value_at(self, position: DataPos = DataPos.CURRENT) -> DatValue | None:
        """Return the value at ``position``, or None for an empty table."""
        if self.is_empty():
            return None
        return self._record_at(position).data

    def _current(self) -> tuple[str, DatValue | None]:
        record = self._records[self._cur_pos]
        return record.key, record.data

    def reset(self) -> bool:
        self._cur_pos = 0
        return self.is_ended()

    def is_ended(self) -> bool:
        return self._cur_pos >= len(self._records)

    def go_next(self) -> bool:
        if not self.is_ended():
            self._cur_pos += 1
        return self.is_ended()

    def set_current_pos(self, pos: int) -> bool:
        """Move the cursor to ``pos``, or to the start if it is out of range."""
        self._cur_pos = pos if 0 <= pos < len(self._records) else 0
        return self.is_ended()


class ScanTable(ArrayTable):
    """An unordered table searched by scanning from the start."""

    def _locate(self, key: str) -> int | None:
        self.efficiency = 0
        if self.reset():
            return None
        while True:
            self.efficiency += 1
            if self._records[self._cur_pos].key == key:
                return self._cur_pos
            if self.go_next():
                return None

    def find(self, key: str) -> DatValue | None:
        """Scan for ``key``; the cursor is left on the record found."""
        index = self._locate(key)
        return None if index is None else self._records[index].data

    def insert(self, key: str, value: DatValue | None) -> None:
        if self.is_full():
            raise TableFullError("table is full")
        self._records.append(TabRecord(key, value))

    def delete(self, key: str) -> None:
        """Remove ``key``, moving the last record into its place."""
        index = self._locate(key)
        if index is None:
            return
        last = self._records.pop()
        if index < len(self._records):
            self._records[index] = last


class SortTable(ScanTable):
    """A table kept ordered by key and searched by bisection."""

    def __init__(
        self, size: int = DEFAULT_SIZE, sort_method: SortMethod = SortMethod.QUICK
    ) -> None:
        super().__init__(size)
        self.sort_method = sort_method

    @classmethod
    def from_scan_table(
        cls, table: ArrayTable, sort_method: SortMethod = SortMethod.QUICK
    ) -> SortTable:
        """Build a sorted table from copies of another table's records."""
        result = cls(table.size, sort_method)
        result._records = [TabRecord(record.key, record.copy()) for record in table._records]
        result.sort()
        result._cur_pos = 0
        return result

    def sort(self) -> None:
        """Order the records by key with the table's sort method."""
        self.efficiency = 0
        sorters = {
            SortMethod.INSERT: self._insert_sort,
            SortMethod.MERGE: self._merge_sort,
            SortMethod.QUICK: self._quick_sort,
        }
        self._records = sorters[self.sort_method](self._records)

    def _insert_sort(self, records: list[TabRecord]) -> list[TabRecord]:
        result = list(records)
        self.efficiency = len(result)
        for i in range(1, len(result)):
            item = result[i]
            j = i - 1
            while j >= 0 and result[j].key > item.key:
                result[j + 1] = result[j]
                self.efficiency += 1
                j -= 1
            result[j + 1] = item
        return result

    def _merge_sort(self, records: list[TabRecord]) -> list[TabRecord]:
        if len(records) <= 1:
            return list(records)
        middle = len(records) // 2
        left = self._merge_sort(records[:middle])
        right = self._merge_sort(records[middle:])
        merged: list[TabRecord] = []
        i = j = 0
        while i < len(left) and j < len(right):
            self.efficiency += 1
            if right[j].key < left[i].key:
                merged.append(right[j])
                j += 1
            else:
                merged.append(left[i])
                i += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged

    def _quick_sort(self, records: list[TabRecord]) -> list[TabRecord]:
        if len(records) <= 1:
            return list(records)
        pivot = records[len(records) // 2].key
        less: list[TabRecord] = []
        equal: list[TabRecord] = []
        greater: list[TabRecord] = []
        for record in records:
            self.efficiency += 1
            if record.key < pivot:
                less.append(record)
            elif record.key > pivot:
                greater.append(record)
            else:
                equal.append(record)
        return self._quick_sort(less) + equal + self._quick_sort(greater)

    def _lower_bound(self, key: str) -> int:
        self.efficiency = 0
        low, high = 0, len(self._records)
        while low < high:
            self.efficiency += 1
            middle = (low + high) // 2
            if self._records[middle].key < key:
                low = middle + 1
            else:
                high = middle
        self._cur_pos = low
        return low

    def _holds(self, index: int, key: str) -> bool:
        return index < len(self._records) and self._records[index].key == key

    def find_record(self, key: str) -> DatValue | None:
        """Bisect for ``key``; the cursor is left where it is or would go."""
        index = self._lower_bound(key)
        return self._records[index].data if self._holds(index, key) else None

    def insert(self, key: str, value: DatValue | None) -> None:
        if self.is_full():
            raise TableFullError("table is full")
        index = self._lower_bound(key)
        self._records.insert(index, TabRecord(key, value))
        self._cur_pos = 0

    def delete(self, key: str) -> None:
        index = self._lower_bound(key)
        if self._holds(index, key):
            del self._records[index]
            self._cur_pos = 0