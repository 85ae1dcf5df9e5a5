"""Values stored in tables and the key/value records that hold them."""

from __future__ import annotations

from abc import ABC, abstractmethod


class DatValue(ABC):
    """A value that can be stored in a table and copied."""

    @abstractmethod
    def copy(self) -> DatValue:
        """Return an independent copy of this value."""


class TabRecord(DatValue):
    """A record pairing a string key with a stored value.

    Records compare by key only.
    """

    def __init__(self, key: str = "", data: DatValue | None = None) -> None:
        self.key = key
        self.data = data

    def copy(self) -> DatValue | None:
        """Return a copy of the stored data, or None when there is none."""
        return None if self.data is None else self.data.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TabRecord):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: TabRecord) -> bool:
        if not isinstance(other, TabRecord):
            return NotImplemented
        return self.key < other.key

    def __gt__(self, other: TabRecord) -> bool:
        if not isinstance(other, TabRecord):
            return NotImplemented
        return self.key > other.key

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self.key} : {self.data}"

    def __repr__(self) -> str:
        return f"TabRecord({self.key!r}, {self.data!r})"