"""A set of five marks used as a benchmark value."""

from __future__ import annotations

import random
from collections.abc import Iterable

from .records import DatValue

MARK_COUNT = 5
LOWEST_MARK = 1
HIGHEST_MARK = 5


class Marks(DatValue):
    """Five marks; random ones from 1 to 5 unless given explicitly."""

    def __init__(
        self,
        marks: Iterable[int] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if marks is None:
            source = rng if rng is not None else random
            marks = [source.randint(LOWEST_MARK, HIGHEST_MARK) for _ in range(MARK_COUNT)]
        values = tuple(marks)
        if len(values) != MARK_COUNT:
            raise ValueError(f"expected {MARK_COUNT} marks, got {len(values)}")
        self.marks = values

    def copy(self) -> Marks:
        """Return a copy holding the same marks."""
        return Marks(self.marks)

    def __str__(self) -> str:
        return " | " + " | ".join(str(mark) for mark in self.marks) + " |"

    def __repr__(self) -> str:
        return f"Marks({list(self.marks)!r})"