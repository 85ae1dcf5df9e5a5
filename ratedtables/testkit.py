"""Benchmark a table with random searches and deletions."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .marks import Marks
from .tables import Table

SAMPLES = 100


@dataclass
class Metrics:
    """Efficiency and time (in microseconds) of searches and deletions."""

    max_find_efficiency: int = 0
    min_find_efficiency: int = 0
    average_find_efficiency: float = 0.0
    find_time: float = 0.0
    max_delete_efficiency: int = 0
    min_delete_efficiency: int = 0
    average_delete_efficiency: float = 0.0
    delete_time: float = 0.0


class TableTestKit:
    """Fill a table with names and measure its operations."""

    def __init__(
        self,
        table: Table,
        names: Sequence[str],
        rng: random.Random | None = None,
    ) -> None:
        self._table = table
        self._names = list(names)
        self._rng = rng if rng is not None else random.Random()

    def fill_benchmark(self) -> None:
        """Insert every name with random marks."""
        for name in self._names:
            self._table.insert(name, Marks(rng=self._rng))

    def show(self) -> None:
        """Print every record of the table."""
        for key, value in self._table:
            print(f"{key} {value}")

    def _run(self, operation: Callable[[str], object]) -> tuple[int, int, float, float]:
        efficiencies: list[int] = []
        elapsed = 0.0
        for _ in range(SAMPLES):
            name = self._rng.choice(self._names)
            start = time.perf_counter()
            operation(name)
            elapsed += (time.perf_counter() - start) * 1_000_000
            efficiencies.append(self._table.efficiency)
        return (
            max(efficiencies),
            min(efficiencies),
            sum(efficiencies) / len(efficiencies),
            elapsed,
        )

    def measure(self) -> Metrics:
        """Run random searches, then random deletions, and collect metrics."""
        if not self._names:
            raise ValueError("no names to measure with")
        max_find, min_find, average_find, find_time = self._run(self._table.find)
        max_del, min_del, average_del, delete_time = self._run(self._table.delete)
        return Metrics(
            max_find, min_find, average_find, find_time,
            max_del, min_del, average_del, delete_time,
        )

    def print_metrics(self) -> Metrics:
        """Measure the table, print the results and return them."""
        metrics = self.measure()
        print("---------------------")
        print(f"Maximum search efficiency: {metrics.max_find_efficiency}")
        print(f"Minimum search efficiency: {metrics.min_find_efficiency}")
        print(f"Average search efficiency: {metrics.average_find_efficiency}")
        print(f"Maximum removal efficiency: {metrics.max_delete_efficiency}")
        print(f"Minimum removal efficiency: {metrics.min_delete_efficiency}")
        print(f"Average removal efficiency: {metrics.average_delete_efficiency}")
        print(f"search time: {metrics.find_time}")
        print(f"removal time: {metrics.delete_time}")
        return metrics