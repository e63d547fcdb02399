"""Named timing sections with averaged reports."""

from __future__ import annotations

import time
from collections import defaultdict
from typing import Callable, Optional

_FRAME_BUDGET = 1.0 / 60.0


class PerfRegistry:
    """Accumulates total time and hit counts per timer name."""

    def __init__(self):
        self._totals: dict[str, float] = defaultdict(float)
        self._hits: dict[str, int] = defaultdict(int)

    def record(self, name: str, seconds: float) -> None:
        self._totals[name] += seconds
        self._hits[name] += 1

    def averages(self) -> list[tuple[str, float]]:
        """(name, average seconds) pairs, slowest first."""
        pairs = [(name, total / self._hits[name]) for name, total in self._totals.items()]
        return sorted(pairs, key=lambda pair: pair[1], reverse=True)

    def report(self) -> str:
        """A table of averages and their share of a 60 FPS frame; empty if none."""
        results = self.averages()
        if not results:
            return ""
        lines = ["Average Performance Results: "]
        for name, avg in results:
            if avg < 0.001:
                timing = f"{avg * 1_000_000.0:10.3f} micro"
            else:
                timing = f"{avg * 1_000.0:10.3f} ms   "
            budget = 100.0 * (avg / _FRAME_BUDGET)
            lines.append(f" {name:>40}{timing}   ({budget:.3f}%)")
        return "\n".join(lines) + "\n\n"


default_registry = PerfRegistry()


class PerfTimer:
    """Context manager that records the time spent inside it."""

    def __init__(
        self,
        name: str,
        registry: Optional[PerfRegistry] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.name = name
        self.registry = registry if registry is not None else default_registry
        self.clock = clock if clock is not None else time.perf_counter
        self._start = 0.0

    def __enter__(self) -> PerfTimer:
        self._start = self.clock()
        return self

    def __exit__(self, *args) -> None:
        self.registry.record(self.name, self.clock() - self._start)