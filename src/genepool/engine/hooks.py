"""
Generation observer hooks and per-generation statistics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import numpy as np

from genepool.engine.memo import MemoizedUnit


@dataclass(frozen=True)
class RunContext:
    """
    Static context of an evolution run.
    Passed to on_start events.
    """

    n_epochs: int
    config: Any  # PopulationConfigData
    n_workers: int | None = None
    initial_size: int = 0


@dataclass(frozen=True)
class GenerationStats:
    """Fitness summary of one ranked generation."""

    generation: int
    size: int
    best: float
    mean: float
    worst: float

    @classmethod
    def from_ranked(cls, generation: int, units: list[MemoizedUnit]) -> "GenerationStats":
        """Summarize a working set sorted by ascending fitness."""
        fitness = np.fromiter((u.fitness() for u in units), dtype=float, count=len(units))
        return cls(
            generation=generation,
            size=int(fitness.size),
            best=float(fitness[-1]),
            mean=float(np.mean(fitness)),
            worst=float(fitness[0]),
        )


@runtime_checkable
class GenerationObserver(Protocol):
    """
    Observer interface for the lifecycle of an evolution run.
    All callbacks run on the driving thread.
    """

    def on_start(self, ctx: RunContext) -> None:
        """Called once before the first generation is evaluated."""
        ...

    def on_generation(self, stats: GenerationStats) -> None:
        """Called after every generation has been evaluated and ranked."""
        ...

    def on_end(self, stats: GenerationStats | None, converged: bool) -> None:
        """Called once at the end of the run with the last generation's stats."""
        ...


class NoOpObserver:
    """Default no-op implementation."""

    def on_start(self, ctx: RunContext) -> None:
        return None

    def on_generation(self, stats: GenerationStats) -> None:
        return None

    def on_end(self, stats: GenerationStats | None, converged: bool) -> None:
        return None


class HistoryObserver(NoOpObserver):
    """Keeps the stats of every generation, e.g. to inspect convergence."""

    def __init__(self) -> None:
        self.history: list[GenerationStats] = []
        self.converged = False

    def on_start(self, ctx: RunContext) -> None:
        self.history = []
        self.converged = False

    def on_generation(self, stats: GenerationStats) -> None:
        self.history.append(stats)

    def on_end(self, stats: GenerationStats | None, converged: bool) -> None:
        self.converged = converged

    def best_curve(self) -> np.ndarray:
        return np.array([s.best for s in self.history], dtype=float)


__all__ = ["RunContext", "GenerationStats", "GenerationObserver", "NoOpObserver", "HistoryObserver"]
