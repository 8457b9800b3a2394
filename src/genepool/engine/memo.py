from __future__ import annotations

from typing import Any

from genepool.foundation.unit import Unit


class MemoizedUnit:
    """
    Wraps a unit so its fitness is evaluated lazily and at most once.

    The cached value is never invalidated; units are expected to keep the same
    fitness for their whole lifetime.
    """

    __slots__ = ("unit", "cached_fitness")

    def __init__(self, unit: Unit) -> None:
        self.unit = unit
        self.cached_fitness: float | None = None

    def fitness(self) -> float:
        if self.cached_fitness is None:
            self.cached_fitness = float(self.unit.fitness())
        return self.cached_fitness

    @property
    def evaluated(self) -> bool:
        return self.cached_fitness is not None

    def breed_with(self, other: "MemoizedUnit") -> "MemoizedUnit":
        return MemoizedUnit(self.unit.breed_with(other.unit))

    def __repr__(self) -> str:
        return f"MemoizedUnit({self.unit!r}, cached_fitness={self.cached_fitness!r})"


def wrap_units(units: list[Any]) -> list[MemoizedUnit]:
    return [MemoizedUnit(unit) for unit in units]


__all__ = ["MemoizedUnit", "wrap_units"]
