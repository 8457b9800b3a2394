"""Unit types shared across the test suite."""

from __future__ import annotations

import functools
import threading

import numpy as np
import pytest


class MockUnit:
    """Fixed fitness; every offspring is perfect."""

    def __init__(self, fitness: float) -> None:
        self.value = fitness

    def fitness(self) -> float:
        return self.value

    def breed_with(self, other: "MockUnit") -> "MockUnit":
        return MockUnit(1.0)


class FloatyUnit:
    """Deterministic breeding, used for seeding checks."""

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def fitness(self) -> float:
        return (self.x + self.y) / 2.0

    def breed_with(self, other: "FloatyUnit") -> "FloatyUnit":
        return FloatyUnit(self.x * 1.01, other.y * 1.01)


class TendUnit:
    """Drifts toward ``towards`` by averaging with its mate plus jitter."""

    def __init__(self, x: float, towards: float, rng: np.random.Generator) -> None:
        self.x = x
        self.towards = towards
        self.rng = rng

    def fitness(self) -> float:
        return -abs(self.towards - self.x)

    def breed_with(self, other: "TendUnit") -> "TendUnit":
        return TendUnit((self.x + other.x) / 2.0 + self.rng.uniform(-0.1, 0.1), self.towards, self.rng)


class CountingUnit:
    """Counts fitness and breeding calls; remembers parents and evaluating threads."""

    def __init__(self, value: float, name: str = "", parents: tuple[str, str] | None = None) -> None:
        self.value = value
        self.name = name
        self.parents = parents
        self.fitness_calls = 0
        self.breed_calls = 0
        self.threads: list[str] = []

    def fitness(self) -> float:
        self.fitness_calls += 1
        self.threads.append(threading.current_thread().name)
        return self.value

    def breed_with(self, other: "CountingUnit") -> "CountingUnit":
        self.breed_calls += 1
        return CountingUnit(
            (self.value + other.value) / 2.0,
            name=f"{self.name}x{other.name}",
            parents=(self.name, other.name),
        )


class FailingUnit(CountingUnit):
    """Raises from fitness()."""

    def fitness(self) -> float:
        self.fitness_calls += 1
        raise ValueError(f"cannot score {self.name}")


@pytest.fixture
def mock_unit():
    return MockUnit


@pytest.fixture
def floaty_unit():
    return FloatyUnit


@pytest.fixture
def tend_unit():
    # Offspring share their parent's generator; breeding runs on the driving thread only.
    return functools.partial(TendUnit, rng=np.random.default_rng(12345))


@pytest.fixture
def counting_unit():
    return CountingUnit


@pytest.fixture
def failing_unit():
    return FailingUnit


@pytest.fixture
def ranked_counting_units():
    """Five evaluated counting units wrapped and sorted ascending (a..e)."""
    from genepool.engine.memo import MemoizedUnit

    units = [MemoizedUnit(CountingUnit(v, name=n)) for v, n in zip([0.1, 0.2, 0.3, 0.4, 0.5], "abcde")]
    for u in units:
        u.fitness()
    return units
