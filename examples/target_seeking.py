"""
One-dimensional target search.

Units hold a single value ``x`` and breed by averaging with their mate plus a
small jitter. Fitness is the negated distance to the target, so it never
reaches 1.0 and every run uses all of its epochs.
"""

from __future__ import annotations

import numpy as np

from genepool import HistoryObserver, Population, configure_genepool_logging

_JITTER = np.random.default_rng(7)


class TargetUnit:
    def __init__(self, x: float, target: float) -> None:
        self.x = x
        self.target = target

    def fitness(self) -> float:
        return -abs(self.target - self.x)

    def breed_with(self, other: "TargetUnit") -> "TargetUnit":
        x = (self.x + other.x) / 2.0 + _JITTER.uniform(-0.1, 0.1)
        return TargetUnit(x, self.target)


def main():
    configure_genepool_logging()
    target = 10.0
    seeds = [0.3, 0.1, 0.7, 2.3, 4.3]

    history = HistoryObserver()
    best = (
        Population([TargetUnit(x, target) for x in seeds])
        .set_size(100)
        .set_breed_factor(0.25)
        .set_observer(history)
        .epochs(100)
        .finish()[0]
    )
    print(f"Sequential: best x = {best.x:.4f} after {len(history.history)} generations")

    best = (
        Population([TargetUnit(x, target) for x in seeds])
        .set_size(200)
        .set_breed_factor(0.25)
        .epochs_parallel(100, 4)
        .finish()[0]
    )
    print(f"Parallel (4 workers): best x = {best.x:.4f}")


if __name__ == "__main__":
    main()
