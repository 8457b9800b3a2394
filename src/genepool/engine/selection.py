"""
Truncation selection and breeding for one generation.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key

import numpy as np

from genepool.engine.config import PopulationConfigData
from genepool.engine.memo import MemoizedUnit
from genepool.foundation.exceptions import EmptyPopulationError


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def _compare_fitness(a: MemoizedUnit, b: MemoizedUnit) -> int:
    fa, fb = a.fitness(), b.fitness()
    if fa < fb:
        return -1
    if fa > fb:
        return 1
    # Equal, or not orderable (NaN).
    return 0


def rank_units(units: list[MemoizedUnit]) -> None:
    """Stable in-place sort by ascending fitness, fittest last."""
    units.sort(key=cmp_to_key(_compare_fitness))


def breed_generation(
    units: list[MemoizedUnit],
    rng: np.random.Generator,
    config: PopulationConfigData,
) -> list[MemoizedUnit]:
    """
    Produce the next generation from a ranked working set.

    Parameters
    ----------
    units : list[MemoizedUnit]
        Working set sorted by ascending fitness. It is consumed.
    rng : np.random.Generator
        Generator used to pick mates; advanced in place.
    config : PopulationConfigData
        Breed/survival factors and the target size.

    Returns
    -------
    list[MemoizedUnit]
        Exactly ``config.max_size`` units: the offspring followed by the
        surviving breeders.
    """
    if not units:
        raise EmptyPopulationError("Cannot breed an empty generation.")

    breed_up_to = config.breeder_count(len(units))
    breeders: list[MemoizedUnit] = []
    # Fittest first; whatever is left over is culled.
    while units and len(breeders) < breed_up_to:
        breeders.append(units.pop())
    units.clear()

    n_breeders = len(breeders)
    surviving_parents = config.survivor_count(n_breeders)
    n_offspring = config.max_size - surviving_parents

    mates = rng.integers(0, n_breeders, size=n_offspring)
    next_generation = [breeders[i % n_breeders].breed_with(breeders[int(mate)]) for i, mate in enumerate(mates)]
    next_generation.extend(breeders[:surviving_parents])

    _logger().debug(
        "Bred %d offspring from %d breeders, %d survivors carried over",
        n_offspring,
        n_breeders,
        surviving_parents,
    )
    return next_generation


__all__ = ["breed_generation", "rank_units"]
