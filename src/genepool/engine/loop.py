"""
Generational evolution loop shared by the sequential and parallel drivers.

Each generation goes through four steps:
- evaluate every unit of the active set (memoized),
- rank the evaluated units by ascending fitness,
- stop early if the fittest unit is perfect (fitness == 1.0),
- breed the next active set, except after the last generation.
"""

from __future__ import annotations

import logging

import numpy as np

from genepool.engine.config import PopulationConfigData
from genepool.engine.evaluation import EvaluationBackend
from genepool.engine.hooks import GenerationObserver, GenerationStats, NoOpObserver, RunContext
from genepool.engine.memo import MemoizedUnit
from genepool.engine.selection import breed_generation, rank_units
from genepool.foundation.exceptions import EmptyPopulationError, InvalidFactorError

PERFECT_FITNESS = 1.0


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def run_generations(
    active: list[MemoizedUnit],
    config: PopulationConfigData,
    n_epochs: int,
    evaluator: EvaluationBackend,
    observer: GenerationObserver | None = None,
    n_workers: int | None = None,
) -> tuple[list[MemoizedUnit], bool]:
    """
    Run ``n_epochs`` breeding steps plus a final evaluation pass.

    Parameters
    ----------
    active : list[MemoizedUnit]
        Initial working set. It is consumed.
    config : PopulationConfigData
        Seed, factors and target size.
    n_epochs : int
        Number of generations to breed.
    evaluator : EvaluationBackend
        Backend computing the fitness of each generation.
    observer : GenerationObserver | None
        Lifecycle callbacks; defaults to a no-op.
    n_workers : int | None
        Worker count reported to the observer.

    Returns
    -------
    tuple[list[MemoizedUnit], bool]
        The last working set sorted by ascending fitness (fittest last), and
        whether the run stopped on a perfect unit.
    """
    if isinstance(n_epochs, bool) or int(n_epochs) != n_epochs or n_epochs < 0:
        raise InvalidFactorError("n_epochs", n_epochs, "integers >= 0")
    if not active:
        raise EmptyPopulationError()
    n_epochs = int(n_epochs)
    obs = observer or NoOpObserver()
    rng = np.random.default_rng(config.seed)

    obs.on_start(RunContext(n_epochs=n_epochs, config=config, n_workers=n_workers, initial_size=len(active)))
    _logger().debug(
        "Starting %d epochs on %d units (max_size=%d, breed_factor=%s, survival_factor=%s, seed=%d)",
        n_epochs,
        len(active),
        config.max_size,
        config.breed_factor,
        config.survival_factor,
        config.seed,
    )

    stats: GenerationStats | None = None
    converged = False
    for generation in range(n_epochs + 1):
        # The evaluated set becomes the new active set.
        active = evaluator.evaluate(active)
        rank_units(active)

        stats = GenerationStats.from_ranked(generation, active)
        obs.on_generation(stats)
        _logger().debug(
            "Generation %d: best=%.6g mean=%.6g worst=%.6g",
            generation,
            stats.best,
            stats.mean,
            stats.worst,
        )

        if active[-1].fitness() == PERFECT_FITNESS:
            converged = True
            _logger().info("Perfect unit found at generation %d", generation)
            break

        if generation != n_epochs:
            active = breed_generation(active, rng, config)

    if not converged and stats is not None:
        _logger().info("Finished %d epochs, best fitness %.6g", n_epochs, stats.best)
    obs.on_end(stats, converged)
    return active, converged


__all__ = ["run_generations", "PERFECT_FITNESS"]
