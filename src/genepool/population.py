"""
Population container and driver entry points.

Example:
    best = (
        Population(units)
        .set_size(1000)
        .set_breed_factor(0.3)
        .set_survival_factor(1.0)
        .epochs(5000)
        .finish()[0]
    )
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Iterable

from genepool.engine.config import (
    PopulationConfigData,
    validate_breed_factor,
    validate_max_size,
    validate_seed,
    validate_survival_factor,
)
from genepool.engine.evaluation import EvaluationBackend, SerialEvaluator, ThreadedEvaluator
from genepool.engine.hooks import GenerationObserver, NoOpObserver
from genepool.engine.loop import run_generations
from genepool.engine.memo import wrap_units


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class Population:
    """
    A collection of units evolved generation by generation.

    Each unit is a combination of variables producing an overall fitness.
    Units mate with other units to produce mutated offspring combining traits
    of both parents. The population iterates new generations by mating fit
    units and killing unfit ones.
    """

    def __init__(self, units: Iterable[Any], config: PopulationConfigData | None = None) -> None:
        self._units: list[Any] = list(units)
        self._config = config or PopulationConfigData()
        self._observer: GenerationObserver = NoOpObserver()
        self._converged = False

    @property
    def config(self) -> PopulationConfigData:
        return self._config

    @property
    def converged(self) -> bool:
        """Whether the last run stopped on a unit of perfect fitness."""
        return self._converged

    def __len__(self) -> int:
        return len(self._units)

    # ------------------------------------------------------------------
    # Configuration

    def set_rand_seed(self, seed: int) -> "Population":
        self._config = dataclasses.replace(self._config, seed=validate_seed(seed))
        return self

    def set_size(self, size: int) -> "Population":
        """
        Set the number of units kept after every epoch. Units beyond this
        size are dropped right away.
        """
        size = validate_max_size(size)
        if len(self._units) > size:
            _logger().debug("Dropping %d units to fit max_size=%d", len(self._units) - size, size)
            del self._units[size:]
        self._config = dataclasses.replace(self._config, max_size=size)
        return self

    def set_breed_factor(self, breed_factor: float) -> "Population":
        """
        Set the fraction (0 < b <= 1) of the population that breeds each
        epoch. Fitter units are preferred, so a high value lets poorly
        performing units breed too, slowing the run down but helping it
        escape local peaks.
        """
        self._config = dataclasses.replace(self._config, breed_factor=validate_breed_factor(breed_factor))
        return self

    def set_survival_factor(self, survival_factor: float) -> "Population":
        """
        Set the fraction (0 <= s <= 1) of the breeders that survive each
        epoch unchanged. Fitter breeders are preferred.

        The value is relative to the breeders: with a breed factor of 0.5
        and a survival factor of 0.9, 0.5 * 0.9 * 100 = 45% of the units
        survive.
        """
        self._config = dataclasses.replace(
            self._config, survival_factor=validate_survival_factor(survival_factor)
        )
        return self

    def set_observer(self, observer: GenerationObserver | None) -> "Population":
        self._observer = observer or NoOpObserver()
        return self

    # ------------------------------------------------------------------
    # Drivers

    def epochs(self, n_epochs: int) -> "Population":
        """Run ``n_epochs`` generations, evaluating fitness on this thread."""
        return self._run(n_epochs, SerialEvaluator(), None)

    def epochs_parallel(self, n_epochs: int, n_workers: int) -> "Population":
        """
        Run ``n_epochs`` generations with fitness evaluated on ``n_workers``
        threads. Useful when the fitness calculation is expensive and releases
        the GIL (I/O, native code).
        """
        return self._run(n_epochs, ThreadedEvaluator(n_workers), n_workers)

    def _run(self, n_epochs: int, evaluator: EvaluationBackend, n_workers: int | None) -> "Population":
        # Storage is only replaced once the run succeeds.
        active = wrap_units(self._units)
        try:
            ranked, converged = run_generations(
                active,
                self._config,
                n_epochs,
                evaluator,
                observer=self._observer,
                n_workers=n_workers,
            )
        finally:
            evaluator.close()
        # Strongest candidate first.
        self._units = [memo.unit for memo in reversed(ranked)]
        self._converged = converged
        return self

    # ------------------------------------------------------------------
    # Results

    def finish(self) -> list[Any]:
        """
        Return every unit, strongest candidate first, and empty the
        population. The list can seed a new population.
        """
        units, self._units = self._units, []
        return units


__all__ = ["Population"]
