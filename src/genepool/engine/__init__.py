"""
Evolution engine: memoization, selection, evaluation backends and the
generational loop.
"""

from __future__ import annotations

from .barrier import GenerationBarrier
from .config import PopulationConfig, PopulationConfigData
from .evaluation import EvaluationBackend, SerialEvaluator, ThreadedEvaluator, resolve_evaluator
from .hooks import GenerationObserver, GenerationStats, HistoryObserver, NoOpObserver, RunContext
from .loop import PERFECT_FITNESS, run_generations
from .memo import MemoizedUnit, wrap_units
from .selection import breed_generation, rank_units

__all__ = [
    "GenerationBarrier",
    "PopulationConfig",
    "PopulationConfigData",
    "EvaluationBackend",
    "SerialEvaluator",
    "ThreadedEvaluator",
    "resolve_evaluator",
    "GenerationObserver",
    "GenerationStats",
    "HistoryObserver",
    "NoOpObserver",
    "RunContext",
    "PERFECT_FITNESS",
    "run_generations",
    "MemoizedUnit",
    "wrap_units",
    "breed_generation",
    "rank_units",
]
