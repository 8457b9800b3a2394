"""
genepool: a generic genetic algorithm.

Start from an initial group of units, the original parents of every later
generation, and let selection and breeding push them toward a fitness of 1.0.
"""

from .engine import (
    GenerationObserver,
    GenerationStats,
    HistoryObserver,
    MemoizedUnit,
    NoOpObserver,
    PopulationConfig,
    PopulationConfigData,
    RunContext,
)
from .foundation import (
    ConfigurationError,
    EmptyPopulationError,
    EvaluationError,
    GenepoolError,
    InvalidFactorError,
    OptimizationError,
    Unit,
    configure_genepool_logging,
)
from .population import Population

__version__ = "0.1.0"

__all__ = [
    "Population",
    "PopulationConfig",
    "PopulationConfigData",
    "Unit",
    "MemoizedUnit",
    "GenerationObserver",
    "GenerationStats",
    "HistoryObserver",
    "NoOpObserver",
    "RunContext",
    "configure_genepool_logging",
    "GenepoolError",
    "ConfigurationError",
    "InvalidFactorError",
    "OptimizationError",
    "EmptyPopulationError",
    "EvaluationError",
]
