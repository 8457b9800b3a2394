"""
Foundation layer: unit contract, exceptions and logging setup.
"""

from __future__ import annotations

from .exceptions import (
    ConfigurationError,
    EmptyPopulationError,
    EvaluationError,
    GenepoolError,
    InvalidFactorError,
    OptimizationError,
)
from .logging import GENEPOOL_LOGGER, configure_genepool_logging
from .unit import Unit

__all__ = [
    "Unit",
    "GENEPOOL_LOGGER",
    "configure_genepool_logging",
    "GenepoolError",
    "ConfigurationError",
    "InvalidFactorError",
    "OptimizationError",
    "EmptyPopulationError",
    "EvaluationError",
]
