"""
genepool exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All genepool-specific exceptions inherit from GenepoolError for easy catching.

Example:
    try:
        Population(units).set_breed_factor(1.5)
    except GenepoolError as e:
        print(f"Configuration rejected: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class GenepoolError(Exception):
    """
    Base exception for all genepool errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(GenepoolError):
    """Raised when configuration is invalid or incomplete."""

    pass


class InvalidFactorError(ConfigurationError):
    """Raised when a ratio or size setting falls outside its allowed range."""

    def __init__(
        self,
        name: str,
        value: Any,
        allowed: str,
    ) -> None:
        message = f"Invalid {name} {value!r}."
        suggestion = f"{name} must be in {allowed}"
        super().__init__(message, suggestion, {"name": name, "value": value, "allowed": allowed})


# =============================================================================
# Runtime Errors
# =============================================================================


class OptimizationError(GenepoolError):
    """Raised when an evolution run fails during execution."""

    pass


class EmptyPopulationError(OptimizationError):
    """Raised when a run or a breeding step starts without any units."""

    def __init__(self, message: str = "Population has no units to evolve.") -> None:
        suggestion = "Construct the population with at least one unit and keep max_size >= 1"
        super().__init__(message, suggestion)


class EvaluationError(OptimizationError):
    """Raised when a unit's fitness evaluation fails on a worker thread."""

    def __init__(self, message: str, unit: Any = None) -> None:
        suggestion = "Check your unit's fitness() method for errors"
        super().__init__(message, suggestion, {"unit": unit})


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "GenepoolError",
    # Configuration
    "ConfigurationError",
    "InvalidFactorError",
    # Runtime
    "OptimizationError",
    "EmptyPopulationError",
    "EvaluationError",
]
