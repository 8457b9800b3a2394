"""Population configuration."""

from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass
from typing import Any, Dict

from genepool.foundation.exceptions import ConfigurationError, InvalidFactorError


class _SerializableConfig:
    """Mixin to serialize dataclass configs."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


def validate_breed_factor(value: float) -> float:
    value = float(value)
    if not (0.0 < value <= 1.0):
        raise InvalidFactorError("breed_factor", value, "(0, 1]")
    return value


def validate_survival_factor(value: float) -> float:
    value = float(value)
    if not (0.0 <= value <= 1.0):
        raise InvalidFactorError("survival_factor", value, "[0, 1]")
    return value


def validate_max_size(value: int) -> int:
    if isinstance(value, bool) or int(value) != value or value < 1:
        raise InvalidFactorError("max_size", value, "integers >= 1")
    return int(value)


def validate_seed(value: int) -> int:
    if isinstance(value, bool) or int(value) != value or value < 0:
        raise InvalidFactorError("seed", value, "integers >= 0")
    return int(value)


@dataclass(frozen=True)
class PopulationConfigData(_SerializableConfig):
    seed: int = 1
    breed_factor: float = 0.5
    survival_factor: float = 0.5
    max_size: int = 100

    def breeder_count(self, current_size: int) -> int:
        """Number of units allowed to breed out of ``current_size`` ranked units."""
        return max(1, math.floor(self.breed_factor * current_size))

    def survivor_count(self, n_breeders: int) -> int:
        """Number of breeders carried unchanged into the next generation."""
        return min(self.max_size, math.ceil(n_breeders * self.survival_factor))


class PopulationConfig:
    """
    Declarative configuration holder for a Population.
    Provides a fluent builder that yields an immutable PopulationConfigData.

    Examples:
        # Fluent builder
        cfg = PopulationConfig().max_size(200).breed_factor(0.3).fixed()

        # Quick default configuration
        cfg = PopulationConfig.default()

        # From dictionary
        cfg = PopulationConfig.from_dict({"max_size": 200, "seed": 10})
    """

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    @classmethod
    def default(cls, max_size: int = 100, seed: int = 1) -> PopulationConfigData:
        """
        Create a default configuration: half the population breeds and half
        of the breeders survive each epoch.
        """
        return cls().max_size(max_size).seed(seed).fixed()

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> PopulationConfigData:
        """
        Create configuration from a dictionary with any of the keys
        ``seed``, ``breed_factor``, ``survival_factor`` and ``max_size``.
        """
        unknown = sorted(set(config) - {"seed", "breed_factor", "survival_factor", "max_size"})
        if unknown:
            raise ConfigurationError(
                f"Unknown population configuration keys: {', '.join(unknown)}",
                suggestion="Valid keys are seed, breed_factor, survival_factor and max_size",
            )
        builder = cls()
        if "seed" in config:
            builder.seed(config["seed"])
        if "breed_factor" in config:
            builder.breed_factor(config["breed_factor"])
        if "survival_factor" in config:
            builder.survival_factor(config["survival_factor"])
        if "max_size" in config:
            builder.max_size(config["max_size"])
        return builder.fixed()

    def seed(self, value: int) -> "PopulationConfig":
        self._cfg["seed"] = validate_seed(value)
        return self

    def breed_factor(self, value: float) -> "PopulationConfig":
        """
        Fraction (0 < b <= 1) of the population allowed to breed each epoch.
        Fitter units are preferred, so a high value lets weaker units breed,
        which slows convergence but helps escaping local peaks.
        """
        self._cfg["breed_factor"] = validate_breed_factor(value)
        return self

    def survival_factor(self, value: float) -> "PopulationConfig":
        """
        Fraction (0 <= s <= 1) of the breeders that survive each epoch.

        This is relative to the breeders: with a breed factor of 0.5 and a
        survival factor of 0.9, 0.5 * 0.9 = 45% of the units survive.
        """
        self._cfg["survival_factor"] = validate_survival_factor(value)
        return self

    def max_size(self, value: int) -> "PopulationConfig":
        self._cfg["max_size"] = validate_max_size(value)
        return self

    def fixed(self) -> PopulationConfigData:
        return PopulationConfigData(**self._cfg)


__all__ = [
    "PopulationConfig",
    "PopulationConfigData",
    "validate_breed_factor",
    "validate_survival_factor",
    "validate_max_size",
    "validate_seed",
]
