from __future__ import annotations

import dataclasses
import json

import pytest

from genepool.engine.config import PopulationConfig, PopulationConfigData
from genepool.foundation.exceptions import ConfigurationError, InvalidFactorError


def test_defaults():
    cfg = PopulationConfigData()
    assert (cfg.seed, cfg.breed_factor, cfg.survival_factor, cfg.max_size) == (1, 0.5, 0.5, 100)
    assert PopulationConfig.default() == cfg


def test_fluent_builder_yields_frozen_data():
    cfg = PopulationConfig().seed(10).breed_factor(0.3).survival_factor(1.0).max_size(200).fixed()

    assert cfg == PopulationConfigData(seed=10, breed_factor=0.3, survival_factor=1.0, max_size=200)
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.seed = 3


def test_from_dict_and_json_roundtrip():
    cfg = PopulationConfig.from_dict({"max_size": 50, "breed_factor": 0.25})
    assert cfg.max_size == 50
    assert cfg.breed_factor == 0.25
    assert cfg.survival_factor == 0.5

    assert json.loads(cfg.to_json()) == cfg.to_dict()
    assert PopulationConfig.from_dict(cfg.to_dict()) == cfg


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ConfigurationError, match="pop_size"):
        PopulationConfig.from_dict({"pop_size": 10})


@pytest.mark.parametrize("value", [0.0, -0.1, 1.01, float("nan")])
def test_breed_factor_range(value):
    with pytest.raises(InvalidFactorError):
        PopulationConfig().breed_factor(value)


@pytest.mark.parametrize("value", [-0.01, 1.5, float("nan")])
def test_survival_factor_range(value):
    with pytest.raises(InvalidFactorError):
        PopulationConfig().survival_factor(value)


@pytest.mark.parametrize("value", [0.0, 1.0])
def test_survival_factor_bounds_are_inclusive(value):
    assert PopulationConfig().survival_factor(value).fixed().survival_factor == value


@pytest.mark.parametrize("value", [0, -5, 2.5, True])
def test_max_size_must_be_positive_integer(value):
    with pytest.raises(InvalidFactorError):
        PopulationConfig().max_size(value)


def test_seed_must_be_non_negative():
    with pytest.raises(InvalidFactorError):
        PopulationConfig().seed(-1)


@pytest.mark.parametrize(
    "breed_factor, size, expected",
    [(0.5, 10, 5), (0.25, 5, 1), (0.25, 2, 1), (1.0, 7, 7), (0.3, 9, 2)],
)
def test_breeder_count(breed_factor, size, expected):
    assert PopulationConfigData(breed_factor=breed_factor).breeder_count(size) == expected


@pytest.mark.parametrize(
    "survival_factor, max_size, n_breeders, expected",
    [(0.5, 100, 5, 3), (0.0, 100, 5, 0), (1.0, 100, 5, 5), (1.0, 2, 5, 2), (0.1, 100, 1, 1)],
)
def test_survivor_count(survival_factor, max_size, n_breeders, expected):
    cfg = PopulationConfigData(survival_factor=survival_factor, max_size=max_size)
    assert cfg.survivor_count(n_breeders) == expected
