"""Tests for the genepool exception hierarchy."""

from __future__ import annotations

import pytest


class TestGenepoolError:
    """Test base GenepoolError class."""

    def test_basic_error(self):
        """GenepoolError should work with just a message."""
        from genepool.foundation.exceptions import GenepoolError

        err = GenepoolError("Something went wrong")
        assert "Something went wrong" in str(err)
        assert err.message == "Something went wrong"
        assert err.suggestion is None
        assert err.details == {}

    def test_error_with_suggestion(self):
        """GenepoolError should include suggestion in message."""
        from genepool.foundation.exceptions import GenepoolError

        err = GenepoolError("Something went wrong", suggestion="Try this instead")
        assert "Suggestion: Try this instead" in str(err)
        assert err.suggestion == "Try this instead"


class TestConfigurationErrors:
    def test_invalid_factor_error(self):
        """InvalidFactorError should name the setting and its range."""
        from genepool.foundation.exceptions import ConfigurationError, InvalidFactorError

        err = InvalidFactorError("breed_factor", 1.5, "(0, 1]")
        assert isinstance(err, ConfigurationError)
        assert "breed_factor" in str(err)
        assert "1.5" in str(err)
        assert "(0, 1]" in str(err)
        assert err.details == {"name": "breed_factor", "value": 1.5, "allowed": "(0, 1]"}


class TestRuntimeErrors:
    def test_empty_population_error(self):
        from genepool.foundation.exceptions import EmptyPopulationError, OptimizationError

        err = EmptyPopulationError()
        assert isinstance(err, OptimizationError)
        assert "no units" in str(err)
        assert "at least one unit" in str(err)

    def test_evaluation_error_keeps_unit(self):
        from genepool.foundation.exceptions import EvaluationError

        unit = object()
        err = EvaluationError("fitness failed", unit=unit)
        assert err.details["unit"] is unit
        assert "fitness()" in str(err)


class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "name",
        ["ConfigurationError", "InvalidFactorError", "OptimizationError", "EmptyPopulationError", "EvaluationError"],
    )
    def test_all_inherit_from_base(self, name):
        from genepool.foundation import exceptions

        assert issubclass(getattr(exceptions, name), exceptions.GenepoolError)

