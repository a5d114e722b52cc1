import math

import pytest
from pydantic import ValidationError

from modular_optimization.optimization.golden_section import GoldenSectionConfig
from modular_optimization.validation import SolverConfigurationError


def test_default_config_is_valid():
    config = GoldenSectionConfig.default()

    assert config.max_iters == 100
    assert config.x_abs_tol == 1e-12
    assert config.x_rel_tol == 1e-12
    assert config == GoldenSectionConfig()


def test_accepts_documented_values():
    config = GoldenSectionConfig(max_iters=100, x_abs_tol=1e-12, x_rel_tol=1e-12)
    assert config.max_iters == 100


def test_one_positive_tolerance_is_enough():
    assert GoldenSectionConfig(x_abs_tol=0.0, x_rel_tol=1e-8).x_abs_tol == 0.0
    assert GoldenSectionConfig(x_abs_tol=1e-8, x_rel_tol=0.0).x_rel_tol == 0.0


def test_rejects_zero_max_iters():
    with pytest.raises(SolverConfigurationError, match="max_iters"):
        GoldenSectionConfig(max_iters=0)


@pytest.mark.parametrize("field", ["x_abs_tol", "x_rel_tol"])
@pytest.mark.parametrize("value", [-1e-12, math.inf, math.nan])
def test_rejects_negative_or_non_finite_tolerances(field, value):
    with pytest.raises(SolverConfigurationError, match=field):
        GoldenSectionConfig(**{field: value})


def test_rejects_both_tolerances_zero():
    with pytest.raises(SolverConfigurationError, match="At least one"):
        GoldenSectionConfig(x_abs_tol=0.0, x_rel_tol=0.0)


def test_config_is_frozen_and_forbids_extra_fields():
    config = GoldenSectionConfig()
    with pytest.raises(ValidationError):
        config.max_iters = 5
    with pytest.raises(ValidationError):
        GoldenSectionConfig(tolerance=1e-3)
