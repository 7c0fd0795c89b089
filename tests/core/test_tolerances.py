"""
Tests for tolerance tiers.
"""

from pylinfit.core.compute.tolerances import (
    CPU_FP32,
    CPU_FP32_ILL_CONDITIONED,
    DEFAULT_EPS,
    ILL_CONDITIONED_THRESHOLD,
    select_tolerance,
)


def test_default_eps_positive():
    assert DEFAULT_EPS > 0.0


def test_well_conditioned_tier():
    assert select_tolerance(10.0) is CPU_FP32


def test_threshold_is_inclusive_of_well_conditioned():
    assert select_tolerance(ILL_CONDITIONED_THRESHOLD) is CPU_FP32


def test_ill_conditioned_tier():
    tier = select_tolerance(ILL_CONDITIONED_THRESHOLD * 10)
    assert tier is CPU_FP32_ILL_CONDITIONED
    assert tier.rtol > CPU_FP32.rtol


def test_singular_design_is_ill_conditioned():
    assert select_tolerance(float("inf")) is CPU_FP32_ILL_CONDITIONED
