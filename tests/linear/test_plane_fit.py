"""
Tests for PlaneFit: f(x, y) = ax + by + c.
"""

import numpy as np
import pytest

from pylinfit.core.compute.tolerances import CPU_FP32
from pylinfit.core.exceptions import MatrixSizeNotMatchError, SvdFailedError
from pylinfit.linear import (
    PlaneCoefficients,
    PlaneFit,
    build_plane_design,
    fit_plane,
)


class TestPlaneFitBasic:

    def test_recovers_exact_plane(self, plane_points):
        x, y, z, a_true, b_true, c_true = plane_points
        fitter = PlaneFit()
        snapshot = fitter.fit(*build_plane_design(x, y, z), eps=1e-4)

        assert isinstance(snapshot, PlaneCoefficients)
        np.testing.assert_allclose(
            fitter.coefficients(),
            [a_true, b_true, c_true],
            rtol=CPU_FP32.rtol,
            atol=CPU_FP32.atol,
        )

    def test_coefficient_order(self, plane_points):
        """Solution [c, a, b] maps to named coefficients a, b, c."""
        x, y, z, a_true, b_true, c_true = plane_points
        fitter = fit_plane(x, y, z)
        snap = fitter.snapshot
        assert snap.a == pytest.approx(a_true, abs=1e-4)
        assert snap.b == pytest.approx(b_true, abs=1e-4)
        assert snap.c == pytest.approx(c_true, abs=1e-4)
        np.testing.assert_allclose(
            fitter.solution.coefficients, [c_true, a_true, b_true], atol=1e-4
        )

    def test_value(self, plane_points):
        x, y, z, *_ = plane_points
        fitter = fit_plane(x, y, z)
        assert fitter.value(2.0, 3.0) == pytest.approx(1.5 * 2.0 - 2.0 * 3.0 + 0.5, abs=1e-4)
        np.testing.assert_allclose(fitter.value(x, y), z, atol=1e-4)

    def test_random_planes(self, rng):
        for _ in range(20):
            a, b, c = rng.uniform(-20, 20, size=3)
            x = rng.uniform(-5, 5, size=8).astype(np.float32)
            y = rng.uniform(-5, 5, size=8).astype(np.float32)
            z = (a * x + b * y + c).astype(np.float32)
            fitter = fit_plane(x, y, z, eps=1e-4)
            np.testing.assert_allclose(
                fitter.coefficients(), [a, b, c], rtol=1e-3, atol=1e-3
            )

    def test_noisy_plane_close(self, rng):
        x = rng.uniform(0, 10, size=8).astype(np.float32)
        y = rng.uniform(0, 10, size=8).astype(np.float32)
        z = (0.3 * x + 1.7 * y - 4.0 + rng.normal(0, 0.01, size=8)).astype(np.float32)
        fitter = fit_plane(x, y, z)
        np.testing.assert_allclose(fitter.coefficients(), [0.3, 1.7, -4.0], atol=0.1)


class TestPlaneFitState:

    def test_value_before_fit_is_zero(self):
        fitter = PlaneFit()
        assert fitter.value(1.0, 2.0) == 0.0
        assert fitter.value(-3.5, 100.0) == 0.0
        assert fitter.coefficients() == (0.0, 0.0, 0.0)

    def test_refit_overwrites(self, plane_points, rng):
        x, y, z, *_ = plane_points
        x2 = rng.uniform(-1, 1, size=8)
        y2 = rng.uniform(-1, 1, size=8)
        z2 = 4.0 * x2 + 3.0 * y2 + 2.0

        fresh = fit_plane(x2, y2, z2)
        fitter = fit_plane(x, y, z)
        fitter.fit(*build_plane_design(x2, y2, z2), eps=1e-4)
        assert fitter.coefficients() == fresh.coefficients()


class TestPlaneFitErrors:

    def test_size_mismatch_resets(self, plane_points):
        x, y, z, *_ = plane_points
        fitter = fit_plane(x, y, z)
        with pytest.raises(MatrixSizeNotMatchError):
            fitter.fit(np.ones((8, 3)), np.ones(7), 1e-4)
        assert fitter.coefficients() == (0.0, 0.0, 0.0)

    def test_line_matrix_rejected(self):
        fitter = PlaneFit()
        with pytest.raises(MatrixSizeNotMatchError, match="2 columns, expected 3"):
            fitter.fit(np.ones((8, 2)), np.ones(8), 1e-4)

    def test_flat_matrix_wrong_size(self):
        fitter = PlaneFit()
        with pytest.raises(MatrixSizeNotMatchError):
            fitter.fit(np.ones(16), np.ones(8), 1e-4)

    def test_degenerate_with_large_eps(self, plane_points):
        x, y, z, *_ = plane_points
        fitter = fit_plane(x, y, z)
        matrix, vector = build_plane_design(np.zeros(8), np.zeros(8), z)
        with pytest.raises(SvdFailedError):
            fitter.fit(matrix, vector, eps=10.0)
        assert fitter.coefficients() == (0.0, 0.0, 0.0)
        assert fitter.value(1.0, 1.0) == 0.0

    def test_collinear_inputs_warn(self):
        x = np.arange(8, dtype=np.float32)
        y = 2.0 * x
        z = x + 1.0
        with pytest.warns(RuntimeWarning, match="rank=2, expected=3"):
            fitter = fit_plane(x, y, z)
        assert fitter.solution.rank == 2
        np.testing.assert_allclose(fitter.value(x, y), z, atol=1e-3)
