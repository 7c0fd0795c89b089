"""
Tests for input validators.
"""

import numpy as np
import pytest

from pylinfit.core.exceptions import DimensionError, ValidationError
from pylinfit.core.validation import (
    check_1d,
    check_array,
    check_length,
)


class TestCheckArray:

    def test_list_converted_to_float32(self):
        arr = check_array([1, 2, 3], "x")
        assert arr.dtype == np.float32
        np.testing.assert_array_equal(arr, [1.0, 2.0, 3.0])

    def test_float64_downcast(self):
        arr = check_array(np.array([0.5, 1.5]), "x")
        assert arr.dtype == np.float32

    def test_explicit_dtype(self):
        arr = check_array([1, 2], "x", dtype=np.float64)
        assert arr.dtype == np.float64

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="x: non-numeric"):
            check_array(["a", "b"], "x")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1.0, "two", None], "x")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError):
            check_array([1 + 2j, 3.0], "x")


class TestShapeChecks:

    def test_check_1d_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "x")

    def test_check_length_exact(self):
        check_length(np.zeros(8), 8, "x")

    def test_check_length_too_short(self):
        with pytest.raises(DimensionError, match="exactly 8 samples, got 7"):
            check_length(np.zeros(7), 8, "x")

    def test_check_length_scalar(self):
        with pytest.raises(DimensionError, match="got 0"):
            check_length(np.array(1.0), 8, "x")

