"""
Tests for PyLinFit exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyLinFitError)
    - Diagnostic attributes on MatrixSizeNotMatchError, SingularMatrixError,
      SvdFailedError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pylinfit.core.exceptions import (
    DimensionError,
    MatrixSizeNotMatchError,
    NumericalError,
    PyLinFitError,
    SingularMatrixError,
    SvdFailedError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyLinFitError."""

    def test_validation_error_is_pylinfit_error(self):
        with pytest.raises(PyLinFitError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_matrix_size_not_match_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise MatrixSizeNotMatchError("Matrix size not match")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_svd_failed_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SvdFailedError("SVD solve failed")

    def test_svd_failed_is_not_validation_error(self):
        err = SvdFailedError("SVD solve failed")
        assert not isinstance(err, ValidationError)

    def test_matrix_size_not_match_is_not_numerical_error(self):
        err = MatrixSizeNotMatchError("Matrix size not match")
        assert not isinstance(err, NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixSizeNotMatchError:

    def test_attributes(self):
        err = MatrixSizeNotMatchError(
            "Matrix size not match",
            matrix_shape=(7, 2),
            vector_length=8,
            expected_columns=2,
        )
        assert err.matrix_shape == (7, 2)
        assert err.vector_length == 8
        assert err.expected_columns == 2
        assert str(err) == "Matrix size not match"

    def test_defaults_none(self):
        err = MatrixSizeNotMatchError("Matrix size not match")
        assert err.matrix_shape is None
        assert err.vector_length is None
        assert err.expected_columns is None


class TestSingularMatrixError:

    def test_attributes(self):
        err = SingularMatrixError(
            "singular",
            matrix_name="design matrix",
            condition_number=float("inf"),
            rank=0,
            expected_rank=2,
        )
        assert err.matrix_name == "design matrix"
        assert err.condition_number == float("inf")
        assert err.rank == 0
        assert err.expected_rank == 2

    def test_defaults_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.condition_number is None
        assert err.rank is None
        assert err.expected_rank is None


class TestSvdFailedError:

    def test_attributes(self):
        err = SvdFailedError("SVD solve failed", eps=10.0, rank=0)
        assert err.eps == 10.0
        assert err.rank == 0

    def test_cause_preserved(self):
        cause = SingularMatrixError("singular", rank=0)
        try:
            raise SvdFailedError("SVD solve failed") from cause
        except SvdFailedError as err:
            assert err.__cause__ is cause
