"""
Design matrices for eight-point linear fits.

The builders turn raw sample arrays into the (matrix, vector) pair the
fitters consume: a leading column of ones followed by one column per
independent variable. Values are copied as float32 and never centered,
scaled or otherwise transformed.

Design is the validated container the backends solve. Building one from
caller-supplied arrays is where the matrix/vector size check lives.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinfit.core.exceptions import MatrixSizeNotMatchError
from pylinfit.core.compute.precision import WORKING_DTYPE
from pylinfit.core.validation import check_array, check_1d, check_length
from pylinfit.linear._common import POINT_COUNT, LINE_COLUMNS, PLANE_COLUMNS


def build_line_design(
    x: ArrayLike,
    y: ArrayLike,
) -> tuple[NDArray[np.float32], NDArray[np.float32]]:
    """
    Build the design data for f(x) = kx + b from eight points.
    
    Args:
        x: Independent samples (8,)
        y: Dependent samples (8,)
        
    Returns:
        (matrix, vector) where matrix is 8 x 2 with rows [1, x_i]
        and vector is y as float32.
        
    Raises:
        ValidationError: If an input is not numeric
        DimensionError: If an input is not 1-D with exactly 8 samples
    """
    x_arr = _sample_array(x, 'x')
    y_arr = _sample_array(y, 'y')
    
    matrix = np.empty((POINT_COUNT, LINE_COLUMNS), dtype=WORKING_DTYPE)
    matrix[:, 0] = 1.0
    matrix[:, 1] = x_arr
    return matrix, y_arr.copy()


def build_plane_design(
    x: ArrayLike,
    y: ArrayLike,
    z: ArrayLike,
) -> tuple[NDArray[np.float32], NDArray[np.float32]]:
    """
    Build the design data for f(x, y) = ax + by + c from eight points.
    
    Args:
        x: First independent samples (8,)
        y: Second independent samples (8,)
        z: Dependent samples (8,)
        
    Returns:
        (matrix, vector) where matrix is 8 x 3 with rows [1, x_i, y_i]
        and vector is z as float32.
        
    Raises:
        ValidationError: If an input is not numeric
        DimensionError: If an input is not 1-D with exactly 8 samples
    """
    x_arr = _sample_array(x, 'x')
    y_arr = _sample_array(y, 'y')
    z_arr = _sample_array(z, 'z')
    
    matrix = np.empty((POINT_COUNT, PLANE_COLUMNS), dtype=WORKING_DTYPE)
    matrix[:, 0] = 1.0
    matrix[:, 1] = x_arr
    matrix[:, 2] = y_arr
    return matrix, z_arr.copy()


@dataclass(frozen=True)
class Design:
    """
    Validated least-squares design: matrix (n x p) and vector (n,).
    
    Immutable after construction.
    
    Construction:
        Design.from_line_points(x, y)            # 8 x 2
        Design.from_plane_points(x, y, z)        # 8 x 3
        Design.from_arrays(matrix, vector, p)    # caller-built data
    """
    _matrix: NDArray[np.float32]
    _vector: NDArray[np.float32]
    _n: int
    _p: int
    
    @classmethod
    def from_line_points(cls, x: ArrayLike, y: ArrayLike) -> Design:
        """Build a line design directly from sample points."""
        matrix, vector = build_line_design(x, y)
        return cls(_matrix=matrix, _vector=vector, _n=POINT_COUNT, _p=LINE_COLUMNS)
    
    @classmethod
    def from_plane_points(cls, x: ArrayLike, y: ArrayLike, z: ArrayLike) -> Design:
        """Build a plane design directly from sample points."""
        matrix, vector = build_plane_design(x, y, z)
        return cls(_matrix=matrix, _vector=vector, _n=POINT_COUNT, _p=PLANE_COLUMNS)
    
    @classmethod
    def from_arrays(
        cls,
        matrix: ArrayLike,
        vector: ArrayLike,
        n_columns: int,
    ) -> Design:
        """
        Build Design from caller-supplied matrix and vector.
        
        The matrix may be given as n x p or in flat row-major form
        (n * p,), the layout produced by fixed-size buffers.
        
        Args:
            matrix: Design matrix, (8, n_columns) or (8 * n_columns,)
            vector: Target vector (8,)
            n_columns: Number of design matrix columns the caller expects
            
        Returns:
            Design ready for a backend
            
        Raises:
            ValidationError: If matrix or vector is not numeric
            MatrixSizeNotMatchError: If row count and vector length disagree,
                the column count is wrong, or there are not 8 samples
        """
        matrix_arr = check_array(matrix, 'matrix', dtype=WORKING_DTYPE)
        vector_arr = check_array(vector, 'vector', dtype=WORKING_DTYPE)
        
        matrix_shape = tuple(matrix_arr.shape)
        vector_length = int(vector_arr.shape[0]) if vector_arr.ndim == 1 else -1
        
        def mismatch(reason: str) -> MatrixSizeNotMatchError:
            return MatrixSizeNotMatchError(
                f"Matrix size not match: {reason} "
                f"(matrix shape={matrix_shape}, vector shape={vector_arr.shape}, "
                f"expected {POINT_COUNT} x {n_columns})",
                matrix_shape=matrix_shape,
                vector_length=vector_length if vector_length >= 0 else None,
                expected_columns=n_columns,
            )
        
        if vector_arr.ndim != 1:
            raise mismatch("vector must be 1-D")
        
        if matrix_arr.ndim == 1:
            if matrix_arr.size != n_columns * vector_length:
                raise mismatch(
                    f"flat matrix has {matrix_arr.size} entries, "
                    f"expected {n_columns} x {vector_length}"
                )
            matrix_arr = matrix_arr.reshape(vector_length, n_columns)
        elif matrix_arr.ndim == 2:
            if matrix_arr.shape[1] != n_columns:
                raise mismatch(
                    f"matrix has {matrix_arr.shape[1]} columns, expected {n_columns}"
                )
            if matrix_arr.shape[0] != vector_length:
                raise mismatch(
                    f"matrix has {matrix_arr.shape[0]} rows but vector has "
                    f"{vector_length} entries"
                )
        else:
            raise mismatch(f"matrix must be 1-D or 2-D, got {matrix_arr.ndim}-D")
        
        if vector_length != POINT_COUNT:
            raise mismatch(f"{vector_length} samples given, exactly {POINT_COUNT} required")
        
        return cls(
            _matrix=np.array(matrix_arr, dtype=WORKING_DTYPE),
            _vector=np.array(vector_arr, dtype=WORKING_DTYPE),
            _n=vector_length,
            _p=n_columns,
        )
    
    # === Properties ===
    
    @property
    def matrix(self) -> NDArray[np.float32]:
        """Design matrix (n x p)."""
        return self._matrix
    
    @property
    def vector(self) -> NDArray[np.float32]:
        """Target vector (n,)."""
        return self._vector
    
    @property
    def n(self) -> int:
        """Number of samples."""
        return self._n
    
    @property
    def p(self) -> int:
        """Number of design matrix columns, constant term included."""
        return self._p


def _sample_array(values: ArrayLike, name: str) -> NDArray[np.float32]:
    """Convert one sample array and check it holds exactly eight values."""
    arr = check_array(values, name, dtype=WORKING_DTYPE)
    check_1d(arr, name)
    check_length(arr, POINT_COUNT, name)
    return arr
