"""
Least-squares fitters for eight-point lines and planes.

LineFit and PlaneFit own their coefficients. fit() either commits a
complete new set of coefficients or resets them to zero and raises;
there is no partial update. fit_line() and fit_plane() are the
one-call entry points that build the design and fit it.

Fitters are not thread-safe: fit() mutates the instance, so callers
sharing one across threads must synchronize externally.
"""

from __future__ import annotations

import warnings
from typing import Any, Literal, Union
import numpy as np
from numpy.typing import ArrayLike

from pylinfit.core.exceptions import (
    PyLinFitError,
    ValidationError,
    NumericalError,
    SvdFailedError,
)
from pylinfit.core.protocols import Backend, Decomposer
from pylinfit.core.result import Result
from pylinfit.core.compute.tolerances import DEFAULT_EPS
from pylinfit.linear._common import LINE_COLUMNS, PLANE_COLUMNS, SVDParams
from pylinfit.linear.design import Design, build_line_design, build_plane_design
from pylinfit.linear.solution import LineCoefficients, PlaneCoefficients, FitSolution
from pylinfit.linear.backends.cpu import SVDBackend, CPUSVDBackend, SciPySVDBackend


# Type alias for backend selection
BackendChoice = Union[
    Literal['auto', 'cpu', 'cpu_svd', 'scipy', 'scipy_gesdd', 'scipy_gesvd'],
    Backend,
    Decomposer,
]


class _AffineFit:
    """
    Shared state and fit procedure for LineFit and PlaneFit.
    
    Subclasses set the number of design columns and the coefficient
    snapshot type that maps a solution vector to named coefficients.
    """
    
    _n_columns: int
    _coefficients_type: type
    
    def __init__(self, *, backend: BackendChoice = 'auto'):
        self._backend = _get_backend(backend)
        self._coefficients = self._coefficients_type.zero()
        self._solution: FitSolution | None = None
    
    @property
    def backend_name(self) -> str:
        return self._backend.name
    
    @property
    def solution(self) -> FitSolution | None:
        """Diagnostics of the last successful fit, None if unfit."""
        return self._solution
    
    def reset(self) -> None:
        """Return to the unfit state (all coefficients zero)."""
        self._coefficients = self._coefficients_type.zero()
        self._solution = None
    
    def _fit(self, matrix: ArrayLike, vector: ArrayLike, eps: float):
        try:
            design = Design.from_arrays(matrix, vector, self._n_columns)
            result = self._solve(design, eps)
        except PyLinFitError:
            self.reset()
            raise

        self._coefficients = self._coefficients_type.from_solution(result.params.solution)
        self._solution = FitSolution(_result=result, _design=design)

        # stacklevel=3: fit() -> _fit() -> user code
        for msg in result.warnings:
            warnings.warn(msg, RuntimeWarning, stacklevel=3)

        return self._coefficients

    def _solve(self, design: Design, eps: float) -> Result[SVDParams]:
        try:
            eps_value = float(eps)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"eps: expected a number, got {eps!r}") from e

        try:
            result = self._backend.solve(design, eps_value)
        except NumericalError as e:
            raise SvdFailedError(
                f"SVD solve failed: {e}",
                eps=eps_value,
                rank=getattr(e, 'rank', None),
            ) from e
        except PyLinFitError:
            raise
        except Exception as e:
            # Custom decomposers may raise anything
            raise SvdFailedError(
                f"SVD solve failed in backend '{self.backend_name}': "
                f"{type(e).__name__}: {e}",
                eps=eps_value,
            ) from e

        solution = np.asarray(result.params.solution)
        if solution.shape != (design.p,):
            raise SvdFailedError(
                f"SVD solve returned a solution of shape {solution.shape}, "
                f"expected ({design.p},)",
                eps=eps_value,
                rank=result.params.rank,
            )
        if not np.all(np.isfinite(solution)):
            raise SvdFailedError(
                "SVD solve produced a non-finite solution",
                eps=eps_value,
                rank=result.params.rank,
            )
        return result


class LineFit(_AffineFit):
    """
    Least-squares line f(x) = kx + b through eight points.
    
    Example:
        >>> fitter = LineFit()
        >>> matrix, vector = build_line_design(x, y)
        >>> coeffs = fitter.fit(matrix, vector, eps=1e-4)
        >>> fitter.value(5.0)
    """
    
    _n_columns = LINE_COLUMNS
    _coefficients_type = LineCoefficients
    
    @property
    def snapshot(self) -> LineCoefficients:
        return self._coefficients
    
    def fit(self, matrix: ArrayLike, vector: ArrayLike, eps: float) -> LineCoefficients:
        """
        Fit the line to design data.
        
        Args:
            matrix: 8 x 2 design matrix with rows [1, x_i], or its flat
                    row-major form of 16 values
            vector: 8 dependent samples
            eps: Singular values at or below eps are treated as zero
            
        Returns:
            Snapshot of the new coefficients
            
        Raises:
            MatrixSizeNotMatchError: If matrix and vector sizes disagree.
                No decomposition is attempted.
            SvdFailedError: If no solution exists within eps
            
        On any error the coefficients are reset to zero.
        """
        return self._fit(matrix, vector, eps)
    
    def coefficients(self) -> tuple[np.float32, np.float32]:
        """Return (k, b)."""
        return self._coefficients.as_tuple()
    
    def value(self, x: ArrayLike) -> Any:
        """Evaluate kx + b. Returns 0 everywhere before a successful fit."""
        return self._coefficients.value(x)
    
    def __repr__(self) -> str:
        k, b = self.coefficients()
        return f"LineFit(k={float(k):.6g}, b={float(b):.6g}, backend={self.backend_name!r})"


class PlaneFit(_AffineFit):
    """
    Least-squares plane f(x, y) = ax + by + c through eight points.
    
    Example:
        >>> fitter = PlaneFit()
        >>> matrix, vector = build_plane_design(x, y, z)
        >>> coeffs = fitter.fit(matrix, vector, eps=1e-4)
        >>> fitter.value(1.0, 2.0)
    """
    
    _n_columns = PLANE_COLUMNS
    _coefficients_type = PlaneCoefficients
    
    @property
    def snapshot(self) -> PlaneCoefficients:
        return self._coefficients
    
    def fit(self, matrix: ArrayLike, vector: ArrayLike, eps: float) -> PlaneCoefficients:
        """
        Fit the plane to design data.
        
        Args:
            matrix: 8 x 3 design matrix with rows [1, x_i, y_i], or its flat
                    row-major form of 24 values
            vector: 8 dependent samples
            eps: Singular values at or below eps are treated as zero
            
        Returns:
            Snapshot of the new coefficients
            
        Raises:
            MatrixSizeNotMatchError: If matrix and vector sizes disagree.
                No decomposition is attempted.
            SvdFailedError: If no solution exists within eps
            
        On any error the coefficients are reset to zero.
        """
        return self._fit(matrix, vector, eps)
    
    def coefficients(self) -> tuple[np.float32, np.float32, np.float32]:
        """Return (a, b, c)."""
        return self._coefficients.as_tuple()
    
    def value(self, x: ArrayLike, y: ArrayLike) -> Any:
        """Evaluate ax + by + c. Returns 0 everywhere before a successful fit."""
        return self._coefficients.value(x, y)
    
    def __repr__(self) -> str:
        a, b, c = self.coefficients()
        return (
            f"PlaneFit(a={float(a):.6g}, b={float(b):.6g}, c={float(c):.6g}, "
            f"backend={self.backend_name!r})"
        )


def fit_line(
    x: ArrayLike,
    y: ArrayLike,
    *,
    eps: float = DEFAULT_EPS,
    backend: BackendChoice = 'auto',
) -> LineFit:
    """
    Fit f(x) = kx + b to eight points.
    
    Builds the design matrix and fits it in one call.
    
    Args:
        x: 8 independent samples
        y: 8 dependent samples
        eps: Singular value threshold (default DEFAULT_EPS)
        backend: Backend name or a Decomposer/Backend object
        
    Returns:
        Fitted LineFit
        
    Raises:
        DimensionError: If x or y does not hold exactly 8 samples
        SvdFailedError: If no solution exists within eps
        
    Example:
        >>> fitter = fit_line(x, y)
        >>> k, b = fitter.coefficients()
        >>> print(fitter.solution.summary())
    """
    matrix, vector = build_line_design(x, y)
    fitter = LineFit(backend=backend)
    # _fit directly so warnings point at the caller of this function
    fitter._fit(matrix, vector, eps)
    return fitter


def fit_plane(
    x: ArrayLike,
    y: ArrayLike,
    z: ArrayLike,
    *,
    eps: float = DEFAULT_EPS,
    backend: BackendChoice = 'auto',
) -> PlaneFit:
    """
    Fit f(x, y) = ax + by + c to eight points.
    
    Args:
        x: 8 samples of the first independent variable
        y: 8 samples of the second independent variable
        z: 8 dependent samples
        eps: Singular value threshold (default DEFAULT_EPS)
        backend: Backend name or a Decomposer/Backend object
        
    Returns:
        Fitted PlaneFit
        
    Raises:
        DimensionError: If x, y or z does not hold exactly 8 samples
        SvdFailedError: If no solution exists within eps
    """
    matrix, vector = build_plane_design(x, y, z)
    fitter = PlaneFit(backend=backend)
    # _fit directly so warnings point at the caller of this function
    fitter._fit(matrix, vector, eps)
    return fitter


def _get_backend(choice: BackendChoice) -> Backend:
    """
    Select and instantiate the appropriate backend.
    
    Args:
        choice: Backend name, a Backend object, or a Decomposer
        
    Returns:
        Backend instance ready to solve
        
    Raises:
        ValueError: If unknown backend specified
    """
    if isinstance(choice, str):
        if choice in ('auto', 'cpu', 'cpu_svd'):
            return CPUSVDBackend()
        elif choice in ('scipy', 'scipy_gesdd'):
            return SciPySVDBackend('gesdd')
        elif choice == 'scipy_gesvd':
            return SciPySVDBackend('gesvd')
        else:
            raise ValueError(f"Unknown backend: {choice!r}")
    
    if isinstance(choice, SVDBackend):
        return choice
    
    if isinstance(choice, Backend):
        return choice
    
    if isinstance(choice, Decomposer):
        name = getattr(choice, 'name', type(choice).__name__)
        return SVDBackend(choice.decompose, name)
    
    raise ValueError(f"Unknown backend: {choice!r}")
