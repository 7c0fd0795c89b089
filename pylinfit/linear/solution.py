"""
Linear fit solution types.

Contains the coefficient snapshots returned by the fitters and the
user-facing diagnostic wrapper around a backend Result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinfit.core.result import Result
from pylinfit.core.compute.precision import WORKING_DTYPE
from pylinfit.linear._common import SVDParams

if TYPE_CHECKING:
    from pylinfit.linear.design import Design


_ZERO = WORKING_DTYPE(0.0)


def _evaluate(value: NDArray[np.float32]) -> np.float32 | NDArray[np.float32]:
    """Return numpy scalars for scalar input, arrays otherwise."""
    value = np.asarray(value)
    return value[()] if value.ndim == 0 else value


@dataclass(frozen=True)
class LineCoefficients:
    """
    Coefficients of f(x) = kx + b.
    
    A value snapshot: fitters hand these out and never mutate them.
    """
    k: np.float32 = _ZERO
    b: np.float32 = _ZERO
    
    @classmethod
    def zero(cls) -> LineCoefficients:
        return cls(k=_ZERO, b=_ZERO)
    
    @classmethod
    def from_solution(cls, solution: NDArray[np.floating[Any]]) -> LineCoefficients:
        """Map a solution vector [b, k] (design column order) to coefficients."""
        return cls(k=WORKING_DTYPE(solution[1]), b=WORKING_DTYPE(solution[0]))
    
    def value(self, x: ArrayLike) -> np.float32 | NDArray[np.float32]:
        """f(x) = kx + b"""
        x_arr = np.asarray(x, dtype=WORKING_DTYPE)
        return _evaluate(self.k * x_arr + self.b)
    
    def as_tuple(self) -> tuple[np.float32, np.float32]:
        """Return (k, b)."""
        return (self.k, self.b)


@dataclass(frozen=True)
class PlaneCoefficients:
    """
    Coefficients of f(x, y) = ax + by + c.
    
    A value snapshot: fitters hand these out and never mutate them.
    """
    a: np.float32 = _ZERO
    b: np.float32 = _ZERO
    c: np.float32 = _ZERO
    
    @classmethod
    def zero(cls) -> PlaneCoefficients:
        return cls(a=_ZERO, b=_ZERO, c=_ZERO)
    
    @classmethod
    def from_solution(cls, solution: NDArray[np.floating[Any]]) -> PlaneCoefficients:
        """Map a solution vector [c, a, b] (design column order) to coefficients."""
        return cls(
            a=WORKING_DTYPE(solution[1]),
            b=WORKING_DTYPE(solution[2]),
            c=WORKING_DTYPE(solution[0]),
        )
    
    def value(self, x: ArrayLike, y: ArrayLike) -> np.float32 | NDArray[np.float32]:
        """f(x, y) = ax + by + c"""
        x_arr = np.asarray(x, dtype=WORKING_DTYPE)
        y_arr = np.asarray(y, dtype=WORKING_DTYPE)
        return _evaluate(self.a * x_arr + self.b * y_arr + self.c)
    
    def as_tuple(self) -> tuple[np.float32, np.float32, np.float32]:
        """Return (a, b, c)."""
        return (self.a, self.b, self.c)


@dataclass
class FitSolution:
    """
    Diagnostics for one successful fit.
    
    Wraps the backend Result and the Design it was computed from.
    Fitters keep the solution of their last successful fit.
    """
    _result: Result[SVDParams]
    _design: 'Design'
    
    # Cached computations
    _fitted_values: NDArray[np.float32] | None = None
    
    @property
    def coefficients(self) -> NDArray[np.float32]:
        """Raw solution vector in design column order (constant term first)."""
        return self._result.params.solution
    
    @property
    def fitted_values(self) -> NDArray[np.float32]:
        if self._fitted_values is None:
            self._fitted_values = self._design.matrix @ self.coefficients
        return self._fitted_values
    
    @property
    def residuals(self) -> NDArray[np.float32]:
        return self._design.vector - self.fitted_values
    
    @property
    def rss(self) -> float:
        r = self.residuals
        return float(r @ r)
    
    @property
    def tss(self) -> float:
        y = self._design.vector
        return float(np.sum((y - np.mean(y)) ** 2))
    
    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)
    
    @property
    def rank(self) -> int:
        return self._result.params.rank
    
    @property
    def singular_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.singular_values
    
    @property
    def condition_number(self) -> float:
        return self._result.info['condition_number']
    
    @property
    def eps(self) -> float:
        return self._result.info['eps']
    
    @property
    def info(self) -> dict[str, Any]:
        return self._result.info
    
    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing
    
    @property
    def backend_name(self) -> str:
        return self._result.backend_name
    
    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings
    
    def summary(self) -> str:
        """Generate a plain-text summary of the fit."""
        names = ('b', 'k') if self._design.p == 2 else ('c', 'a', 'b')
        lines = [
            "Linear Fit Results",
            "=" * 48,
            f"Samples: {self._design.n}",
            f"Columns: {self._design.p}",
            f"Rank: {self.rank} (eps={self.eps:g})",
            f"Condition number: {self.condition_number:.6g}",
            f"R-squared: {self.r_squared:.6f}",
            f"RSS: {self.rss:.6g}",
            "",
            "Coefficients:",
            "-" * 48,
        ]
        
        for name, coef in zip(names, self.coefficients):
            lines.append(f"  {name}: {float(coef):14.6f}")
        
        lines.append("-" * 48)
        lines.append(
            "Singular values: "
            + ", ".join(f"{float(s):.6g}" for s in self.singular_values)
        )
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        
        return "\n".join(lines)
    
    def __repr__(self) -> str:
        return (
            f"FitSolution(n={self._design.n}, p={self._design.p}, "
            f"rank={self.rank}, r_squared={self.r_squared:.4f})"
        )
