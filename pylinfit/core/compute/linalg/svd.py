"""
Singular value decomposition and thresholded least-squares solve.

Provides a consistent SVD interface over NumPy (LAPACK gesdd) and SciPy
(gesdd or gesvd). Each decomposition returns an SVDResult that satisfies
the Decomposition protocol, so fitters never touch the library directly.
"""

from dataclasses import dataclass
from typing import Literal, Any
import numpy as np
from numpy.typing import NDArray

from pylinfit.core.exceptions import NumericalError, SingularMatrixError, DimensionError
from pylinfit.core.compute.precision import condition_number


LapackDriver = Literal['gesdd', 'gesvd']


@dataclass(frozen=True)
class SVDResult:
    """
    Thin singular value decomposition A = U diag(s) Vt.
    
    Attributes:
        U: Left singular vectors (n x k, k = min(n, p))
        s: Singular values in non-increasing order (k,)
        Vt: Right singular vectors, transposed (k x p)
    """
    U: NDArray[np.floating[Any]]
    s: NDArray[np.floating[Any]]
    Vt: NDArray[np.floating[Any]]
    
    @property
    def singular_values(self) -> NDArray[np.floating[Any]]:
        return self.s
    
    @property
    def condition_number(self) -> float:
        return condition_number(self.s)
    
    def rank(self, eps: float) -> int:
        """Number of singular values strictly greater than eps."""
        return int(np.sum(self.s > eps))
    
    def solve(
        self,
        b: NDArray[np.floating[Any]],
        eps: float,
    ) -> NDArray[np.floating[Any]]:
        """
        Least-squares solution of A x ≈ b via the pseudo-inverse.
        
        The solution is computed as:
            x = V diag(1/s_i if s_i > eps else 0) U'b
        
        which is the minimum-norm least-squares solution of the system
        restricted to the singular values above eps.
        
        Args:
            b: Right-hand side (n,)
            eps: Singular values at or below eps are treated as zero.
                 Must be finite and non-negative.
            
        Returns:
            Solution vector x (p,) in the dtype of the decomposition
            
        Raises:
            NumericalError: If eps is invalid or the solution is not finite
            SingularMatrixError: If no singular value exceeds eps
            DimensionError: If b does not have n rows
        """
        if not np.isfinite(eps) or eps < 0:
            raise NumericalError(
                f"SVD solve: eps must be a finite non-negative number, got {eps}"
            )
        
        b = np.asarray(b, dtype=self.s.dtype)
        if b.ndim != 1 or b.shape[0] != self.U.shape[0]:
            raise DimensionError(
                f"SVD solve: b must have shape ({self.U.shape[0]},), got {b.shape}"
            )
        
        keep = self.s > eps
        rank = int(np.sum(keep))
        if rank == 0:
            raise SingularMatrixError(
                f"No singular value exceeds eps={eps} "
                f"(largest={float(self.s[0]) if self.s.size else 0.0:.6g}); "
                f"the system has no stable least-squares solution.",
                matrix_name='design matrix',
                condition_number=self.condition_number,
                rank=0,
                expected_rank=int(self.s.size),
            )
        
        Utb = self.U.T @ b
        scaled = np.zeros_like(Utb)
        scaled[keep] = Utb[keep] / self.s[keep]
        x = self.Vt.T @ scaled
        
        if not np.all(np.isfinite(x)):
            raise NumericalError("SVD solve produced non-finite values")
        
        return x


def svd_cpu(A: NDArray[np.floating[Any]]) -> SVDResult:
    """
    Thin SVD using LAPACK (via NumPy).
    
    Args:
        A: Matrix to decompose (n x p). The dtype is preserved.
        
    Returns:
        SVDResult with U, s, Vt
        
    Raises:
        NumericalError: If A has non-finite entries or LAPACK does not converge
    """
    if not np.all(np.isfinite(A)):
        raise NumericalError("SVD: matrix contains non-finite values")
    
    try:
        U, s, Vt = np.linalg.svd(A, full_matrices=False)
    except np.linalg.LinAlgError as e:
        raise NumericalError(f"SVD did not converge: {e}") from e
    
    return SVDResult(U=U, s=s, Vt=Vt)


def svd_scipy(
    A: NDArray[np.floating[Any]],
    lapack_driver: LapackDriver = 'gesdd',
) -> SVDResult:
    """
    Thin SVD using SciPy.
    
    gesdd (divide and conquer) is the default; gesvd is slower but more
    robust on matrices where gesdd fails to converge.
    
    Args:
        A: Matrix to decompose (n x p). The dtype is preserved.
        lapack_driver: 'gesdd' or 'gesvd'
        
    Returns:
        SVDResult with U, s, Vt
        
    Raises:
        ValueError: If lapack_driver is unknown
        NumericalError: If A has non-finite entries or LAPACK does not converge
    """
    from scipy.linalg import svd, LinAlgError
    
    if lapack_driver not in ('gesdd', 'gesvd'):
        raise ValueError(f"Unknown lapack_driver: {lapack_driver!r}")
    
    try:
        U, s, Vt = svd(
            A,
            full_matrices=False,
            check_finite=True,
            lapack_driver=lapack_driver,
        )
    except ValueError as e:
        # check_finite rejects NaN/Inf with ValueError
        raise NumericalError(f"SVD: {e}") from e
    except LinAlgError as e:
        raise NumericalError(f"SVD did not converge: {e}") from e
    
    return SVDResult(U=U, s=s, Vt=Vt)
