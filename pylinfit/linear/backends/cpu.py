"""
CPU backends for eight-point linear fits.

Each backend decomposes the design matrix with a thin SVD and solves the
least-squares problem through the thresholded pseudo-inverse. Which
library computes the SVD is the only difference between them.
"""

from functools import partial
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pylinfit.core.result import Result
from pylinfit.core.exceptions import NumericalError, SingularMatrixError
from pylinfit.core.protocols import Decomposition
from pylinfit.core.compute.timing import Timer
from pylinfit.core.compute.precision import condition_number
from pylinfit.core.compute.tolerances import ILL_CONDITIONED_THRESHOLD
from pylinfit.core.compute.linalg.svd import LapackDriver, svd_cpu, svd_scipy
from pylinfit.linear.design import Design
from pylinfit.linear._common import SVDParams


class SVDBackend:
    """
    Least-squares backend over any SVD decomposer.
    
    Implements the Backend protocol for Design -> SVDParams.
    
    Args:
        decompose: Callable factoring a matrix into a Decomposition
        name: Backend identifier reported on results
    """
    
    def __init__(
        self,
        decompose: Callable[[NDArray[Any]], Decomposition],
        name: str,
    ):
        self._decompose = decompose
        self._name = name
    
    @property
    def name(self) -> str:
        return self._name
    
    def decompose(self, matrix: NDArray[Any]) -> Decomposition:
        return self._decompose(matrix)
    
    def solve(self, design: Design, eps: float) -> Result[SVDParams]:
        """
        Solve matrix @ x ≈ vector with singular values <= eps zeroed.
        
        Algorithm:
            1. Thin SVD: A = U diag(s) V'
            2. x = V diag(1/s_i for s_i > eps, else 0) U'y
            
        Args:
            design: Validated design
            eps: Singular value threshold
            
        Returns:
            Result containing SVDParams. Rank deficiency and
            ill-conditioning are reported on Result.warnings, not emitted.

        Raises:
            NumericalError: If eps is invalid or the SVD fails
            SingularMatrixError: If no singular value exceeds eps
        """
        if not np.isfinite(eps) or eps < 0:
            raise NumericalError(
                f"SVD solve: eps must be a finite non-negative number, got {eps}"
            )
        
        timer = Timer()
        timer.start()
        
        with timer.section('svd'):
            decomposition = self.decompose(design.matrix)
        
        with timer.section('solve'):
            solution = decomposition.solve(design.vector, eps)
        
        timer.stop()
        
        s = decomposition.singular_values
        rank = int((s > eps).sum())
        cond = condition_number(s)
        
        if rank == 0:
            raise SingularMatrixError(
                f"No singular value exceeds eps={eps:g}; "
                f"the system has no stable least-squares solution.",
                matrix_name="design matrix",
                condition_number=cond,
                rank=0,
                expected_rank=design.p,
            )
        
        warns: list[str] = []
        if rank < design.p:
            warns.append(
                f"Design matrix is rank-deficient at eps={eps:g}: "
                f"rank={rank}, expected={design.p}. "
                f"Returning the minimum-norm solution."
            )
        elif cond > ILL_CONDITIONED_THRESHOLD:
            warns.append(
                f"Design matrix is ill-conditioned (cond={cond:.3g}); "
                f"float32 coefficients may be inaccurate."
            )
        
        params = SVDParams(
            solution=solution,
            singular_values=s,
            rank=rank,
        )
        
        info: dict[str, Any] = {
            'method': 'svd',
            'eps': float(eps),
            'rank': rank,
            'singular_values': tuple(float(v) for v in s),
            'condition_number': cond,
        }
        
        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warns),
        )


class CPUSVDBackend(SVDBackend):
    """
    CPU backend using NumPy's LAPACK SVD.
    
    This is the default backend.
    """
    
    def __init__(self):
        super().__init__(svd_cpu, 'cpu_svd')


class SciPySVDBackend(SVDBackend):
    """
    CPU backend using scipy.linalg.svd.
    
    Args:
        lapack_driver: 'gesdd' (default) or 'gesvd'
    """
    
    def __init__(self, lapack_driver: LapackDriver = 'gesdd'):
        if lapack_driver not in ('gesdd', 'gesvd'):
            raise ValueError(f"Unknown lapack_driver: {lapack_driver!r}")
        super().__init__(
            partial(svd_scipy, lapack_driver=lapack_driver),
            f'scipy_{lapack_driver}',
        )
