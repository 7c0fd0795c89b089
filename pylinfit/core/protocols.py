"""
Core protocols for PyLinFit.

These define the structural interfaces between the fitters and whatever
linear-algebra library supplies the singular value decomposition. We use
Protocol (structural typing) rather than ABC (nominal typing) so any
object with the right methods can be plugged in.

Design Principles:
    - Minimal contracts: decompose, then solve with a tolerance
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Decomposition(Protocol):
    """
    A factorized matrix able to solve least-squares problems.
    
    Produced by a Decomposer. Implementations hold whatever factors they
    need; the fitters only rely on the members below.
    """
    
    @property
    def singular_values(self) -> NDArray[np.floating[Any]]:
        """Singular values in non-increasing order."""
        ...
    
    def solve(
        self,
        b: NDArray[np.floating[Any]],
        eps: float,
    ) -> NDArray[np.floating[Any]]:
        """
        Least-squares solution of A x ≈ b.
        
        Singular values at or below eps are treated as zero.
        
        Raises:
            NumericalError: If no stable solution exists within eps
        """
        ...


@runtime_checkable
class Decomposer(Protocol):
    """
    Anything that can factor a design matrix.
    
    This is the capability a third-party linear-algebra backend needs to
    provide to be used by LineFit / PlaneFit.
    """
    
    def decompose(self, matrix: NDArray[np.floating[Any]]) -> Decomposition:
        """
        Factor the matrix (thin SVD with both factor matrices).
        
        Raises:
            NumericalError: If the factorization cannot be computed
        """
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.
    
    A backend takes a validated design plus a tolerance and produces a
    Result envelope. Backends are stateless; all configuration is passed
    at construction time or per call.
    
    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """
    
    @property
    def name(self) -> str:
        """
        Backend identifier.
        
        Convention: '{library}_{algorithm}'
        Examples: 'cpu_svd', 'scipy_gesdd', 'scipy_gesvd'
        """
        ...
    
    def solve(self, design: D, eps: float) -> 'Result[P]':
        """
        Execute the least-squares computation.
        
        Args:
            design: Validated design container
            eps: Singular value threshold
            
        Returns:
            Result envelope containing parameter payload and metadata
            
        Raises:
            NumericalError: If numerical issues prevent a solution
        """
        ...
