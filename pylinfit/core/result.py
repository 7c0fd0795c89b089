"""
Generic result container for all PyLinFit computations.

The Result class is the envelope every backend returns. It keeps the
parameter payload separate from metadata (rank, tolerance, timing) so
fitters can commit the payload and keep the rest for diagnostics.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (rank, eps, singular values)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for fitting computations.
    
    Type Parameters:
        P: The domain-specific parameter payload type
        
    Attributes:
        params: Domain-specific parameters (solution vector, singular values)
        info: Structured metadata (method, rank, eps, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        
    Examples:
        >>> Result(
        ...     params=SVDParams(solution=x, singular_values=s, rank=2),
        ...     info={'method': 'svd', 'rank': 2, 'eps': 1e-4},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_svd'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    
    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
