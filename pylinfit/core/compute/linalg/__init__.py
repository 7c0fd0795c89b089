"""
Linear algebra kernels for PyLinFit.

All functions follow these conventions:
    - CPU functions use NumPy/SciPy (LAPACK under the hood)
    - Each operation returns a structured result dataclass
    - Errors are raised immediately with clear messages

Submodules:
    svd: Singular value decomposition and thresholded solve
"""

from pylinfit.core.compute.linalg.svd import (
    SVDResult,
    svd_cpu,
    svd_scipy,
)

__all__ = [
    "SVDResult",
    "svd_cpu",
    "svd_scipy",
]
