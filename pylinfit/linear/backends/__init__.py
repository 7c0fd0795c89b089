"""
Linear fit backends.

Available backends:
    SVDBackend: Generic backend over any Decomposer
    CPUSVDBackend: NumPy LAPACK SVD (default)
    SciPySVDBackend: scipy.linalg.svd with gesdd or gesvd
"""

from pylinfit.linear.backends.cpu import SVDBackend, CPUSVDBackend, SciPySVDBackend

__all__ = [
    "SVDBackend",
    "CPUSVDBackend",
    "SciPySVDBackend",
]
