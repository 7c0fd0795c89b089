"""
Core infrastructure for PyLinFit.

This module provides shared abstractions, utilities, and numeric kernels
used by the fitting domain.

Key components:
    protocols: Decomposition, Decomposer, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, precision constants, SVD primitives
"""

from pylinfit.core.protocols import Decomposition, Decomposer, Backend
from pylinfit.core.result import Result
from pylinfit.core.exceptions import (
    PyLinFitError,
    ValidationError,
    DimensionError,
    MatrixSizeNotMatchError,
    NumericalError,
    SingularMatrixError,
    SvdFailedError,
)

__all__ = [
    # Protocols
    "Decomposition",
    "Decomposer",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinFitError",
    "ValidationError",
    "DimensionError",
    "MatrixSizeNotMatchError",
    "NumericalError",
    "SingularMatrixError",
    "SvdFailedError",
]
