"""
Exception hierarchy for PyLinFit.

All exceptions inherit from PyLinFitError to allow catching any
library-specific error. The two fitting failures callers normally
handle are MatrixSizeNotMatchError and SvdFailedError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinFitError(Exception):
    """Base exception for all PyLinFit errors."""
    pass


class ValidationError(PyLinFitError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.
    
    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class MatrixSizeNotMatchError(DimensionError):
    """
    Design matrix and target vector sizes do not agree.
    
    Raised by a fitter before any decomposition is attempted. The
    fitter's coefficients are reset to zero when this is raised.
    
    Attributes:
        matrix_shape: Shape of the design matrix as received
        vector_length: Length of the target vector as received
        expected_columns: Number of columns the fitter requires
    """
    
    def __init__(
        self,
        message: str,
        matrix_shape: tuple[int, ...] | None = None,
        vector_length: int | None = None,
        expected_columns: int | None = None
    ):
        super().__init__(message)
        self.matrix_shape = matrix_shape
        self.vector_length = vector_length
        self.expected_columns = expected_columns


class NumericalError(PyLinFitError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.
    
    Raised when no singular value of a matrix survives the solve
    tolerance, so no least-squares solution can be formed.
    
    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically min(n, p))
    """
    
    def __init__(
        self, 
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank


class SvdFailedError(NumericalError):
    """
    SVD least-squares solve failed within the requested tolerance.
    
    Terminal for the call that raised it; no retry is attempted. The
    fitter's coefficients are reset to zero when this is raised. The
    underlying numerical error, if any, is available as __cause__.
    
    Attributes:
        eps: Singular value threshold used for the solve
        rank: Effective rank after thresholding, if known
    """
    
    def __init__(
        self,
        message: str,
        eps: float | None = None,
        rank: int | None = None
    ):
        super().__init__(message)
        self.eps = eps
        self.rank = rank
