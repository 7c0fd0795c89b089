"""
PyLinFit: closed-form linear fits from eight samples.

Least-squares lines and planes solved through a thresholded singular
value decomposition in single precision, for sensor linearization and
calibration curves.

Submodules:
    linear: Design builders, LineFit and PlaneFit
    core: Exceptions, result envelope, SVD primitives
"""

__version__ = "0.1.0"

from pylinfit import linear
from pylinfit.linear import (
    LineFit,
    PlaneFit,
    LineCoefficients,
    PlaneCoefficients,
    build_line_design,
    build_plane_design,
    fit_line,
    fit_plane,
)
from pylinfit.core.exceptions import (
    PyLinFitError,
    MatrixSizeNotMatchError,
    SvdFailedError,
)

__all__ = [
    "__version__",
    "linear",
    "LineFit",
    "PlaneFit",
    "LineCoefficients",
    "PlaneCoefficients",
    "build_line_design",
    "build_plane_design",
    "fit_line",
    "fit_plane",
    "PyLinFitError",
    "MatrixSizeNotMatchError",
    "SvdFailedError",
]
