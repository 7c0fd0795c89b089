"""
Eight-point linear fits: lines f(x) = kx + b and planes f(x, y) = ax + by + c.

Public API:
    build_line_design(x, y) -> (matrix, vector)
    build_plane_design(x, y, z) -> (matrix, vector)
    LineFit / PlaneFit: stateful fitters with fit(), coefficients(), value()
    fit_line(x, y, ...) -> LineFit
    fit_plane(x, y, z, ...) -> PlaneFit

Example:
    >>> from pylinfit.linear import LineFit, build_line_design
    >>> matrix, vector = build_line_design(x, y)
    >>> fitter = LineFit()
    >>> fitter.fit(matrix, vector, eps=1e-4)
    >>> fitter.value(5.0)
"""

from pylinfit.linear._common import POINT_COUNT, LINE_COLUMNS, PLANE_COLUMNS
from pylinfit.linear.design import Design, build_line_design, build_plane_design
from pylinfit.linear.solution import LineCoefficients, PlaneCoefficients, FitSolution
from pylinfit.linear.solvers import LineFit, PlaneFit, fit_line, fit_plane

__all__ = [
    "POINT_COUNT",
    "LINE_COLUMNS",
    "PLANE_COLUMNS",
    "Design",
    "build_line_design",
    "build_plane_design",
    "LineCoefficients",
    "PlaneCoefficients",
    "FitSolution",
    "LineFit",
    "PlaneFit",
    "fit_line",
    "fit_plane",
]
