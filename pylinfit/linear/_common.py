"""
Common constants and data types for eight-point linear fits.

Contains the fixed problem sizes and the frozen payload that goes inside
the backend Result[P] envelope. The payload is a pure data container.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


# Every fit uses exactly this many samples
POINT_COUNT = 8

# Design matrix columns: constant term plus one per independent variable
LINE_COLUMNS = 2
PLANE_COLUMNS = 3


@dataclass(frozen=True)
class SVDParams:
    """
    Parameter payload for an SVD least-squares solve.

    Attributes:
        solution: Solution vector in design-matrix column order
                  (constant term first).
        singular_values: Singular values of the design matrix.
        rank: Number of singular values above the solve threshold.
    """
    solution: NDArray[np.floating[Any]]
    singular_values: NDArray[np.floating[Any]]
    rank: int
