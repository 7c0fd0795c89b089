"""
Numerical precision constants and utilities.

All fitting happens in single precision; these helpers keep the
float32 constants in one place.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Working dtype for every design matrix, vector and coefficient
WORKING_DTYPE = np.float32


def condition_number(singular_values: NDArray[np.floating[Any]]) -> float:
    """
    Condition number from precomputed singular values.
    
    Args:
        singular_values: Singular values in non-increasing order
        
    Returns:
        Ratio of largest to smallest singular value.
        Returns inf if the smallest is zero or there are none.
    """
    s = np.asarray(singular_values)
    if s.size == 0 or s[-1] == 0:
        return float('inf')
    return float(s[0] / s[-1])
