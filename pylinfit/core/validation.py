"""
Input validation utilities for PyLinFit.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinfit.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
    dtype: type = np.float32,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a floating point numpy array.
    
    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Floating point dtype of the returned array
        
    Returns:
        numpy.ndarray of the requested dtype
        
    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(dtype, copy=False)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_length(array: NDArray[np.floating[Any]], length: int, name: str) -> None:
    """
    Verify array has exactly the given number of samples.
    
    Args:
        array: Array to check
        length: Required size of the first dimension
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If the first dimension has a different size
    """
    n = array.shape[0] if array.ndim else 0
    if n != length:
        raise DimensionError(
            f"{name}: requires exactly {length} samples, got {n}"
        )

