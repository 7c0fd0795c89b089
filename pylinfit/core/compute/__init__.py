"""
Shared compute infrastructure for PyLinFit.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    precision: float32 constants and condition numbers
    tolerances: Default singular value threshold and comparison tiers
    linalg: Linear algebra kernels (SVD)
"""

from pylinfit.core.compute.timing import Timer

__all__ = [
    "Timer",
]
