"""
Tolerance settings for single-precision fitting.

DEFAULT_EPS is the singular value threshold used by fit_line() and
fit_plane() when the caller does not pass one. The tiers describe how
closely a float32 fit is expected to reproduce exact coefficients and
are used by the test suite and by backend comparisons.
"""

from dataclasses import dataclass


# Singular values at or below this are treated as zero by default
DEFAULT_EPS: float = 1e-4


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Noiseless data, well-conditioned design
CPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-4,
    name='cpu_fp32',
    description='CPU single precision, reproduces exact coefficients',
)

# Design with cond > 1e3 (e.g. large, tightly clustered x)
CPU_FP32_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='cpu_fp32_ill_conditioned',
    description='CPU single precision, ill-conditioned (cond > 1e3)',
)

# Condition number past which a float32 fit is treated as ill-conditioned
ILL_CONDITIONED_THRESHOLD = 1e3


def select_tolerance(condition_number: float) -> ToleranceTier:
    """Select the tolerance tier for a design with the given condition number."""
    if condition_number > ILL_CONDITIONED_THRESHOLD:
        return CPU_FP32_ILL_CONDITIONED
    return CPU_FP32
