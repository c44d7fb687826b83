"""
Descriptive statistics shared by the analyzer
"""

import numpy as np
from typing import Sequence, Tuple


def mean_and_std(values: Sequence[float]) -> Tuple[float, float]:
    """
    Mean and sample standard deviation (n-1 denominator) of a sequence.

    Args:
        values: At least two numbers

    Returns:
        Tuple of (mean, std)
    """
    arr = np.asarray(values, dtype=float)
    return float(np.mean(arr)), float(np.std(arr, ddof=1))


# Spread smaller than this fraction of the data's magnitude is rounding noise
SPREAD_RTOL = 1e-12


def is_degenerate_spread(std: float, scale: float) -> bool:
    """
    True when a standard deviation is zero, non-finite, or rounding noise.

    Constant values such as 0.1 leave ``np.std`` at ~1e-17 instead of 0, so
    the check is relative to ``scale`` (the magnitude of the data).
    """
    return not np.isfinite(std) or std <= SPREAD_RTOL * abs(scale)
