"""
Effect Size (Cohen's d)

Standardised mean difference between the pre and post groups.
"""

import math
import warnings

from .exceptions import DegenerateVarianceWarning
from ..utils.descriptive import is_degenerate_spread

EFFECT_SIZE_BUCKETS = (
    (0.2, 'negligible'),
    (0.5, 'small'),
    (0.8, 'medium'),
)


def pooled_std(std1: float, std2: float, n1: int, n2: int) -> float:
    """Variance-weighted pooled standard deviation. Requires n1 + n2 > 2."""
    return math.sqrt(((n1 - 1) * std1 ** 2 + (n2 - 1) * std2 ** 2) / (n1 + n2 - 2))


def cohens_d(
    mean1: float,
    mean2: float,
    std1: float,
    std2: float,
    n1: int,
    n2: int
) -> float:
    """
    Cohen's d of group 2 relative to group 1.

    Positive values mean group 2 (post) is larger. The caller guarantees
    n1 + n2 > 2; this is not re-checked.

    When the pooled std is zero, or rounding noise relative to the means,
    the ratio is undefined. A DegenerateVarianceWarning is issued and the
    result is 0.0 for equal means, otherwise infinity signed like
    ``mean2 - mean1``.

    Args:
        mean1: Mean of group 1
        mean2: Mean of group 2
        std1: Sample std of group 1
        std2: Sample std of group 2
        n1: Size of group 1
        n2: Size of group 2

    Returns:
        Effect size (never NaN)
    """
    diff = mean2 - mean1
    pooled = pooled_std(std1, std2, n1, n2)

    if is_degenerate_spread(pooled, max(abs(mean1), abs(mean2))):
        warnings.warn(
            f"Pooled standard deviation is negligible (mean difference {diff:+.4g}); "
            f"Cohen's d is undefined",
            DegenerateVarianceWarning,
            stacklevel=2
        )
        if diff == 0:
            return 0.0
        return math.copysign(math.inf, diff)

    return diff / pooled


def classify_effect_size(d: float) -> str:
    """Qualitative bucket for |d|: negligible, small, medium or large"""
    magnitude = abs(d)
    for upper, label in EFFECT_SIZE_BUCKETS:
        if magnitude < upper:
            return label
    return 'large'
