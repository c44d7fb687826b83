"""
Outlier Flagging

Marks observations whose z-score against the whole series exceeds a
threshold. Flagged samples stay in the series so they can still be shown;
the analyzer leaves them out of every statistic.
"""

import numpy as np
from typing import List, Sequence

from ..utils.series import Sample
from ..utils.descriptive import is_degenerate_spread


def flag_outliers(samples: Sequence[Sample], threshold: float = 3.0) -> List[Sample]:
    """
    Annotate each sample with an outlier flag.

    Mean and sample std are taken over all values, flagged or not; the bounds
    are not refined iteratively.

    Args:
        samples: Input series (any order)
        threshold: Number of std devs beyond which a sample is an outlier

    Returns:
        New list, same length and order as ``samples``, every sample flagged.
        With fewer than two samples, or zero (or rounding-level) spread,
        nothing is flagged.
    """
    if threshold <= 0:
        raise ValueError(f"threshold must be positive, got {threshold}")

    samples = list(samples)
    if len(samples) < 2:
        return [s.with_outlier_flag(False) for s in samples]

    values = np.array([s.value for s in samples], dtype=float)
    mean = np.mean(values)
    std = np.std(values, ddof=1)

    # Zero spread means no point is distinguishable from the rest
    if is_degenerate_spread(std, np.max(np.abs(values))):
        return [s.with_outlier_flag(False) for s in samples]

    z_scores = np.abs(values - mean) / std
    return [s.with_outlier_flag(z > threshold) for s, z in zip(samples, z_scores)]


def outlier_count(samples: Sequence[Sample]) -> int:
    return sum(1 for s in samples if s.is_outlier)
