"""
Errors and warnings raised by the analysis engine
"""


class InsufficientDataError(ValueError):
    """Raised when a side of the split has too few non-outlier samples"""

    def __init__(self, n_pre: int, n_post: int, min_group_size: int = 5):
        self.n_pre = n_pre
        self.n_post = n_post
        self.min_group_size = min_group_size
        super().__init__(
            f"Insufficient data points (need at least {min_group_size} for both "
            f"pre and post, got pre={n_pre}, post={n_post})"
        )


class DegenerateVarianceWarning(UserWarning):
    """Issued when a standard deviation is zero and a ratio is undefined"""
