"""
Intervention Analyzer

Splits a metric series at the intervention date and decides whether the
post-intervention values differ from the baseline by more than chance.

Pipeline:
    1. Sort by date (stable, on a copy)
    2. Drop samples flagged as outliers
    3. Partition into pre (date < split) and post (date >= split)
    4. Require at least ``min_group_size`` samples on each side
    5. Mann-Whitney U test + Cohen's d
    6. Verdict: SIGNAL if p < 0.05, else NOISE
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .exceptions import InsufficientDataError
from .outliers import flag_outliers
from .rank_test import rank_test, CDF_METHODS
from .effect_size import cohens_d
from ..utils.descriptive import mean_and_std
from ..utils.series import Sample, DateLike, to_date

SIGNIFICANCE_LEVEL = 0.05
MIN_GROUP_SIZE = 5


class Verdict(str, Enum):
    SIGNAL = 'SIGNAL'
    NOISE = 'NOISE'


def classify_verdict(p_value: float) -> Verdict:
    return Verdict.SIGNAL if p_value < SIGNIFICANCE_LEVEL else Verdict.NOISE


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one pre/post comparison"""
    pre_mean: float
    post_mean: float
    pre_std: float  # sample std, n-1
    post_std: float
    p_value: float
    cohens_d: float
    n_pre: int
    n_post: int
    u_statistic: float
    verdict: Verdict

    @property
    def is_signal(self) -> bool:
        return self.verdict == Verdict.SIGNAL

    def to_dict(self) -> dict:
        """Serialise with the camelCase keys presentation layers expect"""
        return {
            'preMean': self.pre_mean,
            'postMean': self.post_mean,
            'preStd': self.pre_std,
            'postStd': self.post_std,
            'pValue': self.p_value,
            'cohensD': self.cohens_d,
            'nPre': self.n_pre,
            'nPost': self.n_post,
            'uStatistic': self.u_statistic,
            'verdict': self.verdict.value,
        }


@dataclass
class AnalysisConfig:
    """
    Configuration for InterventionAnalyzer.

    Attributes:
        outlier_threshold: z-score above which a sample is flagged. Default 3.0.
        min_group_size: Minimum non-outlier samples per side. Values below 5
                        are raised to 5.
        cdf: Normal CDF used for the p-value, 'approximation' (default) or 'exact'.
    """
    outlier_threshold: float = 3.0
    min_group_size: int = MIN_GROUP_SIZE
    cdf: str = 'approximation'

    def __post_init__(self):
        if self.outlier_threshold <= 0:
            raise ValueError(f"outlier_threshold must be positive, got {self.outlier_threshold}")

        self.min_group_size = max(MIN_GROUP_SIZE, int(self.min_group_size))

        self.cdf = self.cdf.lower()
        if self.cdf not in CDF_METHODS:
            raise ValueError(f"Unknown cdf method '{self.cdf}'. Choose from {CDF_METHODS}")

    def to_dict(self) -> dict:
        return asdict(self)


def split_at(samples: Iterable[Sample], split_date: DateLike) -> Tuple[List[float], List[float]]:
    """
    Partition non-outlier values into pre and post groups.

    The split date itself belongs to the post group.

    Returns:
        Tuple of (pre_values, post_values), each in date order
    """
    split_day = to_date(split_date)
    ordered = sorted(samples, key=lambda s: s.date)
    clean = [s for s in ordered if not s.is_outlier]

    pre = [s.value for s in clean if s.date < split_day]
    post = [s.value for s in clean if s.date >= split_day]
    return pre, post


class InterventionAnalyzer:
    """
    Pre/post intervention analysis for a single metric series.

    Stateless between calls: the same inputs always give the same result and
    one instance may be shared across threads.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        """
        Initialize analyzer.

        Args:
            config: Analysis settings; defaults to AnalysisConfig()
        """
        self.config = config or AnalysisConfig()

    def flag(self, samples: Iterable[Sample]) -> List[Sample]:
        """Flag outliers using the configured threshold"""
        return flag_outliers(list(samples), threshold=self.config.outlier_threshold)

    def analyze(self, samples: Iterable[Sample], split_date: DateLike) -> AnalysisResult:
        """
        Compare pre- and post-intervention values.

        Outlier flags already present on ``samples`` are honoured; nothing is
        re-flagged here.

        Args:
            samples: Observations in any order
            split_date: First day of the intervention

        Returns:
            AnalysisResult

        Raises:
            InsufficientDataError: If either side has too few non-outlier samples
        """
        pre, post = split_at(samples, split_date)

        min_size = self.config.min_group_size
        if len(pre) < min_size or len(post) < min_size:
            raise InsufficientDataError(len(pre), len(post), min_size)

        pre_mean, pre_std = mean_and_std(pre)
        post_mean, post_std = mean_and_std(post)

        test = rank_test(pre, post, cdf=self.config.cdf)
        d = cohens_d(pre_mean, post_mean, pre_std, post_std, len(pre), len(post))

        return AnalysisResult(
            pre_mean=pre_mean,
            post_mean=post_mean,
            pre_std=pre_std,
            post_std=post_std,
            p_value=test.p_value,
            cohens_d=d,
            n_pre=len(pre),
            n_post=len(post),
            u_statistic=test.u,
            verdict=classify_verdict(test.p_value)
        )

    def run(self, samples: Iterable[Sample], split_date: DateLike) -> Tuple[List[Sample], AnalysisResult]:
        """
        Flag outliers, then analyze.

        Returns:
            Tuple of (flagged samples in input order, AnalysisResult)
        """
        flagged = self.flag(samples)
        return flagged, self.analyze(flagged, split_date)


def analyze(samples: Iterable[Sample], split_date: DateLike) -> AnalysisResult:
    """Analyze with default settings. See InterventionAnalyzer.analyze."""
    return InterventionAnalyzer().analyze(samples, split_date)
