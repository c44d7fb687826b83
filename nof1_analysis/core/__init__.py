"""Core statistical components for intervention analysis"""

from .exceptions import InsufficientDataError, DegenerateVarianceWarning
from .outliers import flag_outliers, outlier_count
from .rank_test import RankTestResult, rank_test, average_ranks, normal_cdf, two_tailed_p_value
from .effect_size import cohens_d, pooled_std, classify_effect_size
from .analyzer import (
    AnalysisConfig,
    AnalysisResult,
    InterventionAnalyzer,
    Verdict,
    analyze,
    split_at,
    SIGNIFICANCE_LEVEL,
    MIN_GROUP_SIZE
)

__all__ = [
    'InsufficientDataError',
    'DegenerateVarianceWarning',
    'flag_outliers',
    'outlier_count',
    'RankTestResult',
    'rank_test',
    'average_ranks',
    'normal_cdf',
    'two_tailed_p_value',
    'cohens_d',
    'pooled_std',
    'classify_effect_size',
    'AnalysisConfig',
    'AnalysisResult',
    'InterventionAnalyzer',
    'Verdict',
    'analyze',
    'split_at',
    'SIGNIFICANCE_LEVEL',
    'MIN_GROUP_SIZE',
]
