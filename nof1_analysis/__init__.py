"""
N-of-1 Analysis - Personal Experiment Statistics

Decides whether a biological metric changed after an intervention, using
outlier-robust, distribution-free statistics.

Main Components:
    - flag_outliers: z-score outlier flagging
    - rank_test: Mann-Whitney U with tie correction and normal approximation
    - cohens_d: Standardised effect size
    - InterventionAnalyzer: Pre/post split and SIGNAL/NOISE verdict

Quick Start:
    >>> from nof1_analysis import InterventionAnalyzer, create_analysis_report, generate_demo_experiment
    >>>
    >>> samples, intervention_date = generate_demo_experiment(seed=7)
    >>> analyzer = InterventionAnalyzer()
    >>> flagged, result = analyzer.run(samples, intervention_date)
    >>>
    >>> print(result.verdict.value, f"p={result.p_value:.4f}", f"d={result.cohens_d:.2f}")
    >>> print(create_analysis_report(result, metric_name='HRV (ms)'))

Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "N-of-1 Team"

from .core.analyzer import (
    InterventionAnalyzer,
    AnalysisConfig,
    AnalysisResult,
    Verdict,
    analyze,
    SIGNIFICANCE_LEVEL
)
from .core.outliers import flag_outliers, outlier_count
from .core.rank_test import rank_test, RankTestResult, average_ranks, normal_cdf
from .core.effect_size import cohens_d, classify_effect_size
from .core.exceptions import InsufficientDataError, DegenerateVarianceWarning
from .utils.series import (
    Sample,
    parse_csv_text,
    samples_from_frame,
    samples_to_frame,
    default_split_date
)
from .utils.demo_data import generate_demo_data, generate_demo_experiment
from .visualization import (
    plot_analysis,
    create_analysis_report,
    critic_commentary,
    export_analysis
)

__all__ = [
    # Main API
    'InterventionAnalyzer',
    'AnalysisConfig',
    'AnalysisResult',
    'Verdict',
    'analyze',
    'SIGNIFICANCE_LEVEL',

    # Statistical components
    'flag_outliers',
    'outlier_count',
    'rank_test',
    'RankTestResult',
    'average_ranks',
    'normal_cdf',
    'cohens_d',
    'classify_effect_size',

    # Errors
    'InsufficientDataError',
    'DegenerateVarianceWarning',

    # Data
    'Sample',
    'parse_csv_text',
    'samples_from_frame',
    'samples_to_frame',
    'default_split_date',
    'generate_demo_data',
    'generate_demo_experiment',

    # Visualization
    'plot_analysis',
    'create_analysis_report',
    'critic_commentary',
    'export_analysis',
]
