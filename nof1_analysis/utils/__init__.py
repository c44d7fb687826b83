"""Utility functions for N-of-1 analysis"""

from .series import (
    Sample,
    to_date,
    make_samples,
    parse_csv_text,
    samples_from_frame,
    samples_to_frame,
    default_split_date
)
from .descriptive import mean_and_std, is_degenerate_spread
from .demo_data import generate_demo_data, generate_demo_experiment

__all__ = [
    'Sample',
    'to_date',
    'make_samples',
    'parse_csv_text',
    'samples_from_frame',
    'samples_to_frame',
    'default_split_date',
    'mean_and_std',
    'is_degenerate_spread',
    'generate_demo_data',
    'generate_demo_experiment',
]
