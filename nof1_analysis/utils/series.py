"""
Sample Series Utilities

Typed observations for an N-of-1 experiment plus conversions between the
formats a caller is likely to hold: raw ``Date,Value`` CSV text, pandas
DataFrames, and lists of ``Sample`` records.
"""

import math
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Iterable, List, Optional, Union

import pandas as pd

DateLike = Union[date, datetime, str, pd.Timestamp]


@dataclass(frozen=True)
class Sample:
    """One observation of the tracked metric"""
    date: date
    value: float
    is_outlier: Optional[bool] = None  # None until flag_outliers runs

    def __post_init__(self):
        # Calendar day only
        object.__setattr__(self, 'date', to_date(self.date))

    def with_outlier_flag(self, flag: bool) -> 'Sample':
        """Return a copy of this sample carrying the given outlier flag"""
        return replace(self, is_outlier=bool(flag))

    def to_dict(self) -> dict:
        out = {'date': self.date.isoformat(), 'value': float(self.value)}
        if self.is_outlier is not None:
            out['isOutlier'] = self.is_outlier
        return out


def to_date(value: DateLike) -> date:
    """
    Normalise a date-like value to a calendar day.

    Time of day is dropped; strings are parsed with pandas.

    Raises:
        ValueError: If the value cannot be parsed as a date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    ts = pd.Timestamp(value)
    if pd.isna(ts):
        raise ValueError(f"Cannot interpret {value!r} as a date")
    return ts.date()


def make_samples(dates: Iterable[DateLike], values: Iterable[float]) -> List[Sample]:
    """Zip parallel date/value sequences into samples"""
    return [Sample(date=to_date(d), value=float(v)) for d, v in zip(dates, values)]


def parse_csv_text(text: str) -> List[Sample]:
    """
    Parse ``Date,Value`` text into samples.

    The first line is treated as a header. Column 0 is the date and column 1
    the value; extra columns are ignored. Blank lines and rows with an
    unparseable date or value are skipped.

    Args:
        text: Raw CSV contents

    Returns:
        Samples in file order

    Raises:
        ValueError: If no row could be parsed
    """
    samples = []

    for line in text.splitlines()[1:]:
        line = line.strip()
        if not line:
            continue

        parts = line.split(',')
        if len(parts) < 2:
            continue

        date_str = parts[0].strip()
        if not date_str:
            continue

        try:
            value = float(parts[1].strip())
            day = to_date(date_str)
        except (ValueError, TypeError):
            continue

        if math.isnan(value):
            continue

        samples.append(Sample(date=day, value=value))

    if not samples:
        raise ValueError("No valid data found. CSV must be: Date,Value")

    return samples


def samples_from_frame(
    df: pd.DataFrame,
    date_column: str = 'date',
    value_column: str = 'value',
    outlier_column: Optional[str] = None
) -> List[Sample]:
    """
    Build samples from a DataFrame.

    Args:
        df: DataFrame holding one observation per row
        date_column: Name of the date column
        value_column: Name of the value column
        outlier_column: Optional boolean column with precomputed outlier flags

    Returns:
        Samples in row order
    """
    for column in (date_column, value_column):
        if column not in df.columns:
            raise ValueError(f"Column '{column}' not found!")

    dates = pd.to_datetime(df[date_column])
    values = df[value_column].astype(float)

    if outlier_column is None:
        return make_samples(dates, values)

    flags = df[outlier_column].astype(bool)
    return [
        Sample(date=to_date(d), value=float(v), is_outlier=bool(f))
        for d, v, f in zip(dates, values, flags)
    ]


def samples_to_frame(samples: Iterable[Sample]) -> pd.DataFrame:
    """Convert samples to a DataFrame with date, value and is_outlier columns"""
    rows = [
        {'date': pd.Timestamp(s.date), 'value': s.value, 'is_outlier': bool(s.is_outlier)}
        for s in samples
    ]
    return pd.DataFrame(rows, columns=['date', 'value', 'is_outlier'])


def default_split_date(samples: List[Sample]) -> date:
    """Date of the middle sample, used when the caller has not picked one"""
    if not samples:
        raise ValueError("Cannot pick a split date from an empty series")
    return samples[len(samples) // 2].date
