"""
Generate Demo HRV Data

Simulated 60-day heart-rate-variability log with a real effect:
    days 0-29:  baseline ~50 ms (uniform +/- 5)
    days 30-59: +10 ms (uniform +/- 2.5) on top of baseline
    ~5% of days: sensor glitch of +40 or -30 ms
"""

import numpy as np
from datetime import date, timedelta
from typing import List, Optional, Tuple

from .series import Sample

DEMO_DAYS = 60
DEMO_INTERVENTION_DAY = 30


def generate_demo_data(
    n_days: int = DEMO_DAYS,
    intervention_day: int = DEMO_INTERVENTION_DAY,
    end_date: Optional[date] = None,
    seed: Optional[int] = None
) -> List[Sample]:
    """
    Generate a daily series with a step change at ``intervention_day``.

    Args:
        n_days: Number of daily samples
        intervention_day: Index of the first post-intervention day
        end_date: Day after the last sample (default: today)
        seed: Random seed for reproducible data

    Returns:
        Samples in date order, values rounded to 0.1
    """
    rng = np.random.default_rng(seed)
    end_date = end_date or date.today()
    start_date = end_date - timedelta(days=n_days)

    samples = []
    for i in range(n_days):
        value = 50 + (rng.random() - 0.5) * 10

        if i >= intervention_day:
            value += 10 + (rng.random() - 0.5) * 5

        # Sensor glitches
        if rng.random() > 0.95:
            value += 40 if rng.random() > 0.5 else -30

        samples.append(Sample(date=start_date + timedelta(days=i), value=round(float(value), 1)))

    return samples


def generate_demo_experiment(seed: Optional[int] = None) -> Tuple[List[Sample], date]:
    """Demo series together with its intervention date"""
    samples = generate_demo_data(seed=seed)
    return samples, samples[DEMO_INTERVENTION_DAY].date
