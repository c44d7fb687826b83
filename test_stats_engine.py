"""
Tests for the statistical building blocks: outlier flagging, ranks,
Mann-Whitney U, the normal CDF and Cohen's d
"""

import math
import warnings
from datetime import date, timedelta

import numpy as np
import pytest
from scipy import stats

from nof1_analysis import (
    Sample,
    flag_outliers,
    rank_test,
    average_ranks,
    normal_cdf,
    cohens_d,
    classify_effect_size,
    DegenerateVarianceWarning,
)
from nof1_analysis.core.rank_test import two_tailed_p_value
from nof1_analysis.core.effect_size import pooled_std


def _series(values, start=date(2024, 1, 1)):
    return [Sample(date=start + timedelta(days=i), value=v) for i, v in enumerate(values)]


# ---------------------------------------------------------------- outliers

def test_flag_outliers_marks_extreme_point():
    values = [50, 51] * 10
    values.insert(5, 200)
    flagged = flag_outliers(_series(values))

    assert len(flagged) == len(values)
    assert [s.value for s in flagged] == values
    assert [i for i, s in enumerate(flagged) if s.is_outlier] == [5]
    assert all(s.is_outlier is not None for s in flagged)


def test_flag_outliers_uses_unfiltered_population():
    # Two extremes inflate the std enough that neither crosses 3 sigma
    values = [50] * 10 + [200, 200]
    flagged = flag_outliers(_series(values))
    assert not any(s.is_outlier for s in flagged)


def test_flag_outliers_does_not_mutate_input():
    series = _series([1.0, 2.0, 100.0])
    flag_outliers(series)
    assert all(s.is_outlier is None for s in series)


def test_flag_outliers_zero_variance_flags_nothing():
    flagged = flag_outliers(_series([7.0] * 8))
    assert [s.is_outlier for s in flagged] == [False] * 8


def test_flag_outliers_short_series():
    assert flag_outliers([]) == []
    flagged = flag_outliers(_series([3.0]))
    assert flagged[0].is_outlier is False


def test_flag_outliers_threshold_is_strict():
    series = _series([0.0, 0.0, 0.0, 10.0])
    values = np.array([0.0, 0.0, 0.0, 10.0])
    z = abs(10.0 - values.mean()) / values.std(ddof=1)

    assert flag_outliers(series, threshold=z)[3].is_outlier is False
    assert flag_outliers(series, threshold=z - 1e-9)[3].is_outlier is True


def test_flag_outliers_rejects_bad_threshold():
    with pytest.raises(ValueError):
        flag_outliers(_series([1.0, 2.0]), threshold=0)


# ------------------------------------------------------------------- ranks

def test_average_ranks_all_tied():
    assert average_ranks([1, 1, 1, 1, 1, 1]).tolist() == [3.5] * 6


def test_average_ranks_mixed_ties_follow_input_order():
    ranks = average_ranks([10, 20, 10, 30, 20])
    assert ranks.tolist() == [1.5, 3.5, 1.5, 5.0, 3.5]


def test_rank_test_maximal_ties():
    result = rank_test([1, 1, 1], [1, 1, 1])
    assert result.u == 4.5
    assert result.rank_sum == 10.5
    assert result.p_value == pytest.approx(1.0, abs=1e-6)
    assert 0.0 <= result.p_value <= 1.0


def test_rank_test_u_partition():
    a = [3.1, 4.0, 4.0, 8.2, 9.9]
    b = [1.0, 4.0, 5.5, 6.0, 12.0, 13.5]
    result = rank_test(a, b)

    u1 = len(a) * len(b) + len(a) * (len(a) + 1) / 2 - result.rank_sum
    u2 = len(a) * len(b) - u1
    assert u1 + u2 == len(a) * len(b)
    assert result.u == min(u1, u2)


def test_rank_test_symmetry():
    a = [1.2, 3.4, 3.4, 5.0, 7.0, 8.1]
    b = [2.0, 3.4, 6.0, 9.0, 9.0, 10.0, 11.0]
    forward = rank_test(a, b)
    backward = rank_test(b, a)

    assert forward.u == backward.u
    assert forward.p_value == backward.p_value


def test_rank_test_complete_separation():
    result = rank_test([10] * 6, [20] * 6)
    assert result.u == 0
    assert result.p_value < 0.01


def test_rank_test_matches_scipy_without_ties():
    rng = np.random.default_rng(3)
    a = rng.normal(0, 1, 25)
    b = rng.normal(0.6, 1, 30)

    ours = rank_test(a, b)
    reference = stats.mannwhitneyu(a, b, alternative='two-sided',
                                   use_continuity=False, method='asymptotic')
    assert ours.p_value == pytest.approx(reference.pvalue, abs=1e-6)


def test_rank_test_exact_cdf_close_to_approximation():
    a = [1, 2, 3, 4, 5, 6, 7]
    b = [4, 5, 6, 7, 8, 9, 10, 11]
    approx = rank_test(a, b)
    exact = rank_test(a, b, cdf='exact')
    assert exact.u == approx.u
    assert exact.p_value == pytest.approx(approx.p_value, abs=1e-6)


def test_rank_test_rejects_empty_group():
    with pytest.raises(ValueError):
        rank_test([], [1.0, 2.0])


# -------------------------------------------------------------- normal cdf

@pytest.mark.parametrize("z", [-4.0, -1.96, -0.5, 0.0, 0.3, 1.0, 1.96, 3.5])
def test_normal_cdf_accuracy(z):
    assert normal_cdf(z) == pytest.approx(stats.norm.cdf(z), abs=1e-7)


def test_two_tailed_p_value_is_clamped():
    assert two_tailed_p_value(0.0) <= 1.0
    assert two_tailed_p_value(40.0) >= 0.0
    assert two_tailed_p_value(1.959964, cdf='exact') == pytest.approx(0.05, abs=1e-6)


def test_two_tailed_p_value_unknown_method():
    with pytest.raises(ValueError):
        two_tailed_p_value(1.0, cdf='bootstrap')


# ------------------------------------------------------------- effect size

def test_cohens_d_sign_and_value():
    d = cohens_d(10.0, 12.0, 2.0, 2.0, 10, 10)
    assert d == pytest.approx(1.0)
    assert cohens_d(12.0, 10.0, 2.0, 2.0, 10, 10) == pytest.approx(-1.0)


def test_pooled_std_weights_by_size():
    expected = math.sqrt((4 * 1.0 + 9 * 4.0) / 13)
    assert pooled_std(1.0, 2.0, 5, 10) == pytest.approx(expected)


def test_cohens_d_zero_pooled_std_warns():
    with pytest.warns(DegenerateVarianceWarning):
        d = cohens_d(10.0, 20.0, 0.0, 0.0, 6, 6)
    assert d == math.inf

    with pytest.warns(DegenerateVarianceWarning):
        d = cohens_d(20.0, 10.0, 0.0, 0.0, 6, 6)
    assert d == -math.inf

    with pytest.warns(DegenerateVarianceWarning):
        d = cohens_d(5.0, 5.0, 0.0, 0.0, 6, 6)
    assert d == 0.0


def test_cohens_d_regular_case_is_silent():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        cohens_d(1.0, 2.0, 1.0, 1.0, 5, 5)


@pytest.mark.parametrize("d, label", [
    (0.0, 'negligible'),
    (-0.19, 'negligible'),
    (0.2, 'small'),
    (-0.49, 'small'),
    (0.5, 'medium'),
    (0.79, 'medium'),
    (0.8, 'large'),
    (-3.0, 'large'),
    (math.inf, 'large'),
])
def test_classify_effect_size(d, label):
    assert classify_effect_size(d) == label


def test_cohens_d_near_zero_pooled_std_is_degenerate():
    pre = np.full(6, 0.1)
    post = np.full(6, 0.2)

    with pytest.warns(DegenerateVarianceWarning):
        d = cohens_d(pre.mean(), post.mean(), pre.std(ddof=1), post.std(ddof=1), 6, 6)
    assert d == math.inf


def test_analyze_constant_decimal_groups_matches_integer_groups():
    from nof1_analysis import analyze

    split = date(2024, 3, 1)

    def experiment(low, high):
        return ([Sample(date=split - timedelta(days=i + 1), value=low) for i in range(6)]
                + [Sample(date=split + timedelta(days=i), value=high) for i in range(6)])

    with pytest.warns(DegenerateVarianceWarning):
        decimal = analyze(experiment(0.1, 0.2), split)
    with pytest.warns(DegenerateVarianceWarning):
        integer = analyze(experiment(10, 20), split)

    assert decimal.cohens_d == integer.cohens_d == math.inf
    assert decimal.p_value == integer.p_value


def test_flag_outliers_constant_decimal_series_flags_nothing():
    flagged = flag_outliers(_series([0.1] * 25))
    assert not any(s.is_outlier for s in flagged)
