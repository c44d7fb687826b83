"""
Intervention Visualization and Reporting

Presentation helpers built on top of AnalysisResult:
- Time series chart with outliers highlighted and the split date marked
- Plain-text verdict report with critic commentary
- Export of the flagged series to csv/json
"""

import pandas as pd
from typing import List, Optional, Tuple

from ..core.analyzer import AnalysisResult
from ..core.effect_size import classify_effect_size
from ..utils.series import Sample, DateLike, to_date, samples_to_frame

LARGE_EFFECT_D = 0.8


def critic_commentary(result: AnalysisResult) -> str:
    """
    Blunt one-paragraph reading of the result.

    Args:
        result: AnalysisResult

    Returns:
        Commentary text
    """
    p_text = f"{result.p_value:.4f}"

    if result.is_signal:
        text = (
            f"Finally, something that isn't just random noise. With a P-value of {p_text} "
            f"and an effect size of {result.cohens_d:.2f}, this looks like a legitimate "
            f"biological shift. "
        )
        if abs(result.cohens_d) > LARGE_EFFECT_D:
            text += "Actually, that effect size is massive. Did you break the sensor?"
        else:
            text += "It's statistically significant, but check your confounding variables."
        return text

    return (
        f"Stop deluding yourself. P-value is {p_text}. This is indistinguishable from "
        f"random variance. You likely just slept better one night and decided it was "
        f"the supplement. Null hypothesis not rejected. Go back to the drawing board."
    )


def create_analysis_report(
    result: AnalysisResult,
    metric_name: str = 'Metric',
    split_date: Optional[DateLike] = None,
    include_commentary: bool = True
) -> str:
    """
    Generate a text report summarizing the pre/post analysis.

    Args:
        result: AnalysisResult
        metric_name: Display name of the tracked metric
        split_date: Intervention date to print in the header
        include_commentary: Whether to append the critic paragraph

    Returns:
        Formatted text report
    """
    effect_label = classify_effect_size(result.cohens_d)

    report = []
    report.append("=" * 70)
    report.append("📊 N-OF-1 INTERVENTION ANALYSIS")
    report.append("=" * 70)
    report.append("")
    report.append(f"Metric: {metric_name}")
    if split_date is not None:
        report.append(f"Intervention Date: {to_date(split_date).isoformat()}")
    report.append(f"Verdict: {result.verdict.value}")
    report.append("")
    report.append("─" * 70)
    report.append("TEST STATISTICS")
    report.append("─" * 70)
    report.append(f"Mann-Whitney U: {result.u_statistic:.1f}")
    report.append(f"P-value: {result.p_value:.4f}")
    report.append(f"Cohen's d: {result.cohens_d:+.2f} ({effect_label})")
    report.append("")
    report.append("─" * 70)
    report.append("GROUP STATISTICS")
    report.append("─" * 70)
    report.append(f"Pre  (n={result.n_pre}): mean {result.pre_mean:.2f} ± {result.pre_std:.2f}")
    report.append(f"Post (n={result.n_post}): mean {result.post_mean:.2f} ± {result.post_std:.2f}")
    report.append(f"Absolute Change: {(result.post_mean - result.pre_mean):+.2f}")

    if result.pre_mean != 0:
        pct_change = (result.post_mean - result.pre_mean) / abs(result.pre_mean) * 100
        report.append(f"Percentage Change: {pct_change:+.1f}%")

    if include_commentary:
        report.append("")
        report.append("─" * 70)
        report.append("CRITIC")
        report.append("─" * 70)
        report.append(critic_commentary(result))

    report.append("")
    report.append("=" * 70)

    return "\n".join(report)


def plot_analysis(
    samples: List[Sample],
    split_date: DateLike,
    result: Optional[AnalysisResult] = None,
    metric_name: str = 'Value',
    title: Optional[str] = None,
    figsize: Tuple[int, int] = (14, 6)
):
    """
    Plot the series with outliers in red and the intervention date marked.

    Args:
        samples: Flagged series (output of flag_outliers)
        split_date: Intervention date
        result: If given, pre/post means are drawn as horizontal segments
        metric_name: Y-axis label
        title: Plot title
        figsize: Figure size

    Returns:
        matplotlib figure and axes
    """
    try:
        import matplotlib.pyplot as plt
        import matplotlib.dates as mdates
    except ImportError:
        raise ImportError("matplotlib is required for plotting. Install with: pip install matplotlib")

    df = samples_to_frame(samples).sort_values('date', kind='stable')
    split_ts = pd.Timestamp(to_date(split_date))
    outliers = df[df['is_outlier']]

    fig, ax = plt.subplots(figsize=figsize)

    ax.plot(df['date'], df['value'], color='#10b981', linewidth=2, marker='o', markersize=3,
            label=metric_name)
    if not outliers.empty:
        ax.scatter(outliers['date'], outliers['value'], color='#ef4444', zorder=3,
                   label='Outlier (ignored)')

    ax.axvline(x=split_ts, color='red', linestyle=':', linewidth=2, alpha=0.7,
               label='Intervention Start')

    if result is not None and not df.empty:
        first, last = df['date'].iloc[0], df['date'].iloc[-1]
        ax.hlines(result.pre_mean, first, split_ts, colors='gray', linestyles='--',
                  label=f'Pre mean ({result.pre_mean:.1f})')
        ax.hlines(result.post_mean, split_ts, last, colors='purple', linestyles='--',
                  label=f'Post mean ({result.post_mean:.1f})')

    ax.set_xlabel('Date', fontsize=12)
    ax.set_ylabel(metric_name, fontsize=12)
    ax.set_title(title or 'Time Series Analysis (Pre vs Post)', fontsize=14, fontweight='bold')
    ax.legend(loc='best', fontsize=10)
    ax.grid(True, alpha=0.3)
    ax.xaxis.set_major_formatter(mdates.DateFormatter('%Y-%m-%d'))
    fig.autofmt_xdate(rotation=45)

    if result is not None:
        ax.text(
            0.02, 0.98,
            f'Verdict: {result.verdict.value}\np = {result.p_value:.4f}\nd = {result.cohens_d:.2f}',
            transform=ax.transAxes,
            fontsize=10,
            verticalalignment='top',
            bbox=dict(boxstyle='round', facecolor='wheat', alpha=0.5)
        )

    plt.tight_layout()

    return fig, ax


def export_analysis(
    samples: List[Sample],
    split_date: DateLike,
    output_path: str,
    format: str = 'csv'
):
    """
    Export the flagged series with a pre/post marker.

    Args:
        samples: Flagged series
        split_date: Intervention date
        output_path: Output file path
        format: 'csv' or 'json'
    """
    export_df = samples_to_frame(samples).sort_values('date', kind='stable')
    export_df['intervention_active'] = export_df['date'] >= pd.Timestamp(to_date(split_date))

    if format == 'csv':
        export_df.to_csv(output_path, index=False, date_format='%Y-%m-%d')
    elif format == 'json':
        export_df.to_json(output_path, orient='records', date_format='iso')
    else:
        raise ValueError(f"Unsupported format: {format}")

    print(f"✅ Exported analysis data to: {output_path}")
