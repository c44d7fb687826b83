"""
Demo: does a new evening routine raise HRV?

Generates 60 days of synthetic HRV data with a +10 ms step at day 30,
flags sensor glitches, and prints the verdict report.
"""

import sys
sys.path.insert(0, '.')

from nof1_analysis import (
    InterventionAnalyzer,
    AnalysisConfig,
    InsufficientDataError,
    generate_demo_experiment,
    outlier_count,
    create_analysis_report,
    plot_analysis,
)

print("=" * 70)
print("N-OF-1 DEMO: EVENING ROUTINE vs HRV")
print("=" * 70)

samples, intervention_date = generate_demo_experiment(seed=7)
print(f"\n✓ Generated {len(samples)} daily samples")
print(f"  Intervention date: {intervention_date}")

analyzer = InterventionAnalyzer(AnalysisConfig(outlier_threshold=3.0))

try:
    flagged, result = analyzer.run(samples, intervention_date)
except InsufficientDataError as e:
    print(f"\n✗ {e}")
    sys.exit(1)

n_outliers = outlier_count(flagged)
print(f"✓ Flagged {n_outliers} outlier(s)")

print()
print(create_analysis_report(result, metric_name='HRV (ms)', split_date=intervention_date))

try:
    fig, _ = plot_analysis(flagged, intervention_date, result=result, metric_name='HRV (ms)')
    fig.savefig('demo_analysis.png', dpi=120)
    print("\n✅ Saved chart to demo_analysis.png")
except ImportError as e:
    print(f"\n(skipping chart: {e})")
