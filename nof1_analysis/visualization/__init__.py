"""
Visualization and reporting tools for intervention analysis
"""

from .intervention_report import (
    plot_analysis,
    create_analysis_report,
    critic_commentary,
    export_analysis
)

__all__ = [
    'plot_analysis',
    'create_analysis_report',
    'critic_commentary',
    'export_analysis'
]
