"""
Visualization tools for the Cognitive Cortex engine.

Static matplotlib plots of a recorded SessionTrace: emotional trajectory,
tier activations and confidence / adaptation scores.
"""

from visualization.session_plots import (
    plot_emotional_trajectory,
    plot_activation_profile,
    plot_confidence_adaptation,
    summarize_trace
)

__all__ = [
    'plot_emotional_trajectory',
    'plot_activation_profile',
    'plot_confidence_adaptation',
    'summarize_trace',
]
