"""
Session visualization for the Cognitive Cortex engine.

Plots the evolution of emotional state, tier activations and scores
recorded by a SessionTrace.
"""

import numpy as np
import matplotlib.pyplot as plt
from typing import Optional

from cognicortex.trace import SessionTrace


def plot_emotional_trajectory(trace: SessionTrace,
                              title: str = "Emotional State",
                              figsize: tuple = (10, 6),
                              save_path: Optional[str] = None):
    """
    Plot valence, arousal, dominance and stability over a session.

    Args:
        trace: Recorded session
        title: Plot title
        figsize: Figure size
        save_path: Optional path to save figure
    """
    data = trace.as_arrays()
    steps = data['step']

    fig, ax = plt.subplots(figsize=figsize)

    ax.plot(steps, data['valence'], linewidth=2, label='Valence', color='#2E86AB')
    ax.plot(steps, data['arousal'], linewidth=2, label='Arousal', color='#F18F01')
    ax.plot(steps, data['dominance'], linewidth=2, label='Dominance', color='#C73E1D')
    ax.plot(steps, data['stability'], linewidth=2, linestyle='--', label='Stability', color='#6A994E')

    ax.set_xlabel('Request', fontsize=12)
    ax.set_ylabel('Value', fontsize=12)
    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.legend(loc='best')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')

    return fig


def plot_activation_profile(trace: SessionTrace,
                            title: str = "Tier Activations",
                            figsize: tuple = (10, 6),
                            save_path: Optional[str] = None):
    """
    Plot mean fast and deep activations per request, with the memory
    admission threshold and buffer size.

    Args:
        trace: Recorded session
        title: Plot title
        figsize: Figure size
        save_path: Optional path to save figure
    """
    data = trace.as_arrays()
    steps = data['step']

    fig, ax1 = plt.subplots(figsize=figsize)

    ax1.plot(steps, data['fast_mean'], linewidth=2, label='Fast tier mean', color='#2E86AB')
    ax1.plot(steps, data['deep_mean'], linewidth=2, label='Deep tier mean', color='#C73E1D')
    ax1.axhline(0.5, color='gray', linestyle=':', linewidth=1, label='Admission threshold')
    ax1.set_xlabel('Request', fontsize=12)
    ax1.set_ylabel('Mean activation', fontsize=12)
    ax1.grid(True, alpha=0.3)

    # Memory size on secondary axis
    ax2 = ax1.twinx()
    ax2.step(steps, data['memory_count'], where='post', color='#6A994E', alpha=0.6,
             label='Memory items')
    ax2.set_ylabel('Memory items', fontsize=12)

    lines = ax1.get_legend_handles_labels()
    lines2 = ax2.get_legend_handles_labels()
    ax1.legend(lines[0] + lines2[0], lines[1] + lines2[1], loc='upper left')
    ax1.set_title(title, fontsize=14, fontweight='bold')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')

    return fig


def plot_confidence_adaptation(trace: SessionTrace,
                               title: str = "Confidence & Adaptation",
                               figsize: tuple = (12, 5),
                               save_path: Optional[str] = None):
    """
    Plot confidence, adaptation score and personality influence side by side.

    Args:
        trace: Recorded session
        title: Plot title
        figsize: Figure size
        save_path: Optional path to save figure
    """
    data = trace.as_arrays()
    steps = data['step']

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=figsize)

    ax1.plot(steps, data['confidence'], linewidth=2, color='#2E86AB')
    ax1.set_ylim(-0.05, 1.05)
    ax1.set_xlabel('Request', fontsize=12)
    ax1.set_ylabel('Confidence', fontsize=12)
    ax1.set_title('Confidence', fontsize=12)
    ax1.grid(True, alpha=0.3)

    ax2.plot(steps, data['adaptation_score'], linewidth=2, label='Adaptation score', color='#F18F01')
    ax2.plot(steps, data['personality_influence'], linewidth=2, label='Personality influence',
             color='#C73E1D')
    ax2.axhline(0.0, color='gray', linewidth=0.8)
    ax2.set_ylim(-1.05, 1.05)
    ax2.set_xlabel('Request', fontsize=12)
    ax2.set_title('Adaptation', fontsize=12)
    ax2.legend(loc='best')
    ax2.grid(True, alpha=0.3)

    fig.suptitle(title, fontsize=14, fontweight='bold')
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')

    return fig


def summarize_trace(trace: SessionTrace) -> dict:
    """
    Summary statistics of a session, useful alongside the plots.

    Returns:
        dict: Request count and mean / final values of the main signals
    """
    if len(trace) == 0:
        return {'requests': 0}

    data = trace.as_arrays()
    return {
        'requests': len(trace),
        'mean_confidence': float(np.mean(data['confidence'])),
        'final_stability': float(data['stability'][-1]),
        'final_arousal': float(data['arousal'][-1]),
        'final_dominance': float(data['dominance'][-1]),
        'final_adaptation': float(data['adaptation_score'][-1]),
        'memory_items': int(data['memory_count'][-1]),
    }
