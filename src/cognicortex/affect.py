"""
Emotional state and its per-request evolution.

Exponential smoothing from module outputs:
    arousal   <- 0.9 * arousal   + 0.1 * mean(fast)
    dominance <- 0.9 * dominance + 0.1 * mean(deep)
    stability <- 0.95 * stability + 0.05

Stability converges to 1.0 regardless of input. Valence is only set at
construction; the pipeline reads it but never writes it.
"""

from dataclasses import asdict, dataclass
from typing import Dict

from cognicortex.utils import ArrayLike, safe_mean


@dataclass
class EmotionalState:
    """Four-scalar affect state."""
    valence: float = 0.0
    arousal: float = 0.5
    dominance: float = 0.5
    stability: float = 0.8

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


class EmotionalStateTracker:
    """
    Update rule for an EmotionalState.

    The tracker holds only the smoothing coefficients; the state itself is
    owned by the CognitiveState it is applied to.
    """

    def __init__(self, retention: float = 0.9, gain: float = 0.1,
                 stability_retention: float = 0.95, stability_gain: float = 0.05,
                 valence_gain: float = 0.1):
        """
        Args:
            retention: Weight kept from previous arousal/dominance
            gain: Weight of the new activation mean
            stability_retention: Weight kept from previous stability
            stability_gain: Constant added to stability each update
            valence_gain: Scale of valence in the emotional modifier
        """
        self.retention = retention
        self.gain = gain
        self.stability_retention = stability_retention
        self.stability_gain = stability_gain
        self.valence_gain = valence_gain

    def modifier(self, state: EmotionalState) -> float:
        """Deep-tier multiplier: valence * 0.1 + 1.0."""
        return state.valence * self.valence_gain + 1.0

    def update(self, state: EmotionalState, fast_activations: ArrayLike,
               deep_activations: ArrayLike) -> EmotionalState:
        """
        Fold one request's activations into ``state`` in place.

        Empty activation sequences contribute a mean of 0.

        Returns:
            EmotionalState: The same (mutated) state object
        """
        state.arousal = state.arousal * self.retention + safe_mean(fast_activations) * self.gain
        state.dominance = state.dominance * self.retention + safe_mean(deep_activations) * self.gain
        state.stability = state.stability * self.stability_retention + self.stability_gain
        return state
