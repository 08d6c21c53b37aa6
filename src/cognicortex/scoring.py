"""
Scoring: confidence and rolling adaptation.

Confidence is the mean population deviation of the two activation tiers,
scaled by emotional stability:
    c = clip((std(a) + std(b)) / 2 * stability, 0, 1)

Adaptation is the mean feedback of the most recent events:
    s = clip(mean(f_{n-k+1..n}), -1, 1),  k = min(n, 10)
"""

from itertools import islice
from typing import Iterable, Reversible

from cognicortex.personality import AdaptationEvent
from cognicortex.utils import ArrayLike, clamp, population_std, safe_mean


class ScoringUnit:
    """
    Derives per-request scores.

    Attributes:
        window (int): Number of recent adaptation events averaged
    """

    def __init__(self, window: int = 10):
        if window <= 0:
            raise ValueError(f"window must be positive, got {window}")
        self.window = window

    def confidence(self, fast_activations: ArrayLike, deep_activations: ArrayLike,
                   stability: float) -> float:
        """
        Confidence in [0, 1].

        Args:
            fast_activations: Fast-tier activations (empty -> deviation 0)
            deep_activations: Deep-tier activations (empty -> deviation 0)
            stability: Current emotional stability

        Returns:
            float: Clamped confidence
        """
        spread = (population_std(fast_activations) + population_std(deep_activations)) / 2.0
        return clamp(spread * stability, 0.0, 1.0)

    def adaptation_score(self, history: Reversible[AdaptationEvent]) -> float:
        """
        Mean feedback over the last ``window`` events, in [-1, 1].

        Returns exactly 0.0 for an empty history.
        """
        recent: Iterable[AdaptationEvent] = islice(reversed(history), self.window)
        feedback = [event.feedback for event in recent]
        if not feedback:
            return 0.0
        return clamp(safe_mean(feedback), -1.0, 1.0)
