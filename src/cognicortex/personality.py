"""
Personality Profile: named trait metrics with bounded-rate adaptation.

Influence on processing is a weighted sum of metrics squashed by tanh:
    p = tanh(Σ_k w_k m_k)

Feedback nudges each metric by a rule looked up from its name. Well-known
traits use thresholded steps; any other metric moves proportionally:
    Δm = η * f * 0.02

All metrics stay in [-1, 1].
"""

import logging
import math
import time
from collections import deque
from dataclasses import asdict, dataclass, field
from typing import Deque, Dict, Optional

from cognicortex.utils import clamp

logger = logging.getLogger(__name__)


INFLUENCE_WEIGHTS: Dict[str, float] = {
    "creativity": 0.3,
    "analytical": 0.2,
    "empathy": 0.25,
    "assertiveness": 0.15,
}
DEFAULT_INFLUENCE_WEIGHT = 0.1

DEFAULT_FEEDBACK_COEFFICIENT = 0.02


@dataclass(frozen=True)
class FeedbackRule:
    """
    Thresholded adjustment for a named metric.

    The metric rises by ``learning_rate * step`` when feedback exceeds
    ``raise_above`` and falls by the same amount when feedback is below
    ``lower_below``. A threshold of None disables that direction.
    """
    step: float
    raise_above: Optional[float] = None
    lower_below: Optional[float] = None

    def delta(self, feedback: float, learning_rate: float) -> float:
        if self.raise_above is not None and feedback > self.raise_above:
            return learning_rate * self.step
        if self.lower_below is not None and feedback < self.lower_below:
            return -learning_rate * self.step
        return 0.0


FEEDBACK_RULES: Dict[str, FeedbackRule] = {
    "creativity": FeedbackRule(step=0.1, raise_above=0.5, lower_below=-0.5),
    "analytical": FeedbackRule(step=0.05, raise_above=0.3),
}


@dataclass
class AdaptationEvent:
    """
    One processed request, awaiting (or holding) user feedback.

    Attributes:
        timestamp: Creation time (seconds since epoch)
        category: Task category of the request
        feedback: User feedback in [-1, 1]; 0 until feedback arrives
        context: Request context string
        delta: Reserved per-metric adjustment record
    """
    timestamp: float
    category: str
    feedback: float = 0.0
    context: str = ""
    delta: Dict[str, float] = field(default_factory=dict)


class PersonalityProfile:
    """
    Trait metrics of one owner plus the history of adaptation events.

    Attributes:
        owner_id (str): Profile owner
        metrics (Dict[str, float]): Trait name -> value in [-1, 1]
        history (Deque[AdaptationEvent]): Events in insertion order
        learning_rate (float): Adaptation rate (> 0)
        max_history (Optional[int]): History bound, None for unbounded
    """

    def __init__(self, owner_id: str = "default", learning_rate: float = 0.01,
                 max_history: Optional[int] = None):
        if learning_rate <= 0:
            raise ValueError(f"learning_rate must be positive, got {learning_rate}")
        if max_history is not None and max_history <= 0:
            raise ValueError(f"max_history must be positive or None, got {max_history}")

        self.owner_id = owner_id
        self.learning_rate = learning_rate
        self.max_history = max_history
        self.metrics: Dict[str, float] = {}
        self.history: Deque[AdaptationEvent] = deque(maxlen=max_history)

    def set_metric(self, name: str, value: float):
        """Store ``value`` clamped to [-1, 1] under ``name``."""
        self.metrics[name] = clamp(float(value), -1.0, 1.0)
        logger.info("Personality metric %s = %.3f", name, self.metrics[name])

    def compute_influence(self, task_category: str, context: str) -> float:
        """
        Compute the bounded influence of the current metrics.

        Records a new adaptation event (feedback 0) for this request.

        Args:
            task_category: Category of the request being processed
            context: Context string of the request

        Returns:
            float: tanh of the weighted metric sum, in (-1, 1)
        """
        weighted = sum(
            value * INFLUENCE_WEIGHTS.get(name, DEFAULT_INFLUENCE_WEIGHT)
            for name, value in self.metrics.items()
        )

        self.history.append(AdaptationEvent(
            timestamp=time.time(),
            category=task_category,
            context=context,
        ))

        return math.tanh(weighted)

    def apply_feedback(self, feedback: float) -> bool:
        """
        Attach feedback to the latest event and adapt the metrics.

        Args:
            feedback: User feedback, clamped to [-1, 1]

        Returns:
            bool: False when there is no event to attach feedback to
        """
        if not self.history:
            logger.debug("Feedback %.3f ignored: adaptation history is empty", feedback)
            return False

        feedback = clamp(float(feedback), -1.0, 1.0)
        self.history[-1].feedback = feedback

        for name, value in self.metrics.items():
            rule = FEEDBACK_RULES.get(name)
            if rule is not None:
                delta = rule.delta(feedback, self.learning_rate)
            else:
                delta = self.learning_rate * feedback * DEFAULT_FEEDBACK_COEFFICIENT
            self.metrics[name] = clamp(value + delta, -1.0, 1.0)

        logger.debug("Applied feedback %.3f to %d metrics", feedback, len(self.metrics))
        return True

    def snapshot(self) -> Dict:
        """
        Get a JSON-serializable copy of the profile.

        Returns:
            dict: owner_id, metrics, adaptation_history, learning_rate, max_history
        """
        return {
            'owner_id': self.owner_id,
            'metrics': dict(self.metrics),
            'adaptation_history': [asdict(event) for event in self.history],
            'learning_rate': self.learning_rate,
            'max_history': self.max_history,
        }

    def __repr__(self):
        return (f"PersonalityProfile(owner={self.owner_id!r}, "
                f"metrics={len(self.metrics)}, history={len(self.history)})")
