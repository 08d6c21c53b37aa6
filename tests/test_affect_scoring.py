"""
Unit tests for emotional state tracking and scoring.
"""

import numpy as np
import pytest
from cognicortex.affect import EmotionalState, EmotionalStateTracker
from cognicortex.personality import AdaptationEvent
from cognicortex.scoring import ScoringUnit
from cognicortex.utils import clamp, population_std, safe_mean


def _events(feedback):
    return [AdaptationEvent(timestamp=float(i), category='t', feedback=f)
            for i, f in enumerate(feedback)]


class TestEmotionalStateTracker:
    """Test exponential smoothing of the emotional state."""

    def test_single_update(self):
        """Test arousal, dominance and stability after one update."""
        state = EmotionalState()
        tracker = EmotionalStateTracker()

        tracker.update(state, [0.2, 0.4, 0.6], [0.048, 0.096])

        assert np.isclose(state.arousal, 0.5 * 0.9 + 0.4 * 0.1)
        assert np.isclose(state.dominance, 0.5 * 0.9 + 0.072 * 0.1)
        assert np.isclose(state.stability, 0.8 * 0.95 + 0.05)

    def test_valence_untouched(self):
        """Test that updates never change valence."""
        state = EmotionalState(valence=0.3)
        tracker = EmotionalStateTracker()

        for _ in range(20):
            tracker.update(state, [5.0, 9.0], [3.0])

        assert state.valence == 0.3

    def test_stability_converges_to_one(self):
        """Test stability approaches 1.0 regardless of input."""
        state = EmotionalState(stability=0.0)
        tracker = EmotionalStateTracker()

        for _ in range(300):
            tracker.update(state, [-4.0], [10.0])

        assert np.isclose(state.stability, 1.0, atol=1e-6)

    def test_empty_activations(self):
        """Test empty activation sequences count as mean 0."""
        state = EmotionalState()
        tracker = EmotionalStateTracker()

        tracker.update(state, [], [])

        assert np.isclose(state.arousal, 0.45)
        assert np.isclose(state.dominance, 0.45)

    def test_modifier(self):
        """Test the deep-tier modifier derived from valence."""
        tracker = EmotionalStateTracker()

        assert tracker.modifier(EmotionalState(valence=0.0)) == 1.0
        assert np.isclose(tracker.modifier(EmotionalState(valence=-0.5)), 0.95)


class TestConfidence:
    """Test confidence scoring."""

    def test_reference_value(self):
        """Test mean population deviation scaled by stability."""
        scoring = ScoringUnit()
        fast = [0.2, 0.4, 0.6]
        deep = [0.048, 0.096]

        expected = (np.std(fast) + np.std(deep)) / 2 * 0.81
        assert np.isclose(scoring.confidence(fast, deep, 0.81), expected)

    def test_empty_sequences(self):
        """Test empty sequences have zero deviation."""
        scoring = ScoringUnit()

        assert scoring.confidence([], [], 1.0) == 0.0

    def test_clamped_to_unit_interval(self):
        """Test confidence never leaves [0, 1]."""
        scoring = ScoringUnit()

        assert scoring.confidence([0.0, 100.0], [0.0, 50.0], 1.0) == 1.0
        assert scoring.confidence([0.0, 1.0], [0.0, 1.0], -2.0) == 0.0

    def test_overflowing_spread_bounded(self):
        """Test activations whose deviation overflows still score inside [0, 1]."""
        scoring = ScoringUnit()

        assert 0.0 <= scoring.confidence([1.5e308, -1.5e308], [1.5e308, 1.5e308], 1.0) <= 1.0
        assert 0.0 <= scoring.confidence([-1.7e308, 1.7e308], [], 1.0) <= 1.0


class TestAdaptationScore:
    """Test rolling adaptation scoring."""

    def test_empty_history_exactly_zero(self):
        """Test an empty history scores exactly 0."""
        assert ScoringUnit().adaptation_score([]) == 0.0

    def test_short_history_mean(self):
        """Test fewer than ten events are averaged over their own count."""
        score = ScoringUnit().adaptation_score(_events([0.8, 0.0]))

        assert np.isclose(score, 0.4)

    def test_window_uses_latest_ten(self):
        """Test only the ten most recent events count."""
        history = _events([-1.0] * 5 + [0.5] * 10)

        assert np.isclose(ScoringUnit().adaptation_score(history), 0.5)

    def test_bounded(self):
        """Test the score stays within [-1, 1]."""
        assert ScoringUnit().adaptation_score(_events([1.0] * 12)) == 1.0
        assert ScoringUnit().adaptation_score(_events([-1.0] * 3)) == -1.0

    def test_invalid_window(self):
        with pytest.raises(ValueError):
            ScoringUnit(window=0)


class TestGuardedStatistics:
    """Test statistics helpers on degenerate input."""

    def test_clamp_nan_maps_to_low(self):
        assert clamp(float('nan'), 0.0, 1.0) == 0.0
        assert clamp(float('nan'), -1.0, 1.0) == -1.0

    def test_clamp_infinities(self):
        assert clamp(float('inf'), 0.0, 1.0) == 1.0
        assert clamp(float('-inf'), 0.0, 1.0) == 0.0

    def test_overflowing_mean_is_zero(self):
        """Test a mean whose sum overflows is reported as 0."""
        assert safe_mean([1.5e308, 1.5e308]) == 0.0

    def test_overflowing_std_is_zero(self):
        assert population_std([-1.7e308, 1.7e308]) == 0.0

    def test_regular_values_unchanged(self):
        assert safe_mean([1.0, 2.0, 3.0]) == 2.0
        assert np.isclose(population_std([1.0, 3.0]), 1.0)
