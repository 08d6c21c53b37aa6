"""
Tests for session tracing and its plots.
"""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

import numpy as np
import pytest
from cognicortex import CognitiveEngine
from cognicortex.trace import SessionTrace
from visualization import (
    plot_activation_profile,
    plot_confidence_adaptation,
    plot_emotional_trajectory,
    summarize_trace,
)


@pytest.fixture
def traced_session():
    trace = SessionTrace()
    engine = CognitiveEngine(trace=trace)
    engine.initialize_modules(4, 2)
    for i in range(6):
        engine.process({'sensory_data': [float(i), float(i) * 2],
                        'context': str(i), 'task_type': 'sampling'})
        engine.update_user_feedback(0.5)
    return engine, trace


class TestSessionTrace:
    """Test trace recording."""

    def test_one_record_per_request(self, traced_session):
        engine, trace = traced_session

        assert len(trace) == 6
        assert [r.step for r in trace.records] == [1, 2, 3, 4, 5, 6]
        assert trace.records[-1].stability == engine.state.emotional_state.stability

    def test_malformed_input_not_recorded(self, traced_session):
        engine, trace = traced_session
        engine.process("garbage")

        assert len(trace) == 6

    def test_as_arrays(self, traced_session):
        _, trace = traced_session
        data = trace.as_arrays()

        assert 'task_type' not in data
        assert data['confidence'].shape == (6,)
        assert np.all(np.diff(data['stability']) > 0)

    def test_summary(self, traced_session):
        _, trace = traced_session
        summary = summarize_trace(trace)

        assert summary['requests'] == 6
        assert 0.0 <= summary['mean_confidence'] <= 1.0
        assert summarize_trace(SessionTrace()) == {'requests': 0}


class TestPlots:
    """Smoke tests for session plots."""

    @pytest.mark.parametrize('plot', [
        plot_emotional_trajectory,
        plot_activation_profile,
        plot_confidence_adaptation,
    ])
    def test_plot_saves(self, traced_session, tmp_path, plot):
        _, trace = traced_session
        path = tmp_path / "plot.png"

        fig = plot(trace, save_path=str(path))

        assert path.exists()
        plt.close(fig)
