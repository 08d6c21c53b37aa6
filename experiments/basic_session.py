"""
Basic session experiment for the Cognitive Cortex engine.

Runs a scripted session demonstrating:
- Two-tier activation from a stream of sensory inputs
- Personality influence and feedback-driven trait adaptation
- Emotional state smoothing (stability converging to 1.0)
- Memory admission and FIFO eviction
"""

import argparse
import time
from pathlib import Path

import numpy as np

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))
sys.path.insert(0, str(Path(__file__).parent.parent))

from cognicortex import CognitiveEngine, load_config
from cognicortex.trace import SessionTrace
from cognicortex.utils import configure_logging

TASKS = ['analysis', 'planning', 'conversation', 'recall']


def sensory_stream(num_requests: int, width: int, random_seed: int):
    """Yield sensory vectors whose level drifts slowly upwards."""
    rng = np.random.RandomState(random_seed)
    for step in range(num_requests):
        level = 1.0 + 4.0 * step / max(num_requests - 1, 1)
        yield (level + rng.randn(width) * 0.5).tolist()


def run_basic_session(fast_count: int = 8,
                      deep_count: int = 4,
                      num_requests: int = 200,
                      sensory_width: int = 12,
                      feedback_every: int = 3,
                      random_seed: int = 42,
                      plot_dir: str = None,
                      verbose: bool = True):
    """
    Run basic session experiment.

    Args:
        fast_count: Number of fast units
        deep_count: Number of deep units
        num_requests: Number of requests to process
        sensory_width: Length of each sensory vector
        feedback_every: Apply user feedback after every N-th request
        random_seed: Random seed for reproducibility
        plot_dir: Optional directory to save plots into
        verbose: Whether to print progress

    Returns:
        dict: Engine, trace and final summaries
    """
    config = load_config()
    if verbose:
        configure_logging(config.log_level)
        print("=" * 70)
        print("COGNITIVE CORTEX - Basic Session")
        print("=" * 70)
        print(f"  Units: {fast_count} fast / {deep_count} deep")
        print(f"  Requests: {num_requests}")
        print(f"  Feedback every {feedback_every} requests")
        print("=" * 70)

    trace = SessionTrace()
    engine = CognitiveEngine(config, trace=trace)
    engine.initialize_modules(fast_count, deep_count)

    engine.set_personality_metric('creativity', 0.6)
    engine.set_personality_metric('analytical', 0.4)
    engine.set_personality_metric('curiosity', 0.2)
    engine.set_processing_mode('contemplative')

    rng = np.random.RandomState(random_seed)
    start_time = time.time()

    for step, sensory in enumerate(sensory_stream(num_requests, sensory_width, random_seed)):
        task = TASKS[step % len(TASKS)]
        result = engine.process({
            'sensory_data': sensory,
            'context': f"request {step}",
            'task_type': task,
        })

        if feedback_every and (step + 1) % feedback_every == 0:
            engine.update_user_feedback(float(np.clip(rng.normal(0.4, 0.4), -1, 1)))

        if verbose and (step + 1) % 50 == 0:
            print(f"Request {step + 1}/{num_requests}: "
                  f"confidence={result.confidence:.3f}, "
                  f"adaptation={result.adaptation_score:.3f}, "
                  f"influence={result.personality_influence:.3f}")

    elapsed = time.time() - start_time
    memory = engine.get_memory_summary()
    profile = engine.get_personality_profile()

    if verbose:
        print(f"\n  ✓ Session complete in {elapsed:.2f}s")
        print(f"  Final state: {engine}")
        print(f"  Memory: {memory['memory_count']} items, "
              f"mean importance {memory['average_importance']:.3f}")
        print(f"  Metrics: " + ", ".join(f"{k}={v:.4f}" for k, v in profile['metrics'].items()))

    if plot_dir:
        from visualization import (plot_emotional_trajectory, plot_activation_profile,
                                   plot_confidence_adaptation)
        out = Path(plot_dir)
        out.mkdir(parents=True, exist_ok=True)
        plot_emotional_trajectory(trace, save_path=str(out / 'emotional_trajectory.png'))
        plot_activation_profile(trace, save_path=str(out / 'activation_profile.png'))
        plot_confidence_adaptation(trace, save_path=str(out / 'confidence_adaptation.png'))
        if verbose:
            print(f"  Plots saved to {out}")

    return {
        'engine': engine,
        'trace': trace,
        'memory': memory,
        'profile': profile,
        'elapsed': elapsed,
    }


def main():
    """Main entry point with argument parsing."""
    parser = argparse.ArgumentParser(description='Run basic Cognitive Cortex session')

    parser.add_argument('--fast', type=int, default=8,
                      help='Number of fast units (default: 8)')
    parser.add_argument('--deep', type=int, default=4,
                      help='Number of deep units (default: 4)')
    parser.add_argument('--requests', type=int, default=200,
                      help='Number of requests (default: 200)')
    parser.add_argument('--width', type=int, default=12,
                      help='Sensory vector length (default: 12)')
    parser.add_argument('--feedback-every', type=int, default=3,
                      help='Feedback interval in requests, 0 disables (default: 3)')
    parser.add_argument('--seed', type=int, default=42,
                      help='Random seed (default: 42)')
    parser.add_argument('--plot-dir', type=str, default=None,
                      help='Directory to save plots into')
    parser.add_argument('--quiet', '-q', action='store_true',
                      help='Suppress output')

    args = parser.parse_args()

    return run_basic_session(
        fast_count=args.fast,
        deep_count=args.deep,
        num_requests=args.requests,
        sensory_width=args.width,
        feedback_every=args.feedback_every,
        random_seed=args.seed,
        plot_dir=args.plot_dir,
        verbose=not args.quiet
    )


if __name__ == '__main__':
    main()
