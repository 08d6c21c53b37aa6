"""
Cognitive Cortex: a stateful two-tier cognitive processing engine.

Sensory input drives a tier of fast units; their summed output drives a
tier of deep planning units. A personality profile biases the fast tier,
an emotional state biases the deep tier and is in turn updated from both
tiers. Significant requests are retained in a bounded memory buffer, and
every request yields a reasoning summary with confidence and adaptation
scores.
"""

__version__ = "0.1.0"

from cognicortex.config import EngineConfig, load_config
from cognicortex.engine import CognitiveEngine
from cognicortex.schema import CognitiveInput, ProcessResult

__all__ = ["CognitiveEngine", "EngineConfig", "load_config", "CognitiveInput", "ProcessResult"]
