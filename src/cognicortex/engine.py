"""
Cognitive Engine: Main orchestrator for the two-tier processing pipeline.

Each request flows through
    sensory input -> fast tier (+ personality influence)
                  -> deep tier (+ emotional modifier)
                  -> emotional update -> memory admission -> scoring
and produces a ProcessResult. All state is owned by one engine instance;
callers must serialize access to it.
"""

import json
import logging
import time
from typing import Dict, List, Optional

import numpy as np

from cognicortex.affect import EmotionalState, EmotionalStateTracker
from cognicortex.config import EngineConfig
from cognicortex.errors import MalformedInputError
from cognicortex.host import HostTransport
from cognicortex.memory import MemoryStore
from cognicortex.modules import ModulePool
from cognicortex.personality import PersonalityProfile
from cognicortex.schema import CognitiveInput, ProcessResult
from cognicortex.scoring import ScoringUnit
from cognicortex.state import CognitiveState, ProcessingMode
from cognicortex.trace import SessionTrace
from cognicortex.utils import safe_mean
from cognicortex.weights import WeightStore

logger = logging.getLogger(__name__)


class CognitiveEngine:
    """
    Stateful cognitive processing engine.

    Attributes:
        config: Constants the engine was built with
        pool: Fast and deep processing units
        personality: Trait metrics and adaptation history
        state: Current task, attention, memory, emotion and mode
        tracker: Emotional update rule
        scoring: Confidence and adaptation scoring
        weights: Opaque parameter store
        host: Outbound host message queue
        trace: Optional per-request recorder
    """

    def __init__(self, config: Optional[EngineConfig] = None,
                 trace: Optional[SessionTrace] = None):
        """
        Build a fully initialized engine with empty unit pools.

        Args:
            config: Engine constants (defaults when omitted)
            trace: Optional SessionTrace that receives one record per request
        """
        self.config = config or EngineConfig()
        cfg = self.config

        self.pool = ModulePool(cfg.fast_weight_size, cfg.deep_weight_size, cfg.planning_depth)
        self.personality = PersonalityProfile(cfg.owner_id, cfg.learning_rate, cfg.max_history)
        self.state = CognitiveState(
            attention_focus=np.zeros(cfg.attention_size, dtype=np.float64),
            memory_buffer=MemoryStore(cfg.memory_capacity, cfg.significance_threshold),
            emotional_state=EmotionalState(
                valence=cfg.initial_valence,
                arousal=cfg.initial_arousal,
                dominance=cfg.initial_dominance,
                stability=cfg.initial_stability,
            ),
        )
        self.tracker = EmotionalStateTracker()
        self.scoring = ScoringUnit()
        self.weights = WeightStore(cfg.parameter_slots)
        self.host = HostTransport()
        self.trace = trace

        logger.info("Cognitive engine created for owner %s", cfg.owner_id)

    def initialize_modules(self, fast_count: int, deep_count: int):
        """Replace both unit pools."""
        self.pool.initialize(fast_count, deep_count)

    def process(self, payload) -> ProcessResult:
        """
        Run one request through the pipeline.

        Args:
            payload: CognitiveInput, mapping or JSON text with sensory_data,
                context and task_type

        Returns:
            ProcessResult: Scores and activations; an empty result with
            ok=False when the payload is malformed
        """
        try:
            request = CognitiveInput.from_payload(payload)
        except MalformedInputError as exc:
            logger.warning("Rejected malformed input: %s", exc)
            return ProcessResult.empty(str(exc))

        started = time.perf_counter()
        state = self.state
        emotion = state.emotional_state

        state.current_task = request.task_type
        state.update_attention(request.sensory_data)

        influence = self.personality.compute_influence(request.task_type, request.context)
        fast = self.pool.compute_fast_activations(request.sensory_data, influence)
        deep = self.pool.compute_deep_activations(fast, self.tracker.modifier(emotion))

        self.tracker.update(emotion, fast, deep)
        state.memory_buffer.consider_admission(request.task_type, request.context, fast, deep)

        confidence = self.scoring.confidence(fast, deep, emotion.stability)
        adaptation = self.scoring.adaptation_score(self.personality.history)
        reasoning = self._reasoning(request.task_type, fast, deep)

        result = ProcessResult(
            reasoning_result=reasoning,
            confidence=confidence,
            processing_time=(time.perf_counter() - started) * 1000.0,
            fast_activations=fast.tolist(),
            deep_activations=deep.tolist(),
            personality_influence=influence,
            adaptation_score=adaptation,
        )

        if self.trace is not None:
            self.trace.record(request.task_type, result, emotion, len(state.memory_buffer))

        return result

    def process_json(self, input_json: str) -> str:
        """
        JSON-in / JSON-out variant of process.

        Returns "{}" for malformed input.
        """
        result = self.process(input_json)
        if not result.ok:
            return "{}"
        return result.to_json()

    def _reasoning(self, task_type: str, fast: np.ndarray, deep: np.ndarray) -> str:
        return (f"Processed '{task_type}' with {safe_mean(fast) * 100:.1f}% sensory activation, "
                f"{safe_mean(deep) * 100:.1f}% planning depth, "
                f"emotional valence: {self.state.emotional_state.valence:.2f}")

    # Personality

    def set_personality_metric(self, name: str, value: float):
        self.personality.set_metric(name, value)

    def get_personality_profile(self) -> Dict:
        return self.personality.snapshot()

    def update_user_feedback(self, feedback: float) -> bool:
        """
        Apply feedback to the most recent adaptation event.

        Returns:
            bool: False when no request has been processed yet
        """
        return self.personality.apply_feedback(feedback)

    # State

    def set_processing_mode(self, name: str) -> ProcessingMode:
        mode = ProcessingMode.from_name(name)
        self.state.processing_mode = mode
        logger.info("Processing mode set to %s", mode.value)
        return mode

    def get_cognitive_state(self) -> Dict:
        """
        Snapshot of the cognitive state plus the latest unit activations.

        Returns:
            dict: current_task, attention_focus, memory_buffer,
            emotional_state, processing_mode, fast_activations,
            deep_activations
        """
        snapshot = self.state.to_dict()
        fast, deep = self.pool.get_activations()
        snapshot['fast_activations'] = fast.tolist()
        snapshot['deep_activations'] = deep.tolist()
        return snapshot

    def clear_memory_buffer(self):
        self.state.memory_buffer.clear()
        logger.info("Memory buffer cleared")

    def get_memory_summary(self) -> Dict:
        """
        Summarize retained memory and the current affect.

        Returns:
            dict: memory_count, average_importance, emotional_valence,
            current_task ("none" before the first request)
        """
        summary = self.state.memory_buffer.summary()
        return {
            'memory_count': summary['count'],
            'average_importance': summary['mean_importance'],
            'emotional_valence': self.state.emotional_state.valence,
            'current_task': self.state.current_task or "none",
        }

    # Model and weights

    def get_model_info(self) -> Dict[str, int]:
        return {
            'total_parameter_slots': len(self.weights),
            'fast_module_count': self.pool.fast_count,
            'deep_module_count': self.pool.deep_count,
        }

    def load_weights(self, data) -> bool:
        return self.weights.load_bytes(data)

    def get_weights_info(self) -> Dict:
        return self.weights.info()

    # Host transport

    def connect_to_desktop(self, desktop_id: str) -> bool:
        return self.host.connect(desktop_id)

    def send_host_message(self, message_type: str, payload: str) -> str:
        return self.host.enqueue(message_type, payload)

    def get_pending_messages(self) -> List[Dict]:
        return [message.to_dict() for message in self.host.drain()]

    def get_pending_messages_json(self) -> str:
        return json.dumps(self.get_pending_messages())

    def __repr__(self):
        return (f"CognitiveEngine(fast={self.pool.fast_count}, deep={self.pool.deep_count}, "
                f"memory={len(self.state.memory_buffer)}, "
                f"mode={self.state.processing_mode.value})")
