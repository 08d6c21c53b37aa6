"""
Session tracing: per-request snapshots for analysis and plotting.
"""

from dataclasses import dataclass, field
from typing import Dict, List

import numpy as np

from cognicortex.affect import EmotionalState
from cognicortex.schema import ProcessResult
from cognicortex.utils import safe_mean


@dataclass
class TraceRecord:
    step: int
    task_type: str
    fast_mean: float
    deep_mean: float
    valence: float
    arousal: float
    dominance: float
    stability: float
    confidence: float
    adaptation_score: float
    personality_influence: float
    memory_count: int


@dataclass
class SessionTrace:
    """Ordered TraceRecords of one engine session."""
    records: List[TraceRecord] = field(default_factory=list)

    def record(self, task_type: str, result: ProcessResult, emotion: EmotionalState,
               memory_count: int) -> TraceRecord:
        entry = TraceRecord(
            step=len(self.records) + 1,
            task_type=task_type,
            fast_mean=safe_mean(result.fast_activations),
            deep_mean=safe_mean(result.deep_activations),
            valence=emotion.valence,
            arousal=emotion.arousal,
            dominance=emotion.dominance,
            stability=emotion.stability,
            confidence=result.confidence,
            adaptation_score=result.adaptation_score,
            personality_influence=result.personality_influence,
            memory_count=memory_count,
        )
        self.records.append(entry)
        return entry

    def as_arrays(self) -> Dict[str, np.ndarray]:
        """
        Column view of the trace.

        Returns:
            dict: Field name -> array of per-step values (task_type excluded)
        """
        columns = [name for name in TraceRecord.__dataclass_fields__ if name != "task_type"]
        return {
            name: np.array([getattr(r, name) for r in self.records], dtype=np.float64)
            for name in columns
        }

    def __len__(self):
        return len(self.records)
