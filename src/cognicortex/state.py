"""
Cognitive state owned by a single engine.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

import numpy as np

from cognicortex.affect import EmotionalState
from cognicortex.memory import MemoryStore
from cognicortex.utils import ArrayLike, as_array

logger = logging.getLogger(__name__)

ATTENTION_RETENTION = 0.8
ATTENTION_GAIN = 0.2


class ProcessingMode(Enum):
    """
    Stored processing mode.

    The mode is recorded configuration only; it does not change the
    pipeline arithmetic.
    """
    ANALYTICAL = "analytical"
    CREATIVE = "creative"
    REACTIVE = "reactive"
    CONTEMPLATIVE = "contemplative"

    @classmethod
    def from_name(cls, name: str) -> "ProcessingMode":
        """Look up a mode by its exact lowercase name; anything else is ANALYTICAL."""
        try:
            return cls(name)
        except ValueError:
            logger.debug("Unknown processing mode %r, defaulting to %s", name, cls.ANALYTICAL.value)
            return cls.ANALYTICAL


@dataclass
class CognitiveState:
    """
    Mutable per-engine state.

    Attributes:
        current_task: Task category of the latest request
        attention_focus: Fixed-length smoothed view of the sensory input
        memory_buffer: Retained significant observations
        emotional_state: Current affect
        processing_mode: Recorded mode flag
    """
    attention_focus: np.ndarray
    memory_buffer: MemoryStore
    emotional_state: EmotionalState
    current_task: Optional[str] = None
    processing_mode: ProcessingMode = ProcessingMode.ANALYTICAL

    def update_attention(self, sensory: ArrayLike):
        """
        Blend sensory input into the attention vector.

        focus[i] <- 0.8 * focus[i] + 0.2 * sensory[i] for i < len(sensory);
        positions past the end of the input are left unchanged.
        """
        values = as_array(sensory)
        n = min(len(values), len(self.attention_focus))
        self.attention_focus[:n] = (self.attention_focus[:n] * ATTENTION_RETENTION
                                    + values[:n] * ATTENTION_GAIN)

    def to_dict(self) -> Dict:
        return {
            'current_task': self.current_task,
            'attention_focus': self.attention_focus.tolist(),
            'memory_buffer': self.memory_buffer.to_list(),
            'emotional_state': self.emotional_state.to_dict(),
            'processing_mode': self.processing_mode.value,
        }
