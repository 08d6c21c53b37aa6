"""
Memory Store: bounded buffer of significant observations.

A request is retained when its significance, the mean of all fast and
deep activations, exceeds the admission threshold. At capacity the
earliest-inserted item is evicted first.
"""

import logging
import time
from collections import deque
from dataclasses import asdict, dataclass, field
from typing import Deque, Dict, List, Optional

import numpy as np

from cognicortex.utils import ArrayLike, as_array, safe_mean

logger = logging.getLogger(__name__)


@dataclass
class MemoryItem:
    """
    A retained observation.

    Attributes:
        id: Unique id within the store ("mem_<n>")
        content: "<task_category>: <context>"
        importance: Significance at admission time
        timestamp: Admission time (seconds since epoch)
        associations: Related labels, starting with the task category
    """
    id: str
    content: str
    importance: float
    timestamp: float
    associations: List[str] = field(default_factory=list)


class MemoryStore:
    """
    Insertion-ordered memory buffer with FIFO eviction.

    Attributes:
        capacity (int): Maximum number of items
        threshold (float): Significance needed for admission (strict >)
        items (Deque[MemoryItem]): Retained items, oldest first
    """

    def __init__(self, capacity: int = 100, threshold: float = 0.5):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.threshold = threshold
        self.items: Deque[MemoryItem] = deque()
        self._next_id = 0

    @staticmethod
    def significance(fast_activations: ArrayLike, deep_activations: ArrayLike) -> float:
        """Mean over the concatenated activations (0.0 when both are empty)."""
        return safe_mean(np.concatenate([as_array(fast_activations), as_array(deep_activations)]))

    def consider_admission(self, task_category: str, context: str,
                           fast_activations: ArrayLike,
                           deep_activations: ArrayLike) -> Optional[MemoryItem]:
        """
        Retain the request if it is significant enough.

        Args:
            task_category: Category of the request
            context: Context string of the request
            fast_activations: Fast-tier activations of the request
            deep_activations: Deep-tier activations of the request

        Returns:
            The admitted MemoryItem, or None if not admitted
        """
        significance = self.significance(fast_activations, deep_activations)
        if not significance > self.threshold:
            return None

        item = MemoryItem(
            id=f"mem_{self._next_id}",
            content=f"{task_category}: {context}",
            importance=significance,
            timestamp=time.time(),
            associations=[task_category],
        )
        self._next_id += 1
        self.items.append(item)
        logger.debug("Admitted %s (importance %.3f)", item.id, significance)

        while len(self.items) > self.capacity:
            evicted = self.items.popleft()
            logger.debug("Evicted %s", evicted.id)

        return item

    def clear(self):
        """Remove every item."""
        self.items.clear()

    def summary(self) -> Dict[str, float]:
        """
        Get item count and mean importance.

        Returns:
            dict: 'count' and 'mean_importance' (0.0 when empty)
        """
        return {
            'count': len(self.items),
            'mean_importance': safe_mean([item.importance for item in self.items]),
        }

    def to_list(self) -> List[Dict]:
        return [asdict(item) for item in self.items]

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __repr__(self):
        return f"MemoryStore(size={len(self.items)}, capacity={self.capacity})"
