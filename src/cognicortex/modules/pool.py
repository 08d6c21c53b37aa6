"""
Module Pool: the two tiers of processing units.

Fast units react directly to sensory input:
    a_i = mean(s) * (i+1)/10 * (1 + 0.2 * p)

Deep units aggregate the fast tier with a depth-scaled divisor:
    b_i = (Σ a / depth_i) * (i+1)/5 * m

where p is the personality influence and m the emotional modifier.
Unit weight buffers are opaque storage and do not enter the arithmetic.
"""

import logging
from dataclasses import dataclass, field
from typing import List

import numpy as np

from cognicortex.utils import ArrayLike, as_array, safe_mean, zero_non_finite

logger = logging.getLogger(__name__)

FAST_SCALE = 10.0
DEEP_SCALE = 5.0
INFLUENCE_GAIN = 0.2


@dataclass
class FastUnit:
    """
    Sensory-tier processing unit.

    Attributes:
        id: Position of the unit in the pool
        weights: Opaque float32 weight buffer
        activation: Activation from the most recent request
    """
    id: int
    weights: np.ndarray = field(repr=False)
    activation: float = 0.0


@dataclass
class DeepUnit:
    """
    Planning-tier processing unit.

    Attributes:
        id: Position of the unit in the pool
        weights: Opaque float32 weight buffer
        planning_depth: Divisor applied to the summed fast activations (> 0)
        activation: Activation from the most recent request
    """
    id: int
    weights: np.ndarray = field(repr=False)
    planning_depth: int = 5
    activation: float = 0.0

    def __post_init__(self):
        if self.planning_depth <= 0:
            raise ValueError(f"planning_depth must be positive, got {self.planning_depth}")


class ModulePool:
    """
    Ordered collections of fast and deep units.

    Attributes:
        fast_units (List[FastUnit]): Sensory tier, in id order
        deep_units (List[DeepUnit]): Planning tier, in id order
        fast_weight_size (int): Weight buffer length for new fast units
        deep_weight_size (int): Weight buffer length for new deep units
        planning_depth (int): Planning depth for new deep units
    """

    def __init__(self, fast_weight_size: int = 1000, deep_weight_size: int = 2000,
                 planning_depth: int = 5):
        """
        Create an empty pool.

        Args:
            fast_weight_size: Weight buffer length for fast units
            deep_weight_size: Weight buffer length for deep units
            planning_depth: Planning depth for deep units (must be > 0)
        """
        if planning_depth <= 0:
            raise ValueError(f"planning_depth must be positive, got {planning_depth}")

        self.fast_weight_size = fast_weight_size
        self.deep_weight_size = deep_weight_size
        self.planning_depth = planning_depth
        self.fast_units: List[FastUnit] = []
        self.deep_units: List[DeepUnit] = []

    def initialize(self, fast_count: int, deep_count: int):
        """
        Replace both unit collections with freshly zeroed units.

        Calling this repeatedly resets the pool; it never appends.

        Args:
            fast_count: Number of fast units
            deep_count: Number of deep units
        """
        fast_count = max(int(fast_count), 0)
        deep_count = max(int(deep_count), 0)

        self.fast_units = [
            FastUnit(id=i, weights=np.zeros(self.fast_weight_size, dtype=np.float32))
            for i in range(fast_count)
        ]
        self.deep_units = [
            DeepUnit(id=i, weights=np.zeros(self.deep_weight_size, dtype=np.float32),
                     planning_depth=self.planning_depth)
            for i in range(deep_count)
        ]
        logger.info("Initialized %d fast units and %d deep units", fast_count, deep_count)

    def compute_fast_activations(self, sensory: ArrayLike,
                                 personality_influence: float) -> np.ndarray:
        """
        Compute and store fast-tier activations.

        Args:
            sensory: Sensory input values (empty input has mean 0)
            personality_influence: Bounded influence scalar in (-1, 1)

        Returns:
            np.ndarray: Shape (F,) - activations in unit-id order; entries
            that overflow are stored as 0
        """
        base = safe_mean(sensory)
        ranks = np.arange(1, len(self.fast_units) + 1, dtype=np.float64)
        with np.errstate(over="ignore", invalid="ignore"):
            activations = base * (ranks / FAST_SCALE) * (1.0 + personality_influence * INFLUENCE_GAIN)
        activations = zero_non_finite(activations)

        for unit, value in zip(self.fast_units, activations):
            unit.activation = float(value)

        return activations

    def compute_deep_activations(self, fast_activations: ArrayLike,
                                 emotional_modifier: float) -> np.ndarray:
        """
        Compute and store deep-tier activations.

        Args:
            fast_activations: Output of compute_fast_activations
            emotional_modifier: Scalar derived from emotional valence

        Returns:
            np.ndarray: Shape (D,) - activations in unit-id order; entries
            that overflow are stored as 0
        """
        with np.errstate(over="ignore", invalid="ignore"):
            total = float(np.sum(as_array(fast_activations)))
        activations = np.empty(len(self.deep_units), dtype=np.float64)

        for i, unit in enumerate(self.deep_units):
            activations[i] = total / unit.planning_depth * ((i + 1) / DEEP_SCALE) * emotional_modifier
        activations = zero_non_finite(activations)

        for unit, value in zip(self.deep_units, activations):
            unit.activation = float(value)

        return activations

    def get_activations(self):
        """Return the stored (fast, deep) activations as arrays."""
        fast = np.array([u.activation for u in self.fast_units], dtype=np.float64)
        deep = np.array([u.activation for u in self.deep_units], dtype=np.float64)
        return fast, deep

    @property
    def fast_count(self) -> int:
        return len(self.fast_units)

    @property
    def deep_count(self) -> int:
        return len(self.deep_units)

    def __repr__(self):
        return (f"ModulePool(fast={len(self.fast_units)}, deep={len(self.deep_units)}, "
                f"depth={self.planning_depth})")
