"""
Engine configuration.

Defaults reproduce the reference constants of the processing pipeline.
Values can be overridden through ``COGNICORTEX_*`` environment variables,
optionally loaded from a ``.env`` file.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "COGNICORTEX_"


@dataclass
class EngineConfig:
    """
    Tunable constants for a CognitiveEngine.

    Attributes:
        fast_weight_size: Weight buffer length of each fast unit
        deep_weight_size: Weight buffer length of each deep unit
        planning_depth: Planning depth assigned to new deep units (> 0)
        attention_size: Length of the attention focus vector
        memory_capacity: Maximum number of retained memory items
        significance_threshold: Mean activation needed for memory admission
        learning_rate: Personality adaptation rate
        max_history: Bound on adaptation history (None = unbounded)
        owner_id: Owner of the personality profile
        initial_valence, initial_arousal, initial_dominance, initial_stability:
            Starting emotional state
        parameter_slots: Initial length of the opaque weight store
        log_level: Level used by configure_logging in scripts
    """
    fast_weight_size: int = 1000
    deep_weight_size: int = 2000
    planning_depth: int = 5
    attention_size: int = 10
    memory_capacity: int = 100
    significance_threshold: float = 0.5
    learning_rate: float = 0.01
    max_history: Optional[int] = None
    owner_id: str = "default"
    initial_valence: float = 0.0
    initial_arousal: float = 0.5
    initial_dominance: float = 0.5
    initial_stability: float = 0.8
    parameter_slots: int = 0
    log_level: str = "INFO"

    def __post_init__(self):
        if self.planning_depth <= 0:
            raise ValueError(f"planning_depth must be positive, got {self.planning_depth}")
        if self.memory_capacity <= 0:
            raise ValueError(f"memory_capacity must be positive, got {self.memory_capacity}")
        if self.attention_size < 0:
            raise ValueError(f"attention_size must be non-negative, got {self.attention_size}")
        if self.learning_rate <= 0:
            raise ValueError(f"learning_rate must be positive, got {self.learning_rate}")
        if self.max_history is not None and self.max_history <= 0:
            raise ValueError(f"max_history must be positive or None, got {self.max_history}")
        if self.parameter_slots < 0:
            raise ValueError(f"parameter_slots must be non-negative, got {self.parameter_slots}")


def _optional_int(raw: str) -> Optional[int]:
    if raw.strip().lower() in ("", "none", "unbounded"):
        return None
    return int(raw)


_PARSERS: dict = {
    "fast_weight_size": int,
    "deep_weight_size": int,
    "planning_depth": int,
    "attention_size": int,
    "memory_capacity": int,
    "significance_threshold": float,
    "learning_rate": float,
    "max_history": _optional_int,
    "owner_id": str,
    "initial_valence": float,
    "initial_arousal": float,
    "initial_dominance": float,
    "initial_stability": float,
    "parameter_slots": int,
    "log_level": str,
}


def _read_env(name: str, parser: Callable, default):
    raw = os.getenv(ENV_PREFIX + name.upper())
    if raw is None:
        return default
    try:
        return parser(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s%s=%r, using default %r",
                       ENV_PREFIX, name.upper(), raw, default)
        return default


def load_config(env_file: Optional[Union[str, Path]] = None) -> EngineConfig:
    """
    Build an EngineConfig from the environment.

    Args:
        env_file: Optional path to a .env file. When omitted, python-dotenv
            searches for a .env file from the working directory upwards.
            Existing environment variables take precedence.

    Returns:
        EngineConfig: Defaults overridden by any COGNICORTEX_* variables
    """
    if env_file is not None:
        load_dotenv(dotenv_path=env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))

    defaults = EngineConfig()
    values = {
        name: _read_env(name, parser, getattr(defaults, name))
        for name, parser in _PARSERS.items()
    }

    try:
        return EngineConfig(**values)
    except ValueError as exc:
        logger.warning("Invalid engine configuration (%s), using defaults", exc)
        return defaults
