"""Processing units for the Cognitive Cortex engine."""

from cognicortex.modules.pool import DeepUnit, FastUnit, ModulePool

__all__ = ["FastUnit", "DeepUnit", "ModulePool"]
