"""Retained observations for the Cognitive Cortex engine."""

from cognicortex.memory.buffer import MemoryItem, MemoryStore

__all__ = ["MemoryItem", "MemoryStore"]
