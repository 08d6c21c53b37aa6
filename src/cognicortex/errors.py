"""
Exception types for the Cognitive Cortex engine.

None of these escape the public engine API: ``CognitiveEngine.process``
converts input failures into an empty result, and weight loading reports
failure as ``False``.
"""


class CognitiveError(Exception):
    """Base class for engine errors."""


class MalformedInputError(CognitiveError):
    """Input could not be decoded into a CognitiveInput."""


class WeightLoadError(CognitiveError):
    """Raw parameter bytes could not be decoded."""
