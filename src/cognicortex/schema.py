"""
Request and result records for the processing pipeline.
"""

import json
import math
from dataclasses import asdict, dataclass, field
from numbers import Real
from typing import Any, Dict, List, Mapping, Union

from cognicortex.errors import MalformedInputError

REQUIRED_FIELDS = ("sensory_data", "context", "task_type")


@dataclass
class CognitiveInput:
    """
    One processing request.

    Attributes:
        sensory_data: Finite sensory values
        context: Free-form context string
        task_type: Task category
    """
    sensory_data: List[float]
    context: str
    task_type: str

    @classmethod
    def from_payload(cls, payload: Union["CognitiveInput", Mapping, str, bytes]) -> "CognitiveInput":
        """
        Decode a request from a mapping or JSON text.

        Raises:
            MalformedInputError: If the payload does not have the expected shape
        """
        if isinstance(payload, cls):
            return payload

        if isinstance(payload, (str, bytes, bytearray)):
            try:
                payload = json.loads(payload)
            except (ValueError, UnicodeDecodeError) as exc:
                raise MalformedInputError(f"invalid JSON: {exc}") from exc

        if not isinstance(payload, Mapping):
            raise MalformedInputError(f"expected an object, got {type(payload).__name__}")

        missing = [name for name in REQUIRED_FIELDS if name not in payload]
        if missing:
            raise MalformedInputError(f"missing fields: {', '.join(missing)}")

        context = payload["context"]
        task_type = payload["task_type"]
        if not isinstance(context, str):
            raise MalformedInputError("context must be a string")
        if not isinstance(task_type, str):
            raise MalformedInputError("task_type must be a string")

        sensory = payload["sensory_data"]
        if isinstance(sensory, (str, bytes, Mapping)) or not hasattr(sensory, "__iter__"):
            raise MalformedInputError("sensory_data must be a sequence of numbers")

        values = []
        for value in sensory:
            # bool is a Real subclass but not a sensory reading
            if isinstance(value, bool) or not isinstance(value, Real):
                raise MalformedInputError(f"non-numeric sensory value: {value!r}")
            try:
                value = float(value)
            except OverflowError as exc:
                raise MalformedInputError(f"sensory value out of float range: {exc}") from exc
            if not math.isfinite(value):
                raise MalformedInputError(f"non-finite sensory value: {value!r}")
            values.append(value)

        # the sum of finite readings can still overflow
        if values and not math.isfinite(sum(values) / len(values)):
            raise MalformedInputError("sensory mean is out of float range")

        return cls(sensory_data=values, context=context, task_type=task_type)


@dataclass
class ProcessResult:
    """
    Outcome of one processing request.

    ``ok`` is False only for the empty result returned on malformed input;
    ``error`` then carries the reason.
    """
    reasoning_result: str = ""
    confidence: float = 0.0
    processing_time: float = 0.0
    fast_activations: List[float] = field(default_factory=list)
    deep_activations: List[float] = field(default_factory=list)
    personality_influence: float = 0.0
    adaptation_score: float = 0.0
    ok: bool = True
    error: str = ""

    @classmethod
    def empty(cls, error: str = "") -> "ProcessResult":
        return cls(ok=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())
