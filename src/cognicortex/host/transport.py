"""
Host transport: outbound message queue to a desktop host.

The queue is independent of pipeline state. Messages are drained in the
order they were enqueued.
"""

import json
import logging
import time
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_CAPABILITIES = [
    "cognitive_processing",
    "personality_adaptation",
    "memory_management",
    "emotional_modeling",
]


class ConnectionStatus(Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    ERROR = "error"


@dataclass
class HostMessage:
    """
    Attributes:
        id: Unique message id
        message_type: Free-form message kind
        payload: Serialized payload
        timestamp: Creation time (seconds since epoch)
        priority: 1 for control messages, 2 for regular traffic
    """
    id: str
    message_type: str
    payload: str
    timestamp: float
    priority: int = 2

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class HostTransport:
    """FIFO message queue plus connection bookkeeping."""
    desktop_id: Optional[str] = None
    status: ConnectionStatus = ConnectionStatus.DISCONNECTED
    error: Optional[str] = None
    capabilities: List[str] = field(default_factory=lambda: list(DEFAULT_CAPABILITIES))
    queue: List[HostMessage] = field(default_factory=list)
    _sequence: int = field(default=0, repr=False)

    def _message_id(self, prefix: str) -> str:
        self._sequence += 1
        return f"{prefix}_{int(time.time() * 1000)}_{self._sequence}"

    def connect(self, desktop_id: str) -> bool:
        """Mark the transport connected and announce capabilities."""
        self.desktop_id = desktop_id
        self.status = ConnectionStatus.CONNECTED
        self.error = None
        self.queue.append(HostMessage(
            id=self._message_id("cap"),
            message_type="capabilities",
            payload=json.dumps(self.capabilities),
            timestamp=time.time(),
            priority=1,
        ))
        logger.info("Connected to desktop %s", desktop_id)
        return True

    def fail(self, reason: str):
        self.status = ConnectionStatus.ERROR
        self.error = reason
        logger.warning("Host connection error: %s", reason)

    def enqueue(self, message_type: str, payload: str, priority: int = 2) -> str:
        """
        Queue a message for the host.

        Returns:
            str: Id of the queued message
        """
        message = HostMessage(
            id=self._message_id("msg"),
            message_type=message_type,
            payload=payload,
            timestamp=time.time(),
            priority=priority,
        )
        self.queue.append(message)
        logger.debug("Queued host message %s (%s)", message_type, message.id)
        return message.id

    def drain(self) -> List[HostMessage]:
        """Return all queued messages in FIFO order and empty the queue."""
        messages, self.queue = self.queue, []
        return messages
