"""Boundary interface to the desktop host."""

from cognicortex.host.transport import ConnectionStatus, HostMessage, HostTransport

__all__ = ["ConnectionStatus", "HostMessage", "HostTransport"]
