from .broadcaster import CommandBroadcaster
from .control_service import ControlService
from .registry import Connection, ConnectionRegistry, ConnectionState, Transport

__all__ = [
    "CommandBroadcaster",
    "ControlService",
    "Connection",
    "ConnectionRegistry",
    "ConnectionState",
    "Transport",
]
