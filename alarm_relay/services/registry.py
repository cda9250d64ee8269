import logging
import threading
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, Tuple

from alarm_relay.models import PhoneStatus

logger = logging.getLogger(__name__)


class ConnectionState(str, Enum):
    """Readiness of a phone transport; only OPEN receives broadcasts."""

    CONNECTING = "connecting"
    OPEN = "open"
    CLOSING = "closing"
    CLOSED = "closed"


class Transport(Protocol):
    """Duplex channel to one phone, as seen by the registry and broadcaster."""

    @property
    def ready_state(self) -> ConnectionState: ...

    def send(self, message: str) -> Any: ...


class Connection:
    """Registry entry: the transport plus the phone's tracked state."""

    def __init__(self, connection_id: str, transport: Transport):
        self.id = connection_id
        self.transport = transport
        self.location: Optional[Tuple[float, float]] = None
        self.location_enabled = False
        self.last_update: Optional[datetime] = None

    @property
    def state(self) -> ConnectionState:
        return self.transport.ready_state

    def view(self) -> PhoneStatus:
        lat, lng = self.location if self.location is not None else (None, None)
        return PhoneStatus(
            id=self.id,
            lat=lat,
            lng=lng,
            last_update=self.last_update,
            location_enabled=self.location_enabled,
        )


class ConnectionRegistry:
    """
    In-memory map of currently open phone connections.

    Every read and mutation goes through a single lock; callers never see the
    underlying Connection objects, only PhoneStatus views and transports.
    """

    def __init__(self):
        self._connections: Dict[str, Connection] = {}
        self._lock = threading.Lock()

    def register(self, transport: Transport) -> str:
        with self._lock:
            connection_id = self._new_id()
            while connection_id in self._connections:
                connection_id = self._new_id()
            self._connections[connection_id] = Connection(connection_id, transport)
            total = len(self._connections)
        logger.info("Phone connected: %s (%d connected)", connection_id, total)
        return connection_id

    def unregister(self, connection_id: str) -> None:
        with self._lock:
            removed = self._connections.pop(connection_id, None)
            total = len(self._connections)
        if removed is not None:
            logger.info("Phone disconnected: %s (%d connected)", connection_id, total)

    def update_location(self, connection_id: str, lat: float, lng: float) -> bool:
        with self._lock:
            connection = self._connections.get(connection_id)
            if connection is None:
                logger.debug("Dropping location for unknown connection %s", connection_id)
                return False
            connection.location = (lat, lng)
            connection.last_update = datetime.now(timezone.utc)
            connection.location_enabled = True
        return True

    def disable_all_tracking(self) -> None:
        with self._lock:
            for connection in self._connections.values():
                connection.location_enabled = False
                connection.location = None
                connection.last_update = None

    def snapshot(self) -> List[PhoneStatus]:
        with self._lock:
            return [connection.view() for connection in self._connections.values()]

    def get(self, connection_id: str) -> Optional[PhoneStatus]:
        with self._lock:
            connection = self._connections.get(connection_id)
            return connection.view() if connection is not None else None

    def open_transports(self) -> List[Transport]:
        with self._lock:
            return [
                connection.transport
                for connection in self._connections.values()
                if connection.state == ConnectionState.OPEN
            ]

    def count(self) -> int:
        with self._lock:
            return len(self._connections)

    def __len__(self) -> int:
        return self.count()

    @staticmethod
    def _new_id() -> str:
        return uuid.uuid4().hex
