import json
import logging
from typing import Optional

import tornado.websocket
from pydantic import ValidationError

from alarm_relay.models import LocationMessage
from alarm_relay.services import ConnectionRegistry, ConnectionState

logger = logging.getLogger(__name__)


class PhoneWebSocketHandler(tornado.websocket.WebSocketHandler):
    """
    One phone's WebSocket connection.

    The handler doubles as the registry's transport: it reports its readiness
    through ``ready_state`` and writes outbound commands through ``send``.
    """

    def initialize(self, registry: ConnectionRegistry):
        self.registry = registry
        self.connection_id: Optional[str] = None
        self._opened = False
        self._closed = False

    def check_origin(self, origin: str) -> bool:
        # Phones load the client page from other origins.
        return True

    def open(self):
        self._opened = True
        self.connection_id = self.registry.register(self)

    def on_message(self, message):
        location = self._parse_location(message)
        if location is None:
            return
        self.registry.update_location(self.connection_id, location.lat, location.lng)

    def on_close(self):
        self._closed = True
        if self.connection_id is not None:
            self.registry.unregister(self.connection_id)

    @property
    def ready_state(self) -> ConnectionState:
        if self._closed:
            return ConnectionState.CLOSED
        if self.ws_connection is None:
            return ConnectionState.CLOSING if self._opened else ConnectionState.CONNECTING
        if self.ws_connection.is_closing():
            return ConnectionState.CLOSING
        return ConnectionState.OPEN if self._opened else ConnectionState.CONNECTING

    def send(self, message: str):
        return self.write_message(message)

    def _parse_location(self, message) -> Optional[LocationMessage]:
        try:
            payload = json.loads(message)
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.debug("Ignoring non-JSON message from %s", self.connection_id)
            return None

        if not isinstance(payload, dict) or payload.get("type") != "location":
            logger.debug("Ignoring message from %s: %r", self.connection_id, payload)
            return None
        try:
            return LocationMessage.model_validate(payload)
        except ValidationError as exc:
            logger.debug("Ignoring invalid location from %s: %s", self.connection_id, exc)
            return None
