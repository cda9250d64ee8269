from .health_handler import HealthHandler
from .docs_handler import DocsHandler
from .command_handler import CommandHandler, StatusHandler
from .phone_ws_handler import PhoneWebSocketHandler

__all__ = [
    "HealthHandler",
    "DocsHandler",
    "CommandHandler",
    "StatusHandler",
    "PhoneWebSocketHandler",
]
