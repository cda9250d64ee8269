"""Pydantic models for the relay's WebSocket and HTTP message schemas."""

from .messages import (
    Command,
    CommandMessage,
    CommandResponse,
    ErrorResponse,
    LocationMessage,
    PhoneStatus,
    SchemaDocument,
    StatusResponse,
)

__all__ = [
    "Command",
    "CommandMessage",
    "CommandResponse",
    "ErrorResponse",
    "LocationMessage",
    "PhoneStatus",
    "SchemaDocument",
    "StatusResponse",
]
