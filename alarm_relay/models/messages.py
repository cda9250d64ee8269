from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictFloat


class Command(str, Enum):
    """Operator commands relayed to every connected phone."""

    PLAY = "play"
    STOP = "stop"
    LOCATION_ON = "location_on"
    LOCATION_OFF = "location_off"


class LocationMessage(BaseModel):
    """Inbound location telemetry from phone -> relay."""

    type: Literal["location"] = "location"
    lat: StrictFloat = Field(..., ge=-90.0, le=90.0, description="Latitude in decimal degrees.")
    lng: StrictFloat = Field(..., ge=-180.0, le=180.0, description="Longitude in decimal degrees.")


class CommandMessage(BaseModel):
    """Outbound command from relay -> phone."""

    action: Command


class PhoneStatus(BaseModel):
    """Read-only view of one registered connection."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    lat: Optional[float] = None
    lng: Optional[float] = None
    last_update: Optional[datetime] = Field(default=None, alias="lastUpdate")
    location_enabled: bool = Field(default=False, alias="locationEnabled")


class CommandResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: Literal["ok"] = "ok"
    message: str
    connected_phones: int = Field(..., alias="connectedPhones")


class StatusResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: Literal["ok"] = "ok"
    connected_phones: int = Field(..., alias="connectedPhones")
    phones: List[PhoneStatus] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    message: str


class SchemaDocument(BaseModel):
    """Documentation payload served at /docs for quick reference."""

    websocket_endpoints: Dict[str, str]
    http_endpoints: Dict[str, str]
    inbound_messages: Dict[str, Dict[str, Any]]
    outbound_messages: Dict[str, Dict[str, Any]]
    examples: Dict[str, Any] = Field(default_factory=dict)
    notes: List[str] = []
