from alarm_relay.models import CommandMessage, CommandResponse, LocationMessage, SchemaDocument, StatusResponse

from .base import JSONHandler


class DocsHandler(JSONHandler):
    def get(self):
        location_example = {"type": "location", "lat": 52.23, "lng": 21.01}
        status_example = {
            "status": "ok",
            "connectedPhones": 1,
            "phones": [
                {
                    "id": "3f2b9c0d8e6a4c1b9a7d5e4f3c2b1a09",
                    "lat": 52.23,
                    "lng": 21.01,
                    "lastUpdate": "2026-10-19T12:00:00Z",
                    "locationEnabled": True,
                }
            ],
        }

        schema = SchemaDocument(
            websocket_endpoints={"phone": "/ws"},
            http_endpoints={
                "play": "/play",
                "stop": "/stop",
                "location_on": "/location_on",
                "location_off": "/location_off",
                "status": "/status",
                "health": "/health",
            },
            inbound_messages={
                "LocationMessage": LocationMessage.model_json_schema(),
            },
            outbound_messages={
                "CommandMessage": CommandMessage.model_json_schema(),
                "CommandResponse": CommandResponse.model_json_schema(by_alias=True),
                "StatusResponse": StatusResponse.model_json_schema(by_alias=True),
            },
            examples={
                "location": location_example,
                "status": status_example,
            },
            notes=[
                "All WebSocket messages are JSON.",
                "CommandMessage is broadcast to every open phone connection.",
                "location_off also clears every phone's reported location; stop does not.",
                "Malformed phone messages are ignored and the connection stays open.",
            ],
        )
        self.write(schema.model_dump_json())
