from alarm_relay.models import Command, CommandResponse, StatusResponse
from alarm_relay.services.broadcaster import CommandBroadcaster
from alarm_relay.services.registry import ConnectionRegistry


class ControlService:
    """Operator-facing entry points used by the HTTP handlers."""

    def __init__(self, registry: ConnectionRegistry, broadcaster: CommandBroadcaster | None = None):
        self.registry = registry
        self.broadcaster = broadcaster if broadcaster is not None else CommandBroadcaster(registry)

    async def request_broadcast(self, command: Command) -> CommandResponse:
        await self.broadcaster.broadcast(command)
        # Only LOCATION_OFF clears reported positions; STOP leaves tracking alone.
        if command is Command.LOCATION_OFF:
            self.registry.disable_all_tracking()
        return CommandResponse(
            message=f"Sent {command.name} command",
            connected_phones=self.registry.count(),
        )

    def request_status(self) -> StatusResponse:
        phones = self.registry.snapshot()
        return StatusResponse(connected_phones=len(phones), phones=phones)
