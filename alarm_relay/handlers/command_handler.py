from alarm_relay.models import Command
from alarm_relay.services import ControlService

from .base import JSONHandler

COMMAND_ROUTE = r"/({})".format("|".join(command.value for command in Command))


class CommandHandler(JSONHandler):
    """GET/POST /<command>: relay one operator command to every phone."""

    def initialize(self, control_service: ControlService):
        self.control_service = control_service

    async def get(self, action: str):
        await self._relay(action)

    async def post(self, action: str):
        await self._relay(action)

    async def _relay(self, action: str):
        response = await self.control_service.request_broadcast(Command(action))
        self.write_model(response)


class StatusHandler(JSONHandler):
    def initialize(self, control_service: ControlService):
        self.control_service = control_service

    def get(self):
        self.write_model(self.control_service.request_status())
