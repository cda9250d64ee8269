import asyncio
import inspect
import logging
from typing import Any, List

from tornado.iostream import StreamClosedError
from tornado.websocket import WebSocketClosedError

from alarm_relay.models import Command, CommandMessage
from alarm_relay.services.registry import ConnectionRegistry

logger = logging.getLogger(__name__)

SEND_ERRORS = (WebSocketClosedError, StreamClosedError, OSError)


class CommandBroadcaster:
    """Fan a command out to every phone whose connection is open."""

    def __init__(self, registry: ConnectionRegistry):
        self.registry = registry

    async def broadcast(self, command: Command) -> int:
        message = CommandMessage(action=command).model_dump_json()
        transports = self.registry.open_transports()

        pending: List[Any] = []
        sent = 0
        for transport in transports:
            try:
                result = transport.send(message)
            except SEND_ERRORS as exc:
                logger.warning("Failed to send %s to a phone: %r", command.value, exc)
                continue
            except Exception:
                logger.exception("Unexpected error sending %s to a phone", command.value)
                continue
            sent += 1
            if inspect.isawaitable(result):
                pending.append(result)

        if pending:
            results = await asyncio.gather(*pending, return_exceptions=True)
            for result in results:
                if isinstance(result, SEND_ERRORS):
                    sent -= 1
                    logger.warning("Failed to send %s to a phone: %r", command.value, result)
                elif isinstance(result, Exception):
                    sent -= 1
                    logger.error(
                        "Unexpected error sending %s to a phone", command.value, exc_info=result
                    )
                elif isinstance(result, BaseException):
                    # Cancelled send; let cancellation propagate.
                    raise result

        logger.info("Sent %s to %d of %d open phones", command.value, sent, len(transports))
        return sent
