import logging
import os

import tornado.ioloop
import tornado.web

from alarm_relay.handlers import CommandHandler, DocsHandler, HealthHandler, PhoneWebSocketHandler, StatusHandler
from alarm_relay.handlers.base import NotFoundHandler
from alarm_relay.handlers.command_handler import COMMAND_ROUTE
from alarm_relay.services import CommandBroadcaster, ConnectionRegistry, ControlService


def make_app(registry: ConnectionRegistry | None = None) -> tornado.web.Application:
    if registry is None:
        registry = ConnectionRegistry()
    control_service = ControlService(registry, CommandBroadcaster(registry))

    return tornado.web.Application(
        [
            (r"/health", HealthHandler),
            (r"/docs", DocsHandler),
            (r"/status", StatusHandler, dict(control_service=control_service)),
            (COMMAND_ROUTE, CommandHandler, dict(control_service=control_service)),
            (r"/ws", PhoneWebSocketHandler, dict(registry=registry)),
        ],
        default_handler_class=NotFoundHandler,
    )


def setup_logger(name, level=logging.INFO):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger


def main() -> None:
    level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logger = setup_logger("alarm_relay", level)
    logger.info(f"Started server process {os.getpid()}")
    port = int(os.environ.get("PORT", "3000"))
    address = os.environ.get("ADDRESS", "0.0.0.0")
    app = make_app()
    logger.info("Waiting for application startup...")
    app.listen(port=port, address=address)
    logger.info("Application startup complete.")
    logger.info(f"Tornado running on http://{address}:{port} (Press Ctrl+C to quit)")
    tornado.ioloop.IOLoop.current().start()


if __name__ == "__main__":
    main()
