import asyncio

import pytest

from alarm_relay.services import ConnectionRegistry, ConnectionState


class FakeTransport:
    """Records outbound messages; optionally fails on send."""

    def __init__(self, state=ConnectionState.OPEN, fail_with=None, fail_async=False):
        self.ready_state = state
        self.fail_with = fail_with
        self.fail_async = fail_async
        self.sent = []

    def send(self, message):
        if self.fail_with is not None and not self.fail_async:
            raise self.fail_with
        self.sent.append(message)
        if self.fail_async:
            future = asyncio.get_running_loop().create_future()
            future.set_exception(self.fail_with)
            return future
        return None


@pytest.fixture
def registry():
    return ConnectionRegistry()


@pytest.fixture
def make_transport():
    return FakeTransport
