"""Pytest fixtures for lgspkctl tests.

Provides a mock speaker running on an ephemeral port and a client factory
creating connected SpeakerClient instances against it.
"""

import pytest

from lgspkctl import PacketCodec, SpeakerClient

from tests.mock_server import MockSpeaker


@pytest.fixture
def codec() -> PacketCodec:
    return PacketCodec()


@pytest.fixture
def speaker_factory():
    """Factory that starts a MockSpeaker and returns (server, port). Teardown stops all."""
    servers = []

    def _make_speaker(**kwargs):
        server = MockSpeaker(**kwargs)
        port = server.start()
        servers.append(server)
        return server, port

    yield _make_speaker

    for server in servers:
        server.shutdown()


@pytest.fixture
def speaker(speaker_factory):
    """Default mock speaker: (server, port)."""
    return speaker_factory()


@pytest.fixture
def client_factory(speaker):
    """Factory that returns a SpeakerClient connected to the default mock speaker."""
    clients = []
    _, port = speaker

    def _make_client(**kwargs) -> SpeakerClient:
        client = SpeakerClient(port=port, timeout=5, **kwargs)
        client.connect()
        clients.append(client)
        return client

    yield _make_client

    for client in clients:
        client.close()
