"""Shared fixtures for pjlink_projector tests."""

import pytest

from pjlink_projector import PjlinkProjectorClient
from pjlink_projector.constants import ENV_HOST, ENV_PORT, ENV_PASSWORD, ENV_TIMEOUT, ENV_CONFIG
from pjlink_projector.client.mock_transport import MockPjlinkProjectorConnector
from pjlink_projector.emulator import PjlinkProjectorEmulator

TEST_PASSWORD = "pass"
TEST_SEED = "ABCDEFGH"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep PJLINK_PROJECTOR_* settings from the developer's shell out of tests."""
    for name in (ENV_HOST, ENV_PORT, ENV_PASSWORD, ENV_TIMEOUT, ENV_CONFIG):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def emulator():
    """An emulated projector that does not require authentication."""
    with PjlinkProjectorEmulator(bind_addr="127.0.0.1", port=0) as emu:
        yield emu


@pytest.fixture
def auth_emulator():
    """An emulated projector that requires authentication with a fixed seed."""
    with PjlinkProjectorEmulator(
            password=TEST_PASSWORD, bind_addr="127.0.0.1", port=0, seed=TEST_SEED) as emu:
        yield emu


@pytest.fixture
def client(emulator):
    """A client connected to the unauthenticated emulator."""
    return PjlinkProjectorClient("127.0.0.1", port=emulator.port, timeout_secs=5.0)


@pytest.fixture
def mock_connector():
    """A scripted connector whose device does not require authentication."""
    return MockPjlinkProjectorConnector()


@pytest.fixture
def mock_client(mock_connector):
    """A client driven by the scripted connector."""
    return PjlinkProjectorClient(connector=mock_connector)
