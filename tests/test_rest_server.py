"""Tests for the FastAPI REST server, backed by the emulator."""

import json
import socket

import pytest
from fastapi.testclient import TestClient

from pjlink_projector.rest_server import proj_api, get_projector_config
from pjlink_projector.protocol import (
    CommandClass,
    ErrorStatus,
    ErrorType,
    InputSource,
    InputType,
    PowerStatus,
)


def _write_config(tmp_path, monkeypatch, **config):
    config_file = tmp_path / "pjlink_projector_config.json"
    config_file.write_text(json.dumps(config))
    monkeypatch.setenv("PJLINK_PROJECTOR_CONFIG", str(config_file))


@pytest.fixture
def api(emulator, tmp_path, monkeypatch):
    """A REST test client whose projector is the emulator."""
    _write_config(tmp_path, monkeypatch, host="127.0.0.1", port=emulator.port, timeout_secs=5)
    with TestClient(proj_api) as test_client:
        yield test_client


class TestRestServer:
    """Tests for REST endpoints."""

    def test_server_info(self, api):
        """Test the server info endpoint."""
        response = api.get("/v1/server")
        assert response.status_code == 200
        assert "version" in response.json()
        assert response.json()["uptime_secs"] >= 0

    def test_config_loaded(self, api, emulator):
        """Test that the JSON config file was applied."""
        config = get_projector_config()
        assert config.default_host == "127.0.0.1"
        assert config.default_port == emulator.port

    def test_power(self, api, emulator):
        """Test power query and control."""
        assert api.get("/v1/power").json() == dict(power="OFF")
        assert api.post("/v1/power/on").json() == dict(power="ON")
        assert emulator.power_status == PowerStatus.ON
        assert api.post("/v1/power/off").json() == dict(power="OFF")

    def test_input(self, api, emulator):
        """Test input query and selection."""
        assert api.get("/v1/input").json() == dict(input_type="RGB", channel=1)
        response = api.put("/v1/input", json=dict(input_type="digital", channel=2))
        assert response.status_code == 200
        assert response.json() == dict(input_type="DIGITAL", channel=2)
        assert emulator.input_source == InputSource(InputType.DIGITAL, 2)

    def test_unknown_input_type(self, api):
        """Test that an unknown input family is rejected before reaching the device."""
        response = api.put("/v1/input", json=dict(input_type="hdmi", channel=1))
        assert response.status_code == 422

    def test_invalid_channel(self, api):
        """Test that an out-of-range channel is a client error."""
        response = api.put("/v1/input", json=dict(input_type="RGB", channel=0))
        assert response.status_code == 400
        assert response.json()["error"] == "pjlink_projector.exceptions.PjlinkProjectorError"

    def test_inputs(self, api, emulator):
        """Test the input list endpoint."""
        inputs = api.get("/v1/inputs").json()["inputs"]
        assert len(inputs) == len(emulator.inputs)
        assert inputs[0] == dict(input_type="RGB", channel=1)

    def test_avmute(self, api):
        """Test AV mute query and control."""
        assert api.get("/v1/avmute").json() == dict(video=False, audio=False)
        response = api.put("/v1/avmute", json=dict(video=True, audio=False))
        assert response.json() == dict(video=True, audio=False)

    def test_lamps(self, api):
        """Test the lamp endpoint."""
        assert api.get("/v1/lamps").json() == dict(lamps=[dict(hours=1234, on=False)])

    def test_errors(self, api, emulator):
        """Test the error status endpoint."""
        emulator.error_status = ErrorStatus(lamp=ErrorType.WARNING)
        data = api.get("/v1/errors").json()
        assert data["lamp"] == "WARNING"
        assert data["fan"] == "NO_ERROR"
        assert data["has_error"] is True

    def test_info(self, api, emulator):
        """Test the identification endpoint."""
        data = api.get("/v1/info").json()
        assert data == dict(
            name=emulator.name,
            manufacturer=emulator.manufacturer,
            product_name=emulator.product_name,
            info=emulator.info,
            pjlink_class="1",
        )


class TestRestErrors:
    """Tests for mapping projector errors to HTTP responses."""

    def test_device_error(self, api, emulator):
        """Test that a device error is reported as a conflict with its kind."""
        emulator.overrides[CommandClass.POWER] = "ERR3"
        response = api.get("/v1/power")
        assert response.status_code == 409
        assert response.json()["kind"] == "TEMPORARILY_UNAVAILABLE"
        assert response.json()["code"] == "ERR3"

    def test_protocol_error(self, api, emulator):
        """Test that an undecodable reply is a bad gateway."""
        emulator.overrides[CommandClass.AVMUTE] = "99"
        assert api.get("/v1/avmute").status_code == 502

    def test_auth_error(self, tmp_path, monkeypatch, auth_emulator):
        """Test that a missing password is reported as unauthorized."""
        _write_config(tmp_path, monkeypatch, host="127.0.0.1", port=auth_emulator.port)
        with TestClient(proj_api) as api:
            assert api.get("/v1/power").status_code == 401

    def test_transport_error(self, tmp_path, monkeypatch):
        """Test that an unreachable projector is a gateway timeout."""
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            sock.bind(("127.0.0.1", 0))
            port = sock.getsockname()[1]
        _write_config(tmp_path, monkeypatch, host="127.0.0.1", port=port, timeout_secs=2)
        with TestClient(proj_api) as api:
            response = api.get("/v1/power")
        assert response.status_code == 504
        assert response.json()["error"] == "pjlink_projector.exceptions.PjlinkTransportError"
