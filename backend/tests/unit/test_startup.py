"""Unit tests for the server entry point's port handling."""

import errno
import socket

import pytest

from app.config import get_settings
from app.domain.exceptions import StartupError
from app.main import ensure_port_available, run


@pytest.fixture
def busy_port():
    """A port on 127.0.0.1 with a live listener for the duration of the test."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.bind(("127.0.0.1", 0))
        listener.listen()
        yield listener.getsockname()[1]


def test_ensure_port_available_raises_when_taken(busy_port):
    with pytest.raises(StartupError) as exc_info:
        ensure_port_available("127.0.0.1", busy_port)

    assert exc_info.value.port == busy_port
    assert exc_info.value.address_in_use
    assert str(busy_port) in str(exc_info.value)


def test_ensure_port_available_on_free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]

    ensure_port_available("127.0.0.1", port)


def test_run_exits_nonzero_when_port_in_use(busy_port, monkeypatch, caplog):
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", str(busy_port))
    monkeypatch.setattr("uvicorn.run", lambda *args, **kwargs: pytest.fail("server started"))
    get_settings.cache_clear()
    try:
        with pytest.raises(SystemExit) as exc_info:
            run()
    finally:
        get_settings.cache_clear()

    assert exc_info.value.code == 1
    assert f"Port {busy_port} is already in use" in caplog.text
    assert f"PORT={busy_port + 1}" in caplog.text


def test_run_reports_other_bind_failures_as_server_errors(monkeypatch, caplog):
    def refuse(host, port):
        raise StartupError(host, port, "Permission denied", errno.EACCES)

    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "80")
    monkeypatch.setattr("app.main.ensure_port_available", refuse)
    monkeypatch.setattr("uvicorn.run", lambda *args, **kwargs: pytest.fail("server started"))
    get_settings.cache_clear()
    try:
        with pytest.raises(SystemExit) as exc_info:
            run()
    finally:
        get_settings.cache_clear()

    assert exc_info.value.code == 1
    assert "Server error" in caplog.text
    assert "Permission denied" in caplog.text
    assert "already in use" not in caplog.text
