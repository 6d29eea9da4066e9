import socket

import pytest
import uvicorn
from loguru import logger

import main


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()


@pytest.fixture
def busy_port():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(1)
    yield sock.getsockname()[1]
    sock.close()


def test_bind_failure_exits(busy_port, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.run(host="127.0.0.1", port=busy_port)
    assert excinfo.value.code == 1
    assert "Error binding listener" in capsys.readouterr().err


def test_serve_failure_exits(monkeypatch, capsys):
    def boom(self, sockets=None):
        raise RuntimeError("loop died")

    monkeypatch.setattr(uvicorn.Server, "run", boom)
    with pytest.raises(SystemExit) as excinfo:
        main.run(host="127.0.0.1", port=0)
    assert excinfo.value.code == 1
    assert "Internal Server error: loop died" in capsys.readouterr().err


def test_serve_hands_bound_socket_to_uvicorn(monkeypatch):
    seen = {}

    def fake_run(self, sockets=None):
        seen["sockets"] = sockets
        seen["app"] = self.config.app

    monkeypatch.setattr(uvicorn.Server, "run", fake_run)
    main.run(host="127.0.0.1", port=0)
    (sock,) = seen["sockets"]
    assert seen["app"] is main.app
    assert sock.fileno() == -1  # closed once serving returns
