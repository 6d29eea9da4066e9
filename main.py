import socket

import uvicorn
from loguru import logger

from greeter.logging_config import setup_logging
from greeter.main import app

HOST = "0.0.0.0"
PORT = 4000


def bind(host: str, port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def run(host: str = HOST, port: int = PORT) -> None:
    setup_logging()
    try:
        sock = bind(host, port)
    except OSError as exc:
        logger.error("Error binding listener: {}", exc)
        raise SystemExit(1)

    # log_config=None keeps uvicorn from replacing the loguru setup.
    server = uvicorn.Server(uvicorn.Config(app, log_config=None))
    logger.info("Listening on {}:{}", host, port)
    try:
        server.run(sockets=[sock])
    except Exception as exc:
        logger.opt(exception=exc).error("Internal Server error: {}", exc)
        raise SystemExit(1)
    finally:
        sock.close()


def main() -> None:
    run()


if __name__ == "__main__":
    main()
