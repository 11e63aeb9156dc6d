"""Server entry point.

Binds the listening socket before handing it to uvicorn so that an occupied
port surfaces as ``PortInUseError`` instead of a log line buried in uvicorn's
startup, then serves the app on that socket until interrupted.
"""

from __future__ import annotations

import errno
import logging
import socket
import sys

import uvicorn

from demo_service.app import create_app
from demo_service.config import Settings, get_settings

logger = logging.getLogger(__name__)


class PortInUseError(OSError):
    """Raised when the listening address is already bound by another process."""

    def __init__(self, host: str, port: int) -> None:
        super().__init__(errno.EADDRINUSE, f"Port {port} is already in use")
        self.host = host
        self.port = port


def stdlib_level(level: str) -> int:
    """Map a uvicorn log level name onto a stdlib logging level."""
    if level.lower() == "trace":
        return logging.DEBUG
    return logging.getLevelName(level.upper())


def setup_logging(level: str) -> None:
    """Configure root logging for the service process."""
    logging.basicConfig(
        level=stdlib_level(level),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger("uvicorn").setLevel(stdlib_level(level))


def bind_socket(host: str, port: int) -> socket.socket:
    """Create a listening TCP socket on ``host:port``.

    SO_REUSEADDR matches uvicorn's own binding: it lets a restart reuse a port
    in TIME_WAIT but still refuses a port another process is listening on.
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as exc:
        sock.close()
        if exc.errno == errno.EADDRINUSE:
            raise PortInUseError(host, port) from exc
        raise
    sock.listen(socket.SOMAXCONN)
    sock.set_inheritable(True)
    return sock


def build_server(settings: Settings) -> uvicorn.Server:
    """Build a uvicorn server for the demo app without starting it."""
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        log_config=None,
    )
    return uvicorn.Server(config)


def serve(settings: Settings | None = None) -> None:
    """Bind the configured address and serve the demo app until shutdown.

    Port 0 binds an ephemeral port; the app is told the port the socket
    actually got.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    sock = bind_socket(settings.host, settings.port)
    try:
        bound = settings.model_copy(update={"port": sock.getsockname()[1]})
        build_server(bound).run(sockets=[sock])
    finally:
        sock.close()


def main() -> None:
    """Console entry point; exits with status 1 when the port is taken."""
    try:
        serve()
    except PortInUseError as exc:
        logger.error("Port %d is already in use on %s", exc.port, exc.host)
        sys.exit(1)
