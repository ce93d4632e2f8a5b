"""TCP listener and uvicorn wiring for the health API."""

from __future__ import annotations

import enum
import logging
import socket
from typing import Final

import uvicorn
from fastapi import FastAPI

from app.core.config import settings

LISTEN_HOST: Final[str] = "0.0.0.0"
LISTEN_PORT: Final[int] = 8080
LISTEN_BACKLOG: Final[int] = 2048

# Pinned at INFO so the readiness line is emitted whatever LOG_LEVEL says.
readiness_logger = logging.getLogger(f"{__name__}.readiness")
readiness_logger.setLevel(logging.INFO)


class BindFailureError(RuntimeError):
    """Raised when the listening socket cannot be bound."""

    def __init__(self, host: str, port: int, reason: OSError) -> None:
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"Failed to bind {host}:{port}: {reason.strerror or reason}")


class ListenerState(enum.StrEnum):
    NOT_LISTENING = "not_listening"
    LISTENING = "listening"


class HealthServer:
    """Owns the listening socket and the uvicorn server that serves on it.

    The socket is bound before uvicorn starts so a bind failure surfaces as
    BindFailureError instead of uvicorn's own exit path.
    """

    def __init__(
        self,
        app: FastAPI,
        host: str = LISTEN_HOST,
        port: int = LISTEN_PORT,
    ) -> None:
        self.app = app
        self.host = host
        self.port = port
        self.state = ListenerState.NOT_LISTENING
        self._socket: socket.socket | None = None
        self.uvicorn_server = uvicorn.Server(
            uvicorn.Config(
                app,
                log_config=None,
                log_level=logging.getLevelNamesMapping()[settings.log_level],
            )
        )

    @property
    def bound_port(self) -> int | None:
        """Port actually bound, which differs from `port` when it was 0."""
        if self._socket is None:
            return None
        return int(self._socket.getsockname()[1])

    def bind(self) -> socket.socket:
        if self.state is ListenerState.LISTENING:
            raise RuntimeError("Listener is already bound")

        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((self.host, self.port))
            sock.listen(LISTEN_BACKLOG)
        except OSError as e:
            sock.close()
            raise BindFailureError(self.host, self.port, e) from e

        self._socket = sock
        self.state = ListenerState.LISTENING
        readiness_logger.info("API listening on :%d", self.bound_port)
        return sock

    def serve(self) -> None:
        """Bind if needed and block serving requests until uvicorn exits."""
        sock = self._socket if self._socket is not None else self.bind()
        self.uvicorn_server.run(sockets=[sock])
