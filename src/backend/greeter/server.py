# SPDX-FileCopyrightText: 2025 greeter
#
# SPDX-License-Identifier: MIT
"""Bind the listening socket and serve the greeter app on it."""

import logging
import threading
import time
from dataclasses import dataclass, field

import uvicorn

from common.config import ServerConfig
from common.port_utils import bind_socket
from greeter.main import create_app

logger = logging.getLogger("greeter")

_POLL_INTERVAL = 0.01


@dataclass
class ServerHandle:
    """A server in the Listening state. It stays there until the process exits."""

    host: str
    port: int
    _server: uvicorn.Server = field(repr=False)
    _thread: threading.Thread = field(repr=False)

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def wait(self) -> bool:
        """Block until interrupted or until the serving thread dies.

        Returns:
            True if stopped by KeyboardInterrupt, False if the server died.
        """
        try:
            while self._thread.is_alive():
                self._thread.join(timeout=0.5)
        except KeyboardInterrupt:
            self._server.should_exit = True
            self._thread.join()
            return True
        return False


def _build_server() -> uvicorn.Server:
    # uvicorn's own startup lines, access log and Server header are silenced
    uvicorn_config = uvicorn.Config(
        create_app(),
        lifespan="off",
        log_config=None,
        log_level="warning",
        access_log=False,
        server_header=False,
    )
    return uvicorn.Server(uvicorn_config)


def start(config: ServerConfig, startup_timeout: float = 5.0) -> ServerHandle:
    """Bind ``config.host``/``config.port`` and start answering requests.

    Raises:
        BindError: If the address cannot be acquired. Nothing is logged.
        RuntimeError: If uvicorn fails to come up on the bound socket.
    """
    sock = bind_socket(config.host, config.port)
    bound_port = sock.getsockname()[1]

    server = _build_server()
    thread = threading.Thread(
        target=server.run,
        kwargs={"sockets": [sock]},
        name=f"greeter-{bound_port}",
        daemon=True,
    )
    thread.start()

    deadline = time.monotonic() + startup_timeout
    while not server.started:
        if not thread.is_alive() or time.monotonic() > deadline:
            server.should_exit = True
            sock.close()
            raise RuntimeError(
                f"Server on {config.host}:{bound_port} did not start within "
                f"{startup_timeout}s"
            )
        time.sleep(_POLL_INTERVAL)

    handle = ServerHandle(config.host, bound_port, server, thread)
    logger.info("Web server running at: %s", handle.url)
    return handle
