# SPDX-FileCopyrightText: 2025 greeter
#
# SPDX-License-Identifier: MIT

"""Utilities for acquiring listening sockets."""

import socket


class BindError(RuntimeError):
    """The listen address could not be resolved or acquired."""

    def __init__(self, host: str, port: int, reason: str) -> None:
        super().__init__(f"Cannot bind to {host}:{port}: {reason}")
        self.host = host
        self.port = port


def bind_socket(host: str, port: int, backlog: int = 2048) -> socket.socket:
    """Bind and listen on the first address ``host`` resolves to.

    Args:
        host: Hostname or IP literal to bind
        port: TCP port, 0 for an ephemeral one
        backlog: Listen queue length

    Returns:
        A listening socket

    Raises:
        BindError: If the address cannot be resolved, is in use or is not
            permitted
    """
    try:
        infos = socket.getaddrinfo(
            host, port, type=socket.SOCK_STREAM, flags=socket.AI_PASSIVE
        )
    except socket.gaierror as exc:
        raise BindError(host, port, str(exc)) from exc

    family, socktype, proto, _, sockaddr = infos[0]
    sock = socket.socket(family, socktype, proto)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(sockaddr)
        sock.listen(backlog)
    except OSError as exc:
        sock.close()
        raise BindError(host, port, exc.strerror or str(exc)) from exc
    return sock
