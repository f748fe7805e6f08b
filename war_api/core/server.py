"""
Listening-socket checks run before the server starts.
"""
import socket

from war_api.core.exceptions import PortInUseError


def ensure_port_available(host: str, port: int) -> None:
    """
    Bind and release ``(host, port)`` the way uvicorn will.

    The address family comes from resolving ``host``, so names such as
    ``localhost`` that resolve only to ``::1`` are checked over IPv6.

    Raises PortInUseError if the address cannot be resolved or bound.
    """
    try:
        infos = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM, flags=socket.AI_PASSIVE)
    except socket.gaierror as e:
        raise PortInUseError(host, port, e.strerror or str(e)) from e

    family, socktype, proto, _, sockaddr = infos[0]
    sock = socket.socket(family, socktype, proto)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(sockaddr)
    except OSError as e:
        raise PortInUseError(host, port, e.strerror or str(e)) from e
    finally:
        sock.close()
