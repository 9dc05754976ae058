"""Capture a few raw IP packets and report where they came from."""

from __future__ import annotations

import socket
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from .console import Console

RECV_BUFFER = 65536
PACKET_COUNT = 5


class CaptureError(Exception):
    """Raised when the capture socket cannot be created, bound or read."""

    def __init__(self, message: str, stage: str):
        super().__init__(message)
        self.stage = stage


def _raw_socket():
    return socket.socket(socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_IP)


def _error_code(exc: OSError):
    return exc.errno if getattr(exc, "errno", None) is not None else exc


@contextmanager
def _bound_socket(sock_factory: Callable):
    try:
        sock = sock_factory()
    except OSError as exc:
        raise CaptureError(f"Error al crear el socket: {_error_code(exc)}", "create") from exc
    try:
        try:
            sock.bind(("0.0.0.0", 0))
        except OSError as exc:
            raise CaptureError(
                f"Error al enlazar el socket: {_error_code(exc)}", "bind"
            ) from exc
        yield sock
    finally:
        sock.close()


def _receive(sock, count: int) -> Iterator[str]:
    for _ in range(count):
        try:
            _data, address = sock.recvfrom(RECV_BUFFER)
        except OSError as exc:
            raise CaptureError(
                f"Error al recibir datos: {_error_code(exc)}", "receive"
            ) from exc
        yield address[0]


def capture_sources(
    count: int = PACKET_COUNT, sock_factory: Callable | None = None
) -> Iterator[str]:
    """Yield the source address of each of ``count`` captured packets.

    ``sock_factory`` makes the socket; by default a raw IPv4 socket, which
    usually needs administrator rights. The socket is closed when done.
    """
    factory = sock_factory if sock_factory is not None else _raw_socket
    with _bound_socket(factory) as sock:
        yield from _receive(sock, count)


def net_unit(console: Console | None = None) -> None:
    """Capture five packets on the local interface and print their sources."""
    console = console if console is not None else Console()
    console.write("=== Escaneo de tráfico de red ===\n")
    try:
        with _bound_socket(_raw_socket) as sock:
            console.write("Socket creado y enlazado correctamente.\n")
            try:
                for host in _receive(sock, PACKET_COUNT):
                    console.write(f"Paquete recibido de: {host}\n")
            except CaptureError as exc:
                console.write(f"{exc}\n")
    except CaptureError as exc:
        console.write(f"{exc}\n")
        return
    console.write("Escaneo finalizado.\n")