"""Host information report."""

from __future__ import annotations

import socket
import sys

from .console import Console


def host_name() -> str:
    """Return the name of the local host; raises OSError if it cannot be read."""
    return socket.gethostname()


def testing_unit(console: Console | None = None) -> None:
    """Print a short system report with the host name."""
    console = console if console is not None else Console()
    try:
        name = host_name()
    except OSError:
        print("Error al obtener el nombre del host", file=sys.stderr)
        return
    console.write("=== Información del sistema ===\n")
    console.write(f"Nombre del host: {name}\n")