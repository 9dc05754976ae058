import io
import socket
from unittest import mock

from ibmsim.console import Console
from ibmsim.sysinfo import host_name, testing_unit


def _console():
    out = io.StringIO()
    return Console(io.StringIO(""), out), out


def test_host_name_matches_socket():
    assert host_name() == socket.gethostname()


def test_report_contains_host_name():
    console, out = _console()
    with mock.patch("socket.gethostname", return_value="demo-host"):
        testing_unit(console)
    lines = out.getvalue().splitlines()
    assert lines == ["=== Información del sistema ===", "Nombre del host: demo-host"]


def test_failure_goes_to_stderr(capsys):
    console, out = _console()
    with mock.patch("socket.gethostname", side_effect=OSError("down")):
        testing_unit(console)
    assert out.getvalue() == ""
    assert "Error al obtener el nombre del host" in capsys.readouterr().err