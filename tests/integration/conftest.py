"""Fixtures for integration tests running a real static server."""

import socket
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from calculator_smoke_test.testing.pages import write_site


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return int(sock.getsockname()[1])


@pytest.fixture
def free_port() -> Callable[[], int]:
    """Return a function handing out currently unused local ports."""
    return _free_port


@pytest.fixture
def busy_port() -> Iterator[Callable[[], int]]:
    """Return a function that occupies a local port until the test ends."""
    sockets: list[socket.socket] = []

    def _occupy() -> int:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.bind(("127.0.0.1", 0))
        sock.listen()
        sockets.append(sock)
        return int(sock.getsockname()[1])

    yield _occupy

    for sock in sockets:
        sock.close()


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """Create a calculator checkout that passes every check."""
    return write_site(tmp_path / "site")
