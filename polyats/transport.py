"""UDP datagram transport for text messages."""

from __future__ import annotations

import socket
from typing import Optional, Tuple

MAX_DATAGRAM = 65535


class Communicator:
    """A UDP socket bound to a local address that sends and receives text."""

    def __init__(self, host: str = "127.0.0.1", port: int = 0) -> None:
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            self._socket.bind((host, port))
        except OSError:
            self._socket.close()
            raise

    @property
    def address(self) -> Tuple[str, int]:
        """The local (host, port) the socket is bound to."""
        host, port = self._socket.getsockname()[:2]
        return host, port

    def send(self, message: str, host: str, port: int) -> None:
        """Send *message* as one UTF-8 datagram to (*host*, *port*)."""
        self._socket.sendto(message.encode("utf-8"), (host, port))

    def receive(self, timeout: Optional[float] = None) -> Optional[str]:
        """Wait for one datagram and return its text, or None on timeout."""
        self._socket.settimeout(timeout)
        try:
            data, _sender = self._socket.recvfrom(MAX_DATAGRAM)
        except socket.timeout:
            return None
        return data.decode("utf-8", errors="replace")

    def close(self) -> None:
        """Release the socket."""
        self._socket.close()

    def __enter__(self) -> "Communicator":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()