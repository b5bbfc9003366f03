"""A small IPv4 TCP socket wrapper for listening, accepting and connecting."""

from __future__ import annotations

import ipaddress
import socket as _socket
from typing import Optional

SELF_IP = "127.0.0.1"
ANY_ADDRESS = "0.0.0.0"


class Socket:
    """An IPv4 stream socket together with the address it binds or connects to."""

    def __init__(self, address: Optional[str] = None, port: Optional[int] = None):
        self._sock = _socket.socket(_socket.AF_INET, _socket.SOCK_STREAM)
        self._address = ANY_ADDRESS
        self._port = 0
        if address is not None:
            self.address = address
        if port is not None:
            self.port = port

    @classmethod
    def _from_connection(cls, connection: _socket.socket, address: str, port: int) -> Socket:
        wrapped = cls.__new__(cls)
        wrapped._sock = connection
        wrapped._address = address
        wrapped._port = port
        return wrapped

    def __enter__(self) -> Socket:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def fileno(self) -> int:
        """The underlying descriptor, or -1 once closed."""
        return self._sock.fileno()

    @property
    def address(self) -> str:
        """The IPv4 address in dotted form."""
        return self._address

    @address.setter
    def address(self, value: str) -> None:
        try:
            self._address = str(ipaddress.IPv4Address(value))
        except ValueError:
            raise ValueError(f"could not convert address {value!r}") from None

    @property
    def port(self) -> int:
        """The TCP port."""
        return self._port

    @port.setter
    def port(self, value: int) -> None:
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"port {value} is out of range")
        self._port = value

    def close(self) -> None:
        """Close the socket."""
        self._sock.close()

    def listen(self, queue_size: int) -> None:
        """Bind to the address and port and start listening.

        When the port is 0 the one picked by the system is recorded.
        """
        self._sock.bind((self._address, self._port))
        self._sock.listen(queue_size)
        self._address, self._port = self._sock.getsockname()[:2]

    def accept(self) -> Socket:
        """Wait for a connection and return it, carrying the peer's address."""
        connection, (peer_address, peer_port) = self._sock.accept()
        return Socket._from_connection(connection, peer_address, peer_port)

    def connect(self) -> None:
        """Connect to the address and port."""
        self._sock.connect((self._address, self._port))

    def send(self, data: bytes) -> int:
        """Send ``data`` and return how many bytes went out."""
        return self._sock.send(data)

    def receive(self, byte_size: int) -> bytes:
        """Receive at most ``byte_size`` bytes; empty once the peer has closed."""
        return self._sock.recv(byte_size)