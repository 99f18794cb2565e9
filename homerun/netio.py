"""Length-prefixed packet transport over stream sockets."""

from __future__ import annotations

import socket
import struct

from homerun.protocol import GameReady

_HEADER = struct.Struct("<I")


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    buf = bytearray()
    while len(buf) < size:
        chunk = sock.recv(size - len(buf))
        if not chunk:
            raise ConnectionError("connection closed while reading a packet")
        buf += chunk
    return bytes(buf)


def send_packet(sock: socket.socket, text: str) -> None:
    """Send text preceded by its byte length as a 4-byte little-endian integer."""
    payload = text.encode("utf-8")
    if len(payload) > 0xFFFFFFFF:
        raise ValueError("packet too large")
    sock.sendall(_HEADER.pack(len(payload)) + payload)


def recv_packet(sock: socket.socket) -> str:
    """Receive one length-prefixed packet and return its text."""
    (size,) = _HEADER.unpack(_recv_exact(sock, _HEADER.size))
    return _recv_exact(sock, size).decode("utf-8")


def send_start_flag(sock: socket.socket) -> None:
    """Tell the peer that the game may start."""
    send_packet(sock, GameReady(True).to_json())


def recv_start_flag(sock: socket.socket) -> str:
    """Wait for the peer's start packet and return its text."""
    return recv_packet(sock)


def disconnect(sock: socket.socket) -> None:
    """Shut down both directions of the socket and close it."""
    try:
        sock.shutdown(socket.SHUT_RDWR)
    except OSError:
        pass
    finally:
        sock.close()