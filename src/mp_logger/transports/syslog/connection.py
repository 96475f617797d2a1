"""Syslog transport – connection variants.

The transport picks one variant at construction:

* :class:`DatagramConnection` – connectionless UDP socket, opened
  synchronously, no connect phase.
* :class:`StreamConnection` – asyncio stream over TCP, optionally wrapped
  in TLS; lines are newline-terminated.

Both expose ``writable`` and ``drain()`` so the transport can stop moving
lines out of its bounded queue while the socket is backed up.
"""
from __future__ import annotations

import asyncio
import socket
import ssl
from typing import Callable

from mp_logger.kernel.errors.config import InvalidSettingValueError
from mp_logger.transports.syslog.config import TLSOptions

LostCallback = Callable[[BaseException | None], None]


def build_ssl_context(options: TLSOptions) -> ssl.SSLContext:
    """Client context from *options*.

    Raises
    ------
    InvalidSettingValueError
        When a certificate or key file cannot be loaded.
    """
    try:
        context = ssl.create_default_context(cafile=options.ca_file)
        if options.cert_file:
            context.load_cert_chain(options.cert_file, options.key_file)
    except (OSError, ssl.SSLError) as exc:
        raise InvalidSettingValueError("tls", options, str(exc)) from exc
    if not options.verify:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context


class DatagramConnection:
    """Non-blocking UDP socket; every line is one datagram."""

    def __init__(self, address: tuple[str, int]) -> None:
        self._address = address
        self._sock: socket.socket | None = None
        self._target: tuple[object, ...] | None = None

    @property
    def is_open(self) -> bool:
        return self._sock is not None

    def open(self) -> None:
        host, port = self._address
        family, type_, proto, _, sockaddr = socket.getaddrinfo(host, port, type=socket.SOCK_DGRAM)[0]
        sock = socket.socket(family, type_, proto)
        sock.setblocking(False)
        self._sock, self._target = sock, sockaddr

    def send(self, line: str) -> None:
        if self._sock is None or self._target is None:
            raise ConnectionError("syslog datagram socket is not open")
        self._sock.sendto(line.encode("utf-8"), self._target)

    @property
    def writable(self) -> bool:
        return True

    async def drain(self) -> None:
        return None

    def abort(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    async def close(self) -> None:
        self.abort()


class StreamConnection:
    """TCP or TLS stream.

    A background reader watches the socket: the daemon never writes back,
    so EOF or a read error means the peer went away and *on_lost* is
    called.
    """

    def __init__(
        self,
        address: tuple[str, int],
        *,
        on_lost: LostCallback,
        ssl_context: ssl.SSLContext | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._address = address
        self._on_lost = on_lost
        self._ssl = ssl_context
        self._timeout = timeout
        self._writer: asyncio.StreamWriter | None = None
        self._watcher: asyncio.Task[None] | None = None

    @property
    def encrypted(self) -> bool:
        return self._ssl is not None

    @property
    def is_open(self) -> bool:
        return self._writer is not None and not self._writer.is_closing()

    async def open(self) -> None:
        host, port = self._address
        reader, writer = await asyncio.wait_for(
            asyncio.open_connection(host, port, ssl=self._ssl),
            timeout=self._timeout or None,
        )
        self._writer = writer
        self._watcher = asyncio.get_running_loop().create_task(self._watch(reader))

    async def _watch(self, reader: asyncio.StreamReader) -> None:
        error: BaseException | None = None
        try:
            while await reader.read(4096):
                pass
        except OSError as exc:
            error = exc
        self._watcher = None
        self._on_lost(error)

    def send(self, line: str) -> None:
        if self._writer is None or self._writer.is_closing():
            raise ConnectionResetError("syslog stream is not connected")
        self._writer.write(line.encode("utf-8") + b"\n")

    @property
    def buffered(self) -> int:
        """Bytes accepted by :meth:`send` that the kernel has not taken yet."""
        if self._writer is None:
            return 0
        return self._writer.transport.get_write_buffer_size()

    @property
    def writable(self) -> bool:
        """False while the write buffer is above the transport's high-water mark."""
        if self._writer is None:
            return True
        _, high = self._writer.transport.get_write_buffer_limits()
        return self.buffered <= high

    async def drain(self) -> None:
        """Wait until the write buffer falls back under its low-water mark."""
        if self._writer is not None:
            await self._writer.drain()

    def abort(self) -> None:
        if self._watcher is not None:
            self._watcher.cancel()
            self._watcher = None
        if self._writer is not None:
            self._writer.transport.abort()
            self._writer = None

    async def close(self) -> None:
        if self._watcher is not None:
            self._watcher.cancel()
            self._watcher = None
        writer, self._writer = self._writer, None
        if writer is None:
            return
        writer.close()
        try:
            await asyncio.wait_for(writer.wait_closed(), timeout=self._timeout or None)
        except asyncio.TimeoutError:
            # peer stopped reading: drop whatever is still buffered
            writer.transport.abort()
        except OSError:
            pass


Connection = DatagramConnection | StreamConnection

__all__ = ["Connection", "DatagramConnection", "StreamConnection", "build_ssl_context"]
