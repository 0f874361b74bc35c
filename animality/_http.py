"""Low-level HTTP/1.0-over-TLS transport for the Animality API."""

from __future__ import annotations

import logging
import ssl
from typing import Callable

import httpcore
import httpx

from animality.exceptions import (
    ConnectionFailedError,
    ConnectorSetupError,
    HandshakeError,
    ReadError,
    WriteError,
)

logger = logging.getLogger(__name__)

DEFAULT_HOST = "api.animality.xyz"
DEFAULT_PORT = 443
READ_CHUNK = 65536


def build_headers(token: str) -> str:
    """Format the fixed header block, terminated by the blank line."""
    return (
        "Content-Type: application/json\r\n"
        "Accept: application/json\r\n"
        f"Authorization: Bearer {token}\r\n"
        "\r\n"
    )


def build_request(path: str, header_block: str) -> bytes:
    return f"GET {path} HTTP/1.0\r\n{header_block}".encode("utf-8")


class HTTPExchange:
    """One-shot request/response exchange over a fresh TLS connection.

    Every :meth:`send` opens its own connection, writes the request, reads
    until the server closes the stream and closes the connection again. No
    timeout is applied unless one is given: a silent peer blocks forever.

    ``backend`` is any :mod:`httpcore` network backend; tests pass a fake one.
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        *,
        timeout: float | None = None,
        backend: httpcore.NetworkBackend | None = None,
        ssl_context_factory: Callable[[], ssl.SSLContext] = httpx.create_ssl_context,
    ):
        self.host = host
        self.port = port
        self.timeout = timeout
        self._backend = backend or httpcore.SyncBackend()
        self._ssl_context_factory = ssl_context_factory

    def send(self, path: str, header_block: str) -> bytes:
        """Send ``GET path`` and return the raw, fully buffered response."""
        try:
            ctx = self._ssl_context_factory()
        except Exception as exc:
            logger.warning("TLS context setup failed: %s", exc)
            raise ConnectorSetupError(f"cannot create TLS connector: {exc}", cause=exc) from exc

        logger.debug("connecting to %s:%d", self.host, self.port)
        try:
            stream = self._backend.connect_tcp(self.host, self.port, timeout=self.timeout)
        except Exception as exc:
            logger.debug("connect to %s:%d failed: %s", self.host, self.port, exc)
            raise ConnectionFailedError(
                f"cannot connect to {self.host}:{self.port}: {exc}", cause=exc
            ) from exc

        try:
            try:
                stream = stream.start_tls(ctx, server_hostname=self.host, timeout=self.timeout)
            except Exception as exc:
                logger.debug("TLS handshake with %s failed: %s", self.host, exc)
                raise HandshakeError(f"TLS handshake with {self.host} failed: {exc}", cause=exc) from exc

            logger.debug("GET %s", path)
            try:
                stream.write(build_request(path, header_block), timeout=self.timeout)
            except Exception as exc:
                raise WriteError(f"cannot write request: {exc}", cause=exc) from exc

            return self._read_to_end(stream)
        finally:
            self._close(stream)

    def _read_to_end(self, stream: httpcore.NetworkStream) -> bytes:
        chunks = []
        try:
            while True:
                chunk = stream.read(READ_CHUNK, timeout=self.timeout)
                if not chunk:
                    break
                chunks.append(chunk)
        except Exception as exc:
            raise ReadError(f"cannot read response: {exc}", cause=exc) from exc
        raw = b"".join(chunks)
        logger.debug("read %d bytes", len(raw))
        return raw

    @staticmethod
    def _close(stream: httpcore.NetworkStream) -> None:
        try:
            stream.close()
        except Exception as exc:
            logger.debug("error while closing stream: %s", exc)
