"""Animality exception hierarchy."""

from __future__ import annotations

import enum


class ErrorKind(str, enum.Enum):
    """Stage of the request at which a :class:`RequestError` was raised."""

    CONNECTOR_SETUP = "connector_setup"
    CONNECTION = "connection"
    HANDSHAKE = "handshake"
    WRITE = "write"
    READ = "read"
    MALFORMED_RESPONSE = "malformed_response"
    HTTP_STATUS = "http_status"


class MalformedReason(str, enum.Enum):
    """Why a response was rejected as malformed."""

    NO_SEPARATOR = "no_separator"          # no blank line between headers and body
    BAD_STATUS_LINE = "bad_status_line"
    INVALID_JSON = "invalid_json"
    NOT_AN_OBJECT = "not_an_object"        # valid JSON, but not a {...} object
    MISSING_FIELD = "missing_field"
    WRONG_FIELD_TYPE = "wrong_field_type"


class AnimalityError(Exception):
    """Base exception for all Animality errors."""


class InvalidAnimalError(AnimalityError, ValueError):
    """Animal name is not part of the supported set."""

    def __init__(self, name: object):
        super().__init__(f"Invalid animal name provided: {name!r}")
        self.name = name


class RequestError(AnimalityError):
    """A request to the API failed. ``cause`` holds the low-level exception, if any."""

    kind: ErrorKind

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class ConnectorSetupError(RequestError):
    """The TLS context could not be created (e.g. unreadable trust store)."""

    kind = ErrorKind.CONNECTOR_SETUP


class ConnectionFailedError(RequestError):
    """The TCP connection to the API host could not be opened."""

    kind = ErrorKind.CONNECTION


class HandshakeError(RequestError):
    """TLS negotiation failed after the socket connected."""

    kind = ErrorKind.HANDSHAKE


class WriteError(RequestError):
    """The request bytes could not be fully written."""

    kind = ErrorKind.WRITE


class ReadError(RequestError):
    """The response could not be read to end-of-stream."""

    kind = ErrorKind.READ


class MalformedResponseError(RequestError):
    """The response could not be understood. Contains ``reason``."""

    kind = ErrorKind.MALFORMED_RESPONSE

    def __init__(self, message: str, reason: MalformedReason, cause: BaseException | None = None):
        super().__init__(message, cause=cause)
        self.reason = reason


class HTTPStatusError(RequestError):
    """The API answered with a status code >= 400. Contains ``status_code`` and ``message``."""

    kind = ErrorKind.HTTP_STATUS

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code} - {message}")
        self.status_code = status_code
        self.message = message
