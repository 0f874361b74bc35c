"""Animality Python SDK — random animal images and facts."""

from animality.animal import Animal
from animality.client import AnimalityClient
from animality.exceptions import (
    AnimalityError,
    ConnectionFailedError,
    ConnectorSetupError,
    ErrorKind,
    HandshakeError,
    HTTPStatusError,
    InvalidAnimalError,
    MalformedReason,
    MalformedResponseError,
    ReadError,
    RequestError,
    WriteError,
)

__all__ = [
    # Client
    "AnimalityClient",
    "Animal",
    # Exceptions
    "AnimalityError",
    "InvalidAnimalError",
    "RequestError",
    "ErrorKind",
    "ConnectorSetupError",
    "ConnectionFailedError",
    "HandshakeError",
    "WriteError",
    "ReadError",
    "MalformedResponseError",
    "MalformedReason",
    "HTTPStatusError",
]
