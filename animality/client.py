"""Animality Python client."""

from __future__ import annotations

import logging
from typing import Any, Union

import anyio.to_thread

from animality._http import DEFAULT_HOST, DEFAULT_PORT, HTTPExchange, build_headers
from animality._response import decode, extract_string
from animality.animal import Animal

logger = logging.getLogger(__name__)

AnimalLike = Union[Animal, str]


class AnimalityClient:
    """Client for the Animality API: random animal images and facts.

    Initialise with your API token::

        from animality import AnimalityClient, Animal

        client = AnimalityClient("your token")
        link = client.image(Animal.DOG)
        fact = client.fact("Cat")

    Every call opens its own TLS connection, so one client may be shared
    freely between threads. Failures raise a subclass of
    :class:`~animality.RequestError`; unknown animal names raise
    :class:`~animality.InvalidAnimalError` before anything is sent.
    """

    def __init__(
        self,
        token: str,
        *,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        timeout: float | None = None,
    ):
        self._headers = build_headers(token)
        self._http = HTTPExchange(host, port, timeout=timeout)

    def __repr__(self) -> str:
        return f"AnimalityClient(host={self._http.host!r}, port={self._http.port})"

    def close(self) -> None:
        """No-op; connections never outlive a single call."""

    def __enter__(self) -> "AnimalityClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    # ── Requests ──────────────────────────────────────────────────────────────

    def _fetch(self, kind: str, animal: AnimalLike, field: str) -> str:
        animal = Animal.parse(animal)
        path = f"/{kind}/{animal.canonical_name}"
        raw = self._http.send(path, self._headers)
        return extract_string(decode(raw), field)

    def image(self, animal: AnimalLike) -> str:
        """Fetch a random image link for ``animal``.

        Blocks until the response is read. See :meth:`image_async` for
        use inside an event loop.

        Args:
            animal: An :class:`Animal`, or its name in any casing.

        Returns:
            URL of the image.

        Raises:
            :class:`~animality.InvalidAnimalError`: Unknown animal name.
            :class:`~animality.HTTPStatusError`: The API answered with status >= 400.
            :class:`~animality.MalformedResponseError`: Unexpected response shape.
            :class:`~animality.RequestError`: Any other transport failure.
        """
        return self._fetch("img", animal, "link")

    def fact(self, animal: AnimalLike) -> str:
        """Fetch a random fact about ``animal``.

        Same contract as :meth:`image`, returning the fact text.
        """
        return self._fetch("fact", animal, "fact")

    # ── Async ─────────────────────────────────────────────────────────────────

    async def image_async(self, animal: AnimalLike) -> str:
        """Awaitable :meth:`image`.

        The blocking call runs on a worker thread so the event loop is not
        stalled. Cancelling the awaiting task does not interrupt a request
        that has already started; the task waits for it to finish.
        """
        return await anyio.to_thread.run_sync(self.image, animal)

    async def fact_async(self, animal: AnimalLike) -> str:
        """Awaitable :meth:`fact`. See :meth:`image_async`."""
        return await anyio.to_thread.run_sync(self.fact, animal)
