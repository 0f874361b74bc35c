"""The closed set of animals served by the API."""

from __future__ import annotations

import enum

from animality.exceptions import InvalidAnimalError


class Animal(str, enum.Enum):
    """An animal supported by the Animality API.

    Build one from user input with :meth:`parse`, which is case-insensitive::

        Animal.parse("Dog") is Animal.DOG
    """

    CAT = "cat"
    DOG = "dog"
    BIRD = "bird"
    PANDA = "panda"
    REDPANDA = "redpanda"
    KOALA = "koala"
    FOX = "fox"
    WHALE = "whale"
    DOLPHIN = "dolphin"
    KANGAROO = "kangaroo"
    BUNNY = "bunny"
    LION = "lion"
    BEAR = "bear"
    FROG = "frog"
    DUCK = "duck"
    PENGUIN = "penguin"
    AXOLOTL = "axolotl"
    CAPYBARA = "capybara"

    @classmethod
    def parse(cls, text: str) -> "Animal":
        """Return the animal named ``text`` (any casing).

        Raises:
            :class:`~animality.InvalidAnimalError`: ``text`` names no known animal.
        """
        if isinstance(text, cls):
            return text
        if not isinstance(text, str):
            raise InvalidAnimalError(text)
        try:
            return cls(text.lower())
        except ValueError:
            raise InvalidAnimalError(text) from None

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(a.value for a in cls)

    @property
    def canonical_name(self) -> str:
        """Lowercase identifier used in the request path."""
        return self.value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Animal({self.value})"
