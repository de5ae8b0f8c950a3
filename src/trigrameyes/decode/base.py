"""Decode method interface and error types.

A decode method turns base-5 trigram codes into canonical indices.
Methods are registered by name so the CLI can select one; an unknown name
is reported with UnknownDecodeMethod and the caller decides whether that
is fatal.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class DecodeError(Exception):
    """Base class for decoding failures."""


class UnknownDirectionSymbol(DecodeError):
    """Raised when a trigram contains a symbol that is not a direction.

    The classifier only emits known directions, so this points at a
    classifier defect or a hand-built trigram string.
    """


class UnmatchedTriangleSignature(DecodeError):
    """Raised when a code's triangle signature is absent from the unique list."""


class InvalidTrigramCode(DecodeError, IndexError):
    """Raised when a trigram code is outside 0..124."""


class UnknownDecodeMethod(DecodeError):
    """Raised when no decode method is registered under a name."""


class DecodeMethod(ABC):
    """Maps a trigram code (0-124) to a canonical class index."""

    name: str = ""

    @abstractmethod
    def decode(self, code: int) -> int:
        """Return the canonical index for ``code``.

        Raises:
            DecodeError: If the code cannot be decoded.
        """
        ...


_REGISTRY: dict[str, type[DecodeMethod]] = {}


def register_method(cls: type[DecodeMethod]) -> type[DecodeMethod]:
    """Class decorator adding a decode method under its ``name``."""
    if not cls.name:
        raise ValueError(f"{cls.__name__} must define a name")
    _REGISTRY[cls.name] = cls
    return cls


def available_methods() -> list[str]:
    return sorted(_REGISTRY)


def get_method(name: str) -> DecodeMethod:
    """Instantiate the decode method registered under ``name``.

    Raises:
        UnknownDecodeMethod: If nothing is registered under ``name``.
    """
    try:
        cls = _REGISTRY[name]
    except KeyError:
        raise UnknownDecodeMethod(
            f"Unknown trigram decode method {name!r} "
            f"(available: {', '.join(available_methods())})"
        ) from None
    return cls()
