"""Base-5 encoding of trigrams.

Each direction is one digit (c=0, l=1, r=2, u=3, d=4) and slot 0 is the
most significant, so every trigram has a unique code in 0..124.
"""

from __future__ import annotations

from trigrameyes.decode.base import UnknownDirectionSymbol
from trigrameyes.domain.models import Direction, Trigram

BASE = len(Direction)
CODE_COUNT = BASE**3

DIGITS: dict[Direction, int] = {direction: i for i, direction in enumerate(Direction)}
_SYMBOL_DIGITS: dict[str, int] = {direction.value: i for direction, i in DIGITS.items()}
_DIRECTIONS: tuple[Direction, ...] = tuple(Direction)


def encode(trigram: Trigram | str) -> int:
    """Return the base-5 code of a trigram or its three-letter string.

    Raises:
        UnknownDirectionSymbol: If a symbol is not one of ``c l r u d``.
        ValueError: If a string is not exactly three symbols long.
    """
    symbols = str(trigram)
    if len(symbols) != 3:
        raise ValueError(f"Trigram must have 3 symbols, got {symbols!r}")

    code = 0
    for symbol in symbols:
        try:
            digit = _SYMBOL_DIGITS[symbol]
        except KeyError:
            raise UnknownDirectionSymbol(
                f"Unknown direction symbol {symbol!r} in trigram {symbols!r}"
            ) from None
        code = code * BASE + digit
    return code


def decode_code(code: int) -> Trigram:
    """Inverse of :func:`encode`."""
    if not 0 <= code < CODE_COUNT:
        raise ValueError(f"Trigram code must be in 0..{CODE_COUNT - 1}, got {code}")
    slots = []
    for _ in range(3):
        code, digit = divmod(code, BASE)
        slots.append(_DIRECTIONS[digit])
    return Trigram(slots=tuple(reversed(slots)))
