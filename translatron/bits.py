"""Bit-field helpers for 32-bit instruction words."""

from __future__ import annotations

WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1


def _check_span(start: int, width: int) -> None:
    if not 0 <= start < WORD_BITS:
        raise ValueError(f"start bit {start} is outside a {WORD_BITS}-bit word")
    if width < 0 or start - width + 1 < 0:
        raise ValueError(f"{width} bits from bit {start} run past bit 0")


def to_binary(num: int, size: int) -> str:
    """Return ``num`` in binary, zero-padded to at least ``size`` digits."""
    if num < 0:
        raise ValueError("cannot convert a negative number")
    digits = format(num, "b") if num else ""
    return digits.rjust(size, "0")


def set_bits(word: int, start: int, pattern: str) -> int:
    """OR the 0/1 characters of ``pattern`` into ``word`` from bit ``start`` down.

    Characters other than '0' and '1' leave their bit untouched. Bits are only
    ever set, never cleared.
    """
    _check_span(start, len(pattern))
    for offset, char in enumerate(pattern):
        if char == "1":
            word |= 1 << (start - offset)
    return word & WORD_MASK


def set_field(word: int, start: int, value: int, size: int) -> int:
    """OR ``value``, written on at least ``size`` bits, into ``word`` from bit ``start``."""
    return set_bits(word, start, to_binary(value, size))


def check_bits(word: int, start: int, pattern: str) -> bool:
    """Tell whether ``word`` holds ``pattern`` from bit ``start`` down.

    Characters other than '0' and '1' match any bit.
    """
    _check_span(start, len(pattern))
    return all(
        int(char) == (word >> (start - offset)) & 1
        for offset, char in enumerate(pattern)
        if char in "01"
    )


def get_bits(word: int, start: int, size: int) -> int:
    """Return the ``size``-bit field of ``word`` whose top bit is ``start``."""
    _check_span(start, size)
    return (word >> (start - size + 1)) & ((1 << size) - 1)