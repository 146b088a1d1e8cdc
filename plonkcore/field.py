"""Arithmetic helpers for the BLS12-381 scalar field."""

from __future__ import annotations

from .errors import BlsScalarMalformed, BytesError

MODULUS = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001
"""Order of the BLS12-381 scalar field."""

SIZE = 32
"""Length in bytes of a serialized scalar."""

GENERATOR = 7
"""Multiplicative generator of the field."""

TWO_ADACITY = 32
"""Largest ``s`` such that ``2**s`` divides ``MODULUS - 1``."""

ROOT_OF_UNITY = pow(GENERATOR, (MODULUS - 1) >> TWO_ADACITY, MODULUS)
"""A primitive ``2**TWO_ADACITY``-th root of unity."""


def reduce(value: int) -> int:
    """Return ``value`` reduced into the field."""
    return value % MODULUS


def neg(value: int) -> int:
    """Return the additive inverse of ``value``."""
    return (-value) % MODULUS


def invert(value: int) -> int:
    """Return the multiplicative inverse of ``value``.

    Raises ZeroDivisionError for zero.
    """
    value %= MODULUS
    if value == 0:
        raise ZeroDivisionError("zero has no inverse in the scalar field")
    return pow(value, MODULUS - 2, MODULUS)


def to_bytes(value: int) -> bytes:
    """Encode a scalar as 32 little-endian bytes."""
    return (value % MODULUS).to_bytes(SIZE, "little")


def from_bytes(data: bytes) -> int:
    """Decode a canonical 32-byte little-endian scalar."""
    if len(data) != SIZE:
        raise BytesError(f"expected {SIZE} bytes, got {len(data)}")
    value = int.from_bytes(data, "little")
    if value >= MODULUS:
        raise BlsScalarMalformed()
    return value


def from_bytes_wide(data: bytes) -> int:
    """Reduce 64 little-endian bytes into a scalar."""
    if len(data) != 2 * SIZE:
        raise BytesError(f"expected {2 * SIZE} bytes, got {len(data)}")
    return int.from_bytes(data, "little") % MODULUS