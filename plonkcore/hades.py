"""Round constants and MDS matrix of the width-5 Poseidon permutation."""

from __future__ import annotations

import hashlib
from functools import lru_cache

from . import field

CONSTANTS = 960
"""Number of round constants."""

WIDTH = 5
"""Width of the permutation state."""

_SEED = b"poseidon-for-plonk"


@lru_cache(maxsize=1)
def _constants() -> tuple[int, ...]:
    result = []
    previous = 1
    digest = _SEED
    for _ in range(CONSTANTS):
        digest = hashlib.sha512(digest).digest()
        previous = (field.from_bytes_wide(digest) + previous) % field.MODULUS
        result.append(previous)
    return tuple(result)


@lru_cache(maxsize=1)
def _mds() -> tuple[tuple[int, ...], ...]:
    xs = range(WIDTH)
    ys = range(WIDTH, 2 * WIDTH)
    return tuple(tuple(field.invert(x + y) for y in ys) for x in xs)


def constants() -> list[int]:
    """Return the round constants, each chained onto the previous one."""
    return list(_constants())


def mds() -> list[list[int]]:
    """Return the Cauchy MDS matrix ``1 / (x_i + y_j)``."""
    return [list(row) for row in _mds()]