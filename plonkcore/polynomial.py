"""Polynomials over the scalar field in coefficient form."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from . import field
from .domain import EvaluationDomain


def _strip(coeffs: list[int]) -> list[int]:
    while coeffs and coeffs[-1] == 0:
        coeffs.pop()
    return coeffs


class Polynomial:
    """A polynomial whose coefficient of ``x**i`` is stored at position ``i``.

    Trailing zero coefficients are dropped on construction.
    """

    __slots__ = ("_coeffs",)

    def __init__(self, coeffs: Iterable[int] = ()) -> None:
        self._coeffs: tuple[int, ...] = tuple(
            _strip([field.reduce(c) for c in coeffs])
        )

    @classmethod
    def _raw(cls, coeffs: Iterable[int]) -> Polynomial:
        """Build a polynomial keeping the coefficients exactly as given."""
        poly = cls.__new__(cls)
        poly._coeffs = tuple(field.reduce(c) for c in coeffs)
        return poly

    @classmethod
    def zero(cls) -> Polynomial:
        """Return the zero polynomial."""
        return cls()

    def is_zero(self) -> bool:
        """Whether every coefficient is zero."""
        return all(c == 0 for c in self._coeffs)

    def degree(self) -> int:
        """Degree of the polynomial; zero for the zero polynomial."""
        if self.is_zero():
            return 0
        return len(_strip(list(self._coeffs))) - 1

    def evaluate(self, point: int) -> int:
        """Evaluate the polynomial at ``point``."""
        p = field.MODULUS
        point %= p
        result = 0
        for c in reversed(self._coeffs):
            result = (result * point + c) % p
        return result

    def to_bytes(self) -> bytes:
        """Serialize coefficient by coefficient."""
        return b"".join(field.to_bytes(c) for c in self._coeffs)

    @classmethod
    def from_bytes(cls, data: bytes) -> Polynomial:
        """Deserialize a polynomial written by :meth:`to_bytes`."""
        data = bytes(data)
        size = field.SIZE
        return cls._raw(
            field.from_bytes(data[i:i + size]) for i in range(0, len(data), size)
        )

    def ruffini(self, z: int) -> Polynomial:
        """Divide by ``x - z`` with Ruffini's method, dropping the remainder."""
        p = field.MODULUS
        z %= p
        quotient = []
        k = 0
        for coeff in reversed(self._coeffs):
            t = (coeff + k) % p
            quotient.append(t)
            k = z * t % p
        if quotient:
            quotient.pop()
        quotient.reverse()
        return Polynomial(quotient)

    def add_scaled(self, factor: int, other: Polynomial) -> Polynomial:
        """Return ``self + factor * other``."""
        p = field.MODULUS
        factor %= p
        if self.is_zero():
            return Polynomial._raw(factor * c % p for c in other._coeffs)
        if other.is_zero():
            return self
        length = max(len(self._coeffs), len(other._coeffs))
        a = self._padded(length)
        b = other._padded(length)
        return Polynomial((x + factor * y) % p for x, y in zip(a, b))

    def _padded(self, length: int) -> list[int]:
        return list(self._coeffs) + [0] * (length - len(self._coeffs))

    def __add__(self, other: Polynomial | int) -> Polynomial:
        if isinstance(other, Polynomial):
            if self.is_zero():
                return Polynomial(other._coeffs)
            if other.is_zero():
                return Polynomial(self._coeffs)
            length = max(len(self._coeffs), len(other._coeffs))
            return Polynomial(
                x + y for x, y in zip(self._padded(length), other._padded(length))
            )
        if isinstance(other, int):
            constant = field.reduce(other)
            if self.is_zero():
                return Polynomial([constant])
            if constant == 0:
                return self
            coeffs = list(self._coeffs)
            coeffs[0] += constant
            return Polynomial(coeffs)
        return NotImplemented

    def __radd__(self, other: int) -> Polynomial:
        if isinstance(other, int):
            return self + other
        return NotImplemented

    def __sub__(self, other: Polynomial | int) -> Polynomial:
        if isinstance(other, Polynomial):
            return self.add_scaled(-1, other) if not self.is_zero() else -other
        if isinstance(other, int):
            return self + field.neg(other)
        return NotImplemented

    def __mul__(self, other: Polynomial | int) -> Polynomial:
        p = field.MODULUS
        if isinstance(other, Polynomial):
            if self.is_zero() or other.is_zero():
                return Polynomial.zero()
            domain = EvaluationDomain.new(len(self._coeffs) + len(other._coeffs))
            left = domain.fft(self._coeffs)
            right = domain.fft(other._coeffs)
            return Polynomial(domain.ifft([x * y % p for x, y in zip(left, right)]))
        if isinstance(other, int):
            constant = field.reduce(other)
            if self.is_zero() or constant == 0:
                return Polynomial.zero()
            return Polynomial(c * constant % p for c in self._coeffs)
        return NotImplemented

    def __rmul__(self, other: int) -> Polynomial:
        if isinstance(other, int):
            return self * other
        return NotImplemented

    def __neg__(self) -> Polynomial:
        return Polynomial._raw(field.neg(c) for c in self._coeffs)

    def __len__(self) -> int:
        return len(self._coeffs)

    def __iter__(self) -> Iterator[int]:
        return iter(self._coeffs)

    def __getitem__(self, index):
        return self._coeffs[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coeffs == other._coeffs

    def __hash__(self) -> int:
        return hash(self._coeffs)

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coeffs)!r})"