"""Polynomials represented by their evaluations over a domain."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

from . import field
from .domain import EvaluationDomain
from .polynomial import Polynomial


@dataclass(frozen=True)
class Evaluations:
    """Evaluations of a polynomial over an :class:`EvaluationDomain`."""

    evals: tuple[int, ...]
    domain: EvaluationDomain

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "evals", tuple(field.reduce(v) for v in self.evals)
        )

    @classmethod
    def vanishing_poly_over_coset(
        cls, domain: EvaluationDomain, poly_degree: int
    ) -> Evaluations:
        """Evaluate ``X**poly_degree - 1`` over the coset ``GENERATOR * domain``."""
        if domain.size <= poly_degree:
            raise ValueError(
                f"domain of size {domain.size} is too small for degree {poly_degree}"
            )
        p = field.MODULUS
        coset_gen = pow(field.GENERATOR, poly_degree, p)
        step = pow(domain.group_gen, poly_degree, p)
        values = []
        current = coset_gen
        for _ in range(domain.size):
            values.append((current - 1) % p)
            current = current * step % p
        return cls(tuple(values), domain)

    def to_bytes(self) -> bytes:
        """Serialize the domain followed by the evaluations."""
        return self.domain.to_bytes() + b"".join(
            field.to_bytes(v) for v in self.evals
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> Evaluations:
        """Deserialize evaluations written by :meth:`to_bytes`."""
        data = bytes(data)
        head = EvaluationDomain.SERIALIZED_SIZE
        domain = EvaluationDomain.from_bytes(data[:head])
        rest = data[head:]
        size = field.SIZE
        evals = tuple(
            field.from_bytes(rest[i:i + size]) for i in range(0, len(rest), size)
        )
        return cls(evals, domain)

    def interpolate(self) -> Polynomial:
        """Recover the polynomial in coefficient form."""
        return Polynomial(self.domain.ifft(self.evals))

    def _combine(
        self, other: Evaluations, op: Callable[[int, int], int]
    ) -> Evaluations:
        if not isinstance(other, Evaluations):
            return NotImplemented
        if self.domain != other.domain:
            raise ValueError("domains are unequal")
        combined = [op(a, b) for a, b in zip(self.evals, other.evals)]
        combined.extend(self.evals[len(combined):])
        return Evaluations(tuple(combined), self.domain)

    def __getitem__(self, index):
        return self.evals[index]

    def __len__(self) -> int:
        return len(self.evals)

    def __iter__(self) -> Iterator[int]:
        return iter(self.evals)

    def __add__(self, other: Evaluations) -> Evaluations:
        return self._combine(other, lambda a, b: (a + b) % field.MODULUS)

    def __sub__(self, other: Evaluations) -> Evaluations:
        return self._combine(other, lambda a, b: (a - b) % field.MODULUS)

    def __mul__(self, other: Evaluations) -> Evaluations:
        return self._combine(other, lambda a, b: a * b % field.MODULUS)

    def __truediv__(self, other: Evaluations) -> Evaluations:
        return self._combine(
            other, lambda a, b: a * field.invert(b) % field.MODULUS
        )


def _as_sequence(values: Sequence[int]) -> tuple[int, ...]:
    return tuple(values)