"""Radix-2 evaluation domains over the scalar field and their (I)FFTs."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from . import field
from .errors import BytesError, InvalidEvalDomainSize

_U64 = 8
_U32 = 4


def _next_power_of_two(n: int) -> int:
    """Smallest power of two greater than or equal to ``n`` (1 for ``n <= 1``)."""
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


def bitreverse(n: int, bits: int) -> int:
    """Reverse the lowest ``bits`` bits of ``n``."""
    result = 0
    for _ in range(bits):
        result = (result << 1) | (n & 1)
        n >>= 1
    return result


def serial_fft(values: Sequence[int], omega: int, log_n: int) -> list[int]:
    """Return the radix-2 FFT of ``values`` using the root of unity ``omega``.

    The number of values must be exactly ``2**log_n``.
    """
    a = [v % field.MODULUS for v in values]
    n = len(a)
    if n != 1 << log_n:
        raise ValueError(f"expected {1 << log_n} values, got {n}")

    for k in range(n):
        rk = bitreverse(k, log_n)
        if k < rk:
            a[k], a[rk] = a[rk], a[k]

    p = field.MODULUS
    m = 1
    for _ in range(log_n):
        w_m = pow(omega, n // (2 * m), p)
        for k in range(0, n, 2 * m):
            w = 1
            for j in range(k, k + m):
                t = a[j + m] * w % p
                u = a[j]
                a[j + m] = (u - t) % p
                a[j] = (u + t) % p
                w = w * w_m % p
        m *= 2

    return a


def _distribute_powers(coeffs: Sequence[int], g: int) -> list[int]:
    p = field.MODULUS
    result = []
    power = 1
    for c in coeffs:
        result.append(c * power % p)
        power = power * g % p
    return result


def _resized(values: Sequence[int], size: int) -> list[int]:
    values = list(values[:size])
    values.extend([0] * (size - len(values)))
    return values


@dataclass(frozen=True)
class EvaluationDomain:
    """A multiplicative subgroup of power-of-two size used for (I)FFTs."""

    size: int
    log_size_of_group: int
    size_as_field_element: int
    size_inv: int
    group_gen: int
    group_gen_inv: int
    generator_inv: int

    SERIALIZED_SIZE = _U64 + _U32 + 5 * field.SIZE

    @classmethod
    def new(cls, num_coeffs: int) -> EvaluationDomain:
        """Build a domain large enough for ``num_coeffs`` coefficients."""
        size = _next_power_of_two(num_coeffs)
        log_size_of_group = size.bit_length() - 1

        if log_size_of_group >= field.TWO_ADACITY:
            raise InvalidEvalDomainSize(log_size_of_group, field.TWO_ADACITY)

        group_gen = field.ROOT_OF_UNITY
        for _ in range(log_size_of_group, field.TWO_ADACITY):
            group_gen = group_gen * group_gen % field.MODULUS

        size_as_field_element = field.reduce(size)
        return cls(
            size=size,
            log_size_of_group=log_size_of_group,
            size_as_field_element=size_as_field_element,
            size_inv=field.invert(size_as_field_element),
            group_gen=group_gen,
            group_gen_inv=field.invert(group_gen),
            generator_inv=field.invert(field.GENERATOR),
        )

    def fft(self, coeffs: Sequence[int]) -> list[int]:
        """Evaluate the coefficients over the domain."""
        return serial_fft(
            _resized(coeffs, self.size), self.group_gen, self.log_size_of_group
        )

    def ifft(self, evals: Sequence[int]) -> list[int]:
        """Interpolate coefficients from evaluations over the domain."""
        values = serial_fft(
            _resized(evals, self.size), self.group_gen_inv, self.log_size_of_group
        )
        return [v * self.size_inv % field.MODULUS for v in values]

    def coset_fft(self, coeffs: Sequence[int]) -> list[int]:
        """Evaluate the coefficients over the coset ``GENERATOR * domain``."""
        return self.fft(_distribute_powers(coeffs, field.GENERATOR))

    def coset_ifft(self, evals: Sequence[int]) -> list[int]:
        """Interpolate coefficients from evaluations over the coset."""
        return _distribute_powers(self.ifft(evals), self.generator_inv)

    def evaluate_all_lagrange_coefficients(self, tau: int) -> list[int]:
        """Evaluate every Lagrange basis polynomial of the domain at ``tau``."""
        p = field.MODULUS
        tau %= p
        t_size = pow(tau, self.size, p)

        if t_size == 1:
            result = [0] * self.size
            for i, omega_i in enumerate(self.elements()):
                if omega_i == tau:
                    result[i] = 1
                    break
            return result

        result = []
        l = (t_size - 1) * self.size_inv % p
        r = 1
        for _ in range(self.size):
            result.append(l * field.invert(tau - r) % p)
            l = l * self.group_gen % p
            r = r * self.group_gen % p
        return result

    def evaluate_vanishing_polynomial(self, tau: int) -> int:
        """Evaluate ``X**size - 1`` at ``tau``."""
        return (pow(tau, self.size, field.MODULUS) - 1) % field.MODULUS

    def elements(self) -> Iterator[int]:
        """Yield the domain elements ``group_gen**i`` in order."""
        current = 1
        for _ in range(self.size):
            yield current
            current = current * self.group_gen % field.MODULUS

    def to_bytes(self) -> bytes:
        """Serialize the domain."""
        return b"".join(
            (
                self.size.to_bytes(_U64, "little"),
                self.log_size_of_group.to_bytes(_U32, "little"),
                field.to_bytes(self.size_as_field_element),
                field.to_bytes(self.size_inv),
                field.to_bytes(self.group_gen),
                field.to_bytes(self.group_gen_inv),
                field.to_bytes(self.generator_inv),
            )
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> EvaluationDomain:
        """Deserialize a domain written by :meth:`to_bytes`."""
        data = bytes(data)
        if len(data) != cls.SERIALIZED_SIZE:
            raise BytesError(
                f"expected {cls.SERIALIZED_SIZE} bytes, got {len(data)}"
            )
        size = int.from_bytes(data[:_U64], "little")
        log_size_of_group = int.from_bytes(data[_U64:_U64 + _U32], "little")
        offset = _U64 + _U32
        scalars = [
            field.from_bytes(data[offset + i * field.SIZE:offset + (i + 1) * field.SIZE])
            for i in range(5)
        ]
        return cls(size, log_size_of_group, *scalars)