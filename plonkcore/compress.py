"""Compact, deflated representation of a circuit's layout."""

from __future__ import annotations

import zlib
from dataclasses import astuple, dataclass, fields
from enum import IntEnum

import msgpack

from . import field, hades
from .builder import Builder, Circuit
from .constraint import Constraint, GatePolynomial, Selector
from .errors import InvalidCompressedCircuit
from .witness import Witness


class Version(IntEnum):
    """Compression format version, fixing the table of implicit scalars."""

    V1 = 0
    V2 = 1

    def scalars(self) -> dict[int, int]:
        """Map each scalar known to this version to its table index."""
        table = {0: 0, 1: 1, field.neg(1): 2}
        if self is Version.V2:
            for s in hades.constants():
                table.setdefault(s, len(table))
            for row in hades.mds():
                for s in row:
                    table.setdefault(s, len(table))
        return table


@dataclass(frozen=True, order=True)
class CompressedPolynomial:
    """Selector values of a gate, as indexes into the scalar table."""

    q_m: int = 0
    q_l: int = 0
    q_r: int = 0
    q_o: int = 0
    q_c: int = 0
    q_d: int = 0
    q_arith: int = 0
    q_range: int = 0
    q_logic: int = 0
    q_fixed_group_add: int = 0
    q_variable_group_add: int = 0


@dataclass(frozen=True, order=True)
class CompressedConstraint:
    """A gate as a polynomial index plus its wire witness indexes."""

    polynomial: int = 0
    w_a: int = 0
    w_b: int = 0
    w_d: int = 0
    w_o: int = 0


_SELECTOR_FIELDS = [
    ("q_m", Selector.MULTIPLICATION),
    ("q_l", Selector.LEFT),
    ("q_r", Selector.RIGHT),
    ("q_o", Selector.OUTPUT),
    ("q_c", Selector.CONSTANT),
    ("q_d", Selector.FOURTH),
    ("q_arith", Selector.ARITHMETIC),
    ("q_range", Selector.RANGE),
    ("q_logic", Selector.LOGIC),
    ("q_fixed_group_add", Selector.GROUP_ADD_FIXED_BASE),
    ("q_variable_group_add", Selector.GROUP_ADD_VARIABLE_BASE),
]


def _uint(value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise InvalidCompressedCircuit()
    return value


def _uint_record(cls, value: object):
    if not isinstance(value, (list, tuple)) or len(value) != len(fields(cls)):
        raise InvalidCompressedCircuit()
    return cls(*(_uint(v) for v in value))


@dataclass(frozen=True)
class CompressedCircuit:
    """Deduplicated scalars, selector polynomials and gates of a circuit."""

    version: Version
    public_inputs: tuple[int, ...]
    witnesses: int
    scalars: tuple[bytes, ...]
    polynomials: tuple[CompressedPolynomial, ...]
    constraints: tuple[CompressedConstraint, ...]

    @classmethod
    def from_builder(cls, version: Version, builder: Builder) -> CompressedCircuit:
        """Compress the gates collected by ``builder``."""
        version = Version(version)
        scalars = version.scalars()
        base_len = len(scalars)
        polynomials: dict[CompressedPolynomial, int] = {}
        constraints = []

        for gate in builder.constraints:
            indexes = {
                name: scalars.setdefault(getattr(gate, name), len(scalars))
                for name, _ in _SELECTOR_FIELDS
            }
            polynomial = CompressedPolynomial(**indexes)
            poly_index = polynomials.setdefault(polynomial, len(polynomials))
            constraints.append(
                CompressedConstraint(
                    polynomial=poly_index,
                    w_a=gate.w_a.index,
                    w_b=gate.w_b.index,
                    w_d=gate.w_d.index,
                    w_o=gate.w_o.index,
                )
            )

        extra = [field.to_bytes(s) for s in list(scalars)[base_len:]]
        return cls(
            version=version,
            public_inputs=tuple(builder.public_input_indexes()),
            witnesses=len(builder.witnesses),
            scalars=tuple(extra),
            polynomials=tuple(polynomials),
            constraints=tuple(constraints),
        )

    @classmethod
    def from_circuit(
        cls, circuit: Circuit, version: Version = Version.V2
    ) -> CompressedCircuit:
        """Lay out ``circuit`` in a fresh builder and compress it."""
        builder = Builder()
        circuit.circuit(builder)
        return cls.from_builder(version, builder)

    def to_bytes(self) -> bytes:
        """Pack with msgpack and deflate the result."""
        packed = msgpack.packb(
            [
                int(self.version),
                list(self.public_inputs),
                self.witnesses,
                list(self.scalars),
                [list(astuple(p)) for p in self.polynomials],
                [list(astuple(c)) for c in self.constraints],
            ],
            use_bin_type=True,
        )
        compressor = zlib.compressobj(9, zlib.DEFLATED, -15)
        return compressor.compress(packed) + compressor.flush()

    @classmethod
    def from_bytes(cls, data: bytes) -> CompressedCircuit:
        """Inflate and unpack bytes written by :meth:`to_bytes`."""
        try:
            decompressor = zlib.decompressobj(-15)
            packed = decompressor.decompress(bytes(data))
            if not decompressor.eof:
                raise InvalidCompressedCircuit()
            content = msgpack.unpackb(packed, raw=False)
        except (zlib.error, ValueError, msgpack.ExtraData) as exc:
            raise InvalidCompressedCircuit() from exc
        except msgpack.UnpackException as exc:
            raise InvalidCompressedCircuit() from exc

        if not isinstance(content, list) or len(content) != 6:
            raise InvalidCompressedCircuit()
        version, public_inputs, witnesses, scalars, polynomials, constraints = content

        try:
            version = Version(_uint(version))
        except ValueError as exc:
            raise InvalidCompressedCircuit() from exc
        if not all(
            isinstance(v, list)
            for v in (public_inputs, scalars, polynomials, constraints)
        ):
            raise InvalidCompressedCircuit()
        if not all(isinstance(s, bytes) and len(s) == field.SIZE for s in scalars):
            raise InvalidCompressedCircuit()

        return cls(
            version=version,
            public_inputs=tuple(_uint(i) for i in public_inputs),
            witnesses=_uint(witnesses),
            scalars=tuple(scalars),
            polynomials=tuple(
                _uint_record(CompressedPolynomial, p) for p in polynomials
            ),
            constraints=tuple(
                _uint_record(CompressedConstraint, c) for c in constraints
            ),
        )

    def to_builder(self) -> Builder:
        """Rebuild the circuit layout with zeroed witnesses and public inputs."""
        table = list(self.version.scalars())
        table.extend(field.from_bytes(s) for s in self.scalars)

        def lookup(sequence, index):
            if index >= len(sequence):
                raise InvalidCompressedCircuit()
            return sequence[index]

        builder = Builder()
        for _ in range(self.witnesses):
            builder.append_witness(0)

        pending = iter(self.public_inputs)
        next_public = next(pending, None)
        for i, compressed in enumerate(self.constraints):
            polynomial = lookup(self.polynomials, compressed.polynomial)
            constraint = Constraint()
            for name, selector in _SELECTOR_FIELDS:
                constraint = constraint.set(
                    selector, lookup(table, getattr(polynomial, name))
                )
            constraint = (
                constraint.a(Witness(compressed.w_a))
                .b(Witness(compressed.w_b))
                .d(Witness(compressed.w_d))
                .o(Witness(compressed.w_o))
            )
            if next_public == i:
                constraint = constraint.public(0)
                next_public = next(pending, None)
            builder.append_custom_gate(constraint)

        return builder


def compress(builder: Builder, version: Version = Version.V2) -> bytes:
    """Return the compressed bytes of the circuit held by ``builder``."""
    return CompressedCircuit.from_builder(version, builder).to_bytes()


def decompress(data: bytes) -> Builder:
    """Rebuild a circuit layout from bytes produced by :func:`compress`."""
    return CompressedCircuit.from_bytes(data).to_builder()


__all__ = [
    "CompressedCircuit",
    "CompressedConstraint",
    "CompressedPolynomial",
    "GatePolynomial",
    "Version",
    "compress",
    "decompress",
]