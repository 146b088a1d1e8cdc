import zlib

import msgpack
import pytest

from plonkcore import field
from plonkcore.builder import Builder, Circuit
from plonkcore.compress import (
    CompressedCircuit,
    CompressedConstraint,
    CompressedPolynomial,
    Version,
    compress,
    decompress,
)
from plonkcore.constraint import Constraint
from plonkcore.errors import BlsScalarMalformed, InvalidCompressedCircuit


def _sample_builder() -> Builder:
    builder = Builder()
    a = builder.append_witness(3)
    b = builder.append_witness(4)
    o = builder.append_witness(12)
    builder.append_custom_gate(
        Constraint.arithmetic(Constraint().mult(1).output(-1).a(a).b(b).o(o))
    )
    builder.append_custom_gate(
        Constraint.arithmetic(Constraint().left(1).public(-3).a(a))
    )
    builder.append_custom_gate(
        Constraint.arithmetic(Constraint().left(12345).constant(777).a(b).d(o))
    )
    builder.append_custom_gate(
        Constraint.arithmetic(Constraint().mult(1).output(-1).a(a).b(b).o(o))
    )
    builder.append_custom_gate(
        Constraint.logic(Constraint().right(2).public(9).b(o))
    )
    return builder


def _raw_deflate(payload: bytes) -> bytes:
    c = zlib.compressobj(9, zlib.DEFLATED, -15)
    return c.compress(payload) + c.flush()


def test_v1_scalars():
    assert Version.V1.scalars() == {0: 0, 1: 1, field.MODULUS - 1: 2}


def test_v2_scalars_extend_v1_with_contiguous_indexes():
    table = Version.V2.scalars()
    assert list(table.items())[:3] == list(Version.V1.scalars().items())
    assert sorted(table.values()) == list(range(len(table)))
    assert 3 < len(table) <= 3 + 960 + 25


@pytest.mark.parametrize("version", [Version.V1, Version.V2])
def test_round_trip_preserves_layout(version):
    builder = _sample_builder()
    restored = decompress(compress(builder, version))
    assert restored.constraints == builder.constraints
    assert len(restored.witnesses) == len(builder.witnesses)
    assert all(v == 0 for v in restored.witnesses)
    assert restored.public_input_indexes() == builder.public_input_indexes()
    assert restored.public_inputs() == [0, 0]


def test_identical_gates_share_a_polynomial():
    compressed = CompressedCircuit.from_builder(Version.V1, _sample_builder())
    assert len(compressed.constraints) == 5
    assert len(compressed.polynomials) == 4
    assert compressed.constraints[0].polynomial == compressed.constraints[3].polynomial


def test_only_unknown_scalars_are_stored():
    compressed = CompressedCircuit.from_builder(Version.V1, _sample_builder())
    assert field.to_bytes(12345) in compressed.scalars
    assert field.to_bytes(777) in compressed.scalars
    assert field.to_bytes(1) not in compressed.scalars
    assert len(set(compressed.scalars)) == len(compressed.scalars)


def test_header_fields():
    compressed = CompressedCircuit.from_builder(Version.V2, _sample_builder())
    assert compressed.version is Version.V2
    assert compressed.witnesses == 3
    assert compressed.public_inputs == (1, 4)


def test_compressed_circuit_bytes_round_trip():
    compressed = CompressedCircuit.from_builder(Version.V2, _sample_builder())
    assert CompressedCircuit.from_bytes(compressed.to_bytes()) == compressed


def test_from_circuit_matches_builder():
    class Sample(Circuit):
        def circuit(self, composer):
            w = composer.append_witness(5)
            composer.append_custom_gate(
                Constraint.arithmetic(Constraint().left(1).constant(-5).a(w))
            )

    compressed = CompressedCircuit.from_circuit(Sample(), Version.V1)
    builder = Builder()
    Sample().circuit(builder)
    assert compressed == CompressedCircuit.from_builder(Version.V1, builder)
    assert compressed.to_builder().constraints == builder.constraints


def test_empty_builder_round_trip():
    restored = decompress(compress(Builder()))
    assert len(restored) == 0
    assert restored.witnesses == []


def test_garbage_is_rejected():
    with pytest.raises(InvalidCompressedCircuit):
        decompress(b"not a compressed circuit")


def test_wrong_structure_is_rejected():
    with pytest.raises(InvalidCompressedCircuit):
        decompress(_raw_deflate(msgpack.packb([1, 2])))


def test_unknown_version_is_rejected():
    payload = msgpack.packb([7, [], 0, [], [], []])
    with pytest.raises(InvalidCompressedCircuit):
        decompress(_raw_deflate(payload))


def test_missing_polynomial_is_rejected():
    compressed = CompressedCircuit(
        version=Version.V1,
        public_inputs=(),
        witnesses=1,
        scalars=(),
        polynomials=(),
        constraints=(CompressedConstraint(polynomial=0),),
    )
    with pytest.raises(InvalidCompressedCircuit):
        compressed.to_builder()


def test_missing_scalar_is_rejected():
    compressed = CompressedCircuit(
        version=Version.V1,
        public_inputs=(),
        witnesses=1,
        scalars=(),
        polynomials=(CompressedPolynomial(q_m=3),),
        constraints=(CompressedConstraint(polynomial=0),),
    )
    with pytest.raises(InvalidCompressedCircuit):
        decompress(compressed.to_bytes())


def test_malformed_scalar_is_rejected():
    compressed = CompressedCircuit(
        version=Version.V1,
        public_inputs=(),
        witnesses=0,
        scalars=(b"\xff" * 32,),
        polynomials=(),
        constraints=(),
    )
    with pytest.raises(BlsScalarMalformed):
        compressed.to_builder()