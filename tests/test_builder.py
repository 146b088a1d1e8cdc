import pytest

from plonkcore import field
from plonkcore.builder import Builder, Circuit
from plonkcore.constraint import Constraint, GatePolynomial
from plonkcore.errors import PlonkError
from plonkcore.witness import Witness


def test_append_witness_allocates_sequential_indexes():
    builder = Builder()
    w0 = builder.append_witness(10)
    w1 = builder.append_witness(20)
    assert w0 == Witness(0)
    assert w1 == Witness(1)
    assert builder[w0] == 10
    assert builder[w1] == 20


def test_witness_values_reduced():
    builder = Builder()
    w = builder.append_witness(-1)
    assert builder[w] == field.MODULUS - 1


def test_unknown_witness_raises():
    with pytest.raises(IndexError):
        Builder()[Witness(0)]


def test_append_custom_gate_stores_polynomial():
    builder = Builder()
    a = builder.append_witness(3)
    c = Constraint.arithmetic(Constraint().left(1).a(a))
    builder.append_custom_gate(c)
    assert len(builder) == 1
    assert builder.constraints[0] == GatePolynomial.from_constraint(c)
    assert builder.public_input_indexes() == []


def test_public_inputs_are_sorted_by_gate():
    builder = Builder()
    builder.append_custom_gate(Constraint())
    builder.append_custom_gate(Constraint().public(7))
    builder.append_custom_gate(Constraint())
    builder.append_custom_gate(Constraint().public(11))
    assert builder.public_input_indexes() == [1, 3]
    assert builder.public_inputs() == [7, 11]


def test_dense_public_inputs():
    dense = Builder.dense_public_inputs([1, 3], [7, 11], 4)
    assert dense == [0, 7, 0, 11]


def test_dense_public_inputs_out_of_range():
    with pytest.raises(IndexError):
        Builder.dense_public_inputs([5], [1], 4)


class _TwoGates(Circuit):
    def circuit(self, composer):
        x = composer.append_witness(2)
        composer.append_custom_gate(Constraint.arithmetic(Constraint().left(1).a(x)))
        composer.append_custom_gate(Constraint.arithmetic(Constraint().public(2)))


class _Failing(Circuit):
    def circuit(self, composer):
        composer.append_custom_gate(Constraint())
        raise PlonkError("boom")


def test_circuit_size_counts_gates():
    builder = Builder()
    _TwoGates().circuit(builder)
    assert Circuit.size(_TwoGates()) == 2
    assert Circuit.size(_TwoGates()) == len(builder)


def test_circuit_size_zero_on_error():
    builder = Builder()
    with pytest.raises(PlonkError):
        _Failing().circuit(builder)
    assert len(builder) == 1
    assert Circuit.size(_Failing()) == 0


def test_circuit_layout_on_builder():
    builder = Builder()
    _TwoGates().circuit(builder)
    assert len(builder) == 2
    assert builder.public_inputs() == [2]
    assert builder[Witness(0)] == 2


def test_circuit_is_abstract():
    with pytest.raises(TypeError):
        Circuit()