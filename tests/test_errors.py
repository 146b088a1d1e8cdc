import pytest

from plonkcore import field
from plonkcore.errors import (
    BlsScalarMalformed,
    BytesError,
    InconsistentPublicInputsLen,
    InvalidCompressedCircuit,
    InvalidEvalDomainSize,
    NotEnoughBytes,
    PlonkError,
    PointMalformed,
    PublicInputNotFound,
)


def test_eval_domain_size_message_and_fields():
    err = InvalidEvalDomainSize(33, 32)
    assert err.log_size_of_group == 33
    assert err.adacity == 32
    assert str(err) == (
        "Log-size of the EvaluationDomain group > TWO_ADACITYSize: 33 > TWO_ADACITY = 32"
    )


def test_inconsistent_public_inputs_message():
    err = InconsistentPublicInputsLen(expected=3, provided=2)
    assert (err.expected, err.provided) == (3, 2)
    assert str(err) == (
        "The provided public inputs set of length 2 doesn't match the processed verifier: 3"
    )


def test_public_input_not_found_message():
    err = PublicInputNotFound(7)
    assert err.index == 7
    assert "index 7" in str(err)
    assert "wasn't declared in the prove instance" in str(err)


@pytest.mark.parametrize(
    "cls, message",
    [
        (NotEnoughBytes, "not enough bytes left to read"),
        (BlsScalarMalformed, "BLS scalar bytes malformed"),
        (PointMalformed, "BLS point bytes malformed"),
        (InvalidCompressedCircuit, "invalid compressed circuit"),
    ],
)
def test_default_messages(cls, message):
    assert str(cls()) == message


def test_custom_message_overrides_default():
    assert str(BytesError("bad length")) == "bad length"


def test_package_errors_caught_by_base():
    with pytest.raises(PlonkError) as info:
        field.from_bytes(field.MODULUS.to_bytes(32, "little"))
    assert info.type is BlsScalarMalformed