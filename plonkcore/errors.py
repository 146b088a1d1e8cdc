"""Exceptions raised by the proof-system components."""

from __future__ import annotations


class PlonkError(Exception):
    """Base class of every error raised by this package."""

    default_message = "plonk error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class InvalidEvalDomainSize(PlonkError):
    """The requested evaluation domain exceeds the field's two-adicity."""

    def __init__(self, log_size_of_group: int, adacity: int) -> None:
        self.log_size_of_group = log_size_of_group
        self.adacity = adacity
        super().__init__(
            "Log-size of the EvaluationDomain group > TWO_ADACITY"
            f"Size: {log_size_of_group} > TWO_ADACITY = {adacity}"
        )


class InconsistentPublicInputsLen(PlonkError):
    """The number of public inputs does not match the verifier."""

    def __init__(self, expected: int, provided: int) -> None:
        self.expected = expected
        self.provided = provided
        super().__init__(
            f"The provided public inputs set of length {provided} "
            f"doesn't match the processed verifier: {expected}"
        )


class PublicInputNotFound(PlonkError):
    """A public input declared by the circuit was not supplied."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(
            f"The public input of index {index} is defined in the circuit "
            "description, but wasn't declared in the prove instance"
        )


class NotEnoughBytes(PlonkError):
    """Too few bytes were left to read during deserialization."""

    default_message = "not enough bytes left to read"


class BlsScalarMalformed(PlonkError):
    """Bytes that do not encode a canonical scalar."""

    default_message = "BLS scalar bytes malformed"


class PointMalformed(PlonkError):
    """Bytes that do not encode a valid curve point."""

    default_message = "BLS point bytes malformed"


class BytesError(PlonkError):
    """A generic byte-level serialization failure."""

    default_message = "invalid bytes"


class InvalidCompressedCircuit(PlonkError):
    """The compressed circuit representation cannot be decoded."""

    default_message = "invalid compressed circuit"