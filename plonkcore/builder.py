"""Circuit builder that collects witnesses and gates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from . import field
from .constraint import Constraint, GatePolynomial, Selector
from .errors import PlonkError
from .witness import Witness


class Builder:
    """Collects witness values and gate polynomials of a circuit."""

    def __init__(self) -> None:
        self.constraints: list[GatePolynomial] = []
        self.witnesses: list[int] = []
        self._public_inputs: dict[int, int] = {}

    def append_witness(self, value: int) -> Witness:
        """Allocate a new witness holding ``value``."""
        index = len(self.witnesses)
        self.witnesses.append(field.reduce(value))
        return Witness(index)

    def append_custom_gate(self, constraint: Constraint) -> None:
        """Append ``constraint`` as a gate, recording its public input."""
        index = len(self.constraints)
        self.constraints.append(GatePolynomial.from_constraint(constraint))
        if constraint.has_public_input:
            self._public_inputs[index] = constraint.coeff(Selector.PUBLIC_INPUT)

    def public_input_indexes(self) -> list[int]:
        """Indexes of the gates carrying a public input, in ascending order."""
        return sorted(self._public_inputs)

    def public_inputs(self) -> list[int]:
        """Public input values ordered by gate index."""
        return [self._public_inputs[i] for i in self.public_input_indexes()]

    @staticmethod
    def dense_public_inputs(
        public_input_indexes: Sequence[int],
        public_inputs: Sequence[int],
        size: int,
    ) -> list[int]:
        """Spread sparse public inputs over a zero vector of length ``size``."""
        dense = [0] * size
        for index, value in zip(public_input_indexes, public_inputs):
            dense[index] = field.reduce(value)
        return dense

    def __getitem__(self, witness: Witness) -> int:
        return self.witnesses[witness.index]

    def __len__(self) -> int:
        return len(self.constraints)


class Circuit(ABC):
    """A circuit description that can be laid out by a :class:`Builder`."""

    @abstractmethod
    def circuit(self, composer: Builder) -> None:
        """Append the circuit's witnesses and gates to ``composer``."""

    def size(self) -> int:
        """Number of gates in the circuit, or zero if building it fails."""
        composer = Builder()
        try:
            self.circuit(composer)
        except PlonkError:
            return 0
        return len(composer)