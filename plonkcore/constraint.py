"""Gate constraints: selector coefficients wired to witnesses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from . import field
from .witness import Witness


class Selector(IntEnum):
    """Addresses a coefficient inside a :class:`Constraint`."""

    MULTIPLICATION = 0x00
    LEFT = 0x01
    RIGHT = 0x02
    OUTPUT = 0x03
    FOURTH = 0x04
    CONSTANT = 0x05
    PUBLIC_INPUT = 0x06
    ARITHMETIC = 0x07
    RANGE = 0x08
    LOGIC = 0x09
    GROUP_ADD_FIXED_BASE = 0x0A
    GROUP_ADD_VARIABLE_BASE = 0x0B


class WiredWitness(IntEnum):
    """Addresses a witness inside a :class:`Constraint`."""

    A = 0x00
    B = 0x01
    O = 0x02  # noqa: E741
    D = 0x03


_EXTERNAL = int(Selector.ARITHMETIC)


class Constraint:
    """Coefficients of a polynomial gate together with its wired witnesses.

    Every setter returns a new constraint; instances are never modified.
    """

    COEFFICIENTS = 12
    WITNESSES = 4

    __slots__ = ("_coefficients", "_witnesses", "_has_public_input")

    def __init__(self) -> None:
        self._coefficients: tuple[int, ...] = (0,) * self.COEFFICIENTS
        self._witnesses: tuple[Witness, ...] = (Witness.ZERO,) * self.WITNESSES
        self._has_public_input = False

    def _replace(
        self,
        coefficients: tuple[int, ...] | None = None,
        witnesses: tuple[Witness, ...] | None = None,
        has_public_input: bool | None = None,
    ) -> Constraint:
        clone = Constraint()
        clone._coefficients = (
            self._coefficients if coefficients is None else coefficients
        )
        clone._witnesses = self._witnesses if witnesses is None else witnesses
        clone._has_public_input = (
            self._has_public_input if has_public_input is None else has_public_input
        )
        return clone

    @property
    def coefficients(self) -> tuple[int, ...]:
        """All selector coefficients, indexed by :class:`Selector`."""
        return self._coefficients

    @property
    def witnesses(self) -> tuple[Witness, ...]:
        """All wired witnesses, indexed by :class:`WiredWitness`."""
        return self._witnesses

    @property
    def has_public_input(self) -> bool:
        """Whether :meth:`public` was called on this constraint."""
        return self._has_public_input

    def set(self, selector: Selector, value: int) -> Constraint:
        """Return a copy with the coefficient of ``selector`` replaced."""
        coefficients = list(self._coefficients)
        coefficients[Selector(selector)] = field.reduce(value)
        return self._replace(coefficients=tuple(coefficients))

    def _set_witness(self, wire: WiredWitness, w: Witness) -> Constraint:
        witnesses = list(self._witnesses)
        witnesses[WiredWitness(wire)] = w
        return self._replace(witnesses=tuple(witnesses))

    def coeff(self, selector: Selector) -> int:
        """Return the coefficient of ``selector``."""
        return self._coefficients[Selector(selector)]

    def witness(self, wire: WiredWitness) -> Witness:
        """Return the witness wired to ``wire``."""
        return self._witnesses[WiredWitness(wire)]

    def mult(self, s: int) -> Constraint:
        """Set the multiplication coefficient."""
        return self.set(Selector.MULTIPLICATION, s)

    def left(self, s: int) -> Constraint:
        """Set the left coefficient."""
        return self.set(Selector.LEFT, s)

    def right(self, s: int) -> Constraint:
        """Set the right coefficient."""
        return self.set(Selector.RIGHT, s)

    def output(self, s: int) -> Constraint:
        """Set the output coefficient."""
        return self.set(Selector.OUTPUT, s)

    def fourth(self, s: int) -> Constraint:
        """Set the fourth (advice) coefficient."""
        return self.set(Selector.FOURTH, s)

    def constant(self, s: int) -> Constraint:
        """Set the constant term."""
        return self.set(Selector.CONSTANT, s)

    def public(self, s: int) -> Constraint:
        """Set the public input of the constraint."""
        return self.set(Selector.PUBLIC_INPUT, s)._replace(has_public_input=True)

    def a(self, w: Witness) -> Constraint:
        """Wire ``w`` to the left input."""
        return self._set_witness(WiredWitness.A, w)

    def b(self, w: Witness) -> Constraint:
        """Wire ``w`` to the right input."""
        return self._set_witness(WiredWitness.B, w)

    def o(self, w: Witness) -> Constraint:
        """Wire ``w`` to the output."""
        return self._set_witness(WiredWitness.O, w)

    def d(self, w: Witness) -> Constraint:
        """Wire ``w`` to the fourth (advice) wire."""
        return self._set_witness(WiredWitness.D, w)

    @classmethod
    def _from_external(cls, constraint: Constraint) -> Constraint:
        """Keep only the user-facing coefficients, flag and witnesses."""
        base = cls()
        coefficients = (
            constraint._coefficients[:_EXTERNAL]
            + base._coefficients[_EXTERNAL:]
        )
        return base._replace(
            coefficients=coefficients,
            witnesses=constraint._witnesses,
            has_public_input=constraint._has_public_input,
        )

    @classmethod
    def arithmetic(cls, constraint: Constraint) -> Constraint:
        """An arithmetic gate built from ``constraint``."""
        return cls._from_external(constraint).set(Selector.ARITHMETIC, 1)

    @classmethod
    def range(cls, constraint: Constraint) -> Constraint:
        """A range gate built from ``constraint``."""
        return cls._from_external(constraint).set(Selector.RANGE, 1)

    @classmethod
    def logic(cls, constraint: Constraint) -> Constraint:
        """An AND logic gate built from ``constraint``."""
        return (
            cls._from_external(constraint)
            .set(Selector.CONSTANT, 1)
            .set(Selector.LOGIC, 1)
        )

    @classmethod
    def logic_xor(cls, constraint: Constraint) -> Constraint:
        """An XOR logic gate built from ``constraint``."""
        minus_one = field.neg(1)
        return (
            cls._from_external(constraint)
            .set(Selector.CONSTANT, minus_one)
            .set(Selector.LOGIC, minus_one)
        )

    @classmethod
    def group_add_fixed_base(cls, constraint: Constraint) -> Constraint:
        """A fixed-base curve addition gate built from ``constraint``."""
        return cls._from_external(constraint).set(Selector.GROUP_ADD_FIXED_BASE, 1)

    @classmethod
    def group_add_variable_base(cls, constraint: Constraint) -> Constraint:
        """A variable-base curve addition gate built from ``constraint``."""
        return cls._from_external(constraint).set(
            Selector.GROUP_ADD_VARIABLE_BASE, 1
        )

    def _key(self) -> tuple:
        return (self._coefficients, self._witnesses, self._has_public_input)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constraint):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"Constraint(coefficients={list(self._coefficients)!r}, "
            f"witnesses={list(self._witnesses)!r}, "
            f"has_public_input={self._has_public_input!r})"
        )


@dataclass(frozen=True)
class GatePolynomial:
    """Selector values and wire witnesses of one gate in a circuit."""

    q_m: int
    q_l: int
    q_r: int
    q_o: int
    q_c: int
    q_d: int
    q_arith: int
    q_range: int
    q_logic: int
    q_fixed_group_add: int
    q_variable_group_add: int
    w_a: Witness
    w_b: Witness
    w_d: Witness
    w_o: Witness

    @classmethod
    def from_constraint(cls, constraint: Constraint) -> GatePolynomial:
        """Extract the gate described by ``constraint``."""
        c = constraint.coeff
        return cls(
            q_m=c(Selector.MULTIPLICATION),
            q_l=c(Selector.LEFT),
            q_r=c(Selector.RIGHT),
            q_o=c(Selector.OUTPUT),
            q_c=c(Selector.CONSTANT),
            q_d=c(Selector.FOURTH),
            q_arith=c(Selector.ARITHMETIC),
            q_range=c(Selector.RANGE),
            q_logic=c(Selector.LOGIC),
            q_fixed_group_add=c(Selector.GROUP_ADD_FIXED_BASE),
            q_variable_group_add=c(Selector.GROUP_ADD_VARIABLE_BASE),
            w_a=constraint.witness(WiredWitness.A),
            w_b=constraint.witness(WiredWitness.B),
            w_d=constraint.witness(WiredWitness.D),
            w_o=constraint.witness(WiredWitness.O),
        )