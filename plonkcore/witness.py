"""Witness handles and wire descriptions used by the constraint system."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


@dataclass(frozen=True, order=True)
class Witness:
    """Allocated witness in the constraint system."""

    index: int

    ZERO: ClassVar[Witness]
    ONE: ClassVar[Witness]

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"witness index must be non-negative, got {self.index}")


Witness.ZERO = Witness(0)
Witness.ONE = Witness(1)


class WireKind(Enum):
    """Position of a wire within a gate."""

    LEFT = "left"
    RIGHT = "right"
    OUTPUT = "output"
    FOURTH = "fourth"


@dataclass(frozen=True)
class WireData:
    """A wire of a given kind belonging to the gate at ``gate``."""

    kind: WireKind
    gate: int


@dataclass(frozen=True)
class WitnessPoint:
    """A curve point whose coordinates are witnesses."""

    x: Witness
    y: Witness


@dataclass(frozen=True)
class WnafRound:
    """Components checked by one round of a fixed-base scalar multiplication."""

    acc_x: Witness
    acc_y: Witness
    accumulated_bit: Witness
    xy_alpha: Witness
    x_beta: int
    y_beta: int
    xy_beta: int