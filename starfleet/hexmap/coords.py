"""Value types for the fixed 60x30 odd-q board.

Columns run ``0..59`` and rows ``0..29`` internally. The printed board
numbers hexes 1-based as ``CCRR`` (see :func:`~.conversions.display_number`).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum

BOARD_COLUMNS = 60
BOARD_ROWS = 30


class HexMapError(ValueError):
    """Base class for board addressing failures."""


class OutOfBounds(HexMapError):
    """A column/row pair (or screen point) resolves outside the board."""


class MalformedLabel(HexMapError):
    """A display label is not a 1-4 digit non-negative decimal."""


def in_bounds(col: int, row: int) -> bool:
    return 0 <= col < BOARD_COLUMNS and 0 <= row < BOARD_ROWS


@dataclass(frozen=True, slots=True)
class HexAddress:
    col: int
    row: int

    def __post_init__(self) -> None:
        for value in (self.col, self.row):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"hex coordinates must be integers, got {value!r}")
        if not in_bounds(self.col, self.row):
            raise OutOfBounds(f"hex ({self.col}, {self.row}) is off the board")

    @property
    def number(self) -> int:
        """Printed hex number, columns and rows counted from one."""

        return (self.col + 1) * 100 + (self.row + 1)

    @property
    def parity(self) -> int:
        return self.col & 1

    @classmethod
    def parse(cls, text: str | int) -> HexAddress:
        """Strict inverse of the display number; raises on bad input."""

        from .conversions import parse_label

        return parse_label(text)

    def __str__(self) -> str:
        return f"{self.number:04d}"


@dataclass(frozen=True, slots=True)
class Cube:
    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise ValueError("For cube coords, x + y + z must be 0")


class Facing(IntEnum):
    """Six directions, clockwise from straight up on the printed board.

         A
       F   B
       E   C
         D

    The ordinal is used directly as an index into neighbor offset tables.
    """

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5

    def turn_right(self) -> Facing:
        return Facing((self + 1) % 6)

    def turn_left(self) -> Facing:
        return Facing((self - 1) % 6)

    def reverse(self) -> Facing:
        return Facing((self + 3) % 6)

    def to_angle(self) -> float:
        """Clockwise rotation from "up", in radians."""

        return self.value * math.pi / 3.0


class Bearing(Enum):
    """Relative bearing of one hex as seen from another.

    Six pure sectors plus the six exact 60-degree boundaries between them,
    listed clockwise from sector A.
    """

    A = "A"
    AB = "A/B"
    B = "B"
    BC = "B/C"
    C = "C"
    CD = "C/D"
    D = "D"
    DE = "D/E"
    E = "E"
    EF = "E/F"
    F = "F"
    FA = "F/A"

    @property
    def ordinal(self) -> int:
        return _BEARING_RING.index(self)

    @property
    def is_tie(self) -> bool:
        return self.ordinal % 2 == 1

    @property
    def facings(self) -> tuple[Facing, ...]:
        first = Facing(self.ordinal // 2)
        if self.is_tie:
            return (first, first.turn_right())
        return (first,)

    @classmethod
    def sector(cls, facing: Facing) -> Bearing:
        return _BEARING_RING[2 * facing]

    def relative_to(self, facing: Facing) -> Bearing:
        """Re-express this bearing for a counter pointing along ``facing``."""

        return _BEARING_RING[(self.ordinal - 2 * facing) % len(_BEARING_RING)]


_BEARING_RING: tuple[Bearing, ...] = tuple(Bearing)


__all__ = [
    "BOARD_COLUMNS",
    "BOARD_ROWS",
    "Bearing",
    "Cube",
    "Facing",
    "HexAddress",
    "HexMapError",
    "MalformedLabel",
    "OutOfBounds",
    "in_bounds",
]
