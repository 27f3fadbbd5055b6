from __future__ import annotations

from typing import Iterator

from .conversions import make
from .coords import Facing, HexAddress

# (dcol, drow) per facing A..F, indexed by column parity.
_ODD_Q_DIRS = (
    # even columns
    (
        (0, -1),
        (+1, -1),
        (+1, 0),
        (0, +1),
        (-1, 0),
        (-1, -1),
    ),
    # odd columns, shifted half a hex down
    (
        (0, -1),
        (+1, 0),
        (+1, +1),
        (0, +1),
        (-1, +1),
        (-1, 0),
    ),
)


def offset_for(addr: HexAddress, facing: Facing) -> tuple[int, int]:
    return _ODD_Q_DIRS[addr.col & 1][facing]


def neighbor(addr: HexAddress, facing: Facing) -> HexAddress | None:
    """The adjacent hex along ``facing``, or ``None`` past the board edge."""

    dc, dr = offset_for(addr, facing)
    return make(addr.col + dc, addr.row + dr)


def neighbors(addr: HexAddress) -> Iterator[tuple[Facing, HexAddress]]:
    for facing in Facing:
        n = neighbor(addr, facing)
        if n is not None:
            yield facing, n


def facing_toward(a: HexAddress, b: HexAddress) -> Facing | None:
    for facing, n in neighbors(a):
        if n == b:
            return facing
    return None


__all__ = ["facing_toward", "neighbor", "neighbors", "offset_for"]
