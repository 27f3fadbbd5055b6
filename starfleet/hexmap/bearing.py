"""Relative bearing between two hexes.

Angles are measured counter-clockwise from the positive x axis with screen y
flipped, so straight up the board is 90 degrees. Sector A spans the open
interval ``(60, 120)`` and the sectors continue clockwise: B ``(0, 60)``,
C ``(300, 360)``, D ``(240, 300)``, E ``(180, 240)``, F ``(120, 180)``. The
exact multiples of 60 are reported as ties between their two neighbors.
"""

from __future__ import annotations

import math

from .coords import Bearing, HexAddress
from .projection import to_screen

# Counter-clockwise from 0 degrees: (tie at the lower bound, open sector above it).
_SECTORS: tuple[tuple[Bearing, Bearing], ...] = (
    (Bearing.BC, Bearing.B),
    (Bearing.AB, Bearing.A),
    (Bearing.FA, Bearing.F),
    (Bearing.EF, Bearing.E),
    (Bearing.DE, Bearing.D),
    (Bearing.CD, Bearing.C),
)


def angle_between(a: HexAddress, b: HexAddress) -> float:
    """Angle of ``b`` seen from ``a``, rounded to a whole degree in ``[0, 360)``."""

    # angles do not depend on scale; unit edge is enough
    ax, ay = to_screen(a, 1.0)
    bx, by = to_screen(b, 1.0)
    dx = bx - ax
    dy = ay - by

    if dx == 0:
        if dy > 0:
            theta = 90.0
        elif dy < 0:
            theta = 270.0
        else:
            theta = 0.0
    else:
        theta = math.degrees(math.atan2(dy, dx))
        if theta < 0:
            theta += 360.0

    rounded = math.floor(theta + 0.5)
    return float(rounded % 360)


def classify(theta: float) -> Bearing:
    """Map a whole-degree angle onto a sector or a sector boundary."""

    theta = theta % 360
    index, remainder = divmod(theta, 60)
    tie, sector = _SECTORS[int(index)]
    if remainder == 0:
        return tie
    return sector


def bearing(a: HexAddress, b: HexAddress) -> Bearing:
    return classify(angle_between(a, b))


__all__ = ["angle_between", "bearing", "classify"]
