"""Mapping between board addresses and pixel space.

Hexes are flat-topped. With edge length ``e`` and ``h = e * sqrt(3)`` the
center of hex ``(0, 0)`` sits at ``(e, h / 2)``; each column steps ``1.5e``
to the right and odd columns are pushed down by ``h / 2``. No origin offset
is applied here, see :class:`starfleet.layout.MapLayout` for that.
"""

from __future__ import annotations

import logging
import math

from .conversions import make
from .coords import HexAddress

logger = logging.getLogger(__name__)

SQRT3 = math.sqrt(3.0)

Point = tuple[float, float]


def hex_height(edge: float) -> float:
    return edge * SQRT3


def to_screen(addr: HexAddress, edge: float) -> Point:
    height = hex_height(edge)
    x = 1.5 * edge * addr.col + edge
    y = height * (addr.row + 0.5 * (addr.col & 1)) + 0.5 * height
    return x, y


def from_screen(point: Point, edge: float) -> HexAddress | None:
    """Return the hex containing ``point``, or ``None`` if it is off the board.

    Each column owns a vertical band ``1.5 * edge`` wide. The left ``edge / 2``
    of that band is shared with the slanted right edges of the previous
    column, so a point there either falls inside the candidate hex or in its
    upper-left/lower-left neighbor.
    """

    px, py = point
    if not (math.isfinite(px) and math.isfinite(py) and math.isfinite(edge)) or edge <= 0:
        logger.debug("cannot locate (%r, %r) with edge %r", px, py, edge)
        return None

    height = hex_height(edge)
    band_width = 1.5 * edge

    band_col = math.floor(px / band_width)
    local_x = px - band_col * band_width

    stagger = 0.5 * height * (band_col & 1)
    band_row = math.floor((py - stagger) / height)
    local_y = py - stagger - band_row * height

    candidate = (band_col, band_row)
    if local_x > abs(edge / 2 - edge * local_y / height):
        col, row = candidate
    else:
        upper = 1 if local_y < height / 2 else 0
        diagonal = (band_col - 1, band_row + (band_col & 1) - upper)
        col, row = diagonal

    addr = make(col, row)
    if addr is None:
        logger.debug("screen point (%.2f, %.2f) is off the board", px, py)
    return addr


def hex_corners(addr: HexAddress, edge: float) -> list[Point]:
    """Vertices of the hex outline, starting at the right-hand corner."""

    cx, cy = to_screen(addr, edge)
    corners = []
    for i in range(6):
        angle = math.radians(60 * i)
        corners.append((cx + edge * math.cos(angle), cy + edge * math.sin(angle)))
    return corners


__all__ = ["Point", "SQRT3", "from_screen", "hex_corners", "hex_height", "to_screen"]
