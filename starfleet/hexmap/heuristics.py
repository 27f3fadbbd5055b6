from __future__ import annotations

from .conversions import to_cube
from .coords import Cube, HexAddress


def hex_distance_cube(a: Cube, b: Cube) -> int:
    return (abs(a.x - b.x) + abs(a.y - b.y) + abs(a.z - b.z)) // 2


def distance(a: HexAddress, b: HexAddress) -> int:
    """Number of hex steps between two addresses."""

    return hex_distance_cube(to_cube(a), to_cube(b))


__all__ = ["distance", "hex_distance_cube"]
