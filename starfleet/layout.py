from __future__ import annotations

import math
from dataclasses import dataclass

from .hexmap import BOARD_COLUMNS, BOARD_ROWS, HexAddress
from .hexmap.projection import SQRT3, Point, from_screen, hex_corners, to_screen


@dataclass(frozen=True)
class MapLayout:
    """The board placed on a window.

    ``origin_x``/``origin_y`` is the screen position of the board's upper
    left corner; ``edge`` is the hex edge length in pixels.
    """

    edge: float
    origin_x: float = 0.0
    origin_y: float = 0.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.edge) or self.edge <= 0:
            raise ValueError("edge must be a positive finite length")

    @classmethod
    def fit(cls, height: float, origin: Point = (0.0, 0.0)) -> MapLayout:
        """Size hexes so the board (plus the odd-column stagger) fills ``height``."""

        if height <= 0:
            raise ValueError("height must be positive")
        row_height = height / (BOARD_ROWS + 0.5)
        return cls(edge=row_height / SQRT3, origin_x=origin[0], origin_y=origin[1])

    @property
    def hex_height(self) -> float:
        return self.edge * SQRT3

    @property
    def width(self) -> float:
        return 1.5 * self.edge * BOARD_COLUMNS + 0.5 * self.edge

    @property
    def height(self) -> float:
        return self.hex_height * (BOARD_ROWS + 0.5)

    @property
    def start_point(self) -> Point:
        """Screen center of hex ``(0, 0)``."""

        return self.to_screen(HexAddress(0, 0))

    def to_screen(self, addr: HexAddress) -> Point:
        x, y = to_screen(addr, self.edge)
        return x + self.origin_x, y + self.origin_y

    def from_screen(self, point: Point) -> HexAddress | None:
        return from_screen((point[0] - self.origin_x, point[1] - self.origin_y), self.edge)

    def corners(self, addr: HexAddress) -> list[Point]:
        return [(x + self.origin_x, y + self.origin_y) for x, y in hex_corners(addr, self.edge)]


__all__ = ["MapLayout"]
