"""Where a counter sits on the board and which way it points."""

from __future__ import annotations

from dataclasses import dataclass

from .hexmap import Bearing, Facing, HexAddress, bearing, neighbor


@dataclass(frozen=True, slots=True)
class Position:
    hex: HexAddress
    facing: Facing

    def forward(self) -> Position | None:
        """Advance one hex along the current facing; ``None`` at the board edge."""

        dest = neighbor(self.hex, self.facing)
        if dest is None:
            return None
        return Position(dest, self.facing)

    def turn_left(self) -> Position:
        return Position(self.hex, self.facing.turn_left())

    def turn_right(self) -> Position:
        return Position(self.hex, self.facing.turn_right())

    def bearing_to(self, target: HexAddress) -> Bearing:
        """Bearing of ``target`` relative to this counter's facing (A is dead ahead)."""

        return bearing(self.hex, target).relative_to(self.facing)


__all__ = ["Position"]
