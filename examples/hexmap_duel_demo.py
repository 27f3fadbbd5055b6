from __future__ import annotations

from starfleet import Facing, Position
from starfleet.hexmap import distance, from_label, label

# "The Duel": a cruiser at 0730 facing A, a raider at 4203 facing E
cruiser = Position(from_label("0730"), Facing.A)
raider = Position(from_label("4203"), Facing.E)


def step(pos: Position) -> Position:
    moved = pos.forward()
    return moved if moved is not None else pos.turn_right()


if __name__ == "__main__":
    for turn in range(1, 9):
        cruiser = step(cruiser)
        raider = step(raider)
        print(
            f"turn {turn}: cruiser {label(cruiser.hex)}{cruiser.facing.name}"
            f" raider {label(raider.hex)}{raider.facing.name}"
            f" range={distance(cruiser.hex, raider.hex)}"
            f" raider on cruiser's {cruiser.bearing_to(raider.hex).value}"
        )
