from .coords import (
    BOARD_COLUMNS,
    BOARD_ROWS,
    Bearing,
    Cube,
    Facing,
    HexAddress,
    HexMapError,
    MalformedLabel,
    OutOfBounds,
)
from .conversions import display_number, from_label, label, make, parse_label, to_cube
from .neighbors import facing_toward, neighbor, neighbors
from .heuristics import distance, hex_distance_cube
from .bearing import angle_between, bearing, classify
from .projection import from_screen, hex_corners, hex_height, to_screen

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
    "display_number",
    "from_label",
    "label",
    "make",
    "parse_label",
    "to_cube",
    "facing_toward",
    "neighbor",
    "neighbors",
    "distance",
    "hex_distance_cube",
    "angle_between",
    "bearing",
    "classify",
    "from_screen",
    "hex_corners",
    "hex_height",
    "to_screen",
]
