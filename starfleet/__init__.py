"""Hex board geometry for a starship combat map."""

from .hexmap import Bearing, Facing, HexAddress
from .layout import MapLayout
from .position import Position

__version__ = "0.1.0"

__all__ = ["Bearing", "Facing", "HexAddress", "MapLayout", "Position", "__version__"]
