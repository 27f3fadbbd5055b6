from __future__ import annotations

import logging
import re

from .coords import Cube, HexAddress, MalformedLabel, OutOfBounds

logger = logging.getLogger(__name__)

_LABEL_RE = re.compile(r"[0-9]{1,4}")


def make(col: int, row: int) -> HexAddress | None:
    """Return the address at ``(col, row)``, or ``None`` when off the board or not integral."""

    try:
        return HexAddress(col, row)
    except (OutOfBounds, TypeError):
        return None


def display_number(addr: HexAddress) -> int:
    return addr.number


def label(addr: HexAddress) -> str:
    """Zero-padded four digit label as printed on the map, e.g. ``"0101"``."""

    return str(addr)


def parse_label(text: str | int) -> HexAddress:
    if isinstance(text, bool):
        raise MalformedLabel(f"not a hex label: {text!r}")
    if isinstance(text, int):
        if not 0 <= text <= 9999:
            raise MalformedLabel(f"not a hex label: {text!r}")
        number = text
    else:
        stripped = text.strip()
        if not _LABEL_RE.fullmatch(stripped):
            raise MalformedLabel(f"not a hex label: {text!r}")
        number = int(stripped)
    return HexAddress(number // 100 - 1, number % 100 - 1)


def from_label(text: str | int) -> HexAddress | None:
    """Parse a display label back into an address.

    Returns ``None`` for labels that are not 1-4 digit decimals and for
    labels that decode to a column/row pair outside the board.
    """

    try:
        return parse_label(text)
    except MalformedLabel:
        logger.debug("rejected malformed hex label %r", text)
        return None
    except OutOfBounds:
        logger.debug("hex label %r is off the board", text)
        return None


def to_cube(addr: HexAddress) -> Cube:
    # odd-q: odd columns sit half a row lower than even ones
    x = addr.col
    z = addr.row - (addr.col - (addr.col & 1)) // 2
    y = -x - z
    return Cube(x, y, z)


def cube_to_address(c: Cube) -> HexAddress | None:
    col = c.x
    row = c.z + (c.x - (c.x & 1)) // 2
    return make(col, row)


__all__ = [
    "cube_to_address",
    "display_number",
    "from_label",
    "label",
    "make",
    "parse_label",
    "to_cube",
]
