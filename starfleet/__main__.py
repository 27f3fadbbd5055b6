"""Command line inspector for board geometry.

Examples::

    python -m starfleet hex 0101
    python -m starfleet distance 0202 0211
    python -m starfleet bearing 4002 4001
    python -m starfleet --edge 60 locate 30 30
    python -m starfleet board
"""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import InspectorSettings
from .hexmap import (
    Facing,
    HexAddress,
    HexMapError,
    angle_between,
    bearing,
    distance,
    from_screen,
    label,
    neighbor,
    parse_label,
    to_screen,
)

logger = logging.getLogger(__name__)

EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="starfleet-hexmap", description="Inspect hex board geometry.")
    parser.add_argument("--edge", type=float, default=None, help="hex edge length in pixels")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_hex = sub.add_parser("hex", help="describe one hex and its neighbors")
    p_hex.add_argument("label")

    p_dist = sub.add_parser("distance", help="hex steps between two hexes")
    p_dist.add_argument("source")
    p_dist.add_argument("target")

    p_bear = sub.add_parser("bearing", help="bearing of TARGET as seen from SOURCE")
    p_bear.add_argument("source")
    p_bear.add_argument("target")

    p_loc = sub.add_parser("locate", help="find the hex under a screen point")
    p_loc.add_argument("x", type=float)
    p_loc.add_argument("y", type=float)

    sub.add_parser("board", help="show the board fitted into the configured window")
    return parser


def _describe_hex(console: Console, addr: HexAddress, edge: float) -> None:
    x, y = to_screen(addr, edge)
    console.print(f"hex {label(addr)}  col={addr.col} row={addr.row}  center=({x:.2f}, {y:.2f})")
    table = Table(title="Neighbors")
    table.add_column("Facing")
    table.add_column("Hex")
    for facing in Facing:
        n = neighbor(addr, facing)
        table.add_row(facing.name, label(n) if n is not None else "off board")
    console.print(table)


def _describe_board(console: Console, settings: InspectorSettings) -> None:
    view = settings.view
    layout = view.layout()
    x, y = layout.start_point
    table = Table(title=f"Board in {view.window_height:g}px window")
    table.add_column("Property")
    table.add_column("Value")
    table.add_row("origin", f"({layout.origin_x:.2f}, {layout.origin_y:.2f})")
    table.add_row("edge", f"{layout.edge:.2f}")
    table.add_row("hex height", f"{layout.hex_height:.2f}")
    table.add_row("size", f"{layout.width:.2f} x {layout.height:.2f}")
    table.add_row("hex 0101 center", f"({x:.2f}, {y:.2f})")
    console.print(table)


def run(args: argparse.Namespace, settings: InspectorSettings, console: Console) -> int:
    edge = settings.edge
    try:
        if args.command == "hex":
            _describe_hex(console, parse_label(args.label), edge)
        elif args.command == "distance":
            a, b = parse_label(args.source), parse_label(args.target)
            console.print(f"distance {label(a)} -> {label(b)}: {distance(a, b)}")
        elif args.command == "bearing":
            a, b = parse_label(args.source), parse_label(args.target)
            theta = angle_between(a, b)
            console.print(f"bearing {label(a)} -> {label(b)}: {bearing(a, b).value} ({theta:.0f} deg)")
        elif args.command == "board":
            _describe_board(console, settings)
        elif args.command == "locate":
            addr = from_screen((args.x, args.y), edge)
            if addr is None:
                console.print(f"point ({args.x}, {args.y}) is off the board")
                return EXIT_INVALID
            console.print(f"point ({args.x}, {args.y}) is in hex {label(addr)}")
    except HexMapError as exc:
        logger.debug("rejected %s arguments", args.command, exc_info=True)
        console.print(f"error: {exc}", style="red", markup=False)
        return EXIT_INVALID
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = InspectorSettings() if args.edge is None else InspectorSettings(edge=args.edge)
    except ValidationError as exc:
        parser.error(f"invalid --edge: {exc.errors()[0]['msg']}")

    console = Console(highlight=False)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    return run(args, settings, console)


if __name__ == "__main__":  # pragma: no cover - module entry point
    raise SystemExit(main())
