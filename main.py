# -*- coding: utf-8 -*-
# yfoil/main.py

"""
End-to-end driver:
  1) Parse CLI options and configure logging
  2) Load & validate aerofoil geometry (JSON or .dat)
  3) Report the reference point
  4) Plot the surface points (+ optional JSON export)

Usage:
    python main.py                               # reads aerofoil.json
    python main.py --file naca0012.json --output naca0012.png
    python main.py --file naca0012.dat --export-json naca0012.json --no-plot
"""

import argparse
import logging
import sys
from typing import List, Optional

from geometry import __version__
from geometry.api import load_geometry, render_geometry, export_geometry
from geometry.errors import GeometryError

DEFAULT_FILE = "aerofoil.json"
DEFAULT_OUTPUT = "aerofoil_geometry.png"

BANNER_RULE = "-" * 40

log = logging.getLogger("yfoil")


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="yfoil",
        description="Load aerofoil geometry and determine polar and boundary layer characteristics",
    )
    parser.add_argument(
        "--file", type=str, default=DEFAULT_FILE,
        help="Path of the file containing aerofoil JSON (default: {})".format(DEFAULT_FILE),
    )
    parser.add_argument(
        "--output", type=str, default=DEFAULT_OUTPUT,
        help="Path of the geometry plot (default: {})".format(DEFAULT_OUTPUT),
    )
    parser.add_argument(
        "--show", action="store_true",
        help="Also open the plot in an interactive window",
    )
    parser.add_argument(
        "--no-plot", action="store_true",
        help="Load and validate only; skip plotting",
    )
    parser.add_argument(
        "--export-json", type=str, default=None, metavar="PATH",
        help="Write the validated geometry to PATH in JSON format",
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--version", action="version", version="yfoil {}".format(__version__),
    )
    return parser


def print_banner() -> None:
    print(BANNER_RULE)
    print("yfoil version {}".format(__version__))
    print("    -- why? because y comes after x...")
    print(BANNER_RULE)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s:%(name)s:%(message)s")

    print_banner()

    # Load and validate the aerofoil geometry
    print("Reading aerofoil input file at {}".format(args.file))
    try:
        geometry = load_geometry(args.file)
    except GeometryError as e:
        # Hard stop: nothing downstream can use an unreadable or implausible geometry
        print("{}: {}".format(type(e).__name__, e), file=sys.stderr)
        return 1

    # Show where the reference is
    print("Reference x/c, y/c : {}, {}".format(geometry.reference[0], geometry.reference[1]))

    if args.export_json:
        try:
            out = export_geometry(geometry, args.export_json)
        except GeometryError as e:
            print("{}: {}".format(type(e).__name__, e), file=sys.stderr)
            return 1
        log.info("Geometry exported to: %s", out)

    if not args.no_plot:
        try:
            out = render_geometry(geometry, save_path=args.output, show=args.show)
        except OSError as e:
            print("{}: {}".format(type(e).__name__, e), file=sys.stderr)
            return 1
        log.info("Geometry plot written to: %s", out)

    return 0


if __name__ == "__main__":
    sys.exit(main())
