#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/subcommands/adjust.py

import argparse
import sys

from dye.core import config as c
from dye.logic.adjust import engine
from dye.shared.logger import DyeArgumentParser
from dye.shared.sanitizer import INPUT_HANDLERS
from dye.shared.preview import ensure_truecolor


def get_adjust_parser() -> argparse.ArgumentParser:
    """Create argument parser for adjust command."""
    p = DyeArgumentParser(
        prog="dye adjust",
        description=(
            "dye adjust: derive a new color from a base color\n"
            f"operations run in a fixed order: {' -> '.join(c.ADJUST_PIPELINE)}"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    input_group = p.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "-e",
        "--expression",
        type=INPUT_HANDLERS["color"],
        help="base color name, hex or functional expression",
    )
    input_group.add_argument(
        "-cn",
        "--color-name",
        type=INPUT_HANDLERS["color_name"],
        help="base color name",
    )
    input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="use a random base",
    )
    p.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        help="seed for reproducibility of random",
    )

    ga = p.add_argument_group("channels")
    for flag, name, scale in (
        ("--red", "red", "0 to 255"),
        ("--green", "green", "0 to 255"),
        ("--blue", "blue", "0 to 255"),
        ("--hue", "hue", "0 to 360"),
        ("--saturation", "saturation", "0 to 1"),
        ("--lightness", "lightness", "0 to 1"),
        ("--opacity", "opacity", "0 to 1"),
    ):
        ga.add_argument(
            flag,
            type=INPUT_HANDLERS["float"],
            metavar="V",
            help=f"set the {name} channel ({scale})",
        )

    gb = p.add_argument_group("hsl and hue")
    gb.add_argument(
        "-co",
        "--complement",
        nargs="?",
        const=c.COMPLEMENT_OFFSET,
        type=INPUT_HANDLERS["float_signed_360"],
        metavar="DEG",
        help=f"rotate the hue by DEG degrees (default: {c.COMPLEMENT_OFFSET:g})",
    )
    gb.add_argument(
        "-l",
        "--lighten",
        type=INPUT_HANDLERS["float"],
        metavar="F",
        help="increase lightness by F (e.g. 0.1)",
    )
    gb.add_argument(
        "-d",
        "--darken",
        type=INPUT_HANDLERS["float"],
        metavar="F",
        help="decrease lightness by F",
    )
    gb.add_argument(
        "-t",
        "--tint",
        type=INPUT_HANDLERS["float"],
        metavar="F",
        help="increase saturation by F",
    )
    gb.add_argument(
        "-T",
        "--tone",
        type=INPUT_HANDLERS["float"],
        metavar="F",
        help="decrease saturation by F",
    )
    gb.add_argument(
        "-g",
        "--grayscale",
        action="store_true",
        help="drop all saturation",
    )
    gb.add_argument(
        "-i",
        "--invert",
        action="store_true",
        help="invert the rgb channels",
    )

    gc = p.add_argument_group("opacity")
    gc.add_argument(
        "--fade-in",
        dest="fade_in",
        type=INPUT_HANDLERS["float"],
        metavar="F",
        help="increase opacity by F",
    )
    gc.add_argument(
        "--fade-out",
        dest="fade_out",
        type=INPUT_HANDLERS["float"],
        metavar="F",
        help="decrease opacity by F",
    )
    return p


def main() -> None:
    """Main entry point for adjust command."""
    parser = get_adjust_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args, parser)


if __name__ == "__main__":
    main()
