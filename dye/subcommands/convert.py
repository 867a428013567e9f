#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/subcommands/convert.py

import argparse
import sys

from dye.core import config as c
from dye.logic.convert import engine
from dye.shared.logger import DyeArgumentParser
from dye.shared.sanitizer import INPUT_HANDLERS
from dye.shared.preview import ensure_truecolor


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for convert command."""
    parser = DyeArgumentParser(
        prog="dye convert",
        description="dye convert: convert a color expression between color spaces",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "-e",
        "--expression",
        type=INPUT_HANDLERS["color"],
        help="color name, hex or functional expression (e.g. 'hsl(120, 50%%, 50%%)')",
    )
    input_group.add_argument(
        "-cn",
        "--color-name",
        type=INPUT_HANDLERS["color_name"],
        help="color names from 'dye --list-color-names'",
    )
    input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="convert a random color",
    )
    parser.add_argument(
        "-t",
        "--to-format",
        type=INPUT_HANDLERS["to_format"],
        required=True,
        choices=c.CONVERT_FORMATS,
        help=f"target format: {' '.join(c.CONVERT_FORMATS)}",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="print the source expression as well",
    )
    return parser


def main() -> None:
    """Main entry point for convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args, parser)


if __name__ == "__main__":
    main()
