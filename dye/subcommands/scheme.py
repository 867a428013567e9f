#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/subcommands/scheme.py

import argparse
import sys

from dye.logic.scheme.resolver import resolve_scheme_input
from dye.shared.logger import DyeArgumentParser
from dye.shared.sanitizer import INPUT_HANDLERS
from dye.shared.preview import ensure_truecolor


def get_scheme_parser() -> argparse.ArgumentParser:
    """Create argument parser for scheme command."""
    parser = DyeArgumentParser(
        prog="dye scheme",
        description="dye scheme: generate shades and color harmonies",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    input_group = parser.add_mutually_exclusive_group(required=True)
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
        help="base color name from 'dye --list-color-names'",
    )
    input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="generate schemes from a random color",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
    scheme_group = parser.add_argument_group("scheme types")
    scheme_group.add_argument(
        "-all",
        "--all-schemes",
        action="store_true",
        help="show all schemes",
    )
    scheme_group.add_argument(
        "-ls",
        "--light-shades",
        action="store_true",
        help="show normal light lighter lightest shades",
    )
    scheme_group.add_argument(
        "-ds",
        "--dark-shades",
        action="store_true",
        help="show normal dark darker darkest shades",
    )
    scheme_group.add_argument(
        "-co",
        "--complementary",
        action="store_true",
        help="show complementary colors 0° 180° (default)",
    )
    scheme_group.add_argument(
        "-an",
        "--analogous",
        action="store_true",
        help="show analogous colors -30° 0° 30°",
    )
    scheme_group.add_argument(
        "-sco",
        "--split-complementary",
        action="store_true",
        help="show split-complementary colors -150° 0° 150°",
    )
    scheme_group.add_argument(
        "-tr",
        "--triadic",
        action="store_true",
        help="show triadic colors -120° 0° 120°",
    )
    scheme_group.add_argument(
        "-sq",
        "--square",
        action="store_true",
        help="show square colors 0° 90° 180° 270°",
    )
    scheme_group.add_argument(
        "-te",
        "--tetradic",
        action="store_true",
        help="show tetradic colors 0° 120° 180° -60°",
    )
    return parser


def main() -> None:
    """Main entry point for scheme command."""
    parser = get_scheme_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_scheme_input(args)


if __name__ == "__main__":
    main()
