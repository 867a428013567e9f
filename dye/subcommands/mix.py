#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/subcommands/mix.py

import argparse
import sys

from dye.logic.mix.engine import MixMode
from dye.logic.mix.resolver import resolve_mix_input
from dye.shared.logger import DyeArgumentParser
from dye.shared.sanitizer import INPUT_HANDLERS
from dye.shared.preview import ensure_truecolor


def get_mix_parser() -> argparse.ArgumentParser:
    """Create argument parser for mix command."""
    modes = [mode.value for mode in MixMode]
    parser = DyeArgumentParser(
        prog="dye mix",
        description="dye mix: mix two or more colors channel by channel",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-e",
        "--expression",
        action="append",
        type=INPUT_HANDLERS["color"],
        help="use -e EXPR multiple times for inputs",
    )
    parser.add_argument(
        "-cn",
        "--color-name",
        action="append",
        type=INPUT_HANDLERS["color_name"],
        help="use -cn NAME multiple times for inputs by name",
    )
    parser.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="mix two random colors",
    )
    parser.add_argument(
        "-m",
        "--mode",
        type=INPUT_HANDLERS["mix_mode"],
        default=MixMode.SUBTRACTIVE.value,
        choices=modes,
        help=f"mix mode: {' '.join(modes)} (default: subtractive)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
    return parser


def main() -> None:
    """Main entry point for mix command."""
    parser = get_mix_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_mix_input(args)


if __name__ == "__main__":
    main()
