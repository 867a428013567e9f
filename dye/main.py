#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/main.py

import argparse
import sys

from dye import __version__
from dye.logic.color import engine
from dye.logic.color.renderer import render_color_names
from dye.subcommands.command_registry import SUBCOMMANDS
from dye.shared.logger import log, DyeArgumentParser
from dye.shared.sanitizer import INPUT_HANDLERS
from dye.shared.preview import ensure_truecolor


def get_color_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main color (inspector) command."""
    parser = DyeArgumentParser(
        prog="dye",
        description="dye: parse, convert and derive colors from the terminal",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"dye {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "--list-color-names",
        nargs="?",
        const="text",
        default=None,
        choices=["text", "json", "prettyjson"],
        type=INPUT_HANDLERS["to_format"],
        help="list available color names and exit",
    )

    # Color Input Group
    color_input_group = parser.add_mutually_exclusive_group()
    color_input_group.add_argument(
        "-e",
        "--expression",
        type=INPUT_HANDLERS["color"],
        help="color name, hex or functional expression (e.g. '#0af', 'rgba(0, 50%%, 255, .5)')",
    )
    color_input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="generate a random color",
    )
    color_input_group.add_argument(
        "-cn",
        "--color-name",
        type=INPUT_HANDLERS["color_name"],
        help="color names from 'dye --list-color-names'",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )

    info_group = parser.add_argument_group("technical information flags")
    info_group.add_argument(
        "-hb",
        "--hide-bars",
        action="store_true",
        help="hide visual color bars",
    )

    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_color_command(args: argparse.Namespace) -> None:
    """Entry point for the core color command."""
    parser = get_color_parser()

    if args.list_color_names:
        render_color_names(args.list_color_names)
        sys.exit(0)

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    # Routing Validation (if a command was passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    engine.run(args, parser)


def main() -> None:
    """Main entry point for dye CLI"""
    # Subcommand Routing (Global behavior)
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_color_parser()
    args = parser.parse_args()
    ensure_truecolor()
    handle_color_command(args)


if __name__ == "__main__":
    main()
