#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/logic/color/resolver.py

import argparse
import random
import sys
from typing import Optional, Tuple

from dye.core import config as c
from dye.core.color import Color
from dye.core.expressions import parse_hex_expression, to_string
from dye.shared.logger import log
from dye.shared.naming import get_name_for_color


def get_title_for_color(color: Color, fallback: Optional[str] = None) -> str:
    """Name of the color if it has one, else `fallback` or its expression."""
    name = get_name_for_color(color)
    if name:
        return name
    return fallback if fallback is not None else to_string(color)


def random_color() -> Color:
    return parse_hex_expression(f"#{random.randint(0, c.MAX_DEC):06x}")


def resolve_color_input(args: argparse.Namespace) -> Tuple[Color, str]:
    """Resolve raw CLI input into a base color and a display title"""

    if getattr(args, "seed", None) is not None:
        random.seed(args.seed)

    if getattr(args, "random", False):
        color = random_color()
        title = "random"
    elif getattr(args, "color_name", None) is not None:
        color = args.color_name
        title = get_title_for_color(color)
    elif getattr(args, "expression", None) is not None:
        color = args.expression
        title = get_title_for_color(color)
    else:
        log(
            "error",
            "one of the arguments -e/--expression -r/--random -cn/--color-name is required",
        )
        log("info", "use 'dye --help' for more information")
        sys.exit(2)

    return color, title
