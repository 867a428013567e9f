#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/logic/mix/resolver.py

import argparse
import random
import sys
from typing import List

from dye.core import config as c
from dye.core.color import Color
from dye.core.errors import DyeError
from dye.logic.color.resolver import get_title_for_color, random_color
from dye.shared.logger import log
from dye.shared.preview import print_color_block
from .engine import mix


def resolve_mix_input(args: argparse.Namespace) -> None:
    """Orchestrate input resolution and mixing of two or more colors."""
    if args.seed is not None:
        random.seed(args.seed)

    colors: List[Color] = []
    if args.random:
        colors = [random_color(), random_color()]
    else:
        colors.extend(args.expression or [])
        colors.extend(args.color_name or [])

    if len(colors) < 2:
        log("error", "at least two colors are required for mixing")
        log("info", "use -e EXPR, -cn NAME multiple times or -r")
        sys.exit(2)

    try:
        result = colors[0]
        for other in colors[1:]:
            result = mix(result, other, args.mode)
    except DyeError as e:
        log("error", str(e))
        sys.exit(2)

    print()
    for i, color in enumerate(colors):
        label = f"{c.MSG_BOLD_COLORS['info']}input{f'{i + 1}':>10}{c.RESET}"
        print_color_block(color, label)
    print()
    print_color_block(result, f"{c.BOLD_WHITE}{get_title_for_color(result, 'result')}{c.RESET}")
    print()
