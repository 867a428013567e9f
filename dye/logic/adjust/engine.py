#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/logic/adjust/engine.py

import argparse
from typing import Any, Callable, Dict, List, Tuple

from dye.core import channels as ch
from dye.core import config as c
from dye.core.color import Color
from dye.logic.color.resolver import get_title_for_color, resolve_color_input
from dye.shared.preview import print_color_block

# Pipeline step name -> (mutator, takes a value)
OPERATIONS: Dict[str, Tuple[Callable[..., Color], bool]] = {
    "red": (ch.with_red, True),
    "green": (ch.with_green, True),
    "blue": (ch.with_blue, True),
    "hue": (ch.with_hue, True),
    "saturation": (ch.with_saturation, True),
    "lightness": (ch.with_lightness, True),
    "opacity": (ch.with_opacity, True),
    "complement": (ch.complement, True),
    "lighten": (ch.lighten, True),
    "darken": (ch.darken, True),
    "tint": (ch.tint, True),
    "tone": (ch.tone, True),
    "grayscale": (ch.grayscale, False),
    "invert": (ch.invert, False),
    "fade_in": (ch.fade_in, True),
    "fade_out": (ch.fade_out, True),
}


def apply_adjustments(color: Color, steps: List[Tuple[str, Any]]) -> Color:
    """Apply (operation, value) steps in order; value is ignored for flag operations."""
    for name, value in steps:
        mutate, takes_value = OPERATIONS[name]
        color = mutate(color, value) if takes_value else mutate(color)
    return color


def collect_steps(args: argparse.Namespace) -> List[Tuple[str, Any]]:
    """Requested operations in the fixed pipeline order."""
    steps = []
    for name in c.ADJUST_PIPELINE:
        value = getattr(args, name, None)
        if value is None or value is False:
            continue
        steps.append((name, value))
    return steps


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution logic for the adjust command pipeline."""
    color, title = resolve_color_input(args)
    steps = collect_steps(args)
    result = apply_adjustments(color, steps)

    print()
    print_color_block(color, f"{c.BOLD_WHITE}{title}{c.RESET}")
    for name, value in steps:
        detail = name.replace("_", " ") if value is True else f"{name.replace('_', ' ')} {value}"
        print(f"{c.MSG_BOLD_COLORS['dim']}  {detail}{c.RESET}")
    print_color_block(result, f"{c.BOLD_WHITE}{get_title_for_color(result, 'adjusted')}{c.RESET}")
    print()
