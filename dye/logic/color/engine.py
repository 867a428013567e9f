#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/logic/color/engine.py

import argparse
from typing import Any, Dict

from dye.core import channels as ch
from dye.core import expressions as expr
from dye.core.color import Color
from dye.core.conversions import to_any_alpha
from .resolver import resolve_color_input
from .renderer import render_color_info


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for the color command"""
    color, title = resolve_color_input(args)
    render_color_info(color, title, args, get_color_data(color))


def get_color_data(color: Color) -> Dict[str, Any]:
    """Collect every representation shown by the inspector."""
    return {
        "hex": expr.to_hex_expression(color),
        "string": expr.to_string(color),
        "rgb": (ch.get_red(color), ch.get_green(color), ch.get_blue(color)),
        "hsl": (ch.get_hue(color), ch.get_saturation(color), ch.get_lightness(color)),
        "opacity": ch.get_opacity(color),
        "functional": expr.to_function_expression(to_any_alpha(color)),
    }
