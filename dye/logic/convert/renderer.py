#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/logic/convert/renderer.py

from dye.core import config as c
from dye.core.color import Color
from dye.core.conversions import to_space
from dye.core.expressions import to_function_expression, to_hex_expression, to_string


def convert_expression(color: Color, fmt: str) -> str:
    """Render a color as an expression in the requested format."""
    if fmt == "hex":
        return to_hex_expression(color)
    if fmt == "string":
        return to_string(color)
    return to_function_expression(to_space(color, fmt))


def render_convert_info(color: Color, fmt: str) -> str:
    return f"{c.BOLD_WHITE}{convert_expression(color, fmt)}{c.RESET}"
