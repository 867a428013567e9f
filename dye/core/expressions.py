#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/core/expressions.py

"""
Textual color expressions.

Two notations are understood:

- hex: '#rgb' or '#rrggbb', always an opaque RGB color
- functional: 'space(arg, ...)', e.g. 'rgb(25%, 127, 75%)' or
  'hsla(180, 50%, 25%, .4)'; a '%' argument is a percentage of the
  channel scale, 'int' channels are rounded

parse_color() additionally resolves exact named colors first.
"""

import re

from . import config as c
from .color import Color, create_color, is_alpha, rgb
from .conversions import to_any_rgb, to_rgb
from .errors import (
    ArgumentCountMismatch,
    InvalidArgumentFormat,
    InvalidFunctionExpression,
    InvalidHexExpression,
)
from .spaces import ChannelSpec, ColorUnit, get_space_metadata, resolve_space
from dye.shared.clamping import _clamp255, _round_half_up
from dye.shared.naming import get_named_color, is_color_name

# name(args) with optional surrounding whitespace
FUNCTION_PATTERN = re.compile(r"\s*(\w+)\s*\(([^)]*)\)\s*")

# signed decimal number, optionally followed by a '%' unit
ARG_UNIT_PATTERN = re.compile(r"([-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+))\s*(%?)")

# '#rgb' or '#rrggbb', ASCII hex digits only
HEX_PATTERN = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


def parse_hex_expression(value: str) -> Color:
    if len(value) not in (c.HEX_SHORT_LEN, c.HEX_LONG_LEN) or not value.startswith("#"):
        raise InvalidHexExpression(
            f"a hex color expression needs to start with a # and have 3 or 6 hex digits, got '{value}'"
        )
    if not HEX_PATTERN.fullmatch(value):
        raise InvalidHexExpression(f"'{value}' contains non-hex digits")
    digits = value[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    return rgb(r, g, b)


def to_hex_expression(color: Color) -> str:
    """
    Format a color as '#rrggbb', or '#rgb' when every pair is doubled.

    Channels are rounded to the nearest integer and clamped to 0-255.
    """
    hex_str = "".join(f"{_clamp255(v):02x}" for v in to_rgb(color).data)
    if hex_str[0] == hex_str[1] and hex_str[2] == hex_str[3] and hex_str[4] == hex_str[5]:
        hex_str = hex_str[0] + hex_str[2] + hex_str[4]
    return f"#{hex_str}"


def _parse_function_arg(value: str, channel: ChannelSpec) -> float:
    match = ARG_UNIT_PATTERN.fullmatch(value)
    if not match:
        raise InvalidArgumentFormat(f"invalid argument format for argument '{value}'")
    number, unit = match.groups()
    numeric = float(number)
    if unit == ColorUnit.PERCENT.value:
        numeric = numeric / c.PERCENT_TO_FACTOR * channel.scale
    if channel.type == "int":
        return _round_half_up(numeric)
    return numeric


def parse_function_expression(value: str) -> Color:
    match = FUNCTION_PATTERN.fullmatch(value)
    if not match:
        raise InvalidFunctionExpression(f"'{value}' is not a valid color function expression")
    name, arg_string = match.groups()
    space = resolve_space(name)
    channels = get_space_metadata(space)
    args = [arg.strip() for arg in arg_string.split(",")]
    if len(args) != len(channels):
        raise ArgumentCountMismatch(
            f"invalid number of arguments given to {space.value}(), "
            f"expected {len(channels)}, got {len(args)}"
        )
    return create_color(space, [_parse_function_arg(arg, ch) for arg, ch in zip(args, channels)])


def _format_float(value: float) -> str:
    text = f"{value:.{c.FLOAT_PRECISION}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _format_function_arg(value: float, channel: ChannelSpec) -> str:
    if channel.unit == ColorUnit.PERCENT:
        return f"{_format_float(value / channel.scale * c.PERCENT_TO_FACTOR)}%"
    if channel.type == "int":
        return str(_round_half_up(value))
    return _format_float(value)


def to_function_expression(color: Color) -> str:
    channels = get_space_metadata(color.space)
    args = [_format_function_arg(v, ch) for v, ch in zip(color.data, channels)]
    return f"{color.space.value}({','.join(args)})"


def to_string(color: Color) -> str:
    """Hex for opaque colors, functional notation for translucent ones."""
    any_rgb = to_any_rgb(color)
    if is_alpha(any_rgb) and any_rgb.data[-1] < c.FULL_OPACITY:
        return to_function_expression(any_rgb)
    return to_hex_expression(any_rgb)


def parse_color(value: str) -> Color:
    """Parse a color name, a hex expression or a functional expression."""
    if is_color_name(value):
        return get_named_color(value)
    if value.startswith("#"):
        return parse_hex_expression(value)
    return parse_function_expression(value)


def dye(*fragments: str) -> Color:
    """Join text fragments and parse the result, e.g. dye('hsl(', 120, ',1,.5)')."""
    return parse_color("".join(str(fragment) for fragment in fragments))
