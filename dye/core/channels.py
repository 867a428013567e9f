#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/core/channels.py

"""
Logical channel accessors and mutators.

Every getter converts the color into the family that owns the channel
(RGB for red/green/blue, HSL for hue/saturation/lightness) and reads it.
Every wither converts the same way, replaces the value and builds a new
color, keeping the alpha-ness of the source. Values are never clamped.
"""

from typing import Callable

from . import config as c
from .color import Color, create_color
from .conversions import to_any_alpha, to_any_hsl, to_any_rgb
from .spaces import ColorSpace, get_space_scales
from dye.shared.rotation import rotate_value


def _get_channel(color: Color, to_family: Callable[[Color], Color], index: int) -> float:
    return to_family(color).data[index]


def _with_channel(
    color: Color,
    to_family: Callable[[Color], Color],
    index: int,
    value: float,
    opaque: ColorSpace,
    alpha: ColorSpace,
) -> Color:
    data = list(to_family(color).data)
    data[index] = value
    return create_color(alpha if len(data) > 3 else opaque, data)


def get_red(color: Color) -> float:
    return _get_channel(color, to_any_rgb, 0)


def with_red(color: Color, value: float) -> Color:
    return _with_channel(color, to_any_rgb, 0, value, ColorSpace.RGB, ColorSpace.RGBA)


def get_green(color: Color) -> float:
    return _get_channel(color, to_any_rgb, 1)


def with_green(color: Color, value: float) -> Color:
    return _with_channel(color, to_any_rgb, 1, value, ColorSpace.RGB, ColorSpace.RGBA)


def get_blue(color: Color) -> float:
    return _get_channel(color, to_any_rgb, 2)


def with_blue(color: Color, value: float) -> Color:
    return _with_channel(color, to_any_rgb, 2, value, ColorSpace.RGB, ColorSpace.RGBA)


def get_hue(color: Color) -> float:
    return _get_channel(color, to_any_hsl, 0)


def with_hue(color: Color, value: float) -> Color:
    return _with_channel(color, to_any_hsl, 0, value, ColorSpace.HSL, ColorSpace.HSLA)


def get_saturation(color: Color) -> float:
    return _get_channel(color, to_any_hsl, 1)


def with_saturation(color: Color, value: float) -> Color:
    return _with_channel(color, to_any_hsl, 1, value, ColorSpace.HSL, ColorSpace.HSLA)


def get_lightness(color: Color) -> float:
    return _get_channel(color, to_any_hsl, 2)


def with_lightness(color: Color, value: float) -> Color:
    return _with_channel(color, to_any_hsl, 2, value, ColorSpace.HSL, ColorSpace.HSLA)


def get_opacity(color: Color) -> float:
    return to_any_alpha(color).data[-1]


def with_opacity(color: Color, value: float) -> Color:
    """Replace the opacity; opaque colors become RGBA or HSLA."""
    alpha_color = to_any_alpha(color)
    return create_color(alpha_color.space, alpha_color.data[:-1] + (value,))


def invert(color: Color) -> Color:
    data = list(to_any_rgb(color).data)
    for i, scale in enumerate(get_space_scales(ColorSpace.RGB)):
        data[i] = scale - data[i]
    return create_color(ColorSpace.RGBA if len(data) > 3 else ColorSpace.RGB, data)


def grayscale(color: Color) -> Color:
    return with_saturation(color, 0)


def complement(color: Color, offset: float = c.COMPLEMENT_OFFSET) -> Color:
    """Rotate the hue by `offset` degrees, wrapping around the hue circle."""
    hue_scale = get_space_scales(ColorSpace.HSL)[0]
    return with_hue(color, rotate_value(get_hue(color) + offset, hue_scale))


def lighten(color: Color, value: float) -> Color:
    return with_lightness(color, get_lightness(color) + value)


def darken(color: Color, value: float) -> Color:
    return with_lightness(color, get_lightness(color) - value)


def tint(color: Color, value: float) -> Color:
    return with_saturation(color, get_saturation(color) + value)


def tone(color: Color, value: float) -> Color:
    return with_saturation(color, get_saturation(color) - value)


def fade_in(color: Color, value: float) -> Color:
    return with_opacity(color, get_opacity(color) + value)


def fade_out(color: Color, value: float) -> Color:
    return with_opacity(color, get_opacity(color) - value)
