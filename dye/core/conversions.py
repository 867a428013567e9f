#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/core/conversions.py

from typing import Callable, Dict, Union

from . import config as c
from .color import Color, create_color, hsl, is_alpha, is_any_hsl, rgb
from .errors import UnknownSpace
from .spaces import ColorSpace, get_space_scales, resolve_space

ColorConverter = Callable[[Color], Color]


def rgb_to_hsl(color: Color) -> Color:
    """Convert an RGB color to HSL."""
    r_scale, g_scale, b_scale = get_space_scales(color.space)[:3]
    r, g, b = color.data[:3]
    r, g, b = r / r_scale, g / g_scale, b / b_scale

    cmax = max(r, g, b)
    cmin = min(r, g, b)
    h = 0.0
    s = 0.0
    l = (cmax + cmin) / 2

    # Achromatic colors keep h = s = 0
    if cmax != cmin:
        d = cmax - cmin
        s = d / (2 - cmax - cmin) if l > 0.5 else d / (cmax + cmin)
        if cmax == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif cmax == g:
            h = (b - r) / d + 2.0
        else:
            h = (r - g) / d + 4.0
        h /= 6

    h_scale, s_scale, l_scale = get_space_scales(ColorSpace.HSL)
    return hsl(h * h_scale, s * s_scale, l * l_scale)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    elif t > 1:
        t -= 1

    if t < c.HUE_SIXTH:
        return p + (q - p) * 6 * t
    if t < c.HUE_HALF:
        return q
    if t < c.HUE_TWO_THIRDS:
        return p + (q - p) * (c.HUE_TWO_THIRDS - t) * 6
    return p


def hsl_to_rgb(color: Color) -> Color:
    """Convert an HSL color to RGB."""
    h_scale, s_scale, l_scale = get_space_scales(color.space)[:3]
    h, s, l = color.data[:3]
    h, s, l = h / h_scale, s / s_scale, l / l_scale

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + c.HUE_THIRD)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - c.HUE_THIRD)

    r_scale, g_scale, b_scale = get_space_scales(ColorSpace.RGB)
    return rgb(r * r_scale, g * g_scale, b * b_scale)


def _copy(target: ColorSpace) -> ColorConverter:
    def convert(color: Color) -> Color:
        return create_color(target, color.data)
    return convert


def _drop_alpha(target: ColorSpace) -> ColorConverter:
    def convert(color: Color) -> Color:
        return create_color(target, color.data[:-1])
    return convert


def _chain(via: ColorSpace, target: ColorSpace) -> ColorConverter:
    def convert(color: Color) -> Color:
        return to_space(to_space(color, via), target)
    return convert


def _with_alpha(target: ColorSpace, opaque: ColorSpace) -> ColorConverter:
    """Convert into `opaque`, then append the source opacity (or full opacity)."""
    def convert(color: Color) -> Color:
        alpha = color.data[-1] if is_alpha(color) else get_space_scales(target)[-1]
        return create_color(target, to_space(color, opaque).data + (alpha,))
    return convert


COLOR_CONVERTERS: Dict[ColorSpace, Dict[ColorSpace, ColorConverter]] = {
    ColorSpace.RGB: {
        ColorSpace.RGB: _copy(ColorSpace.RGB),
        ColorSpace.RGBA: _with_alpha(ColorSpace.RGBA, ColorSpace.RGB),
        ColorSpace.HSL: rgb_to_hsl,
        ColorSpace.HSLA: _with_alpha(ColorSpace.HSLA, ColorSpace.HSL),
    },
    ColorSpace.RGBA: {
        ColorSpace.RGB: _drop_alpha(ColorSpace.RGB),
        ColorSpace.RGBA: _copy(ColorSpace.RGBA),
        ColorSpace.HSL: _chain(ColorSpace.RGB, ColorSpace.HSL),
        ColorSpace.HSLA: _with_alpha(ColorSpace.HSLA, ColorSpace.HSL),
    },
    ColorSpace.HSL: {
        ColorSpace.RGB: hsl_to_rgb,
        ColorSpace.RGBA: _with_alpha(ColorSpace.RGBA, ColorSpace.RGB),
        ColorSpace.HSL: _copy(ColorSpace.HSL),
        ColorSpace.HSLA: _with_alpha(ColorSpace.HSLA, ColorSpace.HSL),
    },
    ColorSpace.HSLA: {
        ColorSpace.RGB: _chain(ColorSpace.HSL, ColorSpace.RGB),
        ColorSpace.RGBA: _with_alpha(ColorSpace.RGBA, ColorSpace.RGB),
        ColorSpace.HSL: _drop_alpha(ColorSpace.HSL),
        ColorSpace.HSLA: _copy(ColorSpace.HSLA),
    },
}


def to_space(color: Color, target: Union[ColorSpace, str]) -> Color:
    """
    Convert a color into the target space.

    Returns the color itself when it already lives in `target`. Raises
    UnknownSpace when no converter is registered for the pair.
    """
    target = resolve_space(target)
    if color.space == target:
        return color
    try:
        converter = COLOR_CONVERTERS[color.space][target]
    except KeyError:
        raise UnknownSpace(target if color.space in COLOR_CONVERTERS else color.space) from None
    return converter(color)


def to_rgb(color: Color) -> Color:
    return to_space(color, ColorSpace.RGB)


def to_rgba(color: Color) -> Color:
    return to_space(color, ColorSpace.RGBA)


def to_any_rgb(color: Color) -> Color:
    return to_rgba(color) if is_alpha(color) else to_rgb(color)


def to_hsl(color: Color) -> Color:
    return to_space(color, ColorSpace.HSL)


def to_hsla(color: Color) -> Color:
    return to_space(color, ColorSpace.HSLA)


def to_any_hsl(color: Color) -> Color:
    return to_hsla(color) if is_alpha(color) else to_hsl(color)


def to_any_alpha(color: Color) -> Color:
    """The alpha variant of the color's own family (HSLA for HSL colors, else RGBA)."""
    return to_hsla(color) if is_any_hsl(color) else to_rgba(color)


def to_any_opaque(color: Color) -> Color:
    return to_hsl(color) if is_any_hsl(color) else to_rgb(color)
