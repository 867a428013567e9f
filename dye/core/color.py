#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/core/color.py

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from . import config as c
from .errors import InvalidChannelCount
from .spaces import ColorSpace, get_space_channel_count, is_alpha_space, resolve_space


@dataclass(frozen=True)
class Color:
    """
    An immutable color: the space it lives in plus one value per channel.

    Values are stored in their human-facing scale (0-255 for red, 0-360
    for hue, 0-1 for saturation), never normalized. Ranges are not
    checked, only the channel count.
    """

    space: ColorSpace
    data: Tuple[float, ...]

    def __post_init__(self) -> None:
        space = resolve_space(self.space)
        data = tuple(self.data)
        expected = get_space_channel_count(space)
        if len(data) != expected:
            raise InvalidChannelCount(
                f"{space.value} expects {expected} channel values, got {len(data)}"
            )
        object.__setattr__(self, "space", space)
        object.__setattr__(self, "data", data)

    @classmethod
    def create(cls, space: Union[ColorSpace, str], data: Iterable[float]) -> "Color":
        return cls(space, tuple(data))

    @classmethod
    def rgb(cls, r: float, g: float, b: float) -> "Color":
        return cls(ColorSpace.RGB, (r, g, b))

    @classmethod
    def rgba(cls, r: float, g: float, b: float, a: float) -> "Color":
        return cls(ColorSpace.RGBA, (r, g, b, a))

    @classmethod
    def hsl(cls, h: float, s: float, l: float) -> "Color":
        return cls(ColorSpace.HSL, (h, s, l))

    @classmethod
    def hsla(cls, h: float, s: float, l: float, a: float) -> "Color":
        return cls(ColorSpace.HSLA, (h, s, l, a))

    @classmethod
    def parse(cls, value: str) -> "Color":
        """Parse a color name, hex or functional expression."""
        return _expressions().parse_color(value)

    @property
    def red(self) -> float:
        return _channels().get_red(self)

    @property
    def green(self) -> float:
        return _channels().get_green(self)

    @property
    def blue(self) -> float:
        return _channels().get_blue(self)

    @property
    def hue(self) -> float:
        return _channels().get_hue(self)

    @property
    def saturation(self) -> float:
        return _channels().get_saturation(self)

    @property
    def lightness(self) -> float:
        return _channels().get_lightness(self)

    @property
    def opacity(self) -> float:
        return _channels().get_opacity(self)

    @property
    def inverse(self) -> "Color":
        return _channels().invert(self)

    def with_red(self, value: float) -> "Color":
        return _channels().with_red(self, value)

    def with_green(self, value: float) -> "Color":
        return _channels().with_green(self, value)

    def with_blue(self, value: float) -> "Color":
        return _channels().with_blue(self, value)

    def with_hue(self, value: float) -> "Color":
        return _channels().with_hue(self, value)

    def with_saturation(self, value: float) -> "Color":
        return _channels().with_saturation(self, value)

    def with_lightness(self, value: float) -> "Color":
        return _channels().with_lightness(self, value)

    def with_opacity(self, value: float) -> "Color":
        return _channels().with_opacity(self, value)

    def lighten(self, value: float) -> "Color":
        return _channels().lighten(self, value)

    def darken(self, value: float) -> "Color":
        return _channels().darken(self, value)

    def tint(self, value: float) -> "Color":
        return _channels().tint(self, value)

    def tone(self, value: float) -> "Color":
        return _channels().tone(self, value)

    def grayscale(self) -> "Color":
        return _channels().grayscale(self)

    def complement(self, offset: float = c.COMPLEMENT_OFFSET) -> "Color":
        return _channels().complement(self, offset)

    def fade_in(self, value: float) -> "Color":
        return _channels().fade_in(self, value)

    def fade_out(self, value: float) -> "Color":
        return _channels().fade_out(self, value)

    def to_space(self, space: Union[ColorSpace, str]) -> "Color":
        from .conversions import to_space
        return to_space(self, space)

    def to_hex_expression(self) -> str:
        return _expressions().to_hex_expression(self)

    def to_function_expression(self) -> str:
        return _expressions().to_function_expression(self)

    def __str__(self) -> str:
        return _expressions().to_string(self)


# channels, conversions and expressions all build on this module
def _channels():
    from . import channels
    return channels


def _expressions():
    from . import expressions
    return expressions


def create_color(space: Union[ColorSpace, str], data: Iterable[float]) -> Color:
    return Color(space, tuple(data))


def rgb(r: float, g: float, b: float) -> Color:
    return create_color(ColorSpace.RGB, (r, g, b))


def rgba(r: float, g: float, b: float, a: float) -> Color:
    return create_color(ColorSpace.RGBA, (r, g, b, a))


def hsl(h: float, s: float, l: float) -> Color:
    return create_color(ColorSpace.HSL, (h, s, l))


def hsla(h: float, s: float, l: float, a: float) -> Color:
    return create_color(ColorSpace.HSLA, (h, s, l, a))


def is_space(color: Color, space: Union[ColorSpace, str]) -> bool:
    return color.space == resolve_space(space)


def is_rgb(color: Color) -> bool:
    return is_space(color, ColorSpace.RGB)


def is_rgba(color: Color) -> bool:
    return is_space(color, ColorSpace.RGBA)


def is_any_rgb(color: Color) -> bool:
    return is_rgb(color) or is_rgba(color)


def is_hsl(color: Color) -> bool:
    return is_space(color, ColorSpace.HSL)


def is_hsla(color: Color) -> bool:
    return is_space(color, ColorSpace.HSLA)


def is_any_hsl(color: Color) -> bool:
    return is_hsl(color) or is_hsla(color)


def is_alpha(color: Color) -> bool:
    """Whether the color carries an opacity channel."""
    return is_alpha_space(color.space)
