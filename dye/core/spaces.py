#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/core/spaces.py

from enum import Enum
from typing import Dict, NamedTuple, Tuple, Union

from .errors import UnknownSpace


class ColorSpace(str, Enum):
    """The color spaces known to dye."""

    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"

    # Declared for future use, no metadata or converters yet
    HSV = "hsv"
    HSVA = "hsva"
    CMYK = "cmyk"
    XYZ = "xyz"
    LAB = "lab"


class ColorUnit(str, Enum):
    """Unit of a channel value inside a functional expression."""

    FIXED = ""
    PERCENT = "%"


class ChannelSpec(NamedTuple):
    """
    Metadata of a single color channel.

    `scale` maps the normalized [0, 1] domain to the stored, human-facing
    range: red is stored as 0-255 (scale 255), hue as 0-360 (scale 360).
    `type` is the type values get cast to when parsed ('int' or 'float'),
    `unit` is the unit used in functional expressions.
    """

    name: str
    scale: float
    type: str
    unit: ColorUnit


_RED = ChannelSpec("red", 255, "int", ColorUnit.FIXED)
_GREEN = ChannelSpec("green", 255, "int", ColorUnit.FIXED)
_BLUE = ChannelSpec("blue", 255, "int", ColorUnit.FIXED)
_HUE = ChannelSpec("hue", 360, "float", ColorUnit.FIXED)
_SATURATION = ChannelSpec("saturation", 1, "float", ColorUnit.PERCENT)
_LIGHTNESS = ChannelSpec("lightness", 1, "float", ColorUnit.PERCENT)
_OPACITY = ChannelSpec("opacity", 1, "float", ColorUnit.FIXED)

COLOR_SPACES: Dict[ColorSpace, Tuple[ChannelSpec, ...]] = {
    ColorSpace.RGB: (_RED, _GREEN, _BLUE),
    ColorSpace.RGBA: (_RED, _GREEN, _BLUE, _OPACITY),
    ColorSpace.HSL: (_HUE, _SATURATION, _LIGHTNESS),
    ColorSpace.HSLA: (_HUE, _SATURATION, _LIGHTNESS, _OPACITY),
}

ALPHA_SPACES = frozenset({ColorSpace.RGBA, ColorSpace.HSLA, ColorSpace.HSVA})


def resolve_space(space: Union[ColorSpace, str]) -> ColorSpace:
    """Turn a space name like 'hsla' (any case) into a ColorSpace."""
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(str(space).strip().lower())
    except ValueError:
        raise UnknownSpace(space) from None


def get_space_metadata(space: Union[ColorSpace, str]) -> Tuple[ChannelSpec, ...]:
    """Return the channel metadata of a space, raising UnknownSpace if it has none."""
    resolved = resolve_space(space)
    metadata = COLOR_SPACES.get(resolved)
    if metadata is None:
        raise UnknownSpace(resolved)
    return metadata


def get_space_channel_count(space: Union[ColorSpace, str]) -> int:
    return len(get_space_metadata(space))


def get_space_scales(space: Union[ColorSpace, str]) -> Tuple[float, ...]:
    return tuple(ch.scale for ch in get_space_metadata(space))


def get_space_units(space: Union[ColorSpace, str]) -> Tuple[ColorUnit, ...]:
    return tuple(ch.unit for ch in get_space_metadata(space))


def get_space_types(space: Union[ColorSpace, str]) -> Tuple[str, ...]:
    return tuple(ch.type for ch in get_space_metadata(space))


def is_alpha_space(space: Union[ColorSpace, str]) -> bool:
    return resolve_space(space) in ALPHA_SPACES
