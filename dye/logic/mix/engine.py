#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/logic/mix/engine.py

from enum import Enum
from typing import Callable, Dict, Union

from dye.core import config as c
from dye.core.color import Color, rgb, rgba
from dye.core.conversions import to_any_rgb
from dye.core.errors import UnknownMixMode
from dye.core.spaces import ColorSpace, get_space_scales


class MixMode(str, Enum):
    ADDITIVE = "additive"
    SUBTRACTIVE = "subtractive"
    AVERAGE = "average"


def _blend_additive(a: float, b: float, scale: float) -> float:
    return a + b


def _blend_subtractive(a: float, b: float, scale: float) -> float:
    return a * b / scale


def _blend_average(a: float, b: float, scale: float) -> float:
    return (a + b) / 2


BLENDERS: Dict[MixMode, Callable[[float, float, float], float]] = {
    MixMode.ADDITIVE: _blend_additive,
    MixMode.SUBTRACTIVE: _blend_subtractive,
    MixMode.AVERAGE: _blend_average,
}


# Camel-cased spellings, e.g. "rgbAverage"
MODE_ALIASES: Dict[str, MixMode] = {f"rgb{mode.value}": mode for mode in MixMode}


def _resolve_mode(mode: Union[MixMode, str]) -> MixMode:
    if isinstance(mode, str) and not isinstance(mode, MixMode):
        alias = MODE_ALIASES.get(mode.lower())
        if alias is not None:
            return alias
    try:
        return MixMode(mode)
    except ValueError:
        raise UnknownMixMode(f"unknown mix mode '{getattr(mode, 'value', mode)}'") from None


def _rgba_data(color: Color):
    data = to_any_rgb(color).data
    return data if len(data) == 4 else data + (c.FULL_OPACITY,)


def mix(color: Color, mix_color: Color, mode: Union[MixMode, str] = MixMode.SUBTRACTIVE) -> Color:
    """
    Mix two colors channel by channel in RGB.

    Color channels are blended according to `mode` and capped at their
    scale; opacity is always averaged. The result is RGB when fully
    opaque, RGBA otherwise.
    """
    blend = BLENDERS[_resolve_mode(mode)]
    *scales, alpha_scale = get_space_scales(ColorSpace.RGBA)
    *channels, alpha = _rgba_data(color)
    *mix_channels, mix_alpha = _rgba_data(mix_color)

    mixed = [min(scale, blend(a, b, scale)) for a, b, scale in zip(channels, mix_channels, scales)]
    mixed_alpha = min(alpha_scale, (alpha + mix_alpha) / 2)
    if mixed_alpha < c.FULL_OPACITY:
        return rgba(*mixed, mixed_alpha)
    return rgb(*mixed)
