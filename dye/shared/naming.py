#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/shared/naming.py

import functools
import re
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from dye.constants.color_names import COLOR_NAMES
from dye.core.color import Color, rgb
from dye.core.conversions import to_rgb
from dye.core.errors import UnknownColorName
from .clamping import _clamp255
from .logger import log


def _norm_name_key(s: str) -> str:
    return re.sub(r"[^0-9a-z]", "", str(s).lower())


def _rgb_key(color: Color) -> Tuple[int, int, int]:
    r, g, b = to_rgb(color).data
    return _clamp255(r), _clamp255(g), _clamp255(b)


@functools.lru_cache(maxsize=None)
def get_named_colors() -> Mapping[str, Color]:
    """Read-only mapping of every named color, built on first use."""
    return MappingProxyType({name: rgb(*values) for name, values in COLOR_NAMES.items()})


@functools.lru_cache(maxsize=None)
def _normalized_index() -> Dict[str, str]:
    index: Dict[str, str] = {}
    for name in COLOR_NAMES:
        key = _norm_name_key(name)
        if key in index and COLOR_NAMES[index[key]] != COLOR_NAMES[name]:
            log(
                "warning",
                f"color name collision on key '{key}': '{index[key]}' and "
                f"'{name}' both normalize to the same key. '{name}' will be used.",
            )
        index[key] = name
    return index


@functools.lru_cache(maxsize=None)
def _reverse_index() -> Dict[Tuple[int, int, int], str]:
    index: Dict[Tuple[int, int, int], str] = {}
    for name, values in COLOR_NAMES.items():
        index.setdefault(tuple(values), name)
    return index


def is_color_name(name: str) -> bool:
    return name in COLOR_NAMES


def get_named_color(name: str) -> Color:
    """Look a color up by its exact name, e.g. 'cornflowerBlue'."""
    try:
        return get_named_colors()[name]
    except KeyError:
        raise UnknownColorName(name) from None


def resolve_color_name(name: str) -> Color:
    """Look a color up ignoring case, spaces and punctuation ('Cornflower Blue')."""
    exact = _normalized_index().get(_norm_name_key(name))
    if exact is None:
        raise UnknownColorName(name)
    return get_named_colors()[exact]


def get_name_for_color(color: Color) -> Optional[str]:
    """First named color with the same 8-bit RGB value as `color`, if any."""
    return _reverse_index().get(_rgb_key(color))
