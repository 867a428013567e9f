#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/logic/scheme/engine.py

from typing import Callable, Dict, Iterator, Sequence

from dye.core import config as c
from dye.core.channels import complement, darken, lighten
from dye.core.color import Color

SchemeGenerator = Callable[[Color, float], Color]
Scheme = Dict[str, Color]


def generate_scheme(
    color: Color,
    generate: SchemeGenerator,
    start: float = c.SCHEME_START,
    step: float = c.SCHEME_STEP,
    length: int = c.SCHEME_LENGTH,
) -> Iterator[Color]:
    """Lazily yield generate(color, start + i * step) for i in range(length)."""
    for i in range(length):
        yield generate(color, start + i * step)


def create_scheme(
    color: Color,
    keys: Sequence[str],
    generate: SchemeGenerator,
    start: float = c.SCHEME_START,
    step: float = c.SCHEME_STEP,
) -> Scheme:
    """Map each key to the matching color of a scheme as long as `keys`."""
    return dict(zip(keys, generate_scheme(color, generate, start, step, len(keys))))


def create_light_shade_scheme(
    color: Color, start: float = c.SCHEME_START, step: float = c.SCHEME_STEP
) -> Scheme:
    return create_scheme(color, c.LIGHT_SHADE_KEYS, lighten, start, step)


def create_dark_shade_scheme(
    color: Color, start: float = c.SCHEME_START, step: float = c.SCHEME_STEP
) -> Scheme:
    return create_scheme(color, c.DARK_SHADE_KEYS, darken, start, step)


def create_shade_scheme(
    color: Color, start: float = c.SCHEME_START, step: float = c.SCHEME_STEP
) -> Scheme:
    """Light and dark shades together, sharing the 'normal' entry."""
    return {
        **create_light_shade_scheme(color, start, step),
        **create_dark_shade_scheme(color, start, step),
    }


def create_complementary_scheme(color: Color) -> Scheme:
    return create_scheme(color, c.PAIR_KEYS, complement, step=180)


def create_analogous_complementary_scheme(color: Color) -> Scheme:
    return create_scheme(color, c.TRIAD_KEYS, complement, start=-30, step=30)


def create_split_complementary_scheme(color: Color) -> Scheme:
    return create_scheme(color, c.TRIAD_KEYS, complement, start=-150, step=150)


def create_triadic_complementary_scheme(color: Color) -> Scheme:
    return create_scheme(color, c.TRIAD_KEYS, complement, start=-120, step=120)


def create_square_complementary_scheme(color: Color) -> Scheme:
    return create_scheme(color, c.QUAD_KEYS, complement, step=90)


def create_tetradic_complementary_scheme(color: Color) -> Scheme:
    primary, secondary, tertiary, quaternary = c.QUAD_KEYS
    return {
        primary: color,
        secondary: complement(color, 120),
        tertiary: complement(color, 180),
        quaternary: complement(color, -60),
    }


# Scheme builders by CLI flag name
SCHEME_BUILDERS: Dict[str, Callable[[Color], Scheme]] = {
    "light_shades": create_light_shade_scheme,
    "dark_shades": create_dark_shade_scheme,
    "complementary": create_complementary_scheme,
    "analogous": create_analogous_complementary_scheme,
    "split_complementary": create_split_complementary_scheme,
    "triadic": create_triadic_complementary_scheme,
    "square": create_square_complementary_scheme,
    "tetradic": create_tetradic_complementary_scheme,
}
