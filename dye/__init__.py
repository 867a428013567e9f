#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/__init__.py

__version__ = "0.1.0"

from .core.channels import (
    complement,
    darken,
    fade_in,
    fade_out,
    get_blue,
    get_green,
    get_hue,
    get_lightness,
    get_opacity,
    get_red,
    get_saturation,
    grayscale,
    invert,
    lighten,
    tint,
    tone,
    with_blue,
    with_green,
    with_hue,
    with_lightness,
    with_opacity,
    with_red,
    with_saturation,
)
from .core.color import (
    Color,
    create_color,
    hsl,
    hsla,
    is_alpha,
    is_any_hsl,
    is_any_rgb,
    is_hsl,
    is_hsla,
    is_rgb,
    is_rgba,
    is_space,
    rgb,
    rgba,
)
from .core.conversions import (
    to_any_alpha,
    to_any_hsl,
    to_any_opaque,
    to_any_rgb,
    to_hsl,
    to_hsla,
    to_rgb,
    to_rgba,
    to_space,
)
from .core.errors import (
    ArgumentCountMismatch,
    DyeError,
    InvalidArgumentFormat,
    InvalidChannelCount,
    InvalidFunctionExpression,
    InvalidHexExpression,
    UnknownColorName,
    UnknownMixMode,
    UnknownSpace,
)
from .core.expressions import (
    dye,
    parse_color,
    parse_function_expression,
    parse_hex_expression,
    to_function_expression,
    to_hex_expression,
    to_string,
)
from .core.spaces import ChannelSpec, ColorSpace, ColorUnit, get_space_metadata
from .logic.mix.engine import MixMode, mix
from .logic.scheme.engine import (
    create_analogous_complementary_scheme,
    create_complementary_scheme,
    create_dark_shade_scheme,
    create_light_shade_scheme,
    create_scheme,
    create_shade_scheme,
    create_split_complementary_scheme,
    create_square_complementary_scheme,
    create_tetradic_complementary_scheme,
    create_triadic_complementary_scheme,
    generate_scheme,
)
from .shared.naming import get_named_color, get_named_colors
