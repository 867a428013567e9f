#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tests/test_conversions.py

import pytest

from dye.core.color import create_color, hsl, hsla, rgb, rgba
from dye.core.conversions import (
    to_any_alpha,
    to_any_hsl,
    to_any_opaque,
    to_any_rgb,
    to_hsla,
    to_rgb,
    to_space,
)
from dye.core.errors import UnknownSpace
from dye.core.spaces import ColorSpace

PAIRS = [
    ((0, 0, 0), (0, 0, 0)),
    ((127, 127, 127), (0, 0, .498)),
    ((255, 255, 255), (0, 0, 1)),
    ((127, 0, 0), (0, 1, .249)),
    ((0, 127, 0), (120, 1, .249)),
    ((0, 0, 127), (240, 1, .249)),
    ((255, 0, 0), (0, 1, .5)),
    ((0, 255, 0), (120, 1, .5)),
    ((0, 0, 255), (240, 1, .5)),
]


@pytest.mark.parametrize("rgb_data,hsl_data", PAIRS)
def test_rgb_to_hsl(rgb_data, hsl_data):
    converted = to_space(create_color(ColorSpace.RGB, rgb_data), ColorSpace.HSL)
    assert converted.space is ColorSpace.HSL
    assert converted.data == pytest.approx(hsl_data, abs=1e-3)


@pytest.mark.parametrize("rgb_data,hsl_data", PAIRS)
def test_hsl_to_rgb(rgb_data, hsl_data):
    converted = to_space(create_color(ColorSpace.HSL, hsl_data), ColorSpace.RGB)
    assert converted.space is ColorSpace.RGB
    assert converted.data == pytest.approx(rgb_data, abs=0.5)


def test_same_space_returns_the_color_itself():
    color = rgb(0, 127, 255)
    assert to_space(color, ColorSpace.RGB) is color


def test_rgb_to_rgba_adds_full_opacity():
    assert to_space(rgb(0, 127, 255), "rgba") == rgba(0, 127, 255, 1)


def test_alpha_survives_family_changes():
    converted = to_hsla(rgba(255, 0, 0, .3))
    assert converted.data == pytest.approx((0, 1, .5, .3))
    back = to_space(converted, ColorSpace.RGBA)
    assert back.data == pytest.approx((255, 0, 0, .3))


def test_alpha_is_dropped_for_opaque_targets():
    assert to_rgb(hsla(0, 1, .5, .2)).data == pytest.approx((255, 0, 0))
    assert to_space(rgba(1, 2, 3, .5), ColorSpace.RGB) == rgb(1, 2, 3)


def test_family_helpers_keep_alpha_presence():
    assert to_any_rgb(hsl(0, 0, 0)).space is ColorSpace.RGB
    assert to_any_rgb(hsla(0, 0, 0, .5)).space is ColorSpace.RGBA
    assert to_any_hsl(rgba(0, 0, 0, .5)).space is ColorSpace.HSLA
    assert to_any_alpha(hsl(0, 0, 0)).space is ColorSpace.HSLA
    assert to_any_alpha(rgb(0, 0, 0)).space is ColorSpace.RGBA
    assert to_any_opaque(hsla(0, 0, 0, 1)).space is ColorSpace.HSL
    assert to_any_opaque(rgba(0, 0, 0, 1)).space is ColorSpace.RGB


@pytest.mark.parametrize("target", ["hsv", ColorSpace.CMYK, "nope"])
def test_unsupported_target_raises(target):
    with pytest.raises(UnknownSpace):
        to_space(rgb(0, 0, 0), target)


@pytest.mark.parametrize("r", [0, 37, 128, 255])
@pytest.mark.parametrize("g", [0, 99, 200])
@pytest.mark.parametrize("b", [0, 64, 255])
def test_rgb_hsl_round_trip(r, g, b):
    back = to_rgb(to_space(rgb(r, g, b), ColorSpace.HSL))
    assert back.data == pytest.approx((r, g, b), rel=1e-3, abs=1e-3)
