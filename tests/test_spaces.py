#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tests/test_spaces.py

import pytest

from dye.core.color import Color, create_color, hsl, hsla, is_alpha, is_any_hsl, is_hsl, is_hsla, rgb, rgba
from dye.core.errors import InvalidChannelCount, UnknownSpace
from dye.core.spaces import (
    ColorSpace,
    ColorUnit,
    get_space_channel_count,
    get_space_metadata,
    get_space_scales,
    get_space_types,
    get_space_units,
    resolve_space,
)


def test_rgba_metadata():
    assert get_space_scales(ColorSpace.RGBA) == (255, 255, 255, 1)
    assert get_space_types("rgba") == ("int", "int", "int", "float")
    assert get_space_units(ColorSpace.RGBA) == (ColorUnit.FIXED,) * 4


def test_hsl_metadata():
    names = [ch.name for ch in get_space_metadata(ColorSpace.HSL)]
    assert names == ["hue", "saturation", "lightness"]
    assert get_space_scales(ColorSpace.HSL) == (360, 1, 1)
    assert get_space_units(ColorSpace.HSL) == (ColorUnit.FIXED, ColorUnit.PERCENT, ColorUnit.PERCENT)


@pytest.mark.parametrize("space,count", [("rgb", 3), ("rgba", 4), ("hsl", 3), ("HSLA", 4)])
def test_channel_count(space, count):
    assert get_space_channel_count(space) == count


@pytest.mark.parametrize("space", [ColorSpace.HSV, ColorSpace.CMYK, ColorSpace.LAB, "xyz"])
def test_declared_spaces_have_no_metadata(space):
    with pytest.raises(UnknownSpace):
        get_space_metadata(space)


def test_resolve_space_rejects_unknown_names():
    with pytest.raises(UnknownSpace) as excinfo:
        resolve_space("rgbz")
    assert excinfo.value.space == "rgbz"
    assert resolve_space(" Hsla ") is ColorSpace.HSLA


def test_color_checks_channel_count():
    with pytest.raises(InvalidChannelCount):
        create_color(ColorSpace.RGB, [1, 2])
    with pytest.raises(InvalidChannelCount):
        Color("hsla", (0, 0, 0))


def test_color_is_immutable_and_comparable():
    color = rgb(1, 2, 3)
    assert color == create_color("rgb", [1, 2, 3])
    assert color.space is ColorSpace.RGB
    assert isinstance(color.data, tuple)
    with pytest.raises(AttributeError):
        color.space = ColorSpace.HSL


def test_space_predicates():
    assert is_hsl(hsl(0, 0, 0))
    assert not is_hsl(rgb(0, 0, 0))
    assert is_hsla(hsla(0, 0, 0, 1))
    assert is_any_hsl(hsla(0, 0, 0, 1))
    assert is_alpha(rgba(0, 0, 0, 1))
    assert not is_alpha(hsl(0, 0, 0))
