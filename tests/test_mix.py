#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tests/test_mix.py

import pytest

from dye.core.color import hsl, rgb, rgba
from dye.core.errors import UnknownMixMode
from dye.core.spaces import ColorSpace
from dye.logic.mix.engine import MixMode, mix


def test_subtractive_is_the_default():
    assert mix(rgb(255, 128, 0), rgb(128, 255, 255)) == rgb(128, 128, 0)


def test_additive_is_capped_at_scale():
    assert mix(rgb(200, 100, 0), rgb(100, 100, 50), MixMode.ADDITIVE) == rgb(255, 200, 50)


def test_average_accepts_mode_names():
    result = mix(rgb(0, 0, 0), rgb(255, 255, 255), "average")
    assert result.data == pytest.approx((127.5, 127.5, 127.5))


def test_opacity_is_averaged():
    result = mix(rgba(255, 0, 0, .5), rgb(0, 0, 255), MixMode.ADDITIVE)
    assert result.space is ColorSpace.RGBA
    assert result.data == pytest.approx((255, 0, 255, .75))


def test_opaque_inputs_give_rgb():
    result = mix(hsl(0, 1, .5), rgb(255, 255, 255))
    assert result.space is ColorSpace.RGB
    assert result.data == pytest.approx((255, 0, 0))


def test_unknown_mode():
    with pytest.raises(UnknownMixMode):
        mix(rgb(0, 0, 0), rgb(0, 0, 0), "multiply")


@pytest.mark.parametrize("color", [rgb(10, 20, 30), rgb(255, 0, 128), rgba(10, 20, 30, .4)])
def test_average_with_itself_is_identity(color):
    assert mix(color, color, MixMode.AVERAGE) == color


@pytest.mark.parametrize(
    "alias,mode",
    [("rgbAdditive", "additive"), ("rgbSubtractive", "subtractive"), ("RGBAVERAGE", "average")],
)
def test_camel_cased_mode_names(alias, mode):
    a, b = rgb(200, 100, 0), rgb(100, 100, 50)
    assert mix(a, b, alias) == mix(a, b, mode)
