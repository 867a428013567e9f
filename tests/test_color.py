#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tests/test_color.py

import pytest

from dye.core.color import Color, hsl, hsla, rgb, rgba
from dye.core.spaces import ColorSpace


def test_constructors():
    assert Color.rgb(1, 2, 3) == rgb(1, 2, 3)
    assert Color.rgba(1, 2, 3, .5) == rgba(1, 2, 3, .5)
    assert Color.hsl(10, .5, .5) == hsl(10, .5, .5)
    assert Color.hsla(10, .5, .5, 1) == hsla(10, .5, .5, 1)
    assert Color.create("rgb", [1, 2, 3]) == rgb(1, 2, 3)
    assert Color.parse("cornflowerBlue") == rgb(100, 149, 237)


def test_channel_properties():
    color = Color.rgb(255, 0, 0)
    assert (color.red, color.green, color.blue) == (255, 0, 0)
    assert (color.hue, color.saturation, color.lightness) == pytest.approx((0, 1, .5))
    assert color.opacity == 1
    assert color.inverse == rgb(0, 255, 255)


def test_with_methods():
    color = Color.rgb(10, 20, 30)
    assert color.with_red(1).with_green(2).with_blue(3) == rgb(1, 2, 3)
    assert color.with_opacity(.5) == rgba(10, 20, 30, .5)
    shifted = color.with_hue(90).with_saturation(.5).with_lightness(.25)
    assert shifted == hsl(90, .5, .25)


def test_derivations_chain():
    color = Color.parse("#ff0000").lighten(.25).with_opacity(.5)
    assert color.space is ColorSpace.HSLA
    assert str(color) == "rgba(255,128,128,0.5)"

    base = Color.hsla(0, .5, .5, .5)
    assert base.darken(.1).lightness == pytest.approx(.4)
    assert base.tint(.1).saturation == pytest.approx(.6)
    assert base.tone(.1).saturation == pytest.approx(.4)
    assert base.fade_in(.25).opacity == pytest.approx(.75)
    assert base.fade_out(.25).opacity == pytest.approx(.25)
    assert base.grayscale().saturation == 0
    assert base.complement().hue == pytest.approx(180)
    assert base.complement(-90).hue == pytest.approx(270)


def test_expression_methods():
    color = Color.hsla(180, .5, .25, .4)
    assert color.to_function_expression() == "hsla(180,50%,25%,0.4)"
    assert color.to_hex_expression() == "#206060"
    assert color.to_space("rgba").space is ColorSpace.RGBA
