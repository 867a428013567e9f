#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tests/test_scheme.py

import pytest

from dye.core.channels import get_hue, get_lightness, lighten
from dye.core.color import hsl
from dye.logic.scheme.engine import (
    SCHEME_BUILDERS,
    create_analogous_complementary_scheme,
    create_complementary_scheme,
    create_dark_shade_scheme,
    create_light_shade_scheme,
    create_shade_scheme,
    create_split_complementary_scheme,
    create_square_complementary_scheme,
    create_tetradic_complementary_scheme,
    create_triadic_complementary_scheme,
    generate_scheme,
)

RED = hsl(0, 1, .5)


def test_generate_scheme_is_lazy():
    colors = generate_scheme(hsl(0, 0, 0), lighten, .1, .2, 3)
    assert get_lightness(next(colors)) == pytest.approx(.1)
    assert [get_lightness(color) for color in colors] == pytest.approx([.3, .5])


def test_light_shades():
    scheme = create_light_shade_scheme(RED)
    assert list(scheme) == ["normal", "light", "lighter", "lightest"]
    assert scheme["normal"] == RED
    assert [get_lightness(color) for color in scheme.values()] == pytest.approx([.5, .6, .7, .8])


def test_dark_shades_darken():
    scheme = create_dark_shade_scheme(RED, step=.2)
    assert list(scheme) == ["normal", "dark", "darker", "darkest"]
    assert [get_lightness(color) for color in scheme.values()] == pytest.approx([.5, .3, .1, -.1])


def test_shade_scheme_merges_both_sides():
    scheme = create_shade_scheme(RED)
    assert len(scheme) == 7
    assert set(scheme) >= {"lightest", "normal", "darkest"}


@pytest.mark.parametrize(
    "builder,hues",
    [
        (create_complementary_scheme, {"primary": 0, "secondary": 180}),
        (create_analogous_complementary_scheme, {"tertiary": 330, "primary": 0, "secondary": 30}),
        (create_split_complementary_scheme, {"tertiary": 210, "primary": 0, "secondary": 150}),
        (create_triadic_complementary_scheme, {"tertiary": 240, "primary": 0, "secondary": 120}),
        (
            create_square_complementary_scheme,
            {"primary": 0, "secondary": 90, "tertiary": 180, "quaternary": 270},
        ),
        (
            create_tetradic_complementary_scheme,
            {"primary": 0, "secondary": 120, "tertiary": 180, "quaternary": 300},
        ),
    ],
)
def test_harmonies(builder, hues):
    scheme = builder(RED)
    assert list(scheme) == list(hues)
    assert {key: get_hue(color) for key, color in scheme.items()} == pytest.approx(hues)


def test_tetradic_keeps_the_base_color():
    assert create_tetradic_complementary_scheme(RED)["primary"] is RED


def test_every_cli_scheme_has_a_builder():
    from dye.core import config as c

    assert set(SCHEME_BUILDERS) == set(c.SCHEME_KEYS)
