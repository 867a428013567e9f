#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tests/test_expressions.py

import itertools

import pytest

from dye.core.color import hsl, hsla, rgb, rgba
from dye.core.errors import (
    ArgumentCountMismatch,
    InvalidArgumentFormat,
    InvalidFunctionExpression,
    InvalidHexExpression,
    UnknownSpace,
)
from dye.core.expressions import (
    dye,
    parse_color,
    parse_function_expression,
    parse_hex_expression,
    to_function_expression,
    to_hex_expression,
    to_string,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("rgb(0,0,0)", rgb(0, 0, 0)),
        ("rgb(25%, 127 ,75%)", rgb(64, 127, 191)),
        ("hsla(50%, 0.1, 25%, .4)", hsla(180, .1, .25, .4)),
        ("  RGBA( 1 , 2 , 3 , 1 )  ", rgba(1, 2, 3, 1)),
        ("hsl(-90, +.5, 50%)", hsl(-90, .5, .5)),
    ],
)
def test_parse_function_expression(value, expected):
    assert parse_function_expression(value) == expected


def test_int_channels_are_rounded_half_up():
    assert parse_function_expression("rgb(0%, 50%, 100%)") == rgb(0, 128, 255)
    assert parse_function_expression("rgb(0.5, 1.5, 2.5)") == rgb(1, 2, 3)


@pytest.mark.parametrize(
    "value,error",
    [
        ("rgb(1,2)", ArgumentCountMismatch),
        ("rgba(1,2,3)", ArgumentCountMismatch),
        ("rgb()", ArgumentCountMismatch),
        ("rgb(a,b,c)", InvalidArgumentFormat),
        ("rgb(1,2,3px)", InvalidArgumentFormat),
        ("rgb(\u0663,0,0)", InvalidArgumentFormat),
        ("rgb 1 2 3", InvalidFunctionExpression),
        ("rgb(1,2,3) trailing", InvalidFunctionExpression),
        ("foo(1,2,3)", UnknownSpace),
        ("hsv(1,2,3)", UnknownSpace),
    ],
)
def test_parse_function_expression_errors(value, error):
    with pytest.raises(error):
        parse_function_expression(value)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("#000", rgb(0, 0, 0)),
        ("#000000", rgb(0, 0, 0)),
        ("#fff", rgb(255, 255, 255)),
        ("#FfFfFf", rgb(255, 255, 255)),
        ("#0af", rgb(0, 170, 255)),
    ],
)
def test_parse_hex_expression(value, expected):
    assert parse_hex_expression(value) == expected


@pytest.mark.parametrize(
    "value",
    ["#12", "#12345", "fff", "#ggg", "#12345g", "", "#-f0000", "#+f+f+f", "# f0000", "#\u0663\u0663\u0663"],
)
def test_parse_hex_expression_errors(value):
    with pytest.raises(InvalidHexExpression):
        parse_hex_expression(value)


@pytest.mark.parametrize(
    "color,expected",
    [
        (rgb(0, 0, 0), "#000"),
        (rgb(255, 0, 128), "#ff0080"),
        (rgb(17, 34, 51), "#123"),
        (rgb(300, -5, 127.5), "#ff0080"),
        (hsl(0, 1, .5), "#f00"),
        (rgba(0, 0, 255, .1), "#00f"),
    ],
)
def test_to_hex_expression(color, expected):
    assert to_hex_expression(color) == expected


@pytest.mark.parametrize(
    "color,expected",
    [
        (rgb(0, 127.5, 255), "rgb(0,128,255)"),
        (rgb(100, 10, 0), "rgb(100,10,0)"),
        (rgba(0, 128, 255, .5), "rgba(0,128,255,0.5)"),
        (hsla(180, .5, .25, .4), "hsla(180,50%,25%,0.4)"),
        (hsl(120.12345, 1, 0), "hsl(120.123,100%,0%)"),
    ],
)
def test_to_function_expression(color, expected):
    assert to_function_expression(color) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("black", "#000"),
        ("white", "#fff"),
        ("rgb(0%, 50%, 100%)", "#0080ff"),
        ("rgba(0%, 50%, 100%, .5)", "rgba(0,128,255,0.5)"),
        ("hsl(180, .5, .5)", "#40bfbf"),
        ("hsla(180, .5, .5, 1)", "#40bfbf"),
    ],
)
def test_to_string(value, expected):
    color = parse_color(value)
    assert to_string(color) == expected
    assert str(color) == expected


def test_parse_color_prefers_exact_names():
    assert parse_color("cornflowerBlue") == rgb(100, 149, 237)
    with pytest.raises(InvalidFunctionExpression):
        parse_color("Cornflower Blue")


def test_dye_joins_fragments():
    assert dye("hsl(", 120, ",1,.5)") == hsl(120, 1, .5)
    assert dye("#", "f00") == rgb(255, 0, 0)


def test_hex_expression_round_trip():
    levels = (0, 1, 15, 16, 127, 128, 200, 254, 255)
    for r, g, b in itertools.product(levels, repeat=3):
        color = rgb(r, g, b)
        assert parse_hex_expression(to_hex_expression(color)) == color
