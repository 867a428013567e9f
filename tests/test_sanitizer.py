#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tests/test_sanitizer.py

import argparse

import pytest

from dye.core.color import rgb
from dye.shared.logger import log
from dye.shared.sanitizer import INPUT_HANDLERS


def test_color_handler_parses_expressions():
    assert INPUT_HANDLERS["color"]("'#f00'") == rgb(255, 0, 0)
    assert INPUT_HANDLERS["color"]("rgb(1, 2, 3)") == rgb(1, 2, 3)


@pytest.mark.parametrize("value", ["#ff", "rgb(1,2)", "Cornflower Blue", "hsv(1,2,3)"])
def test_color_handler_rejects_bad_input(value):
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["color"](value)


def test_color_name_handler():
    assert INPUT_HANDLERS["color_name"]("cornflower blue") == rgb(100, 149, 237)
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["color_name"]("nope")


@pytest.mark.parametrize(
    "value,expected",
    [("0.25", .25), ("-1.5", -1.5), ("1.2.3", 1.2), (" 10 ", 10.0), ("v2.5x", 2.5), ("'-0.5'", -.5)],
)
def test_float_handler(value, expected):
    assert INPUT_HANDLERS["float"](value) == pytest.approx(expected)


def test_float_range_handler_clamps():
    assert INPUT_HANDLERS["float_signed_360"]("720") == 360.0
    assert INPUT_HANDLERS["float_signed_360"]("-400") == -360.0
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["float_signed_360"]("abc")


def test_string_handler():
    assert INPUT_HANDLERS["to_format"](" HSLA ") == "hsla"
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["mix_mode"]("123")


def test_log_streams(capsys):
    log("info", "hello")
    log("error", "boom")
    captured = capsys.readouterr()
    assert "[info]" in captured.out and "hello" in captured.out
    assert "[error]" in captured.err and "boom" in captured.err


@pytest.mark.parametrize("value,expected", [("42", 42), ("-5", 0), ("seed 7.9", 7)])
def test_seed_handler(value, expected):
    assert INPUT_HANDLERS["seed"](value) == expected
