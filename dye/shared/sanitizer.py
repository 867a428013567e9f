#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/shared/sanitizer.py

import argparse
import re
from typing import Callable, Optional, Pattern

from dye.core.errors import DyeError
from dye.core.expressions import parse_color
from .naming import resolve_color_name

# First number inside an argument; a second dot ends it ('1.2.3' -> 1.2)
FLOAT_PATTERN = re.compile(r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")
INT_PATTERN = re.compile(r"[-+]?[0-9]+")


def _sanitize_for_log(value) -> str:
    """Collapse whitespace and newlines so the value logs on one line."""
    if value is None:
        return ""
    return " ".join(str(value).split())


def _unquote(value: str) -> str:
    s = str(value).strip()
    if len(s) >= 2 and s[0] == s[-1] and s[0] in "\"'`":
        s = s[1:-1].strip()
    return s


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_color_expression(v: str):
    """Validator for color names, hex and functional expressions."""
    try:
        return parse_color(_unquote(v))
    except DyeError as e:
        raise argparse.ArgumentTypeError(f"invalid color '{_sanitize_for_log(v)}': {e}")


def handle_color_name(v: str):
    """Validator for color names, ignoring case and punctuation."""
    try:
        return resolve_color_name(_unquote(v))
    except DyeError:
        raise argparse.ArgumentTypeError(f"unknown color name: '{_sanitize_for_log(v)}'")


def handle_word(v: str) -> str:
    """Validator for keyword options (formats, modes): lowercase letters only."""
    cleaned = "".join(re.findall(r"[a-z]", str(v).lower()))
    if not cleaned:
        raise argparse.ArgumentTypeError(f"invalid string value: '{_sanitize_for_log(v)}'")
    return cleaned


def handle_number(
    cast: Callable[[str], float],
    pattern: Pattern = FLOAT_PATTERN,
    min_v: Optional[float] = None,
    max_v: Optional[float] = None,
):
    """
    Factory returning a validator that reads the first number in the
    argument and clamps it into [min_v, max_v] when bounds are given.
    """
    def validator(v: str):
        match = pattern.search(_unquote(v))
        if match is None:
            raise argparse.ArgumentTypeError(
                f"invalid {cast.__name__} value: '{_sanitize_for_log(v)}'"
            )
        val = cast(match.group())
        if min_v is not None and val < min_v:
            val = cast(min_v)
        elif max_v is not None and val > max_v:
            val = cast(max_v)
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "color": handle_color_expression,
    "color_name": handle_color_name,
    "to_format": handle_word,
    "mix_mode": handle_word,
    "float": handle_number(float),
    "float_signed_360": handle_number(float, min_v=-360.0, max_v=360.0),
    "seed": handle_number(int, INT_PATTERN, 0, 999_999_999_999_999_999),
}
