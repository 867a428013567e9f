#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/shared/preview.py

import os
import re
import sys

from dye.core import config as c
from dye.core.color import Color
from dye.core.conversions import to_rgb
from dye.core.expressions import to_string
from .clamping import _clamp255

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(ANSI_ESCAPE.sub('', s))


def print_color_block(color: Color, title: str = "color", end: str = "\n") -> None:
    r, g, b = (_clamp255(v) for v in to_rgb(color).data)
    vis_len = get_visible_len(title)
    padding = " " * max(0, 18 - vis_len)

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   \033[48;2;{r};{g};{b}m                {c.RESET}  {c.BOLD_WHITE}{to_string(color)}{c.RESET}", end=end)


def ensure_truecolor() -> None:
    """Advertise 24-bit color for the swatches when writing to a terminal."""
    if sys.platform == "win32" or not sys.stdout.isatty():
        return
    os.environ.setdefault("COLORTERM", "truecolor")
