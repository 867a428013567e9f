#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/logic/scheme/renderer.py

from dye.core import config as c
from dye.shared.preview import print_color_block
from .engine import Scheme


def render_scheme(name: str, scheme: Scheme) -> None:
    """Print one swatch per scheme entry under the scheme's name."""
    print(f"{c.MSG_BOLD_COLORS['dim']}{name.replace('_', ' ')}{c.RESET}")
    for key, color in scheme.items():
        print_color_block(color, f"{c.MSG_BOLD_COLORS['info']}{key}{c.RESET}")
    print()
