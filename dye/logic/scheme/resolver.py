#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/logic/scheme/resolver.py

import argparse

from dye.core import config as c
from dye.logic.color.resolver import resolve_color_input
from dye.shared.preview import print_color_block
from .engine import SCHEME_BUILDERS
from .renderer import render_scheme


def resolve_scheme_input(args: argparse.Namespace) -> None:
    """Build and print every scheme requested on the command line."""
    if args.all_schemes:
        for key in c.SCHEME_KEYS:
            setattr(args, key, True)

    color, title = resolve_color_input(args)

    selected = [key for key in c.SCHEME_KEYS if getattr(args, key, False)]
    if not selected:
        selected = ["complementary"]

    print()
    print_color_block(color, f"{c.BOLD_WHITE}{title}{c.RESET}")
    print()
    for key in selected:
        render_scheme(key, SCHEME_BUILDERS[key](color))
