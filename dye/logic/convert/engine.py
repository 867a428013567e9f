#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/logic/convert/engine.py

import argparse

from dye.core import config as c
from dye.logic.color.resolver import resolve_color_input
from .renderer import render_convert_info


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for color conversion"""
    color, _ = resolve_color_input(args)
    out = render_convert_info(color, args.to_format)

    if args.verbose:
        src = render_convert_info(color, "string")
        print(f"{src} {c.MSG_BOLD_COLORS['info']}->{c.RESET} {out}")
    else:
        print(out)
