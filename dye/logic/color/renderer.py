#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/logic/color/renderer.py

import argparse
import json
from typing import Any, Dict

from dye.constants.color_names import COLOR_NAMES
from dye.core import config as c
from dye.core.color import Color
from dye.core.expressions import to_hex_expression
from dye.shared.naming import get_name_for_color, get_named_colors
from dye.shared.preview import print_color_block


def _draw_bar(val: float, max_val: float, r_c: int, g_c: int, b_c: int) -> str:
    """Draw a ANSI-colored bar representation of a value."""
    total_len = 16
    abs_val = min(abs(val), max_val)
    percent = abs_val / max_val
    filled = max(0, min(total_len, int(total_len * percent)))
    empty = total_len - filled

    color_ansi = f"\033[38;2;{r_c};{g_c};{b_c}m"
    empty_ansi = "\033[90m"

    return (
        f"{color_ansi}{'█' * filled}{c.RESET}"
        f"{empty_ansi}{'░' * empty}{c.RESET}"
    )


def _label(key: str) -> str:
    return f"{c.MSG_BOLD_COLORS['info']}{key}{c.RESET}{' ' * max(0, 18 - len(key))}"


def render_color_info(
    color: Color,
    title: str,
    args: argparse.Namespace,
    data: Dict[str, Any],
) -> None:
    """Strictly prints color information. Data must be pre-calculated by the engine."""
    hide_bars = getattr(args, "hide_bars", False)

    print()
    print_color_block(color, f"{c.BOLD_WHITE}{title}{c.RESET}")

    name = get_name_for_color(color)
    if name:
        print(f"\n{_label('name')}{c.BOLD_WHITE}: {name}{c.RESET}")

    print(f"\n{_label('hex')}{c.BOLD_WHITE}: {data['hex']}{c.RESET}")
    print(f"{_label('string')}{c.BOLD_WHITE}: {data['string']}{c.RESET}")
    print(f"{_label('functional')}{c.BOLD_WHITE}: {data['functional']}{c.RESET}")

    r, g, b = data["rgb"]
    print(f"\n{_label('rgb')}{c.BOLD_WHITE}: {r:.0f} {g:.0f} {b:.0f}{c.RESET}")
    if not hide_bars:
        print(f"                    {c.BOLD_WHITE}R{c.RESET} {_draw_bar(r, 255, 255, 60, 60)}")
        print(f"                    {c.BOLD_WHITE}G{c.RESET} {_draw_bar(g, 255, 60, 255, 60)}")
        print(f"                    {c.BOLD_WHITE}B{c.RESET} {_draw_bar(b, 255, 60, 80, 255)}")

    h, s, l_hsl = data["hsl"]
    print(f"\n{_label('hsl')}{c.BOLD_WHITE}: {h:.2f}deg {s * 100:.2f}% {l_hsl * 100:.2f}%{c.RESET}")
    if not hide_bars:
        print(f"                    {c.BOLD_WHITE}H{c.RESET} {_draw_bar(h, 360, 255, 200, 0)}")
        print(f"                    {c.BOLD_WHITE}S{c.RESET} {_draw_bar(s, 1.0, 0, 200, 255)}")
        print(f"                    {c.BOLD_WHITE}L{c.RESET} {_draw_bar(l_hsl, 1.0, 200, 200, 200)}")

    opacity = data["opacity"]
    print(f"\n{_label('opacity')}{c.BOLD_WHITE}: {opacity:.3f}{c.RESET}")
    if not hide_bars:
        print(f"                    {c.BOLD_WHITE}A{c.RESET} {_draw_bar(opacity, 1.0, 200, 200, 200)}")

    print()


def render_color_names(fmt: str) -> None:
    """Print every named color as text or JSON."""
    if fmt in ("json", "prettyjson"):
        payload = {name: to_hex_expression(color) for name, color in get_named_colors().items()}
        print(json.dumps(payload, indent=2 if fmt == "prettyjson" else None))
        return
    for name in sorted(COLOR_NAMES, key=str.lower):
        print(name)
