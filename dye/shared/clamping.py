#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/shared/clamping.py

import math


def _round_half_up(v: float) -> int:
    # half-up, unlike the banker rounding of round()
    return int(math.floor(v + 0.5))


def _clamp255(v: float) -> int:
    if v != v:
        return 0
    return max(0, min(255, _round_half_up(v)))
