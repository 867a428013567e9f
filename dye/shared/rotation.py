#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/shared/rotation.py


def rotate_value(value: float, scale: float) -> float:
    """Wrap a value into [0, scale], e.g. a hue of 400 into 40 on a 360 scale."""
    rotated = value
    while rotated > scale:
        rotated -= scale
    while rotated < 0:
        rotated += scale
    return rotated
