#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/core/config.py

# ==========================================
# Color Value Constants
# ==========================================

FULL_OPACITY = 1.0                 # Opacity value of a fully opaque color
PERCENT_TO_FACTOR = 100.0          # Divisor to convert percentage values to factors
FLOAT_PRECISION = 3                # Decimal places kept when serializing float channels
HEX_SHORT_LEN = 4                  # Length of '#rgb'
HEX_LONG_LEN = 7                   # Length of '#rrggbb'

# Hue-to-RGB breakpoints (fractions of the hue circle)
HUE_THIRD = 1.0 / 3.0
HUE_SIXTH = 1.0 / 6.0
HUE_HALF = 1.0 / 2.0
HUE_TWO_THIRDS = 2.0 / 3.0

# ==========================================
# Derivation Defaults
# ==========================================

COMPLEMENT_OFFSET = 180.0          # Default hue rotation for complement()

SCHEME_START = 0.0                 # First generator value of a scheme
SCHEME_STEP = 0.1                  # Increment between generator values
SCHEME_LENGTH = 5                  # Number of colors produced by generate_scheme()

LIGHT_SHADE_KEYS = ("normal", "light", "lighter", "lightest")
DARK_SHADE_KEYS = ("normal", "dark", "darker", "darkest")
PAIR_KEYS = ("primary", "secondary")
TRIAD_KEYS = ("tertiary", "primary", "secondary")
QUAD_KEYS = ("primary", "secondary", "tertiary", "quaternary")

# ==========================================
# CLI Limits & Data Structures
# ==========================================

MAX_DEC = 16777215                 # Max integer value for 24-bit Hex (0xFFFFFF)

# Supported scheme flags for the 'scheme' command
SCHEME_KEYS = [
    "light_shades",
    "dark_shades",
    "complementary",
    "analogous",
    "split_complementary",
    "triadic",
    "square",
    "tetradic",
]

# Target formats for the 'convert' command
CONVERT_FORMATS = ["hex", "rgb", "rgba", "hsl", "hsla", "string"]

# Fixed order of operations for the 'adjust' command
ADJUST_PIPELINE = [
    "red",
    "green",
    "blue",
    "hue",
    "saturation",
    "lightness",
    "opacity",
    "complement",
    "lighten",
    "darken",
    "tint",
    "tone",
    "grayscale",
    "invert",
    "fade_in",
    "fade_out",
]

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
