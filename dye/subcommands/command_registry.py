#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/subcommands/command_registry.py

from . import (
    convert,
    mix,
    scheme,
    adjust
)

SUBCOMMANDS = {
    'convert': convert,
    'mix': mix,
    'scheme': scheme,
    'adjust': adjust
}
