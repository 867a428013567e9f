#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: dye/core/errors.py


class DyeError(Exception):
    """Base class for every error raised by dye."""


class UnknownSpace(DyeError, LookupError):
    """A color space has no metadata or no converter registered."""

    def __init__(self, space) -> None:
        self.space = space
        super().__init__(f"color space '{getattr(space, 'value', space)}' is not supported")


class InvalidChannelCount(DyeError, ValueError):
    """Color data does not carry one value per channel of its space."""


class InvalidHexExpression(DyeError, ValueError):
    pass


class InvalidFunctionExpression(DyeError, ValueError):
    pass


class ArgumentCountMismatch(DyeError, ValueError):
    pass


class InvalidArgumentFormat(DyeError, ValueError):
    pass


class UnknownMixMode(DyeError, ValueError):
    pass


class UnknownColorName(DyeError, LookupError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown color name '{name}'")
