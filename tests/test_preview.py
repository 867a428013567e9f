#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tests/test_preview.py

import io
import os
import sys

import pytest

from dye.core.color import rgb, rgba
from dye.shared.preview import ensure_truecolor, get_visible_len, print_color_block


class _Terminal(io.StringIO):
    def isatty(self):
        return True


def test_print_color_block(capsys):
    print_color_block(rgba(255, 0, 0, .5), "red")
    out = capsys.readouterr().out
    assert out.startswith("red")
    assert "\033[48;2;255;0;0m" in out
    assert "rgba(255,0,0,0.5)" in out


def test_visible_len_ignores_escapes():
    assert get_visible_len("\033[1;36mhello\033[0m") == 5


@pytest.mark.parametrize("stdout,expected", [(_Terminal(), "truecolor"), (io.StringIO(), None)])
def test_ensure_truecolor_only_on_terminals(monkeypatch, stdout, expected):
    monkeypatch.delenv("COLORTERM", raising=False)
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(sys, "stdout", stdout)
    ensure_truecolor()
    assert os.environ.get("COLORTERM") == expected


def test_ensure_truecolor_keeps_existing_value(monkeypatch):
    monkeypatch.setenv("COLORTERM", "24bit")
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(sys, "stdout", _Terminal())
    ensure_truecolor()
    assert os.environ["COLORTERM"] == "24bit"
