#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tests/test_cli.py

import json
import sys

import pytest

from dye.main import main


@pytest.fixture
def run_cli(monkeypatch, capsys):
    monkeypatch.setenv("COLORTERM", "truecolor")

    def run(*argv):
        monkeypatch.setattr(sys, "argv", ["dye", *argv])
        code = None
        try:
            main()
        except SystemExit as e:
            code = e.code
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return run


def test_inspect_named_color(run_cli):
    code, out, _ = run_cli("-cn", "Cornflower Blue", "-hb")
    assert code is None
    assert "cornflowerBlue" in out
    assert "#6495ed" in out
    assert "rgba(100,149,237,1)" in out


def test_inspect_requires_input(run_cli):
    code, _, err = run_cli()
    assert code == 2
    assert "[error]" in err


def test_command_must_come_first(run_cli):
    code, _, err = run_cli("-e", "#fff", "convert")
    assert code == 2
    assert "must be the first argument" in err


def test_list_color_names_json(run_cli):
    code, out, _ = run_cli("--list-color-names", "json")
    assert code == 0
    names = json.loads(out)
    assert names["black"] == "#000"
    assert names["cornflowerBlue"] == "#6495ed"


@pytest.mark.parametrize(
    "expression,fmt,expected",
    [
        ("#ff0000", "hsl", "hsl(0,100%,50%)"),
        ("hsl(180, .5, .5)", "hex", "#40bfbf"),
        ("#0080ff", "rgba", "rgba(0,128,255,1)"),
        ("rgba(0, 128, 255, .5)", "string", "rgba(0,128,255,0.5)"),
    ],
)
def test_convert(run_cli, expression, fmt, expected):
    code, out, _ = run_cli("convert", "-e", expression, "-t", fmt)
    assert code == 0
    assert expected in out


def test_convert_rejects_bad_expression(run_cli):
    code, out, err = run_cli("convert", "-e", "#zz", "-t", "hex")
    assert code == 2
    assert "invalid color" in err
    assert out == ""


def test_mix(run_cli):
    code, out, _ = run_cli("mix", "-e", "#ff0000", "-e", "#0000ff", "-m", "additive")
    assert code == 0
    assert "#f0f" in out


def test_mix_needs_two_colors(run_cli):
    code, _, err = run_cli("mix", "-e", "#ff0000")
    assert code == 2
    assert "at least two colors" in err


def test_scheme_defaults_to_complementary(run_cli):
    code, out, _ = run_cli("scheme", "-e", "hsl(0, 100%, 50%)")
    assert code == 0
    assert "complementary" in out
    assert "#0ff" in out


def test_scheme_all(run_cli):
    code, out, _ = run_cli("scheme", "-cn", "red", "-all")
    assert code == 0
    for title in ("light shades", "dark shades", "split complementary", "tetradic"):
        assert title in out


def test_adjust_runs_in_pipeline_order(run_cli):
    code, out, _ = run_cli("adjust", "-e", "#ff0000", "--lighten", "0.25", "--opacity", "0.5")
    assert code == 0
    assert "rgba(255,128,128,0.5)" in out


def test_adjust_complement_default(run_cli):
    code, out, _ = run_cli("adjust", "-e", "#ff0000", "--complement")
    assert code == 0
    assert "#0ff" in out
