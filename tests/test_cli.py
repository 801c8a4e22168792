#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for the command line day counter.
"""

import logging

import pytest

from calday.__main__ import main


def test_days(capsys):
    assert(main(["2000-02-29", "2001-02-28"]) == 0)
    out = capsys.readouterr().out
    assert(out == "2000-02-29 - 2001-02-28: 365 days\n")

def test_negative_interval(capsys):
    assert(main(["2000-03-01", "2000-01-01"]) == 0)
    assert(capsys.readouterr().out.endswith(": -60 days\n"))

def test_long_julian(capsys):
    argv = ["--calendar", "julian", "--long", "--", "-0043-03-15", "0001-01-01"]
    assert(main(argv) == 0)
    out = capsys.readouterr().out
    assert(out == "March 15, 44 BC - January 1, 1: 15998 days\n")

def test_julian_century(capsys):
    assert(main(["--calendar", "JULIAN", "1900-02-28", "1900-03-01"]) == 0)
    assert(capsys.readouterr().out.endswith(": 2 days\n"))
    assert(main(["--calendar", "gregorian", "1900-02-28", "1900-03-01"]) == 0)
    assert(capsys.readouterr().out.endswith(": 1 days\n"))

def test_invalid_date(capsys):
    assert(main(["2021-02-29", "2021-03-01"]) == 1)
    captured = capsys.readouterr()
    assert(captured.out == "")
    assert("day must be in 1..28" in captured.err)

def test_gregorian_before_reform(capsys):
    assert(main(["1582-10-15", "1600-01-01"]) == 1)
    assert("Gregorian" in capsys.readouterr().err)

@pytest.mark.parametrize("argv", [
    ["2000/01/01", "2000-01-02"],
    ["2000-01-01"],
    ["--calendar", "hebrew", "2000-01-01", "2000-01-02"],
])
def test_usage_errors(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert(excinfo.value.code == 2)

def test_verbose(caplog, capsys):
    try:
        assert(main(["-v", "2000-01-01", "2000-01-02"]) == 0)
        assert("numba jit" in caplog.text)
        assert("JD 2451545" in caplog.text)
        caplog.clear()
        assert(main(["2000-01-01", "2000-01-02"]) == 0)
        assert("numba jit" not in caplog.text)
        assert(capsys.readouterr().out.endswith(": 1 days\n"))
    finally:
        logging.getLogger("calday").setLevel(logging.NOTSET)
