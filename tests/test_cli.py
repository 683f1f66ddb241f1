# tests/test_cli.py

import pytest

from lunisolar.cli import _fmt_moment, main


def test_day_shortcut(capsys):
    assert main(["2023-01-22"]) == 0
    out = capsys.readouterr().out
    assert "2023-01-22  JDN 2459967  [chinese]" in out
    assert "year 4660 (cycle 78, year 40)" in out
    assert "month 1 (lunar month 1), day 1" in out


def test_day_with_attributes(capsys):
    assert main(["day", "2023-03-25", "--calendar", "korean", "--attr", "weekday"]) == 0
    out = capsys.readouterr().out
    assert "[korean]" in out
    assert "lunar month 2L" in out
    assert "weekday: 5" in out


def test_lunar_leap(capsys):
    assert main(["lunar", "4660", "2", "1", "--leap"]) == 0
    out = capsys.readouterr().out
    assert "4660-2L-1 -> ordinal month 3 -> 2023-03-22" in out


def test_lunar_invalid(capsys):
    assert main(["lunar", "4661", "2", "1", "--leap"]) == 1
    assert "invalid date: invalid_leap_month" in capsys.readouterr().err


def test_solar(capsys):
    assert main(["solar", "2023-01-01"]) == 0
    out = capsys.readouterr().out
    assert "Major solar term = 11" in out
    assert "Next major term  : 2023-01-20" in out
    assert "December solstice on or before: 2022-12-22" in out


def test_moon(capsys):
    assert main(["moon", "2023-01-25"]) == 0
    out = capsys.readouterr().out
    assert "Previous new moon : 2023-01-21 20:5" in out
    assert "month day 1 = 2023-01-22" in out
    assert "month day 1 = 2023-02-20" in out


def test_new_years_table(capsys):
    assert main(["new-years", "--from-year", "2023", "--to-year", "2023"]) == 0
    out = capsys.readouterr().out
    assert "2023" in out
    assert "01-22" in out


def test_fmt_moment():
    assert _fmt_moment(2459967.5) == "2023-01-22 12:00"
    assert _fmt_moment(2459967.9999999) == "2023-01-23 00:00"


def test_negative_year_is_not_a_day_shortcut(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-0500-01-01"])
    assert exc.value.code == 2
    assert "-0500-01-01" not in capsys.readouterr().out
