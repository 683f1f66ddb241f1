# tests/test_diagnostics.py

from datetime import date

import pytest

from lunisolar.core.types import LeapMonth
from lunisolar.diagnostics import leap_months, pretty_month, round_trip


def test_roundtrip_small_sample(capsys):
    failures = round_trip.roundtrip_test(
        "japanese", N=5, start=date(1990, 1, 1), end=date(2030, 12, 31), seed=3, max_failures=1
    )
    assert failures == 0
    assert "FAIL" not in capsys.readouterr().out


def test_leap_labels():
    assert leap_months.leap_label("chinese", 2023) == 2
    assert leap_months.leap_label("chinese", 2024) is None
    assert leap_months.leap_points("korean", 2022, 2024) == [(2023, 2)]


def test_leap_table_output(capsys):
    leap_months.print_table(["chinese"], {"chinese": {2023: 2}}, 2022, 2024)
    out = capsys.readouterr().out
    assert "2023" in out
    assert "2L" in out
    assert "2022" not in out


def test_parse_calendars():
    assert leap_months.parse_calendars("chinese, korean") == ["chinese", "korean"]
    with pytest.raises(SystemExit):
        leap_months.parse_calendars("")


def test_pretty_month(capsys):
    pretty_month.lunar_month_calendar("chinese", 4660, LeapMonth(2))
    out = capsys.readouterr().out
    assert "M=2L (ordinal 3)" in out
    assert "2023-03-22 .. 2023-04-19" in out


def test_plot_barcode(tmp_path):
    pytest.importorskip("numpy")
    pytest.importorskip("matplotlib")
    import matplotlib
    matplotlib.use("Agg")

    out = tmp_path / "leap.png"
    leap_months.plot_barcode(["chinese"], {"chinese": {2023: 2}}, 2020, 2025, str(out), "test")
    assert out.exists()
