# tests/test_deltat.py

import logging

import pytest

from lunisolar.reference import deltat


@pytest.fixture
def clean_table(monkeypatch):
    monkeypatch.delenv(deltat.DELTAT_TABLE_ENV, raising=False)
    deltat.load_table.cache_clear()
    yield
    deltat.load_table.cache_clear()


def test_em2006_known_values(clean_table):
    # Espenak-Meeus polynomial values
    assert deltat.delta_t_em2006(2000.0) == pytest.approx(63.86, abs=0.01)
    assert deltat.delta_t_em2006(1900.0) == pytest.approx(-2.79, abs=0.05)
    assert deltat.delta_t_seconds(1820.0) == pytest.approx(12.0, abs=0.5)


def test_deltat_large_in_antiquity(clean_table):
    # Long-term parabola: hours of difference two thousand years ago
    assert deltat.delta_t_seconds(0.0) > 10000.0
    assert deltat.delta_t_seconds(-2000.0) > deltat.delta_t_seconds(0.0)


def test_unknown_method_rejected(clean_table):
    with pytest.raises(ValueError):
        deltat.delta_t_seconds(2000.0, method="bogus")


def test_table_override(tmp_path, monkeypatch, clean_table):
    p = tmp_path / "dt.csv"
    p.write_text("decimal_year,delta_t_seconds\n1990,50\n2010,70\n", encoding="utf-8")
    monkeypatch.setenv(deltat.DELTAT_TABLE_ENV, str(p))
    deltat.load_table.cache_clear()

    assert deltat.delta_t_seconds(2000.0) == pytest.approx(60.0)
    # outside the table range the polynomial is used
    assert deltat.delta_t_seconds(1900.0) == pytest.approx(deltat.delta_t_em2006(1900.0))
    # polynomial only on request
    assert deltat.delta_t_seconds(2000.0, method="em2006") == pytest.approx(deltat.delta_t_em2006(2000.0))


def test_missing_table_warns(tmp_path, monkeypatch, clean_table, caplog):
    monkeypatch.setenv(deltat.DELTAT_TABLE_ENV, str(tmp_path / "nope.csv"))
    with caplog.at_level(logging.WARNING, logger="lunisolar.reference.deltat"):
        assert deltat.load_table() is None
    assert "missing file" in caplog.text


def test_read_table_validation():
    tbl = deltat.read_table([
        {"decimal_year": "2000", "delta_t_seconds": "64"},
        {"decimal_year": "2010", "delta_t_seconds": "66"},
    ])
    assert len(tbl) == 2
    assert tbl.range == (2000.0, 2010.0)
    assert tbl.eval(2005.0) == pytest.approx(65.0)
    with pytest.raises(ValueError):
        tbl.eval(2011.0)

    with pytest.raises(ValueError):
        deltat.read_table([
            {"decimal_year": "2010", "delta_t_seconds": "66"},
            {"decimal_year": "2000", "delta_t_seconds": "64"},
        ])
    with pytest.raises(ValueError):
        deltat.read_table([{"decimal_year": "2000", "delta_t_seconds": "64"}])
