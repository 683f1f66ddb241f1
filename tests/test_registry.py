# tests/test_registry.py

import logging

import pytest

from lunisolar.bootstrap import build_registry
from lunisolar.core.engine import CalendarRegistry
from lunisolar.engines.factory import make_calendar
from lunisolar.engines.specs import CHINESE, HUANGDI_EPOCH


def test_build_registry():
    reg = build_registry()
    assert reg.list() == ["chinese", "japanese", "korean"]
    assert reg.get("korean").id.family == "korean"
    with pytest.raises(KeyError):
        reg.get("tibetan")


def test_register(caplog):
    reg = CalendarRegistry({})
    cal = make_calendar(CHINESE.tweak(epoch=HUANGDI_EPOCH))
    with caplog.at_level(logging.DEBUG, logger="lunisolar.core.engine"):
        reg.register("huangdi", cal)
    assert "huangdi" in caplog.text
    assert reg.get("huangdi") is cal

    with pytest.raises(KeyError):
        reg.register("huangdi", cal)
    other = make_calendar(CHINESE)
    reg.register("huangdi", other, overwrite=True)
    assert reg.get("huangdi") is other
