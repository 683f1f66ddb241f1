from __future__ import annotations

from typing import Dict

from ..core.time import jdn_from_gregorian
from ..core.types import CalendarId, CalendarSpec
from ..reference.ephemeris import MEEUS
from .locations import CHINA_LOCATION, JAPAN_LOCATION, KOREA_LOCATION


# ============================================================
# EPOCHS (proleptic Gregorian, astronomical year numbering)
# ============================================================

# Traditional Chinese epoch (year 1 of cycle 1)
CHINESE_EPOCH = jdn_from_gregorian(-2636, 2, 15)

# Dangun epoch
KOREAN_EPOCH = jdn_from_gregorian(-2332, 2, 15)

# Start of the Taika era
JAPANESE_EPOCH = jdn_from_gregorian(645, 7, 20)

# Alternative count from the accession of the Yellow Emperor
HUANGDI_EPOCH = jdn_from_gregorian(-2696, 1, 1)


# ------------------------------------------------------------
# CHINESE
# Beijing; local mean time until 1929, then UTC+8
# ------------------------------------------------------------
CHINESE = CalendarSpec(
    id=CalendarId("chinese", "chinese", "0.1"),
    epoch=CHINESE_EPOCH,
    location=CHINA_LOCATION,
    ephemeris=MEEUS,
    meta={"epoch": "-2636-02-15", "month_days": "new moon day in Beijing"},
)

# ------------------------------------------------------------
# KOREAN
# Seoul; several 20th century offset changes
# ------------------------------------------------------------
KOREAN = CalendarSpec(
    id=CalendarId("korean", "korean", "0.1"),
    epoch=KOREAN_EPOCH,
    location=KOREA_LOCATION,
    ephemeris=MEEUS,
    meta={"epoch": "-2332-02-15", "month_days": "new moon day in Seoul"},
)

# ------------------------------------------------------------
# JAPANESE
# Tokyo local mean time until 1888, then 135E / UTC+9
# ------------------------------------------------------------
JAPANESE = CalendarSpec(
    id=CalendarId("japanese", "japanese", "0.1"),
    epoch=JAPANESE_EPOCH,
    location=JAPAN_LOCATION,
    ephemeris=MEEUS,
    meta={"epoch": "0645-07-20", "month_days": "new moon day in Japan"},
)


ALL_SPECS: Dict[str, CalendarSpec] = {
    "chinese": CHINESE,
    "korean": KOREAN,
    "japanese": JAPANESE,
}
