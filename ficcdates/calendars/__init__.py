"""
Business day calendars.

Native calendars (TARGET, UK, US, weekends-only) are implemented here; any
other country is served by wrapping the matching QuantLib calendar. Joint
calendars are requested by joining names with ``+``, e.g. ``"US+UK"``.
"""

from typing import Dict

from .base import (
    EASTER_FIRST_YEAR,
    EASTER_LAST_YEAR,
    MAX_ADJUSTMENT_DAYS,
    Calendar,
)
from .joint import JointCalendar
from .quantlib import QUANTLIB_FACTORIES, QuantLibCalendar
from .target import Target
from .united_kingdom import UnitedKingdom, UnitedKingdomMarket
from .united_states import UnitedStates, UnitedStatesMarket
from .weekends_only import WeekendsOnly

# Pre-defined calendar instances
TARGET = Target()
UK = UnitedKingdom()
US = UnitedStates()
NYSE = UnitedStates(UnitedStatesMarket.NYSE)
US_LIBOR = UnitedStates(UnitedStatesMarket.LIBOR)
WEEKEND_ONLY = WeekendsOnly()

# Calendar registry
CALENDARS: Dict[str, Calendar] = {
    "TARGET": TARGET,
    "EUR": TARGET,  # Alias
    "UK": UK,
    "GB": UK,
    "GBP": UK,
    "US": US,
    "USD": US,
    "USNY": US,
    "NYSE": NYSE,
    "US LIBOR": US_LIBOR,
    "WEEKEND": WEEKEND_ONLY,
}

_QUANTLIB_CACHE: Dict[str, Calendar] = {}


def _single_calendar(name: str) -> Calendar:
    key = name.strip().upper().replace("_", " ")
    if key in CALENDARS:
        return CALENDARS[key]
    if key in QUANTLIB_FACTORIES:
        if key not in _QUANTLIB_CACHE:
            _QUANTLIB_CACHE[key] = QuantLibCalendar(QUANTLIB_FACTORIES[key](), key)
        return _QUANTLIB_CACHE[key]
    raise ValueError(
        f"Unknown calendar: {name}. "
        f"Available: {list(CALENDARS.keys()) + list(QUANTLIB_FACTORIES.keys())}"
    )


def get_calendar(name: str) -> Calendar:
    """
    Get a calendar by name.

    Args:
        name: Calendar name ("TARGET", "UK", "US", "JAPAN", ...) or several
            names joined with "+" for a joint calendar ("US+UK")
    """
    parts = [part for part in name.split("+") if part.strip()]
    if not parts:
        raise ValueError(f"Unknown calendar: {name!r}")
    if len(parts) == 1:
        return _single_calendar(parts[0])
    return JointCalendar(_single_calendar(part) for part in parts)


__all__ = [
    "Calendar",
    "JointCalendar",
    "QuantLibCalendar",
    "Target",
    "UnitedKingdom",
    "UnitedKingdomMarket",
    "UnitedStates",
    "UnitedStatesMarket",
    "WeekendsOnly",
    "TARGET",
    "UK",
    "US",
    "NYSE",
    "US_LIBOR",
    "WEEKEND_ONLY",
    "CALENDARS",
    "get_calendar",
    "EASTER_FIRST_YEAR",
    "EASTER_LAST_YEAR",
    "MAX_ADJUSTMENT_DAYS",
]
