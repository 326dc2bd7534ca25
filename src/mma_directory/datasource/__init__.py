"""Hosted data source access."""

from .client import DataSourceClient, DataSourceError
from .models import (
    Event,
    Fight,
    FightResult,
    FightType,
    Fighter,
    FighterRecord,
    Movement,
    RankingEntry,
)
from .repository import DataRepository, EventPage, FighterPage

__all__ = [
    "Event",
    "Fight",
    "FightResult",
    "FightType",
    "Fighter",
    "FighterRecord",
    "Movement",
    "RankingEntry",
    "DataSourceClient",
    "DataSourceError",
    "DataRepository",
    "EventPage",
    "FighterPage",
]
