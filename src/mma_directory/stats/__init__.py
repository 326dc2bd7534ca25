"""Aggregations behind the directory pages."""

from .accuracy import accuracy, striking_accuracy, takedown_accuracy
from .events import (
    FightCard,
    TimeLeft,
    build_fight_card,
    next_event,
    partition_events,
    select_main_event,
    time_until,
)
from .grouping import (
    Listing,
    SortMode,
    arrange_events,
    arrange_fighters,
    filter_events,
    filter_fighters,
    filter_rankings,
    month_options,
    sort_fighters,
)
from .methods import MethodTotals, aggregate_losses, aggregate_wins
from .profile import FighterProfile, HistoryItem, build_profile, fight_history
from .rankings import (
    CHAMPION_QUOTA,
    CONTENDER_QUOTA,
    POUND_FOR_POUND,
    POUND_FOR_POUND_SIZE,
    build_rankings_table,
    compose_pound_for_pound,
    division_rankings,
    rankings_from_fighters,
)
from .record import RecordCounts, parse_record, win_percentage

__all__ = [
    # Record
    "RecordCounts",
    "parse_record",
    "win_percentage",
    # Methods
    "MethodTotals",
    "aggregate_wins",
    "aggregate_losses",
    # Accuracy
    "accuracy",
    "striking_accuracy",
    "takedown_accuracy",
    # Grouping
    "SortMode",
    "Listing",
    "filter_fighters",
    "filter_events",
    "filter_rankings",
    "sort_fighters",
    "arrange_fighters",
    "arrange_events",
    "month_options",
    # Rankings
    "CHAMPION_QUOTA",
    "CONTENDER_QUOTA",
    "POUND_FOR_POUND",
    "POUND_FOR_POUND_SIZE",
    "compose_pound_for_pound",
    "build_rankings_table",
    "division_rankings",
    "rankings_from_fighters",
    # Events
    "FightCard",
    "TimeLeft",
    "select_main_event",
    "build_fight_card",
    "partition_events",
    "next_event",
    "time_until",
    # Profile
    "FighterProfile",
    "HistoryItem",
    "build_profile",
    "fight_history",
]
