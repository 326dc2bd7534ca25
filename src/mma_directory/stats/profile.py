"""Fighter profile summaries."""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Sequence

from ..datasource.models import Fight, FightResult, Fighter, FighterRecord
from .accuracy import striking_accuracy, takedown_accuracy
from .methods import MethodTotals, aggregate_losses, aggregate_wins
from .record import RecordCounts, parse_record, win_percentage


@dataclass
class FighterProfile:
    """Derived numbers shown on a fighter's page."""

    fighter: Fighter
    record: RecordCounts
    win_methods: Optional[MethodTotals]  # None when no promotion records exist
    loss_methods: Optional[MethodTotals]
    striking_accuracy: int
    takedown_accuracy: int

    @property
    def total_fights(self) -> int:
        return self.record.total

    @property
    def win_percentage(self) -> int:
        return win_percentage(self.record)


@dataclass
class HistoryItem:
    """One fight from a fighter's point of view."""

    fight: Fight
    opponent_id: str
    opponent: Optional[Fighter]
    result: Optional[FightResult]
    fight_date: Optional[date]


def build_profile(fighter: Fighter, records: Sequence[FighterRecord]) -> FighterProfile:
    """
    Compute the profile numbers once per page load.

    Method breakdowns are None rather than invented when the fighter has
    no promotion records.
    """
    return FighterProfile(
        fighter=fighter,
        record=parse_record(fighter.record),
        win_methods=aggregate_wins(records) if records else None,
        loss_methods=aggregate_losses(records) if records else None,
        striking_accuracy=striking_accuracy(fighter),
        takedown_accuracy=takedown_accuracy(fighter),
    )


def fight_history(
    fights: Iterable[Fight],
    fighter_id: str,
    opponents: Optional[dict[str, Fighter]] = None,
) -> list[HistoryItem]:
    """
    A fighter's fights, most recent first (undated fights last).

    Args:
        fights: Fights involving the fighter
        fighter_id: The fighter whose view this is
        opponents: Opponent fighters by id, used when a fight has no
            embedded opponent
    """
    opponents = opponents or {}
    items = []
    for fight in fights:
        opponent_id = fight.opponent_id(fighter_id)
        if opponent_id is None:
            continue
        items.append(
            HistoryItem(
                fight=fight,
                opponent_id=opponent_id,
                opponent=fight.opponent(fighter_id) or opponents.get(opponent_id),
                result=fight.result_for(fighter_id),
                fight_date=fight.fight_date,
            )
        )

    items.sort(key=lambda i: i.fight_date or date.min, reverse=True)
    return items
