"""Method-of-victory totals across promotion records."""

from dataclasses import dataclass
from typing import Iterable

from ..datasource.models import FighterRecord


@dataclass(frozen=True)
class MethodTotals:
    """Finish counts by method."""

    ko_tko: int = 0
    submissions: int = 0
    decisions: int = 0
    disqualifications: int = 0

    @property
    def total(self) -> int:
        return self.ko_tko + self.submissions + self.decisions + self.disqualifications

    def as_dict(self) -> dict[str, int]:
        """Counts keyed by display label, in chart order."""
        return {
            "KO/TKO": self.ko_tko,
            "Submission": self.submissions,
            "Decision": self.decisions,
            "DQ": self.disqualifications,
        }

    def share(self, count: int) -> int:
        """Percentage of the total represented by `count`."""
        if self.total == 0:
            return 0
        return int(100 * count / self.total + 0.5)


def aggregate_wins(records: Iterable[FighterRecord]) -> MethodTotals:
    """
    Sum win methods over every promotion slice.

    Slices are neither deduplicated nor weighted; overlapping date ranges
    are counted twice.
    """
    ko = sub = dec = dq = 0
    for record in records:
        ko += record.win_ko
        sub += record.win_sub
        dec += record.win_decision
        dq += record.win_dq
    return MethodTotals(ko_tko=ko, submissions=sub, decisions=dec, disqualifications=dq)


def aggregate_losses(records: Iterable[FighterRecord]) -> MethodTotals:
    """Sum loss methods over every promotion slice."""
    ko = sub = dec = dq = 0
    for record in records:
        ko += record.loss_ko
        sub += record.loss_sub
        dec += record.loss_decision
        dq += record.loss_dq
    return MethodTotals(ko_tko=ko, submissions=sub, decisions=dec, disqualifications=dq)
