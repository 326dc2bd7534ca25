"""Professional record string parsing."""

import re
from dataclasses import dataclass
from typing import Optional

_LEADING_INT = re.compile(r"\s*\+?(\d+)")


@dataclass(frozen=True)
class RecordCounts:
    """Wins, losses and draws of a professional record."""

    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.losses + self.draws


def _leading_int(segment: str) -> int:
    """Read the leading integer of a segment, 0 if there is none."""
    match = _LEADING_INT.match(segment)
    return int(match.group(1)) if match else 0


def parse_record(record: Optional[str]) -> RecordCounts:
    """
    Parse a record string like '22-6-0' or '12-3-1, 1 NC'.

    Anything after the first comma is ignored. Segments that are missing or
    not numeric count as 0, so this never raises.

    Args:
        record: Record string, may be None or empty

    Returns:
        RecordCounts with wins, losses and draws
    """
    if not record:
        return RecordCounts()

    parts = record.split(",")[0].split("-")
    counts = [_leading_int(part) for part in parts[:3]]
    counts += [0] * (3 - len(counts))
    return RecordCounts(wins=counts[0], losses=counts[1], draws=counts[2])


def win_percentage(counts: RecordCounts) -> int:
    """Percentage of fights won, rounded; 0 with no fights."""
    if counts.total == 0:
        return 0
    return int(100 * counts.wins / counts.total + 0.5)
