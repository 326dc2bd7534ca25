"""Division rankings and the pound-for-pound composite."""

from typing import Iterable, Mapping, Sequence

from ..datasource.models import Fighter, RankingEntry
from .record import parse_record, win_percentage

# Pound-for-pound quotas
CHAMPION_QUOTA = 5
CONTENDER_QUOTA = 10
CONTENDERS_PER_DIVISION = 3
POUND_FOR_POUND_SIZE = 15

POUND_FOR_POUND = "Pound-for-Pound"

INACTIVE_STATUSES = {"Inactive", "Retired"}

RankingsTable = Mapping[str, Mapping[str, Sequence[RankingEntry]]]


def _points(entry: RankingEntry) -> int:
    return entry.ranking_points or 0


def _by_points(entries: Iterable[RankingEntry]) -> list[RankingEntry]:
    """Sort descending by ranking points; equal points keep input order."""
    return sorted(entries, key=lambda e: -_points(e))


def compose_pound_for_pound(rankings: RankingsTable) -> list[RankingEntry]:
    """
    Build the cross-division pound-for-pound list.

    Unranked entries are ignored. Every division's champion (first ranked
    entry) goes to the champions pool. A division with at least four ranked
    fighters also sends its next three entries to the contenders pool. Each
    pool is ordered by ranking points and cut to its quota (5 champions, 10
    contenders); the union is re-ordered by points and cut to 15.

    Ties keep input order, and champions come before contenders on equal
    points.

    Args:
        rankings: organization -> weight class -> ordered ranking list

    Returns:
        Up to 15 entries, best first
    """
    champions: list[RankingEntry] = []
    contenders: list[RankingEntry] = []

    for divisions in rankings.values():
        for entries in divisions.values():
            ranked = [e for e in entries if e.rank is not None]
            if not ranked:
                continue
            champions.append(ranked[0])
            if len(ranked) > CONTENDERS_PER_DIVISION:
                contenders.extend(ranked[1 : 1 + CONTENDERS_PER_DIVISION])

    selected = (
        _by_points(champions)[:CHAMPION_QUOTA]
        + _by_points(contenders)[:CONTENDER_QUOTA]
    )
    return _by_points(selected)[:POUND_FOR_POUND_SIZE]


def build_rankings_table(entries: Iterable[RankingEntry]) -> dict[str, dict[str, list[RankingEntry]]]:
    """
    Nest flat ranking rows by organization and weight class.

    Each division is ordered by rank, so its champion comes first and
    unranked entries come last.
    """
    table: dict[str, dict[str, list[RankingEntry]]] = {}
    for entry in entries:
        table.setdefault(entry.organization, {}).setdefault(entry.weight_class, []).append(entry)

    for divisions in table.values():
        for weight_class, members in divisions.items():
            divisions[weight_class] = sorted(members, key=lambda e: (e.rank is None, e.rank or 0))
    return table


def division_rankings(
    rankings: RankingsTable,
    organization: str,
    weight_class: str,
) -> list[RankingEntry]:
    """Rankings for one division, or the composite for 'Pound-for-Pound'."""
    if weight_class == POUND_FOR_POUND:
        return compose_pound_for_pound(rankings)
    return list(rankings.get(organization, {}).get(weight_class, []))


def organizations(rankings: RankingsTable) -> list[str]:
    return sorted(rankings.keys())


def weight_classes(rankings: RankingsTable, organization: str) -> list[str]:
    """Weight classes of an organization, in table order."""
    return list(rankings.get(organization, {}).keys())


def _standing_key(fighter: Fighter) -> tuple:
    record = parse_record(fighter.record)
    return (not fighter.is_champion, -record.wins, -win_percentage(record))


def rankings_from_fighters(fighters: Iterable[Fighter]) -> list[RankingEntry]:
    """
    Derive division rankings from fighter rows alone.

    Used when no ranking rows are published. Fighters without an
    organization or weight class are skipped, as are inactive and retired
    ones. Within a division the champion takes rank 0 and the rest follow
    by wins, then win percentage; without a champion numbering starts at 1.
    Ranking points are unknown and stay None.
    """
    divisions: dict[tuple[str, str], list[Fighter]] = {}
    for fighter in fighters:
        if not fighter.organization or not fighter.weight_class:
            continue
        if fighter.status in INACTIVE_STATUSES:
            continue
        divisions.setdefault((fighter.organization, fighter.weight_class), []).append(fighter)

    entries = []
    for (organization, weight_class), members in divisions.items():
        ordered = sorted(members, key=_standing_key)
        first_rank = 0 if ordered[0].is_champion else 1
        for rank, fighter in enumerate(ordered, start=first_rank):
            entries.append(
                RankingEntry(
                    fighter=fighter,
                    organization=organization,
                    weight_class=weight_class,
                    rank=rank,
                )
            )
    return entries
