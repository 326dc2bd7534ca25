"""Tests for rankings and the pound-for-pound composite."""

import pytest

from mma_directory.datasource import Fighter, Movement, RankingEntry
from mma_directory.stats import (
    POUND_FOR_POUND,
    build_rankings_table,
    compose_pound_for_pound,
    division_rankings,
    rankings_from_fighters,
)


def _entry(fighter_id: str, points, organization="UFC", weight_class="Lightweight", rank=0) -> RankingEntry:
    return RankingEntry(
        fighter=Fighter(fighter_id=fighter_id, name=f"Fighter {fighter_id}"),
        organization=organization,
        weight_class=weight_class,
        rank=rank,
        ranking_points=points,
    )


def _division(org: str, weight_class: str, points: list[int]) -> list[RankingEntry]:
    return [
        _entry(f"{org}-{weight_class}-{i}", p, organization=org, weight_class=weight_class, rank=i)
        for i, p in enumerate(points)
    ]


@pytest.fixture
def full_table():
    """Four organizations with six divisions of five fighters each."""
    table = {}
    points = 1000
    for org in ["UFC", "Bellator", "ONE", "PFL"]:
        table[org] = {}
        for wc in ["HW", "LHW", "MW", "WW", "LW", "FW"]:
            division = []
            for i in range(5):
                division.append(
                    _entry(f"{org}-{wc}-{i}", points, organization=org, weight_class=wc, rank=i)
                )
                points -= 1
            table[org][wc] = division
    return table


class TestPoundForPound:
    """Test the cross-division composite."""

    def test_two_champions_in_order(self):
        table = {
            "UFC": {"Lightweight": [_entry("a", 970)]},
            "ONE": {"Lightweight": [_entry("b", 990, organization="ONE")]},
        }
        result = compose_pound_for_pound(table)
        assert [e.fighter.fighter_id for e in result[:2]] == ["b", "a"]
        assert [e.ranking_points for e in result] == [990, 970]

    def test_at_most_fifteen(self, full_table):
        result = compose_pound_for_pound(full_table)
        assert len(result) == 15

    def test_empty(self):
        assert compose_pound_for_pound({}) == []
        assert compose_pound_for_pound({"UFC": {"Lightweight": []}}) == []

    def test_quotas(self, full_table):
        result = compose_pound_for_pound(full_table)
        champions = [e for e in result if e.is_champion]
        contenders = [e for e in result if not e.is_champion]
        assert len(champions) == 5
        assert len(contenders) == 10

    def test_kept_entries_outrank_excluded(self, full_table):
        result = compose_pound_for_pound(full_table)
        kept = {e.fighter.fighter_id for e in result}

        champion_pool = [d[0] for divs in full_table.values() for d in divs.values()]
        contender_pool = [e for divs in full_table.values() for d in divs.values() for e in d[1:4]]

        for pool in (champion_pool, contender_pool):
            kept_points = [e.ranking_points for e in pool if e.fighter.fighter_id in kept]
            excluded_points = [e.ranking_points for e in pool if e.fighter.fighter_id not in kept]
            assert min(kept_points) > max(excluded_points)

    def test_only_top_three_contenders(self):
        division = _division("UFC", "LW", [500, 100, 90, 80, 999])
        result = compose_pound_for_pound({"UFC": {"LW": division}})
        assert [e.ranking_points for e in result] == [500, 100, 90, 80]

    def test_descending_and_annotated(self, full_table):
        result = compose_pound_for_pound(full_table)
        points = [e.ranking_points for e in result]
        assert points == sorted(points, reverse=True)
        assert all(e.weight_class for e in result)

    def test_missing_points_rank_last(self):
        table = {
            "UFC": {"LW": [_entry("a", None)]},
            "ONE": {"LW": [_entry("b", 10, organization="ONE")]},
        }
        result = compose_pound_for_pound(table)
        assert [e.fighter.fighter_id for e in result] == ["b", "a"]

    def test_ties_prefer_champions_then_input_order(self):
        table = {
            "UFC": {"LW": _division("UFC", "LW", [900, 900, 10, 10])},
            "ONE": {"LW": _division("ONE", "LW", [900, 5, 5, 5])},
        }
        result = compose_pound_for_pound(table)
        assert [e.fighter.fighter_id for e in result[:3]] == ["UFC-LW-0", "ONE-LW-0", "UFC-LW-1"]

    def test_short_division_contributes_champion_only(self):
        division = _division("UFC", "LW", [900, 800, 700])
        result = compose_pound_for_pound({"UFC": {"LW": division}})
        assert [e.fighter.fighter_id for e in result] == ["UFC-LW-0"]

    def test_four_fighter_division_adds_contenders(self):
        division = _division("UFC", "LW", [900, 800, 700, 600])
        result = compose_pound_for_pound({"UFC": {"LW": division}})
        assert [e.ranking_points for e in result] == [900, 800, 700, 600]

    def test_unranked_entries_ignored(self):
        division = _division("UFC", "LW", [900, 800, 700, 600]) + [_entry("nr", 990, rank=None)]
        result = compose_pound_for_pound({"UFC": {"LW": division}})
        assert "nr" not in [e.fighter.fighter_id for e in result]
        assert result[0].fighter.fighter_id == "UFC-LW-0"

    def test_unranked_division_skipped(self):
        table = {"UFC": {"LW": [_entry("nr", 990, rank=None)], "HW": [_entry("c", 500, weight_class="HW")]}}
        assert [e.fighter.fighter_id for e in compose_pound_for_pound(table)] == ["c"]


class TestRankingsTable:
    """Test assembling flat rows into divisions."""

    def test_nests_and_orders_by_rank(self):
        rows = [
            _entry("b", 900, rank=2),
            _entry("a", 950, rank=0),
            _entry("x", 800, organization="PFL", weight_class="Heavyweight"),
            _entry("c", 920, rank=1),
        ]
        table = build_rankings_table(rows)
        assert list(table) == ["UFC", "PFL"]
        assert [e.fighter.fighter_id for e in table["UFC"]["Lightweight"]] == ["a", "c", "b"]

    def test_unranked_rows_last(self):
        rows = [_entry("nr", 990, rank=None), _entry("b", 900, rank=1), _entry("a", 950)]
        table = build_rankings_table(rows)
        assert [e.fighter.fighter_id for e in table["UFC"]["Lightweight"]] == ["a", "b", "nr"]
        assert not table["UFC"]["Lightweight"][2].is_champion

    def test_division_rankings(self):
        table = build_rankings_table([_entry("a", 950), _entry("b", 900, rank=1)])
        assert [e.fighter.fighter_id for e in division_rankings(table, "UFC", "Lightweight")] == ["a", "b"]
        assert division_rankings(table, "UFC", "Flyweight") == []
        assert division_rankings(table, "Bellator", "Lightweight") == []
        assert [e.fighter.fighter_id for e in division_rankings(table, "UFC", POUND_FOR_POUND)] == ["a"]


class TestRankingsFromFighters:
    """Test rankings derived from fighter rows."""

    def _fighter(self, fighter_id, record, status="Active", organization="UFC", weight_class="Lightweight"):
        return Fighter(
            fighter_id=fighter_id,
            name=f"Fighter {fighter_id}",
            record=record,
            status=status,
            organization=organization,
            weight_class=weight_class,
        )

    def test_champion_first_then_by_wins(self):
        fighters = [
            self._fighter("a", "20-5-0"),
            self._fighter("champ", "15-1-0", status="Champion"),
            self._fighter("b", "22-9-0"),
            self._fighter("c", "20-2-0"),
        ]
        entries = rankings_from_fighters(fighters)
        assert [(e.fighter.fighter_id, e.rank) for e in entries] == [("champ", 0), ("b", 1), ("c", 2), ("a", 3)]
        assert entries[0].is_champion
        assert all(e.ranking_points is None for e in entries)

    def test_skips_inactive_and_incomplete(self):
        fighters = [
            self._fighter("a", "10-0-0"),
            self._fighter("retired", "30-0-0", status="Retired"),
            self._fighter("inactive", "30-0-0", status="Inactive"),
            self._fighter("no-org", "30-0-0", organization=None),
            self._fighter("no-class", "30-0-0", weight_class=None),
        ]
        assert [e.fighter.fighter_id for e in rankings_from_fighters(fighters)] == ["a"]

    def test_no_champion_starts_at_one(self):
        entries = rankings_from_fighters([self._fighter("a", "10-0-0"), self._fighter("b", "5-0-0")])
        assert [e.rank for e in entries] == [1, 2]
        assert not any(e.is_champion for e in entries)

    def test_feeds_rankings_table(self):
        fighters = [
            self._fighter(f"ufc-{i}", f"{20 - i}-1-0", status="Champion" if i == 0 else "Active") for i in range(5)
        ] + [self._fighter("pfl-0", "9-0-0", organization="PFL", weight_class="Heavyweight")]
        table = build_rankings_table(rankings_from_fighters(fighters))
        assert list(table) == ["UFC", "PFL"]
        assert [e.rank for e in table["UFC"]["Lightweight"]] == [0, 1, 2, 3, 4]
        assert [e.fighter.fighter_id for e in compose_pound_for_pound(table)] == [
            "ufc-0",
            "pfl-0",
            "ufc-1",
            "ufc-2",
            "ufc-3",
        ]


class TestMovement:
    def test_from_ranks(self):
        assert Movement.from_ranks(3, 5) is Movement.UP
        assert Movement.from_ranks(5, 3) is Movement.DOWN
        assert Movement.from_ranks(4, 4) is Movement.NONE
        assert Movement.from_ranks(4, None) is Movement.NONE
        assert Movement.from_ranks(None, 3) is Movement.NONE
