"""Tests for record, method and accuracy calculations."""

from mma_directory.datasource import Fighter, FighterRecord
from mma_directory.stats import (
    MethodTotals,
    RecordCounts,
    accuracy,
    aggregate_losses,
    aggregate_wins,
    build_profile,
    parse_record,
    striking_accuracy,
    takedown_accuracy,
    win_percentage,
)


def _record(**kwargs) -> FighterRecord:
    return FighterRecord(record_id=kwargs.pop("record_id", "r1"), fighter_id="f1", **kwargs)


class TestRecordParser:
    """Test record string parsing."""

    def test_parse_basic(self):
        counts = parse_record("22-6-0")
        assert counts == RecordCounts(wins=22, losses=6, draws=0)
        assert counts.total == 28

    def test_no_contest_suffix_ignored(self):
        assert parse_record("12-3-1,1 NC") == parse_record("12-3-1")
        assert parse_record("12-3-1, 2 NC").total == parse_record("12-3-1").total

    def test_empty_and_none(self):
        assert parse_record("") == RecordCounts(0, 0, 0)
        assert parse_record(None) == RecordCounts(0, 0, 0)

    def test_bad_segments_default_to_zero(self):
        assert parse_record("abc-3-x") == RecordCounts(0, 3, 0)
        assert parse_record("15") == RecordCounts(15, 0, 0)
        assert parse_record("7-2") == RecordCounts(7, 2, 0)

    def test_leading_integer_of_segment(self):
        """Segments are read up to the first non-digit."""
        assert parse_record(" 9 -1 -0 (W)") == RecordCounts(9, 1, 0)

    def test_win_percentage(self):
        assert win_percentage(RecordCounts(3, 1, 0)) == 75
        assert win_percentage(RecordCounts(0, 0, 0)) == 0
        assert win_percentage(RecordCounts(2, 1, 0)) == 67


class TestMethodAggregator:
    """Test method-of-victory totals."""

    def test_empty(self):
        totals = aggregate_wins([])
        assert totals == MethodTotals(0, 0, 0)
        assert totals.total == 0

    def test_sums_across_slices(self):
        records = [_record(win_ko=2), _record(record_id="r2", win_ko=3)]
        assert aggregate_wins(records).ko_tko == 5

    def test_all_methods(self):
        records = [
            _record(win_ko=4, win_sub=2, win_decision=5, win_dq=1),
            _record(record_id="r2", win_ko=1, win_sub=1, win_decision=0),
        ]
        totals = aggregate_wins(records)
        assert totals == MethodTotals(ko_tko=5, submissions=3, decisions=5, disqualifications=1)
        assert totals.total == 14

    def test_order_independent(self):
        a = _record(win_ko=1, win_sub=2)
        b = _record(record_id="r2", win_decision=7)
        assert aggregate_wins([a, b]) == aggregate_wins([b, a])

    def test_overlapping_slices_double_count(self):
        slice_ = _record(win_sub=2)
        assert aggregate_wins([slice_, slice_]).submissions == 4

    def test_losses(self):
        records = [_record(loss_ko=1, loss_decision=2), _record(record_id="r2", loss_sub=1)]
        assert aggregate_losses(records) == MethodTotals(ko_tko=1, submissions=1, decisions=2)

    def test_share(self):
        totals = MethodTotals(ko_tko=1, submissions=1, decisions=2)
        assert totals.share(totals.decisions) == 50
        assert MethodTotals().share(0) == 0


class TestAccuracy:
    """Test accuracy percentages."""

    def test_zero_attempts(self):
        for landed in (0, 1, 50):
            assert accuracy(landed, 0) == 0

    def test_zero_landed(self):
        assert accuracy(0, 10) == 0

    def test_missing_counts(self):
        assert accuracy(None, None) == 0
        assert accuracy(10, None) == 0
        assert accuracy(None, 10) == 0

    def test_half(self):
        assert accuracy(50, 100) == 50

    def test_rounds_half_up(self):
        assert accuracy(1, 8) == 13  # 12.5
        assert accuracy(1, 3) == 33
        assert accuracy(2, 3) == 67

    def test_precomputed_preferred(self):
        assert accuracy(50, 100, precomputed=61) == 61

    def test_clamped(self):
        assert accuracy(12, 10) == 100

    def test_precomputed_clamped(self):
        assert accuracy(None, None, precomputed=150) == 100
        assert accuracy(5, 10, precomputed=-3) == 0
        assert accuracy(5, 10, precomputed=0) == 0

    def test_fighter_striking(self):
        fighter = Fighter(fighter_id="f1", name="A", sig_strikes_landed=50, sig_strikes_attempted=100)
        assert striking_accuracy(fighter) == 50

    def test_fighter_takedowns(self):
        fighter = Fighter(fighter_id="f1", name="A", takedowns_landed=3, takedowns_attempted=4)
        assert takedown_accuracy(fighter) == 75
        fighter = Fighter(fighter_id="f2", name="B", takedown_accuracy=40)
        assert takedown_accuracy(fighter) == 40


class TestProfile:
    """Test fighter profile summaries."""

    def test_build_profile(self):
        fighter = Fighter(
            fighter_id="f1",
            name="Test Fighter",
            record="22-6-0",
            sig_strikes_landed=50,
            sig_strikes_attempted=100,
        )
        records = [_record(win_ko=10, win_sub=4, win_decision=8)]
        profile = build_profile(fighter, records)

        assert profile.record == RecordCounts(22, 6, 0)
        assert profile.total_fights == 28
        assert profile.win_methods == MethodTotals(ko_tko=10, submissions=4, decisions=8)
        assert profile.striking_accuracy == 50
        assert profile.takedown_accuracy == 0

    def test_no_records_means_unknown_methods(self):
        fighter = Fighter(fighter_id="f1", name="Test Fighter", record="5-0-0")
        profile = build_profile(fighter, [])
        assert profile.win_methods is None
        assert profile.loss_methods is None
        assert profile.record.wins == 5
