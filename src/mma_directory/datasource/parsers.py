"""Row parsers for data source responses."""

import re
from datetime import date, datetime, timezone
from typing import Any, Optional

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


def _parse_str(value: Any) -> Optional[str]:
    """Strip strings and collapse blanks to None."""
    if value is None:
        return None
    text = str(value).strip()
    if not text or text == "--":
        return None
    return text


def _parse_int(value: Any) -> Optional[int]:
    """Parse integer-ish values like 12, "12", "12.0" or "12 fights"."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    match = re.match(r"\s*(-?\d+)", str(value))
    if match:
        return int(match.group(1))
    return None


def _parse_count(value: Any) -> int:
    """Parse a counter column, defaulting to 0."""
    parsed = _parse_int(value)
    return parsed if parsed is not None and parsed > 0 else 0


def _parse_date(value: Any) -> Optional[date]:
    """Parse ISO dates such as '1990-05-15' or full timestamps."""
    text = _parse_str(value)
    if not text:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def _parse_datetime(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    text = _parse_str(value)
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_fight_result(value: Any) -> Optional[FightResult]:
    """Parse 'W', 'L', 'D' or 'NC' (case-insensitive)."""
    text = _parse_str(value)
    if not text:
        return None
    try:
        return FightResult(text.upper())
    except ValueError:
        return None


def parse_fight_type(value: Any) -> FightType:
    """Normalise 'Main Event', 'main_event' or 'MainEvent' to the main-event tag."""
    text = _parse_str(value)
    if not text:
        return FightType.UNDERCARD
    normalized = re.sub(r"(?<=[a-z])(?=[A-Z])", " ", text)
    normalized = re.sub(r"[\s_\-]+", " ", normalized).strip().lower()
    if normalized == FightType.MAIN_EVENT.value:
        return FightType.MAIN_EVENT
    return FightType.UNDERCARD


def parse_movement(value: Any) -> Optional[Movement]:
    text = _parse_str(value)
    if not text:
        return None
    try:
        return Movement(text.lower())
    except ValueError:
        return None


# -----------------------------------------------------------------------------
# Row Parsers
# -----------------------------------------------------------------------------


def parse_fighter(row: dict) -> Fighter:
    """Build a Fighter from a `fighters` row (or an embedded sub-object)."""
    return Fighter(
        fighter_id=str(row.get("id", "")),
        name=_parse_str(row.get("name")) or "",
        nickname=_parse_str(row.get("nickname")),
        date_of_birth=_parse_date(row.get("date_of_birth")),
        height=_parse_str(row.get("height")),
        reach=_parse_str(row.get("reach")),
        weight_class=_parse_str(row.get("weight_class")),
        age=_parse_int(row.get("age")),
        record=_parse_str(row.get("pro_mma_record")),
        country=_parse_str(row.get("born")),
        affiliation=_parse_str(row.get("affiliation")),
        organization=_parse_str(row.get("organization")),
        status=_parse_str(row.get("status")),
        current_streak=_parse_str(row.get("current_mma_streak")),
        last_fight_date=_parse_date(row.get("last_fight_date")),
        profile_img_url=_parse_str(row.get("profile_img_url")),
        small_img_url=_parse_str(row.get("small_img_url")),
        sig_strikes_landed=_parse_int(row.get("significant_strikes_landed")),
        sig_strikes_attempted=_parse_int(row.get("significant_strikes_attempted")),
        sig_strike_accuracy=_parse_int(row.get("significant_strike_accuracy")),
        takedowns_landed=_parse_int(row.get("takedowns_landed")),
        takedowns_attempted=_parse_int(row.get("takedowns_attempted")),
        takedown_accuracy=_parse_int(row.get("takedown_accuracy")),
    )


def parse_fight(row: dict) -> Fight:
    """Build a Fight from a `fights` row, including embedded fighters."""
    fighter1 = row.get("fighter1")
    fighter2 = row.get("fighter2")
    event_id = row.get("id_event")
    return Fight(
        fight_id=str(row.get("id", "")),
        event_id=str(event_id) if event_id is not None else None,
        fighter1_id=str(row.get("id_fighter_1", "")),
        fighter2_id=str(row.get("id_fighter_2", "")),
        result_fighter1=parse_fight_result(row.get("result_fighter_1")),
        result_fighter2=parse_fight_result(row.get("result_fighter_2")),
        finish_by=_parse_str(row.get("finish_by")),
        details=_parse_str(row.get("details")),
        year=_parse_int(row.get("year")),
        month_day=_parse_str(row.get("month_day")),
        fight_type=parse_fight_type(row.get("fight_type")),
        fighter1=parse_fighter(fighter1) if isinstance(fighter1, dict) else None,
        fighter2=parse_fighter(fighter2) if isinstance(fighter2, dict) else None,
    )


def parse_event(row: dict) -> Event:
    """Build an Event from an `events` row."""
    fights = row.get("fights")
    return Event(
        event_id=str(row.get("id", "")),
        name=_parse_str(row.get("name")) or "",
        start=_parse_datetime(row.get("datetime")),
        venue=_parse_str(row.get("venue")),
        location=_parse_str(row.get("location")),
        promotion=_parse_str(row.get("promotion")),
        broadcast=_parse_str(row.get("broadcast")),
        mma_bouts=_parse_str(row.get("mma_bouts")),
        img_url=_parse_str(row.get("img_url")),
        fights=[parse_fight(f) for f in fights] if isinstance(fights, list) else [],
    )


def parse_fighter_record(row: dict) -> FighterRecord:
    """Build a FighterRecord from a `records_by_promotion` row."""
    return FighterRecord(
        record_id=str(row.get("id", "")),
        fighter_id=str(row.get("id_fighter", "")),
        date_from=_parse_str(row.get("from")),
        date_to=_parse_str(row.get("to")),
        promotion=_parse_str(row.get("promotion")),
        win=_parse_count(row.get("win")),
        loss=_parse_count(row.get("loss")),
        draw=_parse_count(row.get("draw")),
        no_contest=_parse_count(row.get("no_contest")),
        win_ko=_parse_count(row.get("win_ko")),
        win_sub=_parse_count(row.get("win_sub")),
        win_decision=_parse_count(row.get("win_decision")),
        win_dq=_parse_count(row.get("win_dq")),
        loss_ko=_parse_count(row.get("loss_ko")),
        loss_sub=_parse_count(row.get("loss_sub")),
        loss_decision=_parse_count(row.get("loss_decision")),
        loss_dq=_parse_count(row.get("loss_dq")),
    )


def parse_ranking_entry(row: dict) -> RankingEntry:
    """
    Build a RankingEntry from a `rankings` row.

    The fighter comes from the embedded `fighter` sub-object when present,
    otherwise a bare Fighter is made from `id_fighter`. When the row has no
    movement column it is derived from `previous_rank`. A missing or negative
    rank leaves the fighter unranked.
    """
    embedded = row.get("fighter")
    if isinstance(embedded, dict):
        fighter = parse_fighter(embedded)
    else:
        fighter = Fighter(fighter_id=str(row.get("id_fighter", "")), name="")

    rank = _parse_int(row.get("rank"))
    if rank is not None and rank < 0:
        rank = None
    previous_rank = _parse_int(row.get("previous_rank"))
    movement = parse_movement(row.get("movement"))
    if movement is None:
        movement = Movement.from_ranks(rank, previous_rank)

    weight_class = _parse_str(row.get("weight_class")) or fighter.weight_class or "Unknown"
    return RankingEntry(
        fighter=fighter,
        organization=_parse_str(row.get("organization")) or fighter.organization or "Unknown",
        weight_class=weight_class,
        rank=rank,
        movement=movement,
        ranking_points=_parse_int(row.get("ranking_points")),
        previous_rank=previous_rank,
    )
