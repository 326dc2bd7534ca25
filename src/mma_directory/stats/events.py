"""Fight card and event schedule derivations."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

from ..datasource.models import Event, Fight


@dataclass
class FightCard:
    """An event's fights split into the main event and the rest."""

    main_event: Optional[Fight] = None
    undercard: list[Fight] = field(default_factory=list)

    @property
    def fight_count(self) -> int:
        return len(self.undercard) + (1 if self.main_event else 0)


@dataclass(frozen=True)
class TimeLeft:
    """Countdown to an event."""

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @property
    def is_over(self) -> bool:
        return not (self.days or self.hours or self.minutes or self.seconds)


def select_main_event(fights: Iterable[Fight]) -> Optional[Fight]:
    """
    First fight tagged as the main event, or None.

    Cards with more than one tagged fight are not rejected; the first wins.
    """
    return next((fight for fight in fights if fight.is_main_event), None)


def build_fight_card(fights: Iterable[Fight]) -> FightCard:
    """
    Split a card once per load.

    The undercard holds every fight except the selected main event, in
    card order.
    """
    fights = list(fights)
    main_event = select_main_event(fights)
    undercard = [fight for fight in fights if fight is not main_event]
    return FightCard(main_event=main_event, undercard=undercard)


def partition_events(
    events: Iterable[Event],
    now: Optional[datetime] = None,
    tz: Optional[str] = None,
) -> tuple[list[Event], list[Event]]:
    """
    Split events into upcoming and past.

    An event is upcoming when it starts on or after today's date, both
    taken in the `tz` display timezone (UTC when None).
    Upcoming events are soonest first, past events most recent first.
    Undated events are left out.

    Returns:
        (upcoming, past)
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    zone = ZoneInfo(tz) if tz else timezone.utc
    today = now.astimezone(zone).date()

    dated = [e for e in events if e.start is not None]
    upcoming = [e for e in dated if e.start.astimezone(zone).date() >= today]
    past = [e for e in dated if e.start.astimezone(zone).date() < today]

    upcoming.sort(key=lambda e: e.start)
    past.sort(key=lambda e: e.start, reverse=True)
    return upcoming, past


def next_event(
    events: Iterable[Event],
    now: Optional[datetime] = None,
    tz: Optional[str] = None,
) -> Optional[Event]:
    """The soonest upcoming event."""
    upcoming, _ = partition_events(events, now, tz)
    return upcoming[0] if upcoming else None


def time_until(target: datetime, now: Optional[datetime] = None) -> TimeLeft:
    """Days/hours/minutes/seconds until `target`; all zero once it has passed."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    if target.tzinfo is None:
        target = target.replace(tzinfo=timezone.utc)

    remaining = int((target - now).total_seconds())
    if remaining <= 0:
        return TimeLeft()

    days, remaining = divmod(remaining, 86400)
    hours, remaining = divmod(remaining, 3600)
    minutes, seconds = divmod(remaining, 60)
    return TimeLeft(days=days, hours=hours, minutes=minutes, seconds=seconds)
