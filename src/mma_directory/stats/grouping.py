"""Filtering, sorting and grouping of events and fighters for list views."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from ..datasource.models import Event, Fighter, RankingEntry
from ..formatting import format_month_year
from .record import parse_record

T = TypeVar("T")

UNKNOWN_WEIGHT_CLASS = "Unknown"
UNDATED_BUCKET = "Date TBD"
EMPTY_NAME_BUCKET = "#"

# Facet values meaning "no filter"
_INACTIVE_FACETS = (None, "", "all")


class SortMode(Enum):
    """Sort order of a list view; also decides its buckets."""

    NAME = "name"
    WEIGHT_CLASS = "weight_class"
    RECORD = "record"  # Fighters only
    MONTH = "month"  # Events only


@dataclass
class Listing:
    """
    Ordered items plus their buckets.

    `groups` is empty when the mode does not bucket. A listing built from
    data that has not arrived yet has `loaded=False`, which is different from
    a loaded listing whose filters left nothing.
    """

    items: list = field(default_factory=list)
    groups: dict[str, list] = field(default_factory=dict)
    loaded: bool = True

    @classmethod
    def not_loaded(cls) -> "Listing":
        return cls(loaded=False)

    @property
    def is_empty(self) -> bool:
        return self.loaded and not self.items

    @property
    def is_grouped(self) -> bool:
        return bool(self.groups)


# -----------------------------------------------------------------------------
# Filtering
# -----------------------------------------------------------------------------


def _matches_search(term: str, values: Iterable[Optional[str]]) -> bool:
    """Case-insensitive substring match against any of the values."""
    if not term:
        return True
    needle = term.strip().lower()
    if not needle:
        return True
    return any(needle in value.lower() for value in values if value)


def _facet_matches(selected: Optional[str], actual: Optional[str]) -> bool:
    if selected in _INACTIVE_FACETS:
        return True
    return actual == selected


def filter_fighters(
    fighters: Iterable[Fighter],
    search: str = "",
    weight_class: Optional[str] = None,
    organization: Optional[str] = None,
    status: Optional[str] = None,
) -> list[Fighter]:
    """
    Keep fighters matching the search text and every active facet.

    Search looks at name, nickname and country.
    """
    return [
        f
        for f in fighters
        if _matches_search(search, (f.name, f.nickname, f.country))
        and _facet_matches(weight_class, f.weight_class)
        and _facet_matches(organization, f.organization)
        and _facet_matches(status, f.status)
    ]


def filter_events(
    events: Iterable[Event],
    search: str = "",
    organization: Optional[str] = None,
    month: Optional[str] = None,
    tz: Optional[str] = None,
) -> list[Event]:
    """
    Keep events matching the search text and every active facet.

    Search looks at name, venue and location; `month` is a bucket label
    such as "March 2025", taken in the `tz` display timezone.
    """
    return [
        e
        for e in events
        if _matches_search(search, (e.name, e.venue, e.location))
        and _facet_matches(organization, e.promotion)
        and _facet_matches(month, _month_key(e, tz))
    ]


def filter_rankings(entries: Iterable[RankingEntry], search: str = "") -> list[RankingEntry]:
    """Keep ranking entries whose fighter matches the search text."""
    return [
        e
        for e in entries
        if _matches_search(search, (e.fighter.name, e.fighter.nickname, e.fighter.country))
    ]


# -----------------------------------------------------------------------------
# Keys
# -----------------------------------------------------------------------------


def _name_sort_key(name: str) -> tuple[str, str]:
    return (name.casefold(), name)


def _initial(name: str) -> str:
    return name[:1].upper() or EMPTY_NAME_BUCKET


def _weight_class_key(fighter: Fighter) -> str:
    return fighter.weight_class or UNKNOWN_WEIGHT_CLASS


def _month_key(event: Event, tz: Optional[str] = None) -> str:
    if event.start is None:
        return UNDATED_BUCKET
    return format_month_year(event.start, tz)


def _bucket(items: Sequence[T], key: Callable[[T], str]) -> dict[str, list[T]]:
    """Group items by key; buckets keep first-encountered order."""
    groups: dict[str, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


# -----------------------------------------------------------------------------
# Arranging
# -----------------------------------------------------------------------------


def sort_fighters(fighters: Iterable[Fighter], mode: SortMode) -> list[Fighter]:
    """Order fighters for the given mode; ties keep input order."""
    if mode is SortMode.NAME:
        return sorted(fighters, key=lambda f: _name_sort_key(f.name))
    if mode is SortMode.WEIGHT_CLASS:
        return sorted(fighters, key=_weight_class_key)
    if mode is SortMode.RECORD:
        return sorted(fighters, key=lambda f: -parse_record(f.record).wins)
    raise ValueError(f"Unsupported sort mode for fighters: {mode.value}")


def arrange_fighters(fighters: Optional[Iterable[Fighter]], mode: SortMode) -> Listing:
    """
    Sort fighters and bucket them.

    - name: buckets by uppercased first letter
    - weight_class: buckets by weight class
    - record: most wins first, no buckets

    Args:
        fighters: Filtered fighters, or None if not loaded yet
        mode: Sort mode

    Returns:
        Listing of the arranged fighters
    """
    if fighters is None:
        return Listing.not_loaded()

    ordered = sort_fighters(fighters, mode)
    if mode is SortMode.NAME:
        groups = _bucket(ordered, lambda f: _initial(f.name))
    elif mode is SortMode.WEIGHT_CLASS:
        groups = _bucket(ordered, _weight_class_key)
    else:
        groups = {}
    return Listing(items=ordered, groups=groups)


def arrange_events(
    events: Optional[Iterable[Event]],
    mode: SortMode = SortMode.MONTH,
    tz: Optional[str] = None,
) -> Listing:
    """
    Sort events and bucket them.

    - month: buckets by "Month Year" in the order first seen, events
      chronological inside each bucket (undated events last)
    - name: buckets by uppercased first letter

    Args:
        events: Filtered events, or None if not loaded yet
        mode: MONTH or NAME
        tz: Display timezone for month buckets; UTC when None

    Returns:
        Listing of the arranged events
    """
    if events is None:
        return Listing.not_loaded()

    if mode is SortMode.MONTH:
        groups = _bucket(list(events), lambda e: _month_key(e, tz))
        for key, members in groups.items():
            groups[key] = sorted(members, key=lambda e: (e.start is None, e.start or datetime.min))
        ordered = [e for members in groups.values() for e in members]
        return Listing(items=ordered, groups=groups)

    if mode is SortMode.NAME:
        ordered = sorted(events, key=lambda e: _name_sort_key(e.name))
        return Listing(items=ordered, groups=_bucket(ordered, lambda e: _initial(e.name)))

    raise ValueError(f"Unsupported sort mode for events: {mode.value}")


def month_options(events: Iterable[Event], tz: Optional[str] = None) -> list[str]:
    """Month bucket labels in the order first seen, for the month facet."""
    return list(_bucket(list(events), lambda e: _month_key(e, tz)).keys())
