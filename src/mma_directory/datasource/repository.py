"""Read operations used by the directory pages."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Optional

from .client import DataSourceClient, DataSourceError
from .models import Event, Fight, Fighter, FighterRecord, RankingEntry
from .parsers import (
    parse_event,
    parse_fight,
    parse_fighter,
    parse_fighter_record,
    parse_ranking_entry,
)

logger = logging.getLogger(__name__)

# Fighter columns embedded in fight rows
FIGHTER_SUMMARY_COLUMNS = "id,name,nickname,small_img_url,pro_mma_record,weight_class"

FIGHTS_WITH_FIGHTERS = (
    f"*,fighter1:id_fighter_1({FIGHTER_SUMMARY_COLUMNS}),"
    f"fighter2:id_fighter_2({FIGHTER_SUMMARY_COLUMNS})"
)

RANKINGS_WITH_FIGHTER = "*,fighter:id_fighter(*)"


@dataclass
class EventPage:
    """Everything the event details page needs."""

    event: Optional[Event] = None
    fights: list[Fight] = field(default_factory=list)


@dataclass
class FighterPage:
    """Everything the fighter profile page needs."""

    fighter: Optional[Fighter] = None
    records: list[FighterRecord] = field(default_factory=list)
    fights: list[Fight] = field(default_factory=list)
    opponents: dict[str, Fighter] = field(default_factory=dict)


class DataRepository:
    """
    Fetches rows and turns them into models.

    A failed read is logged and yields the empty default (None or []),
    which pages render as "no data".
    """

    def __init__(self, client: DataSourceClient, max_workers: int = 4):
        """Initialize repository with a data source client."""
        self.client = client
        self.max_workers = max_workers

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def get_event(self, event_id: str) -> Optional[Event]:
        """Load a single event."""
        try:
            row = self.client.select("events", filters=[("id", "eq", event_id)], limit=1, single=True)
        except DataSourceError as e:
            logger.error(f"Failed to fetch event {event_id}: {e}")
            return None
        return parse_event(row)

    def get_events(self, organization: Optional[str] = None) -> list[Event]:
        """Load all events, soonest first."""
        filters = [("promotion", "eq", organization)] if organization else []
        try:
            rows = self.client.select("events", filters=filters, order=("datetime", True))
        except DataSourceError as e:
            logger.error(f"Failed to fetch events: {e}")
            return []
        events = [parse_event(row) for row in rows]
        logger.debug(f"Fetched {len(events)} events")
        return events

    def get_event_fights(self, event_id: str) -> list[Fight]:
        """Fights of an event with both fighters embedded."""
        try:
            rows = self.client.select(
                "fights",
                columns=FIGHTS_WITH_FIGHTERS,
                filters=[("id_event", "eq", event_id)],
            )
        except DataSourceError as e:
            logger.error(f"Failed to fetch fights for event {event_id}: {e}")
            return []
        return [parse_fight(row) for row in rows]

    def load_event_page(self, event_id: str) -> EventPage:
        """Fetch the event and its fights concurrently."""
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            event_future = pool.submit(self.get_event, event_id)
            fights_future = pool.submit(self.get_event_fights, event_id)
            event = event_future.result()
            fights = fights_future.result()

        if event is not None:
            event.fights = fights
        return EventPage(event=event, fights=fights)

    # -------------------------------------------------------------------------
    # Fighters
    # -------------------------------------------------------------------------

    def get_fighter(self, fighter_id: str) -> Optional[Fighter]:
        """Load a single fighter."""
        try:
            row = self.client.select("fighters", filters=[("id", "eq", fighter_id)], limit=1, single=True)
        except DataSourceError as e:
            logger.error(f"Failed to fetch fighter {fighter_id}: {e}")
            return None
        return parse_fighter(row)

    def get_fighters(self) -> list[Fighter]:
        """Load all fighters ordered by name."""
        try:
            rows = self.client.select("fighters", order=("name", True))
        except DataSourceError as e:
            logger.error(f"Failed to fetch fighters: {e}")
            return []
        fighters = [parse_fighter(row) for row in rows]
        logger.debug(f"Fetched {len(fighters)} fighters")
        return fighters

    def get_fighters_by_ids(self, fighter_ids: list[str]) -> dict[str, Fighter]:
        """Load several fighters keyed by id."""
        if not fighter_ids:
            return {}
        try:
            rows = self.client.select("fighters", filters=[("id", "in", fighter_ids)])
        except DataSourceError as e:
            logger.error(f"Failed to fetch {len(fighter_ids)} fighters: {e}")
            return {}
        fighters = [parse_fighter(row) for row in rows]
        return {f.fighter_id: f for f in fighters}

    def get_fighter_records(self, fighter_id: str) -> list[FighterRecord]:
        """Per-promotion record slices of a fighter."""
        try:
            rows = self.client.select("records_by_promotion", filters=[("id_fighter", "eq", fighter_id)])
        except DataSourceError as e:
            logger.error(f"Failed to fetch records for fighter {fighter_id}: {e}")
            return []
        return [parse_fighter_record(row) for row in rows]

    def get_fighter_fights(self, fighter_id: str) -> list[Fight]:
        """Fights in either corner, with both fighters embedded."""
        try:
            rows = self.client.select(
                "fights",
                columns=FIGHTS_WITH_FIGHTERS,
                any_of=[("id_fighter_1", "eq", fighter_id), ("id_fighter_2", "eq", fighter_id)],
            )
        except DataSourceError as e:
            logger.error(f"Failed to fetch fights for fighter {fighter_id}: {e}")
            return []
        return [parse_fight(row) for row in rows]

    def load_fighter_page(self, fighter_id: str) -> FighterPage:
        """
        Fetch a fighter, their promotion records and fights concurrently.

        Opponents missing from the embedded fight rows are fetched in a
        second step.
        """
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            fighter_future = pool.submit(self.get_fighter, fighter_id)
            records_future = pool.submit(self.get_fighter_records, fighter_id)
            fights_future = pool.submit(self.get_fighter_fights, fighter_id)
            fighter = fighter_future.result()
            records = records_future.result()
            fights = fights_future.result()

        missing: dict[str, None] = {}
        for fight in fights:
            opponent_id = fight.opponent_id(fighter_id)
            if opponent_id is not None and fight.opponent(fighter_id) is None:
                missing.setdefault(opponent_id, None)
        opponents = self.get_fighters_by_ids(list(missing))
        return FighterPage(fighter=fighter, records=records, fights=fights, opponents=opponents)

    # -------------------------------------------------------------------------
    # Rankings
    # -------------------------------------------------------------------------

    def get_rankings(self) -> list[RankingEntry]:
        """All ranking rows with their fighters embedded."""
        try:
            rows = self.client.select("rankings", columns=RANKINGS_WITH_FIGHTER, order=("rank", True))
        except DataSourceError as e:
            logger.error(f"Failed to fetch rankings: {e}")
            return []
        entries = [parse_ranking_entry(row) for row in rows]
        logger.debug(f"Fetched {len(entries)} ranking entries")
        return entries
