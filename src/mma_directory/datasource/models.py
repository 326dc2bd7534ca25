"""Data models for MMA directory rows."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional


class FightResult(Enum):
    """Per-side result of a fight."""

    WIN = "W"
    LOSS = "L"
    DRAW = "D"
    NO_CONTEST = "NC"


class FightType(Enum):
    """Position of a bout on the card."""

    MAIN_EVENT = "main event"
    UNDERCARD = "undercard"


class Movement(Enum):
    """Ranking change relative to the previous period."""

    UP = "up"
    DOWN = "down"
    NONE = "none"

    @classmethod
    def from_ranks(cls, rank: Optional[int], previous_rank: Optional[int]) -> "Movement":
        """Derive movement from the current and previous rank (lower is better)."""
        if rank is None or previous_rank is None or previous_rank == rank:
            return cls.NONE
        return cls.UP if rank < previous_rank else cls.DOWN


@dataclass
class Fighter:
    """Fighter profile."""

    fighter_id: str
    name: str
    nickname: Optional[str] = None
    date_of_birth: Optional[date] = None
    height: Optional[str] = None  # 5'11"
    reach: Optional[str] = None  # 74"
    weight_class: Optional[str] = None
    age: Optional[int] = None
    record: Optional[str] = None  # "22-6-0" or "22-6-0, 1 NC"
    country: Optional[str] = None
    affiliation: Optional[str] = None
    organization: Optional[str] = None
    status: Optional[str] = None  # Active, Inactive, Retired, Champion
    current_streak: Optional[str] = None
    last_fight_date: Optional[date] = None
    profile_img_url: Optional[str] = None
    small_img_url: Optional[str] = None
    sig_strikes_landed: Optional[int] = None
    sig_strikes_attempted: Optional[int] = None
    sig_strike_accuracy: Optional[int] = None  # Percentage supplied by the source
    takedowns_landed: Optional[int] = None
    takedowns_attempted: Optional[int] = None
    takedown_accuracy: Optional[int] = None

    @property
    def is_champion(self) -> bool:
        return self.status == "Champion"


@dataclass
class Fight:
    """A single bout between two fighters."""

    fight_id: str
    event_id: Optional[str]
    fighter1_id: str
    fighter2_id: str
    result_fighter1: Optional[FightResult] = None
    result_fighter2: Optional[FightResult] = None
    finish_by: Optional[str] = None  # KO/TKO, Submission, Decision
    details: Optional[str] = None  # Punches, Rear-Naked Choke, Unanimous
    year: Optional[int] = None
    month_day: Optional[str] = None  # "March 29"
    fight_type: FightType = FightType.UNDERCARD
    fighter1: Optional[Fighter] = None
    fighter2: Optional[Fighter] = None

    @property
    def is_main_event(self) -> bool:
        return self.fight_type is FightType.MAIN_EVENT

    @property
    def fight_date(self) -> Optional[date]:
        """Date assembled from the year and "Month Day" columns."""
        if not self.year or not self.month_day:
            return None
        try:
            return datetime.strptime(f"{self.month_day.strip()} {self.year}", "%B %d %Y").date()
        except ValueError:
            pass
        try:
            return datetime.strptime(f"{self.month_day.strip()} {self.year}", "%b %d %Y").date()
        except ValueError:
            return None

    def corner_of(self, fighter_id: str) -> Optional[str]:
        """Return "fighter_1" or "fighter_2" for the given fighter."""
        if self.fighter1_id == fighter_id:
            return "fighter_1"
        if self.fighter2_id == fighter_id:
            return "fighter_2"
        return None

    def opponent_id(self, fighter_id: str) -> Optional[str]:
        corner = self.corner_of(fighter_id)
        if corner == "fighter_1":
            return self.fighter2_id
        if corner == "fighter_2":
            return self.fighter1_id
        return None

    def opponent(self, fighter_id: str) -> Optional[Fighter]:
        corner = self.corner_of(fighter_id)
        if corner == "fighter_1":
            return self.fighter2
        if corner == "fighter_2":
            return self.fighter1
        return None

    def result_for(self, fighter_id: str) -> Optional[FightResult]:
        corner = self.corner_of(fighter_id)
        if corner == "fighter_1":
            return self.result_fighter1
        if corner == "fighter_2":
            return self.result_fighter2
        return None


@dataclass
class Event:
    """An MMA event."""

    event_id: str
    name: str
    start: Optional[datetime] = None
    venue: Optional[str] = None
    location: Optional[str] = None
    promotion: Optional[str] = None
    broadcast: Optional[str] = None
    mma_bouts: Optional[str] = None
    img_url: Optional[str] = None
    fights: list[Fight] = field(default_factory=list)


@dataclass
class FighterRecord:
    """A fighter's record within one promotion over a date range."""

    record_id: str
    fighter_id: str
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    promotion: Optional[str] = None
    win: int = 0
    loss: int = 0
    draw: int = 0
    no_contest: int = 0
    # Method breakdown
    win_ko: int = 0
    win_sub: int = 0
    win_decision: int = 0
    win_dq: int = 0
    loss_ko: int = 0
    loss_sub: int = 0
    loss_decision: int = 0
    loss_dq: int = 0


@dataclass
class RankingEntry:
    """A fighter's place in one organization's division."""

    fighter: Fighter
    organization: str
    weight_class: str
    rank: Optional[int] = 0  # 0 is the champion, None is unranked
    movement: Movement = Movement.NONE
    ranking_points: Optional[int] = None
    previous_rank: Optional[int] = None

    @property
    def is_champion(self) -> bool:
        return self.rank == 0
