"""Data models."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass
class RankedAthlete:
    name: str
    rank: str  # as displayed, e.g. "1" or "T12"
    profile_url: str
    display_name: str
    gender: str  # men / women

    @property
    def key(self) -> str:
        return f"{self.name} ({self.rank})"


class StandingKind(str, Enum):
    NOT_PLAYING = "not playing"
    ADVANCED = "advanced"
    OUT = "out"
    WINNER = "winner"


@dataclass(frozen=True)
class Standing:
    """Current tournament standing of one athlete.

    Only ``ADVANCED`` carries a payload: the name of the round the athlete
    advanced to.
    """

    kind: StandingKind
    round_name: str = ""

    @classmethod
    def not_playing(cls) -> "Standing":
        return cls(StandingKind.NOT_PLAYING)

    @classmethod
    def advanced(cls, round_name: str) -> "Standing":
        return cls(StandingKind.ADVANCED, round_name)

    @classmethod
    def out(cls) -> "Standing":
        return cls(StandingKind.OUT)

    @classmethod
    def winner(cls) -> "Standing":
        return cls(StandingKind.WINNER)

    @property
    def is_playing(self) -> bool:
        return self.kind is not StandingKind.NOT_PLAYING

    def __str__(self) -> str:
        if self.kind is StandingKind.ADVANCED:
            return f"advanced to {self.round_name}"
        return self.kind.value


@dataclass
class PlayerStats:
    name: str
    ranking: str  # "Current ranking: <rank>"
    titles: str
    standing: Standing
    current_tournament: str = ""
    latest_match_result: str = ""
    upcoming_match: str = ""
    degraded: bool = False


StatsMap = dict[str, PlayerStats]


@dataclass
class AggregateResult:
    stats: StatsMap
    skipped: int = 0


@dataclass
class ScheduleEntry:
    players: list[str]
    summary: str


@dataclass
class CycleResult:
    stats: StatsMap
    choices: list[str] = field(default_factory=list)
    digest: str = ""
    skipped: int = 0
