"""Derived values produced by the standings engine."""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional


@dataclass(frozen=True)
class PlayerStat:
    """Cumulative standings line for one player."""

    player_id: str
    name: str
    total_games: int
    wins: int
    avg_score: float
    winrate: float


@dataclass(frozen=True)
class TimeSeriesPoint:
    """Statistics as of one match date, using all history up to that date.

    Players with no results yet are absent from ``values``.
    """

    date: date
    values: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class TimeSeries:
    """Win rate and average score series sharing one date axis."""

    dates: List[date]
    winrate: List[TimeSeriesPoint]
    avg_score: List[TimeSeriesPoint]


@dataclass(frozen=True)
class PlacementDistribution:
    """How often a player finished at each rank, in percent of their games."""

    player_id: str
    name: str
    total_games: int
    percentages: Dict[int, float]  # 1-based rank -> percentage
    average_placement: float


@dataclass(frozen=True)
class LeaderStat:
    """One row of a leader table.

    ``avg_score`` is filled for per-player tables and ``winrate`` for the
    group-wide table.
    """

    leader_id: str
    name: str
    count: int
    avg_score: Optional[float] = None
    winrate: Optional[float] = None


@dataclass(frozen=True)
class RoundsSummary:
    """Mean rounds played, by participant count. None means no data."""

    three_player: Optional[float]
    four_player: Optional[float]


@dataclass(frozen=True)
class PlayerTotals:
    """Personal totals: matches played and summed counters."""

    player_id: str
    games: int
    score: int
    spice: int
    solari: int
    water: int


@dataclass(frozen=True)
class MatchCounts:
    """Number of matches in the snapshot, overall and per game."""

    total: int
    by_game: Dict[str, int]


@dataclass(frozen=True)
class Placement:
    """A result together with its finishing rank."""

    rank: int
    player_id: str
    player_name: str
    leader_name: Optional[str]
    score: int
    spice: int
    solari: int
    water: int


@dataclass(frozen=True)
class MatchSummary:
    """One match with its full ranking, for the match history."""

    match_id: str
    date: date
    game: Optional[str]
    expansion: Optional[str]
    with_family_atomic: bool
    played_rounds: Optional[int]
    placements: List[Placement]
