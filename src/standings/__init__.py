from src.standings.dashboard import build_dashboard
from src.standings.leaders import compute_global_leader_stats, compute_leader_stats
from src.standings.models import (
    LeaderStat,
    MatchCounts,
    MatchSummary,
    Placement,
    PlacementDistribution,
    PlayerStat,
    PlayerTotals,
    RoundsSummary,
    TimeSeries,
    TimeSeriesPoint,
)
from src.standings.overview import (
    compute_match_counts,
    compute_player_totals,
    match_history,
)
from src.standings.placements import compute_placements
from src.standings.rounds import compute_avg_rounds
from src.standings.standings import compute_standings
from src.standings.time_series import compute_time_series
from src.standings.winner import EmptyMatchError, rank_match, resolve_winner

__all__ = [
    "EmptyMatchError",
    "LeaderStat",
    "MatchCounts",
    "MatchSummary",
    "Placement",
    "PlacementDistribution",
    "PlayerStat",
    "PlayerTotals",
    "RoundsSummary",
    "TimeSeries",
    "TimeSeriesPoint",
    "build_dashboard",
    "compute_avg_rounds",
    "compute_global_leader_stats",
    "compute_leader_stats",
    "compute_match_counts",
    "compute_placements",
    "compute_player_totals",
    "compute_standings",
    "compute_time_series",
    "match_history",
    "rank_match",
    "resolve_winner",
]
