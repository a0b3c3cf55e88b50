"""One-shot computation of every dashboard figure for a snapshot."""

import dataclasses
import logging
from datetime import date
from typing import Iterable, Optional

from src.snapshot.models import RecordSnapshot
from src.standings.config import MODE_MOST_USED
from src.standings.leaders import compute_global_leader_stats, compute_leader_stats
from src.standings.overview import (
    compute_match_counts,
    compute_player_totals,
    match_history,
)
from src.standings.placements import compute_placements
from src.standings.rounds import compute_avg_rounds
from src.standings.standings import compute_standings, select_players
from src.standings.time_series import compute_time_series

logger = logging.getLogger(__name__)


def to_jsonable(value):
    """Convert engine output (dataclasses, dates, int keys) to plain JSON types."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: to_jsonable(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def build_dashboard(
    snapshot: RecordSnapshot,
    players: Optional[Iterable[str]] = None,
    leader_mode: str = MODE_MOST_USED,
    global_leader_mode: str = MODE_MOST_USED,
    show_all_leaders: bool = False,
) -> dict:
    """Compute every figure over one snapshot.

    Args:
        snapshot: Group-scoped record snapshot.
        players: Player IDs shown in the per-player sections
            (default: every player with results).
        leader_mode: Sort mode of the per-player leader tables.
        global_leader_mode: Sort mode of the group leader table.
        show_all_leaders: Return full leader tables instead of the top rows.

    Returns:
        JSON-serializable dict. Either every section is computed or the
        error propagates.
    """
    players = None if players is None else list(players)
    shown = select_players(snapshot, players)
    limit_kwargs = {"limit": None} if show_all_leaders else {}

    series = compute_time_series(snapshot, players)
    dashboard = {
        "group_id": snapshot.group_id,
        "match_counts": compute_match_counts(snapshot),
        "player_totals": {
            pid: compute_player_totals(snapshot, pid) for pid in shown
        },
        "standings": compute_standings(snapshot, players),
        "winrate_over_time": series.winrate,
        "avg_score_over_time": series.avg_score,
        "placements": compute_placements(snapshot, players),
        "leaders_per_player": {
            pid: compute_leader_stats(snapshot, pid, leader_mode, **limit_kwargs)
            for pid in shown
        },
        "leaders_global": compute_global_leader_stats(
            snapshot, global_leader_mode, **limit_kwargs
        ),
        "avg_rounds": compute_avg_rounds(snapshot),
        "matches": match_history(snapshot),
    }

    logger.info(
        "Built dashboard for group %s: %d players shown, %d matches",
        snapshot.group_id or "-", len(shown), len(snapshot.matches),
    )
    return to_jsonable(dashboard)
