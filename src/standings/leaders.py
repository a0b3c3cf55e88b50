"""Leader usage and performance tables, per player and group-wide."""

import logging
from typing import Dict, List, Optional

from src.snapshot.models import RecordSnapshot
from src.standings.config import (
    GLOBAL_LEADER_LIMIT,
    GLOBAL_LEADER_MODES,
    MODE_BEST_SCORE,
    MODE_MOST_USED,
    PLAYER_LEADER_LIMIT,
    PLAYER_LEADER_MODES,
    RATE_PLACES,
)
from src.standings.models import LeaderStat
from src.standings.rounding import mean, percentage
from src.standings.winner import resolve_winner

logger = logging.getLogger(__name__)


def _check_options(mode: str, valid_modes: set, limit: Optional[int]) -> None:
    if mode not in valid_modes:
        raise ValueError(
            f"Invalid leader mode: {mode!r}. Must be one of: {sorted(valid_modes)}"
        )
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative or None, got {limit}")


def _top(rows: List[LeaderStat], limit: Optional[int]) -> List[LeaderStat]:
    return rows if limit is None else rows[:limit]


def compute_leader_stats(
    snapshot: RecordSnapshot,
    player_id: str,
    mode: str = MODE_MOST_USED,
    limit: Optional[int] = PLAYER_LEADER_LIMIT,
) -> List[LeaderStat]:
    """Leaders one player has used, with usage count and average score.

    Args:
        snapshot: Group-scoped record snapshot.
        player_id: Player whose results are tabulated.
        mode: ``"most_used"`` sorts by count, ``"best_score"`` by average
            score (both descending; ties keep first-use order).
        limit: Maximum rows returned, ``None`` for all.

    Raises:
        ValueError: for an unknown mode or a negative limit.
    """
    _check_options(mode, PLAYER_LEADER_MODES, limit)

    scores: Dict[str, List[int]] = {}
    for result in snapshot.results_for_player(player_id):
        if result.leader_id is None:
            continue
        scores.setdefault(result.leader_id, []).append(result.score)

    rows = [
        LeaderStat(
            leader_id=leader_id,
            name=snapshot.leader_name(leader_id),
            count=len(leader_scores),
            avg_score=mean(leader_scores, RATE_PLACES),
        )
        for leader_id, leader_scores in scores.items()
    ]
    if mode == MODE_BEST_SCORE:
        rows.sort(key=lambda row: row.avg_score, reverse=True)
    else:
        rows.sort(key=lambda row: row.count, reverse=True)

    logger.debug("Player %s used %d distinct leaders", player_id, len(rows))
    return _top(rows, limit)


def compute_global_leader_stats(
    snapshot: RecordSnapshot,
    mode: str = MODE_MOST_USED,
    limit: Optional[int] = GLOBAL_LEADER_LIMIT,
) -> List[LeaderStat]:
    """Group-wide leader table with total uses and win rate.

    A use counts as a win when that result is the resolved winner of its
    match. Leaders that never won have a win rate of 0.0.

    Args:
        snapshot: Group-scoped record snapshot.
        mode: ``"most_used"`` sorts by count, ``"best_winrate"`` by win rate.
        limit: Maximum rows returned, ``None`` for all.

    Raises:
        ValueError: for an unknown mode or a negative limit.
        EmptyMatchError: propagated from the winner resolver.
    """
    _check_options(mode, GLOBAL_LEADER_MODES, limit)

    winning_results = {
        resolve_winner(results).result_id
        for results in snapshot.results_by_match().values()
    }

    uses: Dict[str, int] = {}
    wins: Dict[str, int] = {}
    for result in snapshot.results:
        if result.leader_id is None:
            continue
        uses[result.leader_id] = uses.get(result.leader_id, 0) + 1
        if result.result_id in winning_results:
            wins[result.leader_id] = wins.get(result.leader_id, 0) + 1

    rows = [
        LeaderStat(
            leader_id=leader_id,
            name=snapshot.leader_name(leader_id),
            count=count,
            winrate=percentage(wins.get(leader_id, 0), count, RATE_PLACES),
        )
        for leader_id, count in uses.items()
    ]
    if mode == MODE_MOST_USED:
        rows.sort(key=lambda row: row.count, reverse=True)
    else:
        rows.sort(key=lambda row: row.winrate, reverse=True)

    logger.info("Computed group leader table: %d leaders", len(rows))
    return _top(rows, limit)
