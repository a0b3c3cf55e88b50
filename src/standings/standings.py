"""Per-player standings over a record snapshot.

For every player: games played, matches won (via the tie-break cascade),
average score and win rate. Rates are guarded against zero games and
reported with one decimal.
"""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional

from src.snapshot.models import RecordSnapshot
from src.standings.config import RATE_PLACES
from src.standings.models import PlayerStat
from src.standings.rounding import mean, percentage
from src.standings.winner import resolve_winner

logger = logging.getLogger(__name__)


def select_players(
    snapshot: RecordSnapshot,
    players: Optional[Iterable[str]] = None,
) -> List[str]:
    """Player IDs with results, in first-appearance order.

    When *players* is given, only those IDs are kept.
    """
    ordered = snapshot.player_ids()
    if players is None:
        return ordered
    wanted = set(players)
    return [pid for pid in ordered if pid in wanted]


def count_wins(snapshot: RecordSnapshot) -> Counter:
    """Number of matches won per player ID."""
    return Counter(
        resolve_winner(results).player_id
        for results in snapshot.results_by_match().values()
    )


def player_lines(
    snapshot: RecordSnapshot, player_ids: Iterable[str]
) -> Dict[str, PlayerStat]:
    """Standings lines for *player_ids*; players without results get zeros."""
    wins = count_wins(snapshot)
    scores: Dict[str, List[int]] = {}
    for result in snapshot.results:
        scores.setdefault(result.player_id, []).append(result.score)

    lines: Dict[str, PlayerStat] = {}
    for pid in player_ids:
        player_scores = scores.get(pid, [])
        total_games = len(player_scores)
        player_wins = wins.get(pid, 0)
        lines[pid] = PlayerStat(
            player_id=pid,
            name=snapshot.player_name(pid),
            total_games=total_games,
            wins=player_wins,
            avg_score=mean(player_scores, RATE_PLACES),
            winrate=percentage(player_wins, total_games, RATE_PLACES),
        )
    return lines


def compute_standings(
    snapshot: RecordSnapshot,
    players: Optional[Iterable[str]] = None,
) -> List[PlayerStat]:
    """Compute cumulative standings for every player.

    Args:
        snapshot: Group-scoped record snapshot.
        players: Optional player IDs to report on. Requested players
            without any results are appended with zero totals.

    Returns:
        One PlayerStat per player, ordered by first appearance in the
        results.

    Raises:
        EmptyMatchError: propagated from the winner resolver.
    """
    requested = None if players is None else list(dict.fromkeys(players))
    ordered = select_players(snapshot, requested)
    if requested is not None:
        present = set(ordered)
        ordered += [pid for pid in requested if pid not in present]

    lines = player_lines(snapshot, ordered)
    stats = [lines[pid] for pid in ordered]

    logger.info(
        "Computed standings for %d players over %d results",
        len(stats), len(snapshot.results),
    )
    return stats
