"""Placement distributions - how often each player finishes 1st, 2nd, ..."""

import logging
from collections import Counter
from typing import Dict, Iterable, Optional

from src.snapshot.models import RecordSnapshot
from src.standings.config import AVG_PLACEMENT_PLACES, RATE_PLACES
from src.standings.models import PlacementDistribution
from src.standings.rounding import percentage, round_half_up
from src.standings.standings import select_players
from src.standings.winner import rank_match

logger = logging.getLogger(__name__)


def compute_placements(
    snapshot: RecordSnapshot,
    players: Optional[Iterable[str]] = None,
) -> Dict[str, PlacementDistribution]:
    """Compute each player's placement distribution.

    Every match is ranked with the full tie-break cascade, so ranks are
    ``1..N`` without gaps or shared places.

    Returns:
        Dict mapping player ID to PlacementDistribution, in first-appearance
        order. ``percentages`` maps rank to percent of that player's games.
    """
    rank_counts: Dict[str, Counter] = {}
    for results in snapshot.results_by_match().values():
        for rank, result in enumerate(rank_match(results), start=1):
            rank_counts.setdefault(result.player_id, Counter())[rank] += 1

    distributions: Dict[str, PlacementDistribution] = {}
    for pid in select_players(snapshot, players):
        counts = rank_counts[pid]
        total_games = sum(counts.values())
        percentages = {
            rank: percentage(counts[rank], total_games, RATE_PLACES)
            for rank in sorted(counts)
        }
        average = sum(rank * pct / 100 for rank, pct in percentages.items())
        distributions[pid] = PlacementDistribution(
            player_id=pid,
            name=snapshot.player_name(pid),
            total_games=total_games,
            percentages=percentages,
            average_placement=round_half_up(average, AVG_PLACEMENT_PLACES),
        )

    logger.info("Computed placements for %d players", len(distributions))
    return distributions
