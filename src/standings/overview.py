"""Group overview figures: personal totals, match counts, match history."""

import logging
from typing import Dict, List

from src.snapshot.models import RecordSnapshot
from src.standings.models import MatchCounts, MatchSummary, Placement, PlayerTotals
from src.standings.winner import rank_match

logger = logging.getLogger(__name__)


def compute_player_totals(snapshot: RecordSnapshot, player_id: str) -> PlayerTotals:
    """Matches played and summed counters for one player."""
    results = snapshot.results_for_player(player_id)
    return PlayerTotals(
        player_id=player_id,
        games=len({r.match_id for r in results}),
        score=sum(r.score for r in results),
        spice=sum(r.spice for r in results),
        solari=sum(r.solari for r in results),
        water=sum(r.water for r in results),
    )


def compute_match_counts(snapshot: RecordSnapshot) -> MatchCounts:
    """Total matches and matches per game name (first-appearance order).

    Matches with no game recorded only count towards the total.
    """
    by_game: Dict[str, int] = {}
    for match in snapshot.matches:
        if match.game_id is None:
            continue
        name = snapshot.game_name(match.game_id)
        by_game[name] = by_game.get(name, 0) + 1
    return MatchCounts(total=len(snapshot.matches), by_game=by_game)


def match_history(snapshot: RecordSnapshot) -> List[MatchSummary]:
    """Every match with its ranking, newest first.

    Raises:
        EmptyMatchError: if a match in the snapshot has no results.
    """
    by_match = snapshot.results_by_match()
    history: List[MatchSummary] = []
    for match in sorted(snapshot.matches, key=lambda m: m.date, reverse=True):
        ranked = rank_match(by_match.get(match.match_id, []))
        history.append(MatchSummary(
            match_id=match.match_id,
            date=match.date,
            game=snapshot.game_name(match.game_id),
            expansion=(
                snapshot.expansion_name(match.expansion_id)
                if match.with_expansion else None
            ),
            with_family_atomic=match.with_family_atomic,
            played_rounds=match.played_rounds,
            placements=[
                Placement(
                    rank=rank,
                    player_id=r.player_id,
                    player_name=snapshot.player_name(r.player_id),
                    leader_name=snapshot.leader_name(r.leader_id),
                    score=r.score,
                    spice=r.spice,
                    solari=r.solari,
                    water=r.water,
                )
                for rank, r in enumerate(ranked, start=1)
            ],
        ))

    logger.info("Built match history: %d matches", len(history))
    return history
