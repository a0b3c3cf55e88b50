"""Cumulative win rate and average score over time.

One point per distinct match date. Each point is computed over every
result dated on or before it, so later points always cover a superset of
the matches behind earlier ones.
"""

import logging
from typing import Iterable, List, Optional

from src.snapshot.models import RecordSnapshot
from src.standings.models import TimeSeries, TimeSeriesPoint
from src.standings.standings import player_lines, select_players

logger = logging.getLogger(__name__)


def compute_time_series(
    snapshot: RecordSnapshot,
    players: Optional[Iterable[str]] = None,
) -> TimeSeries:
    """Build the win rate and average score series.

    Args:
        snapshot: Group-scoped record snapshot.
        players: Optional player IDs to include (default: all with results).

    Returns:
        TimeSeries whose two series share ``dates``. A player without any
        results as of a date has no value at that point.
    """
    wanted = None if players is None else set(players)
    dates = snapshot.match_dates()

    winrate: List[TimeSeriesPoint] = []
    avg_score: List[TimeSeriesPoint] = []
    for cutoff in dates:
        to_date = snapshot.until(cutoff)
        lines = player_lines(to_date, select_players(to_date, wanted))
        winrate.append(TimeSeriesPoint(
            date=cutoff,
            values={pid: line.winrate for pid, line in lines.items()},
        ))
        avg_score.append(TimeSeriesPoint(
            date=cutoff,
            values={pid: line.avg_score for pid, line in lines.items()},
        ))
        logger.debug(
            "Time series point %s: %d results, %d players",
            cutoff.isoformat(), len(to_date.results), len(lines),
        )

    logger.info("Computed time series with %d points", len(dates))
    return TimeSeries(dates=dates, winrate=winrate, avg_score=avg_score)
