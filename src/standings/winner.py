"""Match winner resolution via the score/spice/solari/water cascade."""

import logging
from typing import Iterable, List, Tuple

from src.snapshot.models import Result
from src.standings.config import TIE_BREAK_KEYS

logger = logging.getLogger(__name__)


class EmptyMatchError(Exception):
    """Raised when a match without results reaches the resolver."""


def tie_break_key(result: Result) -> Tuple[int, ...]:
    """Sort key for the tie-break cascade (compare descending)."""
    return tuple(getattr(result, key) for key in TIE_BREAK_KEYS)


def rank_match(results: Iterable[Result]) -> List[Result]:
    """Order one match's results from first place to last.

    Results equal on every cascade key keep their input order, so the
    ranking is a strict total order and repeated calls agree.

    Raises:
        EmptyMatchError: if *results* is empty.
    """
    results = list(results)
    if not results:
        raise EmptyMatchError("Cannot rank a match without results")
    # sorted() stays stable with reverse=True
    return sorted(results, key=tie_break_key, reverse=True)


def resolve_winner(results: Iterable[Result]) -> Result:
    """Return the winning result of one match.

    Raises:
        EmptyMatchError: if *results* is empty.
    """
    ranked = rank_match(results)
    if len(ranked) > 1 and tie_break_key(ranked[0]) == tie_break_key(ranked[1]):
        logger.debug(
            "Match %s fully tied at the top; keeping first recorded result %s",
            ranked[0].match_id, ranked[0].result_id,
        )
    return ranked[0]
