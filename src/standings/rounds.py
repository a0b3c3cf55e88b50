"""Average rounds played, split by number of participants."""

import logging
from typing import Dict, List

from src.snapshot.models import RecordSnapshot
from src.standings.config import RATE_PLACES, ROUNDS_BUCKETS
from src.standings.models import RoundsSummary
from src.standings.rounding import mean

logger = logging.getLogger(__name__)


def compute_avg_rounds(snapshot: RecordSnapshot) -> RoundsSummary:
    """Mean ``played_rounds`` for 3- and 4-player matches.

    Matches without a recorded round count are left out entirely (they
    are not counted as zero). Matches of any other size are ignored. A
    bucket with no matches is reported as None.
    """
    rounds: Dict[str, List[int]] = {label: [] for label in ROUNDS_BUCKETS}
    size_to_label = {size: label for label, size in ROUNDS_BUCKETS.items()}

    skipped = 0
    for match_id, results in snapshot.results_by_match().items():
        match = snapshot.get_match(match_id)
        if match is None or match.played_rounds is None:
            skipped += 1
            continue
        label = size_to_label.get(len(results))
        if label is not None:
            rounds[label].append(match.played_rounds)

    if skipped:
        logger.debug("Skipped %d matches without played rounds", skipped)

    return RoundsSummary(**{
        label: (mean(values, RATE_PLACES) if values else None)
        for label, values in rounds.items()
    })
