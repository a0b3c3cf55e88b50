"""Snapshot assembly - turns cleaned tables into a RecordSnapshot."""

import logging
from pathlib import Path
from typing import Dict, List

import pandas as pd

from src.snapshot.cleaning import SnapshotCleaner
from src.snapshot.ingestion import SnapshotIngester
from src.snapshot.models import (
    Expansion,
    Game,
    Leader,
    Match,
    Player,
    RecordSnapshot,
    Result,
)
from src.snapshot.validation import SnapshotValidator

logger = logging.getLogger(__name__)


class SnapshotError(Exception):
    """Raised when a snapshot violates the consistency invariants."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(
            f"Snapshot is inconsistent ({len(self.errors)} problem(s)): "
            + "; ".join(self.errors)
        )


def build_snapshot(group_id: str, tables: Dict[str, pd.DataFrame]) -> RecordSnapshot:
    """Validate cleaned tables and build the immutable snapshot.

    Args:
        group_id: Group the snapshot is scoped to.
        tables: dict from SnapshotCleaner.clean_all().

    Raises:
        SnapshotError: if any consistency check fails.
    """
    errors = SnapshotValidator().validate(tables)
    if errors:
        raise SnapshotError(errors)

    players = tuple(
        Player(player_id=row["id"], name=row["name"])
        for row in tables["players"].to_dict("records")
    )
    leaders = tuple(
        Leader(leader_id=row["id"], name=row["name"])
        for row in tables["leaders"].to_dict("records")
    )
    games = tuple(
        Game(game_id=row["id"], name=row["name"])
        for row in tables["games"].to_dict("records")
    )
    expansions = tuple(
        Expansion(expansion_id=row["id"], name=row["name"])
        for row in tables["expansions"].to_dict("records")
    )
    matches = tuple(
        Match(
            match_id=row["id"],
            date=row["date"],
            game_id=row["game_id"],
            with_expansion=bool(row["with_expansion"]),
            expansion_id=row["expansion_id"],
            with_family_atomic=bool(row["with_family_atomic"]),
            played_rounds=row["played_rounds"],
        )
        for row in tables["matches"].to_dict("records")
    )
    results = tuple(
        Result(
            result_id=row["id"],
            match_id=row["match_id"],
            player_id=row["player_id"],
            leader_id=row["leader_id"],
            score=int(row["score"]),
            spice=int(row["spice"]),
            solari=int(row["solari"]),
            water=int(row["water"]),
        )
        for row in tables["results"].to_dict("records")
    )

    snapshot = RecordSnapshot(
        group_id=group_id,
        matches=matches,
        results=results,
        players=players,
        leaders=leaders,
        games=games,
        expansions=expansions,
    )
    logger.info(
        "Built snapshot for group %s: %d matches, %d results",
        group_id or "-", len(matches), len(results),
    )
    return snapshot


def load_snapshot(path: Path) -> RecordSnapshot:
    """Read, clean, validate and build a snapshot from an export file.

    Raises:
        IngestionError: if the export cannot be read.
        SnapshotError: if the export is inconsistent.
    """
    ingester = SnapshotIngester(path)
    raw = ingester.read_all()
    cleaned = SnapshotCleaner().clean_all(raw)
    group_id = ingester.read_group_id() or Path(path).stem
    return build_snapshot(group_id, cleaned)
