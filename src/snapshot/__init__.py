from src.snapshot.builder import SnapshotError, build_snapshot, load_snapshot
from src.snapshot.cleaning import SnapshotCleaner
from src.snapshot.ingestion import IngestionError, SnapshotIngester
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

__all__ = [
    "Expansion",
    "Game",
    "IngestionError",
    "Leader",
    "Match",
    "Player",
    "RecordSnapshot",
    "Result",
    "SnapshotCleaner",
    "SnapshotError",
    "SnapshotIngester",
    "SnapshotValidator",
    "build_snapshot",
    "load_snapshot",
]
