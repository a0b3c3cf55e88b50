"""Reading of snapshot exports produced by the record store.

An export is a single JSON document holding every table for one group:
- ``players``, ``leaders``, ``games``, ``expansions``: lookup tables (id + name)
- ``matches``: one row per play session
- ``results``: one row per player per match

Each table is loaded into a pandas DataFrame with a fixed set of columns,
so downstream cleaning never has to guess at missing keys.
"""

import json
import logging
from pathlib import Path
from typing import Dict

import pandas as pd

from src.snapshot.config import EXPORT_COLUMNS, REQUIRED_TABLES

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """Raised when a snapshot export cannot be read."""


class SnapshotIngester:
    """Reads a group's snapshot export into per-table DataFrames."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load_document(self) -> dict:
        """Load and sanity-check the raw JSON document."""
        if not self.path.exists():
            raise FileNotFoundError(f"Snapshot export not found: {self.path}")

        with open(self.path, "r", encoding="utf-8") as f:
            document = json.load(f)

        if not isinstance(document, dict):
            raise ValueError(
                f"Snapshot export must be a JSON object, got {type(document).__name__}"
            )

        missing = REQUIRED_TABLES - document.keys()
        if missing:
            raise ValueError(f"Snapshot export missing required tables: {sorted(missing)}")

        return document

    @staticmethod
    def _to_frame(rows, table: str) -> pd.DataFrame:
        """Build a DataFrame for *table* with every expected column present.

        Values are kept as exported (object dtype): an integer ID column
        with a null in it must not be widened to float.
        """
        columns = EXPORT_COLUMNS[table]
        df = pd.DataFrame(rows or [], dtype=object)
        for col in columns:
            if col not in df.columns:
                df[col] = pd.Series([None] * len(df), index=df.index, dtype=object)
        return df[columns]

    def read_group_id(self) -> str:
        """Return the group ID recorded in the export (empty if absent)."""
        document = self._load_document()
        return str(document.get("group_id") or "")

    def read_all(self) -> Dict[str, pd.DataFrame]:
        """Read every table of the export.

        Returns:
            dict with keys: 'players', 'leaders', 'games', 'matches', 'results'

        Raises:
            IngestionError: if the export cannot be read or is malformed.
        """
        try:
            document = self._load_document()
            tables = {
                table: self._to_frame(document.get(table), table)
                for table in EXPORT_COLUMNS
            }
        except Exception as e:
            raise IngestionError(f"Failed to read snapshot export {self.path}: {e}") from e

        logger.info(
            "Loaded snapshot %s: %d matches, %d results, %d players, %d leaders",
            self.path.name,
            len(tables["matches"]), len(tables["results"]),
            len(tables["players"]), len(tables["leaders"]),
        )
        return tables
