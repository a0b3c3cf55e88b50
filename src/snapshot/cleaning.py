"""Type normalization for snapshot export tables.

- Identifiers are compared as strings (the store may emit integers)
- Match dates become ``datetime.date`` taken in each date's own offset
- Result counters must be JSON numbers; anything else counts as 0
- Missing optional values (rounds, leader, expansion) become None
"""

import logging
import math
import numbers
from datetime import date
from typing import Dict, Iterable, Optional

import pandas as pd

from src.snapshot.config import COUNTER_COLUMNS, ID_COLUMNS

logger = logging.getLogger(__name__)


def _is_missing(val) -> bool:
    return (
        val is None
        or val is pd.NA
        or val is pd.NaT
        or (isinstance(val, float) and math.isnan(val))
    )


def _object_column(values: Iterable, index: pd.Index) -> pd.Series:
    # object dtype keeps None as None instead of letting pandas infer NaN
    return pd.Series(list(values), index=index, dtype=object)


class SnapshotCleaner:
    """Cleans and standardizes snapshot tables before validation."""

    # ------------------------------------------------------------------
    # Scalar helpers
    # ------------------------------------------------------------------
    @staticmethod
    def normalize_id(val) -> Optional[str]:
        """Render an identifier as a string.

        Examples:
            17     -> "17"
            17.0   -> "17"
            " a1 " -> "a1"
            None   -> None
        """
        if _is_missing(val):
            return None
        if isinstance(val, float) and val.is_integer():
            val = int(val)
        s = str(val).strip()
        return s or None

    @staticmethod
    def normalize_name(val) -> Optional[str]:
        """Collapse runs of whitespace in a display name; blank -> None."""
        if _is_missing(val):
            return None
        s = " ".join(str(val).split())
        return s or None

    @staticmethod
    def parse_counter(val) -> int:
        """Parse a result counter.

        Only numbers count: missing values, strings (even "8") and
        booleans are 0. Counters are whole numbers, so a fractional
        value is truncated toward zero.
        """
        if _is_missing(val) or isinstance(val, bool):
            return 0
        if not isinstance(val, numbers.Real) or not math.isfinite(val):
            return 0
        return int(val)

    @staticmethod
    def parse_optional_int(val) -> Optional[int]:
        """Parse an optional integer such as played rounds."""
        if _is_missing(val):
            return None
        try:
            return int(float(val))
        except (TypeError, ValueError):
            return None

    @staticmethod
    def parse_flag(val) -> bool:
        if _is_missing(val):
            return False
        if isinstance(val, str):
            return val.strip().lower() in ("true", "1", "yes")
        return bool(val)

    @staticmethod
    def parse_date(val) -> Optional[date]:
        """Parse a match date to its calendar day.

        A timestamp carrying a UTC offset keeps the day in that offset,
        so ``2024-01-01T23:30:00+01:00`` is 2024-01-01. Unparseable
        values become None and are reported by validation.
        """
        if _is_missing(val) or isinstance(val, bool):
            return None
        try:
            ts = pd.Timestamp(val)
        except (TypeError, ValueError):
            logger.debug("Unparseable match date: %r", val)
            return None
        if pd.isna(ts):
            return None
        return ts.date()

    # ------------------------------------------------------------------
    # Table-level cleaning
    # ------------------------------------------------------------------
    def _clean_ids(self, df: pd.DataFrame, table: str) -> pd.DataFrame:
        for col in ID_COLUMNS[table]:
            df[col] = _object_column(map(self.normalize_id, df[col]), df.index)
        return df

    def clean_lookup(self, df: pd.DataFrame, table: str) -> pd.DataFrame:
        """Clean a lookup table (players, leaders, games, expansions)."""
        out = self._clean_ids(df.copy(), table)
        # Fall back to the ID when no display name was exported
        out["name"] = _object_column(
            (self.normalize_name(n) or i for n, i in zip(out["name"], out["id"])),
            out.index,
        )
        logger.info("Cleaned %s: %d rows", table, len(out))
        return out

    def clean_matches(self, df: pd.DataFrame) -> pd.DataFrame:
        """Clean matches. Dates become ``datetime.date``; rounds stay optional."""
        out = self._clean_ids(df.copy(), "matches")
        out["date"] = _object_column(map(self.parse_date, out["date"]), out.index)
        out["with_expansion"] = _object_column(
            map(self.parse_flag, out["with_expansion"]), out.index
        ).astype(bool)
        out["with_family_atomic"] = _object_column(
            map(self.parse_flag, out["with_family_atomic"]), out.index
        ).astype(bool)
        out["played_rounds"] = _object_column(
            map(self.parse_optional_int, out["played_rounds"]), out.index
        )
        logger.info("Cleaned matches: %d rows", len(out))
        return out

    def clean_results(self, df: pd.DataFrame) -> pd.DataFrame:
        """Clean results. Non-numeric counters become 0."""
        out = self._clean_ids(df.copy(), "results")
        for col in COUNTER_COLUMNS:
            out[col] = pd.Series(
                [self.parse_counter(v) for v in out[col]], index=out.index, dtype="int64"
            )
        logger.info("Cleaned results: %d rows", len(out))
        return out

    def clean_all(self, tables: Dict[str, pd.DataFrame]) -> Dict[str, pd.DataFrame]:
        """Clean every table returned by SnapshotIngester.read_all()."""
        return {
            "players": self.clean_lookup(tables["players"], "players"),
            "leaders": self.clean_lookup(tables["leaders"], "leaders"),
            "games": self.clean_lookup(tables["games"], "games"),
            "expansions": self.clean_lookup(tables["expansions"], "expansions"),
            "matches": self.clean_matches(tables["matches"]),
            "results": self.clean_results(tables["results"]),
        }
