"""Consistency checks for cleaned snapshot tables."""

import logging
from typing import Dict, List

import pandas as pd

logger = logging.getLogger(__name__)


class SnapshotValidator:
    """Validates that a snapshot is internally consistent.

    The engine trusts the store for value ranges (negative counters are
    accepted as-is); only referential integrity and the per-match
    invariants are checked here.
    """

    def validate(self, tables: Dict[str, pd.DataFrame]) -> List[str]:
        """
        Check cleaned tables for consistency violations.

        Returns:
            List of human-readable errors, empty when the snapshot is valid.
        """
        errors: List[str] = []
        matches = tables["matches"]
        results = tables["results"]

        errors.extend(self._check_ids(tables))

        bad_dates = matches.loc[matches["date"].isna(), "id"].tolist()
        if bad_dates:
            errors.append(f"Matches without a valid date: {bad_dates}")

        errors.extend(self._check_references(results, "match_id", matches, "match"))
        if not tables["players"].empty:
            errors.extend(
                self._check_references(results, "player_id", tables["players"], "player")
            )
        if not tables["leaders"].empty:
            errors.extend(
                self._check_references(results, "leader_id", tables["leaders"], "leader")
            )

        dupes = results[results.duplicated(subset=["match_id", "player_id"], keep=False)]
        if not dupes.empty:
            pairs = sorted(set(zip(dupes["match_id"], dupes["player_id"])))
            errors.append(f"Players recorded more than once in a match: {pairs}")

        empty = sorted(set(matches["id"].dropna()) - set(results["match_id"].dropna()))
        if empty:
            errors.append(f"Matches without results: {empty}")

        if errors:
            for error in errors:
                logger.warning("Snapshot inconsistency: %s", error)
        else:
            logger.info(
                "Snapshot valid: %d matches, %d results", len(matches), len(results)
            )
        return errors

    @staticmethod
    def _check_ids(tables: Dict[str, pd.DataFrame]) -> List[str]:
        """Every record needs an ID, and IDs must be unique within a table."""
        errors = []
        for table, df in tables.items():
            if df["id"].isna().any():
                errors.append(f"{table}: {int(df['id'].isna().sum())} row(s) without an id")
            dupes = df.loc[df["id"].duplicated() & df["id"].notna(), "id"].unique().tolist()
            if dupes:
                errors.append(f"{table}: duplicate ids {dupes}")
        for col in ("match_id", "player_id"):
            missing = int(tables["results"][col].isna().sum())
            if missing:
                errors.append(f"results: {missing} row(s) without {col}")
        return errors

    @staticmethod
    def _check_references(
        results: pd.DataFrame, column: str, target: pd.DataFrame, label: str
    ) -> List[str]:
        """Results must only reference records present in *target*."""
        refs = results[column].dropna()
        unknown = sorted(set(refs) - set(target["id"].dropna()))
        if unknown:
            return [f"Results reference unknown {label}(s): {unknown}"]
        return []
