"""Build the standings dashboard for one group's snapshot export.

Usage:
    python -m src.standings.run_report <snapshot.json> [output_dir]

Examples:
    python -m src.standings.run_report data/snapshots/group_42.json
    python -m src.standings.run_report export.json /tmp/reports
"""

import json
import logging
import re
import sys
from pathlib import Path

import pandas as pd

from src.logging_config import setup_logging
from src.snapshot.builder import load_snapshot
from src.standings.config import REPORTS_DIR
from src.standings.dashboard import build_dashboard

logger = logging.getLogger(__name__)


def _safe_name(group_id: str) -> str:
    """File-name friendly version of a group ID."""
    return re.sub(r"[^A-Za-z0-9_-]+", "_", group_id).strip("_") or "group"


def standings_frame(dashboard: dict) -> pd.DataFrame:
    """Tabulate the standings section of a dashboard."""
    columns = ["player_id", "name", "total_games", "wins", "avg_score", "winrate"]
    return pd.DataFrame(dashboard["standings"], columns=columns)


def run_report(snapshot_path: Path, output_dir: Path | None = None) -> Path:
    """Load a snapshot export and write its dashboard report.

    Args:
        snapshot_path: Snapshot export (JSON) for one group.
        output_dir: Directory for the report files.
            Defaults to ``data/reports/``.

    Returns:
        Path to the generated dashboard JSON file.

    Raises:
        IngestionError: If the export cannot be read.
        SnapshotError: If the export is inconsistent.
    """
    if output_dir is None:
        output_dir = REPORTS_DIR

    logger.info("Step 1/3: Loading snapshot %s...", snapshot_path)
    snapshot = load_snapshot(snapshot_path)

    logger.info("Step 2/3: Computing dashboard...")
    dashboard = build_dashboard(snapshot)

    logger.info("Step 3/3: Writing report...")
    output_dir.mkdir(parents=True, exist_ok=True)
    name = _safe_name(snapshot.group_id)

    output_file = output_dir / f"dashboard_{name}.json"
    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(dashboard, f, indent=2)

    standings_file = output_dir / f"standings_{name}.csv"
    standings_frame(dashboard).to_csv(standings_file, index=False)

    # Update latest symlink
    latest_link = output_dir / "dashboard_latest.json"
    if latest_link.exists() or latest_link.is_symlink():
        latest_link.unlink()
    latest_link.symlink_to(output_file.name)

    logger.info("Report complete! Output: %s", output_file)
    logger.info("  Matches: %d", dashboard["match_counts"]["total"])
    for line in dashboard["standings"]:
        logger.info(
            "  %s: %d games, %d wins (%.1f%%), avg %.1f",
            line["name"], line["total_games"], line["wins"],
            line["winrate"], line["avg_score"],
        )

    return output_file


if __name__ == "__main__":
    setup_logging()

    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)

    snapshot_path = Path(sys.argv[1])
    output_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        output = run_report(snapshot_path, output_dir)
        print(f"Report complete: {output}")
    except Exception:
        logger.exception("Report failed")
        sys.exit(1)
