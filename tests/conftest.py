"""Shared fixtures for the standings engine test suite.

``SAMPLE_MATCHES`` describes a small group with four players and four
matches; expected figures in the test modules are worked out by hand
from it:

    m1 2024-01-01  Dune Imperium           8 rounds   bob > alice > carol
    m2 2024-01-15  Dune Imperium           7 rounds   alice > carol > bob > dave
    m3 2024-01-15  Dune Imperium Uprising  no rounds  carol > alice > bob
    m4 2024-02-01  Dune Imperium Uprising  10 rounds  dave > alice > bob (Rise of Ix)
"""

import json
from datetime import date

import pytest

from src.snapshot.models import (
    Expansion,
    Game,
    Leader,
    Match,
    Player,
    RecordSnapshot,
    Result,
)

PLAYER_NAMES = {
    "alice": "Alice",
    "bob": "Bob",
    "carol": "Carol",
    "dave": "Dave",
}

LEADER_NAMES = {
    "paul": "Paul Atreides",
    "glossu": "Glossu Rabban",
    "ariana": "Ariana Thorvald",
    "memnon": "Memnon Thorvald",
    "jessamine": "Lady Jessica",
}

GAME_NAMES = {
    "imperium": "Dune Imperium",
    "uprising": "Dune Imperium Uprising",
}

EXPANSION_NAMES = {
    "ix": "Rise of Ix",
}

SAMPLE_MATCHES = [
    {
        "id": "m1", "date": "2024-01-01", "game_id": "imperium", "played_rounds": 8,
        "results": [
            {"player": "alice", "score": 10, "spice": 2, "leader": "paul"},
            {"player": "bob", "score": 10, "spice": 5, "leader": "glossu"},
            {"player": "carol", "score": 8, "spice": 9, "leader": "ariana"},
        ],
    },
    {
        "id": "m2", "date": "2024-01-15", "game_id": "imperium", "played_rounds": 7,
        "results": [
            {"player": "alice", "score": 11, "leader": "paul"},
            {"player": "bob", "score": 7, "leader": "memnon"},
            {"player": "carol", "score": 9, "leader": "ariana"},
            {"player": "dave", "score": 6, "leader": "glossu"},
        ],
    },
    {
        "id": "m3", "date": "2024-01-15", "game_id": "uprising", "played_rounds": None,
        "results": [
            {"player": "carol", "score": 12, "spice": 3, "solari": 4, "leader": "jessamine"},
            {"player": "alice", "score": 12, "spice": 3, "leader": "paul"},
            {"player": "bob", "score": 5},
        ],
    },
    {
        "id": "m4", "date": "2024-02-01", "game_id": "uprising", "played_rounds": 10,
        "with_expansion": True, "expansion_id": "ix", "with_family_atomic": True,
        "results": [
            {"player": "dave", "score": 9, "water": 2, "leader": "memnon"},
            {"player": "alice", "score": 9, "water": 1, "leader": "ariana"},
            {"player": "bob", "score": 4, "leader": "paul"},
        ],
    },
]


# ------------------------------------------------------------------
# Factories
# ------------------------------------------------------------------

def build_snapshot(matches, group_id="dune-night") -> RecordSnapshot:
    """Build a RecordSnapshot from compact match descriptions (see SAMPLE_MATCHES)."""
    match_rows = []
    result_rows = []
    for entry in matches:
        match_rows.append(Match(
            match_id=entry["id"],
            date=date.fromisoformat(entry["date"]),
            game_id=entry.get("game_id"),
            with_expansion=entry.get("with_expansion", False),
            expansion_id=entry.get("expansion_id"),
            with_family_atomic=entry.get("with_family_atomic", False),
            played_rounds=entry.get("played_rounds"),
        ))
        for r in entry["results"]:
            result_rows.append(Result(
                result_id=r.get("id", f"{entry['id']}-{r['player']}"),
                match_id=entry["id"],
                player_id=r["player"],
                leader_id=r.get("leader"),
                score=r.get("score", 0),
                spice=r.get("spice", 0),
                solari=r.get("solari", 0),
                water=r.get("water", 0),
            ))

    player_ids = dict.fromkeys(r.player_id for r in result_rows)
    leader_ids = dict.fromkeys(r.leader_id for r in result_rows if r.leader_id)
    return RecordSnapshot(
        group_id=group_id,
        matches=tuple(match_rows),
        results=tuple(result_rows),
        players=tuple(Player(pid, PLAYER_NAMES.get(pid, pid)) for pid in player_ids),
        leaders=tuple(Leader(lid, LEADER_NAMES.get(lid, lid)) for lid in leader_ids),
        games=tuple(Game(gid, name) for gid, name in GAME_NAMES.items()),
        expansions=tuple(Expansion(eid, name) for eid, name in EXPANSION_NAMES.items()),
    )


def export_document(matches, group_id="dune-night") -> dict:
    """Render compact match descriptions as a store export document."""
    results = []
    for entry in matches:
        for r in entry["results"]:
            results.append({
                "id": r.get("id", f"{entry['id']}-{r['player']}"),
                "match_id": entry["id"],
                "player_id": r["player"],
                "leader_id": r.get("leader"),
                "score": r.get("score", 0),
                "spice": r.get("spice", 0),
                "solari": r.get("solari", 0),
                "water": r.get("water", 0),
            })
    return {
        "group_id": group_id,
        "players": [{"id": k, "name": v} for k, v in PLAYER_NAMES.items()],
        "leaders": [{"id": k, "name": v} for k, v in LEADER_NAMES.items()],
        "games": [{"id": k, "name": v} for k, v in GAME_NAMES.items()],
        "expansions": [{"id": k, "name": v} for k, v in EXPANSION_NAMES.items()],
        "matches": [
            {
                "id": entry["id"],
                "date": entry["date"],
                "game_id": entry.get("game_id"),
                "with_expansion": entry.get("with_expansion", False),
                "expansion_id": entry.get("expansion_id"),
                "with_family_atomic": entry.get("with_family_atomic", False),
                "played_rounds": entry.get("played_rounds"),
            }
            for entry in matches
        ],
        "results": results,
    }


# ------------------------------------------------------------------
# Fixtures
# ------------------------------------------------------------------

@pytest.fixture
def make_snapshot():
    """Factory fixture: ``make_snapshot(matches, group_id=...)``."""
    return build_snapshot


@pytest.fixture(scope="module")
def sample_snapshot():
    return build_snapshot(SAMPLE_MATCHES)


@pytest.fixture
def sample_export():
    return export_document(SAMPLE_MATCHES)


@pytest.fixture
def write_export(tmp_path):
    """Write an export document to a temp file and return its path."""
    def _write(document, name="snapshot.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path
    return _write
