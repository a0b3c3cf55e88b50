"""Tests for snapshot assembly and loading."""

import json
from datetime import date

import pytest

from src.snapshot.builder import SnapshotError, load_snapshot
from src.snapshot.ingestion import IngestionError
from src.snapshot.models import RecordSnapshot
from src.standings.dashboard import build_dashboard
from src.standings.leaders import compute_global_leader_stats
from src.standings.standings import compute_standings
from tests.conftest import SAMPLE_MATCHES, build_snapshot


class TestLoadSnapshot:
    def test_loads_sample(self, sample_export, write_export):
        snapshot = load_snapshot(write_export(sample_export))

        assert isinstance(snapshot, RecordSnapshot)
        assert snapshot.group_id == "dune-night"
        assert len(snapshot.matches) == 4
        assert len(snapshot.results) == 13

    def test_matches_hand_built_snapshot(self, sample_export, write_export):
        loaded = load_snapshot(write_export(sample_export))
        expected = build_snapshot(SAMPLE_MATCHES)

        assert loaded.matches == expected.matches
        assert loaded.results == expected.results

    def test_types(self, sample_export, write_export):
        snapshot = load_snapshot(write_export(sample_export))
        match = snapshot.get_match("m3")
        result = snapshot.results[0]

        assert match.date == date(2024, 1, 15)
        assert match.played_rounds is None
        assert isinstance(result.score, int)
        assert snapshot.expansion_name("ix") == "Rise of Ix"

    def test_engine_runs_on_loaded_snapshot(self, sample_export, write_export):
        snapshot = load_snapshot(write_export(sample_export))
        stats = {s.player_id: s for s in compute_standings(snapshot)}
        assert stats["alice"].winrate == 25.0

    def test_integer_ids_from_store(self, write_export):
        document = {
            "group_id": 42,
            "players": [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}],
            "matches": [{"id": 100, "date": "2024-01-01", "played_rounds": 9}],
            "results": [
                {"id": 1000, "match_id": 100, "player_id": 1, "score": 10},
                {"id": 1001, "match_id": 100, "player_id": 2, "score": 12},
            ],
        }
        snapshot = load_snapshot(write_export(document))

        assert snapshot.group_id == "42"
        assert snapshot.results[1].player_id == "2"
        assert compute_standings(snapshot)[1].wins == 1

    def test_group_id_defaults_to_file_name(self, sample_export, write_export):
        del sample_export["group_id"]
        snapshot = load_snapshot(write_export(sample_export, name="friday.json"))
        assert snapshot.group_id == "friday"

    def test_missing_optional_ids_are_none(self, write_export):
        document = {
            "leaders": [{"id": "paul", "name": "Paul Atreides"}],
            "matches": [
                {"id": "m1", "date": "2024-01-01", "with_expansion": True, "expansion_id": "ix"},
                {"id": "m2", "date": "2024-01-02"},
            ],
            "results": [
                {"id": "r1", "match_id": "m1", "player_id": "alice", "leader_id": "paul", "score": 5},
                {"id": "r2", "match_id": "m1", "player_id": "bob", "leader_id": None, "score": 9},
                {"id": "r3", "match_id": "m2", "player_id": "alice", "score": 4},
            ],
        }
        snapshot = load_snapshot(write_export(document))

        assert snapshot.results[1].leader_id is None
        assert snapshot.results[2].leader_id is None
        assert snapshot.get_match("m1").expansion_id == "ix"
        assert snapshot.get_match("m2").expansion_id is None

        table = compute_global_leader_stats(snapshot, mode="best_winrate")
        assert [s.leader_id for s in table] == ["paul"]
        assert table[0].winrate == 0.0

    def test_dashboard_is_valid_json(self, write_export, sample_export):
        sample_export["results"][0]["leader_id"] = None
        sample_export["matches"][0]["expansion_id"] = None
        snapshot = load_snapshot(write_export(sample_export))

        text = json.dumps(build_dashboard(snapshot, show_all_leaders=True), allow_nan=False)
        assert "NaN" not in text

    def test_big_integer_leader_ids(self, sample_export, write_export):
        sample_export["leaders"].append({"id": 9007199254740993, "name": "Shaddam IV"})
        sample_export["results"][0]["leader_id"] = 9007199254740993
        sample_export["results"][1]["leader_id"] = None
        snapshot = load_snapshot(write_export(sample_export))

        assert snapshot.results[0].leader_id == "9007199254740993"
        assert snapshot.leader_name("9007199254740993") == "Shaddam IV"

    def test_mixed_date_formats(self, sample_export, write_export):
        sample_export["matches"][0]["date"] = "2024-01-01T20:00:00+01:00"
        snapshot = load_snapshot(write_export(sample_export))

        assert snapshot.get_match("m1").date == date(2024, 1, 1)
        assert snapshot.get_match("m2").date == date(2024, 1, 15)

class TestLoadSnapshotErrors:
    def test_inconsistent_snapshot(self, sample_export, write_export):
        sample_export["results"][0]["match_id"] = "ghost"
        with pytest.raises(SnapshotError) as excinfo:
            load_snapshot(write_export(sample_export))

        assert excinfo.value.errors
        assert "ghost" in str(excinfo.value)

    def test_unparseable_date_reported(self, sample_export, write_export):
        sample_export["matches"][1]["date"] = "someday"
        with pytest.raises(SnapshotError) as excinfo:
            load_snapshot(write_export(sample_export))

        assert any("valid date" in e for e in excinfo.value.errors)

    def test_unreadable_export(self, tmp_path):
        with pytest.raises(IngestionError):
            load_snapshot(tmp_path / "missing.json")
