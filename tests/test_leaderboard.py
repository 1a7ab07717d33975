"""Tests for leaderboard ranking and JSON persistence.

Coverage:
- First-run (missing file) behaviour
- Insert / re-rank / truncate to top 5
- Stable ordering of exact ties
- Persisted field names and round trip of timestamps
- Corrupt and unreadable stores
- Persist failures carrying the computed leaderboard
"""

import json
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from games.number_guess.tiers import DifficultyTier
from play.leaderboard import (
    MAX_ENTRIES,
    CorruptStoreError,
    Leaderboard,
    LeaderboardStore,
    PersistFailedError,
    ScoreRecord,
    StoreReadError,
    rank_scores,
)


LOCAL = timezone(timedelta(hours=2))


# ── helpers ───────────────────────────────────────────────────────────────────


def _score(attempts: int, seconds: float = 10.0, difficulty: int = 100, minute: int = 0) -> ScoreRecord:
    return ScoreRecord(
        attempts=attempts,
        elapsed_seconds=seconds,
        difficulty=DifficultyTier(difficulty),
        recorded_at=datetime(2026, 10, 17, 12, minute, tzinfo=LOCAL),
    )


def _store(tmp_path) -> LeaderboardStore:
    return LeaderboardStore(tmp_path / "highscores.json")


def _attempts(board: Leaderboard):
    return [entry.attempts for entry in board]


# ── TestLoad ──────────────────────────────────────────────────────────────────


class TestLoad:
    def test_missing_file_is_empty(self, tmp_path):
        board = _store(tmp_path).load()
        assert board == Leaderboard()
        assert board.is_empty

    def test_load_is_idempotent(self, tmp_path):
        store = _store(tmp_path)
        store.record(_score(3))
        store.record(_score(2, 4.0))
        assert store.load() == store.load()

    def test_reads_persisted_format(self, tmp_path):
        path = tmp_path / "highscores.json"
        path.write_text(json.dumps([
            {"attempts": 4, "seconds": 20.25, "difficulty": 200, "date": "2024-03-01T10:15:00+01:00"},
        ]))
        board = LeaderboardStore(path).load()
        entry = board[0]
        assert entry.attempts == 4
        assert entry.elapsed_seconds == 20.25
        assert entry.difficulty is DifficultyTier.HARD
        assert entry.recorded_at.utcoffset() == timedelta(hours=1)

    def test_out_of_order_file_is_reranked(self, tmp_path):
        path = tmp_path / "highscores.json"
        rows = [_score(a).to_json_dict() for a in [7, 1, 5, 3, 2, 6, 4]]
        path.write_text(json.dumps(rows))
        board = LeaderboardStore(path).load()
        assert _attempts(board) == [1, 2, 3, 4, 5]

    @pytest.mark.parametrize("content", [
        "not json",
        '{"attempts": 3}',
        '[{"attempts": "three", "seconds": 1.0, "difficulty": 100, "date": "2024-03-01T10:15:00+01:00"}]',
        '[{"attempts": 3, "seconds": -1.0, "difficulty": 100, "date": "2024-03-01T10:15:00+01:00"}]',
        '[{"attempts": 3, "seconds": 1.0, "difficulty": 75, "date": "2024-03-01T10:15:00+01:00"}]',
        '[{"attempts": 3, "seconds": 1.0, "difficulty": 100}]',
        '[{"attempts": 3, "seconds": 1.0, "difficulty": true, "date": "2024-03-01T10:15:00+01:00"}]',
        '[{"attempts": "3", "seconds": "12.5", "difficulty": 100, "date": "2024-03-01T10:15:00+01:00"}]',
    ])
    def test_corrupt_store(self, tmp_path, content):
        path = tmp_path / "highscores.json"
        path.write_text(content)
        with pytest.raises(CorruptStoreError) as exc:
            LeaderboardStore(path).load()
        assert exc.value.path == path

    def test_invalid_utf8_is_corrupt(self, tmp_path):
        path = tmp_path / "highscores.json"
        path.write_bytes(b"\xff\xfe[garbage")
        with pytest.raises(CorruptStoreError) as exc:
            LeaderboardStore(path).load()
        assert exc.value.path == path

    def test_unreadable_store(self, tmp_path):
        # A directory where the file should be
        path = tmp_path / "highscores.json"
        path.mkdir()
        with pytest.raises(StoreReadError):
            LeaderboardStore(path).load()


# ── TestRecord ────────────────────────────────────────────────────────────────


class TestRecord:
    def test_first_record(self, tmp_path):
        store = _store(tmp_path)
        board = store.record(_score(3, 12.5, 100))
        assert len(board) == 1
        entry = board[0]
        assert (entry.attempts, entry.elapsed_seconds, entry.difficulty.bound) == (3, 12.5, 100)
        assert store.load() == board

    def test_new_best_pushes_out_last(self, tmp_path):
        store = _store(tmp_path)
        for attempts in [2, 3, 4, 5, 6]:
            store.record(_score(attempts))
        board = store.record(_score(1, 9.0, 50))
        assert _attempts(board) == [1, 2, 3, 4, 5]
        assert board[0].difficulty is DifficultyTier.EASY
        assert _attempts(store.load()) == [1, 2, 3, 4, 5]

    def test_worse_than_full_board_is_dropped(self, tmp_path):
        store = _store(tmp_path)
        for attempts in [1, 2, 3, 4, 5]:
            store.record(_score(attempts))
        board = store.record(_score(9))
        assert _attempts(board) == [1, 2, 3, 4, 5]

    def test_ties_broken_by_time(self, tmp_path):
        store = _store(tmp_path)
        store.record(_score(3, 20.0))
        store.record(_score(3, 5.0))
        board = store.record(_score(3, 12.0))
        assert [e.elapsed_seconds for e in board] == [5.0, 12.0, 20.0]

    def test_exact_ties_keep_insertion_order(self, tmp_path):
        store = _store(tmp_path)
        a = _score(3, 10.0, minute=1)
        b = _score(3, 10.0, minute=2)
        store.record(a)
        board = store.record(b)
        assert [e.recorded_at.minute for e in board] == [1, 2]
        assert [e.recorded_at.minute for e in store.load()] == [1, 2]

    def test_length_and_order_invariant(self, tmp_path):
        store = _store(tmp_path)
        for attempts, seconds in [(5, 3.0), (2, 9.0), (7, 1.0), (2, 4.0), (4, 4.0), (1, 30.0), (3, 2.0), (2, 4.0)]:
            board = store.record(_score(attempts, seconds))
            assert len(board) <= MAX_ENTRIES
            keys = [e.sort_key for e in board]
            assert keys == sorted(keys)

    def test_persisted_field_names(self, tmp_path):
        store = _store(tmp_path)
        store.record(_score(3, 12.5, 100))
        rows = json.loads(store.path.read_text())
        assert rows == [{
            "attempts": 3,
            "seconds": 12.5,
            "difficulty": 100,
            "date": "2026-10-17T12:00:00+02:00",
        }]

    def test_creates_parent_directories(self, tmp_path):
        store = LeaderboardStore(tmp_path / "nested" / "dir" / "scores.json")
        store.record(_score(3))
        assert store.path.exists()

    def test_corrupt_store_is_not_overwritten(self, tmp_path):
        path = tmp_path / "highscores.json"
        path.write_text("garbage")
        with pytest.raises(CorruptStoreError):
            LeaderboardStore(path).record(_score(1))
        assert path.read_text() == "garbage"

    def test_persist_failure_carries_leaderboard(self, tmp_path, monkeypatch):
        store = _store(tmp_path)
        store.record(_score(4))

        def fail(self, leaderboard):
            raise OSError("disk full")

        monkeypatch.setattr(LeaderboardStore, "_write", fail)
        with pytest.raises(PersistFailedError) as exc:
            store.record(_score(2))
        assert _attempts(exc.value.leaderboard) == [2, 4]
        assert "disk full" in str(exc.value)

        monkeypatch.undo()
        assert _attempts(store.load()) == [4]

    def test_no_temp_files_left_behind(self, tmp_path):
        store = _store(tmp_path)
        store.record(_score(3))
        store.record(_score(2))
        assert [p.name for p in tmp_path.iterdir()] == ["highscores.json"]


# ── TestRanking ───────────────────────────────────────────────────────────────


class TestRanking:
    def test_rank_scores_truncates(self):
        board = rank_scores([_score(a) for a in range(10, 0, -1)])
        assert _attempts(board) == [1, 2, 3, 4, 5]

    def test_ranked_and_rank_of(self):
        records = [_score(2), _score(1)]
        board = rank_scores(records)
        assert [rank for rank, _ in board.ranked()] == [1, 2]
        assert board.rank_of(records[0]) == 2
        assert board.rank_of(_score(9)) is None

    def test_tie_with_last_place_does_not_rank(self, tmp_path):
        store = _store(tmp_path)
        for attempts in [1, 2, 3, 4, 5]:
            store.record(_score(attempts, 10.0))

        tied = _score(5, 10.0, minute=30)
        board = store.record(tied)
        assert board.rank_of(tied) is None

        faster = _score(5, 9.0)
        board = store.record(faster)
        assert board.rank_of(faster) == 5
        assert [e.sort_key for e in board][-1] == (5, 9.0)


# ── TestScoreRecord ───────────────────────────────────────────────────────────


class TestScoreRecord:
    def test_accepts_aliases(self):
        record = ScoreRecord(
            attempts=2, seconds=3.5, difficulty=50, date="2026-01-02T03:04:05+00:00"
        )
        assert record.elapsed_seconds == 3.5
        assert record.difficulty is DifficultyTier.EASY

    def test_immutable(self):
        record = _score(3)
        with pytest.raises(ValidationError):
            record.attempts = 1

    def test_negative_attempts_rejected(self):
        with pytest.raises(ValidationError):
            _score(-1)
