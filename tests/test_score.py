"""Tests for yakusu.core.score – best-level persistence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from yakusu.core.game import GameController
from yakusu.core.score import MemoryScoreStore, ScoreStore


@pytest.fixture()
def store(tmp_path: Path) -> ScoreStore:
    """ScoreStore backed by a temp file so tests don't touch ~/.yakusu."""
    return ScoreStore(tmp_path / "score.json")


# ---------------------------------------------------------------------------
# ScoreStore – fresh state
# ---------------------------------------------------------------------------

class TestFresh:
    def test_no_file_loads_zero(self, store: ScoreStore):
        assert store.load() == 0

    def test_default_location(self):
        assert ScoreStore().file_path == Path.home() / ".yakusu" / "score.json"


# ---------------------------------------------------------------------------
# ScoreStore – save / load
# ---------------------------------------------------------------------------

class TestSaveLoad:
    def test_saved_level_is_loaded(self, store: ScoreStore):
        store.save(12)
        assert store.load() == 12

    def test_new_instance_sees_saved_level(self, tmp_path: Path):
        ScoreStore(tmp_path / "score.json").save(7)
        assert ScoreStore(tmp_path / "score.json").load() == 7

    def test_last_write_wins(self, store: ScoreStore):
        store.save(3)
        store.save(9)
        assert store.load() == 9

    def test_file_format(self, store: ScoreStore):
        store.save(4)
        data = json.loads(store.file_path.read_text(encoding="utf-8"))
        assert data == {"best_level": 4}

    def test_creates_parent_directory(self, tmp_path: Path):
        s = ScoreStore(tmp_path / "nested" / "dir" / "score.json")
        s.save(2)
        assert s.load() == 2


# ---------------------------------------------------------------------------
# ScoreStore – storage problems degrade to zero
# ---------------------------------------------------------------------------

class TestDegradedStorage:
    def test_corrupt_json(self, store: ScoreStore):
        store.file_path.write_text("NOT VALID JSON", encoding="utf-8")
        assert store.load() == 0

    def test_not_a_mapping(self, store: ScoreStore):
        store.file_path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
        assert store.load() == 0

    def test_missing_key(self, store: ScoreStore):
        store.file_path.write_text(json.dumps({}), encoding="utf-8")
        assert store.load() == 0

    def test_non_integer_value(self, store: ScoreStore):
        store.file_path.write_text(json.dumps({"best_level": "abc"}), encoding="utf-8")
        assert store.load() == 0

    def test_negative_value_clamped(self, store: ScoreStore):
        store.file_path.write_text(json.dumps({"best_level": -3}), encoding="utf-8")
        assert store.load() == 0

    def test_invalid_utf8(self, store: ScoreStore):
        store.file_path.write_bytes(b'{"best_level": \xff\xfe}')
        assert store.load() == 0

    def test_infinite_value(self, store: ScoreStore):
        store.file_path.write_text('{"best_level": 1e400}', encoding="utf-8")
        assert store.load() == 0

    def test_nan_value(self, store: ScoreStore):
        store.file_path.write_text('{"best_level": NaN}', encoding="utf-8")
        assert store.load() == 0

    def test_unwritable_location_does_not_raise(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        s = ScoreStore(blocker / "score.json")
        s.save(5)
        assert s.load() == 0


# ---------------------------------------------------------------------------
# MemoryScoreStore
# ---------------------------------------------------------------------------

class TestMemoryScoreStore:
    def test_defaults(self):
        assert MemoryScoreStore().load() == 0

    def test_initial_level(self):
        assert MemoryScoreStore(8).load() == 8

    def test_records_saves(self):
        s = MemoryScoreStore()
        s.save(1)
        s.save(2)
        assert s.load() == 2
        assert s.saves == [1, 2]


# ---------------------------------------------------------------------------
# Startup with a damaged score file
# ---------------------------------------------------------------------------

class TestControllerStartup:
    def test_garbage_file_starts_at_zero(self, store: ScoreStore):
        store.file_path.write_bytes(b"\xff")
        controller = GameController(store)
        assert controller.state.best_level == 0

    def test_new_best_overwrites_garbage(self, store: ScoreStore):
        store.file_path.write_bytes(b"\xff")
        controller = GameController(store)
        controller.start()
        controller.toggle(1)
        controller.check()
        assert store.load() == 1
