"""
Tests for highscore.py - reading and writing the persisted best score.
"""

import json

from snake_arcade.highscore import (
    JsonFileStorage,
    MemoryStorage,
    get_high_score,
    save_high_score,
)

KEY = "snakeHighScore"


class BrokenStorage:
    """A medium that is there but cannot be used."""

    def get_item(self, key):
        raise OSError("disk on fire")

    def set_item(self, key, value):
        raise OSError("disk on fire")


class TestMemoryStorage:

    def test_empty_reads_zero(self):
        assert get_high_score(MemoryStorage()) == 0

    def test_higher_score_is_saved_lower_is_not(self):
        storage = MemoryStorage()
        assert save_high_score(storage, 30) is True
        assert get_high_score(storage) == 30
        assert save_high_score(storage, 20) is False
        assert get_high_score(storage) == 30

    def test_equal_score_is_not_written(self):
        storage = MemoryStorage({KEY: "30"})
        assert save_high_score(storage, 30) is False

    def test_non_numeric_value_reads_zero(self):
        assert get_high_score(MemoryStorage({KEY: "lots"})) == 0

    def test_zero_score_never_written(self):
        storage = MemoryStorage()
        assert save_high_score(storage, 0) is False
        assert storage.get_item(KEY) is None


class TestNoStorage:

    def test_none_reads_zero(self):
        assert get_high_score(None) == 0

    def test_none_write_is_noop(self):
        assert save_high_score(None, 100) is False

    def test_broken_medium_reads_zero_and_write_fails_quietly(self):
        assert get_high_score(BrokenStorage()) == 0
        assert save_high_score(BrokenStorage(), 10) is False


class TestJsonFileStorage:

    def test_missing_file_reads_zero(self, tmp_path):
        assert get_high_score(JsonFileStorage(tmp_path / "hs.json")) == 0

    def test_save_writes_json_object(self, tmp_path):
        path = tmp_path / "nested" / "hs.json"
        storage = JsonFileStorage(path)
        assert save_high_score(storage, 30) is True
        assert json.loads(path.read_text()) == {KEY: "30"}
        assert get_high_score(JsonFileStorage(path)) == 30

    def test_other_keys_survive(self, tmp_path):
        path = tmp_path / "hs.json"
        path.write_text(json.dumps({"theme": "dark"}))
        save_high_score(JsonFileStorage(path), 50)
        assert json.loads(path.read_text()) == {"theme": "dark", KEY: "50"}

    def test_corrupt_file_reads_zero_and_is_replaced(self, tmp_path):
        path = tmp_path / "hs.json"
        path.write_text("{not json")
        storage = JsonFileStorage(path)
        assert get_high_score(storage) == 0
        assert save_high_score(storage, 10) is True
        assert get_high_score(storage) == 10

    def test_failed_write_leaves_no_temp_file(self, tmp_path, monkeypatch):
        path = tmp_path / "hs.json"

        def disk_full(*args, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr(json, "dump", disk_full)
        assert save_high_score(JsonFileStorage(path), 10) is False
        assert list(tmp_path.iterdir()) == []

    def test_numeric_json_value_is_accepted(self, tmp_path):
        path = tmp_path / "hs.json"
        path.write_text(json.dumps({KEY: 70}))
        assert get_high_score(JsonFileStorage(path)) == 70
