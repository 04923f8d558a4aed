"""
Tests for the highscore file.
"""

import pytest

from robots_game.game import HighscoreEntry, HighscoreStore


class TestHighscoreEntry:
    """Tests for the line format."""

    def test_to_line(self):
        entry = HighscoreEntry("alice", 42, 3, 1700000000)

        assert entry.to_line() == "alice;42;3;1700000000"

    def test_from_line(self):
        entry = HighscoreEntry.from_line("bob;7;2;1700000001\n")

        assert entry == HighscoreEntry("bob", 7, 2, 1700000001)

    @pytest.mark.parametrize("line", ["bob;7;2", "bob;seven;2;1", "a;1;2;3;4", ""])
    def test_malformed_line(self, line):
        with pytest.raises(ValueError):
            HighscoreEntry.from_line(line)


class TestHighscoreStore:
    """Tests for HighscoreStore."""

    def test_ensure_exists_creates_file(self, tmp_path):
        store = HighscoreStore(tmp_path / "scores" / "highscore.txt")
        store.ensure_exists()

        assert store.path.exists()
        assert store.load() == []

    def test_ensure_exists_keeps_content(self, highscore_path):
        highscore_path.write_text("alice;1;1;1\n")
        HighscoreStore(highscore_path).ensure_exists()

        assert highscore_path.read_text() == "alice;1;1;1\n"

    def test_add_appends(self, highscore_path):
        store = HighscoreStore(highscore_path)
        store.add("alice", 10, 2, timestamp=100)
        store.add("bob", 20, 3, timestamp=200)

        assert highscore_path.read_text() == "alice;10;2;100\nbob;20;3;200\n"

    def test_add_strips_separator_from_name(self, highscore_path):
        """Test a name containing the separator still reads back."""
        store = HighscoreStore(highscore_path)
        entry = store.add("al;ice\n", 10, 2, timestamp=100)

        assert entry.username == "alice"
        assert highscore_path.read_text() == "alice;10;2;100\n"
        assert store.load() == [HighscoreEntry("alice", 10, 2, 100)]

    def test_add_stamps_time(self, highscore_path):
        entry = HighscoreStore(highscore_path).add("alice", 10, 2)

        assert entry.timestamp > 0

    def test_load_missing_file(self, highscore_path):
        assert HighscoreStore(highscore_path).load() == []

    def test_load_skips_bad_lines(self, highscore_path):
        highscore_path.write_text("alice;10;2;100\ngarbage\n\nbob;x;1;1\ncarol;5;1;300\n")
        entries = HighscoreStore(highscore_path).load()

        assert [entry.username for entry in entries] == ["alice", "carol"]

    def test_top_sorted_by_score(self, highscore_path):
        store = HighscoreStore(highscore_path)
        for number in range(15):
            store.add(f"player{number}", number * 3 % 17, 1, timestamp=number)

        top = store.top(10)
        scores = [entry.score for entry in top]

        assert len(top) == 10
        assert scores == sorted(scores, reverse=True)
        assert scores[0] == 16
