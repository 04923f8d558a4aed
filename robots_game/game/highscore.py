"""
Highscore file handling.

One line per finished game, appended at game over:

    username;score;level;unix_timestamp
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

SEPARATOR = ";"


def clean_username(username: str) -> str:
    """Drop characters that would break the line format."""
    for char in (SEPARATOR, "\n", "\r"):
        username = username.replace(char, "")
    return username


@dataclass
class HighscoreEntry:
    """A single finished game."""
    username: str
    score: int
    level: int
    timestamp: int = 0

    def to_line(self) -> str:
        return SEPARATOR.join(
            [self.username, str(self.score), str(self.level), str(self.timestamp)]
        )

    @classmethod
    def from_line(cls, line: str) -> "HighscoreEntry":
        """
        Parse a highscore line.

        Raises:
            ValueError: If the line is malformed
        """
        parts = line.strip().split(SEPARATOR)
        if len(parts) != 4:
            raise ValueError(f"Expected 4 fields, got {len(parts)}")
        username, score, level, timestamp = parts
        return cls(
            username=username,
            score=int(score),
            level=int(level),
            timestamp=int(timestamp),
        )


class HighscoreStore:
    """Append-only highscore file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def ensure_exists(self) -> None:
        """Create an empty highscore file if there is none."""
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch()
        logger.info(f"Created highscore file {self.path}")

    def add(
        self,
        username: str,
        score: int,
        level: int,
        timestamp: Optional[int] = None,
    ) -> HighscoreEntry:
        """
        Append a finished game.

        Separators and line breaks are stripped from the username so the
        line always reads back.

        Args:
            username: Player name
            score: Final score
            level: Level reached
            timestamp: Unix time (now when omitted)

        Returns:
            The entry written
        """
        if timestamp is None:
            timestamp = int(time.time())
        username = clean_username(username)
        entry = HighscoreEntry(username, score, level, timestamp)
        self.ensure_exists()
        with open(self.path, 'a') as f:
            f.write(entry.to_line() + "\n")
        logger.info(f"Recorded highscore {username}: {score} (level {level})")
        return entry

    def load(self) -> List[HighscoreEntry]:
        """Read every well-formed entry in file order."""
        if not self.path.exists():
            return []

        entries: List[HighscoreEntry] = []
        with open(self.path, 'r') as f:
            for number, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    entries.append(HighscoreEntry.from_line(line))
                except ValueError as e:
                    logger.warning(f"Skipping highscore line {number} in {self.path}: {e}")
        return entries

    def top(self, n: int = 10) -> List[HighscoreEntry]:
        """Best n entries by score, highest first."""
        return sorted(self.load(), key=lambda entry: entry.score, reverse=True)[:n]
