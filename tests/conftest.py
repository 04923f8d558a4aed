"""
Pytest configuration and fixtures for Robots tests.

Provides a hand-built "world" (player, robots, junk, item, state, board) so
tick and command tests can place entities exactly where they need them.
"""

import logging
import random
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))

from robots_game.game import (  # noqa: E402
    Board, GameState, Item, JunkHeap, Player, Robot, RobotsConfig, RobotsGame,
    advance_tick,
)


@dataclass
class World:
    """Entity collections for a single tick, built by hand."""
    player: Player
    robots: List[Robot] = field(default_factory=list)
    junk_heaps: List[JunkHeap] = field(default_factory=list)
    item: Item = field(default_factory=Item)
    state: GameState = field(default_factory=GameState)
    board: Board = field(default_factory=Board)
    # Item never appears on its own unless a test asks for it
    config: RobotsConfig = field(default_factory=lambda: RobotsConfig(item_reveal_chance=0.0))
    rng: random.Random = field(default_factory=lambda: random.Random(0))

    def tick(self):
        return advance_tick(
            self.player,
            self.robots,
            self.junk_heaps,
            self.item,
            self.state,
            board=self.board,
            rng=self.rng,
            config=self.config,
        )


@pytest.fixture
def make_world():
    """Factory for a World on an empty 60x24 board."""
    def _make(player_pos=(30, 12), robots=None, junk=None, item: Optional[Item] = None, **player_kwargs):
        world = World(player=Player(username="tester", x=player_pos[0], y=player_pos[1], **player_kwargs))
        world.robots = list(robots or [])
        world.junk_heaps = [JunkHeap(x, y) for x, y in (junk or [])]
        if item is not None:
            world.item = item
        return world
    return _make


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def quiet_config():
    """Game config with item reveal disabled."""
    return RobotsConfig(item_reveal_chance=0.0)


@pytest.fixture
def corner_game(quiet_config):
    """Factory for a game with the player at (1, 1) and a hand-placed roster."""
    def _make(robots):
        game = RobotsGame(quiet_config, username="alice", seed=5)
        game.player.x, game.player.y = 1, 1
        game.robots = robots
        game.junk_heaps = []
        game.item = Item(60, 24)
        game.board.rebuild([], game.robots)
        return game
    return _make


@pytest.fixture
def highscore_path(tmp_path):
    """Path to a highscore file inside the test's temp directory."""
    return tmp_path / "highscore.txt"


@pytest.fixture
def restore_logging():
    """Put the root logger back the way it was after setup_logging() ran."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
