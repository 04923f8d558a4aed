"""
Robots Game Core - Pure game logic implementing GameInterface.

Owns the player, the level contents and the game state, and moves between
phases:

    PLAYING <-> WAITING_FOR_LEVEL_END    (wait command)
    PLAYING / WAITING -> LEVEL_CLEARED -> PLAYING   (all robots scrapped)
    any -> PLAYER_DEAD                   (player killed)
    PLAYER_DEAD -> RETRYING -> PLAYING   (retry)
    PLAYER_DEAD / PLAYING -> EXITING     (no retry, or quit)
"""

import logging
import random
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..core.game_interface import GameInterface, GameMetadata
from .board import Board
from .commands import COMMAND_NAMES, Command, apply_player_command
from .config import RobotsConfig
from .entities import GameState, Item, JunkHeap, Player, Robot
from .level import generate_level, robots_remaining
from .tick import TickReport, advance_tick

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Phases of a game session."""
    PLAYING = "playing"
    WAITING_FOR_LEVEL_END = "waiting_for_level_end"
    LEVEL_CLEARED = "level_cleared"
    PLAYER_DEAD = "player_dead"
    RETRYING = "retrying"
    EXITING = "exiting"


class RobotsGame(GameInterface):
    """
    Core Robots game logic implementing GameInterface.

    The player moves one cell at a time on a 60x24 board while robots close
    in. Robots that collide with each other or with junk are scrapped; a
    level is cleared once every robot is scrap.
    """

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        """Return metadata about the Robots game."""
        return GameMetadata(
            name="Robots",
            id="robots",
            description="Dodge the robots and make them crash into each other",
            version="1.0.0",
        )

    def __init__(
        self,
        config: Optional[RobotsConfig] = None,
        username: str = "",
        seed: Optional[int] = None,
    ):
        """
        Initialize the game.

        Args:
            config: Game configuration
            username: Name recorded with the final score
            seed: Optional random seed for reproducible games
        """
        self.config = config or RobotsConfig()
        self.username = username
        self.rng = random.Random(seed)

        # Game state (initialized in reset)
        self.player: Player = Player(username=username)
        self.state: GameState = GameState()
        self.board: Board = Board(self.config.board_width, self.config.board_height)
        self.robots: List[Robot] = []
        self.junk_heaps: List[JunkHeap] = []
        self.item: Item = Item()
        self.phase: GamePhase = GamePhase.PLAYING
        self.last_report: Optional[TickReport] = None
        self.levels_cleared: int = 0

        self.reset()

    @property
    def action_space_size(self) -> int:
        """Number of possible commands."""
        return len(Command)

    @property
    def action_names(self) -> List[str]:
        """Human-readable command names."""
        return list(COMMAND_NAMES)

    @property
    def is_over(self) -> bool:
        return self.phase in (GamePhase.PLAYER_DEAD, GamePhase.EXITING)

    @property
    def robots_remaining(self) -> bool:
        return robots_remaining(self.robots)

    def seed(self, seed: Optional[int] = None) -> None:
        """Reseed the random source."""
        self.rng.seed(seed)

    def reset(self) -> Dict[str, Any]:
        """
        Start a new game with a fresh player on level 1.

        Returns:
            Dictionary containing the initial game state
        """
        self.player = Player(
            username=self.username,
            safe_teleports=self.config.initial_safe_teleports,
            bombs=self.config.initial_bombs,
        )
        self.state = GameState()
        self.last_report = None
        self.levels_cleared = 0
        self._load_level()
        self.phase = GamePhase.PLAYING
        return self.get_state()

    def _load_level(self) -> None:
        level = generate_level(self.state, self.player, self.rng, self.config)
        self.board, self.robots, self.junk_heaps, self.item = level

    def is_valid_action(self, action: int) -> bool:
        return 0 <= action < self.action_space_size

    def step(self, action: int) -> Tuple[Dict[str, Any], int, bool, Dict[str, Any]]:
        """
        Apply one player command and, if legal, advance one tick.

        Args:
            action: A Command value

        Returns:
            Tuple of (state, points, done, info); points is the score gained
        """
        if not self.is_valid_action(action):
            raise ValueError(f"Unknown action: {action}")

        self.last_report = None
        level_before = self.state.level
        score_before = self.player.score

        if self.phase not in (GamePhase.PLAYING, GamePhase.WAITING_FOR_LEVEL_END):
            return self.get_state(), 0, self.is_over, self._info(False, level_before)

        legal = apply_player_command(
            Command(action),
            self.player,
            self.board,
            self.state,
            robots=self.robots,
            rng=self.rng,
            config=self.config,
        )

        if self.state.quit_requested:
            logger.info(f"Player quit on level {self.state.level}")
            self.phase = GamePhase.EXITING
        elif legal:
            self._tick()

        points = self.player.score - score_before
        return self.get_state(), points, self.is_over, self._info(legal, level_before)

    def advance(self) -> Optional[TickReport]:
        """
        Advance one tick without player input (wait-for-end mode).

        Returns:
            The tick report, or None if the game is not running
        """
        self.last_report = None
        if self.phase not in (GamePhase.PLAYING, GamePhase.WAITING_FOR_LEVEL_END):
            return None
        self._tick()
        return self.last_report

    def _tick(self) -> None:
        self.last_report = advance_tick(
            self.player,
            self.robots,
            self.junk_heaps,
            self.item,
            self.state,
            board=self.board,
            rng=self.rng,
            config=self.config,
        )
        self._update_phase()

    def _update_phase(self) -> None:
        if not self.player.alive:
            self.phase = GamePhase.PLAYER_DEAD
            logger.info(
                f"Game over for '{self.player.username}': "
                f"score {self.player.score}, level {self.state.level}"
            )
        elif not self.robots_remaining:
            self.phase = GamePhase.LEVEL_CLEARED
            self.next_level()
        elif self.state.wait_for_end:
            self.phase = GamePhase.WAITING_FOR_LEVEL_END
        else:
            self.phase = GamePhase.PLAYING

    def next_level(self) -> None:
        """Generate the next level and resume play."""
        logger.info(f"Level {self.state.level} cleared on turn {self.state.turn}")
        self.levels_cleared += 1
        self.state.level += 1
        self.state.wait_for_end = False
        self._load_level()
        self.phase = GamePhase.PLAYING

    def retry(self) -> Dict[str, Any]:
        """
        Start over after the player died.

        Returns:
            Dictionary containing the new game state
        """
        if self.phase != GamePhase.PLAYER_DEAD:
            raise RuntimeError(f"Cannot retry while {self.phase.value}")
        self.phase = GamePhase.RETRYING
        logger.info("Retrying with a fresh player")
        return self.reset()

    def exit(self) -> None:
        self.phase = GamePhase.EXITING

    def highscore_record(self) -> Tuple[str, int, int]:
        """(username, score, level) to persist at game over."""
        return (self.player.username, self.player.score, self.state.level)

    def get_score(self) -> int:
        return self.player.score

    def _info(self, legal: bool, level_before: int) -> Dict[str, Any]:
        return {
            "score": self.player.score,
            "legal": legal,
            "level": self.state.level,
            "level_cleared": self.state.level > level_before,
            "phase": self.phase.value,
        }

    def get_state(self) -> Dict[str, Any]:
        """
        Get current game state for rendering.

        Returns:
            Dictionary containing full game state
        """
        return {
            "width": self.board.width,
            "height": self.board.height,
            "player": self.player.to_dict(),
            "robots": [robot.to_dict() for robot in self.robots],
            "junk_heaps": [heap.to_dict() for heap in self.junk_heaps],
            "item": self.item.to_dict(),
            "state": self.state.to_dict(),
            "phase": self.phase.value,
            "score": self.player.score,
            "level": self.state.level,
            "robots_alive": sum(1 for robot in self.robots if not robot.is_scrap),
            "game_over": self.is_over,
            "last_tick": self.last_report.to_dict() if self.last_report else None,
        }
