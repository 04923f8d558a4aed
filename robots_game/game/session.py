"""
Game session loop.

Wires a RobotsGame to a renderer, an input source and a highscore store.
One input drives one tick; in wait-for-end mode ticks run on a fixed delay
until the level clears or the player dies.
"""

import logging
import time
from typing import Callable, Optional

from ..core.input_interface import InputInterface
from ..core.renderer_interface import RendererInterface
from .commands import Command
from .highscore import HighscoreStore
from .robots_game import GamePhase, RobotsGame

logger = logging.getLogger(__name__)

DEATH_MESSAGE = "[You did not make it. You were caught by the robots..]"
RETRY_PROMPT = "Do you want to try again? (y/n)"


class GameSession:
    """Runs games until the player quits or declines a retry."""

    def __init__(
        self,
        game: RobotsGame,
        display: RendererInterface,
        controls: InputInterface,
        highscores: Optional[HighscoreStore] = None,
        top_n: int = 10,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the session.

        Args:
            game: The game to run
            display: Renderer for the board and prompts
            controls: Source of player commands
            highscores: Where final scores are written (None to skip)
            top_n: Number of highscores shown at exit
            sleep: Delay function (replaced by a no-op in tests)
        """
        self.game = game
        self.display = display
        self.controls = controls
        self.highscores = highscores
        self.top_n = top_n
        self.sleep = sleep
        self.games_played = 0

    def run(self) -> None:
        """Play until the game reaches EXITING."""
        try:
            while self.game.phase != GamePhase.EXITING:
                self.play_turn()
        finally:
            self.display.close()

    def play_turn(self) -> None:
        phase = self.game.phase
        if phase == GamePhase.PLAYING:
            self._player_turn()
        elif phase == GamePhase.WAITING_FOR_LEVEL_END:
            self.display.render(self.game.get_state())
            self.game.advance()
            self._present_tick()
            self.sleep(self.game.config.wait_tick_delay)
        elif phase == GamePhase.PLAYER_DEAD:
            self._game_over()

    def _player_turn(self) -> None:
        self.display.render(self.game.get_state())
        action = self.controls.read_action()
        if action is None:
            return

        if action in (Command.TELEPORT, Command.SAFE_TELEPORT):
            safe = action == Command.SAFE_TELEPORT and self.game.player.safe_teleports > 0
            self.display.show_message("Teleporting (safe)..." if safe else "Teleporting...")
            self.sleep(self.game.config.teleport_delay)

        self.game.step(action)
        self._present_tick()

    def _present_tick(self) -> None:
        report = self.game.last_report
        if report is not None and report.bomb_cells:
            self.display.show_blast(self.game.get_state(), report.bomb_cells)
            self.sleep(self.game.config.bomb_delay)

    def _game_over(self) -> None:
        state = self.game.get_state()
        self.display.render(state)
        self.display.show_message(DEATH_MESSAGE)
        self.games_played += 1
        logger.info(f"Game {self.games_played} of this session ended")

        if self.highscores is not None:
            self.highscores.add(*self.game.highscore_record())

        self.sleep(self.game.config.game_over_delay)

        self.display.show_message(RETRY_PROMPT)
        if self.controls.ask_retry():
            self.game.retry()
            return

        entries = self.highscores.top(self.top_n) if self.highscores is not None else []
        self.display.show_highscores(entries, state)
        self.controls.wait_for_key()
        self.game.exit()
