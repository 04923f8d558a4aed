"""
Abstract renderer interface for Robots.

The simulation never touches the terminal. Renderers receive the state
dictionary produced by GameInterface.get_state() and decide how to draw it.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional, Sequence, Tuple


class RendererInterface(ABC):
    """
    Abstract renderer for game visualization.

    Renderers draw game state to some output device (a terminal, a buffer
    in tests, ...).
    """

    @abstractmethod
    def render(self, game_state: Dict[str, Any]) -> None:
        """
        Render the game state.

        Args:
            game_state: Dictionary containing game state from get_state()
        """
        pass

    @abstractmethod
    def show_message(self, message: str) -> None:
        """
        Show a one-line status message below the board.

        Args:
            message: Text to display
        """
        pass

    def show_blast(self, game_state: Dict[str, Any], cells: Sequence[Tuple[int, int]]) -> None:
        """
        Draw a bomb blast on top of the current board.

        Args:
            game_state: Dictionary containing game state from get_state()
            cells: Board cells covered by the blast
        """
        self.render(game_state)

    def show_splash(self) -> None:
        """Show the introduction screen."""
        pass

    def show_highscores(
        self,
        entries: List[Any],
        game_state: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Show the highscore table.

        Args:
            entries: Highscore entries, best first
            game_state: Final state of the game just played, if any
        """
        pass

    def close(self) -> None:
        """Release the output device."""
        pass
