"""
Abstract game interface for Robots.

The game implements GameInterface and provides GameMetadata. Input sources
hand it Command numbers; renderers read the dict from get_state().
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, Tuple, List


@dataclass
class GameMetadata:
    """Name and version shown on the splash and in logs."""

    name: str
    id: str
    description: str
    version: str = "1.0.0"


class GameInterface(ABC):
    """
    Abstract base class for the game core.

    The core owns the rules and the phase machine. It knows nothing about
    terminals, keyboards or files.
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        pass

    @abstractmethod
    def reset(self) -> Dict[str, Any]:
        """
        Start a new game at level 1.

        Returns:
            State dict of the fresh level
        """
        pass

    @abstractmethod
    def step(self, action: int) -> Tuple[Dict[str, Any], int, bool, Dict[str, Any]]:
        """
        Apply one player command and resolve the tick it causes.

        Args:
            action: A command number

        Returns:
            Tuple of (state, points, done, info)
            - state: State dict after the command
            - points: Score gained by this command
            - done: Whether the player is dead or has quit
            - info: Legality, level and phase of the command
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """Everything a renderer needs to draw the board and sidebar."""
        pass

    @abstractmethod
    def is_valid_action(self, action: int) -> bool:
        pass

    @property
    @abstractmethod
    def action_space_size(self) -> int:
        """Number of command numbers."""
        pass

    @property
    @abstractmethod
    def action_names(self) -> List[str]:
        """Key legend labels, indexed by command number."""
        pass

    def get_score(self) -> int:
        return 0
