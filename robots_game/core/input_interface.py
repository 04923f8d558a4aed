"""
Abstract input interface for Robots.

Input sources translate whatever the player does into action numbers
understood by GameInterface.step().
"""

from abc import ABC, abstractmethod
from typing import Optional


class InputInterface(ABC):
    """Abstract source of player commands."""

    @abstractmethod
    def read_action(self) -> Optional[int]:
        """
        Block until the player issues a command.

        Returns:
            Action number, or None if the input maps to no action
        """
        pass

    @abstractmethod
    def ask_retry(self) -> bool:
        """
        Ask whether the player wants another game.

        Returns:
            True to play again, False to quit
        """
        pass

    def wait_for_key(self) -> None:
        """Block until any key is pressed."""
        pass
