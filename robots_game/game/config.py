"""
Robots game configuration.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass
class RobotsConfig:
    """Configuration for the Robots game."""

    # Board dimensions (cells, 1-based coordinates)
    board_width: int = 60
    board_height: int = 24

    # Player charges at the start of a game
    initial_safe_teleports: int = 2
    initial_bombs: int = 0

    # Level item
    item_reveal_chance: float = 0.05  # Per-tick chance a hidden item appears

    # Roster
    max_walkers: Optional[int] = None  # None = uncapped

    # Safe teleport gives up and lands anywhere after this many rejections
    safe_teleport_attempts: int = 10000

    # Presentation delays (seconds)
    bomb_delay: float = 0.5
    teleport_delay: float = 0.5
    wait_tick_delay: float = 0.075
    game_over_delay: float = 1.0

    def get_timing_config(self) -> Dict[str, float]:
        """Get presentation delay dictionary."""
        return {
            "bomb": self.bomb_delay,
            "teleport": self.teleport_delay,
            "wait_tick": self.wait_tick_delay,
            "game_over": self.game_over_delay,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "board_width": self.board_width,
            "board_height": self.board_height,
            "initial_safe_teleports": self.initial_safe_teleports,
            "initial_bombs": self.initial_bombs,
            "item_reveal_chance": self.item_reveal_chance,
            "max_walkers": self.max_walkers,
            "safe_teleport_attempts": self.safe_teleport_attempts,
            "timing": self.get_timing_config(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RobotsConfig":
        """Create config from dictionary."""
        timing = data.get("timing", {})
        return cls(
            board_width=data.get("board_width", 60),
            board_height=data.get("board_height", 24),
            initial_safe_teleports=data.get("initial_safe_teleports", 2),
            initial_bombs=data.get("initial_bombs", 0),
            item_reveal_chance=data.get("item_reveal_chance", 0.05),
            max_walkers=data.get("max_walkers"),
            safe_teleport_attempts=data.get("safe_teleport_attempts", 10000),
            bomb_delay=timing.get("bomb", 0.5),
            teleport_delay=timing.get("teleport", 0.5),
            wait_tick_delay=timing.get("wait_tick", 0.075),
            game_over_delay=timing.get("game_over", 1.0),
        )
