"""
Robots game module.

The simulation core (board, entities, level generation, movement, ticks)
plus the game state machine, the session loop and highscore storage.
"""

from .board import Board, Cell
from .commands import Command, apply_player_command, teleport_player
from .config import RobotsConfig
from .entities import (
    GameState, Item, ItemKind, JunkHeap, Player, Robot, RobotKind,
)
from .highscore import HighscoreEntry, HighscoreStore
from .level import BoardFullError, generate_level, robots_remaining
from .robots_game import GamePhase, RobotsGame
from .session import GameSession
from .tick import TickReport, advance_tick

__all__ = [
    "Board",
    "Cell",
    "Command",
    "apply_player_command",
    "teleport_player",
    "RobotsConfig",
    "GameState",
    "Item",
    "ItemKind",
    "JunkHeap",
    "Player",
    "Robot",
    "RobotKind",
    "HighscoreEntry",
    "HighscoreStore",
    "BoardFullError",
    "generate_level",
    "robots_remaining",
    "GamePhase",
    "RobotsGame",
    "GameSession",
    "TickReport",
    "advance_tick",
]
