"""
Entity model for Robots: plain records with positions and status flags.
"""

from dataclasses import dataclass
from typing import Dict, Any, Tuple
from enum import IntEnum


Position = Tuple[int, int]


class RobotKind(IntEnum):
    """Movement strategy of a robot."""
    WALKER = 1   # One step per axis towards the player
    LEAPER = 2   # Knight jumps
    SLIDER = 3   # Slides along a ray until lined up with the player


class ItemKind(IntEnum):
    """Level item effects."""
    INVINCIBILITY = 1
    BOMB = 2


@dataclass
class Player:
    """The player. Survives across levels; replaced on a full restart."""
    username: str = ""
    x: int = 0
    y: int = 0
    alive: bool = True
    score: int = 0
    safe_teleports: int = 0
    invincible: bool = False
    bombs: int = 0

    @property
    def pos(self) -> Position:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "x": self.x,
            "y": self.y,
            "alive": self.alive,
            "score": self.score,
            "safe_teleports": self.safe_teleports,
            "invincible": self.invincible,
            "bombs": self.bombs,
        }


@dataclass
class Robot:
    """A pursuing robot. Scrapped robots stay in the roster as frozen obstacles."""
    x: int
    y: int
    kind: RobotKind = RobotKind.WALKER
    is_scrap: bool = False

    @property
    def pos(self) -> Position:
        return (self.x, self.y)

    def move_to(self, pos: Position) -> None:
        self.x, self.y = pos

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "kind": int(self.kind),
            "is_scrap": self.is_scrap,
        }


@dataclass
class JunkHeap:
    """Wreckage left by a collision. Static for the rest of the level."""
    x: int
    y: int

    @property
    def pos(self) -> Position:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}


@dataclass
class Item:
    """The single pickup of a level. Hidden until revealed by chance."""
    x: int = 0
    y: int = 0
    kind: ItemKind = ItemKind.INVINCIBILITY
    level: int = 0
    visible: bool = False
    picked_up: bool = False

    @property
    def pos(self) -> Position:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "kind": int(self.kind),
            "level": self.level,
            "visible": self.visible,
            "picked_up": self.picked_up,
        }


@dataclass
class GameState:
    """Turn bookkeeping and one-shot flags owned by the game loop."""
    turn: int = 0
    level: int = 1
    wait_for_end: bool = False
    bomb_away: bool = False
    quit_requested: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "turn": self.turn,
            "level": self.level,
            "wait_for_end": self.wait_for_end,
            "bomb_away": self.bomb_away,
            "quit_requested": self.quit_requested,
        }
