"""
Level generation for Robots.

Robot counts scale with the level number:
- Walkers: 20 below level 2, then 5 more per level
- Leapers: none below level 5, then 1 + 2 * (level - 4)
- Sliders: none below level 9, then 1 + 2 * (level - 10) + 1

Every placement uses rejection sampling on the board, so no two entities
start on the same cell.
"""

import logging
import random
from typing import List, NamedTuple, Optional, Set

from .board import Board, Cell
from .config import RobotsConfig
from .entities import (
    GameState, Item, ItemKind, JunkHeap, Player, Position, Robot, RobotKind,
)

logger = logging.getLogger(__name__)


class BoardFullError(RuntimeError):
    """The requested level does not fit on the board."""


class Level(NamedTuple):
    """Freshly generated level contents."""
    board: Board
    robots: List[Robot]
    junk_heaps: List[JunkHeap]
    item: Item


def no_of_walkers(level: int, cap: Optional[int] = None) -> int:
    if level < 2:
        count = 20
    else:
        count = 20 + 5 * (level - 2)
    if cap is not None:
        count = min(count, cap)
    return count


def no_of_leapers(level: int) -> int:
    if level < 5:
        return 0
    return 1 + 2 * (level - 4)


def no_of_sliders(level: int) -> int:
    if level < 9:
        return 0
    return max(0, 1 + 2 * (level - 10) + 1)


def robot_roster(level: int, max_walkers: Optional[int] = None) -> List[RobotKind]:
    """Kinds of the robots for a level, in placement order."""
    return (
        [RobotKind.WALKER] * no_of_walkers(level, max_walkers)
        + [RobotKind.LEAPER] * no_of_leapers(level)
        + [RobotKind.SLIDER] * no_of_sliders(level)
    )


def _free_cell(board: Board, rng: random.Random, taken: Set[Position]) -> Position:
    """Rejection-sample a cell that is empty on the board and not already taken."""
    while True:
        pos = board.random_cell(rng)
        if pos not in taken and board.is_empty(*pos):
            return pos


def generate_level(
    state: GameState,
    player: Player,
    rng: Optional[random.Random] = None,
    config: Optional[RobotsConfig] = None,
) -> Level:
    """
    Populate a fresh board for state.level.

    Side effects on the player: one extra safe teleport, invincibility
    cleared, a new spawn cell.

    Args:
        state: Current game state (only the level is read)
        player: The player, mutated in place
        rng: Random source (module-level random when omitted)
        config: Game configuration

    Returns:
        Level(board, robots, junk_heaps, item)

    Raises:
        BoardFullError: If the roster, item and player cannot fit the board
    """
    rng = rng or random.Random()
    config = config or RobotsConfig()

    board = Board(config.board_width, config.board_height)
    roster = robot_roster(state.level, config.max_walkers)

    # Roster + item + player
    if len(roster) + 2 > board.free_cells():
        raise BoardFullError(
            f"Level {state.level} needs {len(roster) + 2} cells, "
            f"board has {board.capacity}"
        )

    player.safe_teleports += 1
    player.invincible = False

    robots: List[Robot] = []
    for kind in roster:
        x, y = _free_cell(board, rng, set())
        robots.append(Robot(x=x, y=y, kind=kind))
        board.set(x, y, Cell.ROBOT)

    taken: Set[Position] = set()
    item_x, item_y = _free_cell(board, rng, taken)
    taken.add((item_x, item_y))
    item = Item(
        x=item_x,
        y=item_y,
        kind=rng.choice(list(ItemKind)),
        level=state.level,
    )

    player.x, player.y = _free_cell(board, rng, taken)

    logger.info(
        f"Generated level {state.level}: {no_of_walkers(state.level, config.max_walkers)} walkers, "
        f"{no_of_leapers(state.level)} leapers, {no_of_sliders(state.level)} sliders"
    )
    return Level(board=board, robots=robots, junk_heaps=[], item=item)


def robots_remaining(robots: List[Robot]) -> bool:
    """True while at least one robot is not scrap."""
    return any(not robot.is_scrap for robot in robots)
