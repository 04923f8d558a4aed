"""
Player commands for Robots.

apply_player_command() is called once per input. It returns whether the
command was legal; only legal commands cost a turn (a tick).
"""

import logging
import random
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

from .board import Board, Cell
from .config import RobotsConfig
from .entities import GameState, Player, Position, Robot

logger = logging.getLogger(__name__)


class Command(IntEnum):
    """Everything the player can ask for. Values are action numbers."""
    UP_LEFT = 0
    UP = 1
    UP_RIGHT = 2
    LEFT = 3
    RIGHT = 4
    DOWN_LEFT = 5
    DOWN = 6
    DOWN_RIGHT = 7
    WAIT = 8
    WAIT_FOR_END = 9
    TELEPORT = 10
    SAFE_TELEPORT = 11
    BOMB = 12
    QUIT = 13


MOVES: Dict[Command, Tuple[int, int]] = {
    Command.UP_LEFT: (-1, -1),
    Command.UP: (0, -1),
    Command.UP_RIGHT: (1, -1),
    Command.LEFT: (-1, 0),
    Command.RIGHT: (1, 0),
    Command.DOWN_LEFT: (-1, 1),
    Command.DOWN: (0, 1),
    Command.DOWN_RIGHT: (1, 1),
}

COMMAND_NAMES: List[str] = [
    "Up-Left",
    "Up",
    "Up-Right",
    "Left",
    "Right",
    "Down-Left",
    "Down",
    "Down-Right",
    "Wait",
    "Wait for end",
    "Teleport",
    "Safe teleport",
    "Bomb",
    "Quit",
]


def move_player(player: Player, dx: int, dy: int, board: Board) -> bool:
    """
    Step the player by (dx, dy) if the destination is on the board and empty.

    Returns:
        True if the player moved
    """
    x, y = player.x + dx, player.y + dy
    if not board.in_bounds(x, y) or not board.is_empty(x, y):
        return False
    player.x, player.y = x, y
    return True


def _is_safe(pos: Position, robot_cells: List[Position], board: Board) -> bool:
    """At least two cells (Chebyshev) from every live robot, on an empty cell."""
    if not board.is_empty(*pos):
        return False
    for x, y in robot_cells:
        if abs(x - pos[0]) < 2 and abs(y - pos[1]) < 2:
            return False
    return True


def teleport_player(
    try_safe: bool,
    player: Player,
    robots: Optional[List[Robot]],
    board: Board,
    rng: random.Random,
    max_attempts: int = 10000,
) -> bool:
    """
    Move the player to a random cell.

    A safe teleport needs a charge; without one it silently becomes an
    unsafe teleport that may land anywhere, next to robots included.

    Args:
        try_safe: Whether the player asked for a safe teleport
        player: The player, moved in place
        robots: Robot roster (None reads live robots off the board)
        board: Current board
        rng: Random source
        max_attempts: Rejections before a safe teleport lands anywhere

    Returns:
        True if the landing was safe
    """
    safe = try_safe and player.safe_teleports > 0
    if safe:
        player.safe_teleports -= 1

    pos = board.random_cell(rng)
    if safe:
        if robots is None:
            robot_cells = board.cells(Cell.ROBOT)
        else:
            robot_cells = [robot.pos for robot in robots if not robot.is_scrap]
        attempts = 1
        while not _is_safe(pos, robot_cells, board):
            if attempts >= max_attempts:
                logger.warning(f"No safe cell found after {attempts} attempts, landing anywhere")
                safe = False
                break
            pos = board.random_cell(rng)
            attempts += 1

    player.x, player.y = pos
    logger.debug(f"Teleported ({'safe' if safe else 'unsafe'}) to {pos}")
    return safe


def apply_player_command(
    command: Command,
    player: Player,
    board: Board,
    state: GameState,
    robots: Optional[List[Robot]] = None,
    rng: Optional[random.Random] = None,
    config: Optional[RobotsConfig] = None,
) -> bool:
    """
    Apply one player command.

    Args:
        command: The command
        player: The player, mutated in place
        board: Board from the last tick, used for move legality
        state: Game state; wait/bomb/quit flags are set here
        robots: Robot roster (None reads live robots off the board)
        rng: Random source for teleports
        config: Game configuration

    Returns:
        True if the command is legal and a tick should follow
    """
    command = Command(command)

    if command in MOVES:
        dx, dy = MOVES[command]
        return move_player(player, dx, dy, board)

    if command == Command.WAIT:
        return True

    if command == Command.WAIT_FOR_END:
        state.wait_for_end = True
        return True

    if command in (Command.TELEPORT, Command.SAFE_TELEPORT):
        config = config or RobotsConfig()
        teleport_player(
            command == Command.SAFE_TELEPORT,
            player,
            robots,
            board,
            rng or random.Random(),
            max_attempts=config.safe_teleport_attempts,
        )
        return True

    if command == Command.BOMB:
        # No charge: the turn passes like a wait
        if player.bombs > 0:
            player.bombs -= 1
            state.bomb_away = True
        return True

    # Command.QUIT
    state.quit_requested = True
    return False
