"""
Movement strategies for each robot kind.

These are pure functions: given a robot position, the player position and
the board, they return where the robot wants to go. Collision handling is
done by the tick resolver. Distances are Manhattan distances so every
comparison is integer-exact; ties go to the first candidate in table order.
"""

from typing import List, Optional, Tuple

from .board import Board
from .entities import Position

Offset = Tuple[int, int]

# Compass directions in the order they are tried by sliders
COMPASS: List[Offset] = [
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
    (1, 1),
    (-1, 1),
    (1, -1),
    (-1, -1),
]

# Knight jumps in the order they are tried by leapers
KNIGHT_MOVES: List[Offset] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]


def sign(value: int) -> int:
    return (value > 0) - (value < 0)


def manhattan(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def offset(pos: Position, delta: Offset) -> Position:
    return (pos[0] + delta[0], pos[1] + delta[1])


def _closest(pos: Position, target: Position, board: Board, deltas: List[Offset]) -> Optional[Offset]:
    """First in-bounds delta that minimizes the distance to target."""
    best: Optional[Offset] = None
    best_distance = 0
    for delta in deltas:
        x, y = offset(pos, delta)
        if not board.in_bounds(x, y):
            continue
        distance = manhattan((x, y), target)
        if best is None or distance < best_distance:
            best = delta
            best_distance = distance
    return best


def walker_destination(pos: Position, target: Position) -> Position:
    """One step towards the target on each axis independently."""
    return (pos[0] + sign(target[0] - pos[0]), pos[1] + sign(target[1] - pos[1]))


def leaper_destination(pos: Position, target: Position, board: Board) -> Position:
    """The in-bounds knight jump landing closest to the target."""
    delta = _closest(pos, target, board, KNIGHT_MOVES)
    if delta is None:
        return pos
    return offset(pos, delta)


def slider_direction(pos: Position, target: Position, board: Board) -> Optional[Offset]:
    """The compass direction whose first step lands closest to the target."""
    return _closest(pos, target, board, COMPASS)


def slider_path(pos: Position, target: Position, board: Board) -> List[Position]:
    """
    Cells a slider would cross, in order, on an empty board.

    The ray follows slider_direction() and ends at the board edge or at the
    first cell sharing a row or column with the target.

    Args:
        pos: Slider position
        target: Player position
        board: Board (only its bounds are used)

    Returns:
        List of cells, excluding the starting cell
    """
    direction = slider_direction(pos, target, board)
    if direction is None:
        return []

    path: List[Position] = []
    current = pos
    while True:
        current = offset(current, direction)
        if not board.in_bounds(*current):
            break
        path.append(current)
        if current[0] == target[0] or current[1] == target[1]:
            break
    return path
