"""
Tick resolution for Robots.

One call to advance_tick() resolves exactly one turn:

1. Rebuild the board from junk heaps (and scrapped robots)
2. Detonate a pending bomb
3. Move every live robot in roster order; later robots see the cells
   claimed by earlier ones
4. Maybe reveal the level item
5. Kill the player if their cell ended up occupied
6. Pick up the item if the player stands on it

Scoring: +1 per robot wrecked on junk, by a bomb or against an invincible
player; +2 per robot wrecked against another robot.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .board import Board, Cell
from .config import RobotsConfig
from .entities import (
    GameState, Item, ItemKind, JunkHeap, Player, Position, Robot, RobotKind,
)
from .movement import (
    COMPASS, leaper_destination, offset, slider_path, walker_destination,
)

logger = logging.getLogger(__name__)

# ..B..
# .BBB.
# BB@BB
# .BBB.
# ..B..
BLAST_PATTERN: List[Position] = [
    (0, -2),
    (-1, -1),
    (1, -1),
    (0, -1),
    (-2, 0),
    (-1, 0),
    (1, 0),
    (2, 0),
    (-1, 1),
    (1, 1),
    (0, 1),
    (0, 2),
]

WRECK_POINTS = 1
CRASH_POINTS = 2


def blast_cells(center: Position, board: Board) -> List[Position]:
    """In-bounds cells covered by a bomb detonated at center."""
    cells = [offset(center, delta) for delta in BLAST_PATTERN]
    return [cell for cell in cells if board.in_bounds(*cell)]


@dataclass
class TickReport:
    """What happened during one tick, for the presentation layer."""
    turn: int = 0
    bomb_cells: List[Position] = field(default_factory=list)
    scrapped: int = 0
    points: int = 0
    invincibility_used: bool = False
    player_killed: bool = False
    item_revealed: bool = False
    item_picked_up: Optional[ItemKind] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "turn": self.turn,
            "bomb_cells": [list(cell) for cell in self.bomb_cells],
            "scrapped": self.scrapped,
            "points": self.points,
            "invincibility_used": self.invincibility_used,
            "player_killed": self.player_killed,
            "item_revealed": self.item_revealed,
            "item_picked_up": int(self.item_picked_up) if self.item_picked_up is not None else None,
        }


class TickResolver:
    """
    Resolves a single tick against the entity collections, in place.

    The resolver holds references, not copies: every change to the player,
    robots, junk heaps, item and board is visible to the caller.
    """

    def __init__(
        self,
        player: Player,
        robots: List[Robot],
        junk_heaps: List[JunkHeap],
        item: Item,
        state: GameState,
        board: Board,
        rng: random.Random,
        config: RobotsConfig,
    ):
        self.player = player
        self.robots = robots
        self.junk_heaps = junk_heaps
        self.item = item
        self.state = state
        self.board = board
        self.rng = rng
        self.config = config
        self.report = TickReport()

        # Single dispatch point from robot kind to movement rule
        self._movers: Dict[RobotKind, Callable[[Robot], None]] = {
            RobotKind.WALKER: self._move_walker,
            RobotKind.LEAPER: self._move_leaper,
            RobotKind.SLIDER: self._move_slider,
        }

    def run(self) -> TickReport:
        self.state.turn += 1
        self.report.turn = self.state.turn
        was_alive = self.player.alive

        self.board.rebuild(self.junk_heaps, self.robots)

        if self.state.bomb_away:
            self.state.bomb_away = False
            self._detonate_bomb()

        for robot in self.robots:
            if robot.is_scrap:
                continue
            # Standing on junk: wrecked before it can move
            if self.board.get(robot.x, robot.y) == Cell.JUNK:
                self._scrap(robot, WRECK_POINTS)
                continue
            self._movers[robot.kind](robot)

        if not self.item.visible and self.rng.random() < self.config.item_reveal_chance:
            self.item.visible = True
            self.report.item_revealed = True

        if self.board.get(self.player.x, self.player.y) != Cell.EMPTY:
            self.player.alive = False

        if (
            self.player.pos == self.item.pos
            and self.item.visible
            and not self.item.picked_up
        ):
            self._pick_up_item()

        if was_alive and not self.player.alive:
            self.report.player_killed = True
            logger.info(f"Player killed on turn {self.state.turn} at {self.player.pos}")

        return self.report

    # ------------------------------------------------------------------
    # Effects

    def _detonate_bomb(self) -> None:
        cells = blast_cells(self.player.pos, self.board)
        self.report.bomb_cells = cells
        hit = set(cells)
        for robot in self.robots:
            if not robot.is_scrap and robot.pos in hit:
                self._scrap(robot, WRECK_POINTS, junk_at=robot.pos)
        logger.info(f"Bomb detonated at {self.player.pos}, {self.report.scrapped} robots scrapped")

    def _pick_up_item(self) -> None:
        self.item.picked_up = True
        if self.item.kind == ItemKind.INVINCIBILITY:
            self.player.invincible = True
        elif self.item.kind == ItemKind.BOMB:
            self.player.bombs += 1
        self.report.item_picked_up = self.item.kind
        logger.info(f"Picked up {self.item.kind.name.lower()} item")

    def _scrap(self, robot: Robot, points: int, junk_at: Optional[Position] = None) -> None:
        """Turn a robot into wreckage where it stands and credit the player."""
        robot.is_scrap = True
        self.player.score += points
        self.report.scrapped += 1
        self.report.points += points
        self.board.set(robot.x, robot.y, Cell.JUNK)
        if junk_at is not None:
            self._add_junk(junk_at)

    def _add_junk(self, pos: Position) -> None:
        self.junk_heaps.append(JunkHeap(x=pos[0], y=pos[1]))
        self.board.set(pos[0], pos[1], Cell.JUNK)

    def _absorb_hit(self, robot: Robot, junk_at: Position) -> None:
        """An invincible player wrecks the robot that reached it."""
        self.player.invincible = False
        self.report.invincibility_used = True
        self._scrap(robot, WRECK_POINTS, junk_at=junk_at)

    def _settle(self, robot: Robot) -> None:
        """Claim the robot's cell, or wreck it if the cell is taken."""
        cell = self.board.get(robot.x, robot.y)
        if cell == Cell.EMPTY:
            self.board.set(robot.x, robot.y, Cell.ROBOT)
        elif cell == Cell.ROBOT:
            self._scrap(robot, CRASH_POINTS, junk_at=robot.pos)
        else:
            self._scrap(robot, WRECK_POINTS)

    # ------------------------------------------------------------------
    # Movement

    def _move_walker(self, robot: Robot) -> None:
        destination = walker_destination(robot.pos, self.player.pos)
        if destination == self.player.pos and self.player.invincible:
            # Pushed back to where it came from
            self._absorb_hit(robot, junk_at=robot.pos)
            return
        robot.move_to(destination)
        if destination == self.player.pos:
            self.player.alive = False
        self._settle(robot)

    def _move_leaper(self, robot: Robot) -> None:
        destination = leaper_destination(robot.pos, self.player.pos, self.board)
        if destination == self.player.pos and self.player.invincible:
            self._absorb_hit(robot, junk_at=self._scatter_near_player())
            return
        robot.move_to(destination)
        if destination == self.player.pos:
            self.player.alive = False
        self._settle(robot)

    def _move_slider(self, robot: Robot) -> None:
        for cell in slider_path(robot.pos, self.player.pos, self.board):
            if cell == self.player.pos:
                if self.player.invincible:
                    self._absorb_hit(robot, junk_at=robot.pos)
                    return
                robot.move_to(cell)
                self.player.alive = False
                break

            occupant = self.board.get(*cell)
            if occupant == Cell.ROBOT:
                self._scrap(robot, CRASH_POINTS, junk_at=robot.pos)
                return
            if occupant == Cell.JUNK:
                self._scrap(robot, WRECK_POINTS)
                return
            robot.move_to(cell)
        self._settle(robot)

    def _scatter_near_player(self) -> Position:
        """Random in-bounds cell next to the player."""
        candidates = [offset(self.player.pos, delta) for delta in COMPASS]
        candidates = [cell for cell in candidates if self.board.in_bounds(*cell)]
        return self.rng.choice(candidates)


def advance_tick(
    player: Player,
    robots: List[Robot],
    junk_heaps: List[JunkHeap],
    item: Item,
    state: GameState,
    board: Optional[Board] = None,
    rng: Optional[random.Random] = None,
    config: Optional[RobotsConfig] = None,
) -> TickReport:
    """
    Advance the simulation by one turn, mutating everything in place.

    Args:
        player: The player (may be killed)
        robots: Robot roster, moved in list order
        junk_heaps: Junk heaps; new heaps are appended
        item: Level item
        state: Game state; bomb_away is consumed and turn incremented
        board: Board to rebuild and reuse (a new one is created if omitted)
        rng: Random source for item reveal and leaper junk scatter
        config: Game configuration

    Returns:
        TickReport describing the tick
    """
    config = config or RobotsConfig()
    if board is None:
        board = Board(config.board_width, config.board_height)
    resolver = TickResolver(
        player, robots, junk_heaps, item, state, board, rng or random.Random(), config,
    )
    return resolver.run()
