"""
Tests for player commands: moves, waits, teleports, bombs and quit.
"""

import random

from robots_game.game import (
    Board, Cell, Command, GameState, Player, Robot, apply_player_command,
    teleport_player,
)
from robots_game.game.commands import COMMAND_NAMES, MOVES, move_player


class TestCommandTable:
    """Tests for the command enumeration."""

    def test_fourteen_commands(self):
        assert len(Command) == 14
        assert len(COMMAND_NAMES) == len(Command)

    def test_eight_moves(self):
        """Test every compass direction has a move command."""
        assert len(MOVES) == 8
        assert set(MOVES.values()) == {
            (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
        }


class TestMoves:
    """Tests for player movement legality."""

    def test_move_into_empty_cell(self):
        player = Player(x=5, y=5)

        assert move_player(player, 1, 1, Board())
        assert player.pos == (6, 6)

    def test_move_off_board_is_illegal(self):
        """Test leaving the board is refused without moving."""
        player = Player(x=1, y=1)

        assert not apply_player_command(Command.UP_LEFT, player, Board(), GameState())
        assert player.pos == (1, 1)

    def test_move_onto_robot_is_illegal(self):
        board = Board()
        board.set(5, 4, Cell.ROBOT)
        player = Player(x=5, y=5)

        assert not apply_player_command(Command.UP, player, board, GameState())
        assert player.pos == (5, 5)

    def test_move_onto_junk_is_illegal(self):
        board = Board()
        board.set(6, 5, Cell.JUNK)
        player = Player(x=5, y=5)

        assert not apply_player_command(Command.RIGHT, player, board, GameState())

    def test_accepts_plain_int(self):
        """Test action numbers work as well as Command members."""
        player = Player(x=5, y=5)

        assert apply_player_command(6, player, Board(), GameState())
        assert player.pos == (5, 6)


class TestWaitBombQuit:
    """Tests for the non-movement commands."""

    def test_wait(self):
        player = Player(x=5, y=5)

        assert apply_player_command(Command.WAIT, player, Board(), GameState())
        assert player.pos == (5, 5)

    def test_wait_for_end_sets_flag(self):
        state = GameState()

        assert apply_player_command(Command.WAIT_FOR_END, Player(x=5, y=5), Board(), state)
        assert state.wait_for_end

    def test_bomb_with_charge(self):
        player = Player(x=5, y=5, bombs=2)
        state = GameState()

        assert apply_player_command(Command.BOMB, player, Board(), state)
        assert player.bombs == 1
        assert state.bomb_away

    def test_bomb_without_charge_is_a_wait(self):
        """Test an empty bomb bag still costs a turn but arms nothing."""
        player = Player(x=5, y=5, bombs=0)
        state = GameState()

        assert apply_player_command(Command.BOMB, player, Board(), state)
        assert player.bombs == 0
        assert not state.bomb_away

    def test_quit(self):
        """Test quit is flagged and does not cost a turn."""
        state = GameState()

        assert not apply_player_command(Command.QUIT, Player(x=5, y=5), Board(), state)
        assert state.quit_requested


class TestTeleport:
    """Tests for teleport_player()."""

    def test_unsafe_teleport_lands_in_bounds(self):
        board = Board()
        player = Player(x=5, y=5)

        assert apply_player_command(
            Command.TELEPORT, player, board, GameState(), robots=[], rng=random.Random(3),
        )
        assert board.in_bounds(*player.pos)

    def test_safe_without_charge_falls_back(self):
        """Test a safe teleport with no charges is unsafe and keeps the counter at 0."""
        player = Player(x=5, y=5, safe_teleports=0)

        safe = teleport_player(True, player, [], Board(), random.Random(3))

        assert safe is False
        assert player.safe_teleports == 0
        assert Board().in_bounds(*player.pos)

    def test_safe_teleport_spends_charge(self):
        player = Player(x=5, y=5, safe_teleports=2)

        assert teleport_player(True, player, [], Board(), random.Random(3))
        assert player.safe_teleports == 1

    def test_unsafe_teleport_keeps_charges(self):
        player = Player(x=5, y=5, safe_teleports=2)

        assert not teleport_player(False, player, [], Board(), random.Random(3))
        assert player.safe_teleports == 2

    def test_safe_teleport_keeps_distance(self):
        """Test safe landings are at least two cells from every live robot."""
        board = Board(10, 10)
        robots = [Robot(x, y) for x in range(1, 11, 4) for y in range(1, 11, 4)]
        for robot in robots:
            board.set(robot.x, robot.y, Cell.ROBOT)

        for seed in range(50):
            player = Player(safe_teleports=1)
            assert teleport_player(True, player, robots, board, random.Random(seed))
            for robot in robots:
                assert max(abs(robot.x - player.x), abs(robot.y - player.y)) >= 2

    def test_safe_teleport_ignores_scrap(self):
        """Test wreckage does not count as a robot to keep away from."""
        board = Board(3, 3)
        board.set(3, 3, Cell.JUNK)
        robots = [Robot(3, 3, is_scrap=True)]
        player = Player(safe_teleports=1)

        assert teleport_player(True, player, robots, board, random.Random(0))
        assert player.pos != (3, 3)

    def test_safe_teleport_reads_robots_off_board(self):
        """Test a safe teleport without a roster keeps away from ROBOT cells."""
        board = Board(5, 5)
        board.set(3, 3, Cell.ROBOT)

        for seed in range(30):
            player = Player(x=1, y=1, safe_teleports=1)
            assert apply_player_command(
                Command.SAFE_TELEPORT, player, board, GameState(), rng=random.Random(seed),
            )
            assert player.safe_teleports == 0
            assert max(abs(player.x - 3), abs(player.y - 3)) >= 2

    def test_safe_teleport_without_roster_gives_up(self):
        """Test a board with only unsafe cells is not reported as a safe landing."""
        board = Board(3, 3)
        board.set(2, 2, Cell.ROBOT)
        player = Player(x=1, y=1, safe_teleports=1)

        safe = teleport_player(True, player, None, board, random.Random(0), max_attempts=20)

        assert safe is False
        assert player.safe_teleports == 0

    def test_safe_teleport_gives_up(self):
        """Test a board with no safe cell ends in an unsafe landing."""
        board = Board(3, 3)
        board.set(2, 2, Cell.ROBOT)
        robots = [Robot(2, 2)]
        player = Player(safe_teleports=1)

        safe = teleport_player(True, player, robots, board, random.Random(0), max_attempts=5)

        assert safe is False
        assert board.in_bounds(*player.pos)
