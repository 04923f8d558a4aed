"""
Terminal Game Display - Rich-based terminal UI for Robots.

Draws the board inside a frame with a side panel holding the key legend,
charges and score, and a status line with level, junk piles and live
robots. Also draws the splash screen and the highscore table.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.renderer_interface import RendererInterface
from ..game.entities import ItemKind, RobotKind

Glyph = Tuple[str, str]

ROBOT_GLYPHS: Dict[int, Glyph] = {
    RobotKind.WALKER: ("+", "yellow"),
    RobotKind.LEAPER: ("&", "magenta"),
    RobotKind.SLIDER: ("N", "bold red"),
}
ITEM_GLYPHS: Dict[int, Glyph] = {
    ItemKind.INVINCIBILITY: ("S", "bold cyan"),
    ItemKind.BOMB: ("B", "bold cyan"),
}
JUNK_GLYPH: Glyph = ("#", "dim white")
PLAYER_GLYPH: Glyph = ("@", "bold green")
DEAD_PLAYER_GLYPH: Glyph = ("%", "bold red")
BLAST_GLYPH: Glyph = ("{", "bold bright_red")

SPLASH_ART = [
    "               ROBOTS               ",
    "                                    ",
    "      .--.      .--.      .--.      ",
    "     /    \\    /    \\    /    \\     ",
    "    |  []  |  |  []  |  |  []  |    ",
    "    |      |  |      |  |      |    ",
    "    |______|  |______|  |______|    ",
    "                                    ",
    "        .----.       / \\            ",
    "       /      \\     /   \\           ",
    "      |  O  O  |   |  O  |          ",
    "      |   \\/   |   |     |          ",
    "       \\      /     \\___/           ",
    "        `----'                      ",
]

SPLASH_TEXT = [
    "Welcome to the game!",
    "",
    "You are the player, represented by the @ symbol.",
    "You are surrounded by robots, represented by +, & and N.",
    "The robots will try to catch you. If they do, you lose.",
    "",
    "Move with:   y k u",
    "              \\|/",
    "             h- -l",
    "              /|\\",
    "             b j n",
    "",
    "Pick up objects, represented by S and B.",
    "S makes you invincible against one robot.",
    "B gives you an extra bomb.",
    "",
    "You can teleport (t), safe teleport (s) if charged,",
    "use any of your bombs (a), wait for the level end (w),",
    "or quit the game (q).",
]


class TerminalDisplay(RendererInterface):
    """
    Rich-based terminal renderer.

    Each render clears the screen and redraws the whole frame; the game is
    turn-based so there is nothing to animate between inputs.
    """

    def __init__(self, console: Optional[Console] = None, color: bool = True):
        """
        Initialize the terminal display.

        Args:
            console: Rich console to draw on (a terminal console by default)
            color: Whether to style glyphs
        """
        # Force UTF-8 encoding for Windows compatibility
        self.console = console or Console(
            force_terminal=True, legacy_windows=False, highlight=False,
        )
        self.color = color

    def render(self, game_state: Dict[str, Any]) -> None:
        self._draw(game_state, {})

    def show_blast(self, game_state: Dict[str, Any], cells: Sequence[Tuple[int, int]]) -> None:
        overlay = {(x, y): BLAST_GLYPH for x, y in cells}
        self._draw(game_state, overlay)

    def show_message(self, message: str) -> None:
        self.console.print(Text(message, style=self._style("bold")))

    def show_splash(self) -> None:
        self.console.clear()
        art = Text("\n".join(SPLASH_ART), style=self._style("cyan"))
        text = Text("\n".join(SPLASH_TEXT))
        grid = Table.grid(padding=(0, 3))
        grid.add_column()
        grid.add_column()
        grid.add_row(Panel(art, subtitle="ASCII art"), text)
        self.console.print(grid)
        self.console.print(Text("(Press any key to continue...)", style=self._style("dim")))

    def show_highscores(
        self,
        entries: List[Any],
        game_state: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.console.clear()
        self.console.print(self._build_highscore_table(entries))
        if game_state is None:
            return
        self.console.print(
            f"You scored {game_state['score']} points and made it to level {game_state['level']}"
        )
        self.console.print(Text("(Press any key to continue...)", style=self._style("dim")))

    def close(self) -> None:
        self.console.show_cursor(True)

    # ------------------------------------------------------------------

    def _style(self, style: str) -> str:
        return style if self.color else ""

    def _draw(self, game_state: Dict[str, Any], overlay: Dict[Tuple[int, int], Glyph]) -> None:
        self.console.clear()
        grid = Table.grid(padding=(0, 2))
        grid.add_column()
        grid.add_column()
        grid.add_row(self._build_board(game_state, overlay), self._build_sidebar(game_state))
        self.console.print(grid)
        self.console.print(self._build_status_line(game_state))

    def _glyph_map(self, game_state: Dict[str, Any]) -> Dict[Tuple[int, int], Glyph]:
        """Glyph per occupied cell; later layers win."""
        glyphs: Dict[Tuple[int, int], Glyph] = {}

        item = game_state["item"]
        if item["visible"] and not item["picked_up"]:
            glyphs[(item["x"], item["y"])] = ITEM_GLYPHS[item["kind"]]

        for robot in game_state["robots"]:
            pos = (robot["x"], robot["y"])
            glyphs[pos] = JUNK_GLYPH if robot["is_scrap"] else ROBOT_GLYPHS[robot["kind"]]

        for heap in game_state["junk_heaps"]:
            glyphs[(heap["x"], heap["y"])] = JUNK_GLYPH

        player = game_state["player"]
        glyphs[(player["x"], player["y"])] = PLAYER_GLYPH if player["alive"] else DEAD_PLAYER_GLYPH
        return glyphs

    def _build_board(
        self,
        game_state: Dict[str, Any],
        overlay: Dict[Tuple[int, int], Glyph],
    ) -> Panel:
        glyphs = self._glyph_map(game_state)
        glyphs.update(overlay)

        board = Text(no_wrap=True)
        for y in range(1, game_state["height"] + 1):
            for x in range(1, game_state["width"] + 1):
                char, style = glyphs.get((x, y), (" ", ""))
                board.append(char, style=self._style(style))
            if y < game_state["height"]:
                board.append("\n")

        return Panel(board, expand=False, padding=(0, 0), title="ROBOTS")

    def _build_sidebar(self, game_state: Dict[str, Any]) -> Table:
        player = game_state["player"]
        table = Table.grid()
        table.add_column(no_wrap=True)

        lines = [
            "Directions:  y k u",
            "              \\|/",
            "             h- -l",
            "              /|\\",
            "             b j n",
            "Commands:",
            "",
            "w:  wait for end",
            "t:  teleport (unsafe)",
            f"s:  safe teleport ({player['safe_teleports']})",
            f"a:  bomb ({player['bombs']})",
            ".:  wait one turn",
            "q:  quit",
            "",
            "Legend:",
            "",
            "+:  robot",
            "&:  super robot",
            "N:  killer robot",
            "#:  junk heap",
            "@:  you (invincible)" if player["invincible"] else "@:  you",
            "",
        ]
        for line in lines:
            table.add_row(Text(line))
        table.add_row(Text(f"Score:  {game_state['score']}", style=self._style("bold yellow")))
        return table

    def _build_status_line(self, game_state: Dict[str, Any]) -> Text:
        status = Text()
        status.append(f"Level:  {game_state['level']}", style=self._style("bold"))
        status.append(f"    Junk piles:  {len(game_state['junk_heaps'])}")
        status.append(f"    Robots:  {game_state['robots_alive']}")
        return status

    def _build_highscore_table(self, entries: List[Any]) -> Table:
        table = Table(title="Top highscores", border_style=self._style("blue"))
        table.add_column("Player", style=self._style("cyan"))
        table.add_column("Score", justify="right")
        table.add_column("Level", justify="right")
        for entry in entries:
            table.add_row(entry.username, str(entry.score), str(entry.level))
        return table
