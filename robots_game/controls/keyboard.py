"""
Keyboard input for the terminal game.

Directions:  y k u
              \\|/
             h- -l
              /|\\
             b j n
"""

from typing import Callable, Dict, Optional

import readchar
from readchar import key

from ..core.input_interface import InputInterface
from ..game.commands import Command

DEFAULT_BINDINGS: Dict[str, Command] = {
    'y': Command.UP_LEFT,
    'k': Command.UP,
    'u': Command.UP_RIGHT,
    'h': Command.LEFT,
    'l': Command.RIGHT,
    'b': Command.DOWN_LEFT,
    'j': Command.DOWN,
    'n': Command.DOWN_RIGHT,
    '.': Command.WAIT,
    'w': Command.WAIT_FOR_END,
    't': Command.TELEPORT,
    's': Command.SAFE_TELEPORT,
    'a': Command.BOMB,
    'q': Command.QUIT,
    key.UP: Command.UP,
    key.DOWN: Command.DOWN,
    key.LEFT: Command.LEFT,
    key.RIGHT: Command.RIGHT,
}


def parse_bindings(bindings: Dict[str, str]) -> Dict[str, Command]:
    """
    Turn a {key: command name} mapping into a {key: Command} mapping.

    Raises:
        ValueError: If a command name is unknown
    """
    parsed: Dict[str, Command] = {}
    for pressed, name in bindings.items():
        try:
            parsed[pressed] = Command[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown command: {name}") from None
    return parsed


class KeyboardInput(InputInterface):
    """Single-keypress input using readchar."""

    def __init__(
        self,
        bindings: Optional[Dict[str, str]] = None,
        read_key: Callable[[], str] = readchar.readkey,
    ):
        """
        Initialize keyboard input.

        Args:
            bindings: Extra {key: command name} bindings on top of the defaults
            read_key: Function returning the next keypress
        """
        self.bindings = dict(DEFAULT_BINDINGS)
        if bindings:
            self.bindings.update(parse_bindings(bindings))
        self.read_key = read_key

    def read_action(self) -> Optional[int]:
        """Read one key; unbound keys give None."""
        return self.bindings.get(self.read_key())

    def ask_retry(self) -> bool:
        """Read keys until a y or n answer."""
        while True:
            pressed = self.read_key()
            if pressed in ('y', 'Y'):
                return True
            if pressed in ('n', 'N'):
                return False

    def wait_for_key(self) -> None:
        self.read_key()
